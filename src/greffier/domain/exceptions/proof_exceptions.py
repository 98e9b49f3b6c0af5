"""
Proof request outcomes that cross the service boundary.

Two families reach API callers:
- InfoError: the request was valid but the answer is negative
- FatalError: the service could not produce an answer
"""

from typing import Optional

from greffier.domain.exceptions.base import GreffierException
from greffier.domain.value_objects.error_kind import ErrorKind


class InfoError(GreffierException):
    """Valid request with a definitive negative business answer."""

    kind: ErrorKind = ErrorKind.BLOCK_NOT_INCLUDED
    default_message: str = "Request could not be answered"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict] = None,
        kind: Optional[ErrorKind] = None,
    ):
        if kind is not None:
            if not kind.is_info:
                raise ValueError(f"{kind.value} is not an info error kind")
            self.kind = kind
        super().__init__(message or self.default_message, details)


class BlockNotIncludedError(InfoError):
    """Block (or event log) not covered by any checkpoint."""

    kind = ErrorKind.BLOCK_NOT_INCLUDED
    default_message = "No block found"


class IncorrectTransactionError(InfoError):
    """Transaction hash unresolvable, receipt malformed or index invalid."""

    kind = ErrorKind.INCORRECT_TX
    default_message = "Incorrect burn transaction"


class TransactionNotCheckpointedError(InfoError):
    """Transaction exists but its block is not checkpointed yet."""

    kind = ErrorKind.TX_NOT_CHECKPOINTED
    default_message = "Burn transaction has not been checkpointed yet"


class BridgeApiError(InfoError):
    """zkEVM bridge API answered with a non-2xx status."""

    kind = ErrorKind.BRIDGE_ERROR
    default_message = "Bridge API error"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code


INFO_ERRORS_BY_KIND = {
    ErrorKind.BLOCK_NOT_INCLUDED: BlockNotIncludedError,
    ErrorKind.INCORRECT_TX: IncorrectTransactionError,
    ErrorKind.TX_NOT_CHECKPOINTED: TransactionNotCheckpointedError,
    ErrorKind.BRIDGE_ERROR: BridgeApiError,
}


class FatalError(GreffierException):
    """No answer could be produced. Messages carry no endpoint detail."""

    default_message = "Something went wrong while computing"

    def __init__(self, message: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message or self.default_message, details)


class SweepExhaustedError(FatalError):
    """Every attempt of a retry sweep failed with a transient fault."""

    def __init__(
        self,
        operation: str,
        attempts: int,
        last_error: Optional[BaseException] = None,
    ):
        super().__init__(
            details={"operation": operation, "attempts": attempts},
        )
        self.operation = operation
        self.attempts = attempts
        self.last_error = last_error


class UpstreamUnavailableError(FatalError):
    """Single-endpoint upstream could not be reached."""


class ProofVerificationError(FatalError):
    """Chain client returned a proof that fails the size check."""

    default_message = "Invalid merkle proof created"


class NetworkNotConfiguredError(FatalError):
    """No RPC endpoints or upstream URL configured for the network."""
