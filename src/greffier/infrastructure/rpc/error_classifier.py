"""
Error classification.

Maps any failure of a chain or bridge operation into an ErrorKind:

| Failure                                    | Kind                |
|--------------------------------------------|---------------------|
| InfoError raised by a use case             | its own kind        |
| event log not found in receipt             | BLOCK_NOT_INCLUDED  |
| malformed receipt / token index too large  | INCORRECT_TX        |
| timeout, RPC fault, null receipt, anything | TRANSIENT           |

Only Exception subclasses are classified. Cancellation propagates.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Type

from greffier.domain.exceptions import (
    INFO_ERRORS_BY_KIND,
    EventLogNotFoundException,
    InfoError,
    MalformedReceiptException,
    TokenIndexOutOfRangeException,
)
from greffier.domain.value_objects.error_kind import ErrorKind

# Chain client failures that state a fact about the transaction
CHAIN_FACTS: Dict[Type[Exception], tuple] = {
    EventLogNotFoundException: (
        ErrorKind.BLOCK_NOT_INCLUDED,
        "Event Signature log not found in tx receipt",
    ),
    TokenIndexOutOfRangeException: (
        ErrorKind.INCORRECT_TX,
        "Token index out of range for burn transaction",
    ),
    MalformedReceiptException: (
        ErrorKind.INCORRECT_TX,
        "Incorrect burn transaction",
    ),
}


@dataclass(frozen=True)
class Classification:
    """Result of classifying one failure."""

    kind: ErrorKind
    message: str

    @property
    def is_info(self) -> bool:
        return self.kind.is_info

    def to_info_error(self) -> InfoError:
        """Build the InfoError surfaced to callers."""
        if not self.is_info:
            raise ValueError("Transient failures have no info error")
        return INFO_ERRORS_BY_KIND[self.kind](self.message)


class ErrorClassifier:
    """Splits failures into Info (abort) and Transient (retry)."""

    def __init__(
        self, chain_facts: Optional[Dict[Type[Exception], tuple]] = None
    ):
        self.chain_facts = chain_facts if chain_facts is not None else CHAIN_FACTS

    def classify(self, error: Exception) -> Classification:
        """
        Classify a failure.

        Args:
            error: Exception raised by an attempt

        Returns:
            Classification with kind and caller-facing message
        """
        if isinstance(error, InfoError):
            return Classification(kind=error.kind, message=error.message)

        for exception_type, (kind, message) in self.chain_facts.items():
            if isinstance(error, exception_type):
                return Classification(kind=kind, message=message)

        return Classification(
            kind=ErrorKind.TRANSIENT,
            message=f"{type(error).__name__}: {error}",
        )

    def to_exception(self, error: Exception) -> InfoError:
        """InfoError to raise for an info-classified failure."""
        if isinstance(error, InfoError):
            return error
        return self.classify(error).to_info_error()
