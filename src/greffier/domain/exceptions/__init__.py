"""
Domain exceptions.
"""

from greffier.domain.exceptions.base import GreffierException
from greffier.domain.exceptions.bridge_exceptions import (
    BridgeConnectionException,
    BridgeException,
    BridgeTimeoutException,
)
from greffier.domain.exceptions.chain_exceptions import (
    ChainClientConstructionException,
    ChainClientException,
    EventLogNotFoundException,
    MalformedReceiptException,
    MalformedResponseException,
    NullReceiptException,
    RPCException,
    RPCTimeoutException,
    TokenIndexOutOfRangeException,
)
from greffier.domain.exceptions.proof_exceptions import (
    INFO_ERRORS_BY_KIND,
    BlockNotIncludedError,
    BridgeApiError,
    FatalError,
    IncorrectTransactionError,
    InfoError,
    NetworkNotConfiguredError,
    ProofVerificationError,
    SweepExhaustedError,
    TransactionNotCheckpointedError,
    UpstreamUnavailableError,
)
from greffier.domain.exceptions.validation_exceptions import InvalidParameterError

__all__ = [
    # Base
    "GreffierException",
    # Info
    "InfoError",
    "BlockNotIncludedError",
    "IncorrectTransactionError",
    "TransactionNotCheckpointedError",
    "BridgeApiError",
    "INFO_ERRORS_BY_KIND",
    # Fatal
    "FatalError",
    "SweepExhaustedError",
    "UpstreamUnavailableError",
    "ProofVerificationError",
    "NetworkNotConfiguredError",
    # Validation
    "InvalidParameterError",
    # Chain client
    "ChainClientException",
    "ChainClientConstructionException",
    "RPCException",
    "RPCTimeoutException",
    "MalformedResponseException",
    "NullReceiptException",
    "MalformedReceiptException",
    "EventLogNotFoundException",
    "TokenIndexOutOfRangeException",
    # Bridge
    "BridgeException",
    "BridgeConnectionException",
    "BridgeTimeoutException",
]
