"""
Chain client exceptions.

Raised by chain client implementations for one attempt against one
endpoint pair. Never surfaced to API callers directly; the error classifier
maps them to an ErrorKind.
"""

from typing import Optional


class ChainClientException(Exception):
    """Base exception for chain client operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ChainClientConstructionException(ChainClientException):
    """Client could not be bound to the endpoint pair."""


class RPCException(ChainClientException):
    """RPC call failed."""


class RPCTimeoutException(RPCException):
    """RPC call timed out."""


class MalformedResponseException(RPCException):
    """RPC returned a response that could not be interpreted."""


class NullReceiptException(RPCException):
    """RPC returned a null transaction receipt."""


class MalformedReceiptException(ChainClientException):
    """Receipt exists but does not describe a usable transaction."""


class EventLogNotFoundException(ChainClientException):
    """No log matching the event signature in the transaction receipt."""


class TokenIndexOutOfRangeException(ChainClientException):
    """Requested token index exceeds the matching event logs."""
