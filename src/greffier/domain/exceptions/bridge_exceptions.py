"""
zkEVM bridge transport exceptions.
"""

from typing import Optional


class BridgeException(Exception):
    """Base exception for bridge transport failures."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class BridgeConnectionException(BridgeException):
    """Bridge API connection failed."""


class BridgeTimeoutException(BridgeException):
    """Bridge API request timed out."""
