"""
Base exception for Greffier domain errors.
"""

from typing import Optional


class GreffierException(Exception):
    """Base exception for all errors surfaced to API callers."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
