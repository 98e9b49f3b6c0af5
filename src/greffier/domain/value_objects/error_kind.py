"""
Error kinds produced by classification of chain and bridge failures.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Outcome kinds of a failed chain or bridge operation."""

    BLOCK_NOT_INCLUDED = "no_block_found"
    INCORRECT_TX = "incorrect_transaction"
    TX_NOT_CHECKPOINTED = "transaction_not_checkpointed"
    BRIDGE_ERROR = "bridge_error"
    TRANSIENT = "transient"

    @property
    def is_info(self) -> bool:
        """True for valid requests with a negative business answer."""
        return self is not ErrorKind.TRANSIENT
