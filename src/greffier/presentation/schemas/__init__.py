"""
Greffier API response schemas.
"""

from greffier.presentation.schemas.proof_schemas import (
    AllExitPayloadsResponse,
    BlockIncludedResponse,
    ErrorResponse,
    ExitPayloadResponse,
    FastMerkleProofResponse,
)

__all__ = [
    "AllExitPayloadsResponse",
    "BlockIncludedResponse",
    "ErrorResponse",
    "ExitPayloadResponse",
    "FastMerkleProofResponse",
]
