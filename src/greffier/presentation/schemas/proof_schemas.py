"""
API schemas for checkpoint proof endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

# ================================================================
# Response Schemas
# ================================================================


class BlockIncludedResponse(BaseModel):
    """Checkpoint covering a sidechain block."""

    headerBlockNumber: str = Field(..., description="Header block number (hex)")
    blockNumber: int = Field(..., description="Requested sidechain block")
    start: int = Field(..., description="First block of the checkpoint")
    end: int = Field(..., description="Last block of the checkpoint")
    proposer: str = Field(..., description="Checkpoint proposer address")
    root: str = Field(..., description="Merkle root of the checkpoint")
    createdAt: int = Field(..., description="Checkpoint timestamp")
    message: str = Field(default="success")


class FastMerkleProofResponse(BaseModel):
    """Block proof inside a checkpoint."""

    proof: str = Field(..., description="Concatenated sibling hashes (hex)")


class ExitPayloadResponse(BaseModel):
    """Exit payload for one event log."""

    message: str = Field(..., description="Result message")
    result: str = Field(..., description="Payload to submit on the mainchain")


class AllExitPayloadsResponse(BaseModel):
    """Exit payloads for every matching event log."""

    message: str = Field(..., description="Result message")
    result: List[str] = Field(..., description="Payloads in log order")


# ================================================================
# Error Schemas
# ================================================================


class ErrorResponse(BaseModel):
    """Error body returned for 4xx/5xx answers."""

    error: bool = Field(default=True)
    kind: Optional[str] = Field(default=None, description="Info error kind")
    message: str = Field(..., description="Human readable reason")
