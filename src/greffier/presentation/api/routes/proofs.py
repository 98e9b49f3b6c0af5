"""
Checkpoint proof API routes (v1).

Handles block inclusion, block proofs and exit payloads for the PoS
sidechain. ``{network}`` is ``matic`` (mainnet) or ``mumbai`` / ``amoy``
(testnet).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from greffier.application.use_cases import (
    AllExitPayloadsBuilder,
    BlockInclusionQuery,
    ExitPayloadBuilder,
    FastMerkleProofQuery,
)
from greffier.domain.value_objects import (
    AllExitPayloadsRequest,
    BlockInclusionRequest,
    ExitPayloadRequest,
    FastMerkleProofRequest,
)
from greffier.presentation.api.dependencies import (
    get_all_exit_payloads_builder,
    get_block_inclusion_query,
    get_exit_payload_builder,
    get_fast_merkle_proof_query,
)
from greffier.presentation.api.validation import (
    resolve_v1_network,
    validate_block_number,
    validate_burn_tx,
    validate_fast_merkle_proof_range,
    validate_token_index,
)
from greffier.presentation.schemas import (
    AllExitPayloadsResponse,
    BlockIncludedResponse,
    ErrorResponse,
    ExitPayloadResponse,
    FastMerkleProofResponse,
)

router = APIRouter(prefix="/v1/{network}", tags=["proofs"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid parameters"},
    404: {"model": ErrorResponse, "description": "Valid request, negative answer"},
    500: {"model": ErrorResponse, "description": "Could not compute"},
}


# ================================================================
# Block Inclusion
# ================================================================


@router.get(
    "/block-included/{blockNumber}",
    response_model=BlockIncludedResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Check whether a block is checkpointed",
)
async def block_included(
    network: str,
    blockNumber: str,
    use_case: BlockInclusionQuery = Depends(get_block_inclusion_query),
):
    """Return the header block covering ``blockNumber``."""
    request = BlockInclusionRequest(
        network=resolve_v1_network(network),
        block_number=validate_block_number(blockNumber),
    )
    return await use_case.execute(request)


# ================================================================
# Fast Merkle Proof
# ================================================================


@router.get(
    "/fast-merkle-proof",
    response_model=FastMerkleProofResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Block proof inside a checkpoint",
)
async def fast_merkle_proof(
    network: str,
    start: Optional[str] = Query(None, description="First block of the checkpoint"),
    end: Optional[str] = Query(None, description="Last block of the checkpoint"),
    number: Optional[str] = Query(None, description="Block to prove"),
    use_case: FastMerkleProofQuery = Depends(get_fast_merkle_proof_query),
):
    """Return the proof of ``number`` in ``[start, end]``."""
    resolved = resolve_v1_network(network)
    start_int, end_int, number_int = validate_fast_merkle_proof_range(
        start, end, number
    )
    request = FastMerkleProofRequest(
        network=resolved,
        start=start_int,
        end=end_int,
        number=number_int,
    )
    return await use_case.execute(request)


# ================================================================
# Exit Payloads
# ================================================================


@router.get(
    "/exit-payload/{burnTxHash}",
    response_model=ExitPayloadResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="Exit payload of a burn transaction",
)
async def exit_payload(
    network: str,
    burnTxHash: str,
    eventSignature: Optional[str] = Query(None, description="Event topic0"),
    tokenIndex: Optional[str] = Query(None, description="Index of the log (default 0)"),
    use_case: ExitPayloadBuilder = Depends(get_exit_payload_builder),
):
    """
    Build the exit payload for the ``tokenIndex``-th matching log.

    404 kinds: ``incorrect_transaction``, ``transaction_not_checkpointed``,
    ``no_block_found`` (event log not in receipt).
    """
    resolved = resolve_v1_network(network)
    validate_burn_tx(burnTxHash, eventSignature)
    request = ExitPayloadRequest(
        network=resolved,
        burn_tx_hash=burnTxHash,
        event_signature=eventSignature,
        token_index=validate_token_index(tokenIndex),
    )
    return await use_case.execute(request)


@router.get(
    "/all-exit-payloads/{burnTxHash}",
    response_model=AllExitPayloadsResponse,
    status_code=status.HTTP_200_OK,
    responses=ERROR_RESPONSES,
    summary="All exit payloads of a burn transaction",
)
async def all_exit_payloads(
    network: str,
    burnTxHash: str,
    eventSignature: Optional[str] = Query(None, description="Event topic0"),
    use_case: AllExitPayloadsBuilder = Depends(get_all_exit_payloads_builder),
):
    """Build exit payloads for every matching log."""
    resolved = resolve_v1_network(network)
    validate_burn_tx(burnTxHash, eventSignature)
    request = AllExitPayloadsRequest(
        network=resolved,
        burn_tx_hash=burnTxHash,
        event_signature=eventSignature,
    )
    return await use_case.execute(request)
