"""
zkEVM bridge API routes.

Thin passthrough to the bridge service of the selected network.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, status

from greffier.application.use_cases import BridgeProxy
from greffier.presentation.api.dependencies import get_bridge_proxy
from greffier.presentation.api.validation import (
    resolve_zkevm_network,
    validate_deposit_query,
)
from greffier.presentation.schemas import ErrorResponse

router = APIRouter(prefix="/zkevm/{network}", tags=["zkevm"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid parameters"},
    404: {"model": ErrorResponse, "description": "Bridge API error (passed through)"},
    500: {"model": ErrorResponse, "description": "Bridge API unavailable"},
}


@router.get("/bridge", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES)
async def bridge(
    network: str,
    net_id: Optional[str] = Query(None, description="Origin network id"),
    deposit_cnt: Optional[str] = Query(None, description="Deposit counter"),
    proxy: BridgeProxy = Depends(get_bridge_proxy),
) -> Any:
    """Deposit details from the bridge service."""
    resolved = resolve_zkevm_network(network)
    net_id_int, deposit_cnt_int = validate_deposit_query(net_id, deposit_cnt)
    return await proxy.bridge(resolved, net_id_int, deposit_cnt_int)


@router.get(
    "/merkle-proof", status_code=status.HTTP_200_OK, responses=ERROR_RESPONSES
)
async def merkle_proof(
    network: str,
    net_id: Optional[str] = Query(None, description="Origin network id"),
    deposit_cnt: Optional[str] = Query(None, description="Deposit counter"),
    proxy: BridgeProxy = Depends(get_bridge_proxy),
) -> Any:
    """Claim merkle proof from the bridge service."""
    resolved = resolve_zkevm_network(network)
    net_id_int, deposit_cnt_int = validate_deposit_query(net_id, deposit_cnt)
    return await proxy.merkle_proof(resolved, net_id_int, deposit_cnt_int)
