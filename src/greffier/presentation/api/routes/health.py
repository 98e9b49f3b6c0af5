"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Depends, Response, status

from greffier.infrastructure.monitoring.health_check import (
    GreffierHealthCheck,
    HealthStatus,
)
from greffier.presentation.api.dependencies import get_health_check

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe(
    health_check: GreffierHealthCheck = Depends(get_health_check),
):
    """
    Liveness probe endpoint.

    Returns:
        Health status dict
    """
    return await health_check.check_liveness()


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(
    response: Response,
    health_check: GreffierHealthCheck = Depends(get_health_check),
):
    """
    Readiness probe endpoint.

    Returns 503 when no network has an RPC pool configured.

    Returns:
        Health status dict with per-network checks
    """
    result = await health_check.check_readiness()

    if result["status"] == HealthStatus.UNHEALTHY.value:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return result


@router.get("", status_code=status.HTTP_200_OK)
async def health_check_endpoint(
    response: Response,
    health_check: GreffierHealthCheck = Depends(get_health_check),
):
    """General health check endpoint (alias for readiness)."""
    return await readiness_probe(response, health_check)
