"""
Greffier Health Check implementation.

Kubernetes-compatible health checks for liveness and readiness probes.
Readiness reflects configuration only; RPC endpoints are not probed, since
a request sweeps the whole pool anyway.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from greffier import __version__
from greffier.domain.value_objects.network import Network
from greffier.infrastructure.blockchain.zkevm_bridge_client import ZkEVMBridgeClient
from greffier.infrastructure.rpc.pool_state import RpcPoolRegistry


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class GreffierHealthCheck:
    """
    Health check for the proof API.

    Checks:
    - RPC endpoint pools per network
    - zkEVM bridge upstream per network
    """

    def __init__(
        self,
        pool_registry: RpcPoolRegistry,
        bridge_client: ZkEVMBridgeClient,
    ):
        self.pool_registry = pool_registry
        self.bridge_client = bridge_client

    @staticmethod
    def _get_timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()

    async def check_liveness(self) -> Dict[str, Any]:
        """
        Liveness probe - is the service alive?

        Returns:
            Dict with status and basic info
        """
        return {
            "status": HealthStatus.HEALTHY.value,
            "component": "greffier",
            "version": __version__,
            "timestamp": self._get_timestamp(),
        }

    async def check_readiness(self) -> Dict[str, Any]:
        """
        Readiness probe - can requests be served?

        Unhealthy without any RPC pool, degraded when a network lacks
        its RPC pool or its bridge upstream.

        Returns:
            Dict with status and per-network checks
        """
        checks = {}
        overall_status = HealthStatus.HEALTHY

        for network in Network:
            profile = self.pool_registry.find(network)
            bridge_configured = self.bridge_client.is_configured(network)
            checks[network.value] = {
                "rpc_endpoints": profile.size if profile else 0,
                "zkevm_bridge": "configured" if bridge_configured else "missing",
            }
            if profile is None or not bridge_configured:
                overall_status = HealthStatus.DEGRADED

        if not self.pool_registry.networks:
            overall_status = HealthStatus.UNHEALTHY

        return {
            "status": overall_status.value,
            "component": "greffier",
            "version": __version__,
            "timestamp": self._get_timestamp(),
            "checks": checks,
        }
