"""
zkEVM Bridge Proxy use case.

Passes ``bridge`` and ``merkle-proof`` lookups through to the network's
bridge API. There is a single upstream per network, so a transient failure
cannot be retried elsewhere and is reported as unavailable.
"""

from typing import Any, Awaitable, Optional

from greffier.domain.exceptions import FatalError, UpstreamUnavailableError
from greffier.domain.value_objects.network import Network
from greffier.infrastructure.blockchain.zkevm_bridge_client import ZkEVMBridgeClient
from greffier.infrastructure.monitoring import get_logger, metrics
from greffier.infrastructure.rpc.error_classifier import ErrorClassifier

logger = get_logger(__name__)


class BridgeProxy:
    """zkEVM bridge API passthrough."""

    def __init__(
        self,
        bridge_client: ZkEVMBridgeClient,
        classifier: Optional[ErrorClassifier] = None,
    ):
        """
        Initialize use case.

        Args:
            bridge_client: zkEVM bridge API client
            classifier: Failure classifier shared with the RPC layer
        """
        self.bridge_client = bridge_client
        self.classifier = classifier or ErrorClassifier()

    async def bridge(self, network: Network, net_id: int, deposit_cnt: int) -> Any:
        """Deposit details from ``GET /bridge``."""
        return await self._forward(
            network,
            "bridge",
            self.bridge_client.get_bridge(network, net_id, deposit_cnt),
        )

    async def merkle_proof(
        self, network: Network, net_id: int, deposit_cnt: int
    ) -> Any:
        """Claim proof from ``GET /merkle-proof``."""
        return await self._forward(
            network,
            "merkle_proof",
            self.bridge_client.get_merkle_proof(network, net_id, deposit_cnt),
        )

    async def _forward(self, network: Network, endpoint: str, call: Awaitable) -> Any:
        """
        Await a bridge call and translate its failure.

        Raises:
            BridgeApiError: Upstream answered with an error
            UpstreamUnavailableError: Upstream unreachable or malformed
            NetworkNotConfiguredError: No bridge URL for the network
        """
        try:
            result = await call
        except FatalError:
            raise
        except Exception as e:
            classification = self.classifier.classify(e)
            if classification.is_info:
                metrics.bridge_requests_total.labels(
                    network=network.value, endpoint=endpoint, outcome="info"
                ).inc()
                info_error = self.classifier.to_exception(e)
                if info_error is e:
                    raise
                raise info_error from e

            metrics.bridge_requests_total.labels(
                network=network.value, endpoint=endpoint, outcome="unavailable"
            ).inc()
            logger.warning(
                f"zkEVM bridge {endpoint} on {network.value} unavailable: "
                f"{type(e).__name__}"
            )
            raise UpstreamUnavailableError(
                details={"network": network.value, "endpoint": endpoint},
            ) from e

        metrics.bridge_requests_total.labels(
            network=network.value, endpoint=endpoint, outcome="success"
        ).inc()
        return result
