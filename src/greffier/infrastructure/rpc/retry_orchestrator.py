"""
Bounded retry sweep over a network's RPC endpoint pool.

A sweep starts at the pool's sticky index and walks the endpoints in ring
order for at most two full rounds. Each attempt binds a fresh ChainClient to
one endpoint pair:

    attempt i -> endpoint (start + i) % N,  i in [0, 2N)

Success commits the winning index. An info classification ends the sweep at
once. Transient failures move on to the next endpoint; running out of
attempts raises SweepExhaustedError.
"""

from typing import Awaitable, Callable, Optional, TypeVar

from greffier.domain.exceptions import SweepExhaustedError
from greffier.domain.value_objects.network import NetworkProfile
from greffier.infrastructure.blockchain.chain_client import (
    ChainClient,
    ChainClientFactory,
)
from greffier.infrastructure.monitoring import get_logger, metrics
from greffier.infrastructure.rpc import pool_state
from greffier.infrastructure.rpc.error_classifier import ErrorClassifier

logger = get_logger(__name__)

T = TypeVar("T")

ChainOperation = Callable[[ChainClient], Awaitable[T]]

SWEEP_ROUNDS = 2


class RetryOrchestrator:
    """Runs chain operations with failover across an endpoint pool."""

    def __init__(
        self,
        client_factory: ChainClientFactory,
        classifier: Optional[ErrorClassifier] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            client_factory: Binds endpoint pairs into chain clients
            classifier: Failure classifier (default lookup table if None)
        """
        self.client_factory = client_factory
        self.classifier = classifier or ErrorClassifier()

    async def run(
        self,
        profile: NetworkProfile,
        operation: ChainOperation,
        operation_name: str = "chain_operation",
    ) -> T:
        """
        Run ``operation`` against the pool until it succeeds.

        Args:
            profile: Network pool to sweep
            operation: Coroutine function taking a bound ChainClient
            operation_name: Label used in logs and metrics

        Returns:
            Result of the first successful attempt

        Raises:
            InfoError: First attempt classified as a business answer
            SweepExhaustedError: Every attempt failed transiently
        """
        network = profile.network.value
        start = pool_state.start_index(profile)
        max_attempts = SWEEP_ROUNDS * profile.size
        last_error: Optional[Exception] = None

        for attempt in range(max_attempts):
            endpoint_index = (start + attempt) % profile.size
            endpoint = profile.endpoints[endpoint_index]

            try:
                client = await self.client_factory.construct(
                    profile.network, endpoint
                )
                async with client:
                    result = await operation(client)

            except Exception as e:
                classification = self.classifier.classify(e)

                if classification.is_info:
                    metrics.rpc_attempts_total.labels(
                        network=network, operation=operation_name, outcome="info"
                    ).inc()
                    metrics.rpc_sweeps_total.labels(
                        network=network, operation=operation_name, outcome="info"
                    ).inc()
                    logger.info(
                        f"{operation_name} on {network}: "
                        f"{classification.kind.value} (endpoint {endpoint_index})"
                    )
                    info_error = self.classifier.to_exception(e)
                    if info_error is e:
                        raise
                    raise info_error from e

                metrics.rpc_attempts_total.labels(
                    network=network, operation=operation_name, outcome="transient"
                ).inc()
                logger.warning(
                    f"{operation_name} on {network} failed at endpoint "
                    f"{endpoint_index} (attempt {attempt + 1}/{max_attempts}): "
                    f"{type(e).__name__}"
                )
                last_error = e
                continue

            metrics.rpc_attempts_total.labels(
                network=network, operation=operation_name, outcome="success"
            ).inc()
            metrics.rpc_sweeps_total.labels(
                network=network, operation=operation_name, outcome="success"
            ).inc()

            if endpoint_index != start:
                pool_state.commit(profile, endpoint_index)

            return result

        metrics.rpc_sweeps_total.labels(
            network=network, operation=operation_name, outcome="exhausted"
        ).inc()
        logger.error(
            f"{operation_name} on {network}: all {max_attempts} attempts failed"
        )
        raise SweepExhaustedError(
            operation=operation_name,
            attempts=max_attempts,
            last_error=last_error,
        )
