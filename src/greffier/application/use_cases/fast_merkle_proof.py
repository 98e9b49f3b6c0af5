"""
Fast Merkle Proof use case.
"""

from typing import Dict

from greffier.application.proof_verification import verify_proof
from greffier.domain.exceptions import ProofVerificationError
from greffier.domain.value_objects import FastMerkleProofRequest
from greffier.infrastructure.blockchain.chain_client import ChainClient
from greffier.infrastructure.monitoring import get_logger
from greffier.infrastructure.rpc.pool_state import RpcPoolRegistry
from greffier.infrastructure.rpc.retry_orchestrator import RetryOrchestrator

logger = get_logger(__name__)


class FastMerkleProofQuery:
    """Block proof of a sidechain block inside a checkpoint range."""

    def __init__(
        self,
        orchestrator: RetryOrchestrator,
        pool_registry: RpcPoolRegistry,
    ):
        self.orchestrator = orchestrator
        self.pool_registry = pool_registry

    async def execute(self, request: FastMerkleProofRequest) -> Dict[str, str]:
        """
        Build the block proof of ``request.number``.

        Caller guarantees ``start <= number <= end``.

        Returns:
            ``{"proof": <hex>}``

        Raises:
            ProofVerificationError: If the returned proof fails the size check
            SweepExhaustedError: If no endpoint could answer
        """
        profile = self.pool_registry.get(request.network)

        async def operation(client: ChainClient) -> str:
            return await client.get_block_merkle_proof(
                request.number, request.start, request.end
            )

        proof = await self.orchestrator.run(
            profile, operation, operation_name="fast_merkle_proof"
        )

        if not verify_proof(request.leaf_index, proof):
            logger.error(
                f"Invalid merkle proof for block {request.number} "
                f"in [{request.start}, {request.end}] on {request.network.value}"
            )
            raise ProofVerificationError(
                details={
                    "start": request.start,
                    "end": request.end,
                    "number": request.number,
                },
            )

        return {"proof": proof}
