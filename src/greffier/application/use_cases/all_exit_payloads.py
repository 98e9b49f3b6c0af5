"""
All Exit Payloads use case.
"""

from typing import Any, Dict, List

from greffier.application.use_cases.exit_payload import (
    PAYLOAD_SUCCESS_MESSAGE,
    NullReceiptCounter,
    ensure_burn_checkpointed,
)
from greffier.domain.exceptions import SweepExhaustedError
from greffier.domain.value_objects import AllExitPayloadsRequest
from greffier.infrastructure.blockchain.chain_client import ChainClient
from greffier.infrastructure.rpc.pool_state import RpcPoolRegistry
from greffier.infrastructure.rpc.retry_orchestrator import RetryOrchestrator


class AllExitPayloadsBuilder:
    """Exit payloads for every log of a burn transaction matching a signature."""

    def __init__(
        self,
        orchestrator: RetryOrchestrator,
        pool_registry: RpcPoolRegistry,
    ):
        self.orchestrator = orchestrator
        self.pool_registry = pool_registry

    async def execute(self, request: AllExitPayloadsRequest) -> Dict[str, Any]:
        """
        Build all exit payloads of a burn transaction.

        Same preconditions and errors as ExitPayloadBuilder.

        Returns:
            ``{"message": "Payload generation success", "result": [<hex>, ...]}``
        """
        profile = self.pool_registry.get(request.network)
        null_receipts = NullReceiptCounter()

        async def operation(client: ChainClient) -> List[str]:
            await ensure_burn_checkpointed(
                client, request.burn_tx_hash, null_receipts
            )
            return await client.build_all_exit_payloads(
                request.burn_tx_hash, request.event_signature
            )

        try:
            result = await self.orchestrator.run(
                profile, operation, operation_name="all_exit_payloads"
            )
        except SweepExhaustedError as e:
            null_receipts.check(e)
            raise

        return {"message": PAYLOAD_SUCCESS_MESSAGE, "result": result}
