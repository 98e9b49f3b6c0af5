"""
Exit Payload use case.

Builds the payload a user submits on the mainchain to finalize the exit of a
burn transaction.
"""

from typing import Any, Callable, Dict

from greffier.domain.exceptions import (
    IncorrectTransactionError,
    MalformedReceiptException,
    NullReceiptException,
    SweepExhaustedError,
    TransactionNotCheckpointedError,
)
from greffier.domain.value_objects import ExitPayloadRequest
from greffier.infrastructure.blockchain.chain_client import ChainClient
from greffier.infrastructure.rpc.pool_state import RpcPoolRegistry
from greffier.infrastructure.rpc.retry_orchestrator import RetryOrchestrator

PAYLOAD_SUCCESS_MESSAGE = "Payload generation success"


async def ensure_burn_checkpointed(
    client: ChainClient,
    burn_tx_hash: str,
    on_null_receipt: Callable[[], None],
) -> None:
    """
    Check that a burn transaction exists and is covered by a checkpoint.

    Args:
        client: Chain client bound for the current attempt
        burn_tx_hash: Sidechain burn transaction hash
        on_null_receipt: Called when the endpoint returns a null receipt

    Raises:
        NullReceiptException: Endpoint returned no receipt (transient)
        MalformedReceiptException: Receipt has no block number
        TransactionNotCheckpointedError: Block not checkpointed yet
    """
    receipt = await client.get_transaction_receipt_or_null(burn_tx_hash)
    if receipt is None:
        on_null_receipt()
        raise NullReceiptException("Null receipt received")

    if not isinstance(receipt, dict) or not receipt.get("blockNumber"):
        raise MalformedReceiptException(
            "Receipt without block number",
            details={"tx_hash": burn_tx_hash},
        )

    if not await client.is_checkpointed(burn_tx_hash):
        raise TransactionNotCheckpointedError()


class NullReceiptCounter:
    """Counts attempts that ended on a null receipt."""

    def __init__(self):
        self.count = 0

    def __call__(self) -> None:
        self.count += 1

    def check(self, error: SweepExhaustedError) -> None:
        """
        Re-raise an exhausted sweep as IncorrectTransactionError when every
        attempt saw a null receipt: no endpoint knows the transaction.
        """
        if self.count >= error.attempts:
            raise IncorrectTransactionError() from error


class ExitPayloadBuilder:
    """
    Exit payload use case.

    Resolves the burn receipt, requires its checkpoint, then builds the
    payload for the ``token_index``-th log matching the event signature.
    """

    def __init__(
        self,
        orchestrator: RetryOrchestrator,
        pool_registry: RpcPoolRegistry,
    ):
        """
        Initialize use case.

        Args:
            orchestrator: Retry sweep over the network's endpoints
            pool_registry: Network endpoint pools
        """
        self.orchestrator = orchestrator
        self.pool_registry = pool_registry

    async def execute(self, request: ExitPayloadRequest) -> Dict[str, Any]:
        """
        Build one exit payload.

        Returns:
            ``{"message": "Payload generation success", "result": <hex>}``

        Raises:
            IncorrectTransactionError: Unknown tx, bad receipt or token index
            TransactionNotCheckpointedError: Burn not checkpointed yet
            BlockNotIncludedError: Event log not found in the receipt
            SweepExhaustedError: If no endpoint could answer
        """
        profile = self.pool_registry.get(request.network)
        null_receipts = NullReceiptCounter()

        async def operation(client: ChainClient) -> str:
            await ensure_burn_checkpointed(
                client, request.burn_tx_hash, null_receipts
            )
            return await client.build_exit_payload(
                request.burn_tx_hash,
                request.event_signature,
                request.token_index,
            )

        try:
            result = await self.orchestrator.run(
                profile, operation, operation_name="exit_payload"
            )
        except SweepExhaustedError as e:
            null_receipts.check(e)
            raise

        return {"message": PAYLOAD_SUCCESS_MESSAGE, "result": result}
