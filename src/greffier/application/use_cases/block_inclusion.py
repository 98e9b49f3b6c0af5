"""
Block Inclusion use case.

Answers whether a sidechain block has been checkpointed on the mainchain and,
if so, which header block covers it.
"""

from typing import Any, Dict

from greffier.domain.exceptions import (
    BlockNotIncludedError,
    MalformedResponseException,
)
from greffier.domain.value_objects import BlockInclusionRequest, HeaderBlockRecord
from greffier.infrastructure.blockchain.chain_client import ChainClient
from greffier.infrastructure.rpc.pool_state import RpcPoolRegistry
from greffier.infrastructure.rpc.retry_orchestrator import RetryOrchestrator


class BlockInclusionQuery:
    """
    Block inclusion use case.

    Looks up the checkpoint (header block) whose range contains the block.
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

    async def execute(self, request: BlockInclusionRequest) -> Dict[str, Any]:
        """
        Find the header block covering ``request.block_number``.

        Args:
            request: Network and sidechain block number

        Returns:
            Header block details with ``message: "success"``

        Raises:
            BlockNotIncludedError: If the block is past the last checkpoint
            SweepExhaustedError: If no endpoint could answer
        """
        profile = self.pool_registry.get(request.network)
        block_number = request.block_number

        async def operation(client: ChainClient) -> HeaderBlockRecord:
            last_child_block = await client.last_checkpointed_child_block()
            if last_child_block < block_number:
                raise BlockNotIncludedError()

            index = await client.find_containing_header_block(block_number)
            raw_record = await client.read_header_block_record(index)

            try:
                record = HeaderBlockRecord.from_dict(index, raw_record)
            except (KeyError, TypeError, ValueError) as e:
                raise MalformedResponseException(
                    "Unparseable header block record",
                    details={"header_block": index},
                ) from e

            # A record that does not cover the block is a bad endpoint answer
            if not record.contains(block_number):
                raise MalformedResponseException(
                    "Header block does not contain requested block",
                    details={"header_block": index},
                )
            return record

        record = await self.orchestrator.run(
            profile, operation, operation_name="block_included"
        )

        return {
            "headerBlockNumber": record.index,
            "blockNumber": block_number,
            "start": record.start,
            "end": record.end,
            "proposer": record.proposer,
            "root": record.root,
            "createdAt": record.created_at,
            "message": "success",
        }
