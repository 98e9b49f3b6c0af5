"""
Chain client contract.

A ChainClient is bound to exactly one (child RPC, parent RPC) endpoint pair
and lives for a single attempt of a retry sweep:

    async with await factory.construct(network, endpoint) as client:
        last_block = await client.last_checkpointed_child_block()

Implementations raise ChainClientException subclasses (or let transport
errors propagate); classification happens in the RPC layer.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from greffier.domain.value_objects.network import EndpointPair, Network


class ChainClient(ABC):
    """Ephemeral capability over one endpoint pair."""

    async def __aenter__(self) -> "ChainClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release resources held for this attempt."""

    @abstractmethod
    async def last_checkpointed_child_block(self) -> int:
        """Last sidechain block covered by a checkpoint."""

    @abstractmethod
    async def find_containing_header_block(self, block_number: int) -> str:
        """Header block number (hex) whose range contains ``block_number``."""

    @abstractmethod
    async def read_header_block_record(self, index: str) -> Dict[str, Any]:
        """Raw ``headerBlocks(index)`` record: start, end, proposer, root, createdAt."""

    @abstractmethod
    async def get_transaction_receipt_or_null(
        self, tx_hash: str
    ) -> Optional[Dict[str, Any]]:
        """Sidechain transaction receipt, or None if the RPC returned null."""

    @abstractmethod
    async def get_block_merkle_proof(self, number: int, start: int, end: int) -> str:
        """Hex encoded proof of block ``number`` in checkpoint ``[start, end]``."""

    @abstractmethod
    async def is_checkpointed(self, tx_hash: str) -> bool:
        """Whether the block holding ``tx_hash`` is checkpointed."""

    @abstractmethod
    async def build_exit_payload(
        self, tx_hash: str, event_signature: str, token_index: int = 0
    ) -> str:
        """Exit payload for the ``token_index``-th matching event log."""

    @abstractmethod
    async def build_all_exit_payloads(
        self, tx_hash: str, event_signature: str
    ) -> List[str]:
        """Exit payloads for every matching event log."""


class ChainClientFactory(ABC):
    """Binds an endpoint pair into a fresh ChainClient."""

    @abstractmethod
    async def construct(self, network: Network, endpoint: EndpointPair) -> ChainClient:
        """
        Create a client for one attempt.

        Raises:
            Exception: Any failure here is an endpoint-local fault
        """
