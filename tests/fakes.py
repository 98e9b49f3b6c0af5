"""
Test doubles.

Chain clients are replaced by an in-memory fake driven by ChainState; the
zkEVM bridge client keeps its real request handling with ``_fetch_json``
answered from a table.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from greffier.domain.exceptions import ChainClientConstructionException
from greffier.domain.value_objects.network import (
    EndpointPair,
    Network,
    NetworkProfile,
)
from greffier.infrastructure.blockchain.chain_client import (
    ChainClient,
    ChainClientFactory,
)
from greffier.infrastructure.blockchain.zkevm_bridge_client import ZkEVMBridgeClient

TX_HASH = "0x" + "ab" * 32
EVENT_SIGNATURE = "0x" + "cd" * 32

# 8 sibling hashes: proves any leaf index below 256
VALID_PROOF = "0x" + "11" * 32 * 8


def make_profile(size: int = 3, network: Network = Network.MAINNET) -> NetworkProfile:
    """Profile with endpoints http://child-{i}.invalid / http://parent-{i}.invalid."""
    return NetworkProfile.from_urls(
        network,
        [f"http://child-{i}.invalid" for i in range(size)],
        [f"http://parent-{i}.invalid" for i in range(size)],
    )


def child_url(index: int) -> str:
    return f"http://child-{index}.invalid"


# ================================================================
# Fake chain client
# ================================================================


@dataclass
class ChainState:
    """
    What every fake chain client answers.

    ``endpoint_failures`` raise on any operation at that child RPC,
    ``operation_failures`` raise on that operation at every endpoint,
    ``receipts_by_endpoint`` override the receipt at one child RPC.
    """

    last_child_block: int = 1000
    header_block_index: str = "0x2710"
    header_block: Dict[str, Any] = field(
        default_factory=lambda: {
            "start": "900",
            "end": "1100",
            "proposer": "0x" + "99" * 20,
            "root": "0x" + "ee" * 32,
            "createdAt": "1700000000",
        }
    )
    receipt: Optional[Dict[str, Any]] = field(
        default_factory=lambda: {"blockNumber": "0x3e8", "status": "0x1"}
    )
    checkpointed: bool = True
    proof: str = VALID_PROOF
    exit_payload: str = "0xf90a1b"
    exit_payloads: List[str] = field(default_factory=lambda: ["0xf90a1b", "0xf90a1c"])

    construct_failures: set = field(default_factory=set)
    endpoint_failures: Dict[str, Exception] = field(default_factory=dict)
    operation_failures: Dict[str, Exception] = field(default_factory=dict)
    receipts_by_endpoint: Dict[str, Optional[Dict[str, Any]]] = field(
        default_factory=dict
    )


class FakeChainClient(ChainClient):
    """In-memory chain client bound to one endpoint pair."""

    def __init__(self, endpoint: EndpointPair, state: ChainState):
        self.endpoint = endpoint
        self.state = state
        self.closed = False
        self.calls: List[str] = []

    async def close(self) -> None:
        self.closed = True

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        error = self.state.endpoint_failures.get(self.endpoint.child_rpc_url)
        if error is not None:
            raise error
        error = self.state.operation_failures.get(operation)
        if error is not None:
            raise error

    async def last_checkpointed_child_block(self) -> int:
        self._enter("last_checkpointed_child_block")
        return self.state.last_child_block

    async def find_containing_header_block(self, block_number: int) -> str:
        self._enter("find_containing_header_block")
        return self.state.header_block_index

    async def read_header_block_record(self, index: str) -> Dict[str, Any]:
        self._enter("read_header_block_record")
        return self.state.header_block

    async def get_transaction_receipt_or_null(
        self, tx_hash: str
    ) -> Optional[Dict[str, Any]]:
        self._enter("get_transaction_receipt_or_null")
        if self.endpoint.child_rpc_url in self.state.receipts_by_endpoint:
            return self.state.receipts_by_endpoint[self.endpoint.child_rpc_url]
        return self.state.receipt

    async def get_block_merkle_proof(self, number: int, start: int, end: int) -> str:
        self._enter("get_block_merkle_proof")
        return self.state.proof

    async def is_checkpointed(self, tx_hash: str) -> bool:
        self._enter("is_checkpointed")
        return self.state.checkpointed

    async def build_exit_payload(
        self, tx_hash: str, event_signature: str, token_index: int = 0
    ) -> str:
        self._enter("build_exit_payload")
        return self.state.exit_payload

    async def build_all_exit_payloads(
        self, tx_hash: str, event_signature: str
    ) -> List[str]:
        self._enter("build_all_exit_payloads")
        return self.state.exit_payloads


class FakeChainClientFactory(ChainClientFactory):
    """Records every endpoint it is asked to bind."""

    def __init__(self, state: ChainState):
        self.state = state
        self.constructed: List[EndpointPair] = []
        self.clients: List[FakeChainClient] = []

    async def construct(self, network: Network, endpoint: EndpointPair) -> ChainClient:
        self.constructed.append(endpoint)
        if endpoint.child_rpc_url in self.state.construct_failures:
            raise ChainClientConstructionException("init failed")
        client = FakeChainClient(endpoint, self.state)
        self.clients.append(client)
        return client

    @property
    def attempted_children(self) -> List[str]:
        return [endpoint.child_rpc_url for endpoint in self.constructed]


# ================================================================
# Stub bridge API
# ================================================================


class StubBridgeClient(ZkEVMBridgeClient):
    """Bridge client whose HTTP layer answers from ``responses``."""

    def __init__(self, base_urls, responses: Dict[str, Any] = None):
        super().__init__(base_urls, timeout=1.0)
        self.responses: Dict[str, Any] = responses or {}
        self.requests: List[Tuple[str, Dict[str, Any]]] = []

    async def _fetch_json(self, url: str, params: Dict[str, Any]) -> Tuple[int, Any]:
        self.requests.append((url, params))
        endpoint = url.rsplit("/", 1)[-1]
        answer = self.responses.get(endpoint, (200, {}))
        if isinstance(answer, Exception):
            raise answer
        return answer
