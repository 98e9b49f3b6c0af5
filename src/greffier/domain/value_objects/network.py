"""
Network tiers and RPC endpoint pool profiles.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Tuple


class Network(str, Enum):
    """Network tier served by the API."""

    MAINNET = "mainnet"
    TESTNET = "testnet"

    @property
    def is_mainnet(self) -> bool:
        return self is Network.MAINNET


# URL selectors accepted by the v1 (PoS) routes
V1_NETWORK_SELECTORS = {
    "matic": Network.MAINNET,
    "mumbai": Network.TESTNET,
    "amoy": Network.TESTNET,
}

# URL selectors accepted by the zkEVM bridge routes
ZKEVM_NETWORK_SELECTORS = {
    "mainnet": Network.MAINNET,
    "testnet": Network.TESTNET,
    "cardona": Network.TESTNET,
}


@dataclass(frozen=True)
class EndpointPair:
    """Child (sidechain) and parent (mainchain) RPC URLs used together."""

    child_rpc_url: str
    parent_rpc_url: str


@dataclass
class NetworkProfile:
    """
    RPC endpoint pool of one network tier.

    Lives for the whole process. ``sticky_index`` is the index of the
    endpoint pair that most recently served a request successfully; it only
    seeds where the next sweep starts and is read and written without a lock.
    """

    network: Network
    endpoints: Tuple[EndpointPair, ...]
    sticky_index: int = field(default=0)

    def __post_init__(self) -> None:
        self.endpoints = tuple(self.endpoints)
        if not self.endpoints:
            raise ValueError(
                f"Network '{self.network.value}' needs at least one endpoint pair"
            )
        if not 0 <= self.sticky_index < len(self.endpoints):
            raise ValueError(
                f"sticky_index {self.sticky_index} out of range for "
                f"{len(self.endpoints)} endpoints"
            )

    @classmethod
    def from_urls(
        cls,
        network: Network,
        child_rpc_urls: Sequence[str],
        parent_rpc_urls: Sequence[str],
    ) -> "NetworkProfile":
        """
        Build a profile by pairing child and parent RPC URLs positionally.

        Args:
            network: Network tier
            child_rpc_urls: Sidechain RPC URLs
            parent_rpc_urls: Mainchain RPC URLs (same length)

        Returns:
            NetworkProfile with sticky index 0
        """
        if len(child_rpc_urls) != len(parent_rpc_urls):
            raise ValueError(
                "child and parent RPC lists must have the same length "
                f"({len(child_rpc_urls)} != {len(parent_rpc_urls)})"
            )
        pairs = tuple(
            EndpointPair(child_rpc_url=child, parent_rpc_url=parent)
            for child, parent in zip(child_rpc_urls, parent_rpc_urls)
        )
        return cls(network=network, endpoints=pairs)

    @property
    def size(self) -> int:
        return len(self.endpoints)
