"""
Blockchain collaborators: chain client and zkEVM bridge API client.
"""

from greffier.infrastructure.blockchain.chain_client import (
    ChainClient,
    ChainClientFactory,
)
from greffier.infrastructure.blockchain.sidecar_chain_client import (
    SidecarChainClient,
    SidecarChainClientFactory,
)
from greffier.infrastructure.blockchain.zkevm_bridge_client import ZkEVMBridgeClient

__all__ = [
    "ChainClient",
    "ChainClientFactory",
    "SidecarChainClient",
    "SidecarChainClientFactory",
    "ZkEVMBridgeClient",
]
