"""Application use cases."""

from greffier.application.use_cases.all_exit_payloads import (
    AllExitPayloadsBuilder,
)
from greffier.application.use_cases.block_inclusion import BlockInclusionQuery
from greffier.application.use_cases.bridge_proxy import BridgeProxy
from greffier.application.use_cases.exit_payload import ExitPayloadBuilder
from greffier.application.use_cases.fast_merkle_proof import (
    FastMerkleProofQuery,
)

__all__ = [
    "AllExitPayloadsBuilder",
    "BlockInclusionQuery",
    "BridgeProxy",
    "ExitPayloadBuilder",
    "FastMerkleProofQuery",
]
