"""
Domain value objects.
"""

from greffier.domain.value_objects.error_kind import ErrorKind
from greffier.domain.value_objects.header_block import HeaderBlockRecord
from greffier.domain.value_objects.network import (
    V1_NETWORK_SELECTORS,
    ZKEVM_NETWORK_SELECTORS,
    EndpointPair,
    Network,
    NetworkProfile,
)
from greffier.domain.value_objects.proof_request import (
    AllExitPayloadsRequest,
    BlockInclusionRequest,
    ExitPayloadRequest,
    FastMerkleProofRequest,
    ProofRequest,
)

__all__ = [
    "ErrorKind",
    "HeaderBlockRecord",
    "Network",
    "EndpointPair",
    "NetworkProfile",
    "V1_NETWORK_SELECTORS",
    "ZKEVM_NETWORK_SELECTORS",
    "ProofRequest",
    "BlockInclusionRequest",
    "FastMerkleProofRequest",
    "ExitPayloadRequest",
    "AllExitPayloadsRequest",
]
