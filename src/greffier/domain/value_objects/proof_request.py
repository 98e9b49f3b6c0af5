"""
Proof requests accepted by the service.

Each request kind carries its own parameters, already validated by the
presentation layer.
"""

from dataclasses import dataclass
from typing import Union

from greffier.domain.value_objects.network import Network


@dataclass(frozen=True)
class BlockInclusionRequest:
    """Has sidechain block ``block_number`` been checkpointed?"""

    network: Network
    block_number: int


@dataclass(frozen=True)
class FastMerkleProofRequest:
    """Block proof of ``number`` inside the checkpoint ``[start, end]``."""

    network: Network
    start: int
    end: int
    number: int

    @property
    def leaf_index(self) -> int:
        return self.number - self.start


@dataclass(frozen=True)
class ExitPayloadRequest:
    """Exit payload of one event log in a burn transaction."""

    network: Network
    burn_tx_hash: str
    event_signature: str
    token_index: int = 0


@dataclass(frozen=True)
class AllExitPayloadsRequest:
    """Exit payloads of every matching event log in a burn transaction."""

    network: Network
    burn_tx_hash: str
    event_signature: str


ProofRequest = Union[
    BlockInclusionRequest,
    FastMerkleProofRequest,
    ExitPayloadRequest,
    AllExitPayloadsRequest,
]
