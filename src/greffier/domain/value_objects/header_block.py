"""
Checkpoint header block record.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class HeaderBlockRecord:
    """
    Mainchain record describing one checkpointed range of sidechain blocks.

    Attributes:
        index: Header block number (hex string as reported by the root chain)
        start: First sidechain block in the checkpoint
        end: Last sidechain block in the checkpoint
        proposer: Address of the validator that proposed the checkpoint
        root: Merkle root of the checkpointed block headers
        created_at: Mainchain timestamp of the checkpoint
    """

    index: str
    start: int
    end: int
    proposer: str
    root: str
    created_at: int

    def contains(self, block_number: int) -> bool:
        """Check whether a sidechain block falls inside this checkpoint."""
        return self.start <= block_number <= self.end

    @classmethod
    def from_dict(cls, index: str, data: Dict[str, Any]) -> "HeaderBlockRecord":
        """
        Build a record from the root chain ``headerBlocks`` read.

        Raises:
            KeyError: If a field is missing
            ValueError: If a numeric field cannot be parsed
        """
        return cls(
            index=index,
            start=int(data["start"]),
            end=int(data["end"]),
            proposer=str(data["proposer"]),
            root=str(data["root"]),
            created_at=int(data["createdAt"]),
        )
