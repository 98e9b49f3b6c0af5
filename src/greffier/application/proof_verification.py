"""
Size check for checkpoint block proofs.

A proof of a leaf in a checkpoint tree of height h is h sibling hashes of
32 bytes each. The leaf index must fit in that tree.
"""

from typing import Union

HASH_SIZE = 32


def proof_to_bytes(proof: Union[bytes, str]) -> bytes:
    """Decode a ``0x``-prefixed (or bare) hex proof; bytes pass through."""
    if isinstance(proof, (bytes, bytearray)):
        return bytes(proof)
    if not isinstance(proof, str):
        raise ValueError(f"Unsupported proof type: {type(proof).__name__}")
    hex_str = proof[2:] if proof[:2] in ("0x", "0X") else proof
    return bytes.fromhex(hex_str)


def verify_proof(index: int, proof: Union[bytes, str]) -> bool:
    """
    Check that ``proof`` can prove leaf ``index``.

    Args:
        index: Leaf position (block number minus checkpoint start)
        proof: Concatenated sibling hashes, raw or hex encoded

    Returns:
        True if the proof length is a whole number of hashes and the tree
        it describes has room for ``index``
    """
    if index < 0:
        return False
    try:
        proof_bytes = proof_to_bytes(proof)
    except ValueError:
        return False

    length = len(proof_bytes)
    if length == 0 or length % HASH_SIZE != 0:
        return False

    height = length // HASH_SIZE
    return index < 2 ** height
