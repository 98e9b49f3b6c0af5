"""
Unit tests for block proof size verification.
"""

import pytest

from greffier.application.proof_verification import proof_to_bytes, verify_proof

HASH = b"\x11" * 32


class TestVerifyProof:
    """verify_proof(index, proof)."""

    @pytest.mark.parametrize(
        "hashes,index,valid",
        [
            (1, 0, True),
            (1, 1, True),
            (1, 2, False),
            (2, 3, True),
            (2, 4, False),
            (8, 255, True),
            (8, 256, False),
        ],
    )
    def test_index_must_fit_tree(self, hashes, index, valid):
        """Test valid iff index < 2**height."""
        assert verify_proof(index, HASH * hashes) is valid

    def test_partial_hash_is_invalid(self):
        assert verify_proof(0, HASH + b"\x00") is False

    def test_empty_proof_is_invalid(self):
        assert verify_proof(0, b"") is False
        assert verify_proof(0, "0x") is False

    def test_hex_proof_is_decoded(self):
        """Test hex strings are measured in bytes, not characters."""
        proof = "0x" + "11" * 64

        assert verify_proof(3, proof) is True
        assert verify_proof(4, proof) is False

    def test_null_proof_is_invalid(self):
        assert verify_proof(0, None) is False

    def test_non_hex_proof_is_invalid(self):
        assert verify_proof(0, "0x" + "zz" * 32) is False

    def test_negative_index_is_invalid(self):
        assert verify_proof(-1, HASH) is False


class TestProofToBytes:
    """proof_to_bytes."""

    def test_prefixed_and_bare_hex(self):
        assert proof_to_bytes("0x0102") == b"\x01\x02"
        assert proof_to_bytes("0102") == b"\x01\x02"

    def test_bytes_pass_through(self):
        assert proof_to_bytes(bytearray(b"\x01")) == b"\x01"

    def test_rejects_non_hex_types(self):
        """Test None and other non-string values are not decoded."""
        with pytest.raises(ValueError):
            proof_to_bytes(None)
