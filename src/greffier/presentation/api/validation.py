"""
Request parameter validation.

Path and query parameters arrive as strings and are checked here before any
use case runs, so use cases only see typed, canonical values.
"""

import re
from typing import Dict, Optional

from greffier.domain.exceptions import InvalidParameterError
from greffier.domain.value_objects.network import (
    V1_NETWORK_SELECTORS,
    ZKEVM_NETWORK_SELECTORS,
    Network,
)

_DIGITS = re.compile(r"[0-9]+")
_HASH_32 = re.compile(r"0x[0-9a-fA-F]{64}")


def is_canonical_uint(value: Optional[str]) -> bool:
    """
    Check for a non-negative decimal integer string.

    Surrounding whitespace and leading zeros are tolerated; signs, exponents,
    fractions and hex are not.
    """
    if value is None:
        return False
    return bool(_DIGITS.fullmatch(value.strip()))


def parse_uint(value: Optional[str], message: str, parameter: str) -> int:
    if not is_canonical_uint(value):
        raise InvalidParameterError(message, parameter=parameter)
    return int(value.strip())


def is_hash_32(value: Optional[str]) -> bool:
    """``0x`` followed by 64 hex digits."""
    return value is not None and bool(_HASH_32.fullmatch(value))


def _resolve(selectors: Dict[str, Network], value: str) -> Network:
    network = selectors.get(value.lower())
    if network is None:
        raise InvalidParameterError("Invalid network!", parameter="network")
    return network


def resolve_v1_network(value: str) -> Network:
    """Map ``matic`` / ``mumbai`` / ``amoy`` to a network tier."""
    return _resolve(V1_NETWORK_SELECTORS, value)


def resolve_zkevm_network(value: str) -> Network:
    """Map ``mainnet`` / ``testnet`` / ``cardona`` to a network tier."""
    return _resolve(ZKEVM_NETWORK_SELECTORS, value)


def validate_block_number(block_number: str) -> int:
    return parse_uint(block_number, "Invalid block number!", "blockNumber")


def validate_fast_merkle_proof_range(
    start: Optional[str], end: Optional[str], number: Optional[str]
) -> tuple:
    """
    Validate a checkpoint range and the block inside it.

    Returns:
        (start, end, number) as ints with ``start <= number <= end``
    """
    message = "Invalid start or end or block numbers!"
    if not all(is_canonical_uint(v) for v in (start, end, number)):
        raise InvalidParameterError(message)

    start_int, end_int, number_int = (int(v.strip()) for v in (start, end, number))
    if not start_int <= number_int <= end_int:
        raise InvalidParameterError(message)
    return start_int, end_int, number_int


def validate_burn_tx(burn_tx_hash: Optional[str], event_signature: Optional[str]) -> None:
    if not burn_tx_hash or not event_signature:
        raise InvalidParameterError("Burn tx or Event Signature missing!")
    if not is_hash_32(burn_tx_hash) or not is_hash_32(event_signature):
        raise InvalidParameterError("Incorrect Burn tx or Event Signature!")


def validate_token_index(token_index: Optional[str]) -> int:
    if token_index is None or token_index == "":
        return 0
    return parse_uint(token_index, "Invalid token index!", "tokenIndex")


def validate_deposit_query(net_id: Optional[str], deposit_cnt: Optional[str]) -> tuple:
    message = "Invalid net_id or deposit_cnt!"
    return (
        parse_uint(net_id, message, "net_id"),
        parse_uint(deposit_cnt, message, "deposit_cnt"),
    )
