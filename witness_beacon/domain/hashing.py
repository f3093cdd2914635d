"""Keccak-256 hashing and hex codec for claim and seed derivation.

All identifiers and selection seeds are Keccak-256 digests. This is the
original Keccak padding used by Ethereum-style ledgers, NOT the NIST
SHA3-256 exposed by ``hashlib.sha3_256``; the two produce different
digests for the same input. Every implementation and every on-chain
verifier must agree on the function, so it is not configurable.

Hex conventions:
- ``to_hex`` emits lower-case hex with no prefix
- ``keccak256_hex`` emits the ``0x``-prefixed form used on the ledger
- ``from_hex`` accepts either form, in either case
"""

from __future__ import annotations

import binascii

from Crypto.Hash import keccak

from witness_beacon.domain.errors.encoding import EncodingError

# Digest size in bytes; the sampler's 4-byte cursor relies on this being
# a multiple of 4
DIGEST_SIZE: int = 32

HASH_ALG_NAME: str = "Keccak-256"

HEX_PREFIX: str = "0x"


def keccak256(data: bytes | str) -> bytes:
    """Compute the raw Keccak-256 digest of data.

    Args:
        data: Bytes to hash. Strings are encoded as UTF-8.

    Returns:
        32-byte digest.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    hasher = keccak.new(digest_bits=256)
    hasher.update(data)
    return hasher.digest()


def to_hex(digest: bytes) -> str:
    """Render bytes as lower-case hex without a prefix."""
    return digest.hex()


def keccak256_hex(data: bytes | str) -> str:
    """Compute Keccak-256 and render it as ``0x``-prefixed lower-case hex."""
    return HEX_PREFIX + to_hex(keccak256(data))


def strip_hex_prefix(value: str) -> str:
    """Remove a leading ``0x``/``0X`` if present."""
    if value[:2].lower() == HEX_PREFIX:
        return value[2:]
    return value


def from_hex(value: str) -> bytes:
    """Decode a hex string, tolerating an optional ``0x`` prefix.

    Args:
        value: Hex string such as ``"0xdeadbeef"`` or ``"DEADBEEF"``.

    Returns:
        The decoded bytes.

    Raises:
        EncodingError: If value is not a string, has odd length, or
            contains non-hex characters.
    """
    if not isinstance(value, str):
        raise EncodingError("hex", f"expected str, got {type(value).__name__}")

    body = strip_hex_prefix(value)
    if len(body) % 2:
        raise EncodingError("hex", f"odd-length hex string {value!r}")
    try:
        return binascii.unhexlify(body)
    except (binascii.Error, ValueError) as e:
        raise EncodingError("hex", f"invalid hex string {value!r}") from e
