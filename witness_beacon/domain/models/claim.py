"""Claim metadata and claim identifier derivation.

A claim identifier is the Keccak-256 digest of a newline-joined string:

    provider
    parameters
    {"contextAddress":"<address>","contextMessage":"<message>"}

The context line is compact JSON with exactly those two keys in that
order, non-ASCII characters left unescaped. This matches what the
JavaScript SDK and on-chain verifiers produce byte for byte; any change
in key order, spacing or escaping yields a different identifier.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from witness_beacon.domain.errors.encoding import EncodingError
from witness_beacon.domain.hashing import (
    DIGEST_SIZE,
    HEX_PREFIX,
    from_hex,
    keccak256,
    to_hex,
)

CLAIM_FIELD_SEPARATOR = "\n"


@dataclass(frozen=True)
class ClaimInfo:
    """Metadata describing a single claim.

    Attributes:
        provider: Provider name (e.g., "github")
        parameters: Provider-specific parameters, usually a JSON string
        context_address: Address the claim is bound to; stringified
            with ``str()`` when hashed, must not be None
        context_message: Free-form context message
    """

    provider: str
    parameters: str
    context_address: Any
    context_message: str

    def serialized_context(self) -> str:
        """Serialize the claim context as canonical compact JSON.

        Raises:
            EncodingError: If the context cannot be serialized.
        """
        if not isinstance(self.context_message, str):
            raise EncodingError(
                "context_message",
                f"expected str, got {type(self.context_message).__name__}",
            )
        if self.context_address is None:
            raise EncodingError("context_address", "must not be None")
        try:
            address = str(self.context_address)
        except Exception as e:
            raise EncodingError("context_address", str(e)) from e

        return json.dumps(
            {"contextAddress": address, "contextMessage": self.context_message},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def canonical_string(self) -> str:
        """Build the newline-joined string that is hashed into the claim id."""
        for name in ("provider", "parameters"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise EncodingError(
                    name, f"expected str, got {type(value).__name__}"
                )
        return CLAIM_FIELD_SEPARATOR.join(
            [self.provider, self.parameters, self.serialized_context()]
        )

    def canonical_bytes(self) -> bytes:
        """UTF-8 bytes of canonical_string().

        Raises:
            EncodingError: If any field holds text that is not valid
                UTF-8 (e.g., lone surrogates).
        """
        try:
            return self.canonical_string().encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError("claim", f"not UTF-8 encodable: {e.reason}") from e

    def claim_id(self) -> ClaimID:
        """Derive the ClaimID value for this claim."""
        return ClaimID(keccak256(self.canonical_bytes()))


@dataclass(frozen=True)
class ClaimID:
    """Opaque 32-byte claim identifier.

    Equality is byte equality, so ids parsed from ``0x``-prefixed,
    unprefixed, upper- or lower-case hex all compare equal.

    Attributes:
        digest: The raw 32-byte Keccak-256 digest
    """

    digest: bytes

    def __post_init__(self) -> None:
        """Validate digest length."""
        if len(self.digest) != DIGEST_SIZE:
            raise EncodingError(
                "claim_id",
                f"expected {DIGEST_SIZE} bytes, got {len(self.digest)}",
            )

    @classmethod
    def from_hex(cls, value: str) -> ClaimID:
        """Parse a claim id from hex, with or without ``0x``."""
        return cls(from_hex(value))

    @property
    def hex(self) -> str:
        """Lower-case ``0x``-prefixed hex form."""
        return HEX_PREFIX + to_hex(self.digest)

    def __str__(self) -> str:
        return self.hex


def hash_claim_info(info: ClaimInfo) -> str:
    """Derive the claim identifier for a claim.

    Args:
        info: Claim metadata.

    Returns:
        Lower-case ``0x``-prefixed hex Keccak-256 digest.

    Raises:
        EncodingError: If any claim field cannot be serialized.
    """
    return info.claim_id().hex
