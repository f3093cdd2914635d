"""Witness selection domain models.

Provides seed derivation, deterministic swap-pop sampling, and the audit
record that lets any observer re-run a selection.

Algorithm (v1.0.0):
1. seed = Keccak-256(identifier "\\n" epoch "\\n" required_count "\\n" timestamp)
2. Copy the pool; cursor = 0
3. For each of required_count draws:
   a. r = unsigned 32-bit big-endian integer at seed[cursor:cursor + 4]
   b. index = r % len(available)
   c. Take available[index], move the last element into its slot, shrink
   d. cursor = (cursor + 4) % len(seed)

The result is in draw order, not pool order. Anyone with the seed inputs
and the ordered pool can recompute it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from witness_beacon.domain.errors.encoding import EncodingError
from witness_beacon.domain.errors.witness_selection import (
    InsufficientWitnessesError,
    InvalidSeedLengthError,
)
from witness_beacon.domain.hashing import keccak256, to_hex

# Selection algorithm version for reproducibility
SELECTION_ALGORITHM_VERSION = "1.0.0"

# Bytes consumed from the seed per draw
SEED_CHUNK_SIZE = 4

SEED_FIELD_SEPARATOR = "\n"

T = TypeVar("T")


def _encode_uint(name: str, value: int) -> str:
    """Render a non-negative integer in base 10.

    Raises:
        EncodingError: If value is not an int, is a bool, or is negative.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(name, f"expected int, got {type(value).__name__}")
    if value < 0:
        raise EncodingError(name, f"must be non-negative, got {value}")
    return str(value)


def derive_selection_seed(
    identifier: str,
    epoch: int,
    required_count: int,
    timestamp_s: int,
) -> bytes:
    """Derive the raw 32-byte selection seed.

    Args:
        identifier: Claim identifier, used verbatim (no case or prefix
            normalization)
        epoch: Epoch index
        required_count: Number of witnesses to select
        timestamp_s: Claim timestamp in seconds

    Returns:
        Raw Keccak-256 digest (not its hex form).

    Raises:
        EncodingError: If identifier is not a string or a numeric input
            is not a non-negative int.
    """
    if not isinstance(identifier, str):
        raise EncodingError(
            "identifier", f"expected str, got {type(identifier).__name__}"
        )

    joined = SEED_FIELD_SEPARATOR.join(
        [
            identifier,
            _encode_uint("epoch", epoch),
            _encode_uint("required_count", required_count),
            _encode_uint("timestamp_s", timestamp_s),
        ]
    )
    try:
        data = joined.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError("identifier", f"not UTF-8 encodable: {e.reason}") from e
    return keccak256(data)


@dataclass(frozen=True)
class SelectionSeed:
    """Deterministic seed for one witness selection.

    Keeps the inputs next to the derived bytes so that a selection can be
    explained and re-derived later.

    Attributes:
        identifier: Claim identifier
        epoch: Epoch index
        required_count: Number of witnesses to select
        timestamp_s: Claim timestamp in seconds
        value: The 32 raw seed bytes
    """

    identifier: str
    epoch: int
    required_count: int
    timestamp_s: int
    value: bytes

    @classmethod
    def derive(
        cls,
        identifier: str,
        epoch: int,
        required_count: int,
        timestamp_s: int,
    ) -> SelectionSeed:
        """Derive a seed from its public inputs."""
        return cls(
            identifier=identifier,
            epoch=epoch,
            required_count=required_count,
            timestamp_s=timestamp_s,
            value=derive_selection_seed(identifier, epoch, required_count, timestamp_s),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize seed for logging/transmission."""
        return {
            "identifier": self.identifier,
            "epoch": self.epoch,
            "required_count": self.required_count,
            "timestamp_s": self.timestamp_s,
            "value": to_hex(self.value),
        }


def sample_witnesses(pool: Sequence[T], required_count: int, seed: bytes) -> list[T]:
    """Select required_count distinct elements of pool, driven by seed.

    The caller's pool is never modified; swap-pop removal happens on a
    private copy.

    Args:
        pool: Ordered witness pool
        required_count: Number of elements to select
        seed: Seed bytes, at least 4 long

    Returns:
        Selected elements in draw order.

    Raises:
        ValueError: If required_count is negative.
        InsufficientWitnessesError: If required_count > len(pool).
        InvalidSeedLengthError: If the seed is shorter than 4 bytes, or a
            draw lands where fewer than 4 bytes remain (seed length not a
            multiple of 4).
    """
    if required_count < 0:
        raise ValueError(f"required_count must be non-negative, got {required_count}")
    if required_count > len(pool):
        raise InsufficientWitnessesError(required=required_count, available=len(pool))

    seed_length = len(seed)
    if seed_length < SEED_CHUNK_SIZE:
        raise InvalidSeedLengthError(seed_length)

    available = list(pool)
    selected: list[T] = []
    offset = 0

    for _ in range(required_count):
        if offset + SEED_CHUNK_SIZE > seed_length:
            raise InvalidSeedLengthError(seed_length, offset=offset)

        random_value = int.from_bytes(seed[offset : offset + SEED_CHUNK_SIZE], "big")
        index = random_value % len(available)
        selected.append(available[index])

        # Swap-pop: O(1) removal, order of the remainder does not matter
        available[index] = available[-1]
        available.pop()

        offset = (offset + SEED_CHUNK_SIZE) % seed_length

    return selected


@dataclass(frozen=True)
class WitnessSelectionRecord:
    """Record of a verifiable witness selection.

    Contains everything an external observer needs to confirm the
    selection by re-running the sampler.

    Attributes:
        seed: The seed and the inputs it was derived from
        pool_snapshot: Ordered witness ids at selection time
        selected_ids: Selected witness ids in draw order
        algorithm_version: Selection algorithm version for reproducibility
    """

    seed: SelectionSeed
    pool_snapshot: tuple[str, ...]
    selected_ids: tuple[str, ...]
    algorithm_version: str = field(default=SELECTION_ALGORITHM_VERSION)

    def recompute(self) -> tuple[str, ...]:
        """Re-run the sampler over the recorded seed and pool."""
        return tuple(
            sample_witnesses(
                self.pool_snapshot, self.seed.required_count, self.seed.value
            )
        )

    def verify_selection(self) -> bool:
        """Check the recorded selection against a fresh computation.

        The seed bytes are also re-derived from the recorded inputs, so a
        record whose seed was swapped out does not verify.
        """
        rederived = derive_selection_seed(
            self.seed.identifier,
            self.seed.epoch,
            self.seed.required_count,
            self.seed.timestamp_s,
        )
        if rederived != self.seed.value:
            return False
        return self.recompute() == self.selected_ids

    def to_dict(self) -> dict[str, Any]:
        """Serialize record for storage/transmission."""
        return {
            "seed": self.seed.to_dict(),
            "pool_snapshot": list(self.pool_snapshot),
            "selected_ids": list(self.selected_ids),
            "algorithm_version": self.algorithm_version,
        }
