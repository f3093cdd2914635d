"""Witness selection domain errors.

Provides specific exception classes for witness selection failures.
Every error carries the offending input as attributes so callers can
report which count, seed or witness caused the failure.
"""

from witness_beacon.domain.exceptions import BeaconError


class WitnessSelectionError(BeaconError):
    """Base class for witness selection errors."""

    pass


class InsufficientWitnessesError(WitnessSelectionError):
    """Raised when more witnesses are required than the pool holds.

    Attributes:
        required: Number of witnesses requested
        available: Number of witnesses in the pool
    """

    def __init__(self, required: int, available: int) -> None:
        """Initialize insufficient witnesses error.

        Args:
            required: Number of witnesses requested
            available: Number of witnesses in the pool
        """
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient witnesses: need {required}, have {available}"
        )


class InvalidSeedLengthError(WitnessSelectionError):
    """Raised when the selection seed cannot supply a 4-byte draw.

    Either the seed is shorter than one draw, or its length is not a
    multiple of 4 and the cursor reached a position where fewer than
    4 bytes remain.

    Attributes:
        seed_length: Length of the seed in bytes
        offset: Cursor position of the failing draw (None if the seed
            was rejected before sampling started)
    """

    def __init__(self, seed_length: int, offset: int | None = None) -> None:
        """Initialize invalid seed length error.

        Args:
            seed_length: Length of the seed in bytes
            offset: Cursor position of the failing draw
        """
        self.seed_length = seed_length
        self.offset = offset

        if offset is None:
            message = f"Seed must be at least 4 bytes, got {seed_length}"
        else:
            message = (
                f"Seed of {seed_length} bytes has no 4-byte chunk at offset {offset}"
            )
        super().__init__(message)


class DuplicateWitnessError(WitnessSelectionError):
    """Raised when a witness id appears more than once in a pool.

    Attributes:
        witness_id: The duplicated witness id
    """

    def __init__(self, witness_id: str) -> None:
        """Initialize duplicate witness error.

        Args:
            witness_id: The duplicated witness id
        """
        self.witness_id = witness_id
        super().__init__(f"Duplicate witness id in pool: {witness_id}")


class WitnessSelectionVerificationError(WitnessSelectionError):
    """Raised when a recorded selection does not reproduce.

    Re-running the sampler with the recorded seed and pool snapshot gave
    a different ordered selection. This may indicate:
    1. Tampering with the selection record
    2. Algorithm implementation mismatch
    3. Data corruption

    Attributes:
        expected: Witness ids recorded in the selection
        computed: Witness ids computed from the seed
    """

    def __init__(
        self,
        expected: tuple[str, ...],
        computed: tuple[str, ...],
    ) -> None:
        """Initialize verification error.

        Args:
            expected: Witness ids recorded in the selection
            computed: Witness ids computed by verification
        """
        self.expected = expected
        self.computed = computed
        super().__init__(
            f"Witness selection verification failed - "
            f"expected {list(expected)}, computed {list(computed)}"
        )
