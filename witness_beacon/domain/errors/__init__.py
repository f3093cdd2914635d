"""Domain errors for witness beacon.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from BeaconError.
"""

from witness_beacon.domain.errors.encoding import EncodingError
from witness_beacon.domain.errors.signing import SigningError, SigningTimeoutError
from witness_beacon.domain.errors.witness_selection import (
    DuplicateWitnessError,
    InsufficientWitnessesError,
    InvalidSeedLengthError,
    WitnessSelectionError,
    WitnessSelectionVerificationError,
)

__all__: list[str] = [
    "DuplicateWitnessError",
    "EncodingError",
    "InsufficientWitnessesError",
    "InvalidSeedLengthError",
    "SigningError",
    "SigningTimeoutError",
    "WitnessSelectionError",
    "WitnessSelectionVerificationError",
]
