"""Encoding errors raised while serializing claim and seed inputs."""

from witness_beacon.domain.exceptions import BeaconError


class EncodingError(BeaconError):
    """Raised when an input cannot be canonically serialized or decoded.

    Claim identifiers and selection seeds are only reproducible across
    implementations if every input has exactly one byte encoding. Any
    field that breaks that (wrong type, invalid hex, negative counter)
    fails fast here instead of producing a divergent hash.

    Attributes:
        field: Name of the offending input field
        reason: What was wrong with it
    """

    def __init__(self, field: str, reason: str) -> None:
        """Initialize encoding error.

        Args:
            field: Name of the offending input field
            reason: What was wrong with it
        """
        self.field = field
        self.reason = reason
        super().__init__(f"Cannot encode {field}: {reason}")
