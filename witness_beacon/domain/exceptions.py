"""Base exception classes for the witness beacon domain layer."""


class BeaconError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class so that
    callers can handle every beacon failure with a single except clause.

    Subclasses:
    - EncodingError
    - WitnessSelectionError (and its subclasses)
    - SigningError (and SigningTimeoutError)
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
