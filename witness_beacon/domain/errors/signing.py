"""Signing errors raised while collecting witness signatures."""

from witness_beacon.domain.exceptions import BeaconError


class SigningError(BeaconError):
    """Raised when a selected witness fails to sign.

    A single failure aborts the whole collection; no partial set of
    signatures is ever returned.

    Attributes:
        witness_id: The witness whose signer failed
        reason: Description of the underlying failure
    """

    def __init__(self, witness_id: str, reason: str) -> None:
        """Initialize signing error.

        Args:
            witness_id: The witness whose signer failed
            reason: Description of the underlying failure
        """
        self.witness_id = witness_id
        self.reason = reason
        super().__init__(f"Witness {witness_id} failed to sign: {reason}")


class SigningTimeoutError(SigningError):
    """Raised when a selected witness does not sign within the timeout.

    Attributes:
        witness_id: The witness that timed out
        timeout_seconds: The per-call timeout that elapsed
    """

    def __init__(self, witness_id: str, timeout_seconds: float) -> None:
        """Initialize signing timeout error.

        Args:
            witness_id: The witness that timed out
            timeout_seconds: The per-call timeout that elapsed
        """
        self.timeout_seconds = timeout_seconds
        super().__init__(witness_id, f"timed out after {timeout_seconds}s")
