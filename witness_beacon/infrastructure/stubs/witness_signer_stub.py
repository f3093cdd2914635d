"""Witness signer stub for development and testing.

Signs with an in-memory ECDSA secp256k1 key generated at construction.
The key never leaves the process and is lost when it exits.

WARNING: This stub is NOT for production use. Production witnesses sign
on their own nodes or behind an HSM.
"""

from __future__ import annotations

import asyncio
import warnings

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from witness_beacon.application.ports.witness_signer import (
    WitnessSigner,
    WitnessSignerProtocol,
)

# DEV MODE warning prefix
DEV_MODE_WARNING = "[DEV MODE] WitnessSignerStub in use - NOT FOR PRODUCTION"


class WitnessSignerStub(WitnessSignerProtocol):
    """Stub implementation of WitnessSignerProtocol for testing.

    Features:
    - Real ECDSA secp256k1 signatures (DER encoded, SHA-256 digest)
    - Failure simulation for error path testing
    - Artificial delay for timeout and concurrency testing
    - Records every message it was asked to sign

    Example:
        stub = WitnessSignerStub(warn_on_init=False)
        signature = await stub.sign(b"claim")

        stub.set_failure(True, reason="key locked")
        await stub.sign(b"claim")  # Raises RuntimeError
    """

    def __init__(self, warn_on_init: bool = True) -> None:
        """Initialize the stub with a fresh key.

        Args:
            warn_on_init: If True, emit DEV MODE warning (default True)
        """
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)

        self._private_key = ec.generate_private_key(ec.SECP256K1())
        self._should_fail = False
        self._failure_reason: str | None = None
        self._delay_seconds = 0.0
        self._signed_messages: list[bytes] = []

    async def sign(self, message: bytes) -> bytes:
        """Sign message with the stub key.

        Raises:
            RuntimeError: If failure simulation is enabled.
        """
        if self._delay_seconds:
            await asyncio.sleep(self._delay_seconds)

        if self._should_fail:
            raise RuntimeError(self._failure_reason or "Simulated signing failure")

        self._signed_messages.append(message)
        return self._private_key.sign(message, ec.ECDSA(hashes.SHA256()))

    @property
    def public_key(self) -> ec.EllipticCurvePublicKey:
        """Public half of the stub key, for verifying in tests."""
        return self._private_key.public_key()

    # Test control methods

    def set_failure(self, should_fail: bool, reason: str | None = None) -> None:
        """Configure failure simulation.

        Args:
            should_fail: If True, sign() raises RuntimeError
            reason: Optional message for the raised error
        """
        self._should_fail = should_fail
        self._failure_reason = reason

    def set_delay(self, seconds: float) -> None:
        """Delay every sign() call by the given number of seconds."""
        self._delay_seconds = seconds

    def reset(self) -> None:
        """Reset failure, delay and call history. The key is kept."""
        self._should_fail = False
        self._failure_reason = None
        self._delay_seconds = 0.0
        self._signed_messages.clear()

    @property
    def signed_messages(self) -> tuple[bytes, ...]:
        """Messages signed so far (for test assertions)."""
        return tuple(self._signed_messages)

    @property
    def call_count(self) -> int:
        """Number of successful sign() calls."""
        return len(self._signed_messages)


def create_stub_witnesses(
    count: int,
    id_prefix: str = "w",
    url_template: str = "https://{id}.witness.local",
) -> list[WitnessSigner]:
    """Build a pool of witnesses backed by stub signers.

    Ids are ``{id_prefix}1`` .. ``{id_prefix}{count}``.

    Args:
        count: Number of witnesses
        id_prefix: Prefix for generated witness ids
        url_template: URL format, ``{id}`` is replaced with the witness id

    Returns:
        Witnesses in id order, each with its own WitnessSignerStub.
    """
    witnesses = []
    for i in range(1, count + 1):
        witness_id = f"{id_prefix}{i}"
        witnesses.append(
            WitnessSigner(
                id=witness_id,
                url=url_template.format(id=witness_id),
                signer=WitnessSignerStub(warn_on_init=False),
            )
        )
    return witnesses
