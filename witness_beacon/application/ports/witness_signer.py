"""Witness signer port definition.

Defines the abstract signing capability held by each witness. The key
material (local key, HSM, remote witness node) lives behind this port;
the core only ever asks for a signature over a message.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from witness_beacon.domain.models.witness import WitnessMeta


class WitnessSignerProtocol(ABC):
    """Abstract protocol for a witness's signing capability.

    Production implementations may include:
    - A remote witness node reached over its URL
    - A local wallet/key for tests and devnets
    - An HSM-backed key

    Development/Testing:
    - WitnessSignerStub: ECDSA secp256k1 key generated in memory
    """

    @abstractmethod
    async def sign(self, message: bytes) -> bytes:
        """Sign a message.

        Args:
            message: The raw bytes to sign.

        Returns:
            The signature bytes.

        Raises:
            Exception: Any failure. The collector wraps it in a
                SigningError naming the witness.
        """
        ...


@dataclass(frozen=True)
class WitnessSigner:
    """A witness together with its signing capability.

    Attributes:
        id: Witness identifier, unique within a pool
        url: Network address of the witness
        signer: The witness's signing capability
    """

    id: str
    url: str
    signer: WitnessSignerProtocol

    @property
    def meta(self) -> WitnessMeta:
        """Identity-only view used for selection."""
        return WitnessMeta(id=self.id, url=self.url)


@dataclass(frozen=True)
class WitnessSignature:
    """A signature collected from one selected witness.

    Attributes:
        witness_id: The witness that produced the signature
        signature: The signature bytes returned by its signer
    """

    witness_id: str
    signature: bytes

    def to_hex(self) -> str:
        """Signature as ``0x``-prefixed hex, as the ledger layer submits it."""
        return "0x" + self.signature.hex()
