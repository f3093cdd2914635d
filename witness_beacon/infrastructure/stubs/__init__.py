"""Infrastructure stubs for development and testing.

Available stubs:
- WitnessSignerStub: In-memory ECDSA secp256k1 signer with failure and
  delay injection
- create_stub_witnesses: Build a witness pool backed by stub signers

WARNING: These stubs are NOT for production use.
"""

from witness_beacon.infrastructure.stubs.witness_signer_stub import (
    WitnessSignerStub,
    create_stub_witnesses,
)

__all__: list[str] = ["WitnessSignerStub", "create_stub_witnesses"]
