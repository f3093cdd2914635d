"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- WitnessSignerProtocol: Signing capability held by each witness
"""

from witness_beacon.application.ports.witness_signer import (
    WitnessSignature,
    WitnessSigner,
    WitnessSignerProtocol,
)

__all__: list[str] = ["WitnessSignature", "WitnessSigner", "WitnessSignerProtocol"]
