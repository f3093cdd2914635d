"""Domain models for witness beacon.

Immutable value objects: claim metadata, witness pool snapshots,
selection seeds and selection records.
"""

from witness_beacon.domain.models.claim import ClaimID, ClaimInfo, hash_claim_info
from witness_beacon.domain.models.witness import BeaconState, WitnessMeta
from witness_beacon.domain.models.witness_selection import (
    SELECTION_ALGORITHM_VERSION,
    SelectionSeed,
    WitnessSelectionRecord,
    derive_selection_seed,
    sample_witnesses,
)

__all__: list[str] = [
    "SELECTION_ALGORITHM_VERSION",
    "BeaconState",
    "ClaimID",
    "ClaimInfo",
    "SelectionSeed",
    "WitnessMeta",
    "WitnessSelectionRecord",
    "derive_selection_seed",
    "hash_claim_info",
    "sample_witnesses",
]
