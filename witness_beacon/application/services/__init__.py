"""Application services - Use case orchestration.

Available services:
- WitnessSelectionService: Deterministic witness selection and verification
- SignatureCollectionService: Concurrent signing by the selected witnesses
"""

from witness_beacon.application.services.signature_collection_service import (
    SignatureCollectionService,
    WitnessSelectionConfig,
    witness_select_sign_message,
)
from witness_beacon.application.services.witness_selection_service import (
    WitnessSelectionService,
    derive_seed_for_claim,
    fetch_witness_list_for_claim,
    resolve_identifier,
    select_with_seed,
)

__all__ = [
    "SignatureCollectionService",
    "WitnessSelectionConfig",
    "WitnessSelectionService",
    "derive_seed_for_claim",
    "fetch_witness_list_for_claim",
    "resolve_identifier",
    "select_with_seed",
    "witness_select_sign_message",
]
