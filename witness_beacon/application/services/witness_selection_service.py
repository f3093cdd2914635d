"""Deterministic witness selection service.

Resolves a claim identifier, derives the selection seed and samples the
witness pool. Every step is a pure function of public inputs, so any
server, client or auditor running this code over the same beacon state
arrives at the same witnesses in the same order.

Architecture Pattern:
    fetch_witness_list_for_claim(state, params, timestamp_s):
      ├─ resolve_identifier(params)     # str passes through, ClaimInfo is hashed
      ├─ SelectionSeed.derive(...)      # Keccak-256 over the public inputs
      └─ select_with_seed(state, seed)  # sample_witnesses(pool, k, seed.value)

The service derives each seed once and samples with that same seed, so an
audit record always holds the exact seed its selection came from.
"""

from __future__ import annotations

from structlog import get_logger

from witness_beacon.domain.errors.witness_selection import (
    WitnessSelectionVerificationError,
)
from witness_beacon.domain.exceptions import BeaconError
from witness_beacon.domain.models.claim import ClaimInfo, hash_claim_info
from witness_beacon.domain.models.witness import (
    BeaconState,
    WitnessMeta,
    ensure_unique_ids,
)
from witness_beacon.domain.models.witness_selection import (
    SelectionSeed,
    WitnessSelectionRecord,
    sample_witnesses,
)

logger = get_logger()


def resolve_identifier(params: str | ClaimInfo) -> str:
    """Return the claim identifier for params.

    A string is taken as an already-computed identifier and used
    verbatim; a ClaimInfo is hashed.
    """
    if isinstance(params, str):
        return params
    return hash_claim_info(params)


def derive_seed_for_claim(
    state: BeaconState,
    params: str | ClaimInfo,
    timestamp_s: int,
) -> SelectionSeed:
    """Derive the selection seed for a claim against a beacon state."""
    return SelectionSeed.derive(
        identifier=resolve_identifier(params),
        epoch=state.epoch,
        required_count=state.witnesses_required_for_claim,
        timestamp_s=timestamp_s,
    )


def fetch_witness_list_for_claim(
    state: BeaconState,
    params: str | ClaimInfo,
    timestamp_s: int,
) -> list[WitnessMeta]:
    """Compute the witnesses that must attest a claim.

    Args:
        state: Beacon state holding the ordered pool, epoch and required count
        params: Claim identifier or the claim metadata to hash into one
        timestamp_s: Claim timestamp in seconds

    Returns:
        Selected witnesses in selection order.

    Raises:
        EncodingError: If the claim or seed inputs cannot be encoded.
        DuplicateWitnessError: If the pool repeats a witness id.
        InsufficientWitnessesError: If the pool is smaller than the
            required count.
    """
    return select_with_seed(state, derive_seed_for_claim(state, params, timestamp_s))


def select_with_seed(state: BeaconState, seed: SelectionSeed) -> list[WitnessMeta]:
    """Sample the pool of state with an already derived seed.

    The draw count is taken from the seed, so a record built from the
    same seed recomputes exactly this selection.

    Raises:
        DuplicateWitnessError: If the pool repeats a witness id.
        InsufficientWitnessesError: If the pool is smaller than the
            required count.
    """
    ensure_unique_ids(state.witnesses)
    return sample_witnesses(state.witnesses, seed.required_count, seed.value)


class WitnessSelectionService:
    """Service for deterministic, verifiable witness selection.

    Wraps the pure selection pipeline with structured logging and audit
    records. Holds no state between calls.

    Example:
        service = WitnessSelectionService()

        witnesses = service.select(state, claim_info, timestamp_s=1700000000)

        record = service.select_with_record(state, claim_info, 1700000000)
        service.verify_selection(record)
    """

    def select(
        self,
        state: BeaconState,
        params: str | ClaimInfo,
        timestamp_s: int,
    ) -> list[WitnessMeta]:
        """Select the witnesses for a claim.

        Raises:
            EncodingError: If the claim or seed inputs cannot be encoded.
            WitnessSelectionError: If the pool cannot satisfy the selection.
        """
        _, selected = self._select_seeded(state, params, timestamp_s)
        return selected

    def _select_seeded(
        self,
        state: BeaconState,
        params: str | ClaimInfo,
        timestamp_s: int,
    ) -> tuple[SelectionSeed, list[WitnessMeta]]:
        """Derive the seed once and sample with it, logging the outcome."""
        identifier = resolve_identifier(params)
        log = logger.bind(
            identifier=identifier,
            epoch=state.epoch,
            required_count=state.witnesses_required_for_claim,
            pool_size=len(state.witnesses),
        )

        try:
            seed = derive_seed_for_claim(state, identifier, timestamp_s)
            selected = select_with_seed(state, seed)
        except BeaconError as e:
            log.warning("witness_selection_failed", error=str(e))
            raise

        log.info("witness_selection_completed", selected=[w.id for w in selected])
        return seed, selected

    def select_with_record(
        self,
        state: BeaconState,
        params: str | ClaimInfo,
        timestamp_s: int,
    ) -> WitnessSelectionRecord:
        """Select witnesses and return an audit record of the selection."""
        seed, selected = self._select_seeded(state, params, timestamp_s)
        return WitnessSelectionRecord(
            seed=seed,
            pool_snapshot=state.witness_ids,
            selected_ids=tuple(w.id for w in selected),
        )

    def verify_selection(self, record: WitnessSelectionRecord) -> bool:
        """Verify that a selection record reproduces.

        Returns:
            True if the selection is valid.

        Raises:
            WitnessSelectionVerificationError: If verification fails.
        """
        if record.verify_selection():
            return True

        computed = record.recompute()
        logger.warning(
            "witness_selection_verification_failed",
            identifier=record.seed.identifier,
            expected=list(record.selected_ids),
            computed=list(computed),
        )
        raise WitnessSelectionVerificationError(
            expected=record.selected_ids,
            computed=computed,
        )
