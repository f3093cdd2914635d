"""Witness metadata and beacon state value objects.

Both are read-only snapshots supplied by the ledger layer. The core
never mutates them; selection works on private copies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from witness_beacon.domain.errors.witness_selection import DuplicateWitnessError


@dataclass(frozen=True)
class WitnessMeta:
    """Identity and network address of a witness.

    Attributes:
        id: Witness identifier, unique within a pool
        url: Network address where the witness can be reached
    """

    id: str
    url: str


@dataclass(frozen=True)
class BeaconState:
    """Snapshot of the witness beacon for one epoch.

    Attributes:
        witnesses: Ordered witness pool. Order matters: the same seed
            over a reordered pool selects different witnesses.
        witnesses_required_for_claim: How many witnesses each claim needs
        epoch: Current epoch index
        next_epoch_timestamp_s: Unix time (seconds) when the next epoch starts
    """

    witnesses: tuple[WitnessMeta, ...]
    witnesses_required_for_claim: int
    epoch: int
    next_epoch_timestamp_s: int = 0

    def __post_init__(self) -> None:
        """Freeze the witness sequence into a tuple."""
        if not isinstance(self.witnesses, tuple):
            object.__setattr__(self, "witnesses", tuple(self.witnesses))

    @property
    def witness_ids(self) -> tuple[str, ...]:
        """Ordered ids of the pool."""
        return tuple(w.id for w in self.witnesses)


def ensure_unique_ids(witnesses: Iterable[WitnessMeta]) -> None:
    """Reject pools that contain the same witness id twice.

    Raises:
        DuplicateWitnessError: On the first repeated id.
    """
    seen: set[str] = set()
    for witness in witnesses:
        if witness.id in seen:
            raise DuplicateWitnessError(witness.id)
        seen.add(witness.id)
