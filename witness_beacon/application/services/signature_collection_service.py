"""Signature collection service.

Selects the witnesses for a claim and collects a signature from each of
them concurrently. Only selected witnesses are ever asked to sign.

Architecture Pattern:
    collect(witnesses, message, epoch, timestamp_s, required_count, identifier):
      ├─ BeaconState from (id, url) of every witness
      ├─ WitnessSelectionService.select()   # deterministic subset
      ├─ map selected ids back to WitnessSigner records
      ├─ asyncio.gather                     # one sign() per selected witness
      │   └─ asyncio.timeout(timeout): signer.sign(message)
      └─ return signatures in selection order

Failure policy: the first signer failure cancels the outstanding calls
and is raised as SigningError naming the witness. No partial results.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Sequence
from dataclasses import dataclass

from structlog import get_logger
from structlog.contextvars import bound_contextvars

from witness_beacon.application.ports.witness_signer import (
    WitnessSignature,
    WitnessSigner,
)
from witness_beacon.application.services.witness_selection_service import (
    WitnessSelectionService,
)
from witness_beacon.config.signing_config import DEFAULT_SIGNING_CONFIG, SigningConfig
from witness_beacon.domain.errors.signing import SigningError, SigningTimeoutError
from witness_beacon.domain.models.witness import BeaconState

logger = get_logger()


@dataclass(frozen=True)
class WitnessSelectionConfig:
    """Inputs for selecting witnesses and signing one message.

    Attributes:
        witnesses: Full witness pool with signing capabilities, in pool order
        message: Message every selected witness signs
        epoch_index: Epoch the claim belongs to
        timestamp: Claim timestamp in seconds
        minimum_witnesses_for_claim: Number of witnesses to select
        identifier: Claim identifier
    """

    witnesses: tuple[WitnessSigner, ...]
    message: bytes
    epoch_index: int
    timestamp: int
    minimum_witnesses_for_claim: int
    identifier: str


class SignatureCollectionService:
    """Service for collecting signatures from selected witnesses.

    Attributes:
        _config: Signing timeout configuration.
        _selection: Witness selection service.
    """

    def __init__(
        self,
        config: SigningConfig | None = None,
        selection_service: WitnessSelectionService | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Signing configuration (uses DEFAULT_SIGNING_CONFIG if omitted).
            selection_service: Selection service (a fresh one if omitted).
        """
        self._config = config or DEFAULT_SIGNING_CONFIG
        self._selection = selection_service or WitnessSelectionService()

    def select_signers(
        self,
        witnesses: Sequence[WitnessSigner],
        epoch: int,
        timestamp_s: int,
        required_count: int,
        identifier: str,
    ) -> list[WitnessSigner]:
        """Select the witnesses that must sign, keeping their signers.

        Returns:
            The caller's WitnessSigner records, in selection order.
        """
        state = BeaconState(
            witnesses=tuple(w.meta for w in witnesses),
            witnesses_required_for_claim=required_count,
            epoch=epoch,
        )
        selected = self._selection.select(state, identifier, timestamp_s)

        # Ids are unique at this point; selection already rejected duplicates
        by_id = {w.id: w for w in witnesses}
        return [by_id[meta.id] for meta in selected]

    async def collect(
        self,
        witnesses: Sequence[WitnessSigner],
        message: bytes,
        epoch: int,
        timestamp_s: int,
        required_count: int,
        identifier: str,
    ) -> list[WitnessSignature]:
        """Select witnesses for a claim and collect their signatures.

        Args:
            witnesses: Full witness pool with signing capabilities
            message: Message to sign
            epoch: Epoch index
            timestamp_s: Claim timestamp in seconds
            required_count: Number of witnesses to select
            identifier: Claim identifier

        Returns:
            One WitnessSignature per selected witness, in selection order.

        Raises:
            EncodingError: If the seed inputs cannot be encoded.
            WitnessSelectionError: If the pool cannot satisfy the selection.
            SigningError: If any selected witness fails to sign.
            SigningTimeoutError: If any selected witness exceeds the timeout.
        """
        selected = self.select_signers(
            witnesses, epoch, timestamp_s, required_count, identifier
        )
        start_ms = time.monotonic() * 1000

        # Tasks copy the current context, so their log lines carry these too
        with bound_contextvars(identifier=identifier, epoch=epoch):
            logger.info(
                "signature_collection_started",
                selected=[w.id for w in selected],
                timeout_seconds=self._config.timeout_seconds,
            )

            tasks = [
                asyncio.ensure_future(self._sign_one(witness, message))
                for witness in selected
            ]
            try:
                signatures = await asyncio.gather(*tasks)
            except SigningError as e:
                for task in tasks:
                    task.cancel()
                # Drain the cancelled and failed tasks so none is left unretrieved
                await asyncio.gather(*tasks, return_exceptions=True)
                logger.error(
                    "signature_collection_aborted",
                    witness_id=e.witness_id,
                    error=str(e),
                )
                raise

            logger.info(
                "signature_collection_completed",
                signature_count=len(signatures),
                total_ms=int(time.monotonic() * 1000 - start_ms),
            )
        return list(signatures)

    async def _sign_one(
        self,
        witness: WitnessSigner,
        message: bytes,
    ) -> WitnessSignature:
        """Ask a single witness to sign, mapping failures to SigningError."""
        timeout = self._config.timeout_seconds
        deadline: asyncio.Timeout | None = None
        try:
            if timeout is None:
                signature = await witness.signer.sign(message)
            else:
                async with asyncio.timeout(timeout) as deadline:
                    signature = await witness.signer.sign(message)
        except TimeoutError as e:
            # Only an expired deadline is ours; anything else came from the signer
            if timeout is not None and deadline is not None and deadline.expired():
                logger.warning("witness_signing_timed_out", witness_id=witness.id)
                raise SigningTimeoutError(witness.id, timeout) from e
            logger.warning(
                "witness_signing_failed",
                witness_id=witness.id,
                error="signer raised TimeoutError",
            )
            raise SigningError(witness.id, "signer raised TimeoutError") from e
        except Exception as e:
            logger.warning(
                "witness_signing_failed",
                witness_id=witness.id,
                error=str(e),
            )
            raise SigningError(witness.id, str(e) or type(e).__name__) from e

        return WitnessSignature(witness_id=witness.id, signature=signature)


async def witness_select_sign_message(
    config: WitnessSelectionConfig,
    service: SignatureCollectionService | None = None,
) -> list[WitnessSignature]:
    """Select witnesses and collect signatures from a bundled config.

    Args:
        config: Witness pool, message and claim inputs.
        service: Collection service to use (default-configured if omitted).

    Returns:
        Signatures in selection order.
    """
    service = service or SignatureCollectionService()
    return await service.collect(
        witnesses=config.witnesses,
        message=config.message,
        epoch=config.epoch_index,
        timestamp_s=config.timestamp,
        required_count=config.minimum_witnesses_for_claim,
        identifier=config.identifier,
    )
