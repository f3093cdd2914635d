"""
Pytest configuration and shared fixtures for witness beacon tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for signer doubles, WitnessSignerStub for real signatures
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from witness_beacon.domain.models.claim import ClaimInfo
from witness_beacon.domain.models.witness import BeaconState, WitnessMeta


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from witness_beacon import __version__

    return __version__


@pytest.fixture
def golden_claim_info() -> ClaimInfo:
    """The github / userId 42 claim used for golden-value checks."""
    return ClaimInfo(
        provider="github",
        parameters='{"userId":"42"}',
        context_address="0xabc",
        context_message="hello",
    )


@pytest.fixture
def three_witnesses() -> tuple[WitnessMeta, ...]:
    """Pool of w1, w2, w3."""
    return tuple(
        WitnessMeta(id=f"w{i}", url=f"https://w{i}.witness.local") for i in (1, 2, 3)
    )


@pytest.fixture
def five_witnesses() -> tuple[WitnessMeta, ...]:
    """Pool of w1 .. w5."""
    return tuple(
        WitnessMeta(id=f"w{i}", url=f"https://w{i}.witness.local") for i in range(1, 6)
    )


@pytest.fixture
def scenario_state(three_witnesses: tuple[WitnessMeta, ...]) -> BeaconState:
    """Beacon state for the claim1 / epoch 5 / 2-of-3 scenario."""
    return BeaconState(
        witnesses=three_witnesses,
        witnesses_required_for_claim=2,
        epoch=5,
        next_epoch_timestamp_s=0,
    )
