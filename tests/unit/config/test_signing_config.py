"""Unit tests for SigningConfig.

Tests the per-witness timeout and its environment override.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from witness_beacon.config.signing_config import (
    DEFAULT_SIGNING_CONFIG,
    DEFAULT_SIGNING_TIMEOUT_SECONDS,
    TEST_SIGNING_CONFIG,
    UNBOUNDED_SIGNING_CONFIG,
    SigningConfig,
)


class TestSigningConfig:
    """Tests for SigningConfig dataclass."""

    def test_default_timeout_is_30_seconds(self) -> None:
        """Default timeout should be 30 seconds."""
        config = SigningConfig()
        assert config.timeout_seconds == 30.0
        assert config.timeout_seconds == DEFAULT_SIGNING_TIMEOUT_SECONDS

    def test_none_disables_timeout(self) -> None:
        """None is accepted and means no timeout."""
        assert SigningConfig(timeout_seconds=None).timeout_seconds is None

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_non_positive_timeout_raises(self, timeout: float) -> None:
        """Zero and negative timeouts are rejected."""
        with pytest.raises(ValueError) as exc_info:
            SigningConfig(timeout_seconds=timeout)

        assert "timeout_seconds must be positive" in str(exc_info.value)

    def test_config_is_frozen(self) -> None:
        """Config should be immutable."""
        with pytest.raises(AttributeError):
            DEFAULT_SIGNING_CONFIG.timeout_seconds = 1.0  # type: ignore[misc]

    def test_presets(self) -> None:
        """Preset configs carry their documented timeouts."""
        assert DEFAULT_SIGNING_CONFIG.timeout_seconds == 30.0
        assert TEST_SIGNING_CONFIG.timeout_seconds == 0.5
        assert UNBOUNDED_SIGNING_CONFIG.timeout_seconds is None


class TestSigningConfigFromEnvironment:
    """Tests for SigningConfig.from_environment."""

    def test_defaults_when_unset(self) -> None:
        """Missing variable falls back to the default timeout."""
        with patch.dict(os.environ, {}, clear=True):
            config = SigningConfig.from_environment()
        assert config.timeout_seconds == DEFAULT_SIGNING_TIMEOUT_SECONDS

    def test_reads_timeout(self) -> None:
        """A numeric value overrides the timeout."""
        with patch.dict(os.environ, {"WITNESS_SIGNING_TIMEOUT_SECONDS": "2.5"}):
            config = SigningConfig.from_environment()
        assert config.timeout_seconds == 2.5

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_non_positive_disables_timeout(self, value: str) -> None:
        """Zero or negative values disable the timeout."""
        with patch.dict(os.environ, {"WITNESS_SIGNING_TIMEOUT_SECONDS": value}):
            config = SigningConfig.from_environment()
        assert config.timeout_seconds is None

    def test_invalid_value_uses_default(self) -> None:
        """Non-numeric values fall back to the default."""
        with patch.dict(os.environ, {"WITNESS_SIGNING_TIMEOUT_SECONDS": "soon"}):
            config = SigningConfig.from_environment()
        assert config.timeout_seconds == DEFAULT_SIGNING_TIMEOUT_SECONDS
