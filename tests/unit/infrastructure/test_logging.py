"""Unit tests for structured logging configuration.

Tests the structlog configuration and logging output format.
"""

import json
import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog
from structlog.contextvars import bound_contextvars

from witness_beacon.infrastructure.observability.correlation import correlation_scope
from witness_beacon.infrastructure.observability.logging import configure_structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


def _has_processor(kind: type) -> bool:
    processors = structlog.get_config().get("processors", [])
    return any(isinstance(p, kind) for p in processors)


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_production_mode(self) -> None:
        """Production mode renders JSON."""
        configure_structlog(environment="production")
        assert _has_processor(structlog.processors.JSONRenderer)

    def test_configure_development_mode(self) -> None:
        """Development mode renders to the console."""
        configure_structlog(environment="development")
        assert _has_processor(structlog.dev.ConsoleRenderer)
        assert not _has_processor(structlog.processors.JSONRenderer)

    def test_configure_defaults_to_production(self) -> None:
        """Default environment is production."""
        with patch.dict(os.environ, {}, clear=True):
            configure_structlog()
        assert _has_processor(structlog.processors.JSONRenderer)

    def test_environment_from_variable(self) -> None:
        """WITNESS_BEACON_ENV selects the environment when none is passed."""
        with patch.dict(os.environ, {"WITNESS_BEACON_ENV": "development"}):
            configure_structlog()
        assert _has_processor(structlog.dev.ConsoleRenderer)

    def test_explicit_environment_wins(self) -> None:
        """An explicit environment overrides WITNESS_BEACON_ENV."""
        with patch.dict(os.environ, {"WITNESS_BEACON_ENV": "development"}):
            configure_structlog(environment="production")
        assert _has_processor(structlog.processors.JSONRenderer)


class TestLogOutput:
    """Tests for actual log output format."""

    @pytest.fixture(autouse=True)
    def setup_production_logging(self) -> None:
        """Set up production logging for output tests."""
        with patch.dict(os.environ, {"LOG_LEVEL": "INFO"}):
            configure_structlog(environment="production")

    def _read_entry(self, capsys: pytest.CaptureFixture[str]) -> dict:
        output = capsys.readouterr().out.strip()
        return json.loads(output.splitlines()[-1])

    def test_json_output_structure(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Log output is one JSON object with the standard fields."""
        with correlation_scope("test-json-output"):
            structlog.get_logger().info("test_event", custom_field="value")

        entry = self._read_entry(capsys)
        assert entry["event"] == "test_event"
        assert entry["level"] == "info"
        assert entry["service"] == "witness-beacon"
        assert "T" in entry["timestamp"]
        assert entry["correlation_id"] == "test-json-output"
        assert entry["custom_field"] == "value"

    def test_no_correlation_id_outside_scope(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Entries logged outside a scope carry no correlation_id."""
        structlog.get_logger().info("unscoped_event")

        entry = self._read_entry(capsys)
        assert "correlation_id" not in entry

    def test_bound_contextvars_are_merged(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Context bound with bound_contextvars appears in entries."""
        with bound_contextvars(identifier="claim1", epoch=5):
            structlog.get_logger().info("selection_test")

        entry = self._read_entry(capsys)
        assert entry["identifier"] == "claim1"
        assert entry["epoch"] == 5

    def test_debug_filtered_at_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Debug entries are dropped at INFO level."""
        structlog.get_logger().debug("hidden_event")
        assert capsys.readouterr().out.strip() == ""


class TestLogLevelConfiguration:
    """Tests for log level configuration."""

    def test_log_level_from_environment(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """LOG_LEVEL=DEBUG lets debug entries through."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            configure_structlog(environment="production")

        structlog.get_logger().debug("debug_level_test")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["event"] == "debug_level_test"
        assert entry["level"] == "debug"

    def test_unknown_level_falls_back_to_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unknown LOG_LEVEL behaves like INFO."""
        with patch.dict(os.environ, {"LOG_LEVEL": "CHATTY"}):
            configure_structlog(environment="production")

        log = structlog.get_logger()
        log.debug("hidden_event")
        log.info("visible_event")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["event"] == "visible_event"


class TestExceptionRendering:
    """Tests for exception output in production."""

    def test_exception_rendered_as_field(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Tracebacks are rendered into the JSON entry."""
        configure_structlog(environment="production")

        try:
            raise RuntimeError("signer offline")
        except RuntimeError:
            structlog.get_logger().exception("signing_crashed")

        entry = json.loads(capsys.readouterr().out.strip())
        assert entry["event"] == "signing_crashed"
        assert "RuntimeError: signer offline" in entry["exception"]
