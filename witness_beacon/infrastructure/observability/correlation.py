"""Correlation ID management for tracing a claim across log lines.

The correlation ID lives in a ContextVar so it follows a request across
await points. A selection or signing run started inside
``correlation_scope`` tags every log entry it emits with the same ID,
which makes one claim's fan-out easy to pick out of interleaved logs.

Usage:
    with correlation_scope(claim_id):
        signatures = await service.collect(...)

    # In structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means "not set"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID, or an empty string if not set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current context."""
    _correlation_id.set(correlation_id)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Set a correlation ID for the duration of a block.

    The previous value is restored on exit, including on error.

    Args:
        correlation_id: ID to use; a fresh UUID4 if omitted.

    Yields:
        The active correlation ID.
    """
    active = correlation_id or generate_correlation_id()
    token = _correlation_id.set(active)
    try:
        yield active
    finally:
        _correlation_id.reset(token)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id to every log entry.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary, with correlation_id when one is set.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
