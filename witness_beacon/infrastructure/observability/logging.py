"""Structured logging configuration with structlog.

Production renders one JSON object per line for log aggregation;
development renders colored console output. Every entry is tagged with
``service="witness-beacon"`` so selection and signing events can be told
apart from the host application's own logs.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "service": "witness-beacon",
        "event": "witness_selection_completed",
        "correlation_id": "uuid",
        ...additional context
    }

Environment Variables:
- LOG_LEVEL: Minimum level (default: INFO)
- WITNESS_BEACON_ENV: Environment used when none is passed (default: production)

Usage:
    from witness_beacon.infrastructure.observability import configure_structlog

    configure_structlog()

    import structlog
    log = structlog.get_logger()
    log.info("event_name", key="value")
"""

from __future__ import annotations

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from witness_beacon.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

ENVIRONMENT_ENV = "WITNESS_BEACON_ENV"
DEFAULT_ENVIRONMENT = "production"

SERVICE_NAME = "witness-beacon"


def _get_log_level() -> int:
    """Get the configured log level from the environment."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def _add_service_name(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_structlog(environment: str | None = None) -> None:
    """Configure structlog for the process.

    Call once at startup, before the services log anything.

    Args:
        environment: 'production' for JSON output, anything else for
                    colored console output. Read from WITNESS_BEACON_ENV
                    when omitted.
    """
    if environment is None:
        environment = os.getenv(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)

    shared_processors: list[Processor] = [
        # Picks up structlog.contextvars.bound_contextvars(...) bindings
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, _add_service_name),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        # Tracebacks become a string field instead of breaking the JSON line
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
