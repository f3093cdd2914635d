"""Signature collection configuration.

Defines the per-witness signing timeout with an environment variable
override for production tuning.

Environment Variables:
- WITNESS_SIGNING_TIMEOUT_SECONDS: Per-call signing timeout in seconds
  (default: 30.0). Zero or a negative value disables the timeout.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_SIGNING_TIMEOUT_SECONDS = 30.0


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SigningConfig:
    """Configuration for concurrent signature collection.

    Attributes:
        timeout_seconds: Maximum time a single witness may take to sign.
                         None disables the timeout. Default: 30 seconds.
    """

    timeout_seconds: float | None = DEFAULT_SIGNING_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError(
                f"timeout_seconds must be positive or None, got {self.timeout_seconds}"
            )

    @classmethod
    def from_environment(cls) -> SigningConfig:
        """Create config from environment variables with defaults.

        Environment Variables:
            WITNESS_SIGNING_TIMEOUT_SECONDS: Timeout seconds (default: 30.0,
                <= 0 disables)

        Returns:
            SigningConfig with values from environment or defaults.
        """
        timeout = _get_float_env(
            "WITNESS_SIGNING_TIMEOUT_SECONDS", DEFAULT_SIGNING_TIMEOUT_SECONDS
        )
        return cls(timeout_seconds=timeout if timeout > 0 else None)


# Default production config
DEFAULT_SIGNING_CONFIG = SigningConfig()

# Testing config with a short timeout for unit tests
TEST_SIGNING_CONFIG = SigningConfig(timeout_seconds=0.5)

# No timeout, for callers that impose their own deadline
UNBOUNDED_SIGNING_CONFIG = SigningConfig(timeout_seconds=None)
