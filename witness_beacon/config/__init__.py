"""Configuration module for witness beacon.

Available Configurations:
- SigningConfig: Per-witness signing timeout for signature collection
"""

from witness_beacon.config.signing_config import (
    DEFAULT_SIGNING_CONFIG,
    TEST_SIGNING_CONFIG,
    UNBOUNDED_SIGNING_CONFIG,
    SigningConfig,
)

__all__ = [
    "SigningConfig",
    "DEFAULT_SIGNING_CONFIG",
    "TEST_SIGNING_CONFIG",
    "UNBOUNDED_SIGNING_CONFIG",
]
