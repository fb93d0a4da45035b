"""
core/config.py - Central settings

Console defaults with environment variable overrides.

Usage:
    from ddbconsole.core.config import settings, get_default_region

    region = get_default_region()       # "us-east-1" unless AWS_DEFAULT_REGION is set
    page_size = settings.PAGE_SIZE      # DDBCONSOLE_PAGE_SIZE or 50
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ddbconsole import __version__

FALLBACK_REGION = "us-east-1"


# =============================================================================
# Environment helpers
# =============================================================================


def get_env_int(name: str, default: int, minimum: int | None = None) -> int:
    """Read an integer environment variable.

    Args:
        name: Variable name
        default: Value used when unset or not an integer
        minimum: Values below this also fall back to default

    Returns:
        Parsed integer or default
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def get_env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean environment variable ("1", "true", "yes", "on")."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def get_default_region() -> str:
    """Region used at startup when --region is not given."""
    return os.environ.get("AWS_DEFAULT_REGION") or os.environ.get("AWS_REGION") or FALLBACK_REGION


def get_default_profile() -> str | None:
    """AWS profile from AWS_PROFILE, if any."""
    return os.environ.get("AWS_PROFILE") or None


def get_version() -> str:
    return __version__


# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """Console settings (immutable)

    Attributes:
        PAGE_SIZE: Items requested per scan page
        POLL_INTERVAL_MS: Keyboard poll timeout of the main loop
        LOG_CAPACITY: Entries kept by the in-memory activity log
        DEFAULT_CAPACITY_UNITS: Fallback read/write units for provisioned tables
        TABLE_NAME_MIN: Minimum table name length
        TABLE_NAME_MAX: Maximum table name length
        DEBUG: Verbose logging
    """

    PAGE_SIZE: int = 50
    POLL_INTERVAL_MS: int = 100
    LOG_CAPACITY: int = 500
    DEFAULT_CAPACITY_UNITS: int = 5
    TABLE_NAME_MIN: int = 3
    TABLE_NAME_MAX: int = 255
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from DDBCONSOLE_* environment variables."""
        return cls(
            PAGE_SIZE=get_env_int("DDBCONSOLE_PAGE_SIZE", cls.PAGE_SIZE, minimum=1),
            POLL_INTERVAL_MS=get_env_int("DDBCONSOLE_POLL_INTERVAL_MS", cls.POLL_INTERVAL_MS, minimum=10),
            LOG_CAPACITY=get_env_int("DDBCONSOLE_LOG_CAPACITY", cls.LOG_CAPACITY, minimum=10),
            DEBUG=get_env_bool("DDBCONSOLE_DEBUG"),
        )


settings = Settings.from_env()
