"""
SDK configuration.

Settings are read from environment variables with the ``METRIKA_`` prefix
(e.g. ``METRIKA_TOKEN``, ``METRIKA_COUNTER_ID``, ``METRIKA_POLL_INTERVAL``).

Example:
    >>> from metrika_logs.config import get_settings, configure_settings
    >>> settings = get_settings()
    >>> settings.poll_interval
    10.0
    >>> configure_settings(log_json=False, log_level="DEBUG")
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api-metrika.yandex.net"


class SDKSettings(BaseSettings):
    """Metrika Logs SDK settings."""

    model_config = SettingsConfigDict(
        env_prefix="METRIKA_",
        extra="ignore",
    )

    # Credentials
    token: str = Field(default="", description="OAuth token sent as bearer credentials")
    counter_id: int | None = Field(default=None, description="Default counter ID")

    # Connection
    api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = Field(default=30.0, ge=1.0, le=300.0)

    # Export workflow
    poll_interval: float = Field(default=10.0, ge=0.0, le=3600.0)
    max_parallel_parts: int = Field(default=1, ge=1, le=16)

    # Logging
    log_json: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


_settings: SDKSettings | None = None


def get_settings() -> SDKSettings:
    """Return the process-wide settings, creating them on first use."""
    global _settings
    if _settings is None:
        _settings = SDKSettings()
    return _settings


def configure_settings(**overrides: Any) -> SDKSettings:
    """Replace the process-wide settings with explicit overrides."""
    global _settings
    _settings = SDKSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_BASE_URL",
    "SDKSettings",
    "get_settings",
    "configure_settings",
    "reset_settings",
]
