"""Environment-based configuration using pydantic-settings.

The outcome types themselves need no configuration. Settings only govern the
package's own diagnostics: the ``yart`` logger and whether contract
violations are traced before they are raised.

Example:
    >>> from yart.config import get_settings
    >>> get_settings().logging.level
    'WARNING'

    # Or with environment variables:
    # YART_DEBUG=true
    # YART_LOG_LEVEL=DEBUG
    # YART_LOG_TRACE_VIOLATIONS=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``yart`` logger."""

    model_config = SettingsConfigDict(
        env_prefix="YART_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    trace_violations: bool = Field(default=False, description="Log contract violations at DEBUG before raising")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class YartSettings(BaseSettings):
    """Root settings, loaded from ``YART_`` environment variables or ``.env``.

    Example environment variables:
        YART_DEBUG=true
        YART_LOG_LEVEL=DEBUG
        YART_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="YART_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug diagnostics")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def violations_traced(self) -> bool:
        """Whether contract violations are logged before being raised."""
        return self.debug or self.logging.trace_violations


@lru_cache(maxsize=1)
def get_settings() -> YartSettings:
    """Get the global settings instance (cached)."""
    return YartSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
