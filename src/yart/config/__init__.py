"""Configuration management using pydantic-settings.

Provides environment-based configuration and logger setup for the package's diagnostics.
"""

from .logging import JsonFormatter, configure_logging
from .settings import LoggingSettings, YartSettings, clear_settings_cache, get_settings

__all__ = [
    "JsonFormatter",
    "LoggingSettings",
    "YartSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
