"""Logger setup for the ``yart`` package.

The library installs only a ``NullHandler``; applications that want to see
its diagnostics call :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from .settings import YartSettings, get_settings

ROOT_LOGGER = "yart"


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        return orjson.dumps(entry).decode()


_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class _YartHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker type so reconfiguration replaces our handler and leaves others alone."""


def configure_logging(settings: YartSettings | None = None, *, output: TextIO | None = None) -> logging.Logger:
    """Attach a stream handler to the ``yart`` logger per ``settings``.

    Args:
        settings: Settings to apply; defaults to :func:`get_settings`
        output: Stream to write to; defaults to stderr

    Returns:
        The configured ``yart`` logger
    """
    cfg = (settings or get_settings()).logging
    log = logging.getLogger(ROOT_LOGGER)
    for h in [h for h in log.handlers if isinstance(h, _YartHandler)]:
        log.removeHandler(h)

    handler = _YartHandler(output or sys.stderr)
    handler.setFormatter(JsonFormatter() if cfg.format == "json" else logging.Formatter(_TEXT_FORMAT))
    log.addHandler(handler)
    log.setLevel(cfg.level)
    return log
