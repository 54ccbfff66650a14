"""yart: explicit success/failure outcomes.

Operations return an Outcome (or a TypedOutcome carrying a value) instead of
raising, and callers branch on the state before touching the payload.

Example:
    >>> from yart import Error, Failure, Ok, Outcome, TypedOutcome
    >>>
    >>> def load(name: str) -> TypedOutcome[str]:
    ...     if not name:
    ...         return Failure(Error("empty name")).to_typed()
    ...     return Ok(name.upper())
    >>>
    >>> load("cfg").value
    'CFG'
    >>> load("").match(lambda v: v, lambda e: e.message)
    'empty name'
"""

import logging

from .config import LoggingSettings, YartSettings, clear_settings_cache, configure_logging, get_settings
from .errors import (
    ContractViolation,
    Error,
    Failure,
    InvalidCastError,
    InvalidStateError,
    Ok,
    Outcome,
    TypedOutcome,
)
from .runtime import Resolved, completed_future

logging.getLogger("yart").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Outcomes
    "Error", "Outcome", "TypedOutcome", "Ok", "Failure",
    # Contract violations
    "ContractViolation", "InvalidStateError", "InvalidCastError",
    # Async interop
    "Resolved", "completed_future",
    # Configuration
    "YartSettings", "LoggingSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
