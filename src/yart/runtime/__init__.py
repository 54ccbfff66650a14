"""Async interop for outcomes: already-resolved awaitables and futures."""

from .interop import Resolved, completed_future

__all__ = ["Resolved", "completed_future"]
