"""Contract-violation exceptions.

These signal misuse of the outcome API (reading the wrong side of an outcome,
or promoting a success to a typed outcome). They are never a business failure:
the library raises them and never converts them into ``Failure`` values.
"""

from __future__ import annotations

import logging
from typing import Self

from pydantic import ValidationError

from yart.config import get_settings

logger = logging.getLogger("yart.errors")


class ContractViolation(RuntimeError):
    """Base for programming errors against the outcome API.

    Attributes:
        operation: The access or conversion that was attempted
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(message)


class InvalidStateError(ContractViolation):
    """Raised when ``error`` is read on a success or ``value`` on a failure."""

    @classmethod
    def on_success(cls, attribute: str, outcome: object) -> Self:
        return cls(attribute, f"cannot read '{attribute}' on a successful outcome: {outcome!r}")

    @classmethod
    def on_failure(cls, attribute: str, outcome: object) -> Self:
        return cls(attribute, f"cannot read '{attribute}' on a failed outcome: {outcome!r}")


class InvalidCastError(ContractViolation, TypeError):
    """Raised when a successful untyped outcome is promoted to a typed one.

    A success carries no value, so there is nothing to populate the payload with.
    """

    @classmethod
    def from_success(cls, outcome: object) -> Self:
        return cls("to_typed", f"cannot convert successful {outcome!r} to a typed outcome: no value to carry")


def violation(exc: ContractViolation) -> ContractViolation:
    """Trace ``exc`` when enabled in settings, then hand it back for raising.

    Unreadable settings leave tracing off; the violation itself is always returned.
    """
    try:
        traced = get_settings().violations_traced
    except ValidationError:
        traced = False
    if traced:
        logger.debug("contract violation in %s: %s", exc.operation, exc)
    return exc
