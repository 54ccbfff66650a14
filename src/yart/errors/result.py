"""Outcome types for explicit success/failure propagation.

Two frozen tagged values:
- Outcome: success with no payload, or failure with an optional Error
- TypedOutcome[T]: success carrying a T, or failure with an optional Error

Reading the inactive side (``error`` on a success, ``value`` on a failure)
raises InvalidStateError. Conversions between the two are explicit:
- Outcome.from_error(error): Error -> failed Outcome
- typed.to_outcome(): always legal, drops the value
- outcome.to_typed(): legal only from a failure, else InvalidCastError

Example:
    >>> def parse_port(raw: str) -> TypedOutcome[int]:
    ...     if not raw.isdigit():
    ...         return TypedOutcome.failure(Error(f"not a port: {raw}"))
    ...     return Ok(int(raw))
    >>>
    >>> parse_port("8080").match(lambda p: p + 1, lambda e: -1)
    8081
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, overload

from yart.runtime.interop import Resolved, completed_future

from .errors import InvalidCastError, InvalidStateError, violation
from .types import Error

if TYPE_CHECKING:
    from concurrent.futures import Future

T = TypeVar("T")
R = TypeVar("R")

# Distinguishes Ok() from Ok(None)
_MISSING: Any = object()


@dataclass(frozen=True, slots=True, repr=False)
class Outcome:
    """Success or failure of an operation that produces no value.

    The failure side may carry an ``Error`` or nothing at all; those are two
    distinct states and both differ from success.

    Examples:
        >>> Ok().is_successful
        True
        >>> Failure(Error("boom")).error.message
        'boom'
        >>> Failure().error is None
        True

    Notes:
        - Frozen and slotted: instances never change after construction
        - Private constructor. Use Ok(), Failure() or Outcome.from_error() instead.
    """

    _is_successful: bool
    _error: Error | None = None

    # ─── Construction ────────────────────────────────────────────────────

    @classmethod
    def ok(cls) -> Outcome:
        """Successful outcome."""
        return cls(True)

    @classmethod
    def failure(cls, error: Error | None = None) -> Outcome:
        """Failed outcome carrying ``error`` (which may be absent)."""
        return cls(False, error)

    @classmethod
    def from_error(cls, error: Error) -> Outcome:
        """Failed outcome whose ``error`` is exactly ``error``.

        Raises:
            TypeError: If ``error`` is not an Error; use Failure() for a failure without one
        """
        if not isinstance(error, Error):
            raise TypeError(f"from_error() expects an Error, got {type(error).__name__}")
        return cls(False, error)

    @classmethod
    def from_typed(cls, typed: TypedOutcome[Any]) -> Outcome:
        """Project a typed outcome onto its state and error, dropping the value."""
        return typed.to_outcome()

    # ─── State ───────────────────────────────────────────────────────────

    @property
    def is_successful(self) -> bool:
        return self._is_successful

    @property
    def is_failure(self) -> bool:
        return not self._is_successful

    @property
    def error(self) -> Error | None:
        """Error of a failure, possibly ``None``.

        Raises:
            InvalidStateError: If the outcome is a success
        """
        if self._is_successful:
            raise violation(InvalidStateError.on_success("error", self))
        return self._error

    # ─── Branching ───────────────────────────────────────────────────────

    def match(self, on_success: Callable[[], R], on_failure: Callable[[Error | None], R]) -> R:
        """Call exactly one branch and return its result.

        Example:
            >>> Failure(Error("nope")).match(lambda: "ok", lambda e: e.message)
            'nope'
        """
        return on_success() if self._is_successful else on_failure(self._error)

    # ─── Conversion ──────────────────────────────────────────────────────

    def to_typed(self) -> TypedOutcome[Any]:
        """Promote a failure to a typed outcome with the same error.

        Raises:
            InvalidCastError: If the outcome is a success; it has no value to carry
        """
        return TypedOutcome.from_outcome(self)

    def as_future(self) -> Future[Outcome]:
        """Already-completed future resolving to this outcome."""
        return completed_future(self)

    def as_awaitable(self) -> Resolved[Outcome]:
        """Awaitable resolving to this outcome without suspending."""
        return Resolved(self)

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_successful

    def __repr__(self) -> str:
        return "Ok()" if self._is_successful else f"Failure({self._error!r})"


@dataclass(frozen=True, slots=True, repr=False)
class TypedOutcome(Generic[T]):
    """Success carrying a value of type T, or failure with an optional Error.

    Examples:
        >>> Ok(42).value
        42
        >>> Ok(5).match(lambda v: v * 2, lambda e: -1)
        10
        >>> TypedOutcome[int].failure().is_failure
        True

    Notes:
        - Only one of ``value``/``error`` is readable, chosen by state
        - Private constructor. Use Ok(value), TypedOutcome.failure() or from_outcome().
    """

    _is_successful: bool
    _value: T | None = None
    _error: Error | None = None

    # ─── Construction ────────────────────────────────────────────────────

    @classmethod
    def ok(cls, value: T) -> TypedOutcome[T]:
        """Successful outcome holding ``value``."""
        return cls(True, value)

    @classmethod
    def failure(cls, error: Error | None = None) -> TypedOutcome[T]:
        """Failed typed outcome, built from the untyped failure."""
        return cls.from_outcome(Outcome.failure(error))

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> TypedOutcome[T]:
        """Promote a failed untyped outcome, keeping its error.

        Raises:
            InvalidCastError: If ``outcome`` is a success
        """
        if outcome._is_successful:
            raise violation(InvalidCastError.from_success(outcome))
        return cls(False, None, outcome._error)

    # ─── State ───────────────────────────────────────────────────────────

    @property
    def is_successful(self) -> bool:
        return self._is_successful

    @property
    def is_failure(self) -> bool:
        return not self._is_successful

    @property
    def error(self) -> Error | None:
        """Error of a failure, possibly ``None``. Raises InvalidStateError on success."""
        if self._is_successful:
            raise violation(InvalidStateError.on_success("error", self))
        return self._error

    @property
    def value(self) -> T:
        """Payload of a success. Raises InvalidStateError on failure."""
        if not self._is_successful:
            raise violation(InvalidStateError.on_failure("value", self))
        return self._value  # type: ignore[return-value]

    # ─── Branching ───────────────────────────────────────────────────────

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[Error | None], R]) -> R:
        """Call exactly one branch: ``on_success(value)`` or ``on_failure(error)``."""
        return on_success(self._value) if self._is_successful else on_failure(self._error)  # type: ignore[arg-type]

    # ─── Conversion ──────────────────────────────────────────────────────

    def to_outcome(self) -> Outcome:
        """Untyped view: same state and error, value discarded."""
        return Outcome(True) if self._is_successful else Outcome(False, self._error)

    def as_future(self) -> Future[TypedOutcome[T]]:
        """Already-completed future resolving to this outcome."""
        return completed_future(self)

    def as_awaitable(self) -> Resolved[TypedOutcome[T]]:
        """Awaitable resolving to this outcome without suspending."""
        return Resolved(self)

    # ─── Dunder Methods ──────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_successful

    def __repr__(self) -> str:
        return f"Ok({self._value!r})" if self._is_successful else f"Failure({self._error!r})"


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


@overload
def Ok() -> Outcome: ...  # noqa: N802
@overload
def Ok(value: T) -> TypedOutcome[T]: ...  # noqa: N802
def Ok(value: Any = _MISSING) -> Outcome | TypedOutcome[Any]:  # noqa: N802
    """Construct a success: untyped with no argument, typed with a value.

    ``Ok(None)`` is a typed success holding ``None``.
    """
    return Outcome(True) if value is _MISSING else TypedOutcome(True, value)


def Failure(error: Error | None = None) -> Outcome:  # noqa: N802
    """Construct an untyped failure. Promote with ``to_typed()`` where a TypedOutcome is needed."""
    return Outcome(False, error)
