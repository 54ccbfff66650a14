"""Already-resolved adapters for async call sites.

Lets synchronous code hand a value to code that expects something awaitable,
or a future, without scheduling anything:
    - Resolved: awaitable that completes on first await, never suspends
    - completed_future: concurrent.futures.Future with its result already set

Neither creates a task or thread, and neither touches an event loop, so both
are safe to build outside of async code.

Example:
    >>> async def lookup(key: str) -> Outcome:
    ...     if key in cache:
    ...         return await Resolved(Ok())
    ...     return await fetch(key)

    >>> completed_future(42).result()
    42
"""

from __future__ import annotations

from concurrent.futures import Future
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Generator

T = TypeVar("T")


class Resolved(Generic[T]):
    """Awaitable wrapping a value that is already available.

    ``await`` returns the value without yielding to the event loop, and the same
    instance may be awaited any number of times.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __await__(self) -> Generator[None, None, T]:
        return self._value
        yield  # unreachable; makes this a generator

    def done(self) -> bool:
        return True

    def result(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Resolved({self._value!r})"


def completed_future(value: T) -> Future[T]:
    """Create a concurrent.futures.Future already resolved with ``value``."""
    fut: Future[T] = Future()
    fut.set_result(value)
    return fut
