"""Tests for the untyped Outcome.

Validates:
- Success/failure state predicates
- Error access rules, including failures without an Error
- match dispatch
- Error -> Outcome conversion
- Immutability and value semantics
"""

from __future__ import annotations

import dataclasses

import pytest

from yart.errors import ContractViolation, Error, Failure, InvalidStateError, Ok, Outcome


# ═════════════════════════════════════════════════════════════════════════════
# State
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_is_successful() -> None:
    outcome = Ok()

    assert outcome.is_successful
    assert not outcome.is_failure


def test_failure_is_not_successful() -> None:
    outcome = Failure()

    assert outcome.is_failure
    assert not outcome.is_successful


def test_classmethod_factories_match_module_factories() -> None:
    error = Error("boom")

    assert Outcome.ok() == Ok()
    assert Outcome.failure(error) == Failure(error)
    assert Outcome.failure() == Failure()


# ═════════════════════════════════════════════════════════════════════════════
# Error Access
# ═════════════════════════════════════════════════════════════════════════════


def test_failure_carries_error() -> None:
    error = Error("boom")
    outcome = Failure(error)

    assert outcome.is_failure
    assert outcome.error is error
    assert outcome.error.message == "boom"


def test_failure_without_error() -> None:
    """Failed with no descriptor is distinct from failed with an empty descriptor."""
    bare = Failure()
    empty = Failure(Error())

    assert bare.error is None
    assert empty.error is not None
    assert empty.error.message is None
    assert bare != empty


def test_error_on_success_raises() -> None:
    with pytest.raises(InvalidStateError) as exc_info:
        Ok().error

    assert exc_info.value.operation == "error"
    assert isinstance(exc_info.value, ContractViolation)
    assert isinstance(exc_info.value, RuntimeError)


# ═════════════════════════════════════════════════════════════════════════════
# Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_match_success_branch() -> None:
    assert Ok().match(lambda: 1, lambda e: 2) == 1


def test_match_failure_branch_receives_error() -> None:
    error = Error("nope")
    seen: list[Error | None] = []

    result = Failure(error).match(lambda: "ok", lambda e: seen.append(e) or "failed")

    assert result == "failed"
    assert seen == [error]
    assert seen[0] is error


def test_match_failure_branch_receives_none() -> None:
    assert Failure().match(lambda: "ok", lambda e: e) is None


def test_match_calls_exactly_one_branch() -> None:
    calls: list[str] = []

    Ok().match(lambda: calls.append("success"), lambda e: calls.append("failure"))
    Failure().match(lambda: calls.append("success"), lambda e: calls.append("failure"))

    assert calls == ["success", "failure"]


def test_match_accepts_keywords() -> None:
    output = Failure(Error("x")).match(
        on_success=lambda: "success",
        on_failure=lambda e: f"failed: {e}",
    )
    assert output == "failed: x"


# ═════════════════════════════════════════════════════════════════════════════
# Conversion from Error
# ═════════════════════════════════════════════════════════════════════════════


def test_error_converts_to_failure() -> None:
    error = Error("Error message")

    outcome = Outcome.from_error(error)

    assert outcome.is_failure
    assert outcome.error is error


def test_error_without_message_converts_to_failure() -> None:
    error = Error()

    outcome = Outcome.from_error(error)

    assert outcome.is_failure
    assert outcome.error is error


# ═════════════════════════════════════════════════════════════════════════════
# Value Semantics
# ═════════════════════════════════════════════════════════════════════════════


def test_outcome_is_frozen() -> None:
    outcome = Ok()

    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome._is_successful = False  # type: ignore[misc]

    assert outcome.is_successful


def test_equality_and_hash() -> None:
    assert Ok() == Ok()
    assert Failure(Error("a")) == Failure(Error("a"))
    assert Failure(Error("a")) != Failure(Error("b"))
    assert Ok() != Failure()
    assert len({Ok(), Ok(), Failure(), Failure(Error("a")), Failure(Error("a"))}) == 3


def test_truthiness() -> None:
    assert bool(Ok()) is True
    assert bool(Failure(Error("x"))) is False


def test_repr() -> None:
    assert repr(Ok()) == "Ok()"
    assert repr(Failure()) == "Failure(None)"
    assert repr(Failure(Error("boom"))) == "Failure(Error(message='boom'))"


@pytest.mark.parametrize("error", [None, "boom"])
def test_from_error_rejects_non_error(error: object) -> None:
    with pytest.raises(TypeError):
        Outcome.from_error(error)  # type: ignore[arg-type]
