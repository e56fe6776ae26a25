from typing import Any, Callable

import pytest

from vouch import Failure, FieldErrors, Outcome, Success


class CountingValidator:
    """Validator stub recording every (field, value) it is called with."""

    def __init__(self, respond: Callable[[str, Any], Outcome[Any]]):
        self.respond = respond
        self.calls: list[tuple[str, Any]] = []

    def __call__(self, field: str, value: Any) -> Outcome[Any]:
        self.calls.append((field, value))
        return self.respond(field, value)


@pytest.fixture
def passing() -> Callable[..., CountingValidator]:
    """Factory for counting validators that succeed (optionally with a fixed value)."""

    def make(*fixed: Any) -> CountingValidator:
        if fixed:
            return CountingValidator(lambda field, value: Success(fixed[0]))
        return CountingValidator(lambda field, value: Success(value))

    return make


@pytest.fixture
def failing() -> Callable[..., CountingValidator]:
    """Factory for counting validators failing with the given messages."""

    def make(*messages: str) -> CountingValidator:
        return CountingValidator(
            lambda field, value: Failure(FieldErrors.create(field, list(messages)))
        )

    return make


@pytest.fixture
def exploding() -> Callable[[str, Any], Outcome[Any]]:
    """A validator that must never be invoked."""

    def validator(field: str, value: Any) -> Outcome[Any]:
        raise AssertionError(f"validator should not run for {field!r}")

    return validator
