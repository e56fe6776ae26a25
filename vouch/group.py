"""
Fluent builder folding validators into one.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from .core import V, accumulate, to_validator
from .types import Failure, Outcome

T = TypeVar("T")

AND = "and"
THEN = "then"


class ValidatorGroup(Generic[T]):
    """
    Accumulates validators of a single type into one validator.

    `and_` steps accumulate errors among themselves; a `then` step only runs
    when everything before it succeeded. Each call returns a new group.

    The built validator behaves like the left-nested compose/kleisli chain,
    but evaluates the steps in a loop, so long groups do not grow the stack.

    Usage:
        email = (
            ValidatorGroup(string.between_len(8, 512))
            .and_(string.pattern(r"[^@]+@[^.]+\\..+"))
            .then(string.not_equals("fake@test.com"))
            .build()
        )
    """

    __slots__ = ("_start", "_steps")

    def __init__(self, start: Any, _steps: tuple[tuple[str, V], ...] = ()):
        self._start: V = to_validator(start)
        self._steps = _steps

    def and_(self, validator: Any) -> ValidatorGroup[T]:
        return ValidatorGroup(self._start, self._steps + ((AND, to_validator(validator)),))

    def then(self, validator: Any) -> ValidatorGroup[T]:
        return ValidatorGroup(self._start, self._steps + ((THEN, to_validator(validator)),))

    def build(self) -> V:
        start, steps = self._start, self._steps
        if not steps:
            return start

        def validate(field: str, value: Any) -> Outcome[Any]:
            result = start(field, value)
            for kind, step in steps:
                if kind == AND:
                    # and_ steps see the original input, like compose
                    result = accumulate(result, step(field, value))
                elif not isinstance(result, Failure):
                    result = step(field, result.value)
            return result

        return V(validate)

    def __repr__(self) -> str:
        return f"ValidatorGroup({self._start!r}, steps={len(self._steps)})"
