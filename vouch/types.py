"""
Type definitions for vouch.

Provides the Success/Failure outcome pair, the applicative helpers over
them, and the type aliases shared by validators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

from .errors import FieldErrors, ValidationFailed

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> Success[U]:
        return Success(f(self.value))

    def map_errors(self, f: Callable[[FieldErrors], FieldErrors]) -> Success[T]:
        return self

    def bind(self, f: Callable[[T], Outcome[U]]) -> Outcome[U]:
        return f(self.value)

    def apply(self, x: Outcome[Any]) -> Outcome[Any]:
        """Treat the held value as a function and apply it to x."""
        return apply(self, x)

    def zip(self, other: Outcome[U]) -> Outcome[tuple[T, U]]:
        return zip_outcomes(self, other)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome containing the errors of every field that failed."""

    errors: FieldErrors

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, f: Callable[[Any], Any]) -> Failure:
        return self

    def map_errors(self, f: Callable[[FieldErrors], FieldErrors]) -> Failure:
        return Failure(f(self.errors))

    def bind(self, f: Callable[[Any], Outcome[Any]]) -> Failure:
        return self

    def apply(self, x: Outcome[Any]) -> Failure:
        return apply(self, x)

    def zip(self, other: Outcome[Any]) -> Failure:
        return zip_outcomes(self, other)

    def unwrap(self) -> Any:
        raise ValidationFailed(self.errors)

    def unwrap_or(self, default: U) -> U:
        return default


Outcome = Union[Success[T], Failure]


def apply(f_outcome: Outcome[Callable[[T], U]], x_outcome: Outcome[T]) -> Outcome[U]:
    """
    Apply a wrapped function to a wrapped value, accumulating errors.

    Both sides failing merges their errors (left first).
    """
    match f_outcome, x_outcome:
        case Success(f), Success(x):
            return Success(f(x))
        case Failure(e1), Failure(e2):
            return Failure(e1.merge(e2))
        case Failure(), _:
            return f_outcome
        case _:
            return x_outcome


def zip_outcomes(r1: Outcome[T], r2: Outcome[U]) -> Outcome[tuple[T, U]]:
    """Pair two outcomes, merging errors when both failed."""
    match r1, r2:
        case Success(x1), Success(x2):
            return Success((x1, x2))
        case Failure(e1), Failure(e2):
            return Failure(e1.merge(e2))
        case Failure(), _:
            return r1
        case _:
            return r2


# Type aliases
ValidatorFn = Callable[[str, Any], Outcome[Any]]
Rule = Callable[[Any], bool]
MessageTemplate = Callable[[str], str]
Message = Union[str, MessageTemplate]
