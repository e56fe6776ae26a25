"""
Core validator type and combinators for vouch.

A validator is any callable `(field, value) -> Success | Failure`. The V
dataclass wraps one so it can be composed with operators:

    v1 & v2     compose     both run on the same input, errors accumulate
    v1 | v2     choice      first success wins, errors merge if both fail
    v1 >> v2    kleisli     v2 runs on v1's output only if v1 succeeded
    v1 << v2    kleisli     reversed: v2 runs first

Every combinator accepts plain callables as well as V, and returns a V.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from . import messages
from .context import is_capturing
from .errors import FieldErrors
from .types import Failure, Message, MessageTemplate, Outcome, Rule, Success, ValidatorFn

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, slots=True)
class V(Generic[A, B]):
    """
    Immutable validator node.

    Wraps a `(field, value) -> Outcome` function. Calling a V is calling the
    wrapped function; the operators and methods build new validators.
    """

    fn: ValidatorFn

    def __call__(self, field: str, value: A) -> Outcome[B]:
        return self.fn(field, value)

    def __and__(self, other: Any) -> V:
        """
        Compose with AND logic: both run, all errors are reported.

        Usage:
            not_empty & max_len
        """
        if not callable(other):
            return NotImplemented
        return compose(self, other)

    def __rand__(self, other: Any) -> V:
        """Support `fn & V` where a plain function comes first."""
        if not callable(other):
            return NotImplemented
        return compose(other, self)

    def __or__(self, other: Any) -> V:
        """
        Combine with OR logic: the first success wins.

        Usage:
            is_child | is_senior
        """
        if not callable(other):
            return NotImplemented
        return choice(self, other)

    def __ror__(self, other: Any) -> V:
        if not callable(other):
            return NotImplemented
        return choice(other, self)

    def __rshift__(self, other: Any) -> V:
        """
        Chain: feed this validator's output into `other`.

        Usage:
            digits.map(int) >> in_range
        """
        if not callable(other):
            return NotImplemented
        return kleisli(self, other)

    def __rrshift__(self, other: Any) -> V:
        if not callable(other):
            return NotImplemented
        return kleisli(other, self)

    def __lshift__(self, other: Any) -> V:
        """Reverse chain: `other` runs first, its output feeds this validator."""
        if not callable(other):
            return NotImplemented
        return kleisli(other, self)

    def __rlshift__(self, other: Any) -> V:
        if not callable(other):
            return NotImplemented
        return kleisli(self, other)

    def map(self, g: Callable[[B], Any]) -> V:
        """Post-process the success value."""
        return map_value(self, g)

    def replace(self, value: Any) -> V:
        """Replace the success value with a constant."""
        return map_value(self, lambda _: value)

    def bind(self, g: Callable[[B], Outcome[Any]]) -> V:
        """Chain into a plain fallible function of the success value."""
        return bind_result(self, g)

    def bind_value(self, outcome: Outcome[Any]) -> V:
        """Replace the success value with a fixed outcome."""
        return bind_result(self, lambda _: outcome)

    def keep_left(self, other: Any) -> V:
        return pick_left(self, other)

    def keep_right(self, other: Any) -> V:
        return pick_right(self, other)

    def keep_both(self, other: Any) -> V:
        return pick_both(self, other)

    def with_message(self, message: Message) -> V:
        """Return new validator reporting a single custom message on failure."""
        template = to_template(message)

        def validate(field: str, value: Any) -> Outcome[Any]:
            result = self.fn(field, value)
            if isinstance(result, Failure):
                return Failure(FieldErrors.create(field, [template(field)]))
            return result

        return V(validate)


def to_validator(v: Any) -> V:
    """
    Coerce a value to a validator.

    Conversion rules:
        V -> pass through
        Callable -> V(fn=callable)
    """
    if isinstance(v, V):
        return v
    if callable(v):
        return V(v)
    raise TypeError(f"Cannot convert {type(v).__name__} to validator")


def to_template(message: Any) -> MessageTemplate:
    """A literal string is used as-is; a callable is called with the field."""
    if isinstance(message, str):
        return lambda _field: message
    if callable(message):
        return message
    raise TypeError(f"Message must be a str or callable, got {type(message).__name__}")


# ------------
# Primitives
# ------------


def create(message: Message, rule: Rule) -> V:
    """
    Create a validator from a predicate and a message template.

    Returns Success(value) when rule(value) is true, otherwise a Failure
    holding message(field) for the field.

    Usage:
        positive = create(lambda f: f"'{f}' must be positive", lambda x: x > 0)
        positive("age", 3)    # Success(3)
        positive("age", -1)   # Failure({"age": ["'age' must be positive"]})
    """
    template = to_template(message)

    def validate(field: str, value: Any) -> Outcome[Any]:
        try:
            passed = rule(value)
        except Exception as e:
            if not is_capturing():
                raise
            logger.debug("Rule for field %r raised %r, reporting as failure", field, e)
            return Failure(FieldErrors.create(field, [messages.rule_error(field, e)]))

        if passed:
            return Success(value)
        return Failure(FieldErrors.create(field, [template(field)]))

    return V(validate)


success: V = V(lambda field, value: Success(value))


def fail(message: Message) -> V:
    """A validator that always fails with message(field)."""
    template = to_template(message)
    return V(lambda field, value: Failure(FieldErrors.create(field, [template(field)])))


# ------------
# Combinators
# ------------


def accumulate(r1: Outcome[Any], r2: Outcome[Any]) -> Outcome[Any]:
    """Combine two outcomes of the same input: errors merge, r1's value wins."""
    match r1, r2:
        case Failure(e1), Failure(e2):
            return Failure(e1.merge(e2))
        case Failure(), _:
            return r1
        case _, Failure():
            return r2
    return r1


def compose(v1: Any, v2: Any) -> V:
    """
    AND: run both validators on the same input and accumulate errors.

    Both always run, left first. On double success v1's value is kept.
    """
    v1, v2 = to_validator(v1), to_validator(v2)

    def validate(field: str, value: Any) -> Outcome[Any]:
        return accumulate(v1(field, value), v2(field, value))

    return V(validate)


def kleisli(v1: Any, v2: Any) -> V:
    """Sequential AND: v2 validates v1's output, and only runs if v1 succeeded."""
    v1, v2 = to_validator(v1), to_validator(v2)

    def validate(field: str, value: Any) -> Outcome[Any]:
        return v1(field, value).bind(lambda out: v2(field, out))

    return V(validate)


def choice(v1: Any, v2: Any) -> V:
    """OR: v1's success wins without running v2; two failures merge."""
    v1, v2 = to_validator(v1), to_validator(v2)

    def validate(field: str, value: Any) -> Outcome[Any]:
        r1 = v1(field, value)
        if isinstance(r1, Success):
            return r1
        r2 = v2(field, value)
        if isinstance(r2, Success):
            return r2
        return Failure(r1.errors.merge(r2.errors))

    return V(validate)


def pick_left(v1: Any, v2: Any) -> V:
    """Run v2 on v1's output as a check only; keep v1's value."""
    v1, v2 = to_validator(v1), to_validator(v2)

    def validate(field: str, value: Any) -> Outcome[Any]:
        r1 = v1(field, value)
        if isinstance(r1, Failure):
            return r1
        r2 = v2(field, r1.value)
        if isinstance(r2, Failure):
            return r2
        return r1

    return V(validate)


def pick_right(v1: Any, v2: Any) -> V:
    """Run v2 on v1's output and keep v2's value."""
    return kleisli(v1, v2)


def pick_both(v1: Any, v2: Any) -> V:
    """Run v2 on v1's output and keep both values as a tuple."""
    v1, v2 = to_validator(v1), to_validator(v2)

    def validate(field: str, value: Any) -> Outcome[Any]:
        r1 = v1(field, value)
        if isinstance(r1, Failure):
            return r1
        return v2(field, r1.value).map(lambda out: (r1.value, out))

    return V(validate)


def map_value(v: Any, g: Callable[[Any], Any]) -> V:
    """Post-process the success value of v; failures pass through."""
    v = to_validator(v)
    return V(lambda field, value: v(field, value).map(g))


def bind_result(v: Any, g: Callable[[Any], Outcome[Any]]) -> V:
    """
    Chain v into a function of its output that returns an outcome.

    g is not field-aware: its Failure carries whatever FieldErrors it built.
    """
    v = to_validator(v)
    return V(lambda field, value: v(field, value).bind(g))
