"""
Built-in validators for vouch.

Each validator is a one-line instantiation of `create`. Every factory takes
an optional `message` (a literal string or a `field -> str` template) that
replaces the default from `vouch.messages`.

Usage:
    from vouch.validators import string, value

    string.between_len(3, 64)("name", "Jo")
    # Failure({"name": ["'name' must be between 3 and 64 characters"]})

    value.greater_than(0, message="age must be positive")("age", -1)
    # Failure({"age": ["age must be positive"]})
"""

from __future__ import annotations

import re
from typing import Any, Callable
from uuid import UUID

from . import messages
from .core import V, create, to_template, to_validator
from .errors import FieldErrors
from .types import Failure, Message, Success


def _pick(message: Message | None, default: Callable[[str], str]) -> Message:
    return default if message is None else message


class EqualityValidators:
    """Validators for values supporting ==."""

    def equals(self, expected: Any, message: Message | None = None) -> V:
        """Value is equal to `expected`."""
        msg = _pick(message, lambda f: messages.equals(f, expected))
        return create(msg, lambda x: x == expected)

    def not_equals(self, unexpected: Any, message: Message | None = None) -> V:
        """Value is not equal to `unexpected`."""
        msg = _pick(message, lambda f: messages.not_equals(f, unexpected))
        return create(msg, lambda x: x != unexpected)


class ComparisonValidators(EqualityValidators):
    """Validators for ordered values (numbers, dates, timedeltas, ...)."""

    def between(self, lower: Any, upper: Any, message: Message | None = None) -> V:
        """Value is inclusively between `lower` and `upper`."""
        msg = _pick(message, lambda f: messages.between(f, lower, upper))
        return create(msg, lambda x: lower <= x <= upper)

    def greater_than(self, lower: Any, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: messages.greater_than(f, lower))
        return create(msg, lambda x: x > lower)

    def greater_than_or_equal_to(self, lower: Any, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: messages.greater_than_or_equal_to(f, lower))
        return create(msg, lambda x: x >= lower)

    def less_than(self, upper: Any, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: messages.less_than(f, upper))
        return create(msg, lambda x: x < upper)

    def less_than_or_equal_to(self, upper: Any, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: messages.less_than_or_equal_to(f, upper))
        return create(msg, lambda x: x <= upper)


class _LengthValidators(EqualityValidators):
    """Length checks shared by strings and sequences; only the wording differs."""

    _between_len = staticmethod(messages.seq_between_len)
    _equals_len = staticmethod(messages.seq_equals_len)
    _greater_than_len = staticmethod(messages.seq_greater_than_len)
    _greater_than_or_equal_to_len = staticmethod(messages.seq_greater_than_or_equal_to_len)
    _less_than_len = staticmethod(messages.seq_less_than_len)
    _less_than_or_equal_to_len = staticmethod(messages.seq_less_than_or_equal_to_len)

    def between_len(self, lower: int, upper: int, message: Message | None = None) -> V:
        """Length is inclusively between `lower` and `upper`."""
        msg = _pick(message, lambda f: self._between_len(f, lower, upper))
        return create(msg, lambda x: lower <= len(x) <= upper)

    def equals_len(self, length: int, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: self._equals_len(f, length))
        return create(msg, lambda x: len(x) == length)

    def greater_than_len(self, lower: int, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: self._greater_than_len(f, lower))
        return create(msg, lambda x: len(x) > lower)

    def greater_than_or_equal_to_len(self, lower: int, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: self._greater_than_or_equal_to_len(f, lower))
        return create(msg, lambda x: len(x) >= lower)

    def less_than_len(self, upper: int, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: self._less_than_len(f, upper))
        return create(msg, lambda x: len(x) < upper)

    def less_than_or_equal_to_len(self, upper: int, message: Message | None = None) -> V:
        msg = _pick(message, lambda f: self._less_than_or_equal_to_len(f, upper))
        return create(msg, lambda x: len(x) <= upper)


class StringValidators(_LengthValidators):
    """Validators for str values."""

    _between_len = staticmethod(messages.str_between_len)
    _equals_len = staticmethod(messages.str_equals_len)
    _greater_than_len = staticmethod(messages.str_greater_than_len)
    _greater_than_or_equal_to_len = staticmethod(messages.str_greater_than_or_equal_to_len)
    _less_than_len = staticmethod(messages.str_less_than_len)
    _less_than_or_equal_to_len = staticmethod(messages.str_less_than_or_equal_to_len)

    def empty(self, message: Message | None = None) -> V:
        """String is None, "" or whitespace only."""
        return create(_pick(message, messages.str_empty), lambda x: x is None or not x.strip())

    def not_empty(self, message: Message | None = None) -> V:
        return create(
            _pick(message, messages.str_not_empty), lambda x: x is not None and bool(x.strip())
        )

    def pattern(self, pattern: str | re.Pattern[str], message: Message | None = None) -> V:
        """
        String contains a match for the regular expression.

        Usage:
            string.pattern(r"\\d+")
        """
        compiled = re.compile(pattern)
        msg = _pick(message, lambda f: messages.str_pattern(f, compiled.pattern))
        return create(msg, lambda x: isinstance(x, str) and compiled.search(x) is not None)


class SequenceValidators(_LengthValidators):
    """Validators for sized collections (lists, tuples, sets, dicts)."""

    def empty(self, message: Message | None = None) -> V:
        return create(_pick(message, messages.seq_empty), lambda x: len(x) == 0)

    def not_empty(self, message: Message | None = None) -> V:
        return create(_pick(message, messages.seq_not_empty), lambda x: len(x) > 0)

    def exists(self, predicate: Callable[[Any], bool], message: Message | None = None) -> V:
        """At least one item satisfies `predicate`."""
        return create(_pick(message, messages.seq_exists), lambda x: any(predicate(i) for i in x))


class UUIDValidators(EqualityValidators):
    """Validators for uuid.UUID values; the nil UUID counts as empty."""

    NIL = UUID(int=0)

    def empty(self, message: Message | None = None) -> V:
        return create(_pick(message, messages.uuid_empty), lambda x: x == self.NIL)

    def not_empty(self, message: Message | None = None) -> V:
        return create(_pick(message, messages.uuid_not_empty), lambda x: x != self.NIL)


value = ComparisonValidators()
string = StringValidators()
sequence = SequenceValidators()
uuid = UUIDValidators()


def optional(validator: Any) -> V:
    """
    Allow None, validate if present.

    Usage:
        optional(value.greater_than(0))("age", None)   # Success(None)
    """
    inner = to_validator(validator)

    def validate(field: str, x: Any):
        if x is None:
            return Success(None)
        return inner(field, x)

    return V(validate)


def required(validator: Any, message: Message | None = None) -> V:
    """
    Fail on None, validate if present.

    Usage:
        required(string.not_empty())("name", None)
        # Failure({"name": ["'name' is required"]})
    """
    inner = to_validator(validator)
    template = to_template(_pick(message, messages.required))

    def validate(field: str, x: Any):
        if x is None:
            return Failure(FieldErrors.create(field, [template(field)]))
        return inner(field, x)

    return V(validate)
