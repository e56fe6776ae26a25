"""
Applicative composition of independent validations.

Validating a record means validating each field independently and only
building the record when every field passed. These helpers evaluate all
outcomes and report the merged errors of every failed field, not just the
first one.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable

from .errors import FieldErrors
from .types import Failure, Outcome, Success, zip_outcomes

logger = logging.getLogger(__name__)


def _check_outcome(outcome: Any) -> Outcome[Any]:
    if not isinstance(outcome, (Success, Failure)):
        raise TypeError(f"Expected Success or Failure, got {type(outcome).__name__}")
    return outcome


def zip_all(*outcomes: Outcome[Any]) -> Outcome[tuple[Any, ...]]:
    """
    Combine outcomes into one holding a tuple of their values.

    If any failed, the result is a Failure merging the errors of every
    failed outcome in argument order.
    """
    values: list[Any] = []
    failures: list[FieldErrors] = []
    for outcome in outcomes:
        match _check_outcome(outcome):
            case Success(value):
                values.append(value)
            case Failure(errors):
                failures.append(errors)

    if failures:
        return Failure(FieldErrors.collect(failures))
    return Success(tuple(values))


def gather(
    outcomes: Mapping[str, Outcome[Any]] | None = None, /, **named: Outcome[Any]
) -> Outcome[dict[str, Any]]:
    """
    Named form of zip_all: a mapping of outcomes becomes an outcome of a dict.

    Usage:
        gather(name=name_v("name", "Alice"), age=age_v("age", 30))
        # Success({"name": "Alice", "age": 30})
    """
    merged = {**(outcomes or {}), **named}
    keys = list(merged)
    return zip_all(*merged.values()).map(lambda values: dict(zip(keys, values)))


def validate(
    construct: Callable[..., Any], /, *outcomes: Outcome[Any], **named: Outcome[Any]
) -> Outcome[Any]:
    """
    Build a value from independently validated parts.

    Positional outcomes are passed positionally to `construct` and named
    outcomes by keyword. `construct` is only called when all succeeded. It is
    positional-only, so any field name may be used as a keyword.

    Usage:
        result = validate(
            Person,
            name=name_v("name", data["name"]),
            age=age_v("age", data["age"]),
        )
    """
    combined = zip_outcomes(zip_all(*outcomes), gather(named))
    return combined.map(lambda parts: construct(*parts[0], **parts[1]))


def _bind_step(step: Any) -> Outcome[Any]:
    """Resolve what a @validation block yielded into a single outcome."""
    if isinstance(step, (Success, Failure)):
        return step
    if isinstance(step, (tuple, list)):
        return zip_all(*step)
    if isinstance(step, Mapping):
        return gather(step)
    raise TypeError(
        f"@validation blocks must yield an outcome, or a tuple, list or dict of outcomes; got {type(step).__name__}"
    )


def validation(func: Callable) -> Callable:
    """
    Decorator running a generator function as a validation block.

    Inside the block:
        - `x = yield outcome` binds sequentially: a Failure ends the block
        - `a, b = yield (o1, o2)` binds in parallel: every failure is merged
        - `d = yield {"a": o1, "b": o2}` binds in parallel by name
        - `return value` produces Success(value); returning an outcome passes it through

    Usage:
        @validation
        def person(data):
            name, age = yield (name_v("name", data["name"]), age_v("age", data["age"]))
            email = yield email_v("email", data["email"])
            return Person(name, age, email)
    """
    if not inspect.isgeneratorfunction(func):
        raise TypeError("@validation requires a generator function")

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
        gen = func(*args, **kwargs)
        try:
            step = next(gen)
            while True:
                outcome = _bind_step(step)
                if isinstance(outcome, Failure):
                    logger.debug(
                        "%s stopped on failed fields %s", func.__qualname__, list(outcome.errors.fields)
                    )
                    return outcome
                step = gen.send(outcome.value)
        except StopIteration as stop:
            result = stop.value
            if isinstance(result, (Success, Failure)):
                return result
            return Success(result)
        finally:
            gen.close()

    return wrapper
