"""
The @rule decorator for turning predicates into validators.
"""

from functools import update_wrapper
from typing import Callable

from .core import V, create
from .types import Message


def rule(message: Message) -> Callable[[Callable], V]:
    """
    Decorator that turns a predicate into a validator.

    The decorated function takes the value and returns a bool; the result is
    a V reporting `message` for the field when the predicate is false.

        @rule(lambda field: f"'{field}' must be even")
        def even(x):
            return x % 2 == 0

        even("count", 3)  # Failure({"count": ["'count' must be even"]})

    Args:
        message: A literal string or a `field -> str` template.

    Returns:
        Decorator producing a V.
    """

    def decorator(func: Callable) -> V:
        validator = create(message, func)
        # Keep the predicate's name and docstring on the validator's function
        update_wrapper(validator.fn, func)
        return validator

    return decorator
