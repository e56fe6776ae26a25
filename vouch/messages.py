"""
Default error messages used by the built-in validators.

Each function takes the field name (plus the validator's parameters) and
returns the rendered message. Validators only fall back to these when the
caller does not pass a message of their own.
"""

from typing import Any


# Equality / comparison
def equals(field: str, value: Any) -> str:
    return f"'{field}' must be equal to {value}"


def not_equals(field: str, value: Any) -> str:
    return f"'{field}' must not equal {value}"


def between(field: str, lower: Any, upper: Any) -> str:
    return f"'{field}' must be between {lower} and {upper}"


def greater_than(field: str, lower: Any) -> str:
    return f"'{field}' must be greater than {lower}"


def greater_than_or_equal_to(field: str, lower: Any) -> str:
    return f"'{field}' must be greater than or equal to {lower}"


def less_than(field: str, upper: Any) -> str:
    return f"'{field}' must be less than {upper}"


def less_than_or_equal_to(field: str, upper: Any) -> str:
    return f"'{field}' must be less than or equal to {upper}"


# Strings
def str_between_len(field: str, lower: int, upper: int) -> str:
    return f"'{field}' must be between {lower} and {upper} characters"


def str_empty(field: str) -> str:
    return f"'{field}' must be empty"


def str_equals_len(field: str, length: int) -> str:
    return f"'{field}' must be {length} characters"


def str_greater_than_len(field: str, lower: int) -> str:
    return f"'{field}' must be more than {lower} characters"


def str_greater_than_or_equal_to_len(field: str, lower: int) -> str:
    return f"'{field}' must be at least {lower} characters"


def str_less_than_len(field: str, upper: int) -> str:
    return f"'{field}' must be less than {upper} characters"


def str_less_than_or_equal_to_len(field: str, upper: int) -> str:
    return f"'{field}' must not exceed {upper} characters"


def str_not_empty(field: str) -> str:
    return f"'{field}' must not be empty"


def str_pattern(field: str, pattern: str) -> str:
    return f"'{field}' must match pattern {pattern}"


# Sequences
def seq_between_len(field: str, lower: int, upper: int) -> str:
    return f"'{field}' must be between {lower} and {upper} items in length"


def seq_empty(field: str) -> str:
    return f"'{field}' must be empty"


def seq_equals_len(field: str, length: int) -> str:
    return f"'{field}' must be {length} items in length"


def seq_exists(field: str) -> str:
    return f"'{field}' must contain the specified item"


def seq_greater_than_len(field: str, lower: int) -> str:
    return f"'{field}' must be more than {lower} items in length"


def seq_greater_than_or_equal_to_len(field: str, lower: int) -> str:
    return f"'{field}' must be at least {lower} items in length"


def seq_less_than_len(field: str, upper: int) -> str:
    return f"'{field}' must be less than {upper} items in length"


def seq_less_than_or_equal_to_len(field: str, upper: int) -> str:
    return f"'{field}' must not exceed {upper} items in length"


def seq_not_empty(field: str) -> str:
    return f"'{field}' must not be empty"


# UUIDs
def uuid_empty(field: str) -> str:
    return f"'{field}' must be empty"


def uuid_not_empty(field: str) -> str:
    return f"'{field}' must not be empty"


# Presence
def required(field: str) -> str:
    return f"'{field}' is required"


def rule_error(field: str, exc: BaseException) -> str:
    return f"'{field}' could not be validated: {exc}"
