"""
vouch - Composable field validation with error accumulation.

Usage:
    from vouch import ValidatorGroup, validate
    from vouch.validators import string, value

    name_v = string.between_len(3, 64)
    age_v = value.greater_than(0)

    result = validate(Person, name=name_v("name", "Jo"), age=age_v("age", -1))
    # Failure({"name": [...], "age": [...]})  -- every failed field is reported
"""

from .applicative import gather, validate, validation, zip_all
from .context import is_capturing, validation_context
from .core import (
    V,
    bind_result,
    choice,
    compose,
    create,
    fail,
    kleisli,
    map_value,
    pick_both,
    pick_left,
    pick_right,
    success,
    to_validator,
)
from .decorator import rule
from .errors import FieldErrors, ValidationFailed
from .group import ValidatorGroup
from .schema import errors_from_pydantic, model, validate_model
from .types import Failure, Outcome, Success, apply, zip_outcomes
from .validators import optional, required

__all__ = [
    # Errors
    "FieldErrors",
    "ValidationFailed",
    # Outcomes
    "Success",
    "Failure",
    "Outcome",
    "apply",
    "zip_outcomes",
    # Validators
    "V",
    "create",
    "success",
    "fail",
    "to_validator",
    "rule",
    "optional",
    "required",
    # Combinators
    "compose",
    "kleisli",
    "choice",
    "pick_left",
    "pick_right",
    "pick_both",
    "map_value",
    "bind_result",
    "ValidatorGroup",
    # Composition
    "zip_all",
    "gather",
    "validate",
    "validation",
    # Pydantic
    "errors_from_pydantic",
    "model",
    "validate_model",
    # Config
    "validation_context",
    "is_capturing",
]
