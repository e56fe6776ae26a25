"""
Pydantic interop for vouch.

Provides errors_from_pydantic(), model() and validate_model().
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .applicative import gather
from .core import V
from .errors import FieldErrors
from .types import Failure, Outcome, Success

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

ROOT_FIELD = "__root__"


def errors_from_pydantic(exc: ValidationError, field: str | None = None) -> FieldErrors:
    """
    Convert a pydantic ValidationError into FieldErrors.

    Each error is keyed by its dotted location, prefixed with `field` when
    given. An error without a location is keyed by `field` (or "__root__").

    Usage:
        try:
            User.model_validate({"age": "x"})
        except ValidationError as e:
            errors_from_pydantic(e).to_map()
            # {"name": ["Field required"], "age": ["Input should be a valid integer, ..."]}
    """
    collected = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        if field and loc:
            key = f"{field}.{loc}"
        else:
            key = loc or field or ROOT_FIELD
        collected.append(FieldErrors.create(key, [error["msg"]]))

    logger.debug("Converted %d pydantic error(s) for %s", len(collected), exc.title)
    return FieldErrors.collect(collected)


def model(model_cls: type[M]) -> V:
    """
    Validator parsing its input into a pydantic model.

    Usage:
        user_v = model(User) >> check_user
        user_v("user", {"name": "Alice", "age": 30})   # Success(User(...))
    """

    def validate(field: str, data: Any) -> Outcome[M]:
        try:
            return Success(model_cls.model_validate(data))
        except ValidationError as e:
            return Failure(errors_from_pydantic(e, field))

    return V(validate)


def validate_model(model_cls: type[M], /, **outcomes: Outcome[Any]) -> Outcome[M]:
    """
    Build a pydantic model from independently validated fields.

    Field failures are merged as with validate(); if every field passed but
    the model itself rejects the values, its errors are returned as a
    Failure instead of being raised.

    Usage:
        validate_model(
            User,
            name=string.not_empty()("name", data["name"]),
            age=value.greater_than(0)("age", data["age"]),
        )
    """
    fields = gather(outcomes)
    if isinstance(fields, Failure):
        return fields
    try:
        return Success(model_cls(**fields.value))
    except ValidationError as e:
        return Failure(errors_from_pydantic(e))
