"""Validation of the Link header parser options."""

import inspect
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, StrictBool, ValidationError, field_validator

from github_paginate.exceptions import ConfigurationError

_REASONS = {
    "pagination_transform": "must be a single-argument function",
    "keep_original_link": "must be a boolean",
    "strict_relations": "must be a boolean",
}


def identity(link: Any) -> Any:
    """Default pagination transform."""
    return link


class LinkHeaderOptions(BaseModel):
    """Options accepted by the Link header response step."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    pagination_transform: Callable[[Any], Any] = identity
    keep_original_link: StrictBool = False
    strict_relations: StrictBool = False

    @field_validator("pagination_transform")
    @classmethod
    def check_single_argument(cls, value: Callable[..., Any]) -> Callable[..., Any]:
        """Reject callables that cannot be called with exactly one argument."""
        try:
            signature = inspect.signature(value)
        except (TypeError, ValueError):
            # Some builtins expose no signature; accept them as callables
            return value

        try:
            signature.bind(None)
        except TypeError as e:
            raise ValueError("must accept exactly one positional argument") from e
        return value


def validate_options(**options: Any) -> LinkHeaderOptions:
    """Validate parser options, raising ConfigurationError on the first bad value."""
    try:
        return LinkHeaderOptions(**options)
    except ValidationError as e:
        error = e.errors()[0]
        option = str(error["loc"][0]) if error["loc"] else "options"
        reason = _REASONS.get(option, "is not a recognised option")
        raise ConfigurationError(option, error.get("input"), reason) from e
