"""Shared pydantic configuration for gateway payloads."""

from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Strict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Returned when a numeric field arrives as a string that is not a number.
# Booleans are not numbers here: they pass through and fail validation.
NUMERIC_SENTINEL = -1.0


def parse_lenient_float(value: Any) -> float:
    """Accept a JSON number or a numeric string.

    The gateway reports some numeric fields as quoted strings. A string that
    does not parse becomes NUMERIC_SENTINEL.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return NUMERIC_SENTINEL
    return value


LenientFloat = Annotated[float, Strict(), BeforeValidator(parse_lenient_float)]


def empty_if_null(value: Any) -> Any:
    """Decode a JSON null list as an empty list."""
    if value is None:
        return []
    return value


LenientList = Annotated[list[T], BeforeValidator(empty_if_null)]


class PortalModel(BaseModel):
    """Response model: camelCase wire names, unknown fields ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class SnakeModel(BaseModel):
    """Response model whose wire names are already snake_case."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )
