"""Domain value objects (literal and lazily produced values)."""

from jsonapi_core.domain.value_objects.core import (
    LazyValue,
    LiteralValue,
    Value,
    value_of,
)

__all__ = [
    "LazyValue",
    "LiteralValue",
    "Value",
    "value_of",
]
