"""Domain layer: accessors, value objects, enums, and exceptions.

No dependencies on the HTTP layer. Used by document and resources modules.
"""

from jsonapi_core.domain.accessors import (
    AttributeReader,
    MappingReader,
    PropertyReadable,
    reader_for,
)
from jsonapi_core.domain.enums import LinkVisibility
from jsonapi_core.domain.exceptions import (
    JsonApiException,
    ValidationException,
)
from jsonapi_core.domain.value_objects import (
    LazyValue,
    LiteralValue,
    Value,
    value_of,
)

__all__ = [
    # Accessors
    "AttributeReader",
    "MappingReader",
    "PropertyReadable",
    "reader_for",
    # Enums
    "LinkVisibility",
    # Exceptions
    "JsonApiException",
    "ValidationException",
    # Value objects
    "LazyValue",
    "LiteralValue",
    "Value",
    "value_of",
]
