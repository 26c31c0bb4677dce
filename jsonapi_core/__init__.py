"""JSON:API core: relationship descriptors, links, and error surface."""

from jsonapi_core.document import Link, Links
from jsonapi_core.domain import (
    JsonApiException,
    LinkVisibility,
    PropertyReadable,
    ValidationException,
)
from jsonapi_core.resources import Relation

__all__ = [
    "JsonApiException",
    "Link",
    "LinkVisibility",
    "Links",
    "PropertyReadable",
    "Relation",
    "ValidationException",
]
