"""Pydantic schemas for the JSON:API wire shape."""

from jsonapi_core.schemas.relationship import (
    ErrorDocument,
    ErrorObject,
    LinkObject,
    RelationshipObject,
)

__all__ = [
    "ErrorDocument",
    "ErrorObject",
    "LinkObject",
    "RelationshipObject",
]
