"""Relationship object and error document schemas (JSON:API wire shape)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LinkObject(BaseModel):
    """Link in object form."""

    href: str = Field(..., min_length=1)
    meta: dict[str, Any] | None = None


class RelationshipObject(BaseModel):
    """A relationship object: at least one of links, data, meta.

    `data` is only serialized when `has_data` is set, since a null `data`
    (empty to-one relationship) is distinct from an omitted member.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    links: dict[str, str | LinkObject] | None = None
    data: Any = None
    meta: dict[str, Any] | None = None
    has_data: bool = Field(default=False, exclude=True)

    @model_validator(mode="after")
    def require_member(self) -> "RelationshipObject":
        if not self.links and not self.has_data and self.meta is None:
            raise ValueError("A relationship object needs at least one of links, data, or meta")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping with absent members omitted."""
        result: dict[str, Any] = {}
        if self.links:
            result["links"] = {
                key: link.model_dump(exclude_none=True) if isinstance(link, LinkObject) else link
                for key, link in self.links.items()
            }
        if self.has_data:
            result["data"] = self.data
        if self.meta is not None:
            result["meta"] = self.meta
        return result


class ErrorObject(BaseModel):
    """A single JSON:API error object."""

    status: str
    code: str
    title: str
    detail: str | None = None
    meta: dict[str, Any] | None = None


class ErrorDocument(BaseModel):
    """JSON:API error document (`{"errors": [...]}`)."""

    errors: list[ErrorObject]
