"""Relationship descriptor for a single resource relationship.

A Relation is built once per relationship while a resource is rendered,
configured through fluent calls (each returns the same instance), then read
by the document serializer through data(), meta() and links().
"""

from collections.abc import Callable, Mapping
from typing import Any

from jsonapi_core.core.config import get_settings
from jsonapi_core.document.links import Link, Links
from jsonapi_core.domain.accessors import reader_for
from jsonapi_core.domain.enums import LinkVisibility
from jsonapi_core.domain.exceptions import ValidationException
from jsonapi_core.domain.value_objects import LazyValue, Value, value_of
from jsonapi_core.schemas.relationship import RelationshipObject
from jsonapi_core.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

MetaSource = Mapping[str, Any] | Callable[[], Mapping[str, Any] | None]


def _require_name(value: str | None, field: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationException(f"{field} must be a non-empty string", field=field)
    return value


class Relation:
    """Describes how one relationship of a resource is serialized.

    Args:
        model: Backing data object of the owning resource (object, mapping,
            or PropertyReadable).
        base_url: URL of the owning resource (e.g. .../posts/1). None means
            the resource has no URL and the relation renders no links.
        field_name: JSON:API member name of the relationship.
        property_name: Name used to read the value from model. Defaults to
            field_name.

    Raises:
        ValidationException: If model is None, field_name or property_name
            is empty, or base_url is an empty string.
    """

    def __init__(
        self,
        model: Any,
        base_url: str | None,
        field_name: str,
        property_name: str | None = None,
    ) -> None:
        self._model = model
        self._reader = reader_for(model)
        if base_url is not None and not base_url:
            raise ValidationException("base_url must be a non-empty string", field="base_url")
        self._base_url = base_url.rstrip("/") if base_url else None
        self._field_name = _require_name(field_name, "field_name")
        self._property_name = (
            _require_name(property_name, "property_name") if property_name is not None else field_name
        )
        self._uri_field_name: str | None = None
        self._data: Value[Any] | None = None
        self._meta: Value[Mapping[str, Any] | None] | None = None
        self._show_data = False
        self._link_visibility = LinkVisibility.BOTH

    def field_name(self) -> str:
        """Return the JSON:API member name."""
        return self._field_name

    def property_name(self) -> str:
        """Return the name used to look the value up on the model."""
        return self._property_name

    def uri_name(self) -> str:
        """Return the path segment used when building link URLs."""
        return self._uri_field_name or self._field_name

    def link_visibility(self) -> LinkVisibility:
        """Return the current link visibility state."""
        return self._link_visibility

    def data(self) -> Any:
        """Return the relationship value.

        The explicit value from with_data() if one was set (producers run
        once and are cached), otherwise the model's property_name value.
        Missing properties yield None.
        """
        if self._data is None:
            return self._reader.get(self._property_name)
        if isinstance(self._data, LazyValue) and not self._data.is_resolved:
            logger.debug("Resolving lazy data for relation %s", self._field_name)
        return self._data.resolve()

    def with_data(self, value: Any) -> "Relation":
        """Set the relationship value, or a zero-argument producer for it."""
        self._data = value_of(value)
        return self

    def meta(self) -> Mapping[str, Any] | None:
        """Return the relationship meta, or None when none was set."""
        if self._meta is None:
            return None
        if isinstance(self._meta, LazyValue) and not self._meta.is_resolved:
            logger.debug("Resolving lazy meta for relation %s", self._field_name)
        return self._meta.resolve()

    def with_meta(self, meta: MetaSource) -> "Relation":
        """Set the relationship meta, or a zero-argument producer for it."""
        self._meta = value_of(meta)
        return self

    def show_data(self) -> bool:
        """Return whether data is rendered even when links are present."""
        return self._show_data

    def always_show_data(self) -> "Relation":
        """Render data even when links are present."""
        self._show_data = True
        return self

    def with_uri_field_name(self, name: str | None) -> "Relation":
        """Use name as the link path segment; None restores the field name.

        Neither the member name nor the data lookup change.
        """
        self._uri_field_name = _require_name(name, "uri_field_name") if name is not None else None
        return self

    def retain_field_name(self) -> "Relation":
        """Build link URLs from the model property name."""
        self._uri_field_name = self._property_name
        return self

    def with_links(self) -> "Relation":
        """Render both self and related links (the default)."""
        return self._set_link_visibility(LinkVisibility.BOTH)

    def without_self_link(self) -> "Relation":
        """Render only the related link."""
        return self._set_link_visibility(LinkVisibility.RELATED_ONLY)

    def without_related_link(self) -> "Relation":
        """Render only the self link."""
        return self._set_link_visibility(LinkVisibility.SELF_ONLY)

    def only_self_link(self) -> "Relation":
        """Render the self link and nothing else."""
        return self._set_link_visibility(LinkVisibility.SELF_ONLY)

    def only_related_link(self) -> "Relation":
        """Render the related link and nothing else."""
        return self._set_link_visibility(LinkVisibility.RELATED_ONLY)

    def without_links(self) -> "Relation":
        """Render no links."""
        return self._set_link_visibility(LinkVisibility.NONE)

    def _set_link_visibility(self, visibility: LinkVisibility) -> "Relation":
        self._link_visibility = visibility
        return self

    def self_url(self) -> str | None:
        """Return the relationship (self) URL, or None when not rendered."""
        if self._base_url is None or not self._link_visibility.shows_self():
            return None
        segment = get_settings().relationships_segment
        return f"{self._base_url}/{segment}/{self.uri_name()}"

    def related_url(self) -> str | None:
        """Return the related resource URL, or None when not rendered."""
        if self._base_url is None or not self._link_visibility.shows_related():
            return None
        return f"{self._base_url}/{self.uri_name()}"

    def links(self) -> Links:
        """Return the relationship links for the current visibility.

        Self comes before related when both are present.
        """
        links = Links()
        self_url = self.self_url()
        if self_url:
            links.push(Link("self", self_url))
        related_url = self.related_url()
        if related_url:
            links.push(Link("related", related_url))
        logger.debug(
            "Built %d link(s) for relation %s (%s)",
            len(links),
            self._field_name,
            self._link_visibility.value,
        )
        return links

    def to_relationship_object(self) -> RelationshipObject:
        """Return the relationship object for this relation.

        Data is included when show_data() is True, or when there would
        otherwise be neither links nor meta.
        """
        links = self.links()
        meta = self.meta()
        has_data = self._show_data or (links.is_empty() and meta is None)
        return RelationshipObject(
            links=links.to_dict() or None,
            data=self.data() if has_data else None,
            meta=dict(meta) if meta is not None else None,
            has_data=has_data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready relationship object."""
        return self.to_relationship_object().to_dict()

    def __repr__(self) -> str:
        return (
            f"Relation(field_name={self._field_name!r}, "
            f"property_name={self._property_name!r}, "
            f"base_url={self._base_url!r}, "
            f"links={self._link_visibility.value!r})"
        )
