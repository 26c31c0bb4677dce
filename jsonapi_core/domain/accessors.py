"""Property accessors for arbitrary backing models (DIP).

A relation looks up its value on the owning resource's model by name. The
model can be any object: an attribute-bearing instance, a mapping, or a
PropertyReadable subclass. Missing properties resolve to None.

Only explicit PropertyReadable subclasses provide their own lookup. A model
that merely has a `get` attribute (e.g. an active-record query classmethod)
is read by attribute.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from jsonapi_core.domain.exceptions import ValidationException


class PropertyReadable(ABC):
    """Base class for models and adapters whose properties are read by name."""

    @abstractmethod
    def get(self, name: str) -> Any | None:
        """Return the named property, or None when it is absent."""


class MappingReader(PropertyReadable):
    """Reads properties from a mapping by key."""

    def __init__(self, model: Mapping[str, Any]) -> None:
        self._model = model

    def get(self, name: str) -> Any | None:
        return self._model.get(name)


class AttributeReader(PropertyReadable):
    """Reads properties from an object by attribute name."""

    def __init__(self, model: object) -> None:
        self._model = model

    def get(self, name: str) -> Any | None:
        return getattr(self._model, name, None)


def reader_for(model: Any) -> PropertyReadable:
    """Return an accessor for the given model.

    Mappings get a MappingReader, PropertyReadable subclasses are used
    as-is, everything else gets an AttributeReader.

    Args:
        model: Backing data object of the owning resource.

    Returns:
        A PropertyReadable over model.

    Raises:
        ValidationException: If model is None.
    """
    if model is None:
        raise ValidationException("Relation model must not be None", field="model")
    if isinstance(model, Mapping):
        return MappingReader(model)
    if isinstance(model, PropertyReadable):
        return model
    return AttributeReader(model)
