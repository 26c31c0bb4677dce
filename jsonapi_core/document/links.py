"""JSON:API link objects.

A Link is a named href with optional meta. Links is the ordered, key-unique
collection rendered as a document or relationship `links` member.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from jsonapi_core.domain.exceptions import ValidationException


@dataclass(frozen=True)
class Link:
    """A single named link (e.g. `self`, `related`).

    Attributes:
        key: Member name in the `links` object.
        href: Target URL.
        meta: Optional non-standard information about the link.
    """

    key: str
    href: str
    meta: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        """Validate key and href.

        Raises:
            ValidationException: If key or href is empty.
        """
        if not self.key:
            raise ValidationException("Link key must be a non-empty string", field="key")
        if not self.href:
            raise ValidationException("Link href must be a non-empty string", field="href")

    def has_meta(self) -> bool:
        return bool(self.meta)

    def to_dict(self) -> dict[str, Any]:
        """Return the link object form ({"href": ..., "meta": ...})."""
        data: dict[str, Any] = {"href": self.href}
        if self.has_meta():
            data["meta"] = dict(self.meta)
        return data

    def serialize(self) -> str | dict[str, Any]:
        """Return the bare href when there is no meta, else the link object."""
        if self.has_meta():
            return self.to_dict()
        return self.href


class Links:
    """Ordered collection of links, unique by key.

    Pushing a link whose key is already present replaces it in place, so
    iteration order is the order keys were first added.
    """

    def __init__(self, *links: Link) -> None:
        self._stack: dict[str, Link] = {}
        self.push(*links)

    def push(self, *links: Link) -> "Links":
        """Add or replace links by key; returns self."""
        for link in links:
            self._stack[link.key] = link
        return self

    def has(self, key: str) -> bool:
        return key in self._stack

    def get(self, key: str) -> Link | None:
        return self._stack.get(key)

    def forget(self, *keys: str) -> "Links":
        """Remove links by key (missing keys are ignored); returns self."""
        for key in keys:
            self._stack.pop(key, None)
        return self

    def merge(self, other: "Links | Link") -> "Links":
        """Push every link of other (or a single link) into this collection."""
        if isinstance(other, Link):
            return self.push(other)
        return self.push(*other)

    def keys(self) -> list[str]:
        return list(self._stack)

    def is_empty(self) -> bool:
        return not self._stack

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def to_dict(self) -> dict[str, str | dict[str, Any]]:
        """Return the JSON-ready `links` member."""
        return {key: link.serialize() for key, link in self._stack.items()}

    def __iter__(self) -> Iterator[Link]:
        return iter(list(self._stack.values()))

    def __len__(self) -> int:
        return len(self._stack)

    def __contains__(self, key: object) -> bool:
        return key in self._stack

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Links):
            return NotImplemented
        return list(self._stack.items()) == list(other._stack.items())

    def __repr__(self) -> str:
        return f"Links({', '.join(repr(link) for link in self._stack.values())})"
