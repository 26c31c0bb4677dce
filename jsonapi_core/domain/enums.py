"""Domain enumerations for the JSON:API core library."""

from enum import Enum


class LinkVisibility(str, Enum):
    """Which relationship links a relation renders.

    A single state, not independent flags: each visibility setter on a
    relation replaces the previous state.
    """

    BOTH = "both"
    SELF_ONLY = "self_only"
    RELATED_ONLY = "related_only"
    NONE = "none"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid visibility values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [visibility.value for visibility in cls]

    def shows_self(self) -> bool:
        """Return whether the `self` link is rendered in this state."""
        return self in (LinkVisibility.BOTH, LinkVisibility.SELF_ONLY)

    def shows_related(self) -> bool:
        """Return whether the `related` link is rendered in this state."""
        return self in (LinkVisibility.BOTH, LinkVisibility.RELATED_ONLY)
