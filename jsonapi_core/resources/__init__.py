"""Resource helpers (relationship descriptors)."""

from jsonapi_core.resources.relation import Relation

__all__ = ["Relation"]
