"""Document building blocks (links)."""

from jsonapi_core.document.links import Link, Links

__all__ = ["Link", "Links"]
