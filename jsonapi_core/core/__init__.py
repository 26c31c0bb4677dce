"""Core: config, responses, and exception handlers.

Only settings are re-exported here so that domain code importing config
does not load the HTTP layer. Import exception handlers and responses from
jsonapi_core.core.exception_handlers and jsonapi_core.core.responses.
"""

from jsonapi_core.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
