"""Library configuration (settings and environment).

Single source of truth for configuration. Uses pydantic-settings with
.env support and the JSONAPI_ prefix (e.g. JSONAPI_DEBUG=true).
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment and .env."""

    app_name: str = "jsonapi-core"
    debug: bool = False
    # None = DEBUG when debug is True, otherwise INFO
    log_level: str | None = None

    # Path segment between the resource URL and the field in self links
    relationships_segment: str = "relationships"

    # Include exception details in rendered error documents
    expose_error_details: bool = False

    model_config = SettingsConfigDict(
        env_prefix="JSONAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("relationships_segment")
    @classmethod
    def validate_relationships_segment(cls, value: str) -> str:
        """Require a single non-empty path segment."""
        value = value.strip()
        if not value or "/" in value:
            raise ValueError(
                "relationships_segment must be a non-empty path segment without '/'"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a standard logging level, got: {value!r}")
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
