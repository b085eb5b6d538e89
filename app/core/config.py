"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Limits are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    DATABASE_URL is only required once a session is requested
    (see app.infrastructure.persistence.database.get_db).
    """

    # App
    app_name: str = "entity-relations"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (SQLAlchemy async URL, e.g. postgresql+asyncpg://...)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # Relationship resolution
    relationship_row_limit: int = 50  # per rule; extra rows are silently dropped
    relationship_default_strength: int = 5

    # Cross-type search
    search_default_limit: int = 20
    search_per_type_limit: int = 10
    search_max_limit: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Validate row and search limits.

        - All limits must be >= 1.
        - search_default_limit must not exceed search_max_limit.
        - relationship_default_strength must be within 1-10.
        """
        for name in (
            "relationship_row_limit",
            "search_default_limit",
            "search_per_type_limit",
            "search_max_limit",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name.upper()} must be >= 1")
        if self.search_default_limit > self.search_max_limit:
            raise ValueError(
                "SEARCH_DEFAULT_LIMIT must not exceed SEARCH_MAX_LIMIT "
                f"({self.search_default_limit} > {self.search_max_limit})"
            )
        if not 1 <= self.relationship_default_strength <= 10:
            raise ValueError("RELATIONSHIP_DEFAULT_STRENGTH must be between 1 and 10")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
