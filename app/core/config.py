"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Search limits are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; see validate_search_limits for
    the constraints enforced at load time.
    """

    # Logging (DEBUG level when true)
    debug: bool = False

    # Database (async SQLAlchemy URL, e.g. postgresql+asyncpg://...)
    database_url: str = ""
    database_echo: bool = False

    # Search: provider name, max query length (0 disables), result cap (0 disables)
    search_provider: str = "postgres"
    search_query_max_length: int = 256
    search_max_results: int = 500

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_search_limits(self) -> "Settings":
        """Reject negative search limits and an empty provider name."""
        if not self.search_provider.strip():
            raise ValueError("SEARCH_PROVIDER must be a non-empty provider name.")
        if self.search_query_max_length < 0:
            raise ValueError(
                f"SEARCH_QUERY_MAX_LENGTH must be >= 0, got: {self.search_query_max_length}"
            )
        if self.search_max_results < 0:
            raise ValueError(
                f"SEARCH_MAX_RESULTS must be >= 0, got: {self.search_max_results}"
            )
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
