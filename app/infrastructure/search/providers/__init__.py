"""Search provider implementations."""

from app.infrastructure.search.providers.postgres_trigram import (
    PostgresTrigramProvider,
    escape_like,
)

__all__ = ["PostgresTrigramProvider", "escape_like"]
