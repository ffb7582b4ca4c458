"""DTOs for search compilation (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.core.tenant_context import get_tenant_id
from app.shared.context import get_current_actor_id

if TYPE_CHECKING:
    from app.core.config import Settings


@dataclass(frozen=True)
class SearchContext:
    """Requesting tenant and actor for one search call (read-only)."""

    tenant_id: str | None = None
    actor_id: str | None = None

    @classmethod
    def from_request(cls) -> SearchContext:
        """Build from the request-scoped tenant and actor context variables."""
        return cls(tenant_id=get_tenant_id(), actor_id=get_current_actor_id())


@dataclass(frozen=True)
class ParsedQuery:
    """Normalized query for matching plus a PII-masked copy for logs only."""

    normalized: str
    masked: str


@dataclass(frozen=True)
class SearchConfig:
    """Search settings the QueryService is constructed with.

    query_max_length and max_results of None (or 0) disable the check/cap.
    """

    provider: str = "postgres"
    query_max_length: int | None = 256
    max_results: int | None = 500

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchConfig:
        """Build from application settings (0 means disabled)."""
        return cls(
            provider=settings.search_provider,
            query_max_length=settings.search_query_max_length or None,
            max_results=settings.search_max_results or None,
        )
