"""Search provider factory and QueryService wiring from settings."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, ClassVar

from app.application.dtos.search import SearchConfig
from app.application.use_cases.search import QueryService
from app.domain.exceptions import UnknownSearchProviderException
from app.infrastructure.search.providers.postgres_trigram import PostgresTrigramProvider
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.application.interfaces.search import ISearchProvider
    from app.application.search.registry import SearchRegistry
    from app.core.config import Settings

logger = get_logger(__name__)


class SearchProviderFactory:
    """Factory for search provider instances by configured name."""

    _providers: ClassVar[dict[str, type[ISearchProvider]]] = {
        "postgres": PostgresTrigramProvider,
        "postgres_trigram": PostgresTrigramProvider,
    }

    @classmethod
    def create_provider(cls, name: str | None) -> ISearchProvider:
        """Create provider instance for name (case-insensitive).

        Args:
            name: Configured provider name (SEARCH_PROVIDER).

        Returns:
            Provider instance (providers are stateless; a new one is cheap).

        Raises:
            UnknownSearchProviderException: If name is not registered.
        """
        provider_class = cls._providers.get((name or "").strip().lower())
        if provider_class is None:
            raise UnknownSearchProviderException(name, cls.supported())
        return provider_class()

    @classmethod
    def register_provider(cls, name: str, provider_class: type[ISearchProvider]) -> None:
        """Register a custom provider (call at startup, before serving requests)."""
        cls._providers[name.strip().lower()] = provider_class
        logger.info("Registered search provider: %s", name)

    @classmethod
    def supported(cls) -> list[str]:
        """Registered provider names."""
        return sorted(cls._providers)


def build_query_service(
    settings: Settings | None = None,
    registry: SearchRegistry | None = None,
) -> QueryService:
    """Build a QueryService from settings.

    Args:
        settings: Application settings; if None, uses get_settings().
        registry: Optional definitions registry; defaults to the built-in one.

    Returns:
        QueryService resolving providers through SearchProviderFactory.
    """
    from app.core.config import get_settings

    s = settings or get_settings()
    return QueryService(
        config=SearchConfig.from_settings(s),
        provider_factory=SearchProviderFactory.create_provider,
        registry=registry,
    )


@lru_cache
def get_query_service() -> QueryService:
    """Return the process-wide QueryService built from cached settings.

    In tests, call get_query_service.cache_clear() after changing settings.
    """
    return build_query_service()
