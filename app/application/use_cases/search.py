"""Search use case: narrow a collection by a free-form query for one entity."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from app.application.dtos.search import SearchConfig, SearchContext
from app.application.search.query_parser import QueryParser
from app.application.search.registry import SearchRegistry, default_registry
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_attributes, traced

if TYPE_CHECKING:
    from app.application.interfaces.search import ISearchCollection, ISearchProvider
    from app.domain.enums import SearchEntity

logger = get_logger(__name__)

C = TypeVar("C", bound="ISearchCollection")


class QueryService:
    """Entry point for entity search (parse, resolve, compile, cap).

    Stateless after construction; one instance can serve concurrent calls.
    """

    def __init__(
        self,
        config: SearchConfig,
        provider_factory: Callable[[str], ISearchProvider],
        registry: SearchRegistry | None = None,
    ) -> None:
        """Initialize with search settings and collaborators.

        Args:
            config: Provider name and query/result limits.
            provider_factory: Resolves a provider name to a provider; raises
                UnknownSearchProviderException for unknown names.
            registry: Definitions by entity; defaults to the built-in registry.
        """
        self.config = config
        self.provider_factory = provider_factory
        self.registry = registry or default_registry
        self.parser = QueryParser(max_length=config.query_max_length)

    @traced("search.query")
    def search(
        self,
        entity: SearchEntity | str,
        collection: C,
        query: str | None,
        context: SearchContext | None = None,
        limit: int | None = None,
    ) -> C:
        """Return collection narrowed to rows matching query for entity.

        A None or blank query returns collection unchanged. Only the masked
        query is logged.

        Args:
            entity: Searchable entity kind the collection holds.
            collection: Already scoped and authorized collection.
            query: Raw query text from the caller.
            context: Tenant/actor; defaults to the request context.
            limit: Optional cap on result rows; ignored unless > 0.

        Returns:
            New collection (same kind as the input); nothing is executed.

        Raises:
            QueryTooLongException: Query longer than the configured maximum.
            UnknownSearchEntityException: No definition for entity.
            UnknownSearchProviderException: Configured provider is unknown.
        """
        parsed = self.parser.parse(query)
        if parsed is None:
            return collection

        context = context or SearchContext.from_request()
        entity_key = getattr(entity, "value", entity)
        add_span_attributes(
            **{"search.entity": str(entity_key), "search.tenant_id": context.tenant_id}
        )
        logger.info(
            "search entity=%s tenant_id=%s q=%s",
            entity_key,
            context.tenant_id,
            parsed.masked,
        )

        definition = self.registry.definition_for(entity)
        provider = self.provider_factory(self.config.provider)
        result = provider.apply(collection, definition, parsed.normalized, context)
        return self._apply_limit(result, limit)

    def _apply_limit(self, collection: C, limit: int | None) -> C:
        """Cap at limit (clamped to max_results) when limit is positive."""
        if limit is None or limit <= 0:
            return collection
        if self.config.max_results and self.config.max_results > 0:
            limit = min(limit, self.config.max_results)
        return collection.limit(limit)
