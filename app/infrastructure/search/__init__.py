"""Search infrastructure: SQL collection adapter, providers, and wiring.

Usage:
    collection = SelectCollection(select(Listing).where(Listing.tenant_id == tenant_id))
    result = get_query_service().search(
        SearchEntity.LISTINGS, collection, "lakeside", SearchContext(tenant_id=tenant_id)
    )
    rows = (await session.execute(result.statement)).scalars().all()
"""

from app.infrastructure.search.collection import SelectCollection
from app.infrastructure.search.factory import (
    SearchProviderFactory,
    build_query_service,
    get_query_service,
)
from app.infrastructure.search.providers import PostgresTrigramProvider

__all__ = [
    "SelectCollection",
    "SearchProviderFactory",
    "PostgresTrigramProvider",
    "build_query_service",
    "get_query_service",
]
