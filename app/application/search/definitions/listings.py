"""Listings: title, owner full name, address."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.search.definitions.base import SearchDefinition
from app.application.search.expressions import Column, Expression, concat_ws, full_name
from app.domain.enums import SearchEntity

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchProvider


class ListingsDefinition(SearchDefinition):
    """Listings by title, any owner's contact name, or location address.

    A listing with several owners joins to several rows, hence distinct.
    """

    entity = SearchEntity.LISTINGS
    requires_distinct = True
    joins = ("location", "owners.contact")

    def predicates(
        self,
        query: str,
        context: SearchContext,
        provider: ISearchProvider,
    ) -> list[Expression | None]:
        address = concat_ws(
            Column("listing_location", "country"),
            Column("listing_location", "region"),
            Column("listing_location", "city"),
            Column("listing_location", "street"),
            Column("listing_location", "house_number"),
        )
        return [
            self._text(provider, Column("listing", "title"), query),
            self._text(provider, full_name("contact"), query),
            self._text(provider, address, query),
        ]
