"""Listing owners: contact name, email, phone."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.search.definitions.base import SearchDefinition
from app.application.search.expressions import Column, Expression, full_name
from app.domain.enums import SearchEntity

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchProvider


class ListingOwnersDefinition(SearchDefinition):
    """Owners by contact name, contact email, or the person's phone.

    The phone predicate is skipped when the query has no digits.
    """

    entity = SearchEntity.LISTING_OWNERS
    joins = ("contact.person",)

    def predicates(
        self,
        query: str,
        context: SearchContext,
        provider: ISearchProvider,
    ) -> list[Expression | None]:
        return [
            self._text(provider, full_name("contact"), query),
            self._text(provider, Column("contact", "email"), query),
            self._phone(provider, Column("person", "normalized_phone"), query),
        ]
