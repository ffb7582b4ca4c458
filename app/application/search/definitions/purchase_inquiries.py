"""Purchase inquiries: contact name and phone."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.search.definitions.base import SearchDefinition
from app.application.search.expressions import Column, Expression, full_name
from app.domain.enums import SearchEntity

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchProvider


class PurchaseInquiriesDefinition(SearchDefinition):
    """Inquiries by the inquiring contact's name or phone (to-one joins only)."""

    entity = SearchEntity.PURCHASE_INQUIRIES
    joins = ("contact.person",)

    def predicates(
        self,
        query: str,
        context: SearchContext,
        provider: ISearchProvider,
    ) -> list[Expression | None]:
        return [
            self._text(provider, full_name("contact"), query),
            self._phone(provider, Column("person", "normalized_phone"), query),
        ]
