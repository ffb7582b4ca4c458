"""Catalog entities (categories, characteristics): title or id."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from app.application.search.definitions.base import SearchDefinition
from app.application.search.expressions import AsText, Column, Expression
from app.domain.enums import SearchEntity

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchProvider


class _TitleOrIdDefinition(SearchDefinition):
    """Match on title, or on the id rendered as text (pasted ids)."""

    table: ClassVar[str]

    def predicates(
        self,
        query: str,
        context: SearchContext,
        provider: ISearchProvider,
    ) -> list[Expression | None]:
        return [
            self._text(provider, Column(self.table, "title"), query),
            self._text(provider, AsText(Column(self.table, "id")), query),
        ]


class CategoriesDefinition(_TitleOrIdDefinition):
    entity = SearchEntity.CATEGORIES
    table = "category"


class CharacteristicsDefinition(_TitleOrIdDefinition):
    entity = SearchEntity.CHARACTERISTICS
    table = "characteristic"
