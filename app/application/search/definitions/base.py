"""Base search definition: joins, distinct, and predicate helpers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, TypeVar

from app.application.search.expressions import And, Eq, Expression
from app.shared.utils.phone import is_phone_query, normalize_phone

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchCollection, ISearchProvider
    from app.domain.enums import SearchEntity

C = TypeVar("C", bound="ISearchCollection")


class SearchDefinition(ABC):
    """Search rules for one entity kind (OCP: one subclass per entity).

    Subclasses set entity, requires_distinct and joins, and implement
    predicates(). Instances are stateless and shared across calls.
    """

    entity: ClassVar[SearchEntity]
    # Needed whenever a join can yield several rows per base row.
    requires_distinct: ClassVar[bool] = False
    # Dotted relation paths joined (outer) before predicates are applied.
    joins: ClassVar[tuple[str, ...]] = ()

    def apply_joins(self, collection: C, context: SearchContext) -> C:
        """Outer-join the relations this entity's fields live on."""
        for path in self.joins:
            collection = collection.outer_join(path)
        if self.requires_distinct:
            collection = collection.distinct()
        return collection

    @abstractmethod
    def predicates(
        self,
        query: str,
        context: SearchContext,
        provider: ISearchProvider,
    ) -> list[Expression | None]:
        """Return alternative match predicates; None entries are omitted."""
        ...

    @staticmethod
    def _text(provider: ISearchProvider, expression: Expression, query: str) -> Expression:
        return provider.build_text_predicate(expression, query)

    @staticmethod
    def _phone(
        provider: ISearchProvider, expression: Expression, query: str
    ) -> Expression | None:
        """Match a normalized phone column; None unless query is phone-shaped."""
        if not is_phone_query(query):
            return None
        digits = normalize_phone(query)
        if not digits:
            return None
        return provider.build_text_predicate(expression, digits)

    @staticmethod
    def _tenant_guarded(
        guard_column: Expression, tenant_id: str, predicate: Expression
    ) -> Expression:
        return And((Eq(guard_column, tenant_id), predicate))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entity={self.entity.value!r})"
