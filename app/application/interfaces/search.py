"""Search interfaces (ports) for the application layer.

Protocols define what the search core needs from a queryable collection
and what a search backend must provide (DIP). No infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.search.definitions.base import SearchDefinition
    from app.application.search.expressions import Expression

C = TypeVar("C", bound="ISearchCollection")


# Queryable collection interface
class ISearchCollection(Protocol):
    """Lazy, immutable handle on rows of one entity kind.

    Every method returns a new collection; nothing is executed.
    """

    def outer_join(self: C, path: str) -> C:
        """Left outer join along a dotted relation path (e.g. 'owners.contact')."""

    def distinct(self: C) -> C:
        """Suppress duplicate base rows."""

    def where(self: C, condition: Any) -> C:
        """Filter by a backend-native boolean condition."""

    def limit(self: C, count: int) -> C:
        """Bound the collection to at most count rows."""


# Search provider interface
class ISearchProvider(Protocol):
    """Backend strategy that builds match predicates and applies definitions."""

    def build_text_predicate(self, expression: Expression, query: str) -> Expression:
        """Return a predicate matching expression against query as a substring."""

    def apply(
        self,
        collection: C,
        definition: SearchDefinition,
        query: str,
        context: SearchContext,
    ) -> C:
        """Apply definition joins and OR-combined predicates to collection."""
