"""PostgreSQL search provider: ILIKE '%query%' served by pg_trgm GIN indexes.

Compiles the search expression tree into SQLAlchemy Core elements. The
SQL only uses ILIKE, ||, coalesce and CAST, so it also runs unchanged on
other SQLAlchemy dialects (SQLite renders ILIKE as lower() LIKE lower()).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from sqlalchemy import MetaData, String, and_, cast, func, literal, or_
from sqlalchemy.sql.elements import ColumnElement

from app.application.search.expressions import (
    AsText,
    And,
    Coalesce,
    Column,
    Concat,
    Eq,
    Expression,
    Literal,
    Match,
    Or,
)
from app.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from app.application.dtos.search import SearchContext
    from app.application.interfaces.search import ISearchCollection
    from app.application.search.definitions.base import SearchDefinition

logger = get_logger(__name__)

C = TypeVar("C", bound="ISearchCollection")

LIKE_ESCAPE = "\\"


def escape_like(value: str, escape: str = LIKE_ESCAPE) -> str:
    """Escape LIKE wildcards (% and _) and the escape character itself."""
    return (
        value.replace(escape, escape + escape)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


class PostgresTrigramProvider:
    """Substring search provider (ISearchProvider) for SQL collections."""

    name = "postgres_trigram"

    def __init__(self, metadata: MetaData | None = None) -> None:
        """Initialize with the metadata columns are resolved against.

        Args:
            metadata: Table metadata; defaults to the ORM Base metadata.
        """
        if metadata is None:
            from app.infrastructure.persistence import models  # noqa: F401
            from app.infrastructure.persistence.database import Base

            metadata = Base.metadata
        self.metadata = metadata
        self._compilers: dict[type, Callable[[Any], ColumnElement[Any]]] = {
            Column: self._column,
            Literal: self._literal,
            Coalesce: self._coalesce,
            Concat: self._concat,
            AsText: self._as_text,
            Match: self._match,
            Eq: self._eq,
            And: self._and,
            Or: self._or,
        }

    def build_text_predicate(self, expression: Expression, query: str) -> Expression:
        """Case-insensitive substring match of expression against query."""
        pattern = f"%{escape_like(query)}%"
        return Match(expression, pattern, escape=LIKE_ESCAPE)

    def apply(
        self,
        collection: C,
        definition: SearchDefinition,
        query: str,
        context: SearchContext,
    ) -> C:
        """Join, then filter by the OR of the definition's predicates.

        With no usable predicate the joined collection is returned unfiltered.
        """
        prepared = definition.apply_joins(collection, context)
        predicates = [
            p for p in definition.predicates(query, context, self) if p is not None
        ]
        logger.debug(
            "Search %s: %d predicate(s)", definition.entity.value, len(predicates)
        )
        if not predicates:
            return prepared
        return prepared.where(self.compile(Or(tuple(predicates))))

    def compile(self, node: Expression) -> ColumnElement[Any]:
        """Compile an expression tree into a SQLAlchemy element.

        Raises:
            ValueError: Unknown node type, table, or column.
        """
        compiler = self._compilers.get(type(node))
        if compiler is None:
            raise ValueError(f"Unsupported search expression: {type(node).__name__}")
        return compiler(node)

    def _column(self, node: Column) -> ColumnElement[Any]:
        table = self.metadata.tables.get(node.table)
        if table is None:
            raise ValueError(f"Unknown table in search expression: {node.table!r}")
        if node.name not in table.c:
            raise ValueError(f"Unknown column in search expression: {node.table}.{node.name}")
        return table.c[node.name]

    def _literal(self, node: Literal) -> ColumnElement[Any]:
        if isinstance(node.value, str):
            return literal(node.value, String, literal_execute=True)
        return literal(node.value)

    def _coalesce(self, node: Coalesce) -> ColumnElement[Any]:
        default = literal(node.default, String, literal_execute=True)
        return func.coalesce(self.compile(node.expr), default)

    def _concat(self, node: Concat) -> ColumnElement[Any]:
        if not node.parts:
            return literal("", String)
        result = self.compile(node.parts[0])
        for part in node.parts[1:]:
            result = result.concat(self.compile(part))
        return result

    def _as_text(self, node: AsText) -> ColumnElement[Any]:
        return cast(self.compile(node.expr), String)

    def _match(self, node: Match) -> ColumnElement[Any]:
        return self.compile(node.expr).ilike(node.pattern, escape=node.escape)

    def _eq(self, node: Eq) -> ColumnElement[Any]:
        return self.compile(node.expr) == node.value

    def _and(self, node: And) -> ColumnElement[Any]:
        return and_(*(self.compile(op) for op in node.operands))

    def _or(self, node: Or) -> ColumnElement[Any]:
        return or_(*(self.compile(op) for op in node.operands))
