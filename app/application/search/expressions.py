"""Backend-agnostic expression tree for search predicates.

Definitions describe what to match with these nodes; a search provider
compiles them into its native query form. Nodes are immutable and hold
only table/column names and plain values, never backend objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Column:
    """Reference to a column by table name and column name."""

    table: str
    name: str


@dataclass(frozen=True)
class Literal:
    """Constant value (e.g. a separator inside a concatenation)."""

    value: Any


@dataclass(frozen=True)
class Coalesce:
    """expr, or default when expr is NULL."""

    expr: Expression
    default: str = ""


@dataclass(frozen=True)
class Concat:
    """String concatenation of parts, in order."""

    parts: tuple[Expression, ...]


@dataclass(frozen=True)
class AsText:
    """expr rendered as text (e.g. an id column)."""

    expr: Expression


@dataclass(frozen=True)
class Match:
    """Case-insensitive pattern match of expr against a prepared pattern.

    pattern is already escaped and wrapped by the provider that built it;
    escape is the character used to escape wildcards in pattern.
    """

    expr: Expression
    pattern: str
    escape: str = "\\"


@dataclass(frozen=True)
class Eq:
    """expr equals a constant value."""

    expr: Expression
    value: Any


@dataclass(frozen=True)
class And:
    """Logical AND of operands."""

    operands: tuple[Expression, ...]


@dataclass(frozen=True)
class Or:
    """Logical OR of operands."""

    operands: tuple[Expression, ...]


Expression = Union[Column, Literal, Coalesce, Concat, AsText, Match, Eq, And, Or]


def concat_ws(*parts: Expression, separator: str = " ") -> Expression:
    """Join parts with separator, treating NULL parts as empty strings.

    A NULL part would otherwise null out the whole concatenation, hiding
    the row from every match on it.
    """
    if not parts:
        return Literal("")
    items: list[Expression] = []
    for i, part in enumerate(parts):
        if i:
            items.append(Literal(separator))
        items.append(Coalesce(part))
    return Concat(tuple(items))


def full_name(table: str) -> Expression:
    """'last first middle' for a table with last_name, first_name, middle_name."""
    return concat_ws(
        Column(table, "last_name"),
        Column(table, "first_name"),
        Column(table, "middle_name"),
    )
