"""SelectCollection: ISearchCollection over a SQLAlchemy Select of one ORM entity."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, inspect, select
from sqlalchemy.sql.elements import ColumnElement


class SelectCollection:
    """Immutable wrapper around a Select rooted at one mapped class.

    Relation paths are resolved through ORM relationships starting at the
    root entity; each path segment is joined at most once, so definitions
    sharing a prefix (e.g. 'contact' and 'contact.person') do not alias.
    """

    def __init__(
        self,
        statement: Select[Any],
        entity: type | None = None,
        _joined: frozenset[str] = frozenset(),
    ) -> None:
        if entity is None:
            descriptions = statement.column_descriptions
            entity = descriptions[0].get("entity") if descriptions else None
            if entity is None:
                raise ValueError("Select must target a mapped entity")
        self.statement = statement
        self.entity = entity
        self._joined = _joined

    @classmethod
    def of(cls, entity: type) -> SelectCollection:
        """Collection of all rows of entity."""
        return cls(select(entity), entity)

    def _replace(
        self, statement: Select[Any], joined: frozenset[str] | None = None
    ) -> SelectCollection:
        return SelectCollection(
            statement, self.entity, self._joined if joined is None else joined
        )

    def outer_join(self, path: str) -> SelectCollection:
        """LEFT OUTER JOIN along a dotted relationship path.

        Raises:
            ValueError: If a segment is not a relationship of its mapper.
        """
        statement = self.statement
        joined = set(self._joined)
        current = self.entity
        prefix = ""
        for name in path.split("."):
            mapper = inspect(current)
            if name not in mapper.relationships:
                raise ValueError(
                    f"{mapper.class_.__name__} has no relationship {name!r} (path {path!r})"
                )
            rel = mapper.relationships[name]
            key = f"{prefix}{name}"
            if key not in joined:
                statement = statement.outerjoin(rel.class_attribute)
                joined.add(key)
            current = rel.mapper.class_
            prefix = f"{key}."
        return self._replace(statement, frozenset(joined))

    def distinct(self) -> SelectCollection:
        return self._replace(self.statement.distinct())

    def where(self, condition: ColumnElement[bool]) -> SelectCollection:
        return self._replace(self.statement.where(condition))

    def limit(self, count: int) -> SelectCollection:
        return self._replace(self.statement.limit(count))

    @property
    def joined_paths(self) -> frozenset[str]:
        """Relation paths joined so far (dotted, cumulative)."""
        return self._joined

    def __repr__(self) -> str:
        return f"SelectCollection({self.entity.__name__}, joined={sorted(self._joined)})"
