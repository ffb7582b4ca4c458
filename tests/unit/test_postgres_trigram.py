"""Tests for PostgresTrigramProvider (LIKE escaping and expression compilation)."""

import pytest
from sqlalchemy import Column as SAColumn
from sqlalchemy import Integer, MetaData, String, Table
from sqlalchemy.dialects import postgresql

from app.application.dtos.search import SearchContext
from app.application.search.definitions.base import SearchDefinition
from app.application.search.expressions import (
    And,
    AsText,
    Column,
    Eq,
    Literal,
    Match,
    Or,
    concat_ws,
)
from app.domain.enums import SearchEntity
from app.infrastructure.persistence.models import Category
from app.infrastructure.search.collection import SelectCollection
from app.infrastructure.search.providers.postgres_trigram import (
    LIKE_ESCAPE,
    PostgresTrigramProvider,
    escape_like,
)


def _sql(element) -> str:
    return str(
        element.compile(
            dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
        )
    )


@pytest.fixture
def provider() -> PostgresTrigramProvider:
    metadata = MetaData()
    Table(
        "person_card",
        metadata,
        SAColumn("id", Integer, primary_key=True),
        SAColumn("first_name", String),
        SAColumn("last_name", String),
        SAColumn("tenant_id", String),
    )
    return PostgresTrigramProvider(metadata)


class TestEscapeLike:
    def test_wildcards_and_escape_char_are_escaped(self) -> None:
        assert escape_like("100%_a\\b") == "100\\%\\_a\\\\b"

    def test_plain_text_unchanged(self) -> None:
        assert escape_like("Lakeside") == "Lakeside"


class TestBuildTextPredicate:
    def test_wraps_escaped_query_in_wildcards(self, provider) -> None:
        expr = Column("person_card", "first_name")
        predicate = provider.build_text_predicate(expr, "Test%")
        assert predicate == Match(expr, "%Test\\%%", escape=LIKE_ESCAPE)


class TestCompile:
    def test_match_compiles_to_ilike(self, provider) -> None:
        sql = _sql(provider.compile(Match(Column("person_card", "first_name"), "%iv%")))
        assert "ILIKE" in sql
        assert "person_card.first_name" in sql

    def test_concat_ws_compiles_to_coalesced_concatenation(self, provider) -> None:
        expr = concat_ws(Column("person_card", "last_name"), Column("person_card", "first_name"))
        sql = _sql(provider.compile(expr))
        assert sql.count("coalesce(") == 2
        assert "||" in sql

    def test_as_text_casts_to_string(self, provider) -> None:
        sql = _sql(provider.compile(AsText(Column("person_card", "id"))))
        assert "CAST(person_card.id AS VARCHAR)" in sql

    def test_or_and_eq(self, provider) -> None:
        guard = Eq(Column("person_card", "tenant_id"), "t-1")
        match = Match(Column("person_card", "last_name"), "%p%")
        sql = _sql(provider.compile(Or((match, And((guard, match))))))
        assert " OR " in sql
        assert " AND " in sql
        assert "person_card.tenant_id = 't-1'" in sql

    def test_literal(self, provider) -> None:
        assert _sql(provider.compile(Literal(" "))) == "' '"

    def test_unknown_table_raises(self, provider) -> None:
        with pytest.raises(ValueError, match="Unknown table"):
            provider.compile(Column("nope", "id"))

    def test_unknown_column_raises(self, provider) -> None:
        with pytest.raises(ValueError, match="Unknown column"):
            provider.compile(Column("person_card", "nope"))

    def test_unknown_node_raises(self, provider) -> None:
        with pytest.raises(ValueError, match="Unsupported search expression"):
            provider.compile("not a node")


class _NoPredicatesDefinition(SearchDefinition):
    entity = SearchEntity.CATEGORIES

    def predicates(self, query, context, provider):
        return [None]


class TestApply:
    def test_no_usable_predicate_returns_unfiltered(self) -> None:
        provider = PostgresTrigramProvider()
        collection = SelectCollection.of(Category)
        result = provider.apply(
            collection, _NoPredicatesDefinition(), "Petrov", SearchContext()
        )
        assert result.statement.whereclause is None

    def test_default_metadata_is_orm_metadata(self) -> None:
        provider = PostgresTrigramProvider()
        assert "listing" in provider.metadata.tables
        assert "app_user" in provider.metadata.tables
