"""Tests for expression tree helpers (concat_ws, full_name)."""

from app.application.search.expressions import (
    Coalesce,
    Column,
    Concat,
    Literal,
    concat_ws,
    full_name,
)


def test_concat_ws_coalesces_every_part_and_interleaves_separator() -> None:
    expr = concat_ws(Column("t", "a"), Column("t", "b"))
    assert expr == Concat(
        (Coalesce(Column("t", "a")), Literal(" "), Coalesce(Column("t", "b")))
    )


def test_concat_ws_single_part_has_no_separator() -> None:
    assert concat_ws(Column("t", "a")) == Concat((Coalesce(Column("t", "a")),))


def test_concat_ws_empty_is_empty_literal() -> None:
    assert concat_ws() == Literal("")


def test_full_name_order_is_last_first_middle() -> None:
    expr = full_name("contact")
    assert isinstance(expr, Concat)
    columns = [p.expr.name for p in expr.parts if isinstance(p, Coalesce)]
    assert columns == ["last_name", "first_name", "middle_name"]


def test_nodes_are_hashable_values() -> None:
    assert full_name("contact") == full_name("contact")
    assert len({full_name("contact"), full_name("contact")}) == 1
