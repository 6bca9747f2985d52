from __future__ import annotations

import re

import pytest
from sample_models import PersonRow
from sqlalchemy.dialects import sqlite

from spec_query import (
    DEFAULT_SPECIFICATION_EVALUATOR,
    BaseSpecification,
    IQuerySource,
    MemberPath,
    as_predicate,
)
from spec_query_sqlalchemy import SQLAlchemyQuerySource


def _sql(stmt) -> str:
    compiled = stmt.compile(
        dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}
    )
    return str(compiled)


def test_is_a_query_source():
    assert isinstance(SQLAlchemyQuerySource(PersonRow), IQuerySource)


def test_every_operation_returns_a_new_source():
    base = SQLAlchemyQuerySource(PersonRow)
    filtered = base.where(as_predicate(lambda p: p.age > 3))
    included = filtered.include("orders")
    untracked = included.as_no_tracking()
    split = untracked.as_split_query()

    assert base.filters == ()
    assert len(filtered.filters) == 1
    assert included.include_paths == ("orders",)
    assert (included.no_tracking, untracked.no_tracking) == (False, True)
    assert (untracked.split_query, split.split_query) == (False, True)


def test_statement_renders_filters_and_ordering():
    source = (
        SQLAlchemyQuerySource(PersonRow)
        .where(as_predicate(lambda p: p.age >= 25))
        .order_by_descending(MemberPath(("age",)))
    )
    sql = _sql(source.statement())
    assert "WHERE people.age >= 25" in sql
    assert "ORDER BY people.age DESC" in sql


def test_ordering_by_related_member_adds_outer_join():
    source = SQLAlchemyQuerySource(PersonRow).order_by(
        MemberPath(("address", "street"))
    )
    sql = _sql(source.statement())
    assert re.search(r"LEFT OUTER JOIN addresses AS (\w+) ON", sql)
    assert re.search(r"ORDER BY \w+\.street\b", sql)
    assert "JOIN" not in _sql(source.count_statement())


def test_joined_includes_by_default():
    source = SQLAlchemyQuerySource(PersonRow).include("orders.lines")
    sql = _sql(source.statement())
    assert "LEFT OUTER JOIN orders" in sql
    assert "LEFT OUTER JOIN order_lines" in sql


def test_split_query_switches_to_separate_selects():
    source = (
        SQLAlchemyQuerySource(PersonRow).include("orders.lines").as_split_query()
    )
    sql = _sql(source.statement())
    assert "JOIN" not in sql


def test_invalid_include_fails_when_applied():
    with pytest.raises(AttributeError):
        SQLAlchemyQuerySource(PersonRow).include("name")


def test_count_statement_ignores_loader_options():
    source = (
        SQLAlchemyQuerySource(PersonRow)
        .where(as_predicate(lambda p: p.is_active))
        .include("orders")
    )
    sql = _sql(source.count_statement())
    assert sql.startswith("SELECT count(*)")
    assert "JOIN" not in sql


class ActiveWithOrders(BaseSpecification[PersonRow]):
    def __init__(self) -> None:
        super().__init__()
        self._where(lambda p: p.is_active)
        self._include_many(lambda p: p.orders).then_many(lambda o: o.lines)
        self._apply_order_by(lambda p: p.name)
        self._enable_split_query()


def test_pipeline_builds_expected_source():
    source = DEFAULT_SPECIFICATION_EVALUATOR.apply_all(
        SQLAlchemyQuerySource(PersonRow), ActiveWithOrders()
    )
    assert source.include_paths == ("orders.lines",)
    assert source.split_query is True
    assert "ORDER BY people.name" in _sql(source.statement())
