from __future__ import annotations

import pytest
from sample_models import AddressRow, PersonRow
from sqlalchemy import select
from sqlalchemy.dialects import sqlite

from spec_query import (
    AttributePredicate,
    MemberPath,
    SpecificationOperator,
    as_predicate,
)
from spec_query_sqlalchemy import (
    DEFAULT_SQLA_REGISTRY,
    SQLAlchemyOperatorRegistry,
    build_loader_option,
    build_sqla_filter,
    order_column,
)
from spec_query_sqlalchemy.operators.comparison import EqualOperator


def _sql(clause) -> str:
    stmt = select(PersonRow).where(clause)
    compiled = stmt.compile(
        dialect=sqlite.dialect(), compile_kwargs={"literal_binds": True}
    )
    return str(compiled)


def test_leaf_comparison():
    clause = build_sqla_filter(PersonRow, {"op": ">=", "attr": "age", "val": 30})
    assert "people.age >= 30" in _sql(clause)


def test_composite_predicate_from_lambda():
    pred = as_predicate(
        lambda p: p.is_active & ((p.age < 20) | p.name.startswith("A"))
    )
    sql = _sql(build_sqla_filter(PersonRow, pred.to_dict()))
    assert " AND " in sql
    assert " OR " in sql
    assert "people.age < 20" in sql


def test_not_predicate():
    pred = ~as_predicate(lambda p: p.name == "Bob")
    sql = _sql(build_sqla_filter(PersonRow, pred.to_dict()))
    assert "people.name != 'Bob'" in sql


def test_scalar_relationship_uses_has():
    clause = build_sqla_filter(
        PersonRow, {"op": "=", "attr": "address.street", "val": "Main St"}
    )
    assert "EXISTS" in _sql(clause)


def test_collection_relationship_uses_any():
    clause = build_sqla_filter(
        PersonRow, {"op": ">", "attr": "orders.total", "val": 100}
    )
    sql = _sql(clause)
    assert "EXISTS" in sql
    assert "orders.total > 100" in sql


def test_unknown_attribute_raises():
    with pytest.raises(AttributeError):
        build_sqla_filter(PersonRow, {"op": "=", "attr": "salary", "val": 1})


def test_leaf_without_attr_raises():
    with pytest.raises(ValueError, match="missing 'attr'"):
        build_sqla_filter(PersonRow, {"op": "=", "val": 1})


def test_custom_registry_is_used():
    registry = SQLAlchemyOperatorRegistry()
    registry.register(EqualOperator())
    pred = AttributePredicate("age", SpecificationOperator.EQ, 3)
    assert build_sqla_filter(PersonRow, pred.to_dict(), registry=registry) is not None
    with pytest.raises(ValueError, match="Unsupported operator"):
        build_sqla_filter(
            PersonRow, {"op": ">", "attr": "age", "val": 3}, registry=registry
        )


def test_default_registry_matches_memory_operators():
    op = SpecificationOperator
    logical = {op.AND, op.OR, op.NOT}
    assert DEFAULT_SQLA_REGISTRY.supported_operators == set(op) - logical


def test_loader_option_walks_relationships():
    assert build_loader_option(PersonRow, "address.city") is not None
    assert build_loader_option(PersonRow, "orders.lines", split_query=True) is not None


@pytest.mark.parametrize("path", ["name", "address.street", "missing"])
def test_loader_option_rejects_non_relationships(path):
    with pytest.raises(AttributeError, match="no relationship"):
        build_loader_option(PersonRow, path)


def test_order_column():
    column, joins = order_column(PersonRow, MemberPath(("age",)))
    assert column is PersonRow.age
    assert joins == ()
    with pytest.raises(AttributeError):
        order_column(PersonRow, MemberPath(("address",)))
    with pytest.raises(AttributeError):
        order_column(AddressRow, MemberPath(("town", "name")))


def test_order_column_through_scalar_relationships():
    column, joins = order_column(AddressRow, MemberPath(("city", "name")))
    assert column.key == "name"
    assert len(joins) == 1

    _, joins = order_column(PersonRow, MemberPath(("address", "city", "name")))
    assert len(joins) == 2


def test_order_column_rejects_collections():
    with pytest.raises(AttributeError, match="'orders' is a collection"):
        order_column(PersonRow, MemberPath(("orders", "total")))
