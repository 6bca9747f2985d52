"""
Compile specification parts into SQLAlchemy constructs.

``build_sqla_filter`` walks the predicate AST produced by
``Predicate.to_dict()`` and delegates each leaf to a
``SQLAlchemyOperatorRegistry``.  ``build_loader_option`` turns a dotted
include path into an eager-loading option chain, and ``order_column``
resolves an ordering key to a column and the outer joins it needs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import ColumnElement, and_, not_, or_
from sqlalchemy.orm import (
    ColumnProperty,
    RelationshipProperty,
    aliased,
    joinedload,
    selectinload,
)

from spec_query.operators import SpecificationOperator

from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from spec_query.member_path import MemberPath

    from .strategy import SQLAlchemyOperatorRegistry


def build_sqla_filter(
    model: type[Any],
    data: dict[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a predicate dictionary.

    Args:
        model: The mapped class the predicate applies to.
        data: Predicate AST as produced by ``predicate.to_dict()``.
        registry: Optional operator registry, ``DEFAULT_SQLA_REGISTRY``
            otherwise.
    """
    return _compile_node(model, data, registry or DEFAULT_SQLA_REGISTRY)


def build_loader_option(
    model: type[Any], path: str, *, split_query: bool = False
) -> Any:
    """
    Eager-load option for a dotted relationship path.

    Every segment must name a relationship of the class reached so far.
    ``joinedload`` is used by default; ``selectinload`` when *split_query*
    is set, so that each collection is fetched by its own SELECT.

    Raises:
        AttributeError: If a segment is not a relationship.
    """
    loader = selectinload if split_query else joinedload
    option: Any = None
    current = model
    for segment in path.split("."):
        rel_attr = _relationship(current, segment)
        if option is None:
            option = loader(rel_attr)
        elif split_query:
            option = option.selectinload(rel_attr)
        else:
            option = option.joinedload(rel_attr)
        current = rel_attr.property.mapper.class_
    return option


def order_column(model: type[Any], key: MemberPath) -> tuple[Any, tuple[Any, ...]]:
    """
    Resolve an ordering key to a column plus the joins it needs.

    ``name`` resolves to ``model.name`` with no joins.  ``address.city.name``
    walks scalar relationships: each one becomes an aliased outer join, so
    rows without the related object are kept, and the column of the last
    alias is returned.

    Raises:
        AttributeError: If a segment is not a scalar relationship, names a
            collection, or the last member is not a mapped column.
    """
    *navigation, leaf = key.members
    joins: list[Any] = []
    current: Any = model
    for segment in navigation:
        rel_attr = _relationship(current, segment)
        if rel_attr.property.uselist:
            raise AttributeError(
                f"Cannot order {model.__name__} by {key.path!r}: "
                f"{segment!r} is a collection"
            )
        target = aliased(rel_attr.property.mapper.class_)
        joins.append(rel_attr.of_type(target))
        current = target

    column = getattr(current, leaf, None)
    if column is None or not isinstance(
        getattr(column, "property", None), ColumnProperty
    ):
        raise AttributeError(f"Model {model.__name__} has no column {key.path!r}")
    return column, tuple(joins)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _relationship(model: type[Any], name: str) -> Any:
    rel_attr = getattr(model, name, None)
    if rel_attr is None or not isinstance(
        getattr(rel_attr, "property", None), RelationshipProperty
    ):
        raise AttributeError(f"Model {model.__name__} has no relationship {name!r}")
    return rel_attr


def _compile_node(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    op_str = str(data.get("op", "")).lower()
    conditions = data.get("conditions", [])

    if op_str == SpecificationOperator.AND:
        return and_(*(_compile_node(model, c, registry) for c in conditions))
    if op_str == SpecificationOperator.OR:
        return or_(*(_compile_node(model, c, registry) for c in conditions))
    if op_str == SpecificationOperator.NOT:
        return not_(and_(*(_compile_node(model, c, registry) for c in conditions)))
    return _compile_leaf(model, data, registry, op_str)


def _compile_leaf(
    model: type[Any],
    data: dict[str, Any],
    registry: SQLAlchemyOperatorRegistry,
    op_str: str,
) -> ColumnElement[bool]:
    attr: str | None = data.get("attr")
    val = data.get("val")
    if not attr:
        raise ValueError(f"Predicate missing 'attr': {data}")

    # Relationship traversal, e.g. "orders.total"
    if "." in attr:
        rel_name, nested_attr = attr.split(".", 1)
        rel_attr = _relationship(model, rel_name)
        target = rel_attr.property.mapper.class_
        inner = _compile_node(
            target, {"op": op_str, "attr": nested_attr, "val": val}, registry
        )
        if rel_attr.property.uselist:
            return cast("ColumnElement[bool]", rel_attr.any(inner))
        return cast("ColumnElement[bool]", rel_attr.has(inner))

    column = getattr(model, attr, None)
    if column is None:
        raise AttributeError(f"Model {model.__name__} has no attribute {attr!r}")
    return registry.apply(SpecificationOperator(op_str), column, val)

