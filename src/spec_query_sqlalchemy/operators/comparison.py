"""Comparison and set operators: =, !=, >, <, >=, <=, in, not_in, between."""

from __future__ import annotations

import operator as op_module
from typing import TYPE_CHECKING, Any, ClassVar, cast

from spec_query.operators import SpecificationOperator

from ..strategy import SQLAlchemyOperator

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy.sql.elements import ColumnElement


class _BinaryOperator(SQLAlchemyOperator):
    """Operator backed by a plain Python binary operator on the column."""

    operator: ClassVar[SpecificationOperator]
    func: ClassVar[Callable[[Any, Any], Any]]

    @property
    def name(self) -> SpecificationOperator:
        return self.operator

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", type(self).func(column, value))


class EqualOperator(_BinaryOperator):
    operator = SpecificationOperator.EQ
    func = op_module.eq


class NotEqualOperator(_BinaryOperator):
    operator = SpecificationOperator.NE
    func = op_module.ne


class GreaterThanOperator(_BinaryOperator):
    operator = SpecificationOperator.GT
    func = op_module.gt


class LessThanOperator(_BinaryOperator):
    operator = SpecificationOperator.LT
    func = op_module.lt


class GreaterEqualOperator(_BinaryOperator):
    operator = SpecificationOperator.GE
    func = op_module.ge


class LessEqualOperator(_BinaryOperator):
    operator = SpecificationOperator.LE
    func = op_module.le


class InOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.in_(list(value)))


class NotInOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_IN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.not_in(list(value)))


class BetweenOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        low, high = value
        return cast("ColumnElement[bool]", column.between(low, high))


class NotBetweenOperator(SQLAlchemyOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_BETWEEN

    def apply(self, column: Any, value: Any) -> ColumnElement[bool]:
        low, high = value
        return cast("ColumnElement[bool]", ~column.between(low, high))
