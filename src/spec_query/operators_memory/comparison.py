"""Comparison and set operators: =, !=, >, <, >=, <=, in, not_in, between."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from ..operators import SpecificationOperator
from ..strategy import MemoryOperator


class _OrderedComparison(MemoryOperator):
    """Ordered comparisons never match a missing value."""

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        return self._compare(field_value, condition_value)

    @abstractmethod
    def _compare(self, left: Any, right: Any) -> bool: ...


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.EQ

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return bool(field_value == condition_value)


class NotEqualOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return bool(field_value != condition_value)


class GreaterThanOperator(_OrderedComparison):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.GT

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left > right)


class LessThanOperator(_OrderedComparison):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.LT

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left < right)


class GreaterEqualOperator(_OrderedComparison):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.GE

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left >= right)


class LessEqualOperator(_OrderedComparison):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.LE

    def _compare(self, left: Any, right: Any) -> bool:
        return bool(left <= right)


class InOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return field_value in condition_value


class NotInOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return field_value not in condition_value


class BetweenOperator(MemoryOperator):
    """Inclusive range check; ``condition_value`` is a ``(low, high)`` pair."""

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        low, high = condition_value
        return bool(low <= field_value <= high)


class NotBetweenOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_BETWEEN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        low, high = condition_value
        return not (low <= field_value <= high)
