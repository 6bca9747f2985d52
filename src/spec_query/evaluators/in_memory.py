"""In-memory evaluators: criteria and ordering over materialised sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .base import InMemoryEvaluator

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..ports.specification import ISpecification

T = TypeVar("T")


class InMemoryCriteriaEvaluator(InMemoryEvaluator):
    __slots__ = ()

    @property
    def is_criteria_evaluator(self) -> bool:
        return True

    def evaluate(self, source: Iterable[T], spec: ISpecification[T]) -> Iterable[T]:
        if spec.criteria is None:
            return source
        predicate = spec.criteria.is_satisfied_by
        return [item for item in source if predicate(item)]


def _null_first(extract: Callable[[Any], Any]) -> Callable[[Any], tuple[bool, Any]]:
    # None sorts before any value, matching SQL "NULLS FIRST" for ascending.
    def key(item: Any) -> tuple[bool, Any]:
        value = extract(item)
        return (value is not None, value)

    return key


class InMemoryOrderingEvaluator(InMemoryEvaluator):
    """Stable sort; ascending wins when both directions are set."""

    __slots__ = ()

    def evaluate(self, source: Iterable[T], spec: ISpecification[T]) -> Iterable[T]:
        if spec.order_by is not None:
            return sorted(source, key=_null_first(spec.order_by.compile()))
        if spec.order_by_descending is not None:
            return sorted(
                source,
                key=_null_first(spec.order_by_descending.compile()),
                reverse=True,
            )
        return source


IN_MEMORY_CRITERIA_EVALUATOR = InMemoryCriteriaEvaluator()
IN_MEMORY_ORDERING_EVALUATOR = InMemoryOrderingEvaluator()
