"""
Evaluator pipelines.

``SpecificationEvaluator`` folds a specification into a query source in a
fixed order: criteria → include paths → no tracking → split query →
ordering.  ``InMemorySpecificationEvaluator`` applies the subset that makes
sense for an already materialised sequence: criteria → ordering.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from .in_memory import IN_MEMORY_CRITERIA_EVALUATOR, IN_MEMORY_ORDERING_EVALUATOR
from .query import (
    CRITERIA_EVALUATOR,
    INCLUDE_PATHS_EVALUATOR,
    NO_TRACKING_EVALUATOR,
    ORDERING_EVALUATOR,
    SPLIT_QUERY_EVALUATOR,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..ports.query_source import IQuerySource
    from ..ports.specification import ISpecification
    from .base import Evaluator, InMemoryEvaluator

Q = TypeVar("Q", bound="IQuerySource")
T = TypeVar("T")

logger = logging.getLogger("spec_query.evaluators")

DEFAULT_EVALUATORS: tuple[Evaluator, ...] = (
    CRITERIA_EVALUATOR,
    INCLUDE_PATHS_EVALUATOR,
    NO_TRACKING_EVALUATOR,
    SPLIT_QUERY_EVALUATOR,
    ORDERING_EVALUATOR,
)

DEFAULT_IN_MEMORY_EVALUATORS: tuple[InMemoryEvaluator, ...] = (
    IN_MEMORY_CRITERIA_EVALUATOR,
    IN_MEMORY_ORDERING_EVALUATOR,
)


class SpecificationEvaluator:
    """Applies a specification to a query source through an evaluator list."""

    __slots__ = ("_evaluators",)

    def __init__(self, evaluators: Sequence[Evaluator] = DEFAULT_EVALUATORS) -> None:
        self._evaluators = tuple(evaluators)

    @property
    def evaluators(self) -> tuple[Evaluator, ...]:
        return self._evaluators

    def apply_all(self, query: Q, spec: ISpecification[Any] | None) -> Q:
        """Run every evaluator in order; ``None`` leaves *query* untouched."""
        if spec is None:
            return query
        logger.debug("Applying %r to %s", spec, type(query).__name__)
        for evaluator in self._evaluators:
            query = evaluator.get_query(query, spec)
        return query

    def apply_criteria_only(self, query: Q, spec: ISpecification[Any] | None) -> Q:
        """
        Run only criteria evaluators.

        Used to count matches independently of includes, hints, ordering
        and pagination.
        """
        if spec is None:
            return query
        logger.debug("Applying criteria of %r to %s", spec, type(query).__name__)
        for evaluator in self._evaluators:
            if evaluator.is_criteria_evaluator:
                query = evaluator.get_query(query, spec)
        return query


class InMemorySpecificationEvaluator:
    """
    Applies a specification to an in-memory sequence.

    When the specification has neither criteria nor ordering, ``evaluate``
    returns the very object it was given.
    """

    __slots__ = ("_evaluators",)

    def __init__(
        self,
        evaluators: Sequence[InMemoryEvaluator] = DEFAULT_IN_MEMORY_EVALUATORS,
    ) -> None:
        self._evaluators = tuple(evaluators)

    @property
    def evaluators(self) -> tuple[InMemoryEvaluator, ...]:
        return self._evaluators

    def evaluate(
        self, source: Iterable[T], spec: ISpecification[T] | None
    ) -> Iterable[T]:
        """Run every evaluator in order; ``None`` returns *source* itself."""
        if spec is None:
            return source
        result = source
        for evaluator in self._evaluators:
            result = evaluator.evaluate(result, spec)
        return result

    def evaluate_criteria_only(
        self, source: Iterable[T], spec: ISpecification[T] | None
    ) -> Iterable[T]:
        if spec is None:
            return source
        result = source
        for evaluator in self._evaluators:
            if evaluator.is_criteria_evaluator:
                result = evaluator.evaluate(result, spec)
        return result


DEFAULT_SPECIFICATION_EVALUATOR = SpecificationEvaluator()
DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR = InMemorySpecificationEvaluator()
