"""
Query-source evaluators.

Each class handles exactly one field of the specification.  The shared
instances at the bottom of the module are what the pipeline uses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from .base import Evaluator

if TYPE_CHECKING:
    from ..ports.query_source import IQuerySource
    from ..ports.specification import ISpecification

Q = TypeVar("Q", bound="IQuerySource")


class CriteriaEvaluator(Evaluator):
    """Filters by the combined criteria predicate, if any."""

    __slots__ = ()

    @property
    def is_criteria_evaluator(self) -> bool:
        return True

    def get_query(self, query: Q, spec: ISpecification[Any]) -> Q:
        if spec.criteria is None:
            return query
        return query.where(spec.criteria)


class IncludePathsEvaluator(Evaluator):
    """Adds one eager-load directive per include path, in list order."""

    __slots__ = ()

    def get_query(self, query: Q, spec: ISpecification[Any]) -> Q:
        for path in spec.include_paths:
            query = query.include(path)
        return query


class NoTrackingEvaluator(Evaluator):
    __slots__ = ()

    def get_query(self, query: Q, spec: ISpecification[Any]) -> Q:
        return query.as_no_tracking() if spec.as_no_tracking else query


class SplitQueryEvaluator(Evaluator):
    """Split loading only makes sense when something is being included."""

    __slots__ = ()

    def get_query(self, query: Q, spec: ISpecification[Any]) -> Q:
        if spec.as_split_query and spec.include_paths:
            return query.as_split_query()
        return query


class OrderingEvaluator(Evaluator):
    """Ascending order wins when both directions are set."""

    __slots__ = ()

    def get_query(self, query: Q, spec: ISpecification[Any]) -> Q:
        if spec.order_by is not None:
            return query.order_by(spec.order_by)
        if spec.order_by_descending is not None:
            return query.order_by_descending(spec.order_by_descending)
        return query


CRITERIA_EVALUATOR = CriteriaEvaluator()
INCLUDE_PATHS_EVALUATOR = IncludePathsEvaluator()
NO_TRACKING_EVALUATOR = NoTrackingEvaluator()
SPLIT_QUERY_EVALUATOR = SplitQueryEvaluator()
ORDERING_EVALUATOR = OrderingEvaluator()
