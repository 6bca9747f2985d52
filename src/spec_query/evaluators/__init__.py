from .base import Evaluator, InMemoryEvaluator
from .in_memory import InMemoryCriteriaEvaluator, InMemoryOrderingEvaluator
from .pipeline import (
    DEFAULT_EVALUATORS,
    DEFAULT_IN_MEMORY_EVALUATORS,
    DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR,
    DEFAULT_SPECIFICATION_EVALUATOR,
    InMemorySpecificationEvaluator,
    SpecificationEvaluator,
)
from .query import (
    CriteriaEvaluator,
    IncludePathsEvaluator,
    NoTrackingEvaluator,
    OrderingEvaluator,
    SplitQueryEvaluator,
)

__all__ = [
    "DEFAULT_EVALUATORS",
    "DEFAULT_IN_MEMORY_EVALUATORS",
    "DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR",
    "DEFAULT_SPECIFICATION_EVALUATOR",
    "CriteriaEvaluator",
    "Evaluator",
    "IncludePathsEvaluator",
    "InMemoryCriteriaEvaluator",
    "InMemoryEvaluator",
    "InMemoryOrderingEvaluator",
    "InMemorySpecificationEvaluator",
    "NoTrackingEvaluator",
    "OrderingEvaluator",
    "SpecificationEvaluator",
    "SplitQueryEvaluator",
]
