"""spec-query: Specification-pattern query layer.

Reusable query specifications (criteria, eager-load paths, ordering and
execution hints) plus the evaluator pipelines that apply them to query
sources and in-memory sequences.  Storage-specific query sources live in
separate adapter packages such as ``spec_query_sqlalchemy``.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters import InMemorySpecificationReadRepository

# ── Evaluators ───────────────────────────────────────────────────
from .evaluators import (
    DEFAULT_EVALUATORS,
    DEFAULT_IN_MEMORY_EVALUATORS,
    DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR,
    DEFAULT_SPECIFICATION_EVALUATOR,
    CriteriaEvaluator,
    Evaluator,
    IncludePathsEvaluator,
    InMemoryCriteriaEvaluator,
    InMemoryEvaluator,
    InMemoryOrderingEvaluator,
    InMemorySpecificationEvaluator,
    NoTrackingEvaluator,
    OrderingEvaluator,
    SpecificationEvaluator,
    SplitQueryEvaluator,
)

# ── Errors ───────────────────────────────────────────────────────
from .exceptions import (
    InvalidMemberAccessError,
    OperatorNotFoundError,
    SpecificationError,
)

# ── Specifications ───────────────────────────────────────────────
from .include import IncludeChain
from .member_path import (
    Converted,
    MemberAccess,
    MemberPath,
    MethodCall,
    convert,
    member_path_of,
)
from .operators import SpecificationOperator
from .operators_memory import DEFAULT_MEMORY_REGISTRY, build_default_registry
from .pagination import PagedResult, PageRequest

# ── Ports ────────────────────────────────────────────────────────
from .ports import IQuerySource, ISpecification, ISpecificationReadRepository
from .predicates import (
    AndPredicate,
    AttributePredicate,
    NotPredicate,
    OrPredicate,
    Predicate,
    as_predicate,
)
from .specification import BaseSpecification
from .strategy import MemoryOperator, MemoryOperatorRegistry

__all__ = [
    "DEFAULT_EVALUATORS",
    "DEFAULT_IN_MEMORY_EVALUATORS",
    "DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR",
    "DEFAULT_MEMORY_REGISTRY",
    "DEFAULT_SPECIFICATION_EVALUATOR",
    "AndPredicate",
    "AttributePredicate",
    "BaseSpecification",
    "Converted",
    "CriteriaEvaluator",
    "Evaluator",
    "IQuerySource",
    "ISpecification",
    "ISpecificationReadRepository",
    "InMemoryCriteriaEvaluator",
    "InMemoryEvaluator",
    "InMemoryOrderingEvaluator",
    "InMemorySpecificationEvaluator",
    "InMemorySpecificationReadRepository",
    "IncludeChain",
    "IncludePathsEvaluator",
    "InvalidMemberAccessError",
    "MemberAccess",
    "MemberPath",
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "MethodCall",
    "NoTrackingEvaluator",
    "NotPredicate",
    "OperatorNotFoundError",
    "OrPredicate",
    "OrderingEvaluator",
    "PageRequest",
    "PagedResult",
    "Predicate",
    "SpecificationError",
    "SpecificationEvaluator",
    "SpecificationOperator",
    "SplitQueryEvaluator",
    "as_predicate",
    "build_default_registry",
    "convert",
    "member_path_of",
]
