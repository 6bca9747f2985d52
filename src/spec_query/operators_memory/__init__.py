"""
In-memory operator implementations.

Usage::

    from spec_query.operators_memory import DEFAULT_MEMORY_REGISTRY

    DEFAULT_MEMORY_REGISTRY.evaluate(SpecificationOperator.EQ, actual, expected)
"""

from __future__ import annotations

from ..strategy import MemoryOperatorRegistry
from .comparison import (
    BetweenOperator,
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    InOperator,
    LessEqualOperator,
    LessThanOperator,
    NotBetweenOperator,
    NotEqualOperator,
    NotInOperator,
)
from .null import (
    IsEmptyOperator,
    IsNotEmptyOperator,
    IsNotNullOperator,
    IsNullOperator,
)
from .text import (
    ContainsOperator,
    EndsWithOperator,
    IContainsOperator,
    IEndsWithOperator,
    ILikeOperator,
    IRegexOperator,
    IStartsWithOperator,
    LikeOperator,
    NotLikeOperator,
    RegexOperator,
    StartsWithOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a fresh registry with all built-in operators.

    Use this when a caller needs to register extra operators without
    touching the shared ``DEFAULT_MEMORY_REGISTRY``.
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Comparison / set
        EqualOperator(),
        NotEqualOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        InOperator(),
        NotInOperator(),
        BetweenOperator(),
        NotBetweenOperator(),
        # String
        LikeOperator(),
        NotLikeOperator(),
        ILikeOperator(),
        ContainsOperator(),
        IContainsOperator(),
        StartsWithOperator(),
        IStartsWithOperator(),
        EndsWithOperator(),
        IEndsWithOperator(),
        RegexOperator(),
        IRegexOperator(),
        # Null / empty
        IsNullOperator(),
        IsNotNullOperator(),
        IsEmptyOperator(),
        IsNotEmptyOperator(),
    )
    return registry


DEFAULT_MEMORY_REGISTRY: MemoryOperatorRegistry = build_default_registry()

__all__ = [
    "DEFAULT_MEMORY_REGISTRY",
    "MemoryOperatorRegistry",
    "build_default_registry",
]
