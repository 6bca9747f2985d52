"""Evaluator strategy interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.query_source import IQuerySource
    from ..ports.specification import ISpecification

Q = TypeVar("Q", bound="IQuerySource")
T = TypeVar("T")


class Evaluator(ABC):
    """
    Applies one concern of a specification to a query source.

    Evaluators hold no state, so one instance of each kind is shared by
    every pipeline and every entity type.
    """

    __slots__ = ()

    @property
    def is_criteria_evaluator(self) -> bool:
        """True if this evaluator narrows the result set (used for counts)."""
        return False

    @abstractmethod
    def get_query(self, query: Q, spec: ISpecification[Any]) -> Q:
        """Return *query* transformed by this evaluator's concern."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class InMemoryEvaluator(ABC):
    """Applies one concern of a specification to a materialised sequence."""

    __slots__ = ()

    @property
    def is_criteria_evaluator(self) -> bool:
        return False

    @abstractmethod
    def evaluate(self, source: Iterable[T], spec: ISpecification[T]) -> Iterable[T]:
        """Return *source* unchanged, or a new list with the concern applied."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
