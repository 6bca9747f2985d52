"""List-backed specification read repository for tests and prototypes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from ..evaluators.pipeline import (
    DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR,
    InMemorySpecificationEvaluator,
)
from ..pagination import PagedResult, PageRequest

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..ports.specification import ISpecification

T = TypeVar("T")


class InMemorySpecificationReadRepository(Generic[T]):
    """In-memory implementation of ``ISpecificationReadRepository[T]``.

    Runs specifications through the in-memory evaluator pipeline.  Include
    paths and tracking hints have no meaning for plain objects and are
    ignored.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        *,
        evaluator: InMemorySpecificationEvaluator | None = None,
    ) -> None:
        self._items: list[T] = list(items)
        self._evaluator = evaluator or DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR

    def add(self, *items: T) -> None:
        self._items.extend(items)

    async def count(self, specification: ISpecification[T] | None) -> int:
        matches = self._evaluator.evaluate_criteria_only(self._items, specification)
        return len(list(matches))

    async def first_or_default(
        self, specification: ISpecification[T] | None
    ) -> T | None:
        for item in self._evaluator.evaluate(self._items, specification):
            return item
        return None

    async def list_all(self, specification: ISpecification[T] | None) -> list[T]:
        return list(self._evaluator.evaluate(self._items, specification))

    async def list_paged(
        self,
        specification: ISpecification[T] | None,
        page_request: PageRequest,
    ) -> PagedResult[T]:
        total = await self.count(specification)
        ordered = list(self._evaluator.evaluate(self._items, specification))
        start = page_request.offset
        return PagedResult(
            items=ordered[start : start + page_request.page_size],
            total_count=total,
            page=page_request.page,
            page_size=page_request.page_size,
        )
