"""
Specification read repository backed by an ``AsyncSession``.

Usage::

    async with session_factory() as session:
        repo = SQLAlchemySpecificationReadRepository(PersonModel, session)
        page = await repo.list_paged(AdultsByAge(), PageRequest(2, 20))
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from spec_query.evaluators import DEFAULT_SPECIFICATION_EVALUATOR
from spec_query.pagination import PagedResult

from .operators import DEFAULT_SQLA_REGISTRY
from .query_source import SQLAlchemyQuerySource

if TYPE_CHECKING:
    from sqlalchemy import Select
    from sqlalchemy.ext.asyncio import AsyncSession

    from spec_query.evaluators import SpecificationEvaluator
    from spec_query.pagination import PageRequest
    from spec_query.ports.specification import ISpecification

    from .strategy import SQLAlchemyOperatorRegistry

T = TypeVar("T")

logger = logging.getLogger("spec_query_sqlalchemy.repository")


class SQLAlchemySpecificationReadRepository(Generic[T]):
    """
    Implementation of ``ISpecificationReadRepository[T]`` using SQLAlchemy.

    The repository never commits and never closes the session it was
    given; transaction scope belongs to the caller.  Specifications marked
    ``as_no_tracking`` have their results expunged, so the returned
    instances are detached from the session.
    """

    def __init__(
        self,
        model: type[T],
        session: AsyncSession,
        *,
        evaluator: SpecificationEvaluator | None = None,
        registry: SQLAlchemyOperatorRegistry | None = None,
    ) -> None:
        self.model = model
        self.session = session
        self._evaluator = evaluator or DEFAULT_SPECIFICATION_EVALUATOR
        self._registry = registry or DEFAULT_SQLA_REGISTRY

    def query_source(self) -> SQLAlchemyQuerySource:
        """Fresh, unfiltered query source for the mapped model."""
        return SQLAlchemyQuerySource(self.model, registry=self._registry)

    async def count(self, specification: ISpecification[T] | None) -> int:
        source = self._evaluator.apply_criteria_only(
            self.query_source(), specification
        )
        stmt = source.count_statement()
        logger.debug("Counting %s: %s", self.model.__name__, stmt)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def first_or_default(
        self, specification: ISpecification[T] | None
    ) -> T | None:
        source = self._evaluator.apply_all(self.query_source(), specification)
        items = await self._fetch(source, source.statement().limit(1))
        return items[0] if items else None

    async def list_all(self, specification: ISpecification[T] | None) -> list[T]:
        source = self._evaluator.apply_all(self.query_source(), specification)
        return await self._fetch(source, source.statement())

    async def list_paged(
        self,
        specification: ISpecification[T] | None,
        page_request: PageRequest,
    ) -> PagedResult[T]:
        total = await self.count(specification)
        source = self._evaluator.apply_all(self.query_source(), specification)
        stmt = (
            source.statement()
            .offset(page_request.offset)
            .limit(page_request.page_size)
        )
        items = await self._fetch(source, stmt)
        return PagedResult(
            items=items,
            total_count=total,
            page=page_request.page,
            page_size=page_request.page_size,
        )

    async def _fetch(
        self, source: SQLAlchemyQuerySource, stmt: Select[Any]
    ) -> list[T]:
        logger.debug("Querying %s: %s", self.model.__name__, stmt)
        result = await self.session.execute(stmt)
        # unique() is required once joined eager loads hit collections
        items: list[T] = list(result.unique().scalars().all())
        if source.no_tracking:
            for item in items:
                self.session.expunge(item)
        return items
