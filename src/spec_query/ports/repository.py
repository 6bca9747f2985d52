"""ISpecificationReadRepository: read operations driven by a specification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..pagination import PagedResult, PageRequest
    from .specification import ISpecification

T = TypeVar("T")


@runtime_checkable
class ISpecificationReadRepository(Protocol[T]):
    """
    Read-side repository parameterised by specifications.

    ``count`` only honours the criteria of the specification; the list
    operations run the full evaluator pipeline.  ``list_paged`` combines
    both: the total comes from the criteria-only query, the page items from
    the full query with skip/take applied last.  A ``None`` specification
    matches everything in storage order.
    """

    async def count(self, specification: ISpecification[T] | None) -> int: ...

    async def first_or_default(
        self, specification: ISpecification[T] | None
    ) -> T | None: ...

    async def list_all(self, specification: ISpecification[T] | None) -> list[T]: ...

    async def list_paged(
        self,
        specification: ISpecification[T] | None,
        page_request: PageRequest,
    ) -> PagedResult[T]: ...
