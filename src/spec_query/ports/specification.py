"""ISpecification: read-only view consumed by evaluators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..member_path import MemberPath
    from ..predicates import Predicate

T = TypeVar("T")


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    What to fetch for entities of type ``T``.

    Evaluators only read these members; how they were populated (builder
    methods on :class:`~spec_query.specification.BaseSpecification` or a
    hand-written implementation) is irrelevant to them.
    """

    @property
    def criteria(self) -> Predicate[T] | None: ...

    @property
    def include_paths(self) -> tuple[str, ...]: ...

    @property
    def order_by(self) -> MemberPath | None: ...

    @property
    def order_by_descending(self) -> MemberPath | None: ...

    @property
    def as_no_tracking(self) -> bool: ...

    @property
    def as_split_query(self) -> bool: ...

    def to_dict(self) -> dict[str, Any]: ...
