"""IQuerySource: the storage engine's composable query type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..member_path import MemberPath
    from ..predicates import Predicate

Q = TypeVar("Q", bound="IQuerySource")


@runtime_checkable
class IQuerySource(Protocol):
    """
    Operations the query-source evaluators call.

    Implementations are expected to be immutable: every method returns a
    new query source and leaves the receiver untouched.  The evaluators
    never execute anything; materialisation belongs to the adapter.
    """

    def where(self: Q, predicate: Predicate[Any]) -> Q: ...

    def include(self: Q, path: str) -> Q: ...

    def as_no_tracking(self: Q) -> Q: ...

    def as_split_query(self: Q) -> Q: ...

    def order_by(self: Q, key: MemberPath) -> Q: ...

    def order_by_descending(self: Q, key: MemberPath) -> Q: ...
