"""
Base class for reusable query specifications.

A specification describes *what* to fetch: a criteria predicate, eager
load paths, one ordering key per direction and two execution hints.
Subclasses configure it in their constructor through the protected
builder methods; afterwards callers only read it::

    class ActivePeople(BaseSpecification[Person]):
        def __init__(self, *, seniors: bool, vip: bool) -> None:
            super().__init__()
            self._where(lambda p: p.is_active)
            self._where_if(seniors, lambda p: p.age >= 65)
            self._or_where_if(vip, lambda p: p.name.startswith("VIP"))
            self._include(lambda p: p.address).then(lambda a: a.city)
            self._apply_order_by(lambda p: p.name)

Criteria combine as a flat left-to-right fold: every ``_where`` /
``_or_where`` call applies AND / OR to the *whole* criteria accumulated so
far.  In the example above the result is
``(is_active AND age >= 65) OR name startswith "VIP"``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .include import IncludeChain
from .member_path import member_path_of
from .predicates import AndPredicate, OrPredicate, as_predicate

if TYPE_CHECKING:
    from .member_path import MemberPath, Selector
    from .predicates import Predicate

T = TypeVar("T")
TNext = TypeVar("TNext")

logger = logging.getLogger("spec_query.specification")


class BaseSpecification(Generic[T]):
    """Specification data object with protected builder methods."""

    #: Optional entity type recorded on resolved member paths.
    entity_type: type[Any] | None = None

    def __init__(self) -> None:
        self._criteria: Predicate[T] | None = None
        self._include_paths: list[str] = []
        self._order_by: MemberPath | None = None
        self._order_by_descending: MemberPath | None = None
        self._as_no_tracking = False
        self._as_split_query = False

    # -- read-only view --------------------------------------------------------

    @property
    def criteria(self) -> Predicate[T] | None:
        """Combined filter predicate; ``None`` matches everything."""
        return self._criteria

    @property
    def include_paths(self) -> tuple[str, ...]:
        """Dot-separated eager-load paths in the order they were added."""
        return tuple(self._include_paths)

    @property
    def order_by(self) -> MemberPath | None:
        return self._order_by

    @property
    def order_by_descending(self) -> MemberPath | None:
        return self._order_by_descending

    @property
    def as_no_tracking(self) -> bool:
        return self._as_no_tracking

    @property
    def as_split_query(self) -> bool:
        return self._as_split_query

    # -- criteria ------------------------------------------------------------

    def _where(self, predicate: Any) -> None:
        """AND *predicate* with the criteria built so far."""
        new = as_predicate(predicate)
        if self._criteria is None:
            self._criteria = new
        else:
            self._criteria = AndPredicate(self._criteria, new)

    def _or_where(self, predicate: Any) -> None:
        """
        OR *predicate* with the criteria built so far.

        On empty criteria this establishes the base criteria, exactly like
        ``_where``.
        """
        new = as_predicate(predicate)
        if self._criteria is None:
            self._criteria = new
        else:
            self._criteria = OrPredicate(self._criteria, new)

    def _where_if(self, condition: bool, predicate: Any) -> None:
        if condition:
            self._where(predicate)

    def _or_where_if(self, condition: bool, predicate: Any) -> None:
        if condition:
            self._or_where(predicate)

    # -- includes ------------------------------------------------------------

    def _include(self, nav: Callable[[T], TNext] | Selector) -> IncludeChain[TNext]:
        """Eager-load a single related member; extend with ``.then(...)``."""
        return self._add_include_chain(member_path_of(nav, self.entity_type).path)

    def _include_many(
        self, nav: Callable[[T], Iterable[TNext]] | Selector
    ) -> IncludeChain[TNext]:
        """Eager-load a related collection; extend with ``.then_many(...)``."""
        return self._add_include_chain(member_path_of(nav, self.entity_type).path)

    def _add_include_chain(self, path: str) -> IncludeChain[Any]:
        self._include_paths.append(path)
        index = len(self._include_paths) - 1
        logger.debug("%s: include slot %d = %s", type(self).__name__, index, path)
        return IncludeChain(self, index, path)

    def _replace_include_path(self, index: int, path: str) -> None:
        self._include_paths[index] = path

    # -- ordering ------------------------------------------------------------

    def _apply_order_by(self, key: Callable[[T], Any] | Selector) -> None:
        self._order_by = member_path_of(key, self.entity_type)

    def _apply_order_by_descending(self, key: Callable[[T], Any] | Selector) -> None:
        self._order_by_descending = member_path_of(key, self.entity_type)

    # -- hints ---------------------------------------------------------------

    def _enable_no_tracking(self) -> None:
        self._as_no_tracking = True

    def _enable_split_query(self) -> None:
        self._as_split_query = True

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "criteria": (
                self._criteria.to_dict() if self._criteria is not None else None
            ),
            "include_paths": list(self._include_paths),
            "order_by": self._order_by.path if self._order_by else None,
            "order_by_descending": (
                self._order_by_descending.path if self._order_by_descending else None
            ),
            "as_no_tracking": self._as_no_tracking,
            "as_split_query": self._as_split_query,
        }

    def __repr__(self) -> str:
        parts = []
        if self._criteria is not None:
            parts.append("criteria")
        if self._include_paths:
            parts.append(f"include={list(self._include_paths)}")
        if self._order_by is not None:
            parts.append(f"order_by={self._order_by.path}")
        if self._order_by_descending is not None:
            parts.append(f"order_by_descending={self._order_by_descending.path}")
        if self._as_no_tracking:
            parts.append("no_tracking")
        if self._as_split_query:
            parts.append("split_query")
        return f"{type(self).__name__}({', '.join(parts)})"
