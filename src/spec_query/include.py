"""Fluent builder for nested include paths."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .member_path import member_path_of

if TYPE_CHECKING:
    from .specification import BaseSpecification

TCurrent = TypeVar("TCurrent")
TNext = TypeVar("TNext")


class IncludeChain(Generic[TCurrent]):
    """
    Extends one include slot of a specification, level by level.

    The chain does not own the specification: it only keeps the slot index
    and writes the extended path back through
    ``BaseSpecification._replace_include_path``::

        self._include(lambda p: p.address).then(lambda a: a.city)
        # include_paths == ("address.city",)
    """

    __slots__ = ("_spec", "_index", "_path")

    def __init__(self, spec: BaseSpecification[Any], index: int, path: str) -> None:
        self._spec = spec
        self._index = index
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    @property
    def index(self) -> int:
        return self._index

    def then(self, nav: Callable[[TCurrent], TNext]) -> IncludeChain[TNext]:
        """Navigate to a single related member of the current level."""
        return self._extend(nav)

    def then_many(
        self, nav: Callable[[TCurrent], Iterable[TNext]]
    ) -> IncludeChain[TNext]:
        """Navigate to a related collection of the current level."""
        return self._extend(nav)

    def _extend(self, nav: Any) -> IncludeChain[Any]:
        segment = member_path_of(nav).path
        self._path = f"{self._path}.{segment}"
        self._spec._replace_include_path(self._index, self._path)
        return IncludeChain(self._spec, self._index, self._path)

    def __repr__(self) -> str:
        return f"IncludeChain(index={self._index}, path={self._path!r})"
