"""SQLAlchemyQuerySource: ``IQuerySource`` over a 2.0-style ``Select``."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, asc, desc, func, select

from .compiler import build_loader_option, build_sqla_filter, order_column
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from spec_query.member_path import MemberPath
    from spec_query.predicates import Predicate

    from .strategy import SQLAlchemyOperatorRegistry


@dataclass(frozen=True, eq=False)
class SQLAlchemyQuerySource:
    """
    Immutable query description for one mapped class.

    Each ``IQuerySource`` method returns a copy with one more part recorded.
    Nothing touches the database: ``statement()`` renders the accumulated
    parts into a ``Select`` that the repository executes.

    Ordering by a member of a related object (``address.street``) adds
    aliased outer joins along scalar relationships.  They only affect the
    full statement; ``count_statement()`` never needs them.

    Include paths are turned into loader options only when the statement
    is built, so ``as_split_query()`` switches every include from
    ``joinedload`` to ``selectinload`` regardless of call order.
    """

    model: type[Any]
    registry: SQLAlchemyOperatorRegistry = field(
        default=DEFAULT_SQLA_REGISTRY, repr=False
    )
    filters: tuple[Any, ...] = ()
    include_paths: tuple[str, ...] = ()
    no_tracking: bool = False
    split_query: bool = False
    ordering: tuple[Any, ...] = ()
    order_joins: tuple[Any, ...] = ()

    # -- IQuerySource --------------------------------------------------------

    def where(self, predicate: Predicate[Any]) -> SQLAlchemyQuerySource:
        clause = build_sqla_filter(
            self.model, predicate.to_dict(), registry=self.registry
        )
        return replace(self, filters=(*self.filters, clause))

    def include(self, path: str) -> SQLAlchemyQuerySource:
        # Validate eagerly so a bad path fails where it was applied.
        build_loader_option(self.model, path)
        return replace(self, include_paths=(*self.include_paths, path))

    def as_no_tracking(self) -> SQLAlchemyQuerySource:
        return replace(self, no_tracking=True)

    def as_split_query(self) -> SQLAlchemyQuerySource:
        return replace(self, split_query=True)

    def order_by(self, key: MemberPath) -> SQLAlchemyQuerySource:
        column, joins = order_column(self.model, key)
        return self._with_ordering(asc(column), joins)

    def order_by_descending(self, key: MemberPath) -> SQLAlchemyQuerySource:
        column, joins = order_column(self.model, key)
        return self._with_ordering(desc(column), joins)

    def _with_ordering(
        self, clause: Any, joins: tuple[Any, ...]
    ) -> SQLAlchemyQuerySource:
        return replace(
            self,
            ordering=(*self.ordering, clause),
            order_joins=(*self.order_joins, *joins),
        )

    # -- rendering -----------------------------------------------------------

    def statement(self) -> Select[Any]:
        """Full ``SELECT`` with filters, loader options and ordering."""
        stmt = select(self.model)
        for join in self.order_joins:
            stmt = stmt.outerjoin(join)
        stmt = stmt.where(*self.filters)
        if self.include_paths:
            stmt = stmt.options(
                *(
                    build_loader_option(
                        self.model, path, split_query=self.split_query
                    )
                    for path in self.include_paths
                )
            )
        if self.ordering:
            stmt = stmt.order_by(*self.ordering)
        return stmt

    def count_statement(self) -> Select[Any]:
        """``SELECT count(*)`` over the filtered rows only."""
        filtered = select(self.model).where(*self.filters).subquery()
        return select(func.count()).select_from(filtered)
