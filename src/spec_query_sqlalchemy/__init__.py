"""spec-query SQLAlchemy adapter.

Public API:
    - ``SQLAlchemyQuerySource``: immutable ``IQuerySource`` over ``select()``
    - ``SQLAlchemySpecificationReadRepository``: async read repository
    - ``build_sqla_filter`` / ``build_loader_option`` / ``order_column``:
      compilation helpers
    - ``DEFAULT_SQLA_REGISTRY`` / ``SQLAlchemyOperator`` /
      ``SQLAlchemyOperatorRegistry``: extension points for custom operators
"""

from .compiler import build_loader_option, build_sqla_filter, order_column
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .query_source import SQLAlchemyQuerySource
from .repository import SQLAlchemySpecificationReadRepository
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "SQLAlchemyQuerySource",
    "SQLAlchemySpecificationReadRepository",
    "build_default_sqla_registry",
    "build_loader_option",
    "build_sqla_filter",
    "order_column",
]
