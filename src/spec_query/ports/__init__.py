from .query_source import IQuerySource
from .repository import ISpecificationReadRepository
from .specification import ISpecification

__all__ = [
    "IQuerySource",
    "ISpecification",
    "ISpecificationReadRepository",
]
