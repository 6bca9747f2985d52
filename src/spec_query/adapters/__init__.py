from .memory import InMemorySpecificationReadRepository

__all__ = ["InMemorySpecificationReadRepository"]
