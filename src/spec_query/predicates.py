"""
Criteria predicates as a tagged boolean-expression tree.

Leaves (:class:`AttributePredicate`) compare one dot-path of the
candidate with a captured value; composites (:class:`AndPredicate`,
:class:`OrPredicate`, :class:`NotPredicate`) combine them.  A tree
compiles two ways:

- ``is_satisfied_by(candidate)`` evaluates it in memory through a
  :class:`~spec_query.strategy.MemoryOperatorRegistry`;
- ``to_dict()`` serialises it into the ``{"op": ..., "attr": ...}`` AST
  consumed by storage adapters (see ``spec_query_sqlalchemy.compiler``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import OperatorNotFoundError
from .member_path import MemberAccess, MethodCall, path_of_node
from .operators import METHOD_OPERATORS, SpecificationOperator
from .operators_memory import DEFAULT_MEMORY_REGISTRY

if TYPE_CHECKING:
    from .strategy import MemoryOperatorRegistry

T = TypeVar("T")


class Predicate(ABC, Generic[T]):
    """
    Base class for predicates with logic operator support.

    Predicates refuse truth testing: ``18 <= p.age <= 65`` or
    ``(p.age > 3) and p.is_active`` would otherwise keep only one side.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: Any) -> AndPredicate[T]:
        return AndPredicate(self, as_predicate(other))

    def __rand__(self, other: Any) -> AndPredicate[T]:
        return AndPredicate(as_predicate(other), self)

    def __or__(self, other: Any) -> OrPredicate[T]:
        return OrPredicate(self, as_predicate(other))

    def __ror__(self, other: Any) -> OrPredicate[T]:
        return OrPredicate(as_predicate(other), self)

    def __invert__(self) -> NotPredicate[T]:
        return NotPredicate(self)

    def __bool__(self) -> bool:
        raise TypeError(
            "Boolean value of a predicate is undefined; "
            "use '&', '|' and '~' to combine criteria"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class AndPredicate(Predicate[T]):
    """Logical AND composite predicate."""

    def __init__(self, *predicates: Predicate[T]) -> None:
        self.predicates = predicates

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(p.is_satisfied_by(candidate) for p in self.predicates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.AND.value,
            "conditions": [p.to_dict() for p in self.predicates],
        }


class OrPredicate(Predicate[T]):
    """Logical OR composite predicate."""

    def __init__(self, *predicates: Predicate[T]) -> None:
        self.predicates = predicates

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(p.is_satisfied_by(candidate) for p in self.predicates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.OR.value,
            "conditions": [p.to_dict() for p in self.predicates],
        }


class NotPredicate(Predicate[T]):
    """Logical NOT composite predicate."""

    def __init__(self, predicate: Predicate[T]) -> None:
        self.predicate = predicate

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.predicate.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.NOT.value,
            "conditions": [self.predicate.to_dict()],
        }


class CollectedValues(list):  # type: ignore[type-arg]
    """Values gathered by traversing a collection on an attribute path."""


class AttributePredicate(Predicate[T]):
    """
    Predicate that checks a single attribute value.

    Delegates in-memory evaluation to a :class:`MemoryOperatorRegistry`
    (strategy pattern); the shared default registry is used unless one is
    injected.
    """

    def __init__(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
        *,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self.attr = attr
        self.op = SpecificationOperator(op) if isinstance(op, str) else op
        self.val = val
        self._registry = registry if registry is not None else DEFAULT_MEMORY_REGISTRY

    def is_satisfied_by(self, candidate: T) -> bool:
        actual_val = self.resolve_field(candidate, self.attr)
        if isinstance(actual_val, CollectedValues):
            # Any element matching satisfies the leaf, like EXISTS in SQL.
            return any(
                self._registry.evaluate(self.op, value, self.val)
                for value in actual_val
            )
        return self._registry.evaluate(self.op, actual_val, self.val)

    @staticmethod
    def resolve_field(obj: Any, attr_path: str) -> Any:
        """
        Resolve a dot-separated attribute path on *obj*.

        Supports nested attribute access (``address.city``) and implicit
        list traversal: ``orders.lines.sku`` where ``orders`` and ``lines``
        are lists returns the flattened :class:`CollectedValues` of every
        line's ``sku``.  A path that ends on a list returns the list itself.
        """
        parts = attr_path.split(".")
        for index, part in enumerate(parts):
            if obj is None:
                return None
            if isinstance(obj, list | tuple):
                rest = ".".join(parts[index:])
                collected = CollectedValues()
                for item in obj:
                    value = AttributePredicate.resolve_field(item, rest)
                    if isinstance(value, CollectedValues):
                        collected.extend(value)
                    else:
                        collected.append(value)
                return collected
            obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
        return obj

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "attr": self.attr,
            "val": self.val,
        }


def _from_method_call(call: MethodCall) -> AttributePredicate[Any]:
    op = METHOD_OPERATORS.get(call.method)
    if op is None:
        raise OperatorNotFoundError(call.method, sorted(METHOD_OPERATORS))
    attr = path_of_node(call.receiver).path

    if op in (SpecificationOperator.BETWEEN, SpecificationOperator.NOT_BETWEEN):
        low, high = call.args
        return AttributePredicate(attr, op, (low, high))
    if op in (SpecificationOperator.IN, SpecificationOperator.NOT_IN):
        (values,) = call.args
        return AttributePredicate(attr, op, list(values))
    val = call.args[0] if call.args else None
    return AttributePredicate(attr, op, val)


def as_predicate(value: Any) -> Predicate[Any]:
    """
    Coerce a criteria expression into a :class:`Predicate`.

    - a ``Predicate`` is returned unchanged;
    - a bare member (``p.is_active``) means ``p.is_active == True``;
    - a recorded operator call (``p.name.startswith("VIP")``) becomes a leaf;
    - a callable is invoked with a fresh member proxy and its result coerced.
    """
    if isinstance(value, Predicate):
        return value
    if isinstance(value, MemberAccess):
        attr = path_of_node(value).path
        return AttributePredicate(attr, SpecificationOperator.EQ, True)
    if isinstance(value, MethodCall):
        return _from_method_call(value)
    if callable(value):
        return as_predicate(value(MemberAccess.root()))
    raise TypeError(f"Cannot use {value!r} as a criteria predicate")
