"""
Member-path capture and resolution.

Python has no expression trees, so navigation selectors are recorded by
calling them with a :class:`MemberAccess` proxy.  Every attribute read on
the proxy returns a child node linked to its parent; every call returns a
:class:`MethodCall` node.  Walking the parent chain of the returned node
yields the navigated member names::

    member_path_of(lambda p: p.address.city).path  # → "address.city"

The same proxies double as the criteria DSL: comparisons and operator
methods (``p.age >= 65``, ``p.name.startswith("VIP")``) build predicate
leaves, see :mod:`spec_query.predicates`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from .exceptions import InvalidMemberAccessError
from .operators import SpecificationOperator

if TYPE_CHECKING:
    from .predicates import Predicate

Selector = Union["MemberPath", "MemberAccess", str, Callable[[Any], Any]]


class MemberAccess:
    """
    Recording proxy for one step of a member-access chain.

    The proxy has no public attributes of its own: any attribute name is
    treated as an entity member.  It refuses truth testing so that
    ``not p.active`` or ``p.a and p.b`` fail loudly instead of silently
    producing a constant.
    """

    __slots__ = ("_ma_parent", "_ma_name", "_ma_root_type")

    def __init__(
        self,
        parent: MemberAccess | None = None,
        name: str | None = None,
        root_type: type[Any] | None = None,
    ) -> None:
        object.__setattr__(self, "_ma_parent", parent)
        object.__setattr__(self, "_ma_name", name)
        object.__setattr__(self, "_ma_root_type", root_type)

    @classmethod
    def root(cls, root_type: type[Any] | None = None) -> MemberAccess:
        """Create the parameter node a selector is called with."""
        return cls(root_type=root_type)

    # -- navigation ----------------------------------------------------------

    def __getattr__(self, name: str) -> MemberAccess:
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return MemberAccess(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError("Member access proxies are read-only")

    def __call__(self, *args: Any, **kwargs: Any) -> MethodCall:
        return MethodCall(self, args, kwargs)

    # -- comparisons build predicate leaves ----------------------------------

    def _compare(self, op: SpecificationOperator, other: Any) -> Predicate:
        from .predicates import AttributePredicate

        if isinstance(other, MemberAccess | MethodCall):
            raise TypeError(
                f"Cannot compare {self!r} with another member expression"
            )
        return AttributePredicate(path_of_node(self).path, op, other)

    def __eq__(self, other: object) -> Predicate:  # type: ignore[override]
        return self._compare(SpecificationOperator.EQ, other)

    def __ne__(self, other: object) -> Predicate:  # type: ignore[override]
        return self._compare(SpecificationOperator.NE, other)

    def __lt__(self, other: Any) -> Predicate:
        return self._compare(SpecificationOperator.LT, other)

    def __le__(self, other: Any) -> Predicate:
        return self._compare(SpecificationOperator.LE, other)

    def __gt__(self, other: Any) -> Predicate:
        return self._compare(SpecificationOperator.GT, other)

    def __ge__(self, other: Any) -> Predicate:
        return self._compare(SpecificationOperator.GE, other)

    __hash__ = object.__hash__

    # -- boolean composition -------------------------------------------------

    def __and__(self, other: Any) -> Predicate:
        from .predicates import as_predicate

        return as_predicate(self) & other

    def __rand__(self, other: Any) -> Predicate:
        from .predicates import as_predicate

        return as_predicate(other) & self

    def __or__(self, other: Any) -> Predicate:
        from .predicates import as_predicate

        return as_predicate(self) | other

    def __ror__(self, other: Any) -> Predicate:
        from .predicates import as_predicate

        return as_predicate(other) | self

    def __invert__(self) -> Predicate:
        from .predicates import as_predicate

        return ~as_predicate(self)

    def __bool__(self) -> bool:
        raise TypeError(
            "Boolean value of a member expression is undefined; "
            "use '&', '|' and '~' to combine criteria"
        )

    def __repr__(self) -> str:
        names = _collect_names(self)
        return f"<MemberAccess {'.'.join(['x', *names])}>"


class MethodCall:
    """A call recorded on a :class:`MemberAccess` node (``p.name.upper()``)."""

    __slots__ = ("target", "args", "kwargs")

    def __init__(
        self,
        target: MemberAccess,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> None:
        self.target = target
        self.args = args
        self.kwargs = kwargs

    @property
    def method(self) -> str:
        return self.target._ma_name or ""

    @property
    def receiver(self) -> MemberAccess | None:
        return self.target._ma_parent

    def __and__(self, other: Any) -> Predicate:
        from .predicates import as_predicate

        return as_predicate(self) & other

    def __or__(self, other: Any) -> Predicate:
        from .predicates import as_predicate

        return as_predicate(self) | other

    def __invert__(self) -> Predicate:
        from .predicates import as_predicate

        return ~as_predicate(self)

    def __bool__(self) -> bool:
        raise TypeError(
            "Boolean value of a method-call expression is undefined; "
            "use '&', '|' and '~' to combine criteria"
        )

    def __repr__(self) -> str:
        return f"<MethodCall {self.method}() on {self.receiver!r}>"


@dataclass(frozen=True)
class Converted:
    """Explicit conversion wrapper, transparent to path extraction."""

    operand: Any
    target_type: type[Any]


def convert(node: Any, target_type: type[Any]) -> Converted:
    """Wrap a member node in a conversion, e.g. for a typed key selector."""
    return Converted(node, target_type)


@dataclass(frozen=True)
class MemberPath:
    """
    Projection descriptor: a root type plus the members navigated from it.

    ``path`` is the dot-joined form used for include paths and predicate
    attributes; ``resolve`` walks the same members on a concrete object.
    """

    members: tuple[str, ...]
    root: type[Any] | None = field(default=None, compare=False)

    @property
    def path(self) -> str:
        return ".".join(self.members)

    def then(self, other: MemberPath) -> MemberPath:
        """Extend this path with the members of *other*."""
        return MemberPath(self.members + other.members, root=self.root)

    def resolve(self, obj: Any) -> Any:
        """Read the member chain from *obj*; ``None`` short-circuits."""
        for name in self.members:
            if obj is None:
                return None
            obj = obj[name] if isinstance(obj, Mapping) else getattr(obj, name)
        return obj

    def compile(self) -> Callable[[Any], Any]:
        """Return a key-extractor callable for this path."""
        return self.resolve

    def __str__(self) -> str:
        return self.path


def _collect_names(node: MemberAccess) -> list[str]:
    names: list[str] = []
    current: MemberAccess | None = node
    while current is not None and current._ma_name is not None:
        names.append(current._ma_name)
        current = current._ma_parent
    names.reverse()
    return names


def _root_type_of(node: MemberAccess) -> type[Any] | None:
    current = node
    while current._ma_parent is not None:
        current = current._ma_parent
    return current._ma_root_type


def path_of_node(expr: Any) -> MemberPath:
    """
    Turn a recorded expression into a :class:`MemberPath`.

    A single outer :class:`Converted` wrapper is unwrapped first.  Anything
    that is not a member-access chain raises
    :class:`InvalidMemberAccessError`.
    """
    if isinstance(expr, Converted):
        expr = expr.operand

    if not isinstance(expr, MemberAccess):
        raise InvalidMemberAccessError(expr)

    names = _collect_names(expr)
    if not names:
        raise InvalidMemberAccessError(expr)
    return MemberPath(tuple(names), root=_root_type_of(expr))


def _parse_dotted(text: str) -> MemberPath:
    members = tuple(text.split("."))
    if not text or not all(m.isidentifier() for m in members):
        raise InvalidMemberAccessError(text)
    return MemberPath(members)


def member_path_of(
    selector: Selector,
    root_type: type[Any] | None = None,
) -> MemberPath:
    """
    Resolve a navigation selector into a :class:`MemberPath`.

    Accepts a ``lambda x: x.prop.sub_prop`` style callable, an already
    recorded :class:`MemberAccess` node, a :class:`MemberPath`, or a
    dot-separated string of identifiers.

    Raises:
        InvalidMemberAccessError: If the selector is not a pure
            member-access chain.
    """
    if isinstance(selector, MemberPath):
        return selector
    if isinstance(selector, str):
        return _parse_dotted(selector)
    if isinstance(selector, MemberAccess | Converted):
        return path_of_node(selector)
    if not callable(selector):
        raise InvalidMemberAccessError(selector)

    try:
        expr = selector(MemberAccess.root(root_type))
    except TypeError as exc:
        raise InvalidMemberAccessError(selector) from exc
    return path_of_node(expr)
