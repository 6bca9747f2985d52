from __future__ import annotations

import pytest

from spec_query import MemoryOperatorRegistry, SpecificationOperator
from spec_query.operators_memory import DEFAULT_MEMORY_REGISTRY
from spec_query.operators_memory.comparison import EqualOperator, _OrderedComparison
from spec_query.operators_memory.text import _TextOperator, like_to_regex

Op = SpecificationOperator


@pytest.mark.parametrize(
    ("op", "field_value", "condition_value", "expected"),
    [
        (Op.EQ, 5, 5, True),
        (Op.NE, 5, 5, False),
        (Op.GT, 6, 5, True),
        (Op.LT, 6, 5, False),
        (Op.GE, 5, 5, True),
        (Op.LE, 4, 5, True),
        (Op.GT, None, 5, False),
        (Op.IN, "b", ["a", "b"], True),
        (Op.NOT_IN, "c", ["a", "b"], True),
        (Op.BETWEEN, 5, (1, 5), True),
        (Op.NOT_BETWEEN, 6, (1, 5), True),
        (Op.BETWEEN, None, (1, 5), False),
    ],
)
def test_comparison_operators(registry, op, field_value, condition_value, expected):
    assert registry.evaluate(op, field_value, condition_value) is expected


@pytest.mark.parametrize(
    ("op", "field_value", "condition_value", "expected"),
    [
        (Op.LIKE, "John Doe", "John%", True),
        (Op.LIKE, "John Doe", "john%", False),
        (Op.NOT_LIKE, "John Doe", "Jane%", True),
        (Op.ILIKE, "John Doe", "john%", True),
        (Op.LIKE, "a.c", "a_c", True),
        (Op.LIKE, "abc", "a.c", False),
        (Op.CONTAINS, "John Doe", "n D", True),
        (Op.ICONTAINS, "John Doe", "DOE", True),
        (Op.STARTSWITH, "VIPCarl", "VIP", True),
        (Op.ISTARTSWITH, "VIPCarl", "vip", True),
        (Op.ENDSWITH, "VIPCarl", "arl", True),
        (Op.IENDSWITH, "VIPCarl", "ARL", True),
        (Op.REGEX, "John Doe", r"J\w+ D\w+", True),
        (Op.IREGEX, "John Doe", r"^john", True),
        (Op.STARTSWITH, None, "x", False),
    ],
)
def test_text_operators(registry, op, field_value, condition_value, expected):
    assert registry.evaluate(op, field_value, condition_value) is expected


@pytest.mark.parametrize(
    ("op", "field_value", "expected"),
    [
        (Op.IS_NULL, None, True),
        (Op.IS_NOT_NULL, 0, True),
        (Op.IS_EMPTY, "", True),
        (Op.IS_EMPTY, [], True),
        (Op.IS_NOT_EMPTY, "x", True),
    ],
)
def test_null_and_empty_operators(registry, op, field_value, expected):
    assert registry.evaluate(op, field_value, None) is expected


def test_like_to_regex_escapes_metacharacters():
    assert like_to_regex("a+b%") == r"^a\+b.*$"


def test_unregistered_operator_raises_value_error():
    registry = MemoryOperatorRegistry()
    registry.register(EqualOperator())
    assert registry.has(Op.EQ)
    assert registry.supported_operators == {Op.EQ}
    with pytest.raises(ValueError, match="Unsupported operator"):
        registry.evaluate(Op.GT, 1, 0)


def test_default_registry_covers_every_leaf_operator():
    logical = {Op.AND, Op.OR, Op.NOT}
    assert DEFAULT_MEMORY_REGISTRY.supported_operators == set(Op) - logical


@pytest.mark.parametrize("base", [_OrderedComparison, _TextOperator])
def test_operator_bases_cannot_be_instantiated(base):
    with pytest.raises(TypeError):
        base()
