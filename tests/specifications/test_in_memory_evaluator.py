from __future__ import annotations

from sample_domain import Order, Person

from spec_query import (
    DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR,
    BaseSpecification,
    InMemoryCriteriaEvaluator,
    InMemoryOrderingEvaluator,
    InMemorySpecificationEvaluator,
)

evaluator = DEFAULT_IN_MEMORY_SPECIFICATION_EVALUATOR


class Sorted(BaseSpecification[Person]):
    def __init__(self, *, by_name: bool = False, by_age_desc: bool = False) -> None:
        super().__init__()
        if by_name:
            self._apply_order_by(lambda p: p.name)
        if by_age_desc:
            self._apply_order_by_descending(lambda p: p.age)


def test_default_pipeline_is_criteria_then_ordering():
    assert [type(e) for e in evaluator.evaluators] == [
        InMemoryCriteriaEvaluator,
        InMemoryOrderingEvaluator,
    ]


def test_identity_without_criteria_or_ordering(people):
    spec = BaseSpecification[Person]()
    spec._include(lambda p: p.address)
    spec._enable_no_tracking()
    assert evaluator.evaluate(people, spec) is people


def test_ascending_order(people):
    result = evaluator.evaluate(people, Sorted(by_name=True))
    assert [p.name for p in result] == ["Ana", "Bob", "Dana", "VIPCarl"]


def test_descending_order_is_stable(people):
    result = evaluator.evaluate(people, Sorted(by_age_desc=True))
    assert [p.name for p in result] == ["Bob", "Dana", "VIPCarl", "Ana"]


def test_ascending_wins_when_both_are_set(people):
    result = evaluator.evaluate(people, Sorted(by_name=True, by_age_desc=True))
    assert [p.name for p in result] == ["Ana", "Bob", "Dana", "VIPCarl"]


def test_missing_keys_sort_first():
    people = [
        Person("Ana", 30, nickname="b"),
        Person("Bob", 40),
        Person("Cy", 50, nickname="a"),
    ]
    spec = BaseSpecification[Person]()
    spec._apply_order_by(lambda p: p.nickname)
    assert [p.name for p in evaluator.evaluate(people, spec)] == ["Bob", "Cy", "Ana"]


def test_criteria_only_skips_ordering(people):
    spec = Sorted(by_name=True)
    spec._where(lambda p: p.is_active)
    filtered = list(evaluator.evaluate_criteria_only(people, spec))
    assert [p.name for p in filtered] == ["Ana", "Bob"]
    assert len(filtered) == len(list(evaluator.evaluate(people, spec)))


def test_input_sequence_is_not_mutated(people):
    before = list(people)
    evaluator.evaluate(people, Sorted(by_age_desc=True))
    assert people == before


def test_custom_pipeline_without_ordering(people):
    criteria_only = InMemorySpecificationEvaluator([InMemoryCriteriaEvaluator()])
    assert criteria_only.evaluate(people, Sorted(by_name=True)) is people


def test_missing_specification_returns_source(people):
    assert evaluator.evaluate(people, None) is people
    assert evaluator.evaluate_criteria_only(people, None) is people


def test_collection_criteria_match_any_element():
    people = [
        Person("Ana", 30, orders=[Order(120), Order(40)]),
        Person("Bob", 40, orders=[Order(40)]),
        Person("Cy", 50),
        Person("Dan", 60, orders=[Order(15), Order(101)]),
    ]
    spec = BaseSpecification[Person]()
    spec._where(lambda p: p.orders.total > 100)
    assert [p.name for p in evaluator.evaluate(people, spec)] == ["Ana", "Dan"]
