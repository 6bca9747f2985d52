from __future__ import annotations

import pytest
from sample_domain import Person

from spec_query import (
    BaseSpecification,
    InMemorySpecificationReadRepository,
    ISpecificationReadRepository,
    PageRequest,
)


class AdultsByAgeDescending(BaseSpecification[Person]):
    def __init__(self, min_age: int = 25) -> None:
        super().__init__()
        self._where(lambda p: p.age >= min_age)
        self._apply_order_by_descending(lambda p: p.age)


@pytest.fixture
def repo() -> InMemorySpecificationReadRepository[Person]:
    ages = [30, 50, 35, 70, 25, 18]
    return InMemorySpecificationReadRepository(
        Person(f"p{i}", age) for i, age in enumerate(ages, start=1)
    )


def test_satisfies_protocol(repo):
    assert isinstance(repo, ISpecificationReadRepository)


@pytest.mark.asyncio
async def test_list_paged_uses_criteria_count_and_ordered_page(repo):
    page = await repo.list_paged(AdultsByAgeDescending(), PageRequest(2, 2))
    assert [p.age for p in page.items] == [35, 30]
    assert page.total_count == 5
    assert page.total_pages == 3


@pytest.mark.asyncio
async def test_count_and_list_all(repo):
    assert await repo.count(AdultsByAgeDescending(50)) == 2
    assert [p.age for p in await repo.list_all(AdultsByAgeDescending(50))] == [70, 50]


@pytest.mark.asyncio
async def test_first_or_default(repo):
    first = await repo.first_or_default(AdultsByAgeDescending())
    assert first is not None
    assert first.age == 70
    assert await repo.first_or_default(AdultsByAgeDescending(100)) is None


@pytest.mark.asyncio
async def test_added_items_are_visible(repo):
    repo.add(Person("late", 99))
    assert await repo.count(AdultsByAgeDescending()) == 6


@pytest.mark.asyncio
async def test_missing_specification_lists_everything(repo):
    assert [p.age for p in await repo.list_all(None)] == [30, 50, 35, 70, 25, 18]
    assert await repo.count(None) == 6
    first = await repo.first_or_default(None)
    assert first is not None
    assert first.name == "p1"
    page = await repo.list_paged(None, PageRequest(2, 4))
    assert [p.age for p in page.items] == [25, 18]
    assert page.total_count == 6
