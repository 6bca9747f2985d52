from __future__ import annotations

import pytest
from pydantic import ValidationError

from spec_query import PagedResult, PageRequest


def test_defaults():
    request = PageRequest()
    assert (request.page, request.page_size, request.max_page_size) == (1, 50, 100)
    assert request.offset == 0


def test_positional_and_keyword_construction():
    assert PageRequest(3, 20).offset == 40
    assert PageRequest(page=2, page_size=10).offset == 10


@pytest.mark.parametrize(
    ("page", "page_size", "expected"),
    [
        (0, 10, (1, 10)),
        (-4, 10, (1, 10)),
        (2, 0, (2, 1)),
        (2, 500, (2, 100)),
    ],
)
def test_out_of_range_values_are_clamped(page, page_size, expected):
    request = PageRequest(page, page_size)
    assert (request.page, request.page_size) == expected


def test_custom_max_page_size():
    assert PageRequest(1, 500, max_page_size=250).page_size == 250


def test_page_request_is_frozen():
    request = PageRequest()
    with pytest.raises(ValidationError):
        request.page = 5


@pytest.mark.parametrize(
    ("total", "size", "pages"),
    [(0, 10, 0), (5, 2, 3), (10, 5, 2), (11, 5, 3)],
)
def test_total_pages(total, size, pages):
    assert PagedResult([], total, 1, size).total_pages == pages


def test_has_next_and_previous():
    result = PagedResult([35, 30], total_count=5, page=2, page_size=2)
    assert result.has_next is True
    assert result.has_previous is True
    assert PagedResult([25], 5, 3, 2).has_next is False
