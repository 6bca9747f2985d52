"""Page request / paged result value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 50
DEFAULT_MAX_PAGE_SIZE = 100


class PageRequest(BaseModel):
    """
    Requested page, 1-based.

    Out-of-range input is clamped rather than rejected: ``page`` is at least
    1 and ``page_size`` lies within ``[1, max_page_size]``.
    """

    model_config = ConfigDict(frozen=True)

    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    max_page_size: int = DEFAULT_MAX_PAGE_SIZE

    def __init__(
        self,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = DEFAULT_MAX_PAGE_SIZE,
        **data: Any,
    ) -> None:
        super().__init__(
            page=page, page_size=page_size, max_page_size=max_page_size, **data
        )

    @model_validator(mode="before")
    @classmethod
    def _clamp(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        max_size = max(1, int(data.get("max_page_size", DEFAULT_MAX_PAGE_SIZE)))
        page = int(data.get("page", 1))
        page_size = int(data.get("page_size", DEFAULT_PAGE_SIZE))
        return {
            **data,
            "page": max(1, page),
            "page_size": min(max(page_size, 1), max_size),
            "max_page_size": max_size,
        }

    @property
    def offset(self) -> int:
        """Number of items to skip before this page."""
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of items plus the total number of matches."""

    items: list[T]
    total_count: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
