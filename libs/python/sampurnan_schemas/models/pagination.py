"""Offset pagination primitives."""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def page_bounds(page: int, page_size: int) -> tuple[int, int]:
    """Return the inclusive ``(start, end)`` row offsets for a 1-based page.

    Raises:
        ValueError: If ``page`` or ``page_size`` is lower than 1.
    """

    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = (page - 1) * page_size
    return start, start + page_size - 1


class Page(BaseModel, Generic[T]):
    """One page of records plus the total number of matching records."""

    items: list[T] = Field(default_factory=list)
    total: int = Field(0, ge=0)
    page: int = Field(1, ge=1)
    page_size: int = Field(..., ge=1)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
