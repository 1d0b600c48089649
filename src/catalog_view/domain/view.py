from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal, Sequence, Union

from catalog_view.domain.product import Product
from catalog_view.domain.query import QueryState


# ==============================================================================
# Pagination arithmetic
# ==============================================================================

ELLIPSIS: Literal["..."] = "..."
MAX_VISIBLE_PAGES = 5

PaginationEntry = Union[int, Literal["..."]]


def total_pages(total: int, page_size: int) -> int:
    """Number of pages for `total` items. Never less than 1."""
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total: int, page_size: int) -> int:
    return min(max(1, page), total_pages(total, page_size))


def page_bounds(page: int, page_size: int, total: int) -> tuple[int, int]:
    """Slice bounds [start, end) of a 1-based page within `total` items."""
    start = min((page - 1) * page_size, total)
    end = min(page * page_size, total)
    return start, end


def pagination_window(current_page: int, pages: int) -> list[PaginationEntry]:
    """
    Compact list of page links around `current_page`.

    Up to MAX_VISIBLE_PAGES consecutive pages centered on the current one,
    with the first and last page as anchors and ELLIPSIS marking a gap
    between an anchor and the window.

    Example:
        pagination_window(10, 20) == [1, "...", 8, 9, 10, 11, 12, "...", 20]
    """
    if pages <= 1:
        return []

    start = max(1, current_page - 2)
    end = min(pages, start + MAX_VISIBLE_PAGES - 1)
    if end - start < MAX_VISIBLE_PAGES - 1:
        start = max(1, end - MAX_VISIBLE_PAGES + 1)

    entries: list[PaginationEntry] = []
    if start > 1:
        entries.append(1)
        if start > 2:
            entries.append(ELLIPSIS)

    entries.extend(range(start, end + 1))

    if end < pages:
        if end < pages - 1:
            entries.append(ELLIPSIS)
        entries.append(pages)

    return entries


# ==============================================================================
# Derived view values
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ResultsSummary:
    """
    1-based inclusive range of the visible items plus the matched total.

    The empty case is start == end == total == 0; check `is_empty` before
    rendering a numeric range.
    """

    start: int
    end: int
    total: int

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @classmethod
    def empty(cls) -> ResultsSummary:
        return cls(start=0, end=0, total=0)


@dataclass(frozen=True, slots=True)
class PaginationView:
    current_page: int
    total_pages: int
    entries: list[PaginationEntry] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


@dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Everything a renderer needs for one paint of the catalog."""

    items: Sequence[Product]
    summary: ResultsSummary
    pagination: PaginationView
    query: QueryState
