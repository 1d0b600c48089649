"""Tests for pagination arithmetic and the compact page window."""

from __future__ import annotations

import pytest

from catalog_view.domain.view import (
    ELLIPSIS,
    PaginationView,
    ResultsSummary,
    clamp_page,
    page_bounds,
    pagination_window,
    total_pages,
)


# ==============================================================================
# total_pages / clamp_page / page_bounds
# ==============================================================================


@pytest.mark.parametrize(
    ("total", "page_size", "expected"),
    [(0, 10, 1), (1, 10, 1), (10, 10, 1), (11, 10, 2), (12, 5, 3), (100, 20, 5)],
)
def test_total_pages(total: int, page_size: int, expected: int) -> None:
    assert total_pages(total, page_size) == expected


def test_clamp_page_to_valid_range() -> None:
    assert clamp_page(0, 25, 10) == 1
    assert clamp_page(2, 25, 10) == 2
    assert clamp_page(9, 25, 10) == 3
    assert clamp_page(4, 0, 10) == 1


def test_page_bounds_last_partial_page() -> None:
    assert page_bounds(2, 10, 12) == (10, 12)


def test_page_bounds_past_the_end_is_empty_slice() -> None:
    start, end = page_bounds(5, 10, 12)

    assert start == end == 12


# ==============================================================================
# pagination_window
# ==============================================================================


def test_window_middle_of_many_pages() -> None:
    assert pagination_window(10, 20) == [1, ELLIPSIS, 8, 9, 10, 11, 12, ELLIPSIS, 20]


@pytest.mark.parametrize("pages", [0, 1])
def test_window_empty_for_single_page(pages: int) -> None:
    assert pagination_window(1, pages) == []


def test_window_few_pages_shows_all() -> None:
    assert pagination_window(1, 3) == [1, 2, 3]
    assert pagination_window(2, 5) == [1, 2, 3, 4, 5]


def test_window_at_start() -> None:
    assert pagination_window(1, 20) == [1, 2, 3, 4, 5, ELLIPSIS, 20]


def test_window_at_end_expands_backwards() -> None:
    assert pagination_window(20, 20) == [1, ELLIPSIS, 16, 17, 18, 19, 20]
    assert pagination_window(19, 20) == [1, ELLIPSIS, 16, 17, 18, 19, 20]


def test_window_no_ellipsis_when_adjacent_to_anchor() -> None:
    # window 2..6, page 1 is adjacent, so no gap on the left
    assert pagination_window(4, 7) == [1, 2, 3, 4, 5, 6, 7]
    assert pagination_window(4, 8) == [1, 2, 3, 4, 5, 6, ELLIPSIS, 8]


def test_window_ellipsis_only_on_real_gaps() -> None:
    assert pagination_window(3, 6) == [1, 2, 3, 4, 5, 6]
    assert pagination_window(5, 8) == [1, ELLIPSIS, 3, 4, 5, 6, 7, 8]
    assert pagination_window(6, 10) == [1, ELLIPSIS, 4, 5, 6, 7, 8, ELLIPSIS, 10]


# ==============================================================================
# ResultsSummary / PaginationView
# ==============================================================================


def test_results_summary_empty() -> None:
    summary = ResultsSummary.empty()

    assert summary.is_empty
    assert (summary.start, summary.end, summary.total) == (0, 0, 0)


def test_results_summary_not_empty() -> None:
    assert not ResultsSummary(start=11, end=12, total=12).is_empty


def test_pagination_view_previous_next_flags() -> None:
    first = PaginationView(current_page=1, total_pages=3)
    middle = PaginationView(current_page=2, total_pages=3)
    last = PaginationView(current_page=3, total_pages=3)

    assert (first.has_previous, first.has_next) == (False, True)
    assert (middle.has_previous, middle.has_next) == (True, True)
    assert (last.has_previous, last.has_next) == (True, False)
