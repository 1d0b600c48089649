from __future__ import annotations

import logging
from typing import Sequence

from catalog_view.domain.filtering import filter_products, sort_products
from catalog_view.domain.product import Product
from catalog_view.domain.query import DEFAULT_PAGE_SIZE, QueryState, SortField, SortOrder, SortSpec
from catalog_view.domain.view import (
    PaginationEntry,
    PaginationView,
    ResultsSummary,
    ViewSnapshot,
    clamp_page,
    page_bounds,
    pagination_window,
    total_pages,
)
from catalog_view.ports.view_renderer import ViewRenderer

logger = logging.getLogger(__name__)


class ViewEngine:
    """
    Filtered, sorted and paged view over a fixed product collection.

    State transitions:
    - search() recomputes the matched set from the whole collection, re-applies
      the active sort and always returns to page 1
    - sort() re-orders the current matched set (stable) and keeps the page
    - set_page_size() returns to page 1
    - go_to_page() accepts 1..total_pages and silently ignores anything else

    No operation raises. The renderer, if any, is called after every accepted
    state change.
    """

    def __init__(
        self,
        renderer: ViewRenderer | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._renderer = renderer
        self._default_page_size = default_page_size
        self._collection: list[Product] = []
        self._matched: list[Product] = []
        self._query = QueryState(page_size=default_page_size)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def collection(self) -> Sequence[Product]:
        return tuple(self._collection)

    @property
    def matched(self) -> Sequence[Product]:
        return tuple(self._matched)

    @property
    def query(self) -> QueryState:
        return self._query.copy()

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def initialize(self, records: Sequence[Product]) -> None:
        """Replace the collection and reset the query to defaults."""
        self._collection = list(records)
        self._matched = list(self._collection)
        self._query = QueryState(page_size=self._default_page_size)

        logger.debug("View initialized", extra={"count": len(self._collection)})
        self._render()

    def search(self, term: str) -> None:
        self._query.search_term = term
        self._matched = filter_products(self._collection, term)
        if self._query.sort is not None:
            self._matched = sort_products(self._matched, self._query.sort)
        self._query.page = 1

        logger.debug("Search applied", extra={"term": term, "matched": len(self._matched)})
        self._render()

    def sort(self, field: SortField, order: SortOrder) -> None:
        self._query.sort = SortSpec(field=field, order=order)
        self._matched = sort_products(self._matched, self._query.sort)

        logger.debug("Sort applied", extra={"field": field.value, "order": order.value})
        self._render()

    def set_page_size(self, size: int) -> None:
        self._query.page_size = size
        self._query.page = 1

        logger.debug("Page size changed", extra={"page_size": size})
        self._render()

    def go_to_page(self, page: int) -> None:
        if not 1 <= page <= self.total_pages():
            logger.debug(
                "Page out of range ignored",
                extra={"page": page, "total_pages": self.total_pages()},
            )
            return

        self._query.page = page
        self._render()

    # ------------------------------------------------------------------
    # Pure reads
    # ------------------------------------------------------------------

    def total_pages(self) -> int:
        return total_pages(len(self._matched), self._query.page_size)

    def current_page(self) -> int:
        return clamp_page(self._query.page, len(self._matched), self._query.page_size)

    def current_page_items(self) -> list[Product]:
        start, end = page_bounds(self.current_page(), self._query.page_size, len(self._matched))
        return self._matched[start:end]

    def results_summary(self) -> ResultsSummary:
        total = len(self._matched)
        if total == 0:
            return ResultsSummary.empty()

        page = self.current_page()
        start, end = page_bounds(page, self._query.page_size, total)
        return ResultsSummary(start=start + 1, end=end, total=total)

    def pagination_window(self) -> list[PaginationEntry]:
        return pagination_window(self.current_page(), self.total_pages())

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            items=self.current_page_items(),
            summary=self.results_summary(),
            pagination=PaginationView(
                current_page=self.current_page(),
                total_pages=self.total_pages(),
                entries=self.pagination_window(),
            ),
            query=self.query,
        )

    def _render(self) -> None:
        if self._renderer is not None:
            self._renderer.render(self.snapshot())
