from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from catalog_view.domain.errors import ValidationError


DEFAULT_PAGE_SIZE = 10
ALLOWED_PAGE_SIZES = (5, 10, 20, 50)


class SortField(str, Enum):
    PRICE = "price"
    NAME = "name"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True, slots=True)
class SortSpec:
    field: SortField
    order: SortOrder = SortOrder.ASCENDING


@dataclass(slots=True)
class QueryState:
    """
    Query parameters driving the view.

    Owned and mutated by the view engine only. `page` is 1-based.
    A `sort` of None means natural (collection) order.
    """

    search_term: str = ""
    sort: SortSpec | None = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def copy(self) -> QueryState:
        return QueryState(
            search_term=self.search_term,
            sort=self.sort,
            page=self.page,
            page_size=self.page_size,
        )


def validate_page_size(size: int, allowed: Iterable[int] = ALLOWED_PAGE_SIZES) -> None:
    """
    Check a requested page size against the sizes offered to the user.

    The engine itself accepts any positive size; this is the input layer's policy.

    Raises:
        ValidationError: If size is not one of the allowed values
    """
    allowed_sizes = sorted(set(allowed))
    if size not in allowed_sizes:
        raise ValidationError(
            errors=[
                {
                    "field": "size",
                    "message": f"Must be one of {allowed_sizes}",
                    "code": "INVALID_PAGE_SIZE",
                }
            ]
        )
