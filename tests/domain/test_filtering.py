"""
Test suite for title search and stable sorting.

- Search: case-insensitive substring match on title, blank term matches all
- Sort: price numeric, name by Unicode collation, stable in both directions
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from catalog_view.domain.filtering import (
    filter_products,
    matches,
    normalize_term,
    sort_products,
)
from catalog_view.domain.product import Product
from catalog_view.domain.query import SortField, SortOrder, SortSpec


def _product(id: int, title: str, price: str = "10") -> Product:
    return Product(id=id, title=title, price=Decimal(price))


@pytest.fixture()
def products() -> list[Product]:
    return [
        _product(1, "Classic Red Shirt", "25"),
        _product(2, "Blue Jeans", "40"),
        _product(3, "red Sneakers", "60"),
        _product(4, "Leather Belt", "15"),
        _product(5, "Wool Scarf", "25"),
    ]


# ==============================================================================
# Search
# ==============================================================================


def test_normalize_term_trims_and_lowercases() -> None:
    assert normalize_term("  RED Shirt \t") == "red shirt"


def test_matches_blank_term_matches_everything() -> None:
    assert matches(_product(1, "Anything"), "")


def test_filter_substring_is_case_insensitive(products: list[Product]) -> None:
    assert [p.id for p in filter_products(products, "RED")] == [1, 3]
    assert [p.id for p in filter_products(products, "red")] == [1, 3]


def test_filter_matches_inside_words(products: list[Product]) -> None:
    assert [p.id for p in filter_products(products, "ea")] == [2, 3, 4]


def test_filter_empty_term_is_identity(products: list[Product]) -> None:
    assert filter_products(products, "") == products
    assert filter_products(products, "   ") == products


def test_filter_no_match_returns_empty(products: list[Product]) -> None:
    assert filter_products(products, "umbrella") == []


def test_filter_does_not_tokenize(products: list[Product]) -> None:
    """Terms are matched as one substring, not as separate words."""
    assert filter_products(products, "red shirt") == [products[0]]
    assert filter_products(products, "shirt red") == []


def test_filter_is_idempotent(products: list[Product]) -> None:
    assert filter_products(products, "e") == filter_products(products, "e")


# ==============================================================================
# Sort
# ==============================================================================


def test_sort_price_ascending(products: list[Product]) -> None:
    result = sort_products(products, SortSpec(SortField.PRICE, SortOrder.ASCENDING))

    assert [p.id for p in result] == [4, 1, 5, 2, 3]


def test_sort_price_descending_keeps_ties_in_prior_order(products: list[Product]) -> None:
    result = sort_products(products, SortSpec(SortField.PRICE, SortOrder.DESCENDING))

    # 1 and 5 share a price and keep their relative order
    assert [p.id for p in result] == [3, 2, 1, 5, 4]


def test_sort_price_is_numeric_not_textual() -> None:
    items = [_product(1, "a", "100"), _product(2, "b", "9.5"), _product(3, "c", "20")]

    result = sort_products(items, SortSpec(SortField.PRICE))

    assert [p.id for p in result] == [2, 3, 1]


def test_sort_name_ignores_case(products: list[Product]) -> None:
    result = sort_products(products, SortSpec(SortField.NAME))

    assert [p.title for p in result] == [
        "Blue Jeans",
        "Classic Red Shirt",
        "Leather Belt",
        "red Sneakers",
        "Wool Scarf",
    ]


def test_sort_name_orders_accented_titles_by_reading_order() -> None:
    items = [
        _product(1, "Zebra Mug"),
        _product(2, "Éclair Tin"),
        _product(3, "apple Box"),
        _product(4, "Duvet"),
    ]

    result = sort_products(items, SortSpec(SortField.NAME))

    assert [p.id for p in result] == [3, 4, 2, 1]


def test_sort_name_descending(products: list[Product]) -> None:
    result = sort_products(products, SortSpec(SortField.NAME, SortOrder.DESCENDING))

    assert [p.id for p in result] == [5, 3, 4, 1, 2]


def test_sort_name_ties_are_stable() -> None:
    items = [_product(1, "Lamp"), _product(2, "LAMP"), _product(3, "lamp")]

    ascending = sort_products(items, SortSpec(SortField.NAME, SortOrder.ASCENDING))
    descending = sort_products(items, SortSpec(SortField.NAME, SortOrder.DESCENDING))

    assert [p.id for p in ascending] == [1, 2, 3]
    assert [p.id for p in descending] == [1, 2, 3]


def test_sort_returns_new_list(products: list[Product]) -> None:
    original = list(products)

    sort_products(products, SortSpec(SortField.PRICE))

    assert products == original
