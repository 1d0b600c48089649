"""Search matching and stable sorting of products."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Iterable

from pyuca import Collator

from catalog_view.domain.product import Product
from catalog_view.domain.query import SortField, SortOrder, SortSpec

_collator = Collator()


def normalize_term(term: str) -> str:
    return term.strip().lower()


def matches(product: Product, normalized_term: str) -> bool:
    """Case-insensitive substring match on the title. An empty term matches everything."""
    if not normalized_term:
        return True
    return normalized_term in product.title.lower()


def filter_products(products: Iterable[Product], term: str) -> list[Product]:
    """Return the products whose title contains `term`, in their original order."""
    normalized = normalize_term(term)
    return [product for product in products if matches(product, normalized)]


def name_sort_key(product: Product) -> tuple[int, ...]:
    # Unicode collation keys order accented titles the way people read them
    return _collator.sort_key(product.title.lower())


def price_sort_key(product: Product) -> Decimal:
    return product.price


_SORT_KEYS: dict[SortField, Callable[[Product], Any]] = {
    SortField.PRICE: price_sort_key,
    SortField.NAME: name_sort_key,
}


def sort_products(products: list[Product], sort_spec: SortSpec) -> list[Product]:
    """
    Sort products by field and order.

    The sort is stable in both directions: products with equal keys keep
    the relative order they had in `products`.
    """
    key = _SORT_KEYS[sort_spec.field]
    return sorted(products, key=key, reverse=sort_spec.order is SortOrder.DESCENDING)
