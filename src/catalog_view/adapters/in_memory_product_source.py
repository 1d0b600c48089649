from __future__ import annotations

from catalog_view.domain.product import Product
from catalog_view.ports.product_source import ProductSource


class InMemoryProductSource(ProductSource):
    """
    Canonical contract implementation for tests.

    - Returns products in insertion order
    - Never fails
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = products

    def fetch(self) -> list[Product]:
        return list(self._products)
