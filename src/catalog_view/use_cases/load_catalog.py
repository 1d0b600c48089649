"""Load catalog use case."""

from __future__ import annotations

from dataclasses import dataclass

from catalog_view.domain.product import Product
from catalog_view.ports.product_source import ProductSource
from catalog_view.use_cases.view_engine import ViewEngine


@dataclass(frozen=True, slots=True)
class LoadCatalogResponse:
    products: list[Product]


class LoadCatalog:
    """
    Use case for materializing the product collection.

    Responsibilities:
    - Load the full collection once through the configured source
    - Optionally initialize a view engine with it

    A failing source yields an empty collection, never an error.
    """

    def __init__(self, product_source: ProductSource) -> None:
        self._product_source = product_source

    def execute(self, engine: ViewEngine | None = None) -> LoadCatalogResponse:
        products = self._product_source.load()

        if engine is not None:
            engine.initialize(products)

        return LoadCatalogResponse(products=products)
