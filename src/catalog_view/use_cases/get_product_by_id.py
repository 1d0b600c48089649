"""Get product by ID use case."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from catalog_view.domain.errors import NotFoundError
from catalog_view.domain.product import Product


@dataclass(frozen=True, slots=True)
class GetProductByIdRequest:
    """Request to get a product by ID."""

    product_id: int


@dataclass(frozen=True, slots=True)
class GetProductByIdResponse:
    """Response containing the requested product."""

    product: Product


class GetProductById:
    """
    Use case for retrieving a single product from the loaded collection.

    Duplicated ids are not rejected at load time; the first match wins.
    """

    def __init__(self, products: Sequence[Product]) -> None:
        self._products = products

    def execute(self, request: GetProductByIdRequest) -> GetProductByIdResponse:
        """
        Raises:
            NotFoundError: If no product has the given ID
        """
        product = next((p for p in self._products if p.id == request.product_id), None)

        if product is None:
            raise NotFoundError(resource="Product", identifier=str(request.product_id))

        return GetProductByIdResponse(product=product)
