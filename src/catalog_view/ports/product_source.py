from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from catalog_view.domain.errors import CatalogLoadError
from catalog_view.domain.product import Product

logger = logging.getLogger(__name__)


class ProductSource(ABC):
    """
    Port for loading the product collection.

    Implementations fetch the whole collection once, as a realized list.

    Contract:
        - fetch() raises CatalogLoadError on any network, I/O or decode failure
        - load() never raises: a failed fetch degrades to an empty collection,
          which the view engine accepts as valid input
    """

    @abstractmethod
    def fetch(self) -> list[Product]:
        """
        Fetch every product from the underlying store.

        Returns:
            Products in source order (may be partial if some records were invalid)

        Raises:
            CatalogLoadError: If the collection cannot be fetched or decoded
        """
        ...

    def load(self) -> list[Product]:
        """Fetch the collection, degrading to an empty one on failure."""
        try:
            products = self.fetch()
        except CatalogLoadError as exc:
            logger.warning(
                "Catalog load failed, continuing with an empty collection",
                extra={
                    "error_code": exc.error_code,
                    "message": exc.message,
                    "context": exc.context,
                },
            )
            return []

        logger.info(
            "Catalog loaded",
            extra={"source": type(self).__name__, "count": len(products)},
        )
        return products
