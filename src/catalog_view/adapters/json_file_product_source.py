"""JSON file implementation of ProductSource."""

from __future__ import annotations

import json
from pathlib import Path

from catalog_view.adapters.product_payload import parse_products
from catalog_view.domain.errors import CatalogLoadError
from catalog_view.domain.product import Product
from catalog_view.ports.product_source import ProductSource


class JsonFileProductSource(ProductSource):
    """Reads the catalog from a local `products.json` file (a JSON array of records)."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def fetch(self) -> list[Product]:
        try:
            with self._path.open("r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as exc:
            raise CatalogLoadError(
                f"Cannot read catalog file: {exc}", source=str(self._path)
            ) from exc
        except json.JSONDecodeError as exc:
            raise CatalogLoadError(
                f"Catalog file is not valid JSON: {exc.msg}", source=str(self._path)
            ) from exc
        except UnicodeDecodeError as exc:
            raise CatalogLoadError(
                f"Catalog file is not valid UTF-8: {exc.reason}", source=str(self._path)
            ) from exc

        return parse_products(payload, source=str(self._path))
