"""HTTP implementation of ProductSource."""

from __future__ import annotations

import httpx

from catalog_view.adapters.product_payload import parse_products
from catalog_view.domain.errors import CatalogLoadError
from catalog_view.domain.product import Product
from catalog_view.ports.product_source import ProductSource

DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpProductSource(ProductSource):
    """
    Fetches the catalog with a single GET returning a JSON array.

    - Non-2xx responses, transport errors and undecodable bodies are load failures
    - An injected client is used as-is and left open (owned by the caller)
    """

    def __init__(
        self,
        url: str,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._url = url
        self._client = client
        self._timeout = timeout

    def fetch(self) -> list[Product]:
        if self._client is not None:
            return self._fetch_with(self._client)

        with httpx.Client(timeout=self._timeout) as client:
            return self._fetch_with(client)

    def _fetch_with(self, client: httpx.Client) -> list[Product]:
        try:
            response = client.get(self._url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise CatalogLoadError(
                "Catalog endpoint returned an error status",
                source=self._url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogLoadError(
                f"Catalog request failed: {exc}", source=self._url
            ) from exc
        except ValueError as exc:
            raise CatalogLoadError(
                "Catalog response is not valid JSON", source=self._url
            ) from exc

        return parse_products(payload, source=self._url)
