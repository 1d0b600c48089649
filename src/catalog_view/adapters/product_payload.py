"""Parsing of raw product records (JSON payloads, API responses)."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from catalog_view.domain.errors import CatalogLoadError
from catalog_view.domain.product import Category, Product

logger = logging.getLogger(__name__)


class CategoryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    image: str | None = None


class ProductPayload(BaseModel):
    """One product record as published by the catalog feed."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(ge=0)
    title: str
    price: Decimal = Field(ge=0)
    description: str = ""
    category: CategoryPayload | None = None
    images: list[str] = Field(default_factory=list)

    @field_validator("images", mode="before")
    @classmethod
    def drop_non_string_images(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [url for url in value if isinstance(url, str)]
        return value

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            title=self.title,
            price=self.price,
            description=self.description,
            category=(
                Category(name=self.category.name, image=self.category.image)
                if self.category
                else None
            ),
            images=tuple(self.images),
        )


def parse_products(payload: Any, source: str) -> list[Product]:
    """
    Convert a decoded JSON document into products.

    Records that fail validation are skipped so that one bad entry does not
    cost the whole collection.

    Raises:
        CatalogLoadError: If the document is not a list of records
    """
    if not isinstance(payload, list):
        raise CatalogLoadError(
            "Catalog payload must be a JSON array",
            source=source,
            payload_type=type(payload).__name__,
        )

    products: list[Product] = []
    for index, raw in enumerate(payload):
        try:
            products.append(ProductPayload.model_validate(raw).to_domain())
        except PydanticValidationError as exc:
            logger.warning(
                "Skipping invalid product record",
                extra={"source": source, "index": index, "errors": exc.errors()},
            )

    return products
