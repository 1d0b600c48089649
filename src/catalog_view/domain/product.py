from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Category:
    name: str
    image: str | None = None


@dataclass(frozen=True, slots=True)
class Product:
    """One product entry of the catalog. Never mutated once loaded."""

    id: int
    title: str
    price: Decimal
    description: str = ""
    category: Category | None = None
    images: tuple[str, ...] = field(default_factory=tuple)
