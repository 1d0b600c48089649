"""Application settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from catalog_view.domain.query import ALLOWED_PAGE_SIZES, DEFAULT_PAGE_SIZE

SOURCE_KINDS = ("json", "http", "sql")


@dataclass(frozen=True, slots=True)
class Settings:
    catalog_source: str = "json"
    catalog_location: str = "products.json"
    page_sizes: tuple[int, ...] = ALLOWED_PAGE_SIZES
    default_page_size: int = DEFAULT_PAGE_SIZE
    search_debounce_seconds: float = 0.2
    http_timeout_seconds: float = 10.0


def _int_list(name: str, default: tuple[int, ...]) -> tuple[int, ...]:
    raw = os.getenv(name)
    if not raw:
        return default

    try:
        values = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError:
        raise RuntimeError(f"{name} must be a comma-separated list of integers")

    if not values or any(value <= 0 for value in values):
        raise RuntimeError(f"{name} must contain positive integers only")
    return values


def _number(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default

    try:
        value = float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number")

    if value < 0:
        raise RuntimeError(f"{name} must be >= 0")
    return value


def load_settings() -> Settings:
    """
    Build settings from CATALOG_* environment variables.

    Raises:
        RuntimeError: If a variable is set to an invalid value
    """
    source = os.getenv("CATALOG_SOURCE", "json").lower()
    if source not in SOURCE_KINDS:
        raise RuntimeError(f"CATALOG_SOURCE must be one of {list(SOURCE_KINDS)}")

    page_sizes = _int_list("CATALOG_PAGE_SIZES", ALLOWED_PAGE_SIZES)
    default_page_size = int(_number("CATALOG_DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE))
    if default_page_size not in page_sizes:
        raise RuntimeError("CATALOG_DEFAULT_PAGE_SIZE must be one of CATALOG_PAGE_SIZES")

    return Settings(
        catalog_source=source,
        catalog_location=os.getenv("CATALOG_LOCATION", "products.json"),
        page_sizes=page_sizes,
        default_page_size=default_page_size,
        search_debounce_seconds=_number("CATALOG_SEARCH_DEBOUNCE_MS", 200) / 1000,
        http_timeout_seconds=_number("CATALOG_HTTP_TIMEOUT_SECONDS", 10.0),
    )


def database_url() -> str:
    """Connection URL for the sql catalog source."""
    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL must be set when CATALOG_SOURCE is sql")
    return url
