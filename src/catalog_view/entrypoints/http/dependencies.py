"""
Dependency wiring for FastAPI routes.

Key principle: the product collection is loaded once per application and
shared read-only; view state lives in a ViewEngine per application (REST)
or per connection (WebSocket).
"""

from __future__ import annotations

from fastapi import Request
from fastapi.requests import HTTPConnection

from catalog_view.adapters.http_product_source import HttpProductSource
from catalog_view.adapters.json_file_product_source import JsonFileProductSource
from catalog_view.adapters.sql_product_source import SqlProductSource
from catalog_view.domain.product import Product
from catalog_view.infra.config import Settings
from catalog_view.infra.db.session import get_session
from catalog_view.ports.product_source import ProductSource
from catalog_view.use_cases.load_catalog import LoadCatalog
from catalog_view.use_cases.view_engine import ViewEngine


def load_products(settings: Settings, product_source: ProductSource | None = None) -> list[Product]:
    """
    Materialize the collection through the configured source.

    An explicit product_source wins over settings (used by tests and embedders).

    Raises:
        RuntimeError: If the sql source is selected but DATABASE_URL is not set
    """
    if product_source is not None:
        return LoadCatalog(product_source).execute().products

    if settings.catalog_source == "sql":
        with get_session() as session:
            return LoadCatalog(SqlProductSource(session=session)).execute().products

    source: ProductSource
    if settings.catalog_source == "http":
        source = HttpProductSource(
            settings.catalog_location, timeout=settings.http_timeout_seconds
        )
    else:
        source = JsonFileProductSource(settings.catalog_location)
    return LoadCatalog(source).execute().products


def get_settings(connection: HTTPConnection) -> Settings:
    return connection.app.state.settings


def get_products(connection: HTTPConnection) -> list[Product]:
    return connection.app.state.products


def get_view_engine(request: Request) -> ViewEngine:
    """The application-wide engine behind the REST endpoints."""
    return request.app.state.view_engine
