from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from catalog_view.entrypoints.http.dependencies import load_products
from catalog_view.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_view.entrypoints.http.routes.catalog import router as catalog_router
from catalog_view.entrypoints.http.routes.health import router as health_router
from catalog_view.entrypoints.http.routes.live import router as live_router
from catalog_view.infra.config import Settings, load_settings
from catalog_view.ports.product_source import ProductSource
from catalog_view.use_cases.view_engine import ViewEngine


def build_app(
    settings: Settings | None = None,
    product_source: ProductSource | None = None,
) -> FastAPI:
    """
    Build the catalog application.

    The collection is loaded once when the application starts (lifespan),
    through `product_source` if given, otherwise through the source named in
    settings. A failed load starts the application with an empty catalog.
    """
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        products = load_products(settings, product_source)

        engine = ViewEngine(default_page_size=settings.default_page_size)
        engine.initialize(products)

        app.state.products = products
        app.state.view_engine = engine
        yield

    app = FastAPI(
        title="Catalog View API",
        description="""
        Browse a product catalog: search by title, sort, and page through results.

        ## Features
        - Title search (case-insensitive substring)
        - Sort by price or name, ascending or descending
        - Configurable page size and compact pagination
        - Live view over WebSocket with debounced search

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(catalog_router, prefix="/v1")
    app.include_router(live_router, prefix="/v1")

    return app


app = build_app()
