"""
Unit tests for FastAPI dependency wiring.

- load_products() picks the product source from settings
- An explicit product source wins over settings
- A failing source yields an empty collection
- State accessors read from the application
"""

from __future__ import annotations

import json
from decimal import Decimal
from unittest.mock import MagicMock, Mock, patch

from catalog_view.adapters.http_product_source import HttpProductSource
from catalog_view.adapters.in_memory_product_source import InMemoryProductSource
from catalog_view.adapters.sql_product_source import SqlProductSource
from catalog_view.domain.product import Product
from catalog_view.entrypoints.http.dependencies import (
    get_products,
    get_settings,
    get_view_engine,
    load_products,
)
from catalog_view.infra.config import Settings

DEPENDENCIES = "catalog_view.entrypoints.http.dependencies"


# ==============================================================================
# load_products()
# ==============================================================================


def test_explicit_source_wins_over_settings() -> None:
    products = [Product(id=1, title="Lamp", price=Decimal("12.00"))]

    with patch(f"{DEPENDENCIES}.JsonFileProductSource") as json_source:
        result = load_products(Settings(), InMemoryProductSource(products))

    assert result == products
    json_source.assert_not_called()


def test_json_source_reads_catalog_file(tmp_path) -> None:
    path = tmp_path / "products.json"
    path.write_text(json.dumps([{"id": 7, "title": "Mug", "price": 9.5}]))

    result = load_products(Settings(catalog_source="json", catalog_location=str(path)))

    assert [p.id for p in result] == [7]
    assert result[0].price == Decimal("9.5")


def test_missing_json_file_yields_empty_collection(tmp_path) -> None:
    settings = Settings(catalog_source="json", catalog_location=str(tmp_path / "nope.json"))

    assert load_products(settings) == []


def test_http_source_uses_location_and_timeout() -> None:
    settings = Settings(
        catalog_source="http",
        catalog_location="https://catalog.example/products",
        http_timeout_seconds=3.0,
    )

    with patch(f"{DEPENDENCIES}.HttpProductSource") as http_source_cls:
        http_source_cls.return_value = Mock(spec=HttpProductSource)
        http_source_cls.return_value.load.return_value = []

        result = load_products(settings)

    http_source_cls.assert_called_once_with("https://catalog.example/products", timeout=3.0)
    assert result == []


def test_sql_source_uses_session_from_get_session() -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with (
        patch(f"{DEPENDENCIES}.get_session", return_value=mock_context_manager) as mock_get_session,
        patch(f"{DEPENDENCIES}.SqlProductSource") as sql_source_cls,
    ):
        sql_source_cls.return_value = Mock(spec=SqlProductSource)
        sql_source_cls.return_value.load.return_value = []

        load_products(Settings(catalog_source="sql"))

    mock_get_session.assert_called_once()
    sql_source_cls.assert_called_once_with(session=mock_session)
    mock_context_manager.__exit__.assert_called_once()


# ==============================================================================
# State accessors
# ==============================================================================


def test_state_accessors_read_application_state() -> None:
    connection = Mock()
    connection.app.state.settings = Settings()
    connection.app.state.products = []
    connection.app.state.view_engine = sentinel_engine = Mock()

    assert get_settings(connection) is connection.app.state.settings
    assert get_products(connection) == []
    assert get_view_engine(connection) is sentinel_engine
