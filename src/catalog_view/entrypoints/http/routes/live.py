"""Live catalog view over a WebSocket.

Each connection gets its own ViewEngine over the shared collection. Search
input is debounced; every render is pushed to the client as a view message.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from catalog_view.adapters.queue_view_renderer import QueueViewRenderer
from catalog_view.domain.errors import DomainError, ValidationError
from catalog_view.domain.product import Product
from catalog_view.domain.query import validate_page_size
from catalog_view.domain.view import ViewSnapshot
from catalog_view.entrypoints.http.debounce import Debouncer
from catalog_view.entrypoints.http.dependencies import get_products, get_settings
from catalog_view.entrypoints.http.dtos.catalog_view import (
    LiveMessage,
    PageMessage,
    PageSizeMessage,
    SearchMessage,
    SortMessage,
)
from catalog_view.entrypoints.http.mappers.catalog_view_mapper import CatalogViewMapper
from catalog_view.infra.config import Settings
from catalog_view.use_cases.view_engine import ViewEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["Catalog"])

_live_message = TypeAdapter(LiveMessage)


def parse_message(raw: str) -> LiveMessage:
    """
    Decode one client message.

    Raises:
        ValidationError: If the message is not valid JSON or does not match any action
    """
    try:
        return _live_message.validate_json(raw)
    except PydanticValidationError as exc:
        raise ValidationError(
            message="Invalid message",
            errors=[
                {
                    "field": ".".join(str(loc) for loc in error["loc"]),
                    "message": error["msg"],
                    "code": error["type"],
                }
                for error in exc.errors()
            ],
        ) from exc


def dispatch(
    message: LiveMessage,
    engine: ViewEngine,
    search_debouncer: Debouncer[str],
    settings: Settings,
) -> None:
    """Apply one client message to the connection's engine."""
    if isinstance(message, SearchMessage):
        search_debouncer.submit(message.term)
    elif isinstance(message, SortMessage):
        engine.sort(message.field, message.order)
    elif isinstance(message, PageSizeMessage):
        validate_page_size(message.size, settings.page_sizes)
        engine.set_page_size(message.size)
    elif isinstance(message, PageMessage):
        engine.go_to_page(message.page)


def error_message(exc: DomainError) -> dict[str, Any]:
    error_dict = exc.to_dict()
    body: dict[str, Any] = {
        "type": "error",
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }
    if "errors" in error_dict:
        body["errors"] = error_dict["errors"]
    return body


def view_message(snapshot: ViewSnapshot) -> dict[str, Any]:
    return {
        "type": "view",
        "view": CatalogViewMapper.to_response(snapshot).model_dump(mode="json"),
    }


async def stop_sender(sender: asyncio.Task[None]) -> None:
    """Cancel the view sender and wait for it; a send that already failed is logged, not raised."""
    sender.cancel()
    try:
        await sender
    except asyncio.CancelledError:
        pass
    except Exception:
        logger.warning("Live view sender stopped with an error", exc_info=True)


async def _forward_views(
    websocket: WebSocket,
    queue: asyncio.Queue[ViewSnapshot],
    send_lock: asyncio.Lock,
) -> None:
    while True:
        snapshot = await queue.get()
        async with send_lock:
            await websocket.send_json(view_message(snapshot))


@router.websocket("/live")
async def live_view(
    websocket: WebSocket,
    products: list[Product] = Depends(get_products),
    settings: Settings = Depends(get_settings),
) -> None:
    await websocket.accept()

    renderer = QueueViewRenderer()
    engine = ViewEngine(renderer=renderer, default_page_size=settings.default_page_size)
    search_debouncer: Debouncer[str] = Debouncer(settings.search_debounce_seconds, engine.search)
    send_lock = asyncio.Lock()

    # Initial paint
    engine.initialize(products)
    sender = asyncio.create_task(_forward_views(websocket, renderer.queue, send_lock))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                dispatch(parse_message(raw), engine, search_debouncer, settings)
            except DomainError as exc:
                logger.info(
                    "Rejected live message",
                    extra={"error_code": exc.error_code, "message": exc.message},
                )
                async with send_lock:
                    await websocket.send_json(error_message(exc))
    except WebSocketDisconnect:
        logger.debug("Live view client disconnected")
    finally:
        search_debouncer.cancel()
        await stop_sender(sender)
