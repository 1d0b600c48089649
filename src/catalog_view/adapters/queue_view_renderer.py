from __future__ import annotations

import asyncio

from catalog_view.domain.view import ViewSnapshot
from catalog_view.ports.view_renderer import ViewRenderer


class QueueViewRenderer(ViewRenderer):
    """
    Hands snapshots to an async consumer.

    render() is called synchronously by the engine on the event loop thread;
    put_nowait never blocks because the queue is unbounded.
    """

    def __init__(self, queue: asyncio.Queue[ViewSnapshot] | None = None) -> None:
        self.queue: asyncio.Queue[ViewSnapshot] = queue if queue is not None else asyncio.Queue()

    def render(self, snapshot: ViewSnapshot) -> None:
        self.queue.put_nowait(snapshot)
