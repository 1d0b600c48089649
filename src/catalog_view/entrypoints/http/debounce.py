"""Debounced delivery of bursty input (search keystrokes)."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Debouncer(Generic[T]):
    """
    Forward only the last value submitted within a quiescence window.

    Every submit() cancels the pending call and schedules a new one `delay`
    seconds later on the running event loop. The callback runs on the loop
    thread, so it is serialized with everything else on that loop.

    Example:
        debouncer = Debouncer(0.2, engine.search)
        debouncer.submit("a")
        debouncer.submit("ap")   # only "ap" reaches engine.search
    """

    def __init__(self, delay: float, callback: Callable[[T], None]) -> None:
        self._delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._value: T | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, value: T) -> None:
        """Schedule `value`, replacing any value still waiting."""
        self.cancel()
        loop = asyncio.get_running_loop()
        self._value = value
        self._handle = loop.call_later(self._delay, self._fire)

    def flush(self) -> None:
        """Deliver the pending value now, if any."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._fire()

    def cancel(self) -> None:
        """Drop the pending value without delivering it."""
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._value = None

    def _fire(self) -> None:
        value = self._value
        self._handle = None
        self._value = None
        logger.debug("Debounced value delivered", extra={"value": value})
        self._callback(value)  # type: ignore[arg-type]
