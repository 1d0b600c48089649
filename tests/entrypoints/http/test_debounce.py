"""Tests for the search input debouncer (runs on the asyncio event loop)."""

from __future__ import annotations

import asyncio

import pytest

from catalog_view.entrypoints.http.debounce import Debouncer

DELAY = 0.02


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.mark.anyio
async def test_only_last_value_in_burst_is_delivered() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(DELAY, received.append)

    debouncer.submit("s")
    debouncer.submit("sh")
    debouncer.submit("shirt")
    await asyncio.sleep(DELAY * 5)

    assert received == ["shirt"]
    assert not debouncer.pending


@pytest.mark.anyio
async def test_values_separated_by_quiet_period_are_all_delivered() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(DELAY, received.append)

    debouncer.submit("a")
    await asyncio.sleep(DELAY * 5)
    debouncer.submit("b")
    await asyncio.sleep(DELAY * 5)

    assert received == ["a", "b"]


@pytest.mark.anyio
async def test_nothing_delivered_before_delay() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(10, received.append)

    debouncer.submit("slow")
    await asyncio.sleep(0)

    assert received == []
    assert debouncer.pending
    debouncer.cancel()


@pytest.mark.anyio
async def test_flush_delivers_pending_value_immediately() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(10, received.append)

    debouncer.submit("now")
    debouncer.flush()

    assert received == ["now"]
    assert not debouncer.pending


@pytest.mark.anyio
async def test_flush_without_pending_value_does_nothing() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(DELAY, received.append)

    debouncer.flush()

    assert received == []


@pytest.mark.anyio
async def test_cancel_drops_pending_value() -> None:
    received: list[str] = []
    debouncer: Debouncer[str] = Debouncer(DELAY, received.append)

    debouncer.submit("dropped")
    debouncer.cancel()
    await asyncio.sleep(DELAY * 5)

    assert received == []
    assert not debouncer.pending


def test_submit_requires_running_loop() -> None:
    debouncer: Debouncer[str] = Debouncer(DELAY, lambda value: None)

    with pytest.raises(RuntimeError):
        debouncer.submit("no loop")
