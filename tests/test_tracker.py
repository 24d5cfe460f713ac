from __future__ import annotations

import asyncio
import itertools

import httpx
import pytest

from iss_tracker.services import tracker as tracker_module
from iss_tracker.services.store import PositionStore
from iss_tracker.services.tracker import PositionTracker


def _ok(ts: int) -> httpx.Response:
    return httpx.Response(200, json={
        "message": "success",
        "timestamp": ts,
        "iss_position": {"latitude": "1.5", "longitude": "2.5"},
    })


async def _wait_for(predicate, attempts: int = 500) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition never met")


@pytest.mark.asyncio
async def test_run_once_appends_on_success(settings) -> None:
    store = PositionStore(settings.max_positions)
    tracker = PositionTracker(store, settings, transport=httpx.MockTransport(lambda r: _ok(42)))

    position = await tracker.run_once()
    await tracker.stop()

    assert position is not None
    assert store.snapshot_all() == [position]


@pytest.mark.asyncio
async def test_run_once_leaves_store_alone_on_failure(settings) -> None:
    store = PositionStore(settings.max_positions)
    tracker = PositionTracker(store, settings, transport=httpx.MockTransport(lambda r: httpx.Response(500)))

    assert await tracker.run_once() is None
    await tracker.stop()
    assert store.count() == 0


@pytest.mark.asyncio
async def test_loop_survives_every_kind_of_failure(settings) -> None:
    counter = itertools.count()

    def handler(request: httpx.Request) -> httpx.Response:
        n = next(counter)
        kind = n % 4
        if kind == 0:
            raise httpx.ConnectError("refused", request=request)
        if kind == 1:
            raise RuntimeError("unexpected")
        if kind == 2:
            return httpx.Response(502)
        return _ok(n)

    store = PositionStore(settings.max_positions)
    tracker = PositionTracker(store, settings, transport=httpx.MockTransport(handler))
    tracker.poll_interval = 0

    tracker.start()
    try:
        await _wait_for(lambda: store.count() == settings.max_positions)
        assert tracker.running
    finally:
        await tracker.stop()

    assert not tracker.running
    assert [p.timestamp for p in store.snapshot_all()] == [3, 7, 11]


@pytest.mark.asyncio
async def test_start_is_idempotent_and_stop_closes_client(settings) -> None:
    store = PositionStore(settings.max_positions)
    tracker = PositionTracker(store, settings, transport=httpx.MockTransport(lambda r: _ok(1)))
    tracker.poll_interval = 0

    tracker.start()
    task = tracker._task
    tracker.start()
    assert tracker._task is task

    await _wait_for(lambda: store.count() > 0)
    await tracker.stop()
    assert tracker._client is None
    assert task.cancelled()


@pytest.mark.asyncio
async def test_first_fetch_is_immediate_then_waits_full_interval(settings) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return _ok(len(requests))

    store = PositionStore(settings.max_positions)
    tracker = PositionTracker(store, settings, transport=httpx.MockTransport(handler))
    tracker.poll_interval = 3600

    tracker.start()
    try:
        await _wait_for(lambda: store.count() == 1)
        for _ in range(50):
            await asyncio.sleep(0)
        assert len(requests) == 1
    finally:
        await tracker.stop()


@pytest.mark.asyncio
async def test_sleep_follows_each_fetch_with_configured_interval(settings, monkeypatch) -> None:
    events: list[object] = []

    def handler(request: httpx.Request) -> httpx.Response:
        events.append("fetch")
        return _ok(len(events))

    async def fake_sleep(delay: float) -> None:
        events.append(("sleep", delay))
        if events.count(("sleep", delay)) == 2:
            raise asyncio.CancelledError

    store = PositionStore(settings.max_positions)
    tracker = PositionTracker(store, settings, transport=httpx.MockTransport(handler))
    monkeypatch.setattr(tracker_module.asyncio, "sleep", fake_sleep)

    with pytest.raises(asyncio.CancelledError):
        await tracker.run()
    monkeypatch.undo()
    await tracker.stop()

    interval = settings.poll_interval
    assert events == ["fetch", ("sleep", interval), "fetch", ("sleep", interval)]


@pytest.mark.asyncio
async def test_client_uses_configured_timeout(settings) -> None:
    tracker = PositionTracker(PositionStore(1), settings, transport=httpx.MockTransport(lambda r: _ok(1)))

    await tracker.run_once()
    try:
        assert tracker._client.timeout == httpx.Timeout(settings.timeout)
    finally:
        await tracker.stop()
