from __future__ import annotations

import asyncio

import pytest
from fakes import FakeConnector

from relay.state import SessionPhase
from relay.gateway.coordinator import ConnectionCoordinator
from relay.errors import ConnectionFailed, ConnectionTimeout


async def _settle_loop() -> None:
    # Let queued tasks run up to their next suspension point.
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_concurrent_callers_share_one_connect(connector: FakeConnector) -> None:
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    callers = [asyncio.create_task(coordinator.ensure_ready()) for _ in range(5)]
    await _settle_loop()

    assert connector.open_calls == 1
    assert coordinator.state.phase is SessionPhase.CONNECTING
    assert len(coordinator.state.waiters) == 5

    connector.release.set()
    handles = await asyncio.gather(*callers)

    assert all(handle is connector.handle for handle in handles)
    assert connector.open_calls == 1
    assert coordinator.state.phase is SessionPhase.READY
    assert coordinator.state.handle is connector.handle
    assert coordinator.state.waiters == []
    assert coordinator.state.last_error is None


@pytest.mark.asyncio
async def test_concurrent_callers_fail_with_the_same_error(connector: FakeConnector) -> None:
    connector.fail_with = RuntimeError("401 Unauthorized")
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    callers = [asyncio.create_task(coordinator.ensure_ready()) for _ in range(3)]
    await _settle_loop()
    connector.release.set()
    results = await asyncio.gather(*callers, return_exceptions=True)

    assert connector.open_calls == 1
    assert all(isinstance(result, ConnectionFailed) for result in results)
    assert all(result is results[0] for result in results)
    assert results[0].cause == "RuntimeError"
    assert coordinator.state.phase is SessionPhase.FAILED
    assert coordinator.state.handle is None
    assert coordinator.state.last_error is results[0]


@pytest.mark.asyncio
async def test_ready_session_returns_without_suspending() -> None:
    connector = FakeConnector(auto_release=True)
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)
    await coordinator.ensure_ready()

    coro = coordinator.ensure_ready()
    with pytest.raises(StopIteration) as stop:
        coro.send(None)

    assert stop.value.value is connector.handle
    assert connector.open_calls == 1


@pytest.mark.asyncio
async def test_hung_connect_times_out_and_is_cancelled(connector: FakeConnector) -> None:
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=5.0)
    loop = asyncio.get_running_loop()

    started = loop.time()
    with pytest.raises(ConnectionTimeout) as exc:
        await coordinator.ensure_ready(0.05)
    elapsed = loop.time() - started

    assert 0.045 <= elapsed < 0.5
    assert exc.value.timeout_s == pytest.approx(0.05)
    assert coordinator.state.phase is SessionPhase.FAILED
    assert isinstance(coordinator.state.last_error, ConnectionTimeout)

    await _settle_loop()
    assert connector.cancelled == 1


@pytest.mark.asyncio
async def test_failure_is_not_cached(connector: FakeConnector) -> None:
    connector.fail_with = RuntimeError("gateway unavailable")
    connector.release.set()
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    with pytest.raises(ConnectionFailed):
        await coordinator.ensure_ready()
    assert connector.open_calls == 1

    connector.fail_with = None
    handle = await coordinator.ensure_ready()

    assert handle is connector.handle
    assert connector.open_calls == 2
    assert coordinator.state.phase is SessionPhase.READY
    assert coordinator.state.last_error is None


@pytest.mark.asyncio
async def test_unusable_ready_session_reconnects() -> None:
    connector = FakeConnector(auto_release=True)
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)
    first = await coordinator.ensure_ready()

    # Simulate the gateway dropping: the stored handle is no longer the live one.
    connector.handle = object()
    second = await coordinator.ensure_ready()

    assert second is connector.handle
    assert second is not first
    assert connector.open_calls == 2


@pytest.mark.asyncio
async def test_short_waiter_times_out_without_failing_the_attempt(connector: FakeConnector) -> None:
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    patient = asyncio.create_task(coordinator.ensure_ready())
    await _settle_loop()

    with pytest.raises(ConnectionTimeout):
        await coordinator.ensure_ready(0.02)

    assert coordinator.state.phase is SessionPhase.CONNECTING
    assert len(coordinator.state.waiters) == 1

    connector.release.set()
    assert await patient is connector.handle
    assert connector.open_calls == 1


@pytest.mark.asyncio
async def test_close_rejects_pending_waiters(connector: FakeConnector) -> None:
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    waiting = asyncio.create_task(coordinator.ensure_ready())
    await _settle_loop()
    await coordinator.close()

    with pytest.raises(ConnectionFailed):
        await waiting
    assert connector.cancelled == 1
    assert connector.close_calls == 1
    assert coordinator.state.phase is SessionPhase.DISCONNECTED
    assert coordinator.state.handle is None


@pytest.mark.asyncio
async def test_warm_up_connects_in_background(connector: FakeConnector) -> None:
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    task = coordinator.warm_up()
    await _settle_loop()
    assert coordinator.snapshot()["phase"] == "connecting"

    connector.release.set()
    await task

    assert coordinator.snapshot() == {
        "phase": "ready",
        "connect_attempts": 1,
        "waiters": 0,
        "last_error": None,
    }


@pytest.mark.asyncio
async def test_warm_up_failure_is_logged_not_raised(connector: FakeConnector) -> None:
    connector.fail_with = RuntimeError("bad token")
    connector.release.set()
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=1.0)

    await coordinator.warm_up()

    snapshot = coordinator.snapshot()
    assert snapshot["phase"] == "failed"
    assert "bad token" in snapshot["last_error"]
