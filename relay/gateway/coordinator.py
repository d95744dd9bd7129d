"""Connection readiness coordination for the shared gateway session.

One `ConnectionCoordinator` lives for the whole process and owns the only
`SessionState`. Callers await `ensure_ready()`; overlapping callers that
arrive while a connect is in flight join that attempt instead of starting
their own. The attempt ends through `_settle`, which is fed by two competing
sources (the connect task and the deadline timer) and only honours the
first one.

All transitions are plain synchronous code between awaits on a single event
loop, so no lock is taken.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

from relay.state import SessionPhase, SessionState
from relay.errors import RelayError, ConnectionFailed, ConnectionTimeout

logger = logging.getLogger(__name__)


class ConnectionCoordinator:
    def __init__(self, connector: Any, *, ready_timeout_s: float) -> None:
        self._connector = connector
        self._ready_timeout_s = float(ready_timeout_s)
        self._state = SessionState()
        self._attempt_task: asyncio.Task | None = None
        self._deadline: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def ready_timeout_s(self) -> float:
        return self._ready_timeout_s

    async def ensure_ready(self, timeout_s: float | None = None) -> Any:
        """Return a usable session handle, connecting at most once at a time.

        Returns without suspending when the session is already READY. Raises
        `ConnectionTimeout` or `ConnectionFailed` otherwise.
        """
        timeout = self._ready_timeout_s if timeout_s is None else float(timeout_s)
        state = self._state

        if state.phase is SessionPhase.READY:
            if self._connector.is_usable(state.handle):
                return state.handle
            logger.warning("gateway: ready session is no longer usable; reconnecting")
            state.phase = SessionPhase.DISCONNECTED
            state.handle = None

        if state.phase is not SessionPhase.CONNECTING:
            self._start_attempt(timeout)

        waiter: asyncio.Future = asyncio.get_running_loop().create_future()
        state.waiters.append(waiter)
        try:
            return await asyncio.wait_for(waiter, timeout)
        except asyncio.TimeoutError:
            # Only reached when this waiter's own window is shorter than the attempt's.
            logger.warning("gateway: waiter gave up after %.2fs; attempt still in flight", timeout)
            raise ConnectionTimeout(
                message=f"Discord gateway was not ready within {timeout:.2f}s",
                timeout_s=timeout,
            ) from None
        finally:
            with contextlib.suppress(ValueError):
                state.waiters.remove(waiter)

    def _start_attempt(self, timeout: float) -> None:
        state = self._state
        state.phase = SessionPhase.CONNECTING
        state.handle = None
        state.connect_attempts += 1
        logger.info("gateway: connect attempt %s started (timeout=%.2fs)", state.connect_attempts, timeout)

        task = asyncio.create_task(self._run_attempt(), name=f"gateway-connect-{state.connect_attempts}")
        self._track(task)
        self._attempt_task = task
        self._deadline = asyncio.get_running_loop().call_later(timeout, self._expire_attempt, task, timeout)

    async def _run_attempt(self) -> None:
        task = asyncio.current_task()
        try:
            handle = await self._connector.open()
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            error = ConnectionFailed(
                message=f"Discord login failed: {exc}",
                cause=type(exc).__name__,
            )
            self._settle(task, error=error)
            return
        self._settle(task, handle=handle)

    def _expire_attempt(self, task: asyncio.Task, timeout: float) -> None:
        if task is not self._attempt_task:
            return
        error = ConnectionTimeout(
            message=f"Discord gateway did not become ready within {timeout:.2f}s",
            timeout_s=timeout,
        )
        self._settle(task, error=error)
        task.cancel()

    def _settle(self, task: asyncio.Task | None, *, handle: Any = None, error: RelayError | None = None) -> None:
        if task is None or task is not self._attempt_task:
            return
        self._attempt_task = None
        if self._deadline is not None:
            self._deadline.cancel()
            self._deadline = None

        state = self._state
        waiters, state.waiters = state.waiters, []
        if error is None:
            state.phase = SessionPhase.READY
            state.handle = handle
            state.last_error = None
            logger.info("gateway: session ready; releasing %s waiter(s)", len(waiters))
            for waiter in waiters:
                if not waiter.done():
                    waiter.set_result(handle)
            return

        state.phase = SessionPhase.FAILED
        state.handle = None
        state.last_error = error
        logger.error("gateway: connect attempt %s failed: %s", state.connect_attempts, error)
        for waiter in waiters:
            if not waiter.done():
                waiter.set_exception(error)

    def warm_up(self) -> asyncio.Task:
        """Start connecting in the background without a waiting caller."""
        task = asyncio.create_task(self._warm_up(), name="gateway-warm-up")
        self._track(task)
        return task

    async def _warm_up(self) -> None:
        try:
            await self.ensure_ready()
        except RelayError as exc:
            logger.warning("gateway: warm-up failed: %s", exc)

    async def close(self) -> None:
        task = self._attempt_task
        if task is not None:
            self._settle(task, error=ConnectionFailed(message="gateway coordinator is shutting down"))
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        await self._connector.close()
        self._state.phase = SessionPhase.DISCONNECTED
        self._state.handle = None
        logger.info("gateway: coordinator closed")

    def snapshot(self) -> dict[str, Any]:
        state = self._state
        return {
            "phase": state.phase.value,
            "connect_attempts": state.connect_attempts,
            "waiters": len(state.waiters),
            "last_error": str(state.last_error) if state.last_error is not None else None,
        }

    def _track(self, task: asyncio.Task) -> None:
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)


__all__ = ["ConnectionCoordinator"]
