"""Process-wide gateway session state owned by the connection coordinator.

`handle` is set if and only if `phase` is READY. `waiters` only holds entries
while `phase` is CONNECTING and is drained, in arrival order, on every
transition out of CONNECTING.
"""

from __future__ import annotations

import asyncio
from typing import Any
from dataclasses import field, dataclass

from .phase import SessionPhase


@dataclass(slots=True)
class SessionState:
    phase: SessionPhase = SessionPhase.DISCONNECTED
    handle: Any = None
    waiters: list[asyncio.Future] = field(default_factory=list)
    last_error: Exception | None = None
    connect_attempts: int = 0


__all__ = ["SessionState"]
