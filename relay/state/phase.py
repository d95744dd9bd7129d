"""Gateway session lifecycle phases."""

from __future__ import annotations

from enum import Enum


class SessionPhase(Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    READY = "ready"
    FAILED = "failed"


__all__ = ["SessionPhase"]
