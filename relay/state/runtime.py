"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from relay.state.settings import AppSettings
    from relay.gateway.dispatch import DispatchGate
    from relay.gateway.coordinator import ConnectionCoordinator


@dataclass(slots=True)
class RuntimeDeps:
    coordinator: ConnectionCoordinator
    gate: DispatchGate
    settings: AppSettings

    async def shutdown(self) -> None:
        try:
            await self.coordinator.close()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
