"""Runtime dependency construction (gateway session + dispatch)."""

from __future__ import annotations

import logging

from relay.state import RuntimeDeps
from relay.state.settings import AppSettings
from relay.gateway.dispatch import DispatchGate
from relay.gateway.coordinator import ConnectionCoordinator
from relay.gateway.connector import GatewayConnector, build_intents

from .settings import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    if settings is None:
        settings = load_settings()

    connector = GatewayConnector(
        token=settings.auth.bot_token,
        intents=build_intents(settings.gateway.intents),
    )
    coordinator = ConnectionCoordinator(connector, ready_timeout_s=settings.gateway.ready_timeout_s)
    gate = DispatchGate(
        default_prefix=settings.message.default_prefix,
        suffix=settings.message.suffix,
    )
    logger.info(
        "runtime: discord token configured (length=%s), ready timeout %.1fs",
        len(settings.auth.bot_token),
        settings.gateway.ready_timeout_s,
    )

    return RuntimeDeps(coordinator=coordinator, gate=gate, settings=settings)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
