"""discord.py session factory used by the connection coordinator."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import Callable, Iterable

import discord

from relay.errors import ConfigError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], Any]


def build_intents(names: Iterable[str]) -> discord.Intents:
    intents = discord.Intents.none()
    for name in names:
        if name not in discord.Intents.VALID_FLAGS:
            raise ConfigError(f"unknown gateway intent: {name!r}")
        setattr(intents, name, True)
    return intents


class GatewayConnector:
    """Opens one logged-in, gateway-connected Discord client per call.

    The client is owned here; the coordinator only sees it as an opaque
    handle. A fresh client is built for every `open()` because a discord.py
    client is not reusable after a failed or closed connection.
    """

    def __init__(
        self,
        *,
        token: str,
        intents: discord.Intents | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._token = token
        self._intents = intents if intents is not None else discord.Intents.default()
        self._client_factory = client_factory or self._default_client
        self._client: Any = None
        self._gateway_task: asyncio.Task | None = None

    def _default_client(self) -> discord.Client:
        return discord.Client(intents=self._intents)

    async def open(self) -> Any:
        await self.close()
        client = self._client_factory()
        self._client = client
        try:
            await client.login(self._token)
            self._gateway_task = asyncio.create_task(client.connect(reconnect=True), name="discord-gateway")
            await self._wait_until_ready(client, self._gateway_task)
        except BaseException:
            logger.warning("gateway: connect failed (token length=%s)", len(self._token))
            await self.close()
            raise
        logger.info("gateway: logged in as %s", client.user)
        return client

    @staticmethod
    async def _wait_until_ready(client: Any, gateway_task: asyncio.Task) -> None:
        ready_task = asyncio.create_task(client.wait_until_ready(), name="discord-ready")
        try:
            done, _pending = await asyncio.wait({ready_task, gateway_task}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            ready_task.cancel()
        if ready_task in done:
            return
        if not gateway_task.cancelled():
            exc = gateway_task.exception()
            if exc is not None:
                raise exc
        raise ConnectionError("gateway connection closed before becoming ready")

    def is_usable(self, handle: Any) -> bool:
        if handle is None or handle is not self._client:
            return False
        if self._gateway_task is None or self._gateway_task.done():
            return False
        return not handle.is_closed()

    async def close(self) -> None:
        client, self._client = self._client, None
        gateway_task, self._gateway_task = self._gateway_task, None
        if client is not None:
            try:
                await client.close()
            except Exception:
                logger.debug("gateway: client close failed", exc_info=True)
        if gateway_task is not None:
            gateway_task.cancel()
            await asyncio.gather(gateway_task, return_exceptions=True)


__all__ = ["GatewayConnector", "build_intents"]
