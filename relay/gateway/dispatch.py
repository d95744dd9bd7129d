"""Channel resolution and single-shot message send over a ready session."""

from __future__ import annotations

import logging
from typing import Any

import discord

from relay.state import DispatchReceipt, DispatchRequest
from relay.errors import RelayError, SendFailed, ChannelNotFound, PermissionDenied
from relay.config.messages import DEFAULT_MESSAGE_PREFIX, DEFAULT_MESSAGE_SUFFIX
from relay.config.gateway import DISCORD_PERMISSION_CODES, DISCORD_CHANNEL_NOT_FOUND_CODES

from .message import compose_message

logger = logging.getLogger(__name__)


def classify_http_error(exc: discord.HTTPException, channel_id: str) -> RelayError:
    code = exc.code or None
    detail = exc.text or str(exc)
    if isinstance(exc, discord.NotFound) or code in DISCORD_CHANNEL_NOT_FOUND_CODES:
        return ChannelNotFound(message=detail, channel_id=channel_id, code=code)
    if isinstance(exc, discord.Forbidden) or code in DISCORD_PERMISSION_CODES:
        return PermissionDenied(message=detail, channel_id=channel_id, code=code)
    return SendFailed(message=detail, channel_id=channel_id, code=code if code is not None else exc.status)


def _channel_display_name(channel: Any) -> str:
    name = getattr(channel, "name", None)
    return name if isinstance(name, str) and name else str(getattr(channel, "id", "unknown"))


class DispatchGate:
    """Performs exactly one send per call and never retries.

    The session handle is borrowed for the duration of `send()` only.
    """

    def __init__(
        self,
        *,
        default_prefix: str = DEFAULT_MESSAGE_PREFIX,
        suffix: str = DEFAULT_MESSAGE_SUFFIX,
    ) -> None:
        self._default_prefix = default_prefix
        self._suffix = suffix

    def compose(self, request: DispatchRequest) -> str:
        return compose_message(
            request.recipient_ids,
            request.message_prefix,
            default_prefix=self._default_prefix,
            suffix=self._suffix,
        )

    async def send(self, handle: Any, request: DispatchRequest) -> DispatchReceipt:
        channel = await self._resolve_channel(handle, request.channel_id)
        content = self.compose(request)

        try:
            await channel.send(content)
        except discord.HTTPException as exc:
            raise classify_http_error(exc, request.channel_id) from exc
        except Exception as exc:
            raise SendFailed(
                message=f"{type(exc).__name__}: {exc}",
                channel_id=request.channel_id,
            ) from exc

        channel_name = _channel_display_name(channel)
        logger.info(
            "dispatch: sent message to channel %s (id=%s) mentioning: %s",
            channel_name,
            request.channel_id,
            ", ".join(request.recipient_ids),
        )
        return DispatchReceipt(
            channel_name=channel_name,
            channel_id=request.channel_id,
            recipient_count=len(request.recipient_ids),
        )

    async def _resolve_channel(self, handle: Any, channel_id: str) -> Any:
        try:
            snowflake = int(channel_id)
        except ValueError:
            raise ChannelNotFound(
                message=f"channel id {channel_id!r} is not a Discord snowflake",
                channel_id=channel_id,
            ) from None

        channel = handle.get_channel(snowflake)
        if channel is None:
            try:
                channel = await handle.fetch_channel(snowflake)
            except discord.HTTPException as exc:
                raise classify_http_error(exc, channel_id) from exc
            except Exception as exc:
                raise SendFailed(message=f"{type(exc).__name__}: {exc}", channel_id=channel_id) from exc

        if channel is None or not callable(getattr(channel, "send", None)):
            raise ChannelNotFound(message="channel cannot receive messages", channel_id=channel_id)
        return channel


__all__ = ["DispatchGate", "classify_http_error"]
