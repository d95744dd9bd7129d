"""Discord gateway configuration and error codes."""

from __future__ import annotations

ENV_GATEWAY_READY_TIMEOUT_S = "GATEWAY_READY_TIMEOUT_S"
ENV_GATEWAY_CONNECT_ON_STARTUP = "GATEWAY_CONNECT_ON_STARTUP"
ENV_GATEWAY_INTENTS = "GATEWAY_INTENTS"

DEFAULT_GATEWAY_READY_TIMEOUT_S = 10.0
DEFAULT_GATEWAY_CONNECT_ON_STARTUP = True
# Channel lookups go through REST; the cache only needs guild events.
DEFAULT_GATEWAY_INTENTS: tuple[str, ...] = ("guilds", "guild_messages")

# Discord JSON error codes (https://discord.com/developers/docs/topics/opcodes-and-status-codes)
DISCORD_UNKNOWN_CHANNEL = 10003
DISCORD_MISSING_ACCESS = 50001
DISCORD_MISSING_PERMISSIONS = 50013

DISCORD_CHANNEL_NOT_FOUND_CODES = frozenset({DISCORD_UNKNOWN_CHANNEL})
DISCORD_PERMISSION_CODES = frozenset({DISCORD_MISSING_ACCESS, DISCORD_MISSING_PERMISSIONS})

__all__ = [
    "ENV_GATEWAY_READY_TIMEOUT_S",
    "ENV_GATEWAY_CONNECT_ON_STARTUP",
    "ENV_GATEWAY_INTENTS",
    "DEFAULT_GATEWAY_READY_TIMEOUT_S",
    "DEFAULT_GATEWAY_CONNECT_ON_STARTUP",
    "DEFAULT_GATEWAY_INTENTS",
    "DISCORD_UNKNOWN_CHANNEL",
    "DISCORD_MISSING_ACCESS",
    "DISCORD_MISSING_PERMISSIONS",
    "DISCORD_CHANNEL_NOT_FOUND_CODES",
    "DISCORD_PERMISSION_CODES",
]
