"""Shared error types for the ping relay.

`RelayError` subclasses form the closed taxonomy a dispatch can end in; the
HTTP layer maps each one to a status code. `ConfigError` is only raised while
the runtime is being built and is fatal to startup.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class RelayError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ValidationError(RelayError):
    """Malformed or incomplete inbound request."""


@dataclass(eq=False)
class ConnectionTimeout(RelayError):
    """The gateway session did not become ready before the deadline."""

    timeout_s: float = 0.0


@dataclass(eq=False)
class ConnectionFailed(RelayError):
    """Login or gateway connect was rejected."""

    cause: str | None = None


@dataclass(eq=False)
class ChannelNotFound(RelayError):
    channel_id: str = ""
    code: int | None = None


@dataclass(eq=False)
class PermissionDenied(RelayError):
    channel_id: str = ""
    code: int | None = None


@dataclass(eq=False)
class SendFailed(RelayError):
    """Any other remote failure while resolving or sending (rate limits, network)."""

    channel_id: str = ""
    code: int | None = None


@dataclass(eq=False)
class ConfigError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ChannelNotFound",
    "ConfigError",
    "ConnectionFailed",
    "ConnectionTimeout",
    "PermissionDenied",
    "RelayError",
    "SendFailed",
    "ValidationError",
]
