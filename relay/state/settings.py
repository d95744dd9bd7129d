"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    bot_token: str


@dataclass(frozen=True, slots=True)
class GatewaySettings:
    ready_timeout_s: float
    connect_on_startup: bool
    intents: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class HttpSettings:
    endpoint_path: str
    allowed_origin: str


@dataclass(frozen=True, slots=True)
class MessageSettings:
    default_prefix: str
    suffix: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    gateway: GatewaySettings
    http: HttpSettings
    message: MessageSettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "GatewaySettings",
    "HttpSettings",
    "MessageSettings",
]
