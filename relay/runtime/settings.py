"""Environment parsing for runtime settings.

Names and defaults live in `relay/config/*`; this module resolves them into
the frozen dataclasses of `relay.state.settings`.
"""

from __future__ import annotations

import os

from relay.errors import ConfigError
from relay.config.secrets import ENV_DISCORD_BOT_TOKEN
from relay.config.http import (
    ENV_CORS_ALLOWED_ORIGIN,
    ENV_RELAY_ENDPOINT_PATH,
    DEFAULT_CORS_ALLOWED_ORIGIN,
    DEFAULT_RELAY_ENDPOINT_PATH,
)
from relay.config.messages import (
    ENV_MESSAGE_SUFFIX,
    DEFAULT_MESSAGE_PREFIX,
    DEFAULT_MESSAGE_SUFFIX,
    ENV_MESSAGE_DEFAULT_PREFIX,
)
from relay.state.settings import (
    AppSettings,
    AuthSettings,
    HttpSettings,
    GatewaySettings,
    MessageSettings,
)
from relay.config.gateway import (
    ENV_GATEWAY_INTENTS,
    DEFAULT_GATEWAY_INTENTS,
    ENV_GATEWAY_READY_TIMEOUT_S,
    ENV_GATEWAY_CONNECT_ON_STARTUP,
    DEFAULT_GATEWAY_READY_TIMEOUT_S,
    DEFAULT_GATEWAY_CONNECT_ON_STARTUP,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _raw_str_env(name: str, default: str) -> str:
    # Message text keeps its surrounding whitespace (the default prefix ends with a space).
    raw = os.getenv(name)
    return raw if raw else default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _load_auth_settings() -> AuthSettings:
    token = (os.getenv(ENV_DISCORD_BOT_TOKEN) or "").strip()
    if not token:
        raise ConfigError(f"{ENV_DISCORD_BOT_TOKEN} environment variable is required")
    return AuthSettings(bot_token=token)


def _load_gateway_settings() -> GatewaySettings:
    timeout = _float_env(ENV_GATEWAY_READY_TIMEOUT_S, DEFAULT_GATEWAY_READY_TIMEOUT_S)
    if timeout <= 0:
        raise ConfigError(f"{ENV_GATEWAY_READY_TIMEOUT_S} must be positive")
    return GatewaySettings(
        ready_timeout_s=timeout,
        connect_on_startup=_bool_env(ENV_GATEWAY_CONNECT_ON_STARTUP, DEFAULT_GATEWAY_CONNECT_ON_STARTUP),
        intents=_list_env(ENV_GATEWAY_INTENTS, DEFAULT_GATEWAY_INTENTS),
    )


def _load_http_settings() -> HttpSettings:
    return HttpSettings(
        endpoint_path=_str_env(ENV_RELAY_ENDPOINT_PATH, DEFAULT_RELAY_ENDPOINT_PATH),
        allowed_origin=_str_env(ENV_CORS_ALLOWED_ORIGIN, DEFAULT_CORS_ALLOWED_ORIGIN),
    )


def _load_message_settings() -> MessageSettings:
    return MessageSettings(
        default_prefix=_raw_str_env(ENV_MESSAGE_DEFAULT_PREFIX, DEFAULT_MESSAGE_PREFIX),
        suffix=_raw_str_env(ENV_MESSAGE_SUFFIX, DEFAULT_MESSAGE_SUFFIX),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        gateway=_load_gateway_settings(),
        http=_load_http_settings(),
        message=_load_message_settings(),
    )


__all__ = ["load_settings"]
