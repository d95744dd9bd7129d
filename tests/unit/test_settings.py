from __future__ import annotations

import pytest

from relay.errors import ConfigError
from relay.runtime.settings import load_settings

_ENV_NAMES = [
    "DISCORD_BOT_TOKEN",
    "GATEWAY_READY_TIMEOUT_S",
    "GATEWAY_CONNECT_ON_STARTUP",
    "GATEWAY_INTENTS",
    "RELAY_ENDPOINT_PATH",
    "CORS_ALLOWED_ORIGIN",
    "MESSAGE_DEFAULT_PREFIX",
    "MESSAGE_SUFFIX",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_missing_token_is_fatal() -> None:
    with pytest.raises(ConfigError, match="DISCORD_BOT_TOKEN"):
        load_settings()


def test_blank_token_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "   ")
    with pytest.raises(ConfigError):
        load_settings()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "abc.def.ghi")
    settings = load_settings()

    assert settings.auth.bot_token == "abc.def.ghi"
    assert settings.gateway.ready_timeout_s == 10.0
    assert settings.gateway.connect_on_startup is True
    assert settings.gateway.intents == ("guilds", "guild_messages")
    assert settings.http.endpoint_path == "/api/ping-discord"
    assert settings.http.allowed_origin == "https://ironwoodrpg.com"
    assert settings.message.default_prefix == "Heads up! "
    assert settings.message.suffix == "Just a friendly reminder to check in!"


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "t")
    monkeypatch.setenv("GATEWAY_READY_TIMEOUT_S", "7.5")
    monkeypatch.setenv("GATEWAY_CONNECT_ON_STARTUP", "off")
    monkeypatch.setenv("GATEWAY_INTENTS", "guilds, members ,")
    monkeypatch.setenv("CORS_ALLOWED_ORIGIN", "https://example.org")
    monkeypatch.setenv("MESSAGE_DEFAULT_PREFIX", "Oi! ")
    settings = load_settings()

    assert settings.gateway.ready_timeout_s == 7.5
    assert settings.gateway.connect_on_startup is False
    assert settings.gateway.intents == ("guilds", "members")
    assert settings.http.allowed_origin == "https://example.org"
    assert settings.message.default_prefix == "Oi! "


def test_unparseable_timeout_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "t")
    monkeypatch.setenv("GATEWAY_READY_TIMEOUT_S", "soon")
    assert load_settings().gateway.ready_timeout_s == 10.0


def test_non_positive_timeout_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "t")
    monkeypatch.setenv("GATEWAY_READY_TIMEOUT_S", "0")
    with pytest.raises(ConfigError):
        load_settings()
