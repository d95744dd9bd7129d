"""Secrets and authentication configuration."""

from __future__ import annotations

ENV_DISCORD_BOT_TOKEN = "DISCORD_BOT_TOKEN"

__all__ = ["ENV_DISCORD_BOT_TOKEN"]
