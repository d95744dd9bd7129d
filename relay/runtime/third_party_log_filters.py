"""Log noise filters for third-party libraries.

Only logger levels are adjusted here, to keep startup logs readable.
"""

from __future__ import annotations

import os
import logging

from relay.config.logging import ENV_SHOW_DISCORD_LOGS


def configure() -> None:
    # discord.py logs every gateway heartbeat/resume at INFO. Keep it tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_DISCORD_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        logging.getLogger("discord").setLevel(logging.WARNING)
        logging.getLogger("discord.gateway").setLevel(logging.WARNING)


__all__ = ["configure"]
