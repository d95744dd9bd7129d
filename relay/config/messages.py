"""Mention message templating constants."""

from __future__ import annotations

ENV_MESSAGE_DEFAULT_PREFIX = "MESSAGE_DEFAULT_PREFIX"
ENV_MESSAGE_SUFFIX = "MESSAGE_SUFFIX"

DEFAULT_MESSAGE_PREFIX = "Heads up! "
DEFAULT_MESSAGE_SUFFIX = "Just a friendly reminder to check in!"

MENTION_TEMPLATE = "<@{user_id}>"
MENTION_SEPARATOR = " "

__all__ = [
    "ENV_MESSAGE_DEFAULT_PREFIX",
    "ENV_MESSAGE_SUFFIX",
    "DEFAULT_MESSAGE_PREFIX",
    "DEFAULT_MESSAGE_SUFFIX",
    "MENTION_TEMPLATE",
    "MENTION_SEPARATOR",
]
