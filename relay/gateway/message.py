"""Mention message composition."""

from __future__ import annotations

from collections.abc import Iterable

from relay.config.messages import (
    MENTION_TEMPLATE,
    MENTION_SEPARATOR,
    DEFAULT_MESSAGE_PREFIX,
    DEFAULT_MESSAGE_SUFFIX,
)


def render_mention(user_id: str) -> str:
    return MENTION_TEMPLATE.format(user_id=user_id)


def compose_message(
    recipient_ids: Iterable[str],
    prefix: str | None = None,
    *,
    default_prefix: str = DEFAULT_MESSAGE_PREFIX,
    suffix: str = DEFAULT_MESSAGE_SUFFIX,
) -> str:
    """Build `prefix\\n<@a> <@b>\\nsuffix`.

    Recipient order and duplicates are kept as given. An empty prefix falls
    back to `default_prefix`.
    """
    mentions = MENTION_SEPARATOR.join(render_mention(user_id) for user_id in recipient_ids)
    return f"{prefix or default_prefix}\n{mentions}\n{suffix}"


__all__ = ["compose_message", "render_mention"]
