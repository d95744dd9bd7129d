"""Inbound request body parsing/validation."""

from __future__ import annotations

from typing import Any

import orjson

from relay.errors import ValidationError
from relay.state import DispatchRequest
from relay.config.http import (
    BODY_KEY_USER_IDS,
    ERROR_MISSING_FIELDS,
    BODY_KEY_CHANNEL_ID,
    BODY_KEY_MESSAGE_PREFIX,
)


def _normalize_id(value: Any, field_name: str) -> str:
    # JSON numbers are accepted; bool is an int subclass and is not an id.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value.strip()
    raise ValidationError(message=f"'{field_name}' must contain non-empty string ids")


def parse_dispatch_request(raw: bytes | str) -> DispatchRequest:
    try:
        body = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValidationError(message=f"invalid JSON body: {exc}") from exc

    if not isinstance(body, dict):
        raise ValidationError(message="request body must be a JSON object")

    user_ids = body.get(BODY_KEY_USER_IDS)
    channel_id = body.get(BODY_KEY_CHANNEL_ID)
    if not isinstance(user_ids, list) or not user_ids or not channel_id:
        raise ValidationError(message=ERROR_MISSING_FIELDS)

    prefix = body.get(BODY_KEY_MESSAGE_PREFIX)
    if prefix is not None and not isinstance(prefix, str):
        raise ValidationError(message=f"'{BODY_KEY_MESSAGE_PREFIX}' must be a string")

    return DispatchRequest(
        channel_id=_normalize_id(channel_id, BODY_KEY_CHANNEL_ID),
        recipient_ids=tuple(_normalize_id(user_id, BODY_KEY_USER_IDS) for user_id in user_ids),
        message_prefix=prefix,
    )


__all__ = ["parse_dispatch_request"]
