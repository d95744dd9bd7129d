"""HTTP endpoint configuration and constants."""

from __future__ import annotations

import os

ENV_RELAY_ENDPOINT_PATH = "RELAY_ENDPOINT_PATH"
ENV_CORS_ALLOWED_ORIGIN = "CORS_ALLOWED_ORIGIN"

DEFAULT_RELAY_ENDPOINT_PATH = "/api/ping-discord"
DEFAULT_CORS_ALLOWED_ORIGIN = "https://ironwoodrpg.com"

# Routes are registered at import time, so the path is resolved here.
RELAY_ENDPOINT_PATH = (os.getenv(ENV_RELAY_ENDPOINT_PATH) or "").strip() or DEFAULT_RELAY_ENDPOINT_PATH

CORS_ALLOWED_METHODS = "POST, OPTIONS"
CORS_ALLOWED_HEADERS = "Content-Type"

# Every method is routed so non-POST requests get the JSON 405 body.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

# Request body keys
BODY_KEY_USER_IDS = "user_ids"
BODY_KEY_CHANNEL_ID = "channel_id"
BODY_KEY_MESSAGE_PREFIX = "message_prefix"

# Response texts
ERROR_METHOD_NOT_ALLOWED = "Method Not Allowed. Only POST requests are accepted."
ERROR_MISSING_FIELDS = "Missing user_ids (array), channel_id, or user_ids is empty."
ERROR_CHANNEL_NOT_FOUND = "Discord channel not found."
ERROR_PERMISSION_DENIED = "Discord bot lacks permission to post in this channel."
ERROR_CONNECTION_TIMEOUT = "Discord bot did not become ready in time."
ERROR_CONNECTION_FAILED = "Discord bot not ready and failed to log in."
ERROR_SEND_FAILED = "Failed to send Discord message."
ERROR_INTERNAL = "Internal server error."

__all__ = [
    "ENV_RELAY_ENDPOINT_PATH",
    "ENV_CORS_ALLOWED_ORIGIN",
    "DEFAULT_RELAY_ENDPOINT_PATH",
    "DEFAULT_CORS_ALLOWED_ORIGIN",
    "RELAY_ENDPOINT_PATH",
    "CORS_ALLOWED_METHODS",
    "CORS_ALLOWED_HEADERS",
    "ROUTED_METHODS",
    "BODY_KEY_USER_IDS",
    "BODY_KEY_CHANNEL_ID",
    "BODY_KEY_MESSAGE_PREFIX",
    "ERROR_METHOD_NOT_ALLOWED",
    "ERROR_MISSING_FIELDS",
    "ERROR_CHANNEL_NOT_FOUND",
    "ERROR_PERMISSION_DENIED",
    "ERROR_CONNECTION_TIMEOUT",
    "ERROR_CONNECTION_FAILED",
    "ERROR_SEND_FAILED",
    "ERROR_INTERNAL",
]
