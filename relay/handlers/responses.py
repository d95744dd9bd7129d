"""JSON response builders for the relay endpoint.

Every response, errors included, carries the CORS headers so browser
callers can read failure bodies.
"""

from __future__ import annotations

from typing import Any

from fastapi import Response
from fastapi.responses import ORJSONResponse

from relay.state import DispatchReceipt
from relay.config.http import (
    ERROR_INTERNAL,
    ERROR_SEND_FAILED,
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    ERROR_CHANNEL_NOT_FOUND,
    ERROR_CONNECTION_FAILED,
    ERROR_PERMISSION_DENIED,
    ERROR_CONNECTION_TIMEOUT,
    ERROR_METHOD_NOT_ALLOWED,
)
from relay.errors import (
    RelayError,
    SendFailed,
    ChannelNotFound,
    ValidationError,
    ConnectionFailed,
    PermissionDenied,
    ConnectionTimeout,
)

# (status, public error text); None keeps the exception message as the text.
_ERROR_STATUS: dict[type[RelayError], tuple[int, str | None]] = {
    ValidationError: (400, None),
    ChannelNotFound: (404, ERROR_CHANNEL_NOT_FOUND),
    PermissionDenied: (403, ERROR_PERMISSION_DENIED),
    ConnectionTimeout: (500, ERROR_CONNECTION_TIMEOUT),
    ConnectionFailed: (500, ERROR_CONNECTION_FAILED),
    SendFailed: (500, ERROR_SEND_FAILED),
}


def cors_headers(allowed_origin: str) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Methods": CORS_ALLOWED_METHODS,
        "Access-Control-Allow-Headers": CORS_ALLOWED_HEADERS,
    }


def json_response(status_code: int, body: dict[str, Any], *, allowed_origin: str) -> ORJSONResponse:
    return ORJSONResponse(content=body, status_code=status_code, headers=cors_headers(allowed_origin))


def preflight_response(allowed_origin: str) -> Response:
    return Response(status_code=200, headers=cors_headers(allowed_origin))


def method_not_allowed_response(allowed_origin: str) -> ORJSONResponse:
    return json_response(405, {"error": ERROR_METHOD_NOT_ALLOWED}, allowed_origin=allowed_origin)


def success_response(receipt: DispatchReceipt, allowed_origin: str) -> ORJSONResponse:
    message = (
        f"Message sent to channel {receipt.channel_name} mentioning {receipt.recipient_count} users."
    )
    return json_response(200, {"success": True, "message": message}, allowed_origin=allowed_origin)


def build_error_body(exc: RelayError) -> tuple[int, dict[str, Any]]:
    status_code, text = _ERROR_STATUS.get(type(exc), (500, ERROR_INTERNAL))
    if isinstance(exc, (ValidationError, ChannelNotFound)):
        return status_code, {"error": text or exc.message}

    body: dict[str, Any] = {"success": False, "error": text or exc.message, "details": exc.message}
    code = getattr(exc, "code", None)
    if code is not None:
        body["code"] = code
    return status_code, body


def error_response(exc: RelayError, allowed_origin: str) -> ORJSONResponse:
    status_code, body = build_error_body(exc)
    return json_response(status_code, body, allowed_origin=allowed_origin)


def internal_error_response(allowed_origin: str) -> ORJSONResponse:
    # Unexpected failures never expose internal details.
    return json_response(
        500,
        {"success": False, "error": ERROR_INTERNAL, "details": "unexpected server error"},
        allowed_origin=allowed_origin,
    )


__all__ = [
    "build_error_body",
    "cors_headers",
    "error_response",
    "internal_error_response",
    "json_response",
    "method_not_allowed_response",
    "preflight_response",
    "success_response",
]
