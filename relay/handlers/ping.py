"""Relay endpoint: validate, ensure the gateway session, dispatch once."""

from __future__ import annotations

import logging

from fastapi import Request, Response

from relay.state import RuntimeDeps
from relay.errors import RelayError, ValidationError

from .parser import parse_dispatch_request
from .responses import (
    error_response,
    success_response,
    preflight_response,
    internal_error_response,
    method_not_allowed_response,
)

logger = logging.getLogger(__name__)


def _log_failure(exc: RelayError, channel_id: str | None) -> None:
    if isinstance(exc, ValidationError):
        logger.info("relay: rejected request: %s", exc)
        return
    logger.error(
        "relay: dispatch failed channel_id=%s error=%s code=%s: %s",
        channel_id,
        type(exc).__name__,
        getattr(exc, "code", None),
        exc,
    )


async def handle_ping_request(request: Request, runtime_deps: RuntimeDeps) -> Response:
    allowed_origin = runtime_deps.settings.http.allowed_origin

    # Preflight never touches the gateway session.
    if request.method == "OPTIONS":
        return preflight_response(allowed_origin)
    if request.method != "POST":
        return method_not_allowed_response(allowed_origin)

    channel_id: str | None = None
    try:
        dispatch_request = parse_dispatch_request(await request.body())
        channel_id = dispatch_request.channel_id
        handle = await runtime_deps.coordinator.ensure_ready()
        receipt = await runtime_deps.gate.send(handle, dispatch_request)
    except RelayError as exc:
        _log_failure(exc, channel_id)
        return error_response(exc, allowed_origin)
    except Exception:
        logger.exception("relay: unexpected error channel_id=%s", channel_id)
        return internal_error_response(allowed_origin)

    return success_response(receipt, allowed_origin)


__all__ = ["handle_ping_request"]
