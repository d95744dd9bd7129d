"""Main FastAPI server for the Discord ping relay."""

from __future__ import annotations

import logging
from typing import Any
from contextlib import asynccontextmanager
from collections.abc import Callable, Awaitable

from fastapi import FastAPI, Request, Response
from fastapi.responses import ORJSONResponse

from relay.state import RuntimeDeps
from relay.runtime.logging import configure_logging
from relay.handlers.ping import handle_ping_request
from relay.runtime.dependencies import build_runtime_deps
from relay.config.http import ROUTED_METHODS, RELAY_ENDPOINT_PATH

logger = logging.getLogger(__name__)

DepsFactory = Callable[[], Awaitable[RuntimeDeps]]

configure_logging()


def _runtime_deps(app: FastAPI) -> RuntimeDeps:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def create_app(deps_factory: DepsFactory = build_runtime_deps) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = await deps_factory()
        app.state.runtime_deps = runtime_deps
        if runtime_deps.settings.gateway.connect_on_startup:
            runtime_deps.coordinator.warm_up()
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health() -> dict[str, Any]:
        return {"status": "ok", "gateway": _runtime_deps(app).coordinator.snapshot()}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.api_route(RELAY_ENDPOINT_PATH, methods=ROUTED_METHODS)
    async def relay_endpoint(request: Request) -> Response:
        return await handle_ping_request(request, _runtime_deps(app))

    return app


app = create_app()
