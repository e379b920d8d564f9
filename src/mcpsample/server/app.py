"""HTTP boundary — FastAPI application exposing the dispatcher.

Endpoints (prefix ``/api/mcp``):

  GET  /capabilities                    -> capability object
  POST /tools/list, /tools/call         -> response envelope
  POST /resources/list, /resources/read -> response envelope
  POST /prompts/list, /prompts/get      -> response envelope
  POST (prefix itself)                  -> any method named in the body
  GET  /resources/download/{filename}   -> raw file bytes

Plus ``GET /health``.

Run:
  mcpsample serve  OR  uvicorn mcpsample.server.app:app
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.concurrency import run_in_threadpool

from mcpsample import __version__
from mcpsample.protocol.codec import decode, encode, failure
from mcpsample.protocol.errors import (
    NOT_FOUND,
    MalformedEnvelopeError,
    ResourceNotFoundError,
)
from mcpsample.protocol.models import Capabilities, Method, ResponseEnvelope
from mcpsample.resources.registry import ResourceRegistry
from mcpsample.server.capabilities import get_capabilities
from mcpsample.server.config import ServerSettings
from mcpsample.server.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

API_PREFIX = "/api/mcp"


def status_for(response: ResponseEnvelope) -> int:
    """Map an envelope to an HTTP status: 200, 404 for not-found, else 400."""
    if response.error is None:
        return 200
    if response.error.code == NOT_FOUND:
        return 404
    return 400


def _reply(response: ResponseEnvelope) -> Response:
    return Response(
        content=encode(response),
        status_code=status_for(response),
        media_type="application/json",
    )


async def _handle(request: Request, method: Method | None) -> Response:
    dispatcher: Dispatcher = request.app.state.dispatcher
    body = await request.body()
    try:
        envelope = decode(body, method=method)
    except MalformedEnvelopeError as exc:
        logger.warning("Rejected request on %s: %s", request.url.path, exc.message)
        return _reply(failure(exc.to_error()))
    response = await run_in_threadpool(dispatcher.dispatch, envelope)
    return _reply(response)


def _route_for(method: Method) -> Callable[[Request], Awaitable[Response]]:
    async def endpoint(request: Request) -> Response:
        return await _handle(request, method)

    endpoint.__name__ = method.value.replace("/", "_")
    return endpoint


def build_router() -> APIRouter:
    router = APIRouter(prefix=API_PREFIX, tags=["mcp"])

    @router.get("/capabilities", response_model=Capabilities)
    def capabilities() -> Capabilities:
        logger.info("Getting server capabilities")
        return get_capabilities()

    @router.post("")
    async def dispatch_any(request: Request) -> Response:
        return await _handle(request, None)

    for method in Method:
        router.add_api_route(f"/{method.value}", _route_for(method), methods=["POST"])

    @router.get("/resources/download/{filename}")
    def download(filename: str, request: Request) -> Response:
        resources: ResourceRegistry = request.app.state.dispatcher.resources
        try:
            content, media_type = resources.download(filename)
        except ResourceNotFoundError as exc:
            logger.error("Error downloading %s: %s", filename, exc.message)
            return _reply(failure(exc.to_error()))
        return Response(
            content=content,
            media_type=media_type,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return router


def create_app(settings: ServerSettings | None = None) -> FastAPI:
    """Build the FastAPI application around a fresh :class:`Dispatcher`."""
    settings = settings or ServerSettings()
    app = FastAPI(
        title="MCP Sample Server",
        version=__version__,
        description="Model Context Protocol demo API",
    )
    app.state.settings = settings
    app.state.dispatcher = Dispatcher(resources=ResourceRegistry(settings.resources_dir))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(build_router())
    return app


app = create_app()
