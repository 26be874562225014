from __future__ import annotations

import re

from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from . import __version__
from .config import DEFAULT_CORS_ORIGINS, WrappedConfig
from .records import WrappedStats, encode_json
from .service import ERR_NO_SAVE_DATA, RefreshDeniedError, RefreshNotConfiguredError, WrappedService

ROUTE_PREFIX = "/choku-wrapped"


def _json_response(stats: WrappedStats) -> Response:
    return Response(content=encode_json(stats), media_type="application/json")


def _origin_regex(origins: tuple[str, ...]) -> str | None:
    patterns = [re.escape(origin).replace(r"\*", r"[^./]+") for origin in origins if "*" in origin]
    if not patterns:
        return None
    return "^(" + "|".join(patterns) + ")$"


def build_router(service: WrappedService) -> APIRouter:
    router = APIRouter(prefix=ROUTE_PREFIX)

    @router.get("/")
    async def get_stats() -> Response:
        stats = await run_in_threadpool(service.snapshot)
        return _json_response(stats)

    @router.post("/refresh")
    async def refresh(request: Request) -> Response:
        secret = (await request.body()).decode("utf-8", errors="replace")
        try:
            rebuilt = await run_in_threadpool(service.refresh, secret)
        except RefreshNotConfiguredError:
            return PlainTextResponse("refresh is not configured", status_code=500)
        except RefreshDeniedError:
            return PlainTextResponse("unauthorized", status_code=401)
        return Response(content=b'{"rebuilt":%d}' % rebuilt, media_type="application/json")

    @router.get("/{sha}")
    async def get_stats_for(sha: str) -> Response:
        stats = await run_in_threadpool(service.snapshot_for, sha.upper())
        if stats is None:
            return PlainTextResponse("not found", status_code=404)
        return _json_response(stats)

    @router.post("/")
    async def upload(request: Request) -> Response:
        form = await request.form()
        uploads = [value for value in form.values() if isinstance(value, UploadFile)]
        if not uploads:
            return PlainTextResponse(ERR_NO_SAVE_DATA)
        data = await uploads[0].read()
        result = await run_in_threadpool(service.ingest, data)
        return PlainTextResponse(result.response_text)

    return router


def create_app(service: WrappedService, config: WrappedConfig | None = None) -> FastAPI:
    cors_origins = config.cors_origins if config is not None else DEFAULT_CORS_ORIGINS
    app = FastAPI(title="Chokuretsu Wrapped", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin for origin in cors_origins if "*" not in origin],
        allow_origin_regex=_origin_regex(cors_origins),
        allow_methods=["GET", "POST"],
    )
    app.include_router(build_router(service))
    app.state.service = service
    return app


__all__ = [
    "ROUTE_PREFIX",
    "build_router",
    "create_app",
]
