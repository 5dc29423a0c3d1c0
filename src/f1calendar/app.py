"""FastAPI application factory."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from f1calendar import __version__
from f1calendar._clock import Clock
from f1calendar._http import AsyncTransport
from f1calendar._logging import configure_logging
from f1calendar.aggregator import SeasonAggregator
from f1calendar.api import router
from f1calendar.config import Settings
from f1calendar.exceptions import INTERNAL_ERROR, F1CalendarError

logger = logging.getLogger(__name__)


def _build_aggregator(settings: Settings, clock: Clock | None) -> SeasonAggregator:
    return SeasonAggregator(
        primary=AsyncTransport(settings.ergast_base_url, timeout=settings.upstream_timeout),
        live=AsyncTransport(settings.openf1_base_url, timeout=settings.upstream_timeout),
        clock=clock,
    )


def _mount_frontend(app: FastAPI, static_dir: Path) -> None:
    """Serve the front-end bundle, falling back to index.html for client routes."""
    root = static_dir.resolve()
    index = root / "index.html"

    @app.get("/{path:path}", include_in_schema=False)
    def frontend(path: str):
        if path == "api" or path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not Found")
        candidate = (root / path).resolve()
        if path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if index.is_file():
            return FileResponse(index)
        raise HTTPException(status_code=404, detail="Not Found")


def create_app(settings: Settings | None = None, clock: Clock | None = None) -> FastAPI:
    """Build the API application.

    Args:
        settings: Runtime settings; read from the environment when omitted.
        clock: Time source for year validation and health timestamps.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level, settings.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.aggregator = _build_aggregator(settings, clock)
        try:
            yield
        finally:
            await app.state.aggregator.close()

    app = FastAPI(title="F1 Calendar API", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.monotonic()
        response = await call_next(request)
        logger.info(
            "%s %s %d %.1fms",
            request.method, request.url.path, response.status_code,
            (time.monotonic() - start) * 1000,
        )
        return response

    @app.exception_handler(F1CalendarError)
    async def handle_calendar_error(request: Request, exc: F1CalendarError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.context or exc)
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": INTERNAL_ERROR, "message": str(exc)})

    app.include_router(router)

    if settings.static_dir and Path(settings.static_dir).is_dir():
        _mount_frontend(app, Path(settings.static_dir))

    return app
