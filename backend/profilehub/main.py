"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from profilehub.api import api_router
from profilehub.core.config import Settings, get_settings
from profilehub.core.exceptions import InternalError, ProfileHubError
from profilehub.core.logging_config import setup_logging
from profilehub.db.store import RecordStore
from profilehub.services.scheduler import (
    create_scheduler,
    schedule_session_purge_job,
    start_scheduler,
    stop_scheduler,
)
from profilehub.services.sessions import SessionManager

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_domain_error(request: Request, exc: ProfileHubError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return _error(exc.status_code, GENERIC_ERROR)
    return _error(exc.status_code, exc.message)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected body on %s: %s", request.url.path, exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body.")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR)


def _resolve_static(static_dir: Path, path: str) -> Path | None:
    """Return the file to serve for ``path``, falling back to the entry page."""
    root = static_dir.resolve()
    if path:
        candidate = (root / path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    index = root / "index.html"
    return index if index.is_file() else None


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    app.state.store.ensure()

    scheduler = app.state.scheduler
    start_scheduler(scheduler)
    schedule_session_purge_job(scheduler, app.state.sessions, settings.session_sweep_interval_seconds)
    logger.info("%s ready, storing users in %s", settings.app_name, settings.data_file)
    try:
        yield
    finally:
        stop_scheduler(scheduler)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = RecordStore(settings.data_file)
    app.state.sessions = SessionManager(settings.secret_key, settings.session_max_age_seconds)
    app.state.scheduler = create_scheduler()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProfileHubError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    app.include_router(api_router)

    # Registered after the API router so /api routes are matched first.
    @app.get("/{full_path:path}", include_in_schema=False)
    async def client_entry(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            return _error(status.HTTP_404_NOT_FOUND, "Not found.")
        target = _resolve_static(settings.static_dir, full_path)
        if target is None:
            return _error(status.HTTP_404_NOT_FOUND, "Not found.")
        return FileResponse(target)

    return app


app = create_app()
