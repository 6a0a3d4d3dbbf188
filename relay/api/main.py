"""FastAPI application for the worker relay."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import RelaySettings, load_settings
from .models import ErrorResponse, METHOD_NOT_ALLOWED
from .routes import ask_worker
from .services.worker_assistant import WorkerAssistant

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    settings: RelaySettings = app.state.settings

    # Startup: one client shared by all requests
    app.state.worker_assistant = WorkerAssistant.from_settings(settings)
    logger.info(f"Relay starting on http://{settings.host}:{settings.port}")

    yield

    # Shutdown: release the HTTP connection pool
    await app.state.worker_assistant.close()


async def route_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Answer every unknown route or wrong method with the same 405."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content=ErrorResponse(error=METHOD_NOT_ALLOWED).model_dump(),
        )
    return await http_exception_handler(request, exc)


def create_app(settings: Optional[RelaySettings] = None) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Explicit settings. When omitted they are loaded from the
            environment, so `uvicorn --factory relay.api.main:create_app`
            fails with ConfigurationError before any socket is bound.
    """
    if settings is None:
        settings = load_settings()

    # Only POST /ask-worker is served, so no docs or schema routes
    app = FastAPI(
        title="Worker Relay",
        description="Relays a single prompt to a hosted assistant and returns its reply.",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.add_exception_handler(StarletteHTTPException, route_not_allowed_handler)
    app.include_router(ask_worker.router, tags=["Relay"])

    return app
