"""FastAPI application for the API Quest tracker."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import SETTINGS, Settings
from core.exceptions import TrackerException
from tracker import __version__
from tracker.providers import DIContainer
from tracker.transport.http import health_router, metrics_router, router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, container: Optional[DIContainer] = None) -> FastAPI:
    """Build the ASGI app; state lives in ``app.state.container``."""
    settings = settings or SETTINGS
    container = container or DIContainer(settings=settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for startup/shutdown."""
        logger.info("🚀 API Quest tracker starting...")
        yield
        logger.info("🛑 API Quest tracker shutting down...")
        await app.state.container.close()

    app = FastAPI(
        title="API Quest Tracker",
        description="Live progress tracker for sequential HTTP challenges",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(TrackerException)
    async def tracker_error_handler(request: Request, exc: TrackerException) -> JSONResponse:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error_code or ''}".rstrip())
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": "Invalid request"})

    # Include routers
    app.include_router(health_router, prefix="/health", tags=["health"])
    app.include_router(metrics_router, prefix="/metrics", tags=["metrics"])
    app.include_router(router, prefix="/api", tags=["tracker"])

    return app


app = create_app()
