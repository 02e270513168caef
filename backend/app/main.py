"""
FastAPI application entry point.

Uses structured logging from core.logging module.
"""

from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from core.config import get_settings
from core.db import db
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .dependencies import get_blob_store
from .error_handlers import register_exception_handlers
from .routers import profile as profile_router
from .routers import uploads as uploads_router


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Middleware to limit request body size."""

    def __init__(self, app, max_size_mb: int = 10):
        super().__init__(app)
        self.max_size = max_size_mb * 1024 * 1024  # Convert to bytes
        self.max_size_mb = max_size_mb

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Check Content-Length header if present
        content_length = request.headers.get("content-length")
        if content_length:
            try:
                if int(content_length) > self.max_size:
                    return JSONResponse(
                        status_code=413,
                        content={
                            "detail": f"Maximum request size is {self.max_size_mb}MB",
                            "status_code": 413,
                        },
                    )
            except ValueError:
                pass

        return await call_next(request)


# Configure structured logging
settings = get_settings()
log_level = "DEBUG" if settings.debug else settings.log_level
configure_logging(level=log_level)
logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database and upload directories on startup."""
    logger.info("app_startup", app_name=settings.app_name)

    db.initialize(settings.database_url)
    if settings.auto_create_tables:
        db.create_all_tables()
    logger.info("database_initialized")

    get_blob_store().initialize()

    yield

    logger.info("app_shutdown")


def create_app() -> FastAPI:
    # API version prefix
    api_version = "v1"
    api_prefix = f"{settings.api_prefix}/{api_version}"

    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    # Multipart framing adds a little on top of the file itself
    app.add_middleware(RequestSizeLimitMiddleware, max_size_mb=settings.max_upload_size_mb + 1)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Accept-Encoding",
            "Origin",
            "X-Requested-With",
            "X-Request-ID",
        ],
        expose_headers=["X-Request-ID"],
    )

    # GZip compression for responses > 500 bytes
    app.add_middleware(GZipMiddleware, minimum_size=500)

    # Structured request logging middleware (also assigns request IDs)
    app.add_middleware(RequestLoggingMiddleware)

    # Exception handlers
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness check endpoint.

        Returns 200 if the database answers and the upload root exists, 503 otherwise.
        """
        health = db.health_check()
        if not health["healthy"]:
            logger.warning("readiness_database_failed", error=health["error"])

        checks = {
            "database": health["healthy"],
            "storage": get_blob_store().root.is_dir(),
        }

        if not all(checks.values()):
            return JSONResponse(
                status_code=503,
                content={"status": "not_ready", "checks": checks},
            )

        return {"status": "ready", "checks": checks}

    # API is accessible at /api/v1/*
    app.include_router(profile_router.router, prefix=api_prefix)
    # Retrieval paths are root-relative: /uploads/<category>/<name>
    app.include_router(uploads_router.router)

    return app


app = create_app()
