"""
Custom exception handlers for FastAPI.

Security:
- Request IDs are logged server-side for tracing but NOT exposed to clients
- Generic error messages for 500 errors to prevent information disclosure
- Path traversal attempts and missing files share one 404 body
"""

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import (
    AssetNotFound,
    EmptyUpload,
    ProfileServiceError,
    StorageError,
    Unauthenticated,
    UserNotFound,
)
from core.logging import get_logger

logger = get_logger("backend.errors")

# Client-facing status and message per domain error. None keeps str(exc).
DOMAIN_ERROR_RESPONSES: dict[type[ProfileServiceError], tuple[int, str | None]] = {
    Unauthenticated: (status.HTTP_401_UNAUTHORIZED, None),
    EmptyUpload: (status.HTTP_400_BAD_REQUEST, None),
    AssetNotFound: (status.HTTP_404_NOT_FOUND, "Not found"),
    UserNotFound: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    StorageError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
}


def _get_request_id() -> str:
    """
    Get the current request ID from context.

    Used for server-side logging only - NOT exposed to clients.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("request_id", "-")


def _response_payload(detail: str, status_code: int) -> dict:
    """Create error response payload (without request_id)."""
    return {
        "detail": detail,
        "status_code": status_code,
    }


def _domain_response(exc: ProfileServiceError) -> tuple[int, str]:
    for error_type in type(exc).__mro__:
        if error_type in DOMAIN_ERROR_RESPONSES:
            status_code, message = DOMAIN_ERROR_RESPONSES[error_type]
            return status_code, message or str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProfileServiceError)
    async def domain_exception_handler(request: Request, exc: ProfileServiceError):
        status_code, detail = _domain_response(exc)
        log_method = logger.error if status_code >= 500 else logger.warning
        log_method(
            "domain_error",
            error=str(exc),
            error_type=type(exc).__name__,
            status_code=status_code,
            request_id=_get_request_id(),
        )
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
        return JSONResponse(
            status_code=status_code,
            content=_response_payload(detail, status_code),
            headers=headers,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.warning(
            "http_exception",
            detail=exc.detail,
            status_code=exc.status_code,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_response_payload(str(exc.detail), exc.status_code),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {key: error[key] for key in ("loc", "msg", "type") if key in error}
            for error in exc.errors()
        ]
        logger.warning("validation_error", errors=errors, request_id=_get_request_id())
        return JSONResponse(
            status_code=422,
            content={
                **_response_payload("Validation error", 422),
                "errors": errors,
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        # Full details stay server-side
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
            request_id=_get_request_id(),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_response_payload("Internal server error", 500),
        )
