"""Error Handlers — global exception handlers for the SortView API.

Invariants:
    - SortViewError → structured JSON with top-level message plus error code, severity
    - RequestValidationError → 400 with a human-readable message and field-level details
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SortViewError), validation (Pydantic), catch-all (Exception)
    - Validation failures are 400, not FastAPI's default 422: the client only checks 4xx + message
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from sortview.core.errors import SortViewError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_sortview_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_sortview_error_handler(app: FastAPI) -> None:
    """Register SortView domain/infrastructure error handler."""

    @app.exception_handler(SortViewError)
    async def sortview_error_handler(request: Request, exc: SortViewError):
        """Handle all SortView domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"SortViewError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "filter_key": exc.context.filter_key,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "An unexpected error occurred",
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _format_location(loc) -> str:
    return ".".join(str(part) for part in loc)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    errors = exc.errors()
    message = "Invalid request data"
    if errors:
        first = errors[0]
        message = f"Invalid request data: {_format_location(first['loc'])}: {first['msg']}"
    return {
        "message": message,
        "error": {
            "code": "VALIDATION_ERROR",
            "message": message,
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": _format_location(e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        },
    }
