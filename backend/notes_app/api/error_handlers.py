"""Error Handlers — global exception handlers for the Notes API.

Invariants:
    - NotesError → {"error", "code", "details"} with the error's own http_status
    - RequestValidationError → 400 VALIDATION_ERROR with field-level details
    - Unknown route → 404 NOT_FOUND with {path, method}
    - Exception (catch-all) → 500 INTERNAL_ERROR, never leaks internal details
    - In production every error response carries empty details

Design Decisions:
    - Three-layer handler: domain (NotesError), validation (Pydantic), catch-all (Exception),
      plus Starlette HTTPException for routing errors
    - Extracted from main.py: one registration call keeps main.py declarative
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notes_app.config import get_settings
from notes_app.core.errors import ErrorSeverity, NotesError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_notes_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _expose_details() -> bool:
    return not get_settings().is_production


def _envelope(message: str, code: str, details: dict | None = None) -> dict:
    return {
        "error": message,
        "code": code,
        "details": (details or {}) if _expose_details() else {},
    }


def _register_notes_error_handler(app: FastAPI) -> None:
    """Register notes domain/infrastructure error handler."""

    @app.exception_handler(NotesError)
    async def notes_error_handler(request: Request, exc: NotesError):
        """Handle all notes domain/infrastructure errors."""
        extra = {"error_code": exc.code, "path": request.url.path}
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(f"NotesError: {exc.message} {exc.details}", extra=extra)
        else:
            logger.warning(f"NotesError: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(include_details=_expose_details()),
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


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unknown path, wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        """Wrap framework HTTP errors in the standard envelope."""
        details = {"path": request.url.path, "method": request.method}
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            content = _envelope("Route not found", "NOT_FOUND", details)
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            content = _envelope("Method not allowed", "METHOD_NOT_ALLOWED", details)
        else:
            content = _envelope(str(exc.detail), "HTTP_ERROR", details)
        return JSONResponse(
            status_code=exc.status_code, content=content,
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
                "details": {},
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return _envelope(
        "Invalid request data",
        "VALIDATION_ERROR",
        {
            "fields": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    )
