"""Error Handlers — global exception handlers for the user-directory API.

Invariants:
    - UserDirectoryError → 500 {"message": GENERIC_ERROR_MESSAGE}
    - Exception (catch-all) → 500 {"message": GENERIC_ERROR_MESSAGE}
    - The body never carries exception text, connection strings, or tracebacks;
      those go to the log only

Design Decisions:
    - Two-layer handler: domain (UserDirectoryError) and catch-all (Exception)
    - This module is the only place an internal error becomes a public message
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.core.errors import GENERIC_ERROR_MESSAGE, UserDirectoryError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register user-directory domain/infrastructure error handler."""

    @app.exception_handler(UserDirectoryError)
    async def domain_error_handler(request: Request, exc: UserDirectoryError):
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            exc_info=exc,
            extra={
                "error_code": exc.code,
                "category": exc.category.value,
                "severity": exc.severity.value,
                "path": request.url.path,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": GENERIC_ERROR_MESSAGE},
        )
