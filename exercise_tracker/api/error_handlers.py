"""Error Handlers — global exception handlers for the exercise-tracker API.

Invariants:
    - ExerciseTrackerError → its http_status with {"error": message}
    - RequestValidationError → 400 {"error": ...} naming the first offending field
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (ExerciseTrackerError), validation (FastAPI), catch-all (Exception)
    - Extracted from main.py to keep the entry point small
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from exercise_tracker.core.errors import ExerciseTrackerError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ExerciseTrackerError)
    async def domain_error_handler(request: Request, exc: ExerciseTrackerError):
        """Handle all exercise-tracker domain/infrastructure errors."""
        level = (
            logging.ERROR
            if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
            else logging.WARNING
        )
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI request validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

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
            content={"error": "An unexpected error occurred"},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """First error only: clients get one message, like domain validation."""
    errors = exc.errors()
    if not errors:
        return {"error": "Invalid request data"}
    first = errors[0]
    field = ".".join(str(loc) for loc in first["loc"] if loc not in ("body", "query", "path"))
    return {"error": f"Invalid {field or 'request'}: {first['msg']}"}
