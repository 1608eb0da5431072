"""Error Handlers - global exception handlers for the sign-up API.

Invariants:
    - SignupError -> structured JSON with error code, message, severity and its own status
    - SignupError log records carry the failing step and failure tag from ErrorContext;
      CRITICAL errors (programmer faults such as an unhandled Failure tag) log a traceback
    - RequestValidationError -> 400 with field-level error details (malformed body)
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (SignupError), validation (Pydantic), catch-all (Exception)
    - Field rule violations never reach here: they are Failure outcomes rendered
      as 422 by the responder
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from signup.core.errors import SignupError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_signup_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_signup_error_handler(app: FastAPI) -> None:
    """Register sign-up domain/infrastructure error handler."""

    @app.exception_handler(SignupError)
    async def signup_error_handler(request: Request, exc: SignupError):
        """Handle all sign-up domain/infrastructure errors."""
        _log_signup_error(request, exc)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _log_signup_error(request: Request, exc: SignupError) -> None:
    extra = {
        "error_code": exc.code,
        "path": request.url.path,
        "step": exc.context.step_name,
        "failure_tag": exc.context.failure_tag,
    }
    if exc.severity == ErrorSeverity.CRITICAL:
        logger.critical(f"{exc.code}: {exc.message}", extra=extra, exc_info=exc)
    elif exc.http_status >= 500:
        logger.error(f"{exc.code}: {exc.message}", extra=extra)
    else:
        logger.info(f"{exc.code}: {exc.message}", extra=extra)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
