"""Error Handlers — global exception handlers for the donor registry API.

Invariants:
    - DonorRegistryError → its http_status with {"error": message}
    - RequestValidationError (malformed JSON, wrong types) → 400 with field details
    - Exception (catch-all) → 500, never leaks internal details
    - Only CRITICAL errors are logged at error level, with the chained cause

Design Decisions:
    - Three-layer handler: domain (DonorRegistryError), validation (Pydantic), catch-all (Exception)
    - Malformed bodies answer 400 like rule failures but keep a distinct message
      and details list, so the form can tell them apart
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    DonorRegistryError, ConflictError, ErrorSeverity, GENERIC_FAILURE_MESSAGE,
)

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Invalid request data"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register validation/conflict/storage error handler."""

    @app.exception_handler(DonorRegistryError)
    async def domain_error_handler(request: Request, exc: DonorRegistryError):
        """Handle all donor registry domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
        }
        if exc.severity == ErrorSeverity.CRITICAL:
            cause = exc.__cause__
            logger.error(
                f"Database insertion error: {cause or exc.message}",
                extra=extra,
                exc_info=(type(cause), cause, cause.__traceback__) if cause else None,
            )
        elif isinstance(exc, ConflictError):
            logger.warning(f"Rejected duplicate {exc.field}", extra=extra)
        else:
            logger.info(f"Rejected registration: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed or mistyped request bodies."""
        logger.info(
            f"Invalid request body on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": GENERIC_FAILURE_MESSAGE},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build the 400 body for a request that failed schema validation."""
    return {
        "error": INVALID_REQUEST_MESSAGE,
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
