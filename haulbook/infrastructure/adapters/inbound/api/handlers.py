"""
Exception handlers for the FastAPI application.

Every error is rendered as::

    {"error": {"code", "message", "details"}, "meta": {"request_id", "timestamp"}}
"""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from haulbook.application.exceptions import (
    ApplicationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from haulbook.domain.exceptions import (
    DomainException,
    FusionAlreadyRevertedError,
    InvalidSnapshotError,
)

logger = logging.getLogger(__name__)

# Checked in order; the first matching class wins
_APPLICATION_STATUS: tuple[tuple[type[ApplicationError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ConflictError, status.HTTP_409_CONFLICT),
)

_DOMAIN_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (FusionAlreadyRevertedError, status.HTTP_409_CONFLICT),
    (InvalidSnapshotError, status.HTTP_409_CONFLICT),
)


def _error_response(
    request: Request, status_code: int, code: str, message: str, details: Any
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details,
            },
            "meta": {
                "request_id": getattr(request.state, "request_id", None),
                "timestamp": datetime.now(UTC).isoformat(),
            },
        },
    )


async def application_exception_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Convert application errors to HTTP responses."""
    status_code = next(
        (code for cls, code in _APPLICATION_STATUS if isinstance(exc, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.warning(f"Application exception: {exc.error_code} - {exc.message}")
    return _error_response(request, status_code, exc.error_code, exc.message, exc.details)


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Convert domain rule violations to HTTP responses."""
    status_code = next(
        (code for cls, code in _DOMAIN_STATUS if isinstance(exc, cls)),
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )
    logger.warning(f"Domain exception: {exc.code} - {exc.message}")
    return _error_response(request, status_code, exc.code, exc.message, {})


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert request validation errors to a 422 with per-field details."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation error: {errors}")
    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        errors,
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Logs the full error and returns a generic message; internals are only
    exposed when the app runs in debug mode.
    """
    logger.error(f"Unexpected error: {exc}", exc_info=exc)
    message = (
        str(exc) if request.app.debug else "An unexpected error occurred. Please contact support."
    )
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", message, {}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to ``app``."""
    app.add_exception_handler(ApplicationError, application_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
