"""
Exception handlers.

Domain services raise typed exceptions; this module maps each base class
to a status code and renders the ErrorResponse envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    HubberError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

# Checked in order; the first matching base class wins
STATUS_BY_ERROR: tuple[tuple[type[HubberError], int], ...] = (
    (NotFoundError, 404),
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
)


def status_for(exc: HubberError) -> int:
    """HTTP status for a domain exception."""
    if isinstance(exc, ExternalServiceError):
        return exc.status_code
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


def _envelope(status_code: int, error: str, code: str, details=None, headers=None) -> JSONResponse:
    body = ErrorResponse(error=error, code=code, details=details or None)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


async def hubber_error_handler(request: Request, exc: HubberError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return _envelope(status_code, exc.message, exc.code, exc.details, headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    return _envelope(400, "Missing or invalid fields", "VALIDATION_ERROR", details)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = getattr(exc, "code", None) or f"HTTP_{exc.status_code}"
    return _envelope(exc.status_code, str(exc.detail), code, headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return _envelope(500, "Internal server error", "UNKNOWN_ERROR")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the app."""
    app.add_exception_handler(HubberError, hubber_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
