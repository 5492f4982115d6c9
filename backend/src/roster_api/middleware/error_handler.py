"""Exception handlers mapping errors to ``{"message": ...}`` responses.

Domain errors carry their own safe message and status code. Anything else
is reduced to a generic message so internals never reach the client.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from roster_api.config import get_settings
from roster_api.exceptions import RosterAPIError
from roster_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    401: "Authentication required",
    403: "Access denied",
    404: "Resource not found",
    405: "Method not allowed",
    429: "Too many requests",
    500: "Internal server error",
    503: "Service temporarily unavailable",
}

# Validation errors listed in one response
MAX_REPORTED_VALIDATION_ERRORS = 3


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Handlers for unhandled exceptions run outside the CORS middleware, so
    allowed origins must be echoed here for browsers to read the error.
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    if origin in get_settings().cors_origins_list:
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }
    return {}


def _error_response(request: Request, status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"message": message, **extra},
        headers=_get_cors_headers(request),
    )


def summarize_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Summarize pydantic errors as ``field: message`` pairs.

    Only the field name is reported, never the submitted value.

    Args:
        errors: Errors from ``RequestValidationError.errors()``

    Returns:
        Safe, human-readable summary
    """
    safe_errors = []
    for error in errors:
        loc = error.get("loc", [])
        msg = error.get("msg", "Invalid value")
        field = loc[-1] if loc else "field"
        if isinstance(field, str) and not field.startswith("__"):
            safe_errors.append(f"{field}: {msg}")
    if not safe_errors:
        return SAFE_ERROR_MESSAGES[400]
    return "; ".join(safe_errors[:MAX_REPORTED_VALIDATION_ERRORS])


async def roster_api_exception_handler(request: Request, exc: RosterAPIError) -> JSONResponse:
    """Handle domain exceptions using their own message and status code."""
    if exc.status_code >= 500:
        log_error(logger, f"Request to {request.url.path} failed", exc)
    else:
        logger.info(
            "%s %s -> %s (%s)",
            request.method,
            request.url.path,
            exc.status_code,
            type(exc).__name__,
        )
    return _error_response(request, exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework HTTP exceptions such as unknown routes."""
    if get_settings().debug and isinstance(exc.detail, str):
        message = exc.detail
    else:
        message = SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers={**(exc.headers or {}), **_get_cors_headers(request)},
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 400 with a sanitized summary."""
    logger.warning(f"Validation error for {request.url.path}: {len(exc.errors())} error(s)")
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        summarize_validation_errors(exc.errors()),
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle database exceptions without leaking database details."""
    log_error(logger, f"Database error for {request.url.path}", exc)

    if isinstance(exc, IntegrityError):
        text = str(exc).lower()
        if "unique" in text or "duplicate" in text:
            return _error_response(request, status.HTTP_400_BAD_REQUEST, "Resource already exists")
        if "foreign key" in text:
            return _error_response(
                request, status.HTTP_400_BAD_REQUEST, "Referenced resource not found"
            )

    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error occurred"
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handle rate limit violations, including a Retry-After header."""
    response = _error_response(
        request, status.HTTP_429_TOO_MANY_REQUESTS, SAFE_ERROR_MESSAGES[429]
    )
    response.headers["Retry-After"] = "60"
    return response


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information."""
    logger.error(f"Unhandled exception for {request.url.path}", exc_info=exc)

    if get_settings().debug:
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            SAFE_ERROR_MESSAGES[500],
            type=type(exc).__name__,
        )
    return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, SAFE_ERROR_MESSAGES[500])
