"""Global error handling to prevent information disclosure.

Every error leaves the API in the same ``{statusCode, msg}`` envelope the
user endpoints use.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from onboarding_api.config import get_settings
from onboarding_api.models.dto.user import StatusResponse

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Resource not found",
    405: "Method not allowed",
    422: "Invalid input data",
    500: "Internal server error",
    503: "Service temporarily unavailable",
}


def _get_cors_headers(request: Request) -> dict[str, str]:
    """Get CORS headers for error responses.

    Exception handlers run outside the CORS middleware, so allowed origins
    must be echoed here or browsers hide the error body from the form.

    Args:
        request: The incoming request

    Returns:
        Dict of CORS headers to add to the response
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}

    if origin in getattr(request.app.state, "cors_origins", ()):
        return {
            "Access-Control-Allow-Origin": origin,
            "Access-Control-Allow-Credentials": "true",
        }

    return {}


def status_envelope(
    http_status: int,
    status_code: int,
    msg: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON response carrying the status envelope.

    The envelope's statusCode need not equal the HTTP status.
    """
    body = StatusResponse(status_code=status_code, msg=msg)
    return JSONResponse(
        status_code=http_status,
        content=body.model_dump(by_alias=True),
        headers=headers,
    )


def sanitize_error_detail(detail: Any, status_code: int) -> str:
    """Sanitize error detail to prevent information disclosure.

    Args:
        detail: Original error detail
        status_code: HTTP status code

    Returns:
        Safe error message
    """
    if isinstance(detail, list):
        # Validation errors - keep only the field name and message
        safe_errors = []
        for error in detail:
            if isinstance(error, dict):
                loc = error.get("loc", [])
                msg = error.get("msg", "Invalid value")
                field = loc[-1] if loc else "field"
                if isinstance(field, str) and not field.startswith("_"):
                    safe_errors.append(f"{field}: {msg}")
        if safe_errors:
            return "; ".join(safe_errors[:3])  # Limit to 3 errors

    return SAFE_ERROR_MESSAGES.get(status_code, "Request failed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: HTTP exception

    Returns:
        JSONResponse with sanitized error
    """
    if get_settings().debug and isinstance(exc.detail, str):
        msg = exc.detail
    else:
        msg = sanitize_error_detail(exc.detail, exc.status_code)

    return status_envelope(exc.status_code, exc.status_code, msg, _get_cors_headers(request))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed request bodies with sanitized messages.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with sanitized error
    """
    logger.warning(f"Validation error for {request.url.path}: {len(exc.errors())} error(s)")

    msg = sanitize_error_detail(exc.errors(), status.HTTP_422_UNPROCESSABLE_ENTITY)
    return status_envelope(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        msg,
        _get_cors_headers(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information.

    Args:
        request: FastAPI request
        exc: Unexpected exception

    Returns:
        JSONResponse with generic error
    """
    logger.error(f"Unhandled exception for {request.url.path}: {type(exc).__name__}", exc_info=exc)

    return status_envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        SAFE_ERROR_MESSAGES[500],
        _get_cors_headers(request),
    )
