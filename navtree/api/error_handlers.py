"""Error Handlers — maps navtree failures onto HTTP responses and log records.

Invariants:
    - NavigationError → its own http_status and to_response() envelope
    - Client-side failures (4xx) log at WARNING, server-side (5xx) at ERROR
    - Every NavigationError record carries error_code, view_id, navigation_id, path
    - RequestValidationError → 400 with one detail per offending field
    - Anything else → 500 with a fixed body; the traceback goes to the log only

Design Decisions:
    - Level follows http_status rather than severity: a stale content type
      registry is the caller's problem, not an outage
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from navtree.core.errors import NavigationError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(NavigationError, navigation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)


def log_level_for(exc: NavigationError) -> int:
    return logging.WARNING if exc.http_status < 500 else logging.ERROR


async def navigation_error_handler(request: Request, exc: NavigationError):
    logger.log(
        log_level_for(exc),
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "view_id": exc.context.view_id,
            "navigation_id": exc.context.navigation_id,
            "path": request.url.path,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = _validation_details(exc)
    logger.warning(
        f"Rejected request body with {len(details)} invalid field(s)",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid navigation request",
                "category": "validation",
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} while transforming navigation",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
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


def _validation_details(exc: RequestValidationError) -> list[dict]:
    """One entry per pydantic error, loc joined into a dotted camelCase path."""
    return [
        {
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
