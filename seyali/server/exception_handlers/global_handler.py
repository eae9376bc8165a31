"""
Global Exception Handlers for the Status Service.

This module provides:
- a catch-all handler that logs unhandled exceptions with an error ID and
  request context, and answers with a generic body that reveals nothing about
  the failure
- an HTTP exception handler that renders framework errors (unknown routes,
  unsupported methods) in the service's ``{"error": ...}`` shape
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from seyali.core.logging_config import get_logger
from seyali.core.monitoring import log_error
from seyali.server.core import constant
from seyali.server.middleware.security_headers import SECURITY_HEADERS
from seyali.server.schemas import ErrorBody

logger = get_logger(__name__)

# An unsupported method on a known path is still an unmatched route.
_NOT_FOUND_STATUSES = {404, 405}


def _error(message: str) -> dict:
    return ErrorBody(error=message).model_dump(exclude_none=True)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    The full error context goes to the log; the client only receives a generic
    message and an error ID to reference when reporting the issue.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with a generic error message and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    return JSONResponse(
        status_code=500,
        content=ErrorBody(error=constant.SERVER_ERROR_MESSAGE, error_id=error_id).model_dump(),
        # Raised errors bypass the middleware stack.
        headers=SECURITY_HEADERS,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render HTTP errors raised by routing or endpoints.

    Unknown paths and unsupported methods both answer 404 ``{"error": "Not found"}``.
    """
    if exc.status_code in _NOT_FOUND_STATUSES:
        logger.debug(f"No route for {request.method} {request.url.path}")
        return JSONResponse(status_code=404, content=_error(constant.NOT_FOUND_MESSAGE))

    return JSONResponse(
        status_code=exc.status_code,
        content=_error(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
