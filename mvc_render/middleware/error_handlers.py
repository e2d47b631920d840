"""Exception handlers for the application."""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mvc_render.exceptions import RenderException
from mvc_render.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def render_exception_handler(request: Request, exc: RenderException) -> JSONResponse:
    """Handle render exceptions with their HTTP status codes.

    Returns a structured JSON error with error code, message and details.
    """
    log_with_context(
        logger,
        "warning",
        "Render error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="render_error",
    )

    error_content: dict[str, Any] = {"code": exc.code.value, "message": exc.message, "details": exc.details}

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_content},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    logger.error("Exception traceback:", exc_info=exc)

    # Internal error details stay in the logs
    return JSONResponse(
        status_code=500,
        content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application."""
    app.add_exception_handler(RenderException, render_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
