"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from mvc_render.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    CORS headers are emitted by the JSON/XML renderers themselves, so no CORS
    middleware is installed here.
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Count requests and log each one with its duration."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        started = time.perf_counter()
        response = await call_next(request)
        log_with_context(
            logger,
            "info",
            "HTTP request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            event_type="http_request",
        )
        return response
