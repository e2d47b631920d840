"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mvc_render import __version__
from mvc_render.config import Settings, get_settings
from mvc_render.core.render_context import RenderContext
from mvc_render.logging_config import get_logger, log_with_context
from mvc_render.views.registry import ViewRegistry, load_view_modules

logger = get_logger(__name__)


def build_render_context(settings: Settings) -> RenderContext:
    """Populate the view registry from the configured modules and wire the renderers."""
    registry = ViewRegistry()
    load_view_modules(registry, settings.view_modules)
    return RenderContext(settings, registry)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so FastAPI can clean up properly.
    """
    app.state.startup_time = time.time()
    app.state.request_count = 0

    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    log_with_context(
        logger,
        "info",
        "Starting MVC Render application",
        version=__version__,
        event_type="app_startup",
    )

    # Tests may inject a ready-made context
    if getattr(app.state, "render_context", None) is None:
        app.state.render_context = build_render_context(settings)

    context: RenderContext = app.state.render_context
    log_with_context(
        logger,
        "info",
        "Render context initialized",
        views_root=str(context.settings.views_root),
        templates_root=str(context.settings.templates_root),
        registered_views=len(context.registry),
        event_type="render_context_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down MVC Render application",
            total_requests=app.state.request_count,
            event_type="app_shutdown",
        )
