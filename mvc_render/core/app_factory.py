"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from mvc_render import __version__
from mvc_render.config import Settings, get_settings
from mvc_render.core.lifespan import lifespan
from mvc_render.core.middleware import setup_middleware
from mvc_render.core.render_context import RenderContext
from mvc_render.middleware.error_handlers import register_error_handlers
from mvc_render.routers import health_router, page_router


def create_app(settings: Settings | None = None, render_context: RenderContext | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the environment-loaded singleton
        render_context: Prebuilt render context; built in the lifespan when omitted

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="MVC Render",
        description="""
        Renders pages as static HTML, JSON, XML, Jinja2 templates or
        registered dynamic views.

        ## Pages
        - `/pages/{format}/{page}` - Render a page; remaining query parameters become the data
        - `/pages/redirect?to=...` - Redirect to a URL or a path below the application

        ## Health
        - `/health` - Basic health check
        - `/health/ready` - Views and templates directories are available
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.render_context = render_context

    setup_middleware(app)
    register_error_handlers(app)

    app.include_router(health_router.router, tags=["health"])
    app.include_router(page_router.router, prefix="/pages", tags=["pages"])

    return app
