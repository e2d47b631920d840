"""FastAPI dependencies for dependency injection."""

from fastapi import Depends, Request

from mvc_render.core.render_context import RenderContext
from mvc_render.dispatcher import RenderDispatcher
from mvc_render.models.render_models import RequestContext


async def get_render_context(request: Request) -> RenderContext:
    """
    Get the shared render context from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The RenderContext built during startup.

    Raises:
        RuntimeError: If the render context is not initialized.
    """
    context: RenderContext | None = getattr(request.app.state, "render_context", None)

    if context is None:
        raise RuntimeError("Render context not initialized. Is the app lifespan running?")

    return context


async def get_request_context(
    request: Request,
    context: RenderContext = Depends(get_render_context),
) -> RequestContext:
    """
    Build the per-request context used for relative redirects.

    The configured script name wins; otherwise the application's mount path
    (ASGI ``root_path``) stands in for the front controller's location.
    """
    script_name = context.settings.script_name
    if script_name is None:
        script_name = request.scope.get("root_path", "") + "/"
    return RequestContext(script_name=script_name)


async def get_dispatcher(
    context: RenderContext = Depends(get_render_context),
    request_context: RequestContext = Depends(get_request_context),
) -> RenderDispatcher:
    """Create a dispatcher owning a fresh response writer for this request."""
    return RenderDispatcher(context, request_context)
