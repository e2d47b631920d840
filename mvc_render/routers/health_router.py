"""Health endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from mvc_render import __version__
from mvc_render.core.render_context import RenderContext
from mvc_render.dependencies import get_render_context
from mvc_render.models import DetailedHealthResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(context: RenderContext = Depends(get_render_context)):
    """Readiness probe - can the application render pages?

    Checks that the static views directory and the template search root exist.

    **Returns:**
    - 200: Both directories are available
    - 503: At least one directory is missing
    """
    checks = {
        "views_dir": "ok" if context.settings.views_root.is_dir() else "missing",
        "templates_dir": "ok" if context.settings.templates_root.is_dir() else "missing",
    }
    all_healthy = all(result == "ok" for result in checks.values())

    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
            registered_views=len(context.registry),
        ).model_dump(mode="json"),
    )
