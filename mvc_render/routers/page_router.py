"""Page routes handing resolved pages to the render dispatcher."""

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from mvc_render.dependencies import get_dispatcher
from mvc_render.dispatcher import RenderDispatcher

router = APIRouter()

RESERVED_PARAMS = {"status_code", "debug"}


@router.get("/redirect")
def redirect(
    to: str = Query(..., min_length=1, description="Absolute URL or path below the application"),
    dispatcher: RenderDispatcher = Depends(get_dispatcher),
) -> Response:
    """Redirect to an absolute URL or to a path relative to the application."""
    return dispatcher.redirect(to).response


@router.get("/{render_format}/{page:path}")
def render_page(
    render_format: str,
    page: str,
    request: Request,
    status_code: int = Query(200, ge=100, le=599),
    debug: bool = False,
    dispatcher: RenderDispatcher = Depends(get_dispatcher),
) -> Response:
    """Render a page in the requested format.

    Query parameters other than ``status_code`` and ``debug`` become the data.
    """
    data = {key: value for key, value in request.query_params.items() if key not in RESERVED_PARAMS}
    return dispatcher.render(page or None, data, render_format, status_code, debug)
