"""Static HTML passthrough."""

from pathlib import Path

from mvc_render.core.response_writer import ResponseWriter
from mvc_render.exceptions import StaticAssetMissingException
from mvc_render.logging_config import get_logger, log_with_context
from mvc_render.models.render_models import RenderRequest
from mvc_render.services import static_file_service

logger = get_logger(__name__)


class StaticPageRenderer:
    """Streams HTML files from the views directory without templating."""

    def __init__(self, views_root: Path):
        self.views_root = views_root

    def render(self, request: RenderRequest, writer: ResponseWriter) -> None:
        """Write the page file verbatim, or set 404 with no body when it is missing."""
        try:
            path = static_file_service.locate(self.views_root, request.page)
        except StaticAssetMissingException as e:
            log_with_context(
                logger,
                "warning",
                "Static page not found",
                page=e.page,
                views_root=str(self.views_root),
                event_type="static_page_missing",
            )
            writer.set_status(404)
            return

        writer.write(static_file_service.read(path))
