"""Single entry point for rendering a page in the requested format."""

import html
import re
from pprint import pformat
from typing import Any

from starlette.responses import Response

from mvc_render.core.render_context import RenderContext
from mvc_render.core.response_writer import ResponseWriter
from mvc_render.exceptions import UnsupportedFormatException
from mvc_render.logging_config import get_logger, log_with_context
from mvc_render.models.render_models import RenderFormat, RenderRequest, RequestContext, ResponseTermination

logger = get_logger(__name__)

ABSOLUTE_URL = re.compile(r"(http|ftp|https)?:?//")
REDIRECT_STATUS = 302


class RenderDispatcher:
    """Renders one response per request.

    A dispatcher owns the response writer of a single request. ``render``
    flushes that writer exactly once; ``redirect`` and ``check_array(stop=True)``
    flush it and return a :class:`ResponseTermination` the caller must send
    without doing any further work.
    """

    def __init__(
        self,
        context: RenderContext,
        request_context: RequestContext | None = None,
        writer: ResponseWriter | None = None,
    ):
        self.context = context
        self.request_context = request_context or RequestContext()
        self.writer = writer or ResponseWriter()

    def render(
        self,
        page: str | None,
        data: dict[str, Any],
        render_format: str,
        status_code: int = 200,
        debug: bool = False,
    ) -> Response:
        """Render ``page``/``data`` as ``render_format`` and flush the response.

        Args:
            page: Static file, template or view name (unused for JSON/XML)
            data: Payload or template/view context
            render_format: Case-insensitive format name (HTML, JSON, XML, ...)
            status_code: Status for JSON/XML responses
            debug: Enable template debugging for this call

        Returns:
            The flushed response

        Raises:
            UnsupportedFormatException: Unknown format; nothing is written
            ViewNotFoundException: Unregistered dynamic view or action
            TemplateRenderException: Template engine failure
        """
        try:
            fmt = RenderFormat.parse(render_format)
        except UnsupportedFormatException:
            log_with_context(
                logger,
                "warning",
                "Unsupported render format",
                page=page,
                render_format=render_format,
                event_type="render_unsupported_format",
            )
            raise

        request = RenderRequest(page=page, data=data, format=fmt, status_code=status_code, debug=debug)
        log_with_context(
            logger,
            "debug",
            "Render requested",
            page=page,
            render_format=fmt.value,
            status_code=status_code,
            debug=debug,
            event_type="render_requested",
        )

        self.context.renderer_for(fmt).render(request, self.writer)

        response = self.writer.flush()
        log_with_context(
            logger,
            "info",
            "Render completed",
            page=page,
            render_format=fmt.value,
            status_code=response.status_code,
            bytes=len(response.body),
            event_type="render_completed",
        )
        return response

    def redirect(self, page: str) -> ResponseTermination:
        """Redirect to an absolute URL or to a path below the script directory."""
        if ABSOLUTE_URL.search(page):
            location = page
        else:
            location = self.request_context.script_dir + page

        self.writer.set_status(REDIRECT_STATUS)
        self.writer.set_header("Location", location)
        log_with_context(
            logger,
            "info",
            "Redirecting",
            target=page,
            location=location,
            event_type="redirect",
        )
        return ResponseTermination(reason="redirect", response=self.writer.flush())

    def check_array(self, value: Any, stop: bool = False) -> ResponseTermination | None:
        """Dump ``value`` into the response body inside ``<pre>`` tags.

        With ``stop`` the response is flushed and a termination returned.
        """
        self.writer.write("<pre>")
        self.writer.write(html.escape(pformat(value)))
        self.writer.write("</pre>")
        if not stop:
            return None

        log_with_context(
            logger,
            "debug",
            "Stopping after debug dump",
            event_type="debug_dump_stop",
        )
        return ResponseTermination(reason="dump", response=self.writer.flush())
