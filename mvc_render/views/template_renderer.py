"""Jinja2 template rendering."""

from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, TemplateNotFound, TemplateSyntaxError

from mvc_render.core.response_writer import ResponseWriter
from mvc_render.exceptions import ErrorCode, TemplateRenderException
from mvc_render.logging_config import get_logger, log_with_context
from mvc_render.models.render_models import RenderRequest

logger = get_logger(__name__)

DEBUG_EXTENSIONS = ["jinja2.ext.debug"]


class TemplateRenderer:
    """Renders the template named by the page with the render data as context.

    The template search root belongs to the engine; page names are passed
    through untouched. Debug renders use an overlay of the shared environment
    with the debug extension enabled, so the shared environment never changes.
    """

    def __init__(self, templates_dir: Path):
        self.templates_dir = templates_dir
        self.templates = Jinja2Templates(directory=templates_dir)
        self._debug_env: Environment | None = None

    @property
    def env(self) -> Environment:
        return self.templates.env

    @property
    def debug_env(self) -> Environment:
        if self._debug_env is None:
            self._debug_env = self.env.overlay(extensions=DEBUG_EXTENSIONS, auto_reload=True)
        return self._debug_env

    def render_to_string(self, template_name: str | None, data: dict, debug: bool = False) -> str:
        """Render a template to text.

        Raises:
            TemplateRenderException: If the template is missing, does not
                compile or fails while evaluating
        """
        if not template_name:
            raise TemplateRenderException(template_name, "No template name given", ErrorCode.TEMPLATE_NOT_FOUND)

        env = self.debug_env if debug else self.env
        try:
            return env.get_template(template_name).render(data)
        except TemplateNotFound as e:
            raise TemplateRenderException(
                template_name,
                f"Template '{e.name}' not found",
                ErrorCode.TEMPLATE_NOT_FOUND,
            ) from e
        except TemplateSyntaxError as e:
            raise TemplateRenderException(
                template_name,
                f"Syntax error in template '{e.name or template_name}': {e.message}",
                ErrorCode.TEMPLATE_SYNTAX_ERROR,
                details={"lineno": e.lineno},
            ) from e
        except Exception as e:
            log_with_context(
                logger,
                "error",
                "Template evaluation failed",
                template=template_name,
                error=str(e),
                error_type=type(e).__name__,
                event_type="template_error",
            )
            raise TemplateRenderException(
                template_name,
                f"Error while rendering template '{template_name}': {e}",
                ErrorCode.TEMPLATE_ERROR,
                details={"error_type": type(e).__name__},
            ) from e

    def render(self, request: RenderRequest, writer: ResponseWriter) -> None:
        writer.write(self.render_to_string(request.page, request.data, request.debug))
