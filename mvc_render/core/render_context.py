"""Process-wide render collaborators, built once at startup."""

from mvc_render.config import Settings
from mvc_render.models.render_models import RenderFormat
from mvc_render.protocols import FormatRenderer
from mvc_render.views.data_renderer import JsonRenderer, XmlRenderer
from mvc_render.views.dynamic_renderer import DynamicViewRenderer
from mvc_render.views.registry import ViewRegistry
from mvc_render.views.static_renderer import StaticPageRenderer
from mvc_render.views.template_renderer import TemplateRenderer


class RenderContext:
    """Settings, view registry and one renderer per format.

    Shared by every request and never mutated after the lifespan has built it;
    per-request state lives in the dispatcher and its response writer.
    """

    def __init__(
        self,
        settings: Settings,
        registry: ViewRegistry | None = None,
        template_renderer: TemplateRenderer | None = None,
    ):
        self.settings = settings
        self.registry = registry if registry is not None else ViewRegistry()
        self.template_renderer = template_renderer or TemplateRenderer(settings.templates_root)
        self.renderers: dict[RenderFormat, FormatRenderer] = {
            RenderFormat.HTML: StaticPageRenderer(settings.views_root),
            RenderFormat.JSON: JsonRenderer(),
            RenderFormat.JSON_DATA: JsonRenderer(wrap_key="data"),
            RenderFormat.XML: XmlRenderer(),
            RenderFormat.TEMPLATE: self.template_renderer,
            RenderFormat.DYNAMIC_VIEW: DynamicViewRenderer(self.registry),
        }

    def renderer_for(self, render_format: RenderFormat) -> FormatRenderer:
        return self.renderers[render_format]
