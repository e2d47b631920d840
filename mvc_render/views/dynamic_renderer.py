"""Dynamic view rendering through the view registry."""

from mvc_render.core.response_writer import ResponseWriter
from mvc_render.logging_config import get_logger, log_with_context
from mvc_render.models.render_models import RenderRequest
from mvc_render.views import page_resolver
from mvc_render.views.registry import ViewRegistry

logger = get_logger(__name__)


class DynamicViewRenderer:
    """Builds the registered view for a page and renders its default or action page.

    ``admin/users`` renders the default page of the ``admin/users`` view;
    ``admin/users:list`` renders its ``list`` action instead.
    """

    def __init__(self, registry: ViewRegistry):
        self.registry = registry

    def render(self, request: RenderRequest, writer: ResponseWriter) -> None:
        identity = page_resolver.resolve(request.page or "")
        entry = self.registry.lookup(identity)

        view = entry.factory(request.data)
        if identity.sub_action is None:
            body = view.render_default()
        else:
            body = view.render_action(identity.sub_action)

        log_with_context(
            logger,
            "debug",
            "Dynamic view rendered",
            view=identity.qualified_name,
            action=identity.sub_action,
            event_type="dynamic_view_rendered",
        )
        if body:
            writer.write(body)
