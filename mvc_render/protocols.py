"""Protocol definitions for pluggable rendering collaborators."""

from collections.abc import Callable, Mapping
from typing import Any, Protocol

from mvc_render.core.response_writer import ResponseWriter
from mvc_render.models.render_models import RenderRequest


class Renderable(Protocol):
    """A constructed dynamic view.

    Construction only binds data; output is produced by an explicit call to
    one of these methods.
    """

    def render_default(self) -> str:
        """Render the view's default page."""
        ...

    def render_action(self, name: str) -> str:
        """Render the named sub-action page.

        Raises:
            ViewNotFoundException: If the view has no such action
        """
        ...


ViewFactory = Callable[[Mapping[str, Any]], Renderable]


class FormatRenderer(Protocol):
    """Renders one output format into a response writer without flushing it."""

    def render(self, request: RenderRequest, writer: ResponseWriter) -> None: ...
