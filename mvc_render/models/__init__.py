"""MVC Render models"""

from mvc_render.models.base_models import DetailedHealthResponse, HealthResponse
from mvc_render.models.render_models import (
    RenderFormat,
    RenderRequest,
    RequestContext,
    ResponseEnvelope,
    ResponseTermination,
    ViewIdentity,
)

__all__ = [
    "DetailedHealthResponse",
    "HealthResponse",
    "RenderFormat",
    "RenderRequest",
    "RequestContext",
    "ResponseEnvelope",
    "ResponseTermination",
    "ViewIdentity",
]
