"""JSON and XML data responses."""

from mvc_render.core.response_writer import ResponseWriter
from mvc_render.models.render_models import RenderRequest, ResponseEnvelope
from mvc_render.services import encoder_service
from mvc_render.views import payload_shaper

JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "application/xml; charset=utf-8"

# Any origin may read rendered data
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


def _emit(writer: ResponseWriter, envelope: ResponseEnvelope, content_type: str, body: str) -> None:
    writer.set_status(envelope.status_code)
    writer.set_header("Content-Type", content_type)
    for name, value in CORS_HEADERS.items():
        writer.set_header(name, value)
    writer.write(body)


class JsonRenderer:
    """Renders the shaped payload as JSON.

    With ``wrap_key`` set, a successful payload is nested under that key
    (``{"data": {...}}``); error envelopes are never wrapped.
    """

    def __init__(self, wrap_key: str | None = None):
        self.wrap_key = wrap_key

    def render(self, request: RenderRequest, writer: ResponseWriter) -> None:
        if self.wrap_key is None:
            envelope = payload_shaper.shape(request.data, request.status_code)
        else:
            envelope = payload_shaper.shape_wrapped(request.data, request.status_code, self.wrap_key)
        _emit(writer, envelope, JSON_CONTENT_TYPE, encoder_service.encode_json(envelope.payload))


class XmlRenderer:
    """Renders the shaped payload as an XML document."""

    def __init__(self, root: str = encoder_service.DEFAULT_XML_ROOT):
        self.root = root

    def render(self, request: RenderRequest, writer: ResponseWriter) -> None:
        envelope = payload_shaper.shape(request.data, request.status_code)
        _emit(writer, envelope, XML_CONTENT_TYPE, encoder_service.encode_xml(envelope.payload, self.root))
