"""Buffered output stream for a single response."""

from starlette.responses import Response

from mvc_render.exceptions import ResponseAlreadySentError

DEFAULT_MEDIA_TYPE = "text/html"


class ResponseWriter:
    """Collects status, headers and body chunks until the terminal flush.

    Renderers write into the writer; only the dispatcher flushes it. A writer
    is owned by exactly one request and becomes read-only once flushed.
    """

    def __init__(self, default_media_type: str = DEFAULT_MEDIA_TYPE):
        self.default_media_type = default_media_type
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self._body = bytearray()
        self._response: Response | None = None

    @property
    def flushed(self) -> bool:
        return self._response is not None

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def set_status(self, status_code: int) -> None:
        self._ensure_open()
        self.status_code = status_code

    def set_header(self, name: str, value: str) -> None:
        """Set a header, replacing any earlier value regardless of name case."""
        self._ensure_open()
        for existing in [key for key in self.headers if key.lower() == name.lower()]:
            del self.headers[existing]
        self.headers[name] = value

    def write(self, chunk: str | bytes) -> None:
        self._ensure_open()
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        self._body.extend(chunk)

    def flush(self) -> Response:
        """Finish the response and hand it to the transport.

        Returns:
            Starlette response carrying the buffered status, headers and body

        Raises:
            ResponseAlreadySentError: If the writer was already flushed
        """
        self._ensure_open()
        has_content_type = any(key.lower() == "content-type" for key in self.headers)
        self._response = Response(
            content=bytes(self._body),
            status_code=self.status_code,
            headers=self.headers,
            media_type=None if has_content_type else self.default_media_type,
        )
        return self._response

    def _ensure_open(self) -> None:
        if self._response is not None:
            raise ResponseAlreadySentError("Response has already been flushed")
