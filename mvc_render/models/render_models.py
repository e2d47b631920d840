"""Pydantic models describing one render call and its results."""

import posixpath
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from starlette.responses import Response

from mvc_render.exceptions import UnsupportedFormatException

SUCCESS_STATUS_MIN = 200
SUCCESS_STATUS_MAX = 206


class RenderFormat(str, Enum):
    """Output formats the dispatcher knows how to produce."""

    HTML = "HTML"
    JSON = "JSON"
    JSON_DATA = "JSON_DATA"
    XML = "XML"
    TEMPLATE = "TEMPLATE"
    DYNAMIC_VIEW = "DYNAMIC_VIEW"

    @classmethod
    def parse(cls, value: str) -> "RenderFormat":
        """Match a format name case-insensitively, accepting legacy aliases.

        Raises:
            UnsupportedFormatException: If the name matches no known format
        """
        normalized = value.strip().upper()
        if normalized in cls.__members__:
            return cls[normalized]
        try:
            return FORMAT_ALIASES[normalized]
        except KeyError:
            raise UnsupportedFormatException(value) from None


FORMAT_ALIASES: dict[str, RenderFormat] = {
    "TWIG": RenderFormat.TEMPLATE,
    "JINJA": RenderFormat.TEMPLATE,
    "PHP": RenderFormat.DYNAMIC_VIEW,
    "VIEW": RenderFormat.DYNAMIC_VIEW,
    "JSONDATA": RenderFormat.JSON_DATA,
}


class RenderRequest(BaseModel):
    """Everything one render call needs; immutable for the duration of the call."""

    model_config = ConfigDict(frozen=True)

    page: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    format: RenderFormat
    status_code: int = Field(default=200, ge=100, le=599)
    debug: bool = False


class ViewIdentity(BaseModel):
    """Dynamic view handler path plus the optional action to run on it."""

    model_config = ConfigDict(frozen=True)

    handler_path: tuple[str, ...]
    sub_action: str | None = None
    namespace: str = "Views"

    @property
    def qualified_name(self) -> str:
        """Dotted name of the handler, e.g. ``Views.admin.users``."""
        return ".".join((self.namespace, *self.handler_path))


class ResponseEnvelope(BaseModel):
    """Status code and the payload handed to the JSON/XML encoders."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    payload: dict[str, Any]

    @property
    def is_success(self) -> bool:
        return SUCCESS_STATUS_MIN <= self.status_code <= SUCCESS_STATUS_MAX


class RequestContext(BaseModel):
    """Per-request values that used to be read from ambient server globals."""

    model_config = ConfigDict(frozen=True)

    script_name: str = "/"

    @property
    def script_dir(self) -> str:
        """Directory of the front controller without a trailing slash."""
        return posixpath.dirname(self.script_name.replace("\\", "/")).rstrip("/")


class ResponseTermination(BaseModel):
    """Signal that the caller must stop processing and send ``response`` as is."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    reason: Literal["redirect", "dump"]
    response: Response
