"""Decide what payload a JSON/XML response carries for a given status code."""

from collections.abc import Mapping
from typing import Any

from mvc_render.models.render_models import SUCCESS_STATUS_MAX, SUCCESS_STATUS_MIN, ResponseEnvelope


def is_success(status_code: int) -> bool:
    """True for 200 OK through 206 Partial Content."""
    return SUCCESS_STATUS_MIN <= status_code <= SUCCESS_STATUS_MAX


def error_payload(status_code: int) -> dict[str, Any]:
    return {
        "error": {
            "code": status_code,
            "message": f"Error {status_code} has occurred",
        }
    }


def shape(data: Mapping[str, Any], status_code: int) -> ResponseEnvelope:
    """Pass data through on success, replace it with the error envelope otherwise.

    Caller data is never included in an error response.
    """
    if is_success(status_code):
        return ResponseEnvelope(status_code=status_code, payload=dict(data))
    return ResponseEnvelope(status_code=status_code, payload=error_payload(status_code))


def shape_wrapped(data: Mapping[str, Any], status_code: int, key: str = "data") -> ResponseEnvelope:
    """Like :func:`shape`, but a successful payload is nested under ``key``."""
    if is_success(status_code):
        return ResponseEnvelope(status_code=status_code, payload={key: dict(data)})
    return ResponseEnvelope(status_code=status_code, payload=error_payload(status_code))
