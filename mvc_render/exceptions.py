"""Custom exceptions for MVC Render with HTTP status codes."""

from collections.abc import Sequence
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    RENDER_ERROR = "RENDER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Format dispatch
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"

    # Dynamic views
    VIEW_NOT_FOUND = "VIEW_NOT_FOUND"
    VIEW_ACTION_NOT_FOUND = "VIEW_ACTION_NOT_FOUND"

    # Templates
    TEMPLATE_ERROR = "TEMPLATE_ERROR"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_SYNTAX_ERROR = "TEMPLATE_SYNTAX_ERROR"

    # Static pages
    STATIC_ASSET_MISSING = "STATIC_ASSET_MISSING"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_INVALID = "CONFIG_INVALID"


class RenderException(Exception):
    """Base exception for rendering errors with HTTP status code support.

    All custom exceptions inherit from this class so the FastAPI error
    handlers can turn them into a consistent error response.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.RENDER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize render exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class UnsupportedFormatException(RenderException):
    """Requested output format is not one of the known formats."""

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(
            f"Wrong page type ({format_name}) given",
            code=ErrorCode.UNSUPPORTED_FORMAT,
            status_code=501,
            details={"format": format_name},
        )


class ViewNotFoundException(RenderException):
    """Dynamic view handler, or one of its actions, is not registered."""

    def __init__(self, handler_path: Sequence[str], sub_action: str | None = None):
        self.handler_path = tuple(handler_path)
        self.sub_action = sub_action
        view_name = "/".join(self.handler_path)
        if sub_action is None:
            message = f"View '{view_name}' is not registered"
            code = ErrorCode.VIEW_NOT_FOUND
        else:
            message = f"View '{view_name}' has no action '{sub_action}'"
            code = ErrorCode.VIEW_ACTION_NOT_FOUND
        super().__init__(
            message,
            code=code,
            status_code=404,
            details={"view": view_name, "action": sub_action},
        )


class TemplateRenderException(RenderException):
    """Template engine failed to load, compile or evaluate a template."""

    def __init__(
        self,
        template: str | None,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.template = template
        super().__init__(
            message,
            code=code,
            status_code=500,
            details={"template": template, **(details or {})},
        )


class StaticAssetMissingException(RenderException):
    """Static HTML page does not exist inside the views directory."""

    def __init__(self, page: str | None):
        self.page = page
        super().__init__(
            f"Static page '{page}' not found",
            code=ErrorCode.STATIC_ASSET_MISSING,
            status_code=404,
            details={"page": page},
        )


class ConfigurationException(RenderException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class ResponseAlreadySentError(RuntimeError):
    """Raised when the response stream is used after its terminal flush."""
