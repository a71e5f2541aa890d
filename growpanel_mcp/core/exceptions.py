"""
Custom exceptions for the GrowPanel MCP server.

This module provides the exception hierarchy for the server. All exceptions
inherit from GrowPanelMCPException and include error codes for consistent
error handling, logging and JSON-RPC error mapping.

Taxonomy:
- ConfigurationError: missing credential, raised before any I/O
- FilterValidationError: malformed or out-of-enum tool arguments
- UpstreamError / UpstreamPayloadError: non-2xx or unparseable upstream reply
- ToolNotFoundError: unknown tool name
- DispatchError: the single error type leaving the dispatcher
- SessionNotFoundError: message posted to an unknown event stream
"""

from enum import Enum
from typing import Any, Optional


# =============================================================================
# Error Codes Enum
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for GrowPanel MCP exceptions.

    These codes provide a consistent way to identify error types in logs.
    """

    SERVER_ERROR = "SERVER_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPSTREAM_PAYLOAD_ERROR = "UPSTREAM_PAYLOAD_ERROR"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    DISPATCH_ERROR = "DISPATCH_ERROR"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"


# =============================================================================
# Base Exception
# =============================================================================


class GrowPanelMCPException(Exception):
    """
    Base exception for all GrowPanel MCP errors.

    Attributes:
        message: Human-readable error message.
        error_code: Machine-readable error code from ErrorCode enum.
    """

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.SERVER_ERROR,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# ConfigurationError
# =============================================================================


class ConfigurationError(GrowPanelMCPException):
    """
    Exception for missing or invalid process configuration.

    Raised before any network attempt, e.g. when the upstream bearer
    token is not set.

    Attributes:
        setting: Name of the environment variable at fault.
    """

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        error_code: str = ErrorCode.CONFIGURATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.setting = setting


# =============================================================================
# FilterValidationError
# =============================================================================


class FilterValidationError(GrowPanelMCPException):
    """
    Exception for tool arguments that do not satisfy a filter contract.

    Named FilterValidationError to avoid conflict with
    pydantic.ValidationError.

    Attributes:
        field: Name of the first offending field (None for whole-object errors).
        reason: Human-readable reason for the first failure.
        errors: Every failure as {"field", "reason"} dicts.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        reason: Optional[str] = None,
        errors: Optional[list[dict[str, Any]]] = None,
        error_code: str = ErrorCode.VALIDATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.field = field
        self.reason = reason
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        """Serializable detail for the JSON-RPC error ``data`` member."""
        return {"field": self.field, "reason": self.reason, "errors": self.errors}


# =============================================================================
# UpstreamError
# =============================================================================


class UpstreamError(GrowPanelMCPException):
    """
    Exception for failed calls to the GrowPanel reports API.

    Attributes:
        status_code: HTTP status code (None for transport failures).
        status_text: HTTP reason phrase.
        body: Response body text as received.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
        body: Optional[str] = None,
        error_code: str = ErrorCode.UPSTREAM_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.status_code = status_code
        self.status_text = status_text
        self.body = body


class UpstreamPayloadError(UpstreamError):
    """Raised when a 2xx upstream body cannot be parsed as JSON."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
        body: Optional[str] = None,
        error_code: str = ErrorCode.UPSTREAM_PAYLOAD_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            status_code=status_code,
            status_text=status_text,
            body=body,
            error_code=error_code,
            **kwargs,
        )


# =============================================================================
# ToolNotFoundError
# =============================================================================


class ToolNotFoundError(GrowPanelMCPException):
    """Raised when a requested tool is not found in the registry."""

    def __init__(self, tool_name: str, error_code: str = ErrorCode.TOOL_NOT_FOUND) -> None:
        super().__init__(f"Unknown tool: {tool_name}", error_code)
        self.tool_name = tool_name


# =============================================================================
# DispatchError
# =============================================================================


class DispatchErrorKind(str, Enum):
    """Outcome classes of a failed dispatch."""

    METHOD_NOT_FOUND = "method_not_found"
    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"


class DispatchError(GrowPanelMCPException):
    """
    The only exception type the dispatcher lets out.

    Attributes:
        kind: Which class of failure occurred.
        tool_name: Tool that was being dispatched.
        data: Auxiliary detail (original message or validation detail).
    """

    def __init__(
        self,
        kind: DispatchErrorKind,
        message: str,
        tool_name: Optional[str] = None,
        data: Any = None,
        error_code: str = ErrorCode.DISPATCH_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.kind = kind
        self.tool_name = tool_name
        self.data = data


# =============================================================================
# SessionNotFoundError
# =============================================================================


class SessionNotFoundError(GrowPanelMCPException):
    """Raised when a message targets an event stream that is not open."""

    def __init__(
        self, session_id: str, error_code: str = ErrorCode.SESSION_NOT_FOUND
    ) -> None:
        super().__init__(f"Unknown session: {session_id}", error_code)
        self.session_id = session_id
