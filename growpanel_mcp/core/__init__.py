"""
Core module for the GrowPanel MCP server.

This module contains configuration, exceptions, and shared utilities.
"""

from growpanel_mcp.core.config import Settings, get_settings
from growpanel_mcp.core.exceptions import (
    ConfigurationError,
    DispatchError,
    DispatchErrorKind,
    ErrorCode,
    FilterValidationError,
    GrowPanelMCPException,
    SessionNotFoundError,
    ToolNotFoundError,
    UpstreamError,
    UpstreamPayloadError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "GrowPanelMCPException",
    "ConfigurationError",
    "FilterValidationError",
    "UpstreamError",
    "UpstreamPayloadError",
    "SessionNotFoundError",
    "ToolNotFoundError",
    "DispatchError",
    "DispatchErrorKind",
]
