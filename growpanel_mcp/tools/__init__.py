"""
Tools Package - Tool Registry and Dispatch

This package provides the immutable tool registry, the dispatcher that
runs tool calls, and the built-in report tools.
"""

from growpanel_mcp.tools.dispatcher import ToolDispatcher
from growpanel_mcp.tools.registry import ToolRegistry

__all__ = [
    "ToolDispatcher",
    "ToolRegistry",
]
