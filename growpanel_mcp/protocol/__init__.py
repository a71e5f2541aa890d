"""
Protocol Package - JSON-RPC 2.0 models and the MCP method router.
"""

from growpanel_mcp.protocol.handler import JsonRpcHandler
from growpanel_mcp.protocol.jsonrpc import (
    JsonRpcError,
    JsonRpcErrorCode,
    JsonRpcRequest,
    JsonRpcResponse,
    parse_error,
)

__all__ = [
    "JsonRpcHandler",
    "JsonRpcError",
    "JsonRpcErrorCode",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "parse_error",
]
