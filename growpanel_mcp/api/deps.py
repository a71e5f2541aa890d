"""
API Dependencies

FastAPI dependency functions for the transport routes. The protocol
objects are built once in the application lifespan and kept on
``app.state``; these functions hand them to the routes and can be replaced
in tests through ``app.dependency_overrides``.
"""

from fastapi import Request

from growpanel_mcp.core.config import Settings, get_settings as _get_settings
from growpanel_mcp.protocol.handler import JsonRpcHandler
from growpanel_mcp.sessions.store import StreamSessionStore


def get_settings(request: Request) -> Settings:
    """Settings the app was created with, else the lru_cache singleton."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else _get_settings()


def get_jsonrpc_handler(request: Request) -> JsonRpcHandler:
    """The JSON-RPC method router shared by both transports."""
    return request.app.state.jsonrpc_handler


def get_session_store(request: Request) -> StreamSessionStore:
    """The table of open event streams."""
    return request.app.state.session_store
