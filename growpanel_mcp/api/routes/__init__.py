"""
API Routes Package

- health: Liveness endpoint
- events: Request/response JSON-RPC transport (POST /events)
- stream: Event-stream JSON-RPC transport (GET /events, GET /sse, POST /messages)
"""

from growpanel_mcp.api.routes.events import router as events_router
from growpanel_mcp.api.routes.health import router as health_router
from growpanel_mcp.api.routes.stream import router as stream_router

__all__ = ["events_router", "health_router", "stream_router"]
