"""
Clients Package

HTTP client factory and the GrowPanel reports API client.
"""

from growpanel_mcp.clients.growpanel import GrowPanelClient, build_query_params
from growpanel_mcp.clients.http import (
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_MAX_KEEPALIVE,
    create_http_client,
)

__all__ = [
    "GrowPanelClient",
    "build_query_params",
    "create_http_client",
    "DEFAULT_MAX_CONNECTIONS",
    "DEFAULT_MAX_KEEPALIVE",
]
