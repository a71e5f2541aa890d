"""
HTTP Client Module - client factory for upstream calls.

The GrowPanel reports API is called exactly once per tool invocation:
no transport retries and no client-side timeout. An unresponsive upstream
holds only the coroutine handling that one call.

Pattern: Factory pattern for creating configured HTTP clients
"""

from typing import Optional

import httpx


DEFAULT_MAX_CONNECTIONS: int = 100
"""Maximum number of connections in the pool."""

DEFAULT_MAX_KEEPALIVE: int = 20
"""Maximum number of keepalive connections."""

USER_AGENT = "growpanel-mcp/1.0"


def create_http_client(
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
    max_connections: Optional[int] = None,
    max_keepalive: Optional[int] = None,
    headers: Optional[dict[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create a configured async HTTP client.

    Args:
        base_url: Base URL for all requests (e.g., "https://api.growpanel.io")
        timeout_seconds: Request timeout in seconds (default: None, no timeout)
        max_connections: Maximum connections in pool (default: 100)
        max_keepalive: Maximum keepalive connections (default: 20)
        headers: Additional headers to include in all requests
        transport: Transport override (tests pass httpx.MockTransport)

    Returns:
        httpx.AsyncClient: Configured async HTTP client

    Example:
        >>> client = create_http_client(base_url="https://api.growpanel.io")
        >>> async with client:
        ...     response = await client.get("/reports/mrr")
    """
    max_conn = max_connections if max_connections is not None else DEFAULT_MAX_CONNECTIONS
    max_keep = max_keepalive if max_keepalive is not None else DEFAULT_MAX_KEEPALIVE

    limits = httpx.Limits(
        max_connections=max_conn,
        max_keepalive_connections=max_keep,
    )

    default_headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if headers:
        default_headers.update(headers)

    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=0, limits=limits)

    return httpx.AsyncClient(
        base_url=base_url or "",
        timeout=httpx.Timeout(timeout_seconds),
        headers=default_headers,
        transport=transport,
    )
