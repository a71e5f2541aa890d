"""
Tests for the HTTP client factory.
"""

import httpx
import pytest

from growpanel_mcp.clients.http import USER_AGENT, create_http_client


class TestCreateHttpClient:
    def test_returns_async_client(self) -> None:
        assert isinstance(create_http_client(), httpx.AsyncClient)

    def test_base_url_applied(self) -> None:
        client = create_http_client(base_url="https://api.growpanel.test")
        assert client.base_url.host == "api.growpanel.test"

    def test_no_timeout_by_default(self) -> None:
        timeout = create_http_client().timeout
        assert timeout.connect is None
        assert timeout.read is None

    def test_explicit_timeout(self) -> None:
        assert create_http_client(timeout_seconds=5.0).timeout.read == 5.0

    def test_default_headers(self) -> None:
        client = create_http_client(headers={"X-Extra": "1"})
        assert client.headers["User-Agent"] == USER_AGENT
        assert client.headers["Accept"] == "application/json"
        assert client.headers["X-Extra"] == "1"

    @pytest.mark.asyncio
    async def test_transport_override_used(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.path)
            return httpx.Response(204)

        async with create_http_client(
            base_url="https://api.growpanel.test", transport=httpx.MockTransport(handler)
        ) as client:
            response = await client.get("/reports/mrr")

        assert response.status_code == 204
        assert seen == ["/reports/mrr"]
