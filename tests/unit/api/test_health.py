"""
Tests for the health and info endpoints.
"""

from fastapi import APIRouter
from fastapi.testclient import TestClient

from growpanel_mcp.api.routes.health import router as health_router


class TestHealthRouter:
    def test_health_returns_200(self, client: TestClient) -> None:
        assert client.get("/health").status_code == 200

    def test_health_schema(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy", "version": "1.0.0"}

    def test_router_is_api_router(self) -> None:
        assert isinstance(health_router, APIRouter)


class TestRootEndpoint:
    def test_service_info(self, client: TestClient) -> None:
        data = client.get("/").json()
        assert data["service"] == "GrowPanel MCP Server"
        assert data["transports"]["request_response"] == "POST /events"
