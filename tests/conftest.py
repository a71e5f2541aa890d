"""
Pytest configuration and shared fixtures.

This configuration sets up:
- Test markers for categorization
- A fake GrowPanel upstream served through httpx.MockTransport
- A tool registry pinned to a fixed "today"
- A FastAPI app / TestClient wired to the fake upstream
"""

from datetime import date
from typing import Any, Iterator, Optional

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from growpanel_mcp.clients.growpanel import GrowPanelClient
from growpanel_mcp.clients.http import create_http_client
from growpanel_mcp.core.config import Settings
from growpanel_mcp.main import create_app
from growpanel_mcp.tools.builtin import build_tool_registry
from growpanel_mcp.tools.dispatcher import ToolDispatcher
from growpanel_mcp.tools.registry import ToolRegistry

TEST_API_URL = "https://api.growpanel.test"
TEST_TOKEN = "test-token"
FIXED_TODAY = date(2025, 8, 28)


# =============================================================================
# Test Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")


# =============================================================================
# Fake upstream
# =============================================================================


class FakeUpstream:
    """
    Callable handler for httpx.MockTransport.

    Records every request and answers with the configured status and body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"result": []}
        self.text_body: Optional[str] = None

    def respond_with(
        self,
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text_body = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_mrr_row(**overrides: Any) -> dict[str, Any]:
    """A complete MRR report row with plausible values (amounts in cents)."""
    row = {
        "date": "2025-07-01",
        "end_date": "2025-07-31",
        "new": 150000,
        "expansion": 25000,
        "contraction": 5000,
        "churn": 10000,
        "reactivation": 0,
        "mrr_diff": 160000,
        "total_mrr": 12345678,
        "total_arr": 148148136,
        "total_customers": 1234,
        "arpa": 10005,
        "asp": 12000,
        "ltv": 0,
        "customer_churn_rate": 1.5,
        "mrr_churn_rate": 0.8,
        "net_mrr_churn_rate": -1.2,
        "fx_adjustment": 0,
        "customers_diff": 12,
        "new_customers": 20,
        "expansion_customers": 4,
        "contraction_customers": 1,
        "churn_customers": 8,
        "reactivation_customers": 0,
        "segment_entry": 0,
        "segment_entry_customers": 0,
        "segment_exit": 0,
        "segment_exit_customers": 0,
        "update": None,
        "update_customers": None,
        "customer_change_pct": 0.98,
        "mrr_change_pct": 1.31,
        "customer_churn_avg": 1.4,
        "net_mrr_diff": 160000,
    }
    row.update(overrides)
    return row


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the fake upstream, ignoring any local .env."""
    return Settings(
        _env_file=None,
        api_url=TEST_API_URL,
        api_token=TEST_TOKEN,
        environment="development",
        log_level="DEBUG",
    )


@pytest.fixture
def upstream() -> FakeUpstream:
    """The fake GrowPanel reports API."""
    return FakeUpstream()


@pytest.fixture
def http_client(upstream: FakeUpstream) -> httpx.AsyncClient:
    """Async HTTP client whose transport is the fake upstream."""
    return create_http_client(
        base_url=TEST_API_URL,
        transport=httpx.MockTransport(upstream),
    )


@pytest.fixture
def growpanel_client(http_client: httpx.AsyncClient) -> GrowPanelClient:
    """GrowPanelClient with a token, talking to the fake upstream."""
    return GrowPanelClient(api_token=TEST_TOKEN, http_client=http_client)


@pytest.fixture
def registry(growpanel_client: GrowPanelClient) -> ToolRegistry:
    """The real report catalog with the clock pinned to FIXED_TODAY."""
    return build_tool_registry(growpanel_client, today=lambda: FIXED_TODAY)


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> ToolDispatcher:
    return ToolDispatcher(registry)


@pytest.fixture
def app(settings: Settings, registry: ToolRegistry, http_client: httpx.AsyncClient) -> FastAPI:
    """Application wired to the fake upstream."""
    return create_app(settings, registry=registry, http_client=http_client)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """TestClient with the lifespan running."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def today() -> date:
    """The date the registry fixture treats as today."""
    return FIXED_TODAY


@pytest.fixture
def mrr_row():
    """Factory for complete MRR rows; keyword arguments override fields."""
    return make_mrr_row


@pytest.fixture
def mrr_payload() -> dict[str, Any]:
    """A single-row MRR report payload."""
    return {"result": [make_mrr_row()]}
