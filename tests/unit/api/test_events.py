"""
Tests for the request/response transport (POST /events).
"""

from fastapi.testclient import TestClient


def rpc(method: str, params=None, request_id=1) -> dict:
    message = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        message["params"] = params
    return message


class TestPostEvents:
    def test_tools_list(self, client: TestClient) -> None:
        response = client.post("/events", json=rpc("tools/list"))

        assert response.status_code == 200
        names = [tool["name"] for tool in response.json()["result"]["tools"]]
        assert names == ["getMRR", "getLeads", "getCohorts"]

    def test_tools_list_byte_identical_across_calls(self, client: TestClient) -> None:
        first = client.post("/events", json=rpc("tools/list")).content
        second = client.post("/events", json=rpc("tools/list")).content
        assert first == second

    def test_initialize(self, client: TestClient) -> None:
        response = client.post("/events", json=rpc("initialize", {}))
        assert response.json()["result"]["serverInfo"]["name"] == "GrowPanel MCP Server"

    def test_tools_call_success(self, client: TestClient, upstream, mrr_payload) -> None:
        upstream.respond_with(json_body=mrr_payload)

        response = client.post(
            "/events", json=rpc("tools/call", {"name": "getMRR", "arguments": {"interval": "month"}})
        )

        assert response.status_code == 200
        content = response.json()["result"]["content"]
        assert content[0]["text"].startswith("# MRR Report")
        assert upstream.last_request.url.params["date"] == "20240828-20250828"

    def test_invalid_params(self, client: TestClient, upstream) -> None:
        response = client.post(
            "/events", json=rpc("tools/call", {"name": "getCohorts", "arguments": {"currency": "usdx"}})
        )

        assert response.status_code == 200
        assert response.json()["error"]["code"] == -32602
        assert upstream.requests == []

    def test_unknown_tool(self, client: TestClient) -> None:
        response = client.post("/events", json=rpc("tools/call", {"name": "getForecast"}))
        assert response.json()["error"]["code"] == -32601

    def test_upstream_failure(self, client: TestClient, upstream) -> None:
        upstream.respond_with(status_code=500, text="rate limited")

        response = client.post("/events", json=rpc("tools/call", {"name": "getLeads"}))

        error = response.json()["error"]
        assert error["code"] == -32603
        assert "rate limited" in error["data"]

    def test_unknown_method(self, client: TestClient) -> None:
        response = client.post("/events", json=rpc("prompts/list", request_id="abc"))
        assert response.json() == {
            "jsonrpc": "2.0",
            "id": "abc",
            "error": {"code": -32601, "message": "Method not found"},
        }

    def test_malformed_json_is_parse_error(self, client: TestClient) -> None:
        response = client.post(
            "/events", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["id"] is None
        assert body["error"]["code"] == -32700

    def test_notification_accepted_without_body(self, client: TestClient) -> None:
        response = client.post(
            "/events", json={"jsonrpc": "2.0", "method": "notifications/initialized"}
        )

        assert response.status_code == 202
        assert response.content == b""
