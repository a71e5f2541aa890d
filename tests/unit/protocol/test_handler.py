"""
Tests for JsonRpcHandler: method routing and error mapping.
"""

import json

import pytest

from growpanel_mcp.protocol.handler import MCP_PROTOCOL_VERSION, JsonRpcHandler
from growpanel_mcp.tools.dispatcher import ToolDispatcher
from growpanel_mcp.tools.registry import ToolRegistry


@pytest.fixture
def handler(registry: ToolRegistry, dispatcher: ToolDispatcher) -> JsonRpcHandler:
    return JsonRpcHandler(registry, dispatcher)


def call(name: str, arguments=None, request_id=1) -> dict:
    params = {"name": name}
    if arguments is not None:
        params["arguments"] = arguments
    return {"jsonrpc": "2.0", "id": request_id, "method": "tools/call", "params": params}


class TestLifecycleMethods:
    @pytest.mark.asyncio
    async def test_initialize(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle(
            {"jsonrpc": "2.0", "id": 0, "method": "initialize", "params": {"clientInfo": {"name": "x"}}}
        )

        result = response.to_dict()["result"]
        assert result["protocolVersion"] == MCP_PROTOCOL_VERSION
        assert result["capabilities"] == {"tools": {}}
        assert result["serverInfo"] == {"name": "GrowPanel MCP Server", "version": "1.0.0"}

    @pytest.mark.asyncio
    async def test_initialize_echoes_client_protocol_version(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle(
            {"jsonrpc": "2.0", "id": 0, "method": "initialize", "params": {"protocolVersion": "2025-03-26"}}
        )
        assert response.result["protocolVersion"] == "2025-03-26"

    @pytest.mark.asyncio
    async def test_ping(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle({"jsonrpc": "2.0", "id": "p", "method": "ping"})
        assert response.to_dict() == {"jsonrpc": "2.0", "id": "p", "result": {}}


class TestToolsList:
    @pytest.mark.asyncio
    async def test_lists_catalog_in_order(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

        tools = response.to_dict()["result"]["tools"]
        assert [tool["name"] for tool in tools] == ["getMRR", "getLeads", "getCohorts"]
        assert set(tools[0]) == {"name", "description", "inputSchema"}

    @pytest.mark.asyncio
    async def test_repeated_calls_identical(self, handler: JsonRpcHandler) -> None:
        first = await handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        first.result["tools"].clear()
        second = await handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        third = await handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})

        assert len(second.result["tools"]) == 3
        assert json.dumps(second.to_dict()) == json.dumps(third.to_dict())


class TestToolsCall:
    @pytest.mark.asyncio
    async def test_success_returns_envelope(self, handler: JsonRpcHandler, upstream) -> None:
        upstream.respond_with(json_body={"result": []})

        response = await handler.handle(call("getLeads", {"region": "europe"}, request_id=7))

        payload = response.to_dict()
        assert payload["id"] == 7
        assert "error" not in payload
        assert payload["result"]["content"][0]["type"] == "text"

    @pytest.mark.asyncio
    async def test_missing_arguments_treated_as_empty(self, handler: JsonRpcHandler, upstream) -> None:
        response = await handler.handle(call("getCohorts"))

        assert response.error is None
        assert upstream.last_request.url.params["interval"] == "month"

    @pytest.mark.asyncio
    async def test_invalid_arguments_are_invalid_params(self, handler: JsonRpcHandler, upstream) -> None:
        response = await handler.handle(call("getCohorts", {"currency": "usdx"}))

        error = response.to_dict()["error"]
        assert error["code"] == -32602
        assert error["data"]["field"] == "currency"
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_unknown_tool_is_method_not_found(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle(call("getForecast"))

        error = response.to_dict()["error"]
        assert error["code"] == -32601
        assert "getForecast" in error["message"]

    @pytest.mark.asyncio
    async def test_upstream_failure_is_internal_error(self, handler: JsonRpcHandler, upstream) -> None:
        upstream.respond_with(status_code=500, text="rate limited")

        response = await handler.handle(call("getMRR"))

        error = response.to_dict()["error"]
        assert error["code"] == -32603
        assert "rate limited" in error["data"]

    @pytest.mark.asyncio
    async def test_missing_tool_name_is_invalid_params(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle(
            {"jsonrpc": "2.0", "id": 1, "method": "tools/call", "params": {}}
        )
        assert response.error.code == -32602


class TestProtocolErrors:
    @pytest.mark.asyncio
    async def test_unknown_method(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle({"jsonrpc": "2.0", "id": 3, "method": "resources/list"})
        assert response.to_dict() == {
            "jsonrpc": "2.0",
            "id": 3,
            "error": {"code": -32601, "message": "Method not found"},
        }

    @pytest.mark.asyncio
    async def test_non_object_message_is_invalid_request(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle([{"jsonrpc": "2.0", "id": 1, "method": "ping"}])
        assert response.id is None
        assert response.error.code == -32600

    @pytest.mark.asyncio
    async def test_missing_method_is_invalid_request(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle({"jsonrpc": "2.0", "id": 9})
        assert response.id == 9
        assert response.error.code == -32600

    @pytest.mark.asyncio
    async def test_other_protocol_version_is_invalid_request(self, handler: JsonRpcHandler) -> None:
        response = await handler.handle({"jsonrpc": "1.0", "id": 1, "method": "ping"})
        assert response.id == 1
        assert response.error.code == -32600

    @pytest.mark.asyncio
    async def test_notification_not_answered(self, handler: JsonRpcHandler, upstream) -> None:
        response = await handler.handle(
            {"jsonrpc": "2.0", "method": "tools/call", "params": {"name": "getMRR"}}
        )
        assert response is None
        assert upstream.requests == []
