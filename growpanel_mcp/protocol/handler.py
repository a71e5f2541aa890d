"""
JSON-RPC Method Handler

Routes decoded JSON-RPC messages to the catalog and the dispatcher. Both
transports (request/response and event stream) feed messages through the
same JsonRpcHandler, so the catalog and the error mapping exist once.

Methods:
- initialize: server info and capabilities
- ping: liveness, empty result
- tools/list: the catalog derived from the registry
- tools/call: dispatch to a tool

Messages without an ``id`` are notifications: they are logged and never
answered.
"""

import copy
from typing import Any, Awaitable, Callable, Optional

from pydantic import ValidationError

from growpanel_mcp.core.exceptions import DispatchError, DispatchErrorKind
from growpanel_mcp.models.domain import InvocationRequest
from growpanel_mcp.observability.logging import get_logger
from growpanel_mcp.protocol.jsonrpc import (
    JsonRpcErrorCode,
    JsonRpcRequest,
    JsonRpcResponse,
)
from growpanel_mcp.tools.dispatcher import ToolDispatcher
from growpanel_mcp.tools.registry import ToolRegistry

logger = get_logger(__name__)

MCP_PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "GrowPanel MCP Server"
SERVER_VERSION = "1.0.0"

_ERROR_CODES = {
    DispatchErrorKind.METHOD_NOT_FOUND: JsonRpcErrorCode.METHOD_NOT_FOUND,
    DispatchErrorKind.INVALID_PARAMS: JsonRpcErrorCode.INVALID_PARAMS,
    DispatchErrorKind.INTERNAL_ERROR: JsonRpcErrorCode.INTERNAL_ERROR,
}


class InvalidParamsError(Exception):
    """Raised by a method when its params are structurally unusable."""


class JsonRpcHandler:
    """
    Method router shared by both transports.

    Example:
        >>> handler = JsonRpcHandler(registry, ToolDispatcher(registry))
        >>> response = await handler.handle({"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
        >>> response.to_dict()["result"]["tools"][0]["name"]
        'getMRR'
    """

    def __init__(
        self,
        registry: ToolRegistry,
        dispatcher: ToolDispatcher,
        server_name: str = SERVER_NAME,
        server_version: str = SERVER_VERSION,
    ) -> None:
        self._dispatcher = dispatcher
        self._server_info = {"name": server_name, "version": server_version}
        # the registry is immutable, so the catalog is rendered once
        self._catalog = {"tools": [definition.to_catalog_entry() for definition in registry.list()]}
        self._methods: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }

    async def handle(self, message: Any) -> Optional[JsonRpcResponse]:
        """
        Handle one decoded JSON-RPC message.

        Args:
            message: The decoded JSON body.

        Returns:
            The response to send, or None for notifications.
        """
        if not isinstance(message, dict):
            return JsonRpcResponse.failure(
                None,
                JsonRpcErrorCode.INVALID_REQUEST,
                data="Expected a single JSON-RPC request object",
            )

        try:
            request = JsonRpcRequest.model_validate(message)
        except ValidationError as e:
            request_id = message.get("id")
            if not isinstance(request_id, (str, int)):
                request_id = None
            return JsonRpcResponse.failure(
                request_id, JsonRpcErrorCode.INVALID_REQUEST, data=str(e)
            )

        if "id" not in message:
            logger.debug("notification received", method=request.method)
            return None

        method = self._methods.get(request.method)
        if method is None:
            logger.warning("unknown method", method=request.method)
            return JsonRpcResponse.failure(request.id, JsonRpcErrorCode.METHOD_NOT_FOUND)

        try:
            result = await method(request.params or {})
        except InvalidParamsError as e:
            return JsonRpcResponse.failure(
                request.id, JsonRpcErrorCode.INVALID_PARAMS, data=str(e)
            )
        except DispatchError as e:
            return self._dispatch_failure(request.id, e)
        except Exception as e:
            logger.error("method failed", method=request.method, error=str(e))
            return JsonRpcResponse.failure(
                request.id, JsonRpcErrorCode.INTERNAL_ERROR, data=str(e)
            )

        return JsonRpcResponse.success(request.id, result)

    # =========================================================================
    # Methods
    # =========================================================================

    async def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        client_info = params.get("clientInfo") or {}
        logger.info("client initialized", client=client_info.get("name"))
        return {
            "protocolVersion": params.get("protocolVersion") or MCP_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": dict(self._server_info),
        }

    async def _ping(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    async def _list_tools(self, params: dict[str, Any]) -> dict[str, Any]:
        return copy.deepcopy(self._catalog)

    async def _call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidParamsError("tools/call requires a string 'name'")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}

        envelope = await self._dispatcher.dispatch(
            InvocationRequest(tool_name=name, arguments=arguments)
        )
        return envelope.model_dump()

    # =========================================================================
    # Error mapping
    # =========================================================================

    @staticmethod
    def _dispatch_failure(request_id: Any, error: DispatchError) -> JsonRpcResponse:
        code = _ERROR_CODES[error.kind]
        if error.kind is DispatchErrorKind.METHOD_NOT_FOUND:
            return JsonRpcResponse.failure(request_id, code, message=error.message)
        if error.kind is DispatchErrorKind.INVALID_PARAMS:
            return JsonRpcResponse.failure(
                request_id, code, data={"detail": error.message, **(error.data or {})}
            )
        return JsonRpcResponse.failure(request_id, code, data=error.data)
