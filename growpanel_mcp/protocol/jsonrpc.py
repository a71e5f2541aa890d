"""
JSON-RPC 2.0 message models.

A request carries ``method`` and ``params``; a response carries exactly one
of ``result`` or ``error``. ``id`` is the caller's correlation token and is
null only when the request itself could not be read.
"""

from enum import IntEnum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

JSONRPC_VERSION = "2.0"

RequestId = Union[str, int, None]


class JsonRpcErrorCode(IntEnum):
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


DEFAULT_MESSAGES = {
    JsonRpcErrorCode.PARSE_ERROR: "Parse error",
    JsonRpcErrorCode.INVALID_REQUEST: "Invalid Request",
    JsonRpcErrorCode.METHOD_NOT_FOUND: "Method not found",
    JsonRpcErrorCode.INVALID_PARAMS: "Invalid params",
    JsonRpcErrorCode.INTERNAL_ERROR: "Internal error",
}


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    method: str
    params: Optional[dict[str, Any]] = None


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message."""

    jsonrpc: str = JSONRPC_VERSION
    id: RequestId = None
    result: Optional[Any] = None
    error: Optional[JsonRpcError] = Field(default=None)

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "JsonRpcResponse":
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls,
        request_id: RequestId,
        code: JsonRpcErrorCode,
        message: Optional[str] = None,
        data: Any = None,
    ) -> "JsonRpcResponse":
        return cls(
            id=request_id,
            error=JsonRpcError(
                code=int(code),
                message=message or DEFAULT_MESSAGES[code],
                data=data,
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Wire form: ``id`` is always present, ``data`` only when set, and
        exactly one of ``result`` / ``error``.
        """
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result if self.result is not None else {}
        return payload


def parse_error(detail: str) -> JsonRpcResponse:
    """Response for a body that is not valid JSON."""
    return JsonRpcResponse.failure(None, JsonRpcErrorCode.PARSE_ERROR, data=detail)
