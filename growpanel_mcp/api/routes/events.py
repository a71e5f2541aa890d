"""
Request/Response Transport - POST /events

One JSON-RPC document in, one JSON-RPC document out, then the exchange is
over. A body that is not JSON yields a Parse error (-32700) with HTTP 400;
every other outcome, including JSON-RPC errors, is HTTP 200. Notifications
are acknowledged with HTTP 202 and an empty body.
"""

import json

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from growpanel_mcp.api.deps import get_jsonrpc_handler
from growpanel_mcp.observability.logging import get_logger
from growpanel_mcp.protocol.handler import JsonRpcHandler
from growpanel_mcp.protocol.jsonrpc import parse_error

logger = get_logger(__name__)

router = APIRouter(tags=["MCP"])


@router.post("/events", response_model=None)
async def post_event(
    request: Request,
    handler: JsonRpcHandler = Depends(get_jsonrpc_handler),
) -> Response:
    """
    Handle a single JSON-RPC call.

    Returns:
        JSONResponse 200: JSON-RPC result or error
        JSONResponse 400: Parse error
        Response 202: Notification accepted
    """
    body = await request.body()
    try:
        message = json.loads(body)
    except ValueError as e:
        logger.warning("unparseable request body", error=str(e))
        return JSONResponse(
            parse_error(str(e)).to_dict(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    response = await handler.handle(message)
    if response is None:
        return Response(status_code=status.HTTP_202_ACCEPTED)
    return JSONResponse(response.to_dict())
