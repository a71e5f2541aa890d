"""
Streaming Transport - GET /events (alias GET /sse), POST /messages

A client opens a Server-Sent Events stream with GET. The first event is
``endpoint``, whose data is the URL to POST JSON-RPC messages to
(``/messages?session_id=<id>``). Each posted message is answered with
HTTP 202 and its JSON-RPC response is pushed on the stream as a
``message`` event. Idle streams receive ``: ping`` comments; the session is
dropped once the peer disconnects.
"""

import asyncio
import json
from typing import Any, AsyncGenerator, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse, StreamingResponse

from growpanel_mcp.api.deps import get_jsonrpc_handler, get_session_store, get_settings
from growpanel_mcp.core.config import Settings
from growpanel_mcp.core.exceptions import SessionNotFoundError
from growpanel_mcp.observability.logging import get_logger
from growpanel_mcp.protocol.handler import JsonRpcHandler
from growpanel_mcp.protocol.jsonrpc import parse_error
from growpanel_mcp.sessions.store import StreamSession, StreamSessionStore

logger = get_logger(__name__)

router = APIRouter(tags=["MCP"])

MESSAGES_PATH = "/messages"
PING_FRAME = ": ping\n\n"

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def format_sse(event: Optional[str], data: str) -> str:
    """
    Frame one Server-Sent Event.

    Example:
        >>> format_sse("message", '{"id": 1}')
        'event: message\\ndata: {"id": 1}\\n\\n'
    """
    lines = []
    if event:
        lines.append(f"event: {event}")
    lines.extend(f"data: {line}" for line in data.splitlines() or [""])
    return "\n".join(lines) + "\n\n"


async def event_stream(
    request: Request,
    session: StreamSession,
    store: StreamSessionStore,
    ping_interval: float,
) -> AsyncGenerator[str, None]:
    """
    Yield SSE frames for one session until the peer disconnects.

    Args:
        request: The GET request, polled for disconnection.
        session: The session whose queue is drained.
        store: Store to remove the session from on exit.
        ping_interval: Seconds of inactivity before a keep-alive comment.
    """
    try:
        yield format_sse("endpoint", f"{MESSAGES_PATH}?session_id={session.session_id}")
        while not await request.is_disconnected():
            try:
                message = await asyncio.wait_for(session.queue.get(), timeout=ping_interval)
            except asyncio.TimeoutError:
                yield PING_FRAME
                continue
            yield format_sse("message", json.dumps(message))
    finally:
        store.remove(session.session_id)


@router.get("/events", response_model=None)
@router.get("/sse", response_model=None, include_in_schema=False)
async def open_stream(
    request: Request,
    store: StreamSessionStore = Depends(get_session_store),
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    """Open a long-lived event stream for JSON-RPC responses."""
    session = store.create()
    return StreamingResponse(
        event_stream(request, session, store, settings.sse_ping_interval_seconds),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.post(MESSAGES_PATH, response_model=None)
async def post_message(
    request: Request,
    session_id: str = Query(..., description="Session id from the endpoint event"),
    store: StreamSessionStore = Depends(get_session_store),
    handler: JsonRpcHandler = Depends(get_jsonrpc_handler),
) -> Response:
    """
    Accept a JSON-RPC message for an open stream.

    Returns:
        Response 202: Accepted; any response is pushed on the stream
        JSONResponse 400: Parse error (nothing is pushed)

    Raises:
        HTTPException 404: No stream with that session id is open
    """
    try:
        session = store.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e

    body = await request.body()
    try:
        message: Any = json.loads(body)
    except ValueError as e:
        logger.warning("unparseable stream message", session_id=session_id, error=str(e))
        return JSONResponse(
            parse_error(str(e)).to_dict(),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    response = await handler.handle(message)
    if response is not None:
        await session.send(response.to_dict())
    return Response(content="Accepted", status_code=status.HTTP_202_ACCEPTED)
