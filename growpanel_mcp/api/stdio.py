"""
Stdio Transport - newline-delimited JSON-RPC

For MCP clients that spawn the server as a subprocess. Each line read from
stdin is one JSON-RPC message; each response is written to stdout as one
line. Notifications produce no output. Logs go to stderr, so stdout only
ever carries protocol messages.
"""

import asyncio
import json
from typing import Any, TextIO

from growpanel_mcp.observability.logging import get_logger
from growpanel_mcp.protocol.handler import JsonRpcHandler
from growpanel_mcp.protocol.jsonrpc import parse_error

logger = get_logger(__name__)


def write_message(stdout: TextIO, message: dict[str, Any]) -> None:
    """Write one JSON-RPC message as a single line and flush it."""
    stdout.write(json.dumps(message) + "\n")
    stdout.flush()


async def serve_stdio(handler: JsonRpcHandler, stdin: TextIO, stdout: TextIO) -> None:
    """
    Answer JSON-RPC messages from ``stdin`` until end of input.

    Args:
        handler: The JSON-RPC method router.
        stdin: Line-oriented input stream.
        stdout: Output stream for responses.
    """
    logger.info("stdio transport started")
    while True:
        line = await asyncio.to_thread(stdin.readline)
        if not line:
            break
        if not line.strip():
            continue

        try:
            message: Any = json.loads(line)
        except ValueError as e:
            logger.warning("unparseable stdio message", error=str(e))
            write_message(stdout, parse_error(str(e)).to_dict())
            continue

        response = await handler.handle(message)
        if response is not None:
            write_message(stdout, response.to_dict())
    logger.info("stdio transport closed")
