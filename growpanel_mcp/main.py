"""
GrowPanel MCP Server - Main Application Entry Point

This module provides the FastAPI application that exposes GrowPanel
analytics reports as MCP tools over JSON-RPC 2.0.

Both transports share one JsonRpcHandler, built in the lifespan together
with the upstream client, the tool registry and the dispatcher. With
``--stdio`` the same handler serves newline-delimited JSON-RPC on
stdin/stdout instead of HTTP.
"""

import argparse
import asyncio
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional, Sequence

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from growpanel_mcp import __version__
from growpanel_mcp.api.middleware.logging import RequestLoggingMiddleware
from growpanel_mcp.api.routes import events_router, health_router, stream_router
from growpanel_mcp.api.stdio import serve_stdio
from growpanel_mcp.clients.growpanel import GrowPanelClient
from growpanel_mcp.core.config import Settings, get_settings
from growpanel_mcp.observability.logging import configure_logging, get_logger
from growpanel_mcp.protocol.handler import JsonRpcHandler
from growpanel_mcp.sessions.store import StreamSessionStore
from growpanel_mcp.tools.builtin import build_tool_registry
from growpanel_mcp.tools.dispatcher import ToolDispatcher
from growpanel_mcp.tools.registry import ToolRegistry

# Application metadata
APP_NAME = "GrowPanel MCP Server"
APP_VERSION = __version__
APP_DESCRIPTION = "GrowPanel analytics reports as Model Context Protocol tools"

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[ToolRegistry] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment).
        registry: Tool catalog override; built from the GrowPanel client when None.
        http_client: Pre-configured HTTP client for the upstream (for testing).

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_logging(level=settings.log_level, force=True)

        client = GrowPanelClient(
            base_url=settings.api_url,
            api_token=settings.api_token,
            http_client=http_client,
        )
        tools = registry if registry is not None else build_tool_registry(client)
        if not settings.api_token.get_secret_value():
            logger.warning("GROWPANEL_API_TOKEN is not set; tool calls will fail")

        app.state.client = client
        app.state.registry = tools
        app.state.dispatcher = ToolDispatcher(tools)
        app.state.jsonrpc_handler = JsonRpcHandler(
            tools, app.state.dispatcher, server_name=APP_NAME, server_version=APP_VERSION
        )
        app.state.session_store = StreamSessionStore()

        logger.info(
            "service starting",
            service=settings.service_name,
            version=APP_VERSION,
            environment=settings.environment,
            tools=tools.names(),
        )

        yield

        logger.info("service shutting down", service=settings.service_name)
        await client.close()

    app = FastAPI(
        title=APP_NAME,
        description=APP_DESCRIPTION,
        version=APP_VERSION,
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(events_router)
    app.include_router(stream_router)

    @app.get("/", tags=["Info"])
    async def root() -> dict[str, Any]:
        """Root endpoint returning basic service information."""
        return {
            "service": APP_NAME,
            "version": APP_VERSION,
            "transports": {
                "request_response": "POST /events",
                "stream": "GET /events",
                "messages": "POST /messages?session_id=<id>",
            },
        }

    return app


async def run_stdio(
    settings: Settings,
    http_client: Optional[httpx.AsyncClient] = None,
    stdin=None,
    stdout=None,
) -> None:
    """Serve JSON-RPC over stdin/stdout until end of input."""
    client = GrowPanelClient(
        base_url=settings.api_url,
        api_token=settings.api_token,
        http_client=http_client,
    )
    tools = build_tool_registry(client)
    if not settings.api_token.get_secret_value():
        logger.warning("GROWPANEL_API_TOKEN is not set; tool calls will fail")
    handler = JsonRpcHandler(
        tools, ToolDispatcher(tools), server_name=APP_NAME, server_version=APP_VERSION
    )
    try:
        await serve_stdio(
            handler,
            sys.stdin if stdin is None else stdin,
            sys.stdout if stdout is None else stdout,
        )
    finally:
        await client.close()


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the server (console script entry point)."""
    parser = argparse.ArgumentParser(description=APP_DESCRIPTION)
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Serve newline-delimited JSON-RPC on stdin/stdout instead of HTTP",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(level=settings.log_level)
    if args.stdio:
        asyncio.run(run_stdio(settings))
        return
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
