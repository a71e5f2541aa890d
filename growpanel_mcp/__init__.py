"""GrowPanel MCP Server - GrowPanel analytics reports as MCP tools."""

__version__ = "1.0.0"
