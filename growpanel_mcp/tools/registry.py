"""
Tool Registry

This module implements the tool catalog. The registry is built once at
startup from a fixed set of tools and is read-only afterwards; it is passed
explicitly to the dispatcher and the protocol handler rather than looked up
from module state.

Pattern: Service Registry (tool inventory with callable handlers)
"""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from growpanel_mcp.core.exceptions import ToolNotFoundError
from growpanel_mcp.models.domain import RegisteredTool, ToolDefinition
from growpanel_mcp.observability.logging import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    Immutable registry of available tools.

    Tools keep their registration order, which is also the order of the
    catalog returned by list().

    Example:
        >>> registry = ToolRegistry([mrr_tool, leads_tool])
        >>> tool = registry.get("getMRR")
        >>> [d.name for d in registry.list()]
        ['getMRR', 'getLeads']
    """

    def __init__(self, tools: Iterable[RegisteredTool] = ()) -> None:
        """
        Build the registry.

        Args:
            tools: Tools in catalog order.

        Raises:
            ValueError: If two tools share a name.
        """
        entries: dict[str, RegisteredTool] = {}
        for tool in tools:
            if tool.name in entries:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            entries[tool.name] = tool
            logger.debug("registered tool", tool=tool.name)
        self._tools = MappingProxyType(entries)

    def get(self, name: str) -> RegisteredTool:
        """
        Resolve a tool by name.

        Raises:
            ToolNotFoundError: If the tool is not registered.
        """
        try:
            return self._tools[name]
        except KeyError:
            raise ToolNotFoundError(name) from None

    def has(self, name: str) -> bool:
        """Check if a tool is registered."""
        return name in self._tools

    def names(self) -> tuple[str, ...]:
        """Registered tool names in catalog order."""
        return tuple(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[RegisteredTool]:
        return iter(self._tools.values())

    def list(self) -> list[ToolDefinition]:
        """
        List all tool definitions in registration order.

        Returns:
            List of ToolDefinition instances.
        """
        return [tool.definition for tool in self._tools.values()]
