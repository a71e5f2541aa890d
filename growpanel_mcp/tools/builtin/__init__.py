"""
Built-in Tools

The fixed GrowPanel report catalog: getMRR, getLeads, getCohorts.
"""

from datetime import date

from growpanel_mcp.clients.growpanel import GrowPanelClient
from growpanel_mcp.tools.builtin.cohorts import create_cohorts_tool
from growpanel_mcp.tools.builtin.common import Today
from growpanel_mcp.tools.builtin.leads import create_leads_tool
from growpanel_mcp.tools.builtin.mrr import create_mrr_tool
from growpanel_mcp.tools.registry import ToolRegistry


def build_tool_registry(client: GrowPanelClient, today: Today = date.today) -> ToolRegistry:
    """
    Build the report catalog, in the order tools/list advertises it.

    Args:
        client: Upstream client shared by all tools.
        today: Clock used for the default reporting period.
    """
    return ToolRegistry(
        [
            create_mrr_tool(client, today),
            create_leads_tool(client, today),
            create_cohorts_tool(client, today),
        ]
    )


__all__ = [
    "build_tool_registry",
    "create_cohorts_tool",
    "create_leads_tool",
    "create_mrr_tool",
]
