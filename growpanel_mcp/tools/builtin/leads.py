"""
getLeads - lead, trial and conversion metrics.

Includes total leads, trials, converted trials, conversion rates,
forecasted conversions and growth rates per period. The upstream payload is
returned as-is; the dispatcher renders it as JSON text.
"""

from datetime import date

from growpanel_mcp.clients.growpanel import GrowPanelClient
from growpanel_mcp.models.domain import RawValue, RegisteredTool, ToolDefinition
from growpanel_mcp.models.filters import LeadsFilters, input_json_schema
from growpanel_mcp.models.reports import LeadsReport
from growpanel_mcp.tools.builtin.common import Today, with_default_date

NAME = "getLeads"
REPORT_KIND = "leads"
DESCRIPTION = (
    "Retrieve lead, trial, and conversion metrics from GrowPanel, including "
    "conversion rates, trial stats, and forecasts"
)


def create_leads_tool(client: GrowPanelClient, today: Today = date.today) -> RegisteredTool:
    """Build the getLeads registry entry bound to ``client``."""

    async def run(filters: LeadsFilters) -> RawValue:
        payload = await client.fetch_report(REPORT_KIND, with_default_date(filters, today))
        return RawValue(value=payload)

    return RegisteredTool(
        definition=ToolDefinition(
            name=NAME,
            description=DESCRIPTION,
            input_schema=input_json_schema(LeadsFilters),
            output_schema=LeadsReport.model_json_schema(),
        ),
        input_model=LeadsFilters,
        handler=run,
    )
