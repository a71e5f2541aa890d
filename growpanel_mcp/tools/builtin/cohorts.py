"""
getCohorts - cohort retention metrics.

For each cohort: initial MRR and customers, then retention and churn per
period after the cohort start. The upstream payload is returned as-is.
"""

from datetime import date

from growpanel_mcp.clients.growpanel import GrowPanelClient
from growpanel_mcp.models.domain import RawValue, RegisteredTool, ToolDefinition
from growpanel_mcp.models.filters import ReportFilters, input_json_schema
from growpanel_mcp.models.reports import CohortReport
from growpanel_mcp.tools.builtin.common import Today, with_default_date

NAME = "getCohorts"
REPORT_KIND = "cohort"
DESCRIPTION = (
    "Retrieve cohort metrics from GrowPanel, including MRR and customer "
    "retention/churn over periods"
)


def create_cohorts_tool(client: GrowPanelClient, today: Today = date.today) -> RegisteredTool:
    """Build the getCohorts registry entry bound to ``client``."""

    async def run(filters: ReportFilters) -> RawValue:
        payload = await client.fetch_report(REPORT_KIND, with_default_date(filters, today))
        return RawValue(value=payload)

    return RegisteredTool(
        definition=ToolDefinition(
            name=NAME,
            description=DESCRIPTION,
            input_schema=input_json_schema(ReportFilters),
            output_schema=CohortReport.model_json_schema(),
        ),
        input_model=ReportFilters,
        handler=run,
    )
