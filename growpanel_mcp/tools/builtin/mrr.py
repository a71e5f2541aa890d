"""
getMRR - recurring revenue metrics.

Retrieves MRR, ARR, ARPA, ASP, churn, customer movements, LTV, FX
adjustments and net MRR movements for a date range.

The upstream payload is validated against MRRReport and rendered as a
markdown summary, followed by the upstream rows as JSON, exactly as received.
"""

import json
from datetime import date
from typing import Any, Optional

from growpanel_mcp.clients.growpanel import GrowPanelClient
from growpanel_mcp.models.domain import RegisteredTool, ToolDefinition, ToolEnvelope
from growpanel_mcp.models.filters import ReportFilters, input_json_schema
from growpanel_mcp.models.reports import MRRReport, MRRReportRow
from growpanel_mcp.tools.builtin.common import Today, with_default_date

NAME = "getMRR"
REPORT_KIND = "mrr"
DESCRIPTION = (
    "Retrieve MRR, ARR, ARPA, ASP, churn metrics, customer movements, LTV, "
    "FX adjustments, and net MRR movements from GrowPanel"
)


def format_cents(amount: float) -> str:
    """Render an amount in cents as dollars, e.g. 123456 -> '$1,234.56'."""
    return f"${amount / 100:,.2f}"


def format_row(row: MRRReportRow) -> str:
    """Markdown section for one reporting period."""
    lines = [
        f"## {row.date}",
        f"- **Total MRR**: {format_cents(row.total_mrr)}",
        f"- **Total ARR**: {format_cents(row.total_arr)}",
        f"- **MRR Change**: {format_cents(row.mrr_diff)}",
        f"- **Net MRR Change**: {format_cents(row.net_mrr_diff)}",
        f"- **New MRR**: {format_cents(row.new)}",
        f"- **Expansion**: {format_cents(row.expansion)}",
        f"- **Contraction**: {format_cents(row.contraction)}",
        f"- **Churn**: {format_cents(row.churn)}",
        f"- **Total Customers**: {row.total_customers:,.0f}",
        f"- **Customer Churn Rate**: {row.customer_churn_rate}%",
        f"- **MRR Churn Rate**: {row.mrr_churn_rate}%",
        f"- **Net MRR Churn Rate**: {row.net_mrr_churn_rate}%",
    ]
    # optional per-customer metrics are only shown when non-zero
    for label, value in (("ARPA", row.arpa), ("ASP", row.asp), ("LTV", row.ltv)):
        if value:
            lines.append(f"- **{label}**: {format_cents(value)}")
    return "\n".join(lines) + "\n"


def format_report(report: MRRReport, raw_rows: Optional[list[Any]] = None) -> ToolEnvelope:
    """
    Markdown summary block plus a raw JSON block.

    ``raw_rows`` are the rows as the upstream sent them; the raw block falls
    back to the validated rows when they are not given.
    """
    summary = "# MRR Report\n\n" + "\n".join(format_row(row) for row in report.result)
    if raw_rows is None:
        raw_rows = [row.model_dump() for row in report.result]
    raw = json.dumps(raw_rows, indent=2)
    return ToolEnvelope.from_text(summary, f"Raw data:\n```json\n{raw}\n```")


def create_mrr_tool(client: GrowPanelClient, today: Today = date.today) -> RegisteredTool:
    """Build the getMRR registry entry bound to ``client``."""

    async def run(filters: ReportFilters) -> ToolEnvelope:
        payload = await client.fetch_report(REPORT_KIND, with_default_date(filters, today))
        return format_report(MRRReport.model_validate(payload), raw_rows=payload["result"])

    return RegisteredTool(
        definition=ToolDefinition(
            name=NAME,
            description=DESCRIPTION,
            input_schema=input_json_schema(ReportFilters),
            output_schema=MRRReport.model_json_schema(),
        ),
        input_model=ReportFilters,
        handler=run,
    )
