"""Models Package - domain models, filter contracts and report contracts."""

from growpanel_mcp.models.domain import (
    InvocationRequest,
    RawValue,
    RegisteredTool,
    TextContent,
    ToolDefinition,
    ToolEnvelope,
    ToolOutcome,
)
from growpanel_mcp.models.filters import (
    LeadsFilters,
    ReportFilters,
    input_json_schema,
    validate_arguments,
)

__all__ = [
    "InvocationRequest",
    "RawValue",
    "RegisteredTool",
    "TextContent",
    "ToolDefinition",
    "ToolEnvelope",
    "ToolOutcome",
    "LeadsFilters",
    "ReportFilters",
    "input_json_schema",
    "validate_arguments",
]
