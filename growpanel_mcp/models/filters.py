"""
Filter Models - input contracts for the report tools.

Each tool accepts a flat set of optional filters that are forwarded to the
GrowPanel reports API as query parameters. The models here are the single
source of truth for both argument validation and the ``inputSchema``
advertised by ``tools/list``.

Field order matters: it is the order in which filters are serialized into
the upstream query string.

Note: ``date`` is only checked against the ``yyyyMMdd-yyyyMMdd`` shape.
Start/end ordering and calendar validity are left to the upstream API.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from growpanel_mcp.core.exceptions import FilterValidationError

DATE_RANGE_PATTERN = r"^\d{8}-\d{8}$"

Interval = Literal["day", "week", "month", "quarter", "year"]
Region = Literal["europe", "asia", "north_america", "emea", "apac"]
BillingFrequency = Literal["week", "month", "quarter", "year"]

DEFAULT_INTERVAL = "month"


# =============================================================================
# ReportFilters - getMRR / getCohorts
# =============================================================================


class ReportFilters(BaseModel):
    """
    Filters accepted by the MRR and cohort reports.

    Attributes:
        date: Reporting period, yyyyMMdd-yyyyMMdd. Synthesized when absent.
        interval: Aggregation interval, defaults to month.
        region: Regional filter.
        currency: 3-letter currency code.
        billing_freq: Billing frequency filter.
        payment_method: Payment method filter, e.g. visa.
        age: Customer age group filter.
    """

    date: Optional[str] = Field(
        default=None,
        pattern=DATE_RANGE_PATTERN,
        description=(
            "Reporting period in format yyyyMMdd-yyyyMMdd, e.g., 20241128-20250828. "
            "Defaults to last 365 days if omitted"
        ),
    )
    interval: Interval = Field(
        default=DEFAULT_INTERVAL,
        description="Reporting interval. Defaults to 'month'",
    )
    region: Optional[Region] = Field(
        default=None, description="Filter by region (optional)"
    )
    currency: Optional[str] = Field(
        default=None,
        min_length=3,
        max_length=3,
        description="Filter by 3-letter currency code in lower case, e.g., usd, eur (optional)",
    )
    billing_freq: Optional[BillingFrequency] = Field(
        default=None,
        description="Filter by billing frequency (week, month, quarter, year - optional)",
    )
    payment_method: Optional[str] = Field(
        default=None,
        description="Filter by payment method, e.g., visa, mastercard (optional)",
    )
    age: Optional[str] = Field(
        default=None, description="Filter by customer age group (optional)"
    )

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# LeadsFilters - getLeads
# =============================================================================


class LeadsFilters(BaseModel):
    """Filters accepted by the leads report (no billing frequency)."""

    date: Optional[str] = Field(
        default=None,
        pattern=DATE_RANGE_PATTERN,
        description=(
            "Reporting period in format yyyyMMdd-yyyyMMdd. "
            "Defaults to last 365 days if omitted"
        ),
    )
    interval: Interval = Field(
        default=DEFAULT_INTERVAL,
        description="Reporting interval. Defaults to 'month'",
    )
    region: Optional[Region] = Field(
        default=None, description="Filter by region (optional)"
    )
    currency: Optional[str] = Field(
        default=None,
        min_length=3,
        max_length=3,
        description="Filter by 3-letter currency code, e.g., usd, eur (optional)",
    )
    payment_method: Optional[str] = Field(
        default=None,
        description="Filter by payment method, e.g., visa, mastercard (optional)",
    )
    age: Optional[str] = Field(
        default=None, description="Filter by customer age group (optional)"
    )

    model_config = {"frozen": True, "extra": "ignore"}


# =============================================================================
# Validation
# =============================================================================


def validate_arguments(model: type[BaseModel], arguments: Any) -> BaseModel:
    """
    Validate raw tool arguments against a filter model.

    All-or-nothing: either a complete, frozen filters instance is returned
    or FilterValidationError is raised describing every failure.

    Args:
        model: The filter model registered for the tool.
        arguments: Untyped arguments from the tools/call request.

    Returns:
        The validated filters instance.

    Raises:
        FilterValidationError: If any field fails its contract.
    """
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]) or None,
                "reason": error["msg"],
            }
            for error in e.errors()
        ]
        first = errors[0]
        location = first["field"] or "arguments"
        raise FilterValidationError(
            f"Invalid {location}: {first['reason']}",
            field=first["field"],
            reason=first["reason"],
            errors=errors,
        ) from e


# =============================================================================
# JSON Schema derivation for tools/list
# =============================================================================


def input_json_schema(model: type[BaseModel]) -> dict[str, Any]:
    """
    Derive the MCP ``inputSchema`` for a filter model.

    Pydantic renders Optional[X] as ``anyOf: [X, null]``; MCP clients expect
    the plain property, so nullable variants are collapsed and titles dropped.

    Returns:
        {"type": "object", "properties": {...}, "required": [...]}
    """
    schema = model.model_json_schema()
    properties = {
        name: _simplify_property(prop)
        for name, prop in schema.get("properties", {}).items()
    }
    return {
        "type": "object",
        "properties": properties,
        "required": list(schema.get("required", [])),
    }


def _simplify_property(prop: dict[str, Any]) -> dict[str, Any]:
    simplified = dict(prop)
    variants = simplified.pop("anyOf", None)
    if variants:
        concrete = [variant for variant in variants if variant.get("type") != "null"]
        if len(concrete) == 1:
            simplified = {**concrete[0], **simplified}
        else:
            simplified["anyOf"] = concrete
    simplified.pop("title", None)
    if "default" in simplified and simplified["default"] is None:
        del simplified["default"]
    return simplified
