"""
Report Models - output contracts of the GrowPanel reports API.

These describe the success payloads of the three upstream reports. The MRR
tool validates its payload against MRRReport before formatting; the leads
and cohort tools pass the payload through, so their models only document
the contract (see ToolDefinition.output_schema).

Monetary amounts are integers in cents; rates are floats in percent.
"""

from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# MRR report - /reports/mrr
# =============================================================================


class MRRReportRow(BaseModel):
    """One reporting period of the MRR report."""

    date: str
    end_date: str
    new: float
    expansion: float
    contraction: float
    churn: float
    reactivation: float
    mrr_diff: float
    total_mrr: float
    total_arr: float
    total_customers: float
    arpa: Optional[float] = None
    asp: Optional[float] = None
    ltv: Optional[float] = None
    customer_churn_rate: float
    mrr_churn_rate: float
    net_mrr_churn_rate: float
    fx_adjustment: float
    customers_diff: float
    new_customers: float
    expansion_customers: float
    contraction_customers: float
    churn_customers: float
    reactivation_customers: float
    segment_entry: float
    segment_entry_customers: float
    segment_exit: float
    segment_exit_customers: float
    update: Optional[float]
    update_customers: Optional[float]
    customer_change_pct: float
    mrr_change_pct: float
    customer_churn_avg: float
    net_mrr_diff: float


class MRRReport(BaseModel):
    """MRR report response wrapper."""

    result: list[MRRReportRow] = Field(..., description="One row per interval")


# =============================================================================
# Leads report - /reports/leads
# =============================================================================


class LeadsReportRow(BaseModel):
    """One reporting period of the leads/trials funnel."""

    date: str
    leads: float
    leads_percent_change: float
    trials: float
    trials_percent_change: float
    converted: float
    lead_to_trial_rate: float
    lead_to_trial_rate_percent_change: float
    trial_to_paid_rate: float
    trial_to_paid_rate_percent_change: float
    lead_to_paid_rate: float
    lead_to_paid_rate_percent_change: float
    lead_to_paid_days: float
    trial_to_paid_days: float
    conversions_forecast: Optional[float]
    trial_to_paid_rate_forecast: Optional[float]
    growthRate1: Optional[float]
    growthRate2: Optional[float]
    growthRate3: Optional[float]
    growthRate4: Optional[float]


class LeadsReport(BaseModel):
    """Leads report response wrapper."""

    result: list[LeadsReportRow]


# =============================================================================
# Cohort report - /reports/cohort
# =============================================================================


class CohortPeriod(BaseModel):
    """Retention figures for one period after the cohort start."""

    customers_change: float
    mrr_retained: float
    customers_retained: float
    mrr_retention: float
    customer_retention: float
    mrr_retention_relative: float
    customer_retention_relative: float
    mrr_churn: float
    customer_churn: float
    mrr_churn_relative: float
    customer_churn_relative: float


class CohortItem(BaseModel):
    """A cohort: its starting size and its retention over periods."""

    cohort_group: str = Field(..., description="Start date of the cohort")
    initial_mrr: float
    initial_customers: float
    periods: list[CohortPeriod]


class CohortReport(BaseModel):
    """Cohort report response wrapper."""

    items: list[CohortItem] = Field(..., alias="list", description="One entry per cohort")

    model_config = {"populate_by_name": True}
