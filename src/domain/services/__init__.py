"""Domain services package."""

from .aggregation import compute_monthly_summary
from .comparison import build_comparison, compute_year_totals, pct_change
from .fiscal_calendar import (
    count_weekday_in_month,
    current_fiscal_year,
    fiscal_year_dates,
    fiscal_year_for_date,
    fiscal_year_months,
    format_fiscal_year_display,
    is_date_in_fiscal_year,
    is_past_fiscal_year_end,
    month_bounds,
    next_fiscal_year,
)
from .reconciliation import reconcile_summaries
from .recurrence import (
    evaluate_fixed_cost_for_month,
    is_active_in_month,
    occurrences_in_month,
    sum_fixed_costs,
)
from .vat import summarize_vat_returns

__all__ = [
    "compute_monthly_summary",
    "build_comparison",
    "compute_year_totals",
    "pct_change",
    "count_weekday_in_month",
    "current_fiscal_year",
    "fiscal_year_dates",
    "fiscal_year_for_date",
    "fiscal_year_months",
    "format_fiscal_year_display",
    "is_date_in_fiscal_year",
    "is_past_fiscal_year_end",
    "month_bounds",
    "next_fiscal_year",
    "reconcile_summaries",
    "evaluate_fixed_cost_for_month",
    "is_active_in_month",
    "occurrences_in_month",
    "sum_fixed_costs",
    "summarize_vat_returns",
]
