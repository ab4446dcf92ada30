"""Domain package for ledger rules and core models."""

from .errors import LedgerError, NotFoundError, StorageError, ValidationError
from .models import (
    DailyFigure,
    FiscalYear,
    FixedCostDefinition,
    MonthKey,
    MonthlySummary,
    SundryExpense,
    WageRecord,
)
from .policies import ensure_date_in_fiscal_year, ensure_month_in_fiscal_year
from .services import (
    build_comparison,
    compute_monthly_summary,
    evaluate_fixed_cost_for_month,
    fiscal_year_dates,
    fiscal_year_months,
    is_date_in_fiscal_year,
    is_past_fiscal_year_end,
    next_fiscal_year,
    pct_change,
    reconcile_summaries,
)

__all__ = [
    "LedgerError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "DailyFigure",
    "FiscalYear",
    "FixedCostDefinition",
    "MonthKey",
    "MonthlySummary",
    "SundryExpense",
    "WageRecord",
    "ensure_date_in_fiscal_year",
    "ensure_month_in_fiscal_year",
    "build_comparison",
    "compute_monthly_summary",
    "evaluate_fixed_cost_for_month",
    "fiscal_year_dates",
    "fiscal_year_months",
    "is_date_in_fiscal_year",
    "is_past_fiscal_year_end",
    "next_fiscal_year",
    "pct_change",
    "reconcile_summaries",
]
