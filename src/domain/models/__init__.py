"""Domain models package."""

from .calendar import FiscalYear, FiscalYearDates, MonthKey, parse_date
from .comparison import (
    ComparisonResult,
    MonthComparisonCell,
    MonthComparisonRow,
    YearDelta,
    YearTotals,
)
from .fixed_costs import (
    Active,
    CancellationStatus,
    Cancelled,
    FixedCostDefinition,
    Frequency,
    LegacySchedule,
    MonthlySchedule,
    Schedule,
    WeeklySchedule,
    YearlySchedule,
    service_id_for,
)
from .ledger import (
    DailyFigure,
    MonthlySummary,
    StoredSummary,
    SundryExpense,
    WageRecord,
    sunday_based_weekday,
)
from .reconciliation import ReconciliationConflict, ReconciliationOutcome
from .vat import VatReturn, VatStatus, VatSummary

__all__ = [
    "FiscalYear",
    "FiscalYearDates",
    "MonthKey",
    "parse_date",
    "ComparisonResult",
    "MonthComparisonCell",
    "MonthComparisonRow",
    "YearDelta",
    "YearTotals",
    "Active",
    "CancellationStatus",
    "Cancelled",
    "FixedCostDefinition",
    "Frequency",
    "LegacySchedule",
    "MonthlySchedule",
    "Schedule",
    "WeeklySchedule",
    "YearlySchedule",
    "service_id_for",
    "DailyFigure",
    "MonthlySummary",
    "StoredSummary",
    "SundryExpense",
    "WageRecord",
    "sunday_based_weekday",
    "ReconciliationConflict",
    "ReconciliationOutcome",
    "VatReturn",
    "VatStatus",
    "VatSummary",
]
