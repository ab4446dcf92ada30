"""Monthly profit-and-loss aggregation."""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from src.domain.models.calendar import MonthKey
from src.domain.models.fixed_costs import FixedCostDefinition
from src.domain.models.ledger import (
    DailyFigure,
    MonthlySummary,
    SundryExpense,
    WageRecord,
)
from src.domain.services.recurrence import sum_fixed_costs

ZERO = Decimal("0")


def compute_monthly_summary(
    month_key: MonthKey | str,
    daily_figures: Iterable[DailyFigure],
    wage_record: WageRecord | None,
    fixed_costs: Iterable[FixedCostDefinition],
    sundries: Iterable[SundryExpense],
    *,
    updated_at: datetime | None = None,
) -> MonthlySummary:
    """Combine the four ledger streams into one month's summary.

    Records dated outside the month are ignored, so callers may pass a
    whole year's daily figures or sundries. A missing wage record counts
    as zero. Friday pay is not subtracted here: it is modelled as a weekly
    fixed cost and is already inside ``fixed_costs``.

    Args:
        month_key: Month to summarise.
        daily_figures: Daily takings candidates.
        wage_record: Wage run for the month, if one was entered.
        fixed_costs: Every fixed cost defined for the fiscal year.
        sundries: Sundry expense candidates.
        updated_at: Timestamp stamped on the summary.

    Returns:
        MonthlySummary: Totals with ``profit`` equal to net income minus
        wages, fixed costs, and sundries.
    """
    month = MonthKey.parse(month_key)

    gross_income = ZERO
    net_income = ZERO
    vat = ZERO
    for figure in daily_figures:
        if not month.contains(figure.date):
            continue
        gross_income += figure.gross_income
        net_income += figure.net_income
        vat += figure.vat

    wages = wage_record.total if wage_record is not None else ZERO
    fixed_cost_total = sum_fixed_costs(fixed_costs, month)
    sundry_total = sum(
        (sundry.amount for sundry in sundries if month.contains(sundry.date)),
        ZERO,
    )
    profit = net_income - wages - fixed_cost_total - sundry_total

    return MonthlySummary(
        month=str(month),
        gross_income=gross_income,
        net_income=net_income,
        vat=vat,
        wages=wages,
        fixed_costs=fixed_cost_total,
        sundries=sundry_total,
        profit=profit,
        updated_at=updated_at,
    )


__all__ = ["compute_monthly_summary"]
