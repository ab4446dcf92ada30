"""Recurring fixed-cost accrual rules.

A cost's contribution to a month is decided in two steps. Cancellation
gating comes first: a cancelled cost still counts in full for its
cancellation month and every month before it, and counts nothing after
it. The frequency rule for the schedule variant then sets the amount.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.models.calendar import MonthKey
from src.domain.models.fixed_costs import (
    Cancelled,
    FixedCostDefinition,
    LegacySchedule,
    MonthlySchedule,
    WeeklySchedule,
    YearlySchedule,
)
from src.domain.services.fiscal_calendar import count_weekday_in_month

ZERO = Decimal("0")


def is_active_in_month(
    cost_def: FixedCostDefinition,
    month_key: MonthKey | str,
) -> bool:
    """Return True when the cost is not cancelled before the month."""
    if not isinstance(cost_def.status, Cancelled):
        return True
    month = MonthKey.parse(month_key)
    return month <= MonthKey.from_date(cost_def.status.on)


def occurrences_in_month(
    cost_def: FixedCostDefinition,
    month_key: MonthKey | str,
) -> int:
    """Return how many times the schedule charges within the month."""
    month = MonthKey.parse(month_key)
    schedule = cost_def.schedule
    if isinstance(schedule, WeeklySchedule):
        return count_weekday_in_month(month, schedule.day_of_week)
    if isinstance(schedule, MonthlySchedule):
        return 1 if schedule.day_of_month <= month.days_in_month else 0
    if isinstance(schedule, YearlySchedule):
        # Only the month is compared; the day is not checked against
        # the month length.
        return 1 if schedule.month == month.month else 0
    if isinstance(schedule, LegacySchedule):
        return 1
    raise TypeError(f"Unsupported schedule: {schedule!r}")


def evaluate_fixed_cost_for_month(
    cost_def: FixedCostDefinition,
    month_key: MonthKey | str,
) -> Decimal:
    """Return the amount a fixed cost accrues in a month.

    Args:
        cost_def: Fixed cost definition to evaluate.
        month_key: Month in ``YYYY-MM`` format.

    Returns:
        Decimal: Unit cost times the number of occurrences, or zero when
        the cost was cancelled before the month.
    """
    if not is_active_in_month(cost_def, month_key):
        return ZERO
    return cost_def.cost * occurrences_in_month(cost_def, month_key)


def sum_fixed_costs(
    cost_defs: Iterable[FixedCostDefinition],
    month_key: MonthKey | str,
) -> Decimal:
    """Sum the monthly contribution of every fixed cost."""
    month = MonthKey.parse(month_key)
    return sum(
        (evaluate_fixed_cost_for_month(cost_def, month) for cost_def in cost_defs),
        ZERO,
    )


__all__ = [
    "is_active_in_month",
    "occurrences_in_month",
    "evaluate_fixed_cost_for_month",
    "sum_fixed_costs",
]
