"""Tests for recurring fixed-cost accrual."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain import evaluate_fixed_cost_for_month
from src.domain.models.fixed_costs import (
    Cancelled,
    FixedCostDefinition,
    LegacySchedule,
    MonthlySchedule,
    WeeklySchedule,
    YearlySchedule,
)
from src.domain.services.recurrence import (
    is_active_in_month,
    sum_fixed_costs,
)


def _cost(schedule, cost="100", status=None) -> FixedCostDefinition:
    cost_def = FixedCostDefinition(
        service_id="svc",
        service="Service",
        cost=Decimal(cost),
        schedule=schedule,
    )
    if status is not None:
        return cost_def.cancel(status)
    return cost_def


def test_weekly_cost_counts_fridays_in_october_2024() -> None:
    """Four Fridays in October 2024 give four times the unit cost."""
    cost_def = _cost(WeeklySchedule(day_of_week=5))

    assert evaluate_fixed_cost_for_month(cost_def, "2024-10") == Decimal("400")
    assert evaluate_fixed_cost_for_month(cost_def, "2024-11") == Decimal("500")


@pytest.mark.parametrize(
    ("month_key", "expected"),
    [
        ("2024-10", Decimal("100")),
        ("2024-11", Decimal("0")),
        ("2025-01", Decimal("100")),
        ("2025-02", Decimal("0")),
        ("2024-02", Decimal("0")),
    ],
)
def test_monthly_cost_on_day_31_skips_short_months(month_key, expected) -> None:
    cost_def = _cost(MonthlySchedule(day_of_month=31))

    assert evaluate_fixed_cost_for_month(cost_def, month_key) == expected


def test_monthly_cost_on_day_29_in_leap_february() -> None:
    cost_def = _cost(MonthlySchedule(day_of_month=29))

    assert evaluate_fixed_cost_for_month(cost_def, "2024-02") == Decimal("100")
    assert evaluate_fixed_cost_for_month(cost_def, "2025-02") == Decimal("0")


def test_yearly_cost_only_in_its_month() -> None:
    """Only the month is compared; 02-30 still counts in February."""
    cost_def = _cost(YearlySchedule(month=2, day=30))

    assert evaluate_fixed_cost_for_month(cost_def, "2025-02") == Decimal("100")
    assert evaluate_fixed_cost_for_month(cost_def, "2025-03") == Decimal("0")


def test_legacy_cost_counts_every_month() -> None:
    cost_def = _cost(LegacySchedule())

    for month_key in ("2024-10", "2025-02", "2025-09"):
        assert evaluate_fixed_cost_for_month(cost_def, month_key) == Decimal("100")


def test_cancellation_keeps_the_cancellation_month() -> None:
    """A cost cancelled mid-November counts through November only."""
    cost_def = _cost(MonthlySchedule(day_of_month=1), status=date(2024, 11, 15))

    assert evaluate_fixed_cost_for_month(cost_def, "2024-10") == Decimal("100")
    assert evaluate_fixed_cost_for_month(cost_def, "2024-11") == Decimal("100")
    assert evaluate_fixed_cost_for_month(cost_def, "2024-12") == Decimal("0")
    assert evaluate_fixed_cost_for_month(cost_def, "2025-06") == Decimal("0")


def test_cancelled_weekly_cost_is_not_prorated() -> None:
    """All Fridays of the cancellation month still count."""
    cost_def = _cost(WeeklySchedule(day_of_week=5), status=date(2024, 10, 2))

    assert evaluate_fixed_cost_for_month(cost_def, "2024-10") == Decimal("400")
    assert is_active_in_month(cost_def, "2024-11") is False


def test_is_active_for_uncancelled_cost() -> None:
    cost_def = _cost(MonthlySchedule(day_of_month=1))

    assert is_active_in_month(cost_def, "2030-01") is True
    assert isinstance(cost_def.cancel(date(2025, 1, 1)).status, Cancelled)


def test_sum_fixed_costs_adds_every_definition() -> None:
    cost_defs = [
        _cost(WeeklySchedule(day_of_week=5)),
        _cost(MonthlySchedule(day_of_month=31), cost="50"),
        _cost(YearlySchedule(month=10, day=1), cost="25"),
    ]

    assert sum_fixed_costs(cost_defs, "2024-10") == Decimal("475")
    assert sum_fixed_costs([], "2024-10") == Decimal("0")
