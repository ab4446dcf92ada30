"""Fiscal calendar helpers.

Fiscal years run from 1 October to 30 September and are labelled
``"YYYY-YY"``. Every function accepts either a label or a
:class:`FiscalYear` and returns plain strings where callers expect them.
"""

from datetime import date, datetime

from src.domain.models.calendar import (
    FiscalYear,
    FiscalYearDates,
    MonthKey,
    parse_date,
)
from src.domain.models.ledger import sunday_based_weekday
from src.domain.errors import ValidationError


def fiscal_year_dates(fiscal_year: FiscalYear | str) -> FiscalYearDates:
    """Return the inclusive start and end dates of a fiscal year.

    Args:
        fiscal_year: Fiscal year label such as ``"2024-25"``.

    Returns:
        FiscalYearDates: 1 October of the first year to 30 September of
        the second year.
    """
    return FiscalYear.parse(fiscal_year).dates


def fiscal_year_months(fiscal_year: FiscalYear | str) -> list[str]:
    """Return the twelve ``YYYY-MM`` keys of a fiscal year, October first."""
    return [str(month) for month in FiscalYear.parse(fiscal_year).months]


def is_date_in_fiscal_year(
    value: date | datetime | str,
    fiscal_year: FiscalYear | str,
) -> bool:
    """Return True when the date lies inside the fiscal year, inclusive."""
    return FiscalYear.parse(fiscal_year).contains(parse_date(value))


def is_past_fiscal_year_end(
    fiscal_year: FiscalYear | str,
    today: date | None = None,
) -> bool:
    """Return True when today (date only) is after 30 September."""
    current = parse_date(today) if today is not None else date.today()
    return current > FiscalYear.parse(fiscal_year).end


def next_fiscal_year(fiscal_year: FiscalYear | str) -> str:
    """Return the label of the following fiscal year."""
    return FiscalYear.parse(fiscal_year).next().label


def fiscal_year_for_date(value: date | datetime | str) -> str:
    """Return the label of the fiscal year containing the date."""
    return FiscalYear.containing(parse_date(value)).label


def current_fiscal_year(today: date | None = None) -> str:
    return fiscal_year_for_date(today or date.today())


def format_fiscal_year_display(fiscal_year: FiscalYear | str) -> str:
    """Return a display label such as ``"2024-2025"``."""
    parsed = FiscalYear.parse(fiscal_year)
    return f"{parsed.start_year}-{parsed.start_year + 1}"


def month_bounds(month_key: MonthKey | str) -> tuple[date, date]:
    """Return the first and last calendar day of a month."""
    month = MonthKey.parse(month_key)
    return month.first_day, month.last_day


def count_weekday_in_month(
    month_key: MonthKey | str,
    day_of_week: int,
) -> int:
    """Count the dates in a month falling on a weekday.

    Args:
        month_key: Month to inspect.
        day_of_week: Weekday numbered 0=Sunday .. 6=Saturday.

    Returns:
        int: Number of occurrences, always 4 or 5.
    """
    if not 0 <= day_of_week <= 6:
        raise ValidationError(
            f"dayOfWeek must be between 0 and 6, got {day_of_week}"
        )
    month = MonthKey.parse(month_key)
    first_weekday = sunday_based_weekday(month.first_day)
    first_match = 1 + (day_of_week - first_weekday) % 7
    return (month.days_in_month - first_match) // 7 + 1


__all__ = [
    "fiscal_year_dates",
    "fiscal_year_months",
    "is_date_in_fiscal_year",
    "is_past_fiscal_year_end",
    "next_fiscal_year",
    "fiscal_year_for_date",
    "current_fiscal_year",
    "format_fiscal_year_display",
    "month_bounds",
    "count_weekday_in_month",
]
