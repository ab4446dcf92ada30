"""Policies guarding ledger entries against the wrong fiscal year."""

from datetime import date, datetime

from src.domain.errors import ValidationError
from src.domain.models.calendar import FiscalYear, MonthKey, parse_date


def ensure_date_in_fiscal_year(
    value: date | datetime | str,
    fiscal_year: FiscalYear | str,
) -> date:
    """Return the parsed date when it belongs to the fiscal year.

    Args:
        value: Entry date.
        fiscal_year: Fiscal year the entry is filed under.

    Returns:
        date: Parsed entry date.

    Raises:
        ValidationError: If the date is malformed or outside the year.
    """
    parsed_year = FiscalYear.parse(fiscal_year)
    parsed_date = parse_date(value)
    if not parsed_year.contains(parsed_date):
        raise ValidationError(
            f"Date {parsed_date.isoformat()} is outside fiscal year "
            f"{parsed_year.label}"
        )
    return parsed_date


def ensure_month_in_fiscal_year(
    month_key: MonthKey | str,
    fiscal_year: FiscalYear | str,
) -> MonthKey:
    """Return the parsed month when it is one of the fiscal year's twelve."""
    parsed_year = FiscalYear.parse(fiscal_year)
    month = MonthKey.parse(month_key)
    if not parsed_year.contains_month(month):
        raise ValidationError(
            f"Month {month} is outside fiscal year {parsed_year.label}"
        )
    return month


__all__ = ["ensure_date_in_fiscal_year", "ensure_month_in_fiscal_year"]
