"""Tests for the fiscal calendar helpers."""

from datetime import date, datetime, timedelta

import pytest

from src.domain import fiscal_year_months, is_date_in_fiscal_year
from src.domain.errors import ValidationError
from src.domain.services import fiscal_calendar


@pytest.mark.parametrize("start_year", [1999, 2023, 2024, 2099])
def test_fiscal_year_months_returns_twelve_ordered_keys(start_year) -> None:
    """Months should run from October to the following September."""
    label = f"{start_year}-{(start_year + 1) % 100:02d}"

    months = fiscal_year_months(label)

    assert len(months) == 12
    assert len(set(months)) == 12
    assert months[0] == f"{start_year}-10"
    assert months[-1] == f"{start_year + 1}-09"
    assert months == sorted(months)


def test_fiscal_year_dates_are_inclusive_bounds() -> None:
    """Dates should span 1 October to 30 September."""
    dates = fiscal_calendar.fiscal_year_dates("2024-25")

    assert dates.start == date(2024, 10, 1)
    assert dates.end == date(2025, 9, 30)


def test_is_date_in_fiscal_year_matches_bounds() -> None:
    """Membership should hold exactly between start and end."""
    dates = fiscal_calendar.fiscal_year_dates("2024-25")
    day = dates.start - timedelta(days=3)
    while day <= dates.end + timedelta(days=3):
        expected = dates.start <= day <= dates.end
        assert is_date_in_fiscal_year(day, "2024-25") is expected
        day += timedelta(days=1)


def test_is_date_in_fiscal_year_accepts_strings_and_datetimes() -> None:
    """ISO strings and datetimes should be reduced to their date."""
    assert is_date_in_fiscal_year("2025-09-30", "2024-25") is True
    assert is_date_in_fiscal_year("2025-10-01T08:00:00", "2024-25") is False
    assert is_date_in_fiscal_year(datetime(2024, 10, 1, 23, 59), "2024-25")


def test_is_past_fiscal_year_end_compares_date_only() -> None:
    """The year ends after 30 September."""
    assert not fiscal_calendar.is_past_fiscal_year_end(
        "2024-25",
        today=date(2025, 9, 30),
    )
    assert fiscal_calendar.is_past_fiscal_year_end(
        "2024-25",
        today=date(2025, 10, 1),
    )


def test_next_and_current_fiscal_year() -> None:
    """Labels should roll over on 1 October."""
    assert fiscal_calendar.next_fiscal_year("2024-25") == "2025-26"
    assert fiscal_calendar.next_fiscal_year("2099-00") == "2100-01"
    assert fiscal_calendar.current_fiscal_year(date(2024, 9, 30)) == "2023-24"
    assert fiscal_calendar.current_fiscal_year(date(2024, 10, 1)) == "2024-25"
    assert fiscal_calendar.fiscal_year_for_date("2025-02-14") == "2024-25"


def test_format_fiscal_year_display() -> None:
    assert fiscal_calendar.format_fiscal_year_display("2024-25") == "2024-2025"


def test_month_bounds_handles_leap_years() -> None:
    """February should end on the 29th in leap years."""
    assert fiscal_calendar.month_bounds("2024-02") == (
        date(2024, 2, 1),
        date(2024, 2, 29),
    )
    assert fiscal_calendar.month_bounds("2025-02")[1] == date(2025, 2, 28)


def test_count_weekday_in_month_counts_fridays() -> None:
    """October 2024 has Fridays on the 4th, 11th, 18th and 25th."""
    assert fiscal_calendar.count_weekday_in_month("2024-10", 5) == 4
    assert fiscal_calendar.count_weekday_in_month("2024-11", 5) == 5
    assert fiscal_calendar.count_weekday_in_month("2024-10", 2) == 5


def test_count_weekday_in_month_matches_brute_force() -> None:
    """The closed form should agree with walking the calendar."""
    for month in fiscal_year_months("2024-25"):
        year, month_number = (int(part) for part in month.split("-"))
        day = date(year, month_number, 1)
        counts = [0] * 7
        while day.month == month_number:
            counts[(day.weekday() + 1) % 7] += 1
            day += timedelta(days=1)
        for day_of_week in range(7):
            assert (
                fiscal_calendar.count_weekday_in_month(month, day_of_week)
                == counts[day_of_week]
            )


@pytest.mark.parametrize(
    "label",
    ["2024", "2024-26", "24-25", "2024/25", "", "abcd-ef"],
)
def test_malformed_fiscal_year_labels_raise(label) -> None:
    with pytest.raises(ValidationError):
        fiscal_year_months(label)


def test_malformed_dates_raise() -> None:
    with pytest.raises(ValidationError):
        is_date_in_fiscal_year("2024-13-01", "2024-25")
    with pytest.raises(ValidationError):
        fiscal_calendar.count_weekday_in_month("2024-10", 7)
