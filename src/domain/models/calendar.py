"""Calendar value types for fiscal-year arithmetic.

A fiscal year runs from 1 October to 30 September and is labelled
``"YYYY-YY"`` (for example ``"2024-25"``). Months inside it are identified
by :class:`MonthKey` values rendered as ``"YYYY-MM"``.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime

from src.domain.constants import FISCAL_YEAR_START_MONTH, MONTH_NAMES
from src.domain.errors import ValidationError

_FISCAL_YEAR_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")
_MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def parse_date(value: date | datetime | str) -> date:
    """Return a date from a date, datetime, or ISO ``YYYY-MM-DD`` string.

    Raises:
        ValidationError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip().split("T")[0])
        except ValueError as exc:
            raise ValidationError(
                f"Invalid date '{value}'. Expected format YYYY-MM-DD."
            ) from exc
    raise ValidationError(f"Unsupported date value: {value!r}")


@dataclass(frozen=True, order=True)
class MonthKey:
    """Calendar month identified by year and month number."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Month out of range: {self.month}")

    @classmethod
    def parse(cls, value: "MonthKey | str") -> "MonthKey":
        """Parse a ``YYYY-MM`` string into a MonthKey.

        Raises:
            ValidationError: If the value is not a valid month key.
        """
        if isinstance(value, MonthKey):
            return value
        match = (
            _MONTH_KEY_PATTERN.match(value.strip())
            if isinstance(value, str)
            else None
        )
        if not match:
            raise ValidationError(
                f"Invalid month key '{value}'. Expected format YYYY-MM."
            )
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def from_date(cls, value: date) -> "MonthKey":
        return cls(value.year, value.month)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    @property
    def short_name(self) -> str:
        return MONTH_NAMES[self.month - 1][:3]

    def contains(self, value: date) -> bool:
        """Return True when the date falls inside this month."""
        return self.first_day <= value <= self.last_day

    def next(self) -> "MonthKey":
        if self.month == 12:
            return MonthKey(self.year + 1, 1)
        return MonthKey(self.year, self.month + 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class FiscalYearDates:
    """Inclusive start and end dates of a fiscal year."""

    start: date
    end: date


@dataclass(frozen=True, order=True)
class FiscalYear:
    """Fiscal year starting on 1 October of ``start_year``."""

    start_year: int

    @classmethod
    def parse(cls, value: "FiscalYear | str") -> "FiscalYear":
        """Parse a ``YYYY-YY`` label into a FiscalYear.

        The short second component must follow the first year, so
        ``"2024-25"`` is valid while ``"2024-26"`` is not.

        Raises:
            ValidationError: If the label is malformed.
        """
        if isinstance(value, FiscalYear):
            return value
        match = (
            _FISCAL_YEAR_PATTERN.match(value.strip())
            if isinstance(value, str)
            else None
        )
        if not match:
            raise ValidationError(
                f"Invalid fiscal year '{value}'. Expected format YYYY-YY."
            )
        start_year = int(match.group(1))
        if int(match.group(2)) != (start_year + 1) % 100:
            raise ValidationError(
                f"Invalid fiscal year '{value}'. Second year must follow "
                f"{start_year}."
            )
        return cls(start_year)

    @classmethod
    def containing(cls, value: date) -> "FiscalYear":
        """Return the fiscal year that contains the given date."""
        if value.month >= FISCAL_YEAR_START_MONTH:
            return cls(value.year)
        return cls(value.year - 1)

    @property
    def label(self) -> str:
        return f"{self.start_year}-{(self.start_year + 1) % 100:02d}"

    @property
    def start(self) -> date:
        return date(self.start_year, FISCAL_YEAR_START_MONTH, 1)

    @property
    def end(self) -> date:
        return date(self.start_year + 1, FISCAL_YEAR_START_MONTH - 1, 30)

    @property
    def dates(self) -> FiscalYearDates:
        return FiscalYearDates(start=self.start, end=self.end)

    @property
    def months(self) -> tuple[MonthKey, ...]:
        """Return the twelve months from October through September."""
        months = []
        current = MonthKey(self.start_year, FISCAL_YEAR_START_MONTH)
        for _ in range(12):
            months.append(current)
            current = current.next()
        return tuple(months)

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    def contains_month(self, month_key: MonthKey) -> bool:
        return month_key in self.months

    def position_of(self, month_key: MonthKey) -> int:
        """Return the 1-based ordinal position of a month in this year.

        Raises:
            ValidationError: If the month is outside the fiscal year.
        """
        try:
            return self.months.index(month_key) + 1
        except ValueError as exc:
            raise ValidationError(
                f"Month {month_key} is outside fiscal year {self.label}"
            ) from exc

    def resolve_month(self, label: str) -> MonthKey:
        """Resolve a month name or ``YYYY-MM`` string inside this year.

        Month names (full or three-letter, any case) map October to
        December onto the first year and January to September onto the
        second year.

        Raises:
            ValidationError: If the label is not a month.
        """
        cleaned = label.strip()
        if _MONTH_KEY_PATTERN.match(cleaned):
            return MonthKey.parse(cleaned)
        lowered = cleaned.lower()
        for index, name in enumerate(MONTH_NAMES, start=1):
            if lowered in (name.lower(), name[:3].lower()):
                if index >= FISCAL_YEAR_START_MONTH:
                    return MonthKey(self.start_year, index)
                return MonthKey(self.start_year + 1, index)
        raise ValidationError(f"Unrecognised month label '{label}'")

    def next(self) -> "FiscalYear":
        return FiscalYear(self.start_year + 1)

    def __str__(self) -> str:
        return self.label


__all__ = ["MonthKey", "FiscalYear", "FiscalYearDates", "parse_date"]
