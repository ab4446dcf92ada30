"""Domain models for ledger input streams and monthly summaries."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from src.domain.constants import (
    ACTIVITY_FIELDS,
    COMPLETENESS_FIELDS,
    DEFAULT_FRIDAY_PAY,
    FEE_RATE,
    FRIDAY,
    SUMMARY_FIELDS,
    VAT_DIVISOR,
)
from src.domain.models.calendar import FiscalYear, MonthKey

ZERO = Decimal("0")

_DAILY_MONEY_FIELDS = (
    "gross_total",
    "net_total",
    "fee",
    "gross_income",
    "net_income",
    "vat",
    "abbies_pay",
)


def sunday_based_weekday(value: date) -> int:
    """Return the weekday of a date numbered 0=Sunday .. 6=Saturday."""
    return (value.weekday() + 1) % 7


@dataclass(frozen=True)
class DailyFigure:
    """Takings recorded for one trading date.

    A no-trade day always carries zero in every monetary field.
    """

    date: date
    gross_total: Decimal = ZERO
    net_total: Decimal = ZERO
    fee: Decimal = ZERO
    gross_income: Decimal = ZERO
    net_income: Decimal = ZERO
    vat: Decimal = ZERO
    abbies_pay: Decimal = ZERO
    no_trade: bool = False

    def __post_init__(self) -> None:
        if self.no_trade:
            for name in _DAILY_MONEY_FIELDS:
                object.__setattr__(self, name, ZERO)

    @classmethod
    def from_gross_total(
        cls,
        day: date,
        gross_total: Decimal,
        *,
        no_trade: bool = False,
        friday_pay: Decimal = DEFAULT_FRIDAY_PAY,
    ) -> "DailyFigure":
        """Derive the dependent takings fields from the gross total.

        Args:
            day: Trading date.
            gross_total: Gross takings including VAT.
            no_trade: Whether the business did not trade that day.
            friday_pay: Informational pay figure recorded on Fridays.

        Returns:
            DailyFigure: Figure with fee, income, and VAT fields filled in.
        """
        fee = gross_total * FEE_RATE / VAT_DIVISOR
        gross_income = gross_total - fee
        net_income = gross_income / VAT_DIVISOR
        return cls(
            date=day,
            gross_total=gross_total,
            net_total=(gross_total / VAT_DIVISOR).quantize(Decimal("0.000001")),
            fee=fee.quantize(Decimal("0.001")),
            gross_income=gross_income.quantize(Decimal("0.0001")),
            net_income=net_income.quantize(Decimal("0.000001")),
            vat=(gross_income - net_income).quantize(Decimal("0.000001")),
            abbies_pay=(
                friday_pay if sunday_based_weekday(day) == FRIDAY else ZERO
            ),
            no_trade=no_trade,
        )


@dataclass(frozen=True)
class WageRecord:
    """Wage run for one fiscal month.

    ``month`` is stored either as a month name ("October") or ``YYYY-MM``.
    """

    month: str
    net_out: Decimal = ZERO
    invoices: Decimal = ZERO
    hmrc: Decimal = ZERO
    nest: Decimal = ZERO
    deductions: Decimal = ZERO
    total: Decimal = ZERO

    @classmethod
    def build(
        cls,
        month: str,
        *,
        net_out: Decimal = ZERO,
        invoices: Decimal = ZERO,
        hmrc: Decimal = ZERO,
        nest: Decimal = ZERO,
        deductions: Decimal = ZERO,
    ) -> "WageRecord":
        """Build a wage record whose total is the sum of its components."""
        return cls(
            month=month,
            net_out=net_out,
            invoices=invoices,
            hmrc=hmrc,
            nest=nest,
            deductions=deductions,
            total=net_out + invoices + hmrc + nest + deductions,
        )

    def month_key(self, fiscal_year: FiscalYear) -> MonthKey:
        """Resolve the stored month label inside a fiscal year."""
        return fiscal_year.resolve_month(self.month)


@dataclass(frozen=True)
class SundryExpense:
    """Ad-hoc expense; several may share a date."""

    id: str
    date: date
    amount: Decimal
    vat: Decimal = ZERO
    net: Decimal = ZERO


@dataclass(frozen=True)
class MonthlySummary:
    """Derived profit-and-loss figures for one fiscal month.

    Attributes:
        month: Month key in ``YYYY-MM`` format.
        gross_income: Sum of daily gross income.
        net_income: Sum of daily net income.
        vat: Sum of daily VAT.
        wages: Wage run total for the month.
        fixed_costs: Recurring cost accrual for the month.
        sundries: Sum of sundry expenses dated in the month.
        profit: Net income minus wages, fixed costs, and sundries.
        updated_at: Time of the last write, if known.
    """

    month: str
    gross_income: Decimal = ZERO
    net_income: Decimal = ZERO
    vat: Decimal = ZERO
    wages: Decimal = ZERO
    fixed_costs: Decimal = ZERO
    sundries: Decimal = ZERO
    profit: Decimal = ZERO
    updated_at: datetime | None = None

    def figures(self) -> dict[str, Decimal]:
        """Return the monetary fields, excluding the timestamp."""
        return {name: getattr(self, name) for name in SUMMARY_FIELDS}

    @property
    def completeness_score(self) -> int:
        """Count of non-zero wages, fixed costs, and sundries (0-3)."""
        return sum(1 for name in COMPLETENESS_FIELDS if getattr(self, name))

    @property
    def is_blank(self) -> bool:
        """True when income, profit, and wages are all zero."""
        return all(not getattr(self, name) for name in ACTIVITY_FIELDS)


@dataclass(frozen=True)
class StoredSummary:
    """Monthly summary paired with the document id it was read from."""

    doc_id: str
    summary: MonthlySummary

    @property
    def month(self) -> str:
        return self.summary.month


__all__ = [
    "DailyFigure",
    "WageRecord",
    "SundryExpense",
    "MonthlySummary",
    "StoredSummary",
    "sunday_based_weekday",
]
