"""Domain models for year-on-year comparisons."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.ledger import MonthlySummary


@dataclass(frozen=True)
class YearTotals:
    """Annual totals for one fiscal year."""

    fiscal_year: str
    gross_income: Decimal
    net_income: Decimal
    vat: Decimal
    wages: Decimal
    fixed_costs: Decimal
    sundries: Decimal
    profit: Decimal

    @property
    def costs(self) -> Decimal:
        """Return wages plus fixed costs plus sundries."""
        return self.wages + self.fixed_costs + self.sundries


@dataclass(frozen=True)
class MonthComparisonCell:
    """One fiscal year's figures at a given ordinal month position."""

    fiscal_year: str
    month: str
    summary: MonthlySummary

    @property
    def costs(self) -> Decimal:
        return (
            self.summary.wages
            + self.summary.fixed_costs
            + self.summary.sundries
        )


@dataclass(frozen=True)
class MonthComparisonRow:
    """Figures for every compared year at one fiscal month position.

    Attributes:
        position: Ordinal month within the fiscal year (1 = October).
        label: Short month name shared by all years at this position.
        cells: Figures keyed by fiscal year label.
    """

    position: int
    label: str
    cells: dict[str, MonthComparisonCell]


@dataclass(frozen=True)
class YearDelta:
    """Percentage changes of one year against an earlier year.

    A change is None when the earlier figure is zero.
    """

    current: str
    previous: str
    changes: dict[str, Decimal | None]


@dataclass(frozen=True)
class ComparisonResult:
    """Aligned cross-year comparison for dashboards."""

    fiscal_years: list[str]
    per_year_totals: dict[str, YearTotals]
    per_month_rows: list[MonthComparisonRow]
    deltas: list[YearDelta]


__all__ = [
    "YearTotals",
    "MonthComparisonCell",
    "MonthComparisonRow",
    "YearDelta",
    "ComparisonResult",
]
