"""Year-on-year comparison of monthly summaries.

Fiscal years are aligned by ordinal month position: the first fiscal month
of one year is compared with the first fiscal month of another, whatever
calendar year each October falls in.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from src.domain.constants import SUMMARY_FIELDS
from src.domain.errors import ValidationError
from src.domain.models.calendar import FiscalYear, MonthKey
from src.domain.models.comparison import (
    ComparisonResult,
    MonthComparisonCell,
    MonthComparisonRow,
    YearDelta,
    YearTotals,
)
from src.domain.models.ledger import MonthlySummary

ZERO = Decimal("0")

DELTA_FIELDS = SUMMARY_FIELDS + ("costs",)


def pct_change(current: Decimal, previous: Decimal) -> Decimal | None:
    """Return the percentage change, or None when the baseline is zero."""
    if previous == 0:
        return None
    return (current - previous) / previous * Decimal("100")


def compute_year_totals(
    fiscal_year: FiscalYear | str,
    summaries: Iterable[MonthlySummary],
) -> YearTotals:
    """Sum the monthly summaries of one fiscal year."""
    totals = {name: ZERO for name in SUMMARY_FIELDS}
    for summary in summaries:
        for name in SUMMARY_FIELDS:
            totals[name] += getattr(summary, name)
    return YearTotals(fiscal_year=FiscalYear.parse(fiscal_year).label, **totals)


def build_comparison(
    summaries_by_year: Mapping[str, Iterable[MonthlySummary]],
) -> ComparisonResult:
    """Align fiscal years by month position and compute totals and deltas.

    Args:
        summaries_by_year: One canonical summary per month, keyed by
            fiscal year label. Missing months count as zero.

    Returns:
        ComparisonResult: Annual totals, twelve aligned month rows, and
        the percentage change of each year against the preceding one.
    """
    years = sorted(FiscalYear.parse(label) for label in summaries_by_year)
    by_position: dict[str, dict[int, MonthlySummary]] = {}
    per_year_totals: dict[str, YearTotals] = {}
    for fiscal_year in years:
        by_position[fiscal_year.label] = _index_by_position(
            fiscal_year,
            summaries_by_year[fiscal_year.label],
        )
        per_year_totals[fiscal_year.label] = compute_year_totals(
            fiscal_year,
            by_position[fiscal_year.label].values(),
        )

    rows: list[MonthComparisonRow] = []
    for position in range(1, 13):
        cells: dict[str, MonthComparisonCell] = {}
        label = ""
        for fiscal_year in years:
            month = fiscal_year.months[position - 1]
            label = month.short_name
            month_key = str(month)
            summary = by_position[fiscal_year.label].get(position)
            cells[fiscal_year.label] = MonthComparisonCell(
                fiscal_year=fiscal_year.label,
                month=month_key,
                summary=summary or MonthlySummary(month=month_key),
            )
        rows.append(
            MonthComparisonRow(position=position, label=label, cells=cells)
        )

    deltas = [
        _year_delta(per_year_totals[current.label], per_year_totals[previous.label])
        for previous, current in zip(years, years[1:])
    ]
    return ComparisonResult(
        fiscal_years=[fiscal_year.label for fiscal_year in years],
        per_year_totals=per_year_totals,
        per_month_rows=rows,
        deltas=deltas,
    )


def _index_by_position(
    fiscal_year: FiscalYear,
    summaries: Iterable[MonthlySummary],
) -> dict[int, MonthlySummary]:
    """Key summaries by fiscal position, dropping months outside the year."""
    indexed: dict[int, MonthlySummary] = {}
    for summary in summaries:
        try:
            position = fiscal_year.position_of(MonthKey.parse(summary.month))
        except ValidationError:
            continue
        indexed[position] = summary
    return indexed


def _year_delta(current: YearTotals, previous: YearTotals) -> YearDelta:
    return YearDelta(
        current=current.fiscal_year,
        previous=previous.fiscal_year,
        changes={
            name: pct_change(getattr(current, name), getattr(previous, name))
            for name in DELTA_FIELDS
        },
    )


__all__ = ["pct_change", "compute_year_totals", "build_comparison"]
