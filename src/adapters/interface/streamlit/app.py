"""Streamlit year-on-year dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.list_fiscal_years import default_comparison_years
from src.domain.models.comparison import ComparisonResult, YearDelta
from src.domain.services.fiscal_calendar import format_fiscal_year_display
from src.infrastructure.container import (
    build_compare_years_use_case,
    build_list_fiscal_years_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger

CHART_METRICS = (("net_income", "Net income"), ("profit", "Profit"))


def _fetch_fiscal_years() -> list[str]:
    """Fetch known fiscal years, newest first."""
    use_case = build_list_fiscal_years_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_fiscal_years() -> list[str]:
    """Cached wrapper around _fetch_fiscal_years for Streamlit sessions."""
    return _fetch_fiscal_years()


def _fetch_comparison(fiscal_years: Sequence[str]) -> ComparisonResult:
    """Fetch the comparison for the selected fiscal years."""
    use_case = build_compare_years_use_case()
    return use_case.execute(list(fiscal_years))


@st.cache_data(show_spinner=False)
def _load_comparison(
    fiscal_years: tuple[str, ...],
    schema_version: int = 1,
) -> ComparisonResult:
    """Cached wrapper around _fetch_comparison."""
    _ = schema_version
    return _fetch_comparison(fiscal_years)


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy and pandas builds Altair relies on are usable.

    Returns:
        Tuple of a success flag and an error message when unusable.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart libraries unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed incorrectly (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed incorrectly (missing Timestamp)."
    return True, None


def _format_currency(value: Decimal) -> str:
    """Format money values for display."""
    sign = "-" if value < 0 else ""
    return f"{sign}£{abs(value):,.2f}"


def _format_change(value: Decimal | None) -> str | None:
    """Format a percentage change; None when there is no baseline."""
    if value is None:
        return None
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


def _latest_delta(result: ComparisonResult) -> YearDelta | None:
    return result.deltas[-1] if result.deltas else None


def _month_table_rows(
    result: ComparisonResult,
    fiscal_year: str,
) -> list[dict[str, str]]:
    """Build table rows for one fiscal year, October first."""
    rows = []
    for month_row in result.per_month_rows:
        cell = month_row.cells[fiscal_year]
        rows.append(
            {
                "Month": month_row.label,
                "Net income": _format_currency(cell.summary.net_income),
                "Wages": _format_currency(cell.summary.wages),
                "Fixed costs": _format_currency(cell.summary.fixed_costs),
                "Sundries": _format_currency(cell.summary.sundries),
                "Costs": _format_currency(cell.costs),
                "Profit": _format_currency(cell.summary.profit),
            }
        )
    return rows


def _prepare_trend_chart_data(
    result: ComparisonResult,
) -> list[dict[str, str | int | float]]:
    """Flatten month rows into Altair-ready records."""
    data: list[dict[str, str | int | float]] = []
    for month_row in result.per_month_rows:
        for fiscal_year, cell in month_row.cells.items():
            for field_name, label in CHART_METRICS:
                data.append(
                    {
                        "position": month_row.position,
                        "month": month_row.label,
                        "fiscal_year": fiscal_year,
                        "metric": label,
                        "amount": float(getattr(cell.summary, field_name)),
                    }
                )
    return data


def _render_trend_chart(result: ComparisonResult) -> None:
    """Render net income and profit by fiscal month position."""
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_trend_chart_data(result)
    month_order = [row.label for row in result.per_month_rows]
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("month:N", sort=month_order, title=None),
        y=alt.Y("amount:Q", title="£"),
        color=alt.Color("fiscal_year:N", title="Fiscal year"),
        strokeDash=alt.StrokeDash("metric:N", title=None),
        tooltip=[
            alt.Tooltip("fiscal_year:N"),
            alt.Tooltip("month:N"),
            alt.Tooltip("metric:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    ).properties(height=360)
    st.subheader("Net income and profit by month")
    st.altair_chart(chart, width="stretch")


def _render_headline(result: ComparisonResult) -> None:
    """Show the latest year's totals with changes against the year before."""
    latest = result.fiscal_years[-1]
    totals = result.per_year_totals[latest]
    delta = _latest_delta(result)
    changes = delta.changes if delta else {}

    income_col, costs_col, profit_col = st.columns(3)
    income_col.metric(
        "Net income",
        _format_currency(totals.net_income),
        _format_change(changes.get("net_income")),
    )
    costs_col.metric(
        "Costs",
        _format_currency(totals.costs),
        _format_change(changes.get("costs")),
        delta_color="inverse",
    )
    profit_col.metric(
        "Profit",
        _format_currency(totals.profit),
        _format_change(changes.get("profit")),
    )
    if delta:
        st.caption(
            f"{format_fiscal_year_display(delta.current)} compared with "
            f"{format_fiscal_year_display(delta.previous)}"
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="P&L Year on Year", layout="wide")
    st.title("Year on Year")

    fiscal_years = _load_fiscal_years()
    if not fiscal_years:
        st.warning("No fiscal years found. Enter ledger data first.")
        return

    selected = st.sidebar.multiselect(
        "Fiscal years",
        options=fiscal_years,
        default=default_comparison_years(fiscal_years),
    )
    if not selected:
        st.info("Select at least one fiscal year.")
        return

    get_usage_logger().info(f"Year on year viewed for {', '.join(selected)}")
    result = _load_comparison(tuple(sorted(selected)), schema_version=1)

    _render_headline(result)
    _render_trend_chart(result)
    for fiscal_year in reversed(result.fiscal_years):
        st.subheader(format_fiscal_year_display(fiscal_year))
        st.dataframe(
            _month_table_rows(result, fiscal_year),
            width="stretch",
            hide_index=True,
        )


if __name__ == "__main__":  # pragma: no cover
    main()
