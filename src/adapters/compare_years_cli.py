"""CLI adapter printing a year-on-year comparison.

``LEDGER_COMPARE_YEARS`` takes comma-separated fiscal years. Without it,
the two most recent known years are compared.
"""

import os
from decimal import Decimal

from src.application.use_cases.list_fiscal_years import default_comparison_years
from src.domain.errors import StorageError, ValidationError
from src.infrastructure.container import (
    build_compare_years_use_case,
    build_ledger_repository,
    build_list_fiscal_years_use_case,
)
from src.infrastructure.logging.logger import get_app_logger


def _format_change(value: Decimal | None) -> str:
    if value is None:
        return "n/a"
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.1f}%"


def main() -> None:
    """Run the comparison use case and print totals and deltas."""
    logger = get_app_logger()
    repository = build_ledger_repository()
    raw_years = os.getenv("LEDGER_COMPARE_YEARS", "")
    fiscal_years = [label.strip() for label in raw_years.split(",") if label.strip()]
    if not fiscal_years:
        known = build_list_fiscal_years_use_case(repository).execute()
        fiscal_years = default_comparison_years(known)
    if not fiscal_years:
        logger.warning("No fiscal years found to compare.")
        return

    use_case = build_compare_years_use_case(repository)
    try:
        result = use_case.execute(fiscal_years)
    except (ValidationError, StorageError) as exc:
        logger.error(str(exc))
        return

    for label in result.fiscal_years:
        totals = result.per_year_totals[label]
        print(
            f"{label}: net_income={totals.net_income:.2f}, "
            f"costs={totals.costs:.2f}, profit={totals.profit:.2f}"
        )
    for delta in result.deltas:
        print(
            f"{delta.current} vs {delta.previous}: "
            f"net_income={_format_change(delta.changes['net_income'])}, "
            f"costs={_format_change(delta.changes['costs'])}, "
            f"profit={_format_change(delta.changes['profit'])}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
