"""CLI adapter to recompute every monthly summary of a fiscal year.

The fiscal year comes from ``LEDGER_FISCAL_YEAR`` and defaults to the
year containing today.
"""

import os

from src.domain.errors import ValidationError
from src.domain.models.calendar import FiscalYear
from src.domain.services.fiscal_calendar import current_fiscal_year
from src.infrastructure.container import build_recompute_year_use_case
from src.infrastructure.logging.logger import get_app_logger


def _resolve_fiscal_year(logger) -> str | None:
    """Return the requested fiscal year label, or None when invalid."""
    raw_value = os.getenv("LEDGER_FISCAL_YEAR", "").strip()
    if not raw_value:
        return current_fiscal_year()
    try:
        return FiscalYear.parse(raw_value).label
    except ValidationError as exc:
        logger.error(str(exc))
        return None


def main() -> None:
    """Run the full-year recompute and print the outcome."""
    logger = get_app_logger()
    fiscal_year = _resolve_fiscal_year(logger)
    if fiscal_year is None:
        return

    use_case = build_recompute_year_use_case()
    result = use_case.run(fiscal_year)

    print(
        f"Recomputed {len(result.months_written)} months "
        f"for fiscal year {result.fiscal_year}."
    )
    if not result.ok:
        print(f"Stopped at {result.failed_month}: {result.error}")


if __name__ == "__main__":  # pragma: no cover
    main()
