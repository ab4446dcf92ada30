"""CLI adapter to open the fiscal year after ``LEDGER_FISCAL_YEAR``."""

from src.adapters.recompute_year_cli import _resolve_fiscal_year
from src.domain.services.fiscal_calendar import is_past_fiscal_year_end
from src.infrastructure.container import build_roll_over_fiscal_year_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Copy fixed costs into the next fiscal year and print the counts."""
    logger = get_app_logger()
    fiscal_year = _resolve_fiscal_year(logger)
    if fiscal_year is None:
        return
    if not is_past_fiscal_year_end(fiscal_year):
        logger.info(f"Fiscal year {fiscal_year} has not ended yet")

    use_case = build_roll_over_fiscal_year_use_case()
    result = use_case.execute(fiscal_year)

    print(
        f"Opened fiscal year {result.next_fiscal_year}: "
        f"copied {result.copied_count} fixed costs, "
        f"skipped {result.skipped_count}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
