"""CLI adapter printing the VAT returns of ``LEDGER_FISCAL_YEAR``."""

from src.adapters.recompute_year_cli import _resolve_fiscal_year
from src.infrastructure.container import build_vat_returns_use_case
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print each VAT period with its status, then the year's totals."""
    logger = get_app_logger()
    fiscal_year = _resolve_fiscal_year(logger)
    if fiscal_year is None:
        return

    summary = build_vat_returns_use_case().summarize(fiscal_year)
    if not summary.returns:
        logger.warning(f"No VAT returns recorded for {fiscal_year}.")
        return

    for vat_return in summary.returns:
        print(
            f"{vat_return.quarter_id} "
            f"{vat_return.start_date.isoformat()}.."
            f"{vat_return.end_date.isoformat()}: "
            f"hmrc={vat_return.hmrc_amount:.2f}, "
            f"marstons={vat_return.marstons_amount:.2f}, "
            f"difference={vat_return.difference:.2f} "
            f"({vat_return.status.value})"
        )
    print(
        f"{summary.period_count} periods for {summary.fiscal_year}: "
        f"hmrc={summary.hmrc_total:.2f}, "
        f"marstons={summary.marstons_total:.2f}, "
        f"difference={summary.difference_total:.2f}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
