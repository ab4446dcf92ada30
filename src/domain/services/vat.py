"""Totals over the VAT returns of a fiscal year."""

from collections.abc import Iterable

from src.domain.models.calendar import FiscalYear
from src.domain.models.vat import ZERO, VatReturn, VatSummary


def summarize_vat_returns(
    fiscal_year: FiscalYear | str,
    vat_returns: Iterable[VatReturn],
) -> VatSummary:
    """Order returns by period start and total each amount.

    Args:
        fiscal_year: Fiscal year the returns belong to.
        vat_returns: Returns in any order.

    Returns:
        VatSummary: Returns oldest first with HMRC, supplier and
        difference totals.
    """
    ordered = sorted(
        vat_returns,
        key=lambda vat_return: (vat_return.start_date, vat_return.quarter_id),
    )
    hmrc_total = ZERO
    marstons_total = ZERO
    difference_total = ZERO
    for vat_return in ordered:
        hmrc_total += vat_return.hmrc_amount
        marstons_total += vat_return.marstons_amount
        difference_total += vat_return.difference
    return VatSummary(
        fiscal_year=FiscalYear.parse(fiscal_year).label,
        returns=ordered,
        hmrc_total=hmrc_total,
        marstons_total=marstons_total,
        difference_total=difference_total,
    )


__all__ = ["summarize_vat_returns"]
