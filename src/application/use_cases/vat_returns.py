"""Use case for recording and reviewing quarterly VAT returns."""

from datetime import date, datetime
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import ValidationError
from src.domain.models.calendar import FiscalYear
from src.domain.models.vat import ZERO, VatReturn, VatSummary
from src.domain.policies import ensure_date_in_fiscal_year
from src.domain.services.vat import summarize_vat_returns
from src.infrastructure.logging.logger import get_app_logger


class VatReturnsUseCase:
    """Compare VAT declared to HMRC with the supplier's figure per period."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port for reading and writing VAT returns.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def record(
        self,
        fiscal_year: FiscalYear | str,
        quarter_id: str,
        start_date: date | datetime | str,
        end_date: date | datetime | str,
        *,
        hmrc_amount: Decimal = ZERO,
        marstons_amount: Decimal = ZERO,
    ) -> VatReturn:
        """Save a VAT return whose period lies inside the fiscal year.

        Raises:
            ValidationError: If a date is malformed or outside the year,
                the period ends before it starts, or the id is empty.
        """
        parsed_year = FiscalYear.parse(fiscal_year)
        vat_return = VatReturn.build(
            quarter_id.strip(),
            ensure_date_in_fiscal_year(start_date, parsed_year),
            ensure_date_in_fiscal_year(end_date, parsed_year),
            hmrc_amount=hmrc_amount,
            marstons_amount=marstons_amount,
        )
        self._repository.register_fiscal_year(parsed_year)
        self._repository.save_vat_return(parsed_year, vat_return)
        self._logger.info(
            f"Saved VAT return '{vat_return.quarter_id}' for {parsed_year.label}: "
            f"difference {vat_return.difference}"
        )
        return vat_return

    def delete(self, fiscal_year: FiscalYear | str, quarter_id: str) -> None:
        if not quarter_id:
            raise ValidationError("VAT return requires a quarter id")
        parsed_year = FiscalYear.parse(fiscal_year)
        self._repository.delete_vat_return(parsed_year, quarter_id)
        self._logger.info(
            f"Deleted VAT return '{quarter_id}' from {parsed_year.label}"
        )

    def summarize(self, fiscal_year: FiscalYear | str) -> VatSummary:
        """Return the year's returns oldest first with their totals."""
        parsed_year = FiscalYear.parse(fiscal_year)
        summary = summarize_vat_returns(
            parsed_year,
            self._repository.fetch_vat_returns(parsed_year),
        )
        self._logger.info(
            f"Summarized {summary.period_count} VAT returns for {parsed_year.label}"
        )
        return summary


__all__ = ["VatReturnsUseCase"]
