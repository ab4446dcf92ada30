"""Use case for entering ledger records into a fiscal year."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import DEFAULT_FRIDAY_PAY
from src.domain.errors import NotFoundError, ValidationError
from src.domain.models.calendar import FiscalYear, MonthKey
from src.domain.models.fixed_costs import FixedCostDefinition, Schedule
from src.domain.models.ledger import DailyFigure, SundryExpense, WageRecord
from src.domain.policies import (
    ensure_date_in_fiscal_year,
    ensure_month_in_fiscal_year,
)
from src.infrastructure.logging.logger import get_app_logger

ZERO = Decimal("0")


class RecordLedgerEntriesUseCase:
    """Save and delete daily figures, wages, fixed costs and sundries.

    Every save registers the fiscal year and checks that the entry's date
    or month belongs to it. Summaries are not recomputed here.
    """

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        friday_pay: Decimal = DEFAULT_FRIDAY_PAY,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port for writing ledger records.
            logger: Optional logger compatible with logging.Logger-like API.
            friday_pay: Pay figure stamped on Friday daily figures.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._friday_pay = friday_pay

    def _open(self, fiscal_year: FiscalYear | str) -> FiscalYear:
        parsed_year = FiscalYear.parse(fiscal_year)
        self._repository.register_fiscal_year(parsed_year)
        return parsed_year

    def record_daily_figure(
        self,
        fiscal_year: FiscalYear | str,
        day: date | datetime | str,
        gross_total: Decimal,
        no_trade: bool = False,
    ) -> DailyFigure:
        """Derive and save the takings for one date."""
        parsed_year = FiscalYear.parse(fiscal_year)
        trading_date = ensure_date_in_fiscal_year(day, parsed_year)
        figure = DailyFigure.from_gross_total(
            trading_date,
            gross_total,
            no_trade=no_trade,
            friday_pay=self._friday_pay,
        )
        self._open(parsed_year)
        self._repository.save_daily_figure(parsed_year, figure)
        self._logger.info(f"Saved daily figure for {trading_date.isoformat()}")
        return figure

    def record_wage_record(
        self,
        fiscal_year: FiscalYear | str,
        month: MonthKey | str,
        *,
        net_out: Decimal = ZERO,
        invoices: Decimal = ZERO,
        hmrc: Decimal = ZERO,
        nest: Decimal = ZERO,
        deductions: Decimal = ZERO,
    ) -> WageRecord:
        """Save the wage run for a month given by name or ``YYYY-MM``."""
        parsed_year = FiscalYear.parse(fiscal_year)
        month_key = (
            month if isinstance(month, MonthKey) else parsed_year.resolve_month(month)
        )
        month_key = ensure_month_in_fiscal_year(month_key, parsed_year)
        record = WageRecord.build(
            str(month_key),
            net_out=net_out,
            invoices=invoices,
            hmrc=hmrc,
            nest=nest,
            deductions=deductions,
        )
        self._open(parsed_year)
        self._repository.save_wage_record(parsed_year, record)
        self._logger.info(f"Saved wages for {month_key}: {record.total}")
        return record

    def record_fixed_cost(
        self,
        fiscal_year: FiscalYear | str,
        service: str,
        cost: Decimal,
        schedule: Schedule,
        includes_vat: bool = True,
    ) -> FixedCostDefinition:
        """Create an active fixed cost keyed by its service id."""
        parsed_year = FiscalYear.parse(fiscal_year)
        cost_def = FixedCostDefinition.create(
            service,
            cost,
            schedule,
            includes_vat=includes_vat,
        )
        self._open(parsed_year)
        self._repository.save_fixed_cost(parsed_year, cost_def)
        self._logger.info(
            f"Saved fixed cost '{cost_def.service_id}' for {parsed_year.label}"
        )
        return cost_def

    def record_sundry(
        self,
        fiscal_year: FiscalYear | str,
        day: date | datetime | str,
        amount: Decimal,
        vat: Decimal = ZERO,
        sundry_id: str | None = None,
    ) -> SundryExpense:
        """Save a sundry expense; a fresh id is generated when none is given."""
        parsed_year = FiscalYear.parse(fiscal_year)
        expense_date = ensure_date_in_fiscal_year(day, parsed_year)
        sundry = SundryExpense(
            id=sundry_id or uuid.uuid4().hex,
            date=expense_date,
            amount=amount,
            vat=vat,
            net=amount - vat,
        )
        self._open(parsed_year)
        self._repository.save_sundry(parsed_year, sundry)
        self._logger.info(
            f"Saved sundry '{sundry.id}' on {expense_date.isoformat()}"
        )
        return sundry

    def cancel_fixed_cost(
        self,
        fiscal_year: FiscalYear | str,
        service_id: str,
        cancelled_on: date | datetime | str,
    ) -> FixedCostDefinition:
        """Soft-delete a fixed cost from a date onward.

        Raises:
            NotFoundError: If the service does not exist in the year.
            ValidationError: If the date is malformed.
        """
        parsed_year = FiscalYear.parse(fiscal_year)
        cancel_date = ensure_date_in_fiscal_year(cancelled_on, parsed_year)
        cost_def = self._repository.fetch_fixed_cost(parsed_year, service_id)
        if cost_def is None:
            raise NotFoundError(
                f"Fixed cost '{service_id}' not found in {parsed_year.label}"
            )
        cancelled = cost_def.cancel(cancel_date)
        self._repository.save_fixed_cost(parsed_year, cancelled)
        self._logger.info(
            f"Cancelled fixed cost '{service_id}' from {cancel_date.isoformat()}"
        )
        return cancelled

    def delete_daily_figure(
        self,
        fiscal_year: FiscalYear | str,
        day: date | datetime | str,
    ) -> None:
        """Remove the daily figure of a date; a missing figure is a no-op."""
        parsed_year = FiscalYear.parse(fiscal_year)
        trading_date = ensure_date_in_fiscal_year(day, parsed_year)
        self._repository.delete_daily_figure(parsed_year, trading_date)
        self._logger.info(f"Deleted daily figure for {trading_date.isoformat()}")

    def delete_wage_record(
        self,
        fiscal_year: FiscalYear | str,
        month: MonthKey | str,
    ) -> int:
        """Remove the wage run of a month given by name or ``YYYY-MM``.

        Returns:
            int: Number of wage documents removed.
        """
        parsed_year = FiscalYear.parse(fiscal_year)
        month_key = (
            month if isinstance(month, MonthKey) else parsed_year.resolve_month(month)
        )
        month_key = ensure_month_in_fiscal_year(month_key, parsed_year)
        deleted = self._repository.delete_wage_record(parsed_year, month_key)
        self._logger.info(f"Deleted {deleted} wage records for {month_key}")
        return deleted

    def delete_sundry(self, fiscal_year: FiscalYear | str, sundry_id: str) -> None:
        """Remove a sundry expense by id."""
        if not sundry_id:
            raise ValidationError("Sundry expense requires an id")
        parsed_year = FiscalYear.parse(fiscal_year)
        self._repository.delete_sundry(parsed_year, sundry_id)
        self._logger.info(f"Deleted sundry '{sundry_id}' from {parsed_year.label}")


__all__ = ["RecordLedgerEntriesUseCase"]
