"""Port for reading and writing the ledger streams of a fiscal year."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from src.domain.models.calendar import FiscalYear, MonthKey
from src.domain.models.fixed_costs import FixedCostDefinition
from src.domain.models.ledger import (
    DailyFigure,
    MonthlySummary,
    StoredSummary,
    SundryExpense,
    WageRecord,
)
from src.domain.models.vat import VatReturn


class LedgerRepositoryPort(Protocol):
    """Port exposing typed access to one user's ledger.

    Reads of a readable but empty collection return empty results. Store
    failures raise ``StorageError`` and malformed documents raise
    ``ValidationError``.
    """

    batch_limit: int

    def fetch_daily_figures(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey | None = None,
    ) -> list[DailyFigure]:
        """Return daily figures of the year, optionally for one month."""

    def fetch_wage_record(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey,
    ) -> WageRecord | None:
        """Return the wage run for the month, if one was entered."""

    def fetch_wage_records(self, fiscal_year: FiscalYear) -> list[WageRecord]:
        """Return every wage record of the year."""

    def fetch_fixed_costs(
        self,
        fiscal_year: FiscalYear,
    ) -> list[FixedCostDefinition]:
        """Return every fixed cost defined for the year."""

    def fetch_fixed_cost(
        self,
        fiscal_year: FiscalYear,
        service_id: str,
    ) -> FixedCostDefinition | None:
        """Return one fixed cost by service id."""

    def fetch_sundries(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey | None = None,
    ) -> list[SundryExpense]:
        """Return sundry expenses of the year, optionally for one month."""

    def fetch_monthly_summaries(
        self,
        fiscal_year: FiscalYear,
    ) -> list[StoredSummary]:
        """Return every stored summary document of the year."""

    def save_monthly_summary(
        self,
        fiscal_year: FiscalYear,
        summary: MonthlySummary,
        doc_id: str | None = None,
    ) -> None:
        """Replace the summary document keyed by its month."""

    def delete_monthly_summaries(
        self,
        fiscal_year: FiscalYear,
        doc_ids: Sequence[str],
    ) -> int:
        """Delete summary documents in batches and return the count."""

    def save_daily_figure(
        self,
        fiscal_year: FiscalYear,
        figure: DailyFigure,
    ) -> None:
        """Replace the daily figure keyed by its date."""

    def save_wage_record(
        self,
        fiscal_year: FiscalYear,
        record: WageRecord,
    ) -> None:
        """Replace the wage record keyed by its month."""

    def save_fixed_cost(
        self,
        fiscal_year: FiscalYear,
        cost_def: FixedCostDefinition,
    ) -> None:
        """Replace the fixed cost keyed by its service id."""

    def save_fixed_costs(
        self,
        fiscal_year: FiscalYear,
        cost_defs: Sequence[FixedCostDefinition],
    ) -> int:
        """Replace several fixed costs in batches and return the count."""

    def save_sundry(self, fiscal_year: FiscalYear, sundry: SundryExpense) -> None:
        """Replace the sundry expense keyed by its id."""

    def delete_daily_figure(self, fiscal_year: FiscalYear, day: date) -> None:
        """Delete the daily figure for a date, if present."""

    def delete_wage_record(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey,
    ) -> int:
        """Delete the wage records of a month and return the count."""

    def delete_sundry(self, fiscal_year: FiscalYear, sundry_id: str) -> None:
        """Delete a sundry expense by id, if present."""

    def fetch_vat_returns(self, fiscal_year: FiscalYear) -> list[VatReturn]:
        """Return the VAT returns of the year ordered by period start."""

    def save_vat_return(
        self,
        fiscal_year: FiscalYear,
        vat_return: VatReturn,
    ) -> None:
        """Merge the VAT return keyed by its quarter id."""

    def delete_vat_return(self, fiscal_year: FiscalYear, quarter_id: str) -> None:
        """Delete a VAT return by quarter id, if present."""

    def list_fiscal_years(self) -> list[FiscalYear]:
        """Return the registered fiscal years, oldest first."""

    def register_fiscal_year(self, fiscal_year: FiscalYear) -> None:
        """Record that the fiscal year exists."""


__all__ = ["LedgerRepositoryPort"]
