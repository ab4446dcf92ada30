"""Ledger repository backed by a hierarchical document store."""

from collections.abc import Sequence
from datetime import date, timedelta

from src.application.ports.document_store import (
    DeleteOperation,
    DocumentStorePort,
    FieldFilter,
    PutOperation,
    WriteMode,
    chunked,
)
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.errors import ValidationError
from src.domain.models.calendar import FiscalYear, MonthKey
from src.domain.models.fixed_costs import FixedCostDefinition, LegacySchedule
from src.domain.models.ledger import (
    DailyFigure,
    MonthlySummary,
    StoredSummary,
    SundryExpense,
    WageRecord,
)
from src.domain.models.vat import VatReturn
from src.domain.services.fiscal_calendar import month_bounds
from src.infrastructure.ledger_documents import (
    daily_figure_from_document,
    daily_figure_to_document,
    fixed_cost_from_document,
    fixed_cost_to_document,
    summary_from_document,
    summary_to_document,
    sundry_from_document,
    sundry_to_document,
    vat_return_from_document,
    vat_return_to_document,
    wage_record_from_document,
    wage_record_to_document,
)
from src.infrastructure.logging.logger import get_app_logger

DAILY_FIGURES = "dailyFigures"
WAGES = "wages"
FIXED_COSTS = "fixedCosts"
SUNDRIES = "sundries"
MONTHLY_SUMMARIES = "monthlySummaries"
VAT_RETURNS = "vat"


class DocumentLedgerRepository(LedgerRepositoryPort):
    """Typed ledger access over ``users/{user}/years/{fy}/...`` paths."""

    def __init__(
        self,
        store: DocumentStorePort,
        user_id: str,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Document store holding the ledger.
            user_id: Owner of the ledger.
            logger: Optional logger; defaults to the app logger.
        """
        self._store = store
        self._user_id = user_id
        self._logger = logger or get_app_logger()

    @property
    def batch_limit(self) -> int:
        return self._store.max_batch_size

    def _years_path(self) -> str:
        return f"users/{self._user_id}/years"

    def _path(self, fiscal_year: FiscalYear, collection: str) -> str:
        return f"{self._years_path()}/{fiscal_year.label}/{collection}"

    @staticmethod
    def _date_range(
        fiscal_year: FiscalYear,
        month_key: MonthKey | None,
    ) -> tuple[date, date]:
        if month_key is not None:
            return month_bounds(month_key)
        return fiscal_year.start, fiscal_year.end

    @classmethod
    def _date_filters(
        cls,
        fiscal_year: FiscalYear,
        month_key: MonthKey | None,
    ) -> list[FieldFilter]:
        """Bound stored ``date`` strings to the period.

        The upper bound is the day after the period, exclusive, so that
        timestamped values on the last day still sort inside the range.
        """
        start, end = cls._date_range(fiscal_year, month_key)
        return [
            FieldFilter("date", ">=", start.isoformat()),
            FieldFilter("date", "<", (end + timedelta(days=1)).isoformat()),
        ]

    def fetch_daily_figures(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey | None = None,
    ) -> list[DailyFigure]:
        documents = self._store.list(
            self._path(fiscal_year, DAILY_FIGURES),
            self._date_filters(fiscal_year, month_key),
        )
        start, end = self._date_range(fiscal_year, month_key)
        figures = [
            figure
            for figure in map(daily_figure_from_document, documents)
            if start <= figure.date <= end
        ]
        return sorted(figures, key=lambda figure: figure.date)

    def fetch_wage_record(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey,
    ) -> WageRecord | None:
        """Return the wage run for a month.

        Records are keyed by ``YYYY-MM``; older records keyed by month name
        are found by resolving each stored month inside the fiscal year.
        """
        document = self._store.get(self._path(fiscal_year, WAGES), str(month_key))
        if document is not None:
            return wage_record_from_document(document)
        for record in self.fetch_wage_records(fiscal_year):
            if record.month_key(fiscal_year) == month_key:
                return record
        return None

    def fetch_wage_records(self, fiscal_year: FiscalYear) -> list[WageRecord]:
        documents = self._store.list(self._path(fiscal_year, WAGES))
        return [wage_record_from_document(doc) for doc in documents]

    def fetch_fixed_costs(
        self,
        fiscal_year: FiscalYear,
    ) -> list[FixedCostDefinition]:
        documents = self._store.list(self._path(fiscal_year, FIXED_COSTS))
        cost_defs = [fixed_cost_from_document(doc) for doc in documents]
        for cost_def in cost_defs:
            if isinstance(cost_def.schedule, LegacySchedule):
                self._logger.warning(
                    f"Fixed cost '{cost_def.service_id}' in "
                    f"{fiscal_year.label} has no frequency; "
                    "counting it once per month"
                )
        return cost_defs

    def fetch_fixed_cost(
        self,
        fiscal_year: FiscalYear,
        service_id: str,
    ) -> FixedCostDefinition | None:
        document = self._store.get(self._path(fiscal_year, FIXED_COSTS), service_id)
        if document is None:
            return None
        return fixed_cost_from_document(document)

    def fetch_sundries(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey | None = None,
    ) -> list[SundryExpense]:
        documents = self._store.list(
            self._path(fiscal_year, SUNDRIES),
            self._date_filters(fiscal_year, month_key),
        )
        start, end = self._date_range(fiscal_year, month_key)
        return [
            sundry
            for sundry in map(sundry_from_document, documents)
            if start <= sundry.date <= end
        ]

    def fetch_monthly_summaries(
        self,
        fiscal_year: FiscalYear,
    ) -> list[StoredSummary]:
        documents = self._store.list(self._path(fiscal_year, MONTHLY_SUMMARIES))
        return [summary_from_document(doc) for doc in documents]

    def save_monthly_summary(
        self,
        fiscal_year: FiscalYear,
        summary: MonthlySummary,
        doc_id: str | None = None,
    ) -> None:
        self._store.put(
            self._path(fiscal_year, MONTHLY_SUMMARIES),
            doc_id or summary.month,
            summary_to_document(summary),
            WriteMode.REPLACE,
        )

    def delete_monthly_summaries(
        self,
        fiscal_year: FiscalYear,
        doc_ids: Sequence[str],
    ) -> int:
        """Delete summary documents in batches no larger than the limit.

        Returns:
            int: Number of documents deleted.
        """
        path = self._path(fiscal_year, MONTHLY_SUMMARIES)
        operations = [DeleteOperation(path, doc_id) for doc_id in doc_ids]
        for batch in chunked(operations, self.batch_limit):
            self._store.batch_write(batch)
        return len(operations)

    def save_daily_figure(
        self,
        fiscal_year: FiscalYear,
        figure: DailyFigure,
    ) -> None:
        self._store.put(
            self._path(fiscal_year, DAILY_FIGURES),
            figure.date.isoformat(),
            daily_figure_to_document(figure),
        )

    def save_wage_record(
        self,
        fiscal_year: FiscalYear,
        record: WageRecord,
    ) -> None:
        month_key = record.month_key(fiscal_year)
        self._store.put(
            self._path(fiscal_year, WAGES),
            str(month_key),
            wage_record_to_document(record),
        )

    def save_fixed_cost(
        self,
        fiscal_year: FiscalYear,
        cost_def: FixedCostDefinition,
    ) -> None:
        self._store.put(
            self._path(fiscal_year, FIXED_COSTS),
            cost_def.service_id,
            fixed_cost_to_document(cost_def),
        )

    def save_fixed_costs(
        self,
        fiscal_year: FiscalYear,
        cost_defs: Sequence[FixedCostDefinition],
    ) -> int:
        """Replace several fixed costs in batches no larger than the limit.

        Returns:
            int: Number of fixed costs written.
        """
        path = self._path(fiscal_year, FIXED_COSTS)
        operations = [
            PutOperation(path, cost_def.service_id, fixed_cost_to_document(cost_def))
            for cost_def in cost_defs
        ]
        for batch in chunked(operations, self.batch_limit):
            self._store.batch_write(batch)
        return len(operations)

    def save_sundry(self, fiscal_year: FiscalYear, sundry: SundryExpense) -> None:
        if not sundry.id:
            raise ValidationError("Sundry expense requires an id")
        self._store.put(
            self._path(fiscal_year, SUNDRIES),
            sundry.id,
            sundry_to_document(sundry),
        )

    def delete_daily_figure(self, fiscal_year: FiscalYear, day: date) -> None:
        self._store.delete(
            self._path(fiscal_year, DAILY_FIGURES),
            day.isoformat(),
        )

    def delete_wage_record(
        self,
        fiscal_year: FiscalYear,
        month_key: MonthKey,
    ) -> int:
        """Delete every wage document resolving to the month.

        Covers the ``YYYY-MM`` key and older documents keyed by month name.

        Returns:
            int: Number of documents deleted.
        """
        path = self._path(fiscal_year, WAGES)
        doc_ids = [
            document["id"]
            for document in self._store.list(path)
            if wage_record_from_document(document).month_key(fiscal_year)
            == month_key
        ]
        for doc_id in doc_ids:
            self._store.delete(path, doc_id)
        return len(doc_ids)

    def delete_sundry(self, fiscal_year: FiscalYear, sundry_id: str) -> None:
        self._store.delete(self._path(fiscal_year, SUNDRIES), sundry_id)

    def fetch_vat_returns(self, fiscal_year: FiscalYear) -> list[VatReturn]:
        documents = self._store.list(self._path(fiscal_year, VAT_RETURNS))
        vat_returns = [vat_return_from_document(doc) for doc in documents]
        return sorted(vat_returns, key=lambda vat_return: vat_return.start_date)

    def save_vat_return(
        self,
        fiscal_year: FiscalYear,
        vat_return: VatReturn,
    ) -> None:
        self._store.put(
            self._path(fiscal_year, VAT_RETURNS),
            vat_return.quarter_id,
            vat_return_to_document(vat_return),
            WriteMode.MERGE,
        )

    def delete_vat_return(self, fiscal_year: FiscalYear, quarter_id: str) -> None:
        self._store.delete(self._path(fiscal_year, VAT_RETURNS), quarter_id)

    def list_fiscal_years(self) -> list[FiscalYear]:
        fiscal_years = []
        for document in self._store.list(self._years_path()):
            try:
                fiscal_years.append(FiscalYear.parse(document["id"]))
            except ValidationError:
                self._logger.warning(
                    f"Ignoring year document with invalid id '{document['id']}'"
                )
        return sorted(fiscal_years)

    def register_fiscal_year(self, fiscal_year: FiscalYear) -> None:
        self._store.put(
            self._years_path(),
            fiscal_year.label,
            {"fiscalYear": fiscal_year.label},
            WriteMode.MERGE,
        )


__all__ = [
    "DocumentLedgerRepository",
    "DAILY_FIGURES",
    "WAGES",
    "FIXED_COSTS",
    "SUNDRIES",
    "MONTHLY_SUMMARIES",
    "VAT_RETURNS",
]
