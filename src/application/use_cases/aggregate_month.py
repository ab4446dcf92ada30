"""Use case to recompute and persist one month's summary."""

from collections.abc import Callable
from datetime import datetime, timezone

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.calendar import FiscalYear, MonthKey
from src.domain.models.ledger import MonthlySummary
from src.domain.policies import ensure_month_in_fiscal_year
from src.domain.services.aggregation import compute_monthly_summary
from src.infrastructure.logging.logger import get_app_logger


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AggregateMonthUseCase:
    """Aggregate the four ledger streams into one monthly summary."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port for reading streams and writing summaries.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the write timestamp.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now

    def execute(
        self,
        fiscal_year: FiscalYear | str,
        month_key: MonthKey | str,
    ) -> MonthlySummary:
        """Compute the month's summary and replace the stored one.

        Args:
            fiscal_year: Fiscal year label such as ``"2024-25"``.
            month_key: Month in ``YYYY-MM`` format inside the fiscal year.

        Returns:
            MonthlySummary: The summary that was written.

        Raises:
            ValidationError: If the month is outside the fiscal year or a
                stored document is malformed.
            StorageError: If the store fails; nothing is written then.
        """
        parsed_year = FiscalYear.parse(fiscal_year)
        month = ensure_month_in_fiscal_year(month_key, parsed_year)

        daily_figures = self._repository.fetch_daily_figures(parsed_year, month)
        wage_record = self._repository.fetch_wage_record(parsed_year, month)
        fixed_costs = self._repository.fetch_fixed_costs(parsed_year)
        sundries = self._repository.fetch_sundries(parsed_year, month)

        summary = compute_monthly_summary(
            month,
            daily_figures,
            wage_record,
            fixed_costs,
            sundries,
            updated_at=self._clock(),
        )
        self._repository.save_monthly_summary(parsed_year, summary)
        self._logger.info(
            f"Computed {month} for {parsed_year.label}: "
            f"net income {summary.net_income}, profit {summary.profit}"
        )
        return summary


__all__ = ["AggregateMonthUseCase"]
