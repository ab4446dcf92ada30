"""Use case to compare fiscal years month by month."""

from collections.abc import Sequence

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.recompute_year import RecomputeYearUseCase
from src.domain.errors import StorageError, ValidationError
from src.domain.models.calendar import FiscalYear
from src.domain.models.comparison import ComparisonResult
from src.domain.models.ledger import MonthlySummary
from src.domain.services.comparison import build_comparison
from src.domain.services.reconciliation import reconcile_summaries
from src.infrastructure.logging.logger import get_app_logger


class CompareYearsUseCase:
    """Build a year-on-year comparison, recomputing empty years first."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        recompute_year: RecomputeYearUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port for reading summaries.
            recompute_year: Optional recompute use case for self-healing.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._recompute_year = recompute_year or RecomputeYearUseCase(
            repository,
            logger=self._logger,
        )

    def execute(self, fiscal_years: Sequence[str]) -> ComparisonResult:
        """Return the aligned comparison for the selected fiscal years.

        Args:
            fiscal_years: Fiscal year labels to compare.

        Returns:
            ComparisonResult: Totals, month rows, and deltas.

        Raises:
            ValidationError: If no fiscal year is given or a label is
                malformed.
            StorageError: If reading fails or a self-heal recompute fails.
        """
        parsed_years = sorted({FiscalYear.parse(label) for label in fiscal_years})
        if not parsed_years:
            raise ValidationError("At least one fiscal year is required")

        summaries_by_year = {
            fiscal_year.label: self._load_summaries(fiscal_year)
            for fiscal_year in parsed_years
        }
        result = build_comparison(summaries_by_year)
        self._logger.info(
            f"Compared fiscal years {', '.join(result.fiscal_years)}"
        )
        return result

    def _load_summaries(self, fiscal_year: FiscalYear) -> list[MonthlySummary]:
        summaries = self._canonical_summaries(fiscal_year)
        if summaries and not all(summary.is_blank for summary in summaries):
            return summaries

        self._logger.info(
            f"No usable summaries for {fiscal_year.label}; recomputing"
        )
        recompute = self._recompute_year.run(fiscal_year)
        if not recompute.ok:
            raise StorageError(
                f"Recompute of {fiscal_year.label} failed at "
                f"{recompute.failed_month}: {recompute.error}"
            )
        return self._canonical_summaries(fiscal_year)

    def _canonical_summaries(
        self,
        fiscal_year: FiscalYear,
    ) -> list[MonthlySummary]:
        stored = self._repository.fetch_monthly_summaries(fiscal_year)
        outcome = reconcile_summaries(stored)
        months = {str(month) for month in fiscal_year.months}
        return [
            candidate.summary
            for month, candidate in sorted(outcome.kept.items())
            if month in months
        ]


__all__ = ["CompareYearsUseCase"]
