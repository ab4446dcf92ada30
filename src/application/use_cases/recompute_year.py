"""Use case to recompute every month of a fiscal year."""

from dataclasses import dataclass, field

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.aggregate_month import AggregateMonthUseCase
from src.domain.errors import StorageError, ValidationError
from src.domain.models.calendar import FiscalYear
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RecomputeYearResult:
    """Result of a full-year recompute.

    Attributes:
        fiscal_year: Fiscal year label.
        months_written: Months whose summaries were written, in order.
        failed_month: Month at which a failure stopped the run.
        error: Message of the storage or validation failure, if any.
    """

    fiscal_year: str
    months_written: list[str] = field(default_factory=list)
    failed_month: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecomputeYearUseCase:
    """Run the month aggregation sequentially over a fiscal year."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        aggregate_month: AggregateMonthUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port for reading streams and writing summaries.
            aggregate_month: Optional month aggregation use case.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._aggregate_month = aggregate_month or AggregateMonthUseCase(
            repository,
            logger=self._logger,
        )

    def run(self, fiscal_year: FiscalYear | str) -> RecomputeYearResult:
        """Recompute October through September.

        The run stops at the first storage failure or malformed stored
        record. Months already written stay written, so re-running from
        the start is safe.

        Returns:
            RecomputeYearResult: Months written and any failure.
        """
        parsed_year = FiscalYear.parse(fiscal_year)
        months_written: list[str] = []
        for month in parsed_year.months:
            try:
                self._aggregate_month.execute(parsed_year, month)
            except (StorageError, ValidationError) as exc:
                self._logger.error(
                    f"Recompute of {parsed_year.label} stopped at {month}: {exc}"
                )
                return RecomputeYearResult(
                    fiscal_year=parsed_year.label,
                    months_written=months_written,
                    failed_month=str(month),
                    error=str(exc),
                )
            months_written.append(str(month))
        self._logger.info(
            f"Recomputed {len(months_written)} months for {parsed_year.label}"
        )
        return RecomputeYearResult(
            fiscal_year=parsed_year.label,
            months_written=months_written,
        )


__all__ = ["RecomputeYearUseCase", "RecomputeYearResult"]
