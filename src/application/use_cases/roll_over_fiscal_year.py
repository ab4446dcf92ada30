"""Use case to open the next fiscal year from the current one."""

from dataclasses import dataclass

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.calendar import FiscalYear
from src.domain.models.fixed_costs import Cancelled
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RolloverResult:
    """Result of a fiscal-year rollover.

    Attributes:
        next_fiscal_year: Label of the year that was opened.
        copied_count: Fixed costs copied into the new year.
        skipped_count: Fixed costs cancelled before the new year started.
    """

    next_fiscal_year: str
    copied_count: int
    skipped_count: int


class RollOverFiscalYearUseCase:
    """Register the next fiscal year and carry fixed costs forward."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port for reading and writing fixed costs.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, current_fiscal_year: FiscalYear | str) -> RolloverResult:
        """Copy still-relevant fixed costs into the following year.

        A cost cancelled on or after the new year's first day still accrues
        in it and is copied with its cancellation. Copies are written in
        batches within the store limit; re-running overwrites them.

        Returns:
            RolloverResult: The new year label and copy counts.
        """
        current = FiscalYear.parse(current_fiscal_year)
        following = current.next()
        self._repository.register_fiscal_year(following)

        carried = []
        skipped = 0
        for cost_def in self._repository.fetch_fixed_costs(current):
            status = cost_def.status
            if isinstance(status, Cancelled) and status.on < following.start:
                skipped += 1
                continue
            carried.append(cost_def)
        copied = self._repository.save_fixed_costs(following, carried)

        self._logger.info(
            f"Opened {following.label}: copied {copied} fixed costs, "
            f"skipped {skipped} cancelled"
        )
        return RolloverResult(
            next_fiscal_year=following.label,
            copied_count=copied,
            skipped_count=skipped,
        )


__all__ = ["RollOverFiscalYearUseCase", "RolloverResult"]
