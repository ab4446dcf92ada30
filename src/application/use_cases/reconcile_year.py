"""Use case to deduplicate or rebuild a fiscal year's summaries."""

from dataclasses import dataclass, field

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.recompute_year import (
    RecomputeYearResult,
    RecomputeYearUseCase,
)
from src.domain.models.calendar import FiscalYear
from src.domain.models.reconciliation import ReconciliationConflict
from src.domain.services.reconciliation import reconcile_summaries
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReconcileYearResult:
    """Result of a reconciliation run.

    Attributes:
        fiscal_year: Fiscal year label.
        kept_count: Canonical summaries left, one per month.
        deleted_count: Summary documents removed.
        rekeyed_count: Kept summaries moved under their month id.
        conflicts: Ties resolved by document id.
        skipped_count: Documents ignored because they carry no month.
        recompute: Recompute outcome when rebuilding.
    """

    fiscal_year: str
    kept_count: int
    deleted_count: int
    rekeyed_count: int = 0
    conflicts: list[ReconciliationConflict] = field(default_factory=list)
    skipped_count: int = 0
    recompute: RecomputeYearResult | None = None


class ReconcileYearUseCase:
    """Heal duplicated monthly summaries for a fiscal year."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        recompute_year: RecomputeYearUseCase | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port for reading and deleting summaries.
            recompute_year: Optional recompute use case for rebuild mode.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._recompute_year = recompute_year or RecomputeYearUseCase(
            repository,
            logger=self._logger,
        )

    def execute(
        self,
        fiscal_year: FiscalYear | str,
        rebuild: bool = False,
    ) -> ReconcileYearResult:
        """Reconcile the year's summaries.

        Args:
            fiscal_year: Fiscal year label such as ``"2024-25"``.
            rebuild: Delete every summary and recompute the year instead
                of keeping the best record per month.

        Returns:
            ReconcileYearResult: Counts, conflicts, and recompute outcome.

        Raises:
            StorageError: If reading or deleting fails.
        """
        parsed_year = FiscalYear.parse(fiscal_year)
        if rebuild:
            return self._rebuild(parsed_year)
        return self._dedupe(parsed_year)

    def _dedupe(self, fiscal_year: FiscalYear) -> ReconcileYearResult:
        stored = self._repository.fetch_monthly_summaries(fiscal_year)
        outcome = reconcile_summaries(stored)

        for doc_id in outcome.skipped:
            self._logger.warning(
                f"Skipping summary '{doc_id}' in {fiscal_year.label}: no month"
            )
        for conflict in outcome.conflicts:
            self._logger.warning(
                f"Tied summaries for {conflict.month} in {fiscal_year.label}: "
                f"kept '{conflict.kept_doc_id}' over "
                f"{', '.join(conflict.tied_doc_ids)}"
            )

        rekeyed_months = set()
        obsolete_ids = []
        for month, winner in outcome.kept.items():
            if winner.doc_id == month:
                continue
            self._repository.save_monthly_summary(
                fiscal_year,
                winner.summary,
                doc_id=month,
            )
            rekeyed_months.add(month)
            obsolete_ids.append(winner.doc_id)

        # Ids now holding a re-keyed winner must survive the cleanup.
        to_delete = [
            doc_id
            for doc_id in outcome.deleted + obsolete_ids
            if doc_id not in outcome.kept
        ]
        self._repository.delete_monthly_summaries(fiscal_year, to_delete)
        self._logger.info(
            f"Reconciled {fiscal_year.label}: kept {len(outcome.kept)}, "
            f"deleted {len(outcome.deleted)}, re-keyed {len(rekeyed_months)}"
        )
        return ReconcileYearResult(
            fiscal_year=fiscal_year.label,
            kept_count=len(outcome.kept),
            deleted_count=len(outcome.deleted),
            rekeyed_count=len(rekeyed_months),
            conflicts=outcome.conflicts,
            skipped_count=len(outcome.skipped),
        )

    def _rebuild(self, fiscal_year: FiscalYear) -> ReconcileYearResult:
        stored = self._repository.fetch_monthly_summaries(fiscal_year)
        deleted = self._repository.delete_monthly_summaries(
            fiscal_year,
            [candidate.doc_id for candidate in stored],
        )
        self._logger.info(
            f"Deleted {deleted} summaries for {fiscal_year.label}; rebuilding"
        )
        recompute = self._recompute_year.run(fiscal_year)
        return ReconcileYearResult(
            fiscal_year=fiscal_year.label,
            kept_count=len(recompute.months_written),
            deleted_count=deleted,
            recompute=recompute,
        )


__all__ = ["ReconcileYearUseCase", "ReconcileYearResult"]
