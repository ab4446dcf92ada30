"""Deduplication of monthly summary documents."""

from collections.abc import Iterable
from datetime import datetime, timezone

from src.domain.models.ledger import StoredSummary
from src.domain.models.reconciliation import (
    ReconciliationConflict,
    ReconciliationOutcome,
)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _timestamp(candidate: StoredSummary) -> datetime:
    updated_at = candidate.summary.updated_at
    if updated_at is None:
        return _OLDEST
    if updated_at.tzinfo is None:
        return updated_at.replace(tzinfo=timezone.utc)
    return updated_at


def _ranked(group: list[StoredSummary]) -> list[StoredSummary]:
    # Stable sorts applied from the last tie-break to the first.
    ranked = sorted(group, key=lambda candidate: candidate.doc_id)
    ranked.sort(key=_timestamp, reverse=True)
    ranked.sort(
        key=lambda candidate: candidate.summary.completeness_score,
        reverse=True,
    )
    return ranked


def reconcile_summaries(
    candidates: Iterable[StoredSummary],
) -> ReconciliationOutcome:
    """Pick one canonical summary per month and list the rest for deletion.

    Within a month the candidate with the highest completeness score wins
    (count of non-zero wages, fixed costs, and sundries). Ties go to the
    latest ``updated_at`` and then to the lexicographically smallest
    document id. Candidates without a month are skipped.

    Args:
        candidates: Summary documents read for one fiscal year.

    Returns:
        ReconciliationOutcome: Kept summaries keyed by month, deleted
        document ids, tie conflicts, and skipped document ids.
    """
    groups: dict[str, list[StoredSummary]] = {}
    skipped: list[str] = []
    for candidate in candidates:
        if not candidate.month:
            skipped.append(candidate.doc_id)
            continue
        groups.setdefault(candidate.month, []).append(candidate)

    kept: dict[str, StoredSummary] = {}
    deleted: list[str] = []
    conflicts: list[ReconciliationConflict] = []
    for month in sorted(groups):
        ranked = _ranked(groups[month])
        winner = ranked[0]
        kept[month] = winner
        losers = ranked[1:]
        deleted.extend(loser.doc_id for loser in losers)

        tied = [
            loser.doc_id
            for loser in losers
            if loser.summary.completeness_score
            == winner.summary.completeness_score
            and _timestamp(loser) == _timestamp(winner)
        ]
        if tied:
            conflicts.append(
                ReconciliationConflict(
                    month=month,
                    kept_doc_id=winner.doc_id,
                    tied_doc_ids=tuple(tied),
                    score=winner.summary.completeness_score,
                    updated_at=winner.summary.updated_at,
                )
            )

    return ReconciliationOutcome(
        kept=kept,
        deleted=deleted,
        conflicts=conflicts,
        skipped=skipped,
    )


__all__ = ["reconcile_summaries"]
