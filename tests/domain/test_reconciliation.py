"""Tests for monthly summary deduplication."""

from datetime import datetime, timezone
from decimal import Decimal

from src.domain import reconcile_summaries
from src.domain.models.ledger import MonthlySummary, StoredSummary


def _stored(
    doc_id: str,
    month: str = "2024-10",
    wages: str = "0",
    fixed_costs: str = "0",
    sundries: str = "0",
    updated_at: datetime | None = None,
) -> StoredSummary:
    return StoredSummary(
        doc_id=doc_id,
        summary=MonthlySummary(
            month=month,
            wages=Decimal(wages),
            fixed_costs=Decimal(fixed_costs),
            sundries=Decimal(sundries),
            updated_at=updated_at,
        ),
    )


def _at(day: int) -> datetime:
    return datetime(2024, 11, day, tzinfo=timezone.utc)


def test_keeps_the_most_complete_summary() -> None:
    """Scores 0, 1 and 2: only the score-2 record survives."""
    outcome = reconcile_summaries(
        [
            _stored("a", updated_at=_at(3)),
            _stored("b", wages="10", updated_at=_at(2)),
            _stored("c", wages="10", sundries="5", updated_at=_at(1)),
        ]
    )

    assert outcome.kept["2024-10"].doc_id == "c"
    assert sorted(outcome.deleted) == ["a", "b"]
    assert outcome.conflicts == []


def test_latest_update_breaks_score_ties() -> None:
    outcome = reconcile_summaries(
        [
            _stored("a", wages="1", updated_at=_at(1)),
            _stored("b", wages="1", updated_at=_at(5)),
            _stored("c", wages="1"),
        ]
    )

    assert outcome.kept["2024-10"].doc_id == "b"
    assert sorted(outcome.deleted) == ["a", "c"]


def test_naive_and_aware_timestamps_compare() -> None:
    """Naive timestamps are treated as UTC."""
    outcome = reconcile_summaries(
        [
            _stored("a", updated_at=datetime(2024, 11, 2)),
            _stored("b", updated_at=_at(1)),
        ]
    )

    assert outcome.kept["2024-10"].doc_id == "a"


def test_full_tie_keeps_smallest_id_and_reports_conflict() -> None:
    outcome = reconcile_summaries(
        [
            _stored("zeta", wages="1", updated_at=_at(1)),
            _stored("2024-10", wages="1", updated_at=_at(1)),
            _stored("alpha", wages="1", updated_at=_at(1)),
        ]
    )

    assert outcome.kept["2024-10"].doc_id == "2024-10"
    assert len(outcome.conflicts) == 1
    conflict = outcome.conflicts[0]
    assert conflict.month == "2024-10"
    assert conflict.kept_doc_id == "2024-10"
    assert conflict.tied_doc_ids == ("alpha", "zeta")
    assert conflict.score == 1


def test_groups_by_month_and_skips_missing_months() -> None:
    outcome = reconcile_summaries(
        [
            _stored("oct", month="2024-10"),
            _stored("nov", month="2024-11"),
            _stored("orphan", month=""),
        ]
    )

    assert sorted(outcome.kept) == ["2024-10", "2024-11"]
    assert outcome.deleted == []
    assert outcome.skipped == ["orphan"]


def test_empty_input() -> None:
    outcome = reconcile_summaries([])

    assert outcome.kept == {}
    assert outcome.deleted == []
