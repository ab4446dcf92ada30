"""Domain models for summary reconciliation outcomes."""

from dataclasses import dataclass, field
from datetime import datetime

from src.domain.models.ledger import StoredSummary


@dataclass(frozen=True)
class ReconciliationConflict:
    """Duplicates that tied on completeness score and timestamp.

    The tie is broken by document id, but its presence points at an
    upstream duplicate-write bug and is reported to the caller.
    """

    month: str
    kept_doc_id: str
    tied_doc_ids: tuple[str, ...]
    score: int
    updated_at: datetime | None


@dataclass(frozen=True)
class ReconciliationOutcome:
    """Canonical summary per month plus the document ids to delete."""

    kept: dict[str, StoredSummary]
    deleted: list[str]
    conflicts: list[ReconciliationConflict] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


__all__ = ["ReconciliationConflict", "ReconciliationOutcome"]
