"""Tests for the RecomputeYearUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.recompute_year import RecomputeYearUseCase
from src.domain import fiscal_year_months
from src.domain.errors import StorageError
from src.domain.models.ledger import MonthlySummary
from src.infrastructure.in_memory_document_store import InMemoryDocumentStore
from src.infrastructure.ledger_repository import DocumentLedgerRepository


def test_run_writes_all_twelve_months() -> None:
    store = InMemoryDocumentStore()
    repository = DocumentLedgerRepository(store, "u1", logger=MagicMock())
    use_case = RecomputeYearUseCase(repository, logger=MagicMock())

    result = use_case.run("2024-25")

    assert result.ok is True
    assert result.months_written == fiscal_year_months("2024-25")
    stored = store.list("users/u1/years/2024-25/monthlySummaries")
    assert [doc["id"] for doc in stored] == fiscal_year_months("2024-25")


def test_run_stops_at_first_storage_error() -> None:
    """Months before the failure stay written; later ones are not tried."""
    aggregate_month = MagicMock()
    aggregate_month.execute.side_effect = [
        MonthlySummary(month="2024-10"),
        MonthlySummary(month="2024-11"),
        StorageError("quota exceeded"),
    ]
    logger = MagicMock()
    use_case = RecomputeYearUseCase(
        MagicMock(),
        aggregate_month=aggregate_month,
        logger=logger,
    )

    result = use_case.run("2024-25")

    assert result.ok is False
    assert result.months_written == ["2024-10", "2024-11"]
    assert result.failed_month == "2024-12"
    assert result.error == "quota exceeded"
    assert aggregate_month.execute.call_count == 3
    logger.error.assert_called_once()


def test_run_reports_malformed_record_as_failure() -> None:
    """A stored fixed cost with an unknown frequency ends the run cleanly."""
    store = InMemoryDocumentStore()
    store.put(
        "users/u1/years/2024-25/fixedCosts",
        "gym",
        {"service": "Gym", "cost": 30, "frequency": "fortnightly"},
    )
    repository = DocumentLedgerRepository(store, "u1", logger=MagicMock())
    logger = MagicMock()
    use_case = RecomputeYearUseCase(repository, logger=logger)

    result = use_case.run("2024-25")

    assert result.ok is False
    assert result.months_written == []
    assert result.failed_month == "2024-10"
    assert "fortnightly" in result.error
    logger.error.assert_called_once()
