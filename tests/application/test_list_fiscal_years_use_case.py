"""Tests for the ListFiscalYearsUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.list_fiscal_years import (
    ListFiscalYearsUseCase,
    default_comparison_years,
)
from src.domain.models.calendar import FiscalYear
from src.infrastructure.in_memory_document_store import InMemoryDocumentStore
from src.infrastructure.ledger_repository import DocumentLedgerRepository


def test_execute_returns_newest_first() -> None:
    repository = DocumentLedgerRepository(
        InMemoryDocumentStore(),
        "u1",
        logger=MagicMock(),
    )
    for start_year in (2023, 2024, 2022):
        repository.register_fiscal_year(FiscalYear(start_year))

    labels = ListFiscalYearsUseCase(repository, logger=MagicMock()).execute()

    assert labels == ["2024-25", "2023-24", "2022-23"]
    assert default_comparison_years(labels) == ["2024-25", "2023-24"]


def test_execute_with_no_years() -> None:
    repository = MagicMock()
    repository.list_fiscal_years.return_value = []

    labels = ListFiscalYearsUseCase(repository, logger=MagicMock()).execute()

    assert labels == []
    assert default_comparison_years(labels) == []
