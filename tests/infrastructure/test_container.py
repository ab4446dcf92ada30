"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.compare_years import CompareYearsUseCase
from src.application.use_cases.recompute_year import RecomputeYearUseCase
from src.application.use_cases.reconcile_year import ReconcileYearUseCase
from src.application.use_cases.record_ledger_entries import (
    RecordLedgerEntriesUseCase,
)
from src.application.use_cases.vat_returns import VatReturnsUseCase
from src.domain.models.calendar import FiscalYear
from src.infrastructure import container
from src.infrastructure.in_memory_document_store import InMemoryDocumentStore
from src.infrastructure.ledger_repository import DocumentLedgerRepository
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sqlalchemy_document_store import SqlAlchemyDocumentStore


def test_memory_backend_builds_in_memory_store() -> None:
    store = container.build_document_store(
        LedgerSettings(store_backend="memory", batch_limit=7)
    )

    assert isinstance(store, InMemoryDocumentStore)
    assert store.max_batch_size == 7


def test_sqlalchemy_backend_prepares_store(monkeypatch) -> None:
    prepared = []
    monkeypatch.setattr(
        SqlAlchemyDocumentStore,
        "prepare_store",
        lambda self: prepared.append(self),
    )
    db_port = MagicMock()

    store = container.build_document_store(LedgerSettings(), db_port=db_port)

    assert isinstance(store, SqlAlchemyDocumentStore)
    assert prepared == [store]


def test_repository_uses_configured_user(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    store = InMemoryDocumentStore()

    repository = container.build_ledger_repository(
        LedgerSettings(user_id="shop-9"),
        store=store,
    )
    repository.register_fiscal_year(FiscalYear(2024))

    assert isinstance(repository, DocumentLedgerRepository)
    assert store.get("users/shop-9/years", "2024-25") is not None


def test_use_case_builders_share_repository(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()

    recompute = container.build_recompute_year_use_case(repository)
    reconcile = container.build_reconcile_year_use_case(repository)
    compare = container.build_compare_years_use_case(repository)

    assert isinstance(recompute, RecomputeYearUseCase)
    assert isinstance(reconcile, ReconcileYearUseCase)
    assert isinstance(compare, CompareYearsUseCase)
    assert recompute._aggregate_month._repository is repository
    assert reconcile._repository is repository
    assert reconcile._recompute_year._aggregate_month._repository is repository
    assert compare._repository is repository


def test_record_entries_builder_uses_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    use_case = container.build_record_ledger_entries_use_case(
        MagicMock(),
        settings=LedgerSettings(friday_pay=Decimal("400")),
    )

    assert isinstance(use_case, RecordLedgerEntriesUseCase)
    assert use_case._friday_pay == Decimal("400")


def test_vat_returns_builder_uses_given_repository(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    repository = MagicMock()

    use_case = container.build_vat_returns_use_case(repository)

    assert isinstance(use_case, VatReturnsUseCase)
    assert use_case._repository is repository
