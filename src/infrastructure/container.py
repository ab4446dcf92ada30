"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.document_store import DocumentStorePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.aggregate_month import AggregateMonthUseCase
from src.application.use_cases.compare_years import CompareYearsUseCase
from src.application.use_cases.list_fiscal_years import ListFiscalYearsUseCase
from src.application.use_cases.recompute_year import RecomputeYearUseCase
from src.application.use_cases.reconcile_year import ReconcileYearUseCase
from src.application.use_cases.record_ledger_entries import (
    RecordLedgerEntriesUseCase,
)
from src.application.use_cases.roll_over_fiscal_year import (
    RollOverFiscalYearUseCase,
)
from src.application.use_cases.vat_returns import VatReturnsUseCase
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.in_memory_document_store import InMemoryDocumentStore
from src.infrastructure.ledger_repository import DocumentLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.sqlalchemy_document_store import (
    SqlAlchemyDocumentStore,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_document_store(
    settings: LedgerSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> DocumentStorePort:
    """Return the document store selected by ``LEDGER_STORE_BACKEND``."""
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.store_backend == "memory":
        return InMemoryDocumentStore(max_batch_size=resolved_settings.batch_limit)
    store = SqlAlchemyDocumentStore(
        db_port or build_database_adapter(),
        max_batch_size=resolved_settings.batch_limit,
    )
    store.prepare_store()
    return store


def build_ledger_repository(
    settings: LedgerSettings | None = None,
    store: DocumentStorePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository for the configured user."""
    resolved_settings = settings or LedgerSettings.from_env()
    resolved_store = store or build_document_store(resolved_settings)
    return DocumentLedgerRepository(
        resolved_store,
        user_id=resolved_settings.user_id,
        logger=get_app_logger(),
    )


def build_aggregate_month_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> AggregateMonthUseCase:
    return AggregateMonthUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_recompute_year_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> RecomputeYearUseCase:
    resolved = repository or build_ledger_repository()
    return RecomputeYearUseCase(
        resolved,
        aggregate_month=build_aggregate_month_use_case(resolved),
        logger=get_app_logger(),
    )


def build_reconcile_year_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> ReconcileYearUseCase:
    resolved = repository or build_ledger_repository()
    return ReconcileYearUseCase(
        resolved,
        recompute_year=build_recompute_year_use_case(resolved),
        logger=get_app_logger(),
    )


def build_compare_years_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> CompareYearsUseCase:
    resolved = repository or build_ledger_repository()
    return CompareYearsUseCase(
        resolved,
        recompute_year=build_recompute_year_use_case(resolved),
        logger=get_app_logger(),
    )


def build_list_fiscal_years_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> ListFiscalYearsUseCase:
    return ListFiscalYearsUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_roll_over_fiscal_year_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> RollOverFiscalYearUseCase:
    return RollOverFiscalYearUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


def build_record_ledger_entries_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
) -> RecordLedgerEntriesUseCase:
    """Return the entry use case stamping the configured Friday pay."""
    resolved_settings = settings or LedgerSettings.from_env()
    return RecordLedgerEntriesUseCase(
        repository or build_ledger_repository(resolved_settings),
        logger=get_app_logger(),
        friday_pay=resolved_settings.friday_pay,
    )


def build_vat_returns_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> VatReturnsUseCase:
    return VatReturnsUseCase(
        repository or build_ledger_repository(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_document_store",
    "build_ledger_repository",
    "build_aggregate_month_use_case",
    "build_recompute_year_use_case",
    "build_reconcile_year_use_case",
    "build_compare_years_use_case",
    "build_list_fiscal_years_use_case",
    "build_roll_over_fiscal_year_use_case",
    "build_record_ledger_entries_use_case",
    "build_vat_returns_use_case",
]
