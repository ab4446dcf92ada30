"""Application use cases package."""

from .aggregate_month import AggregateMonthUseCase
from .compare_years import CompareYearsUseCase
from .list_fiscal_years import ListFiscalYearsUseCase, default_comparison_years
from .recompute_year import RecomputeYearResult, RecomputeYearUseCase
from .reconcile_year import ReconcileYearResult, ReconcileYearUseCase
from .record_ledger_entries import RecordLedgerEntriesUseCase
from .roll_over_fiscal_year import RolloverResult, RollOverFiscalYearUseCase
from .vat_returns import VatReturnsUseCase

__all__ = [
    "AggregateMonthUseCase",
    "CompareYearsUseCase",
    "ListFiscalYearsUseCase",
    "default_comparison_years",
    "RecomputeYearResult",
    "RecomputeYearUseCase",
    "ReconcileYearResult",
    "ReconcileYearUseCase",
    "RecordLedgerEntriesUseCase",
    "RolloverResult",
    "RollOverFiscalYearUseCase",
    "VatReturnsUseCase",
]
