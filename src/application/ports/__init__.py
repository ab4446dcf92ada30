"""Application ports package."""

from .database import DatabaseEnginePort
from .document_store import (
    BatchOperation,
    DeleteOperation,
    DocumentStorePort,
    FieldFilter,
    PutOperation,
    WriteMode,
    chunked,
)
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "BatchOperation",
    "DeleteOperation",
    "DocumentStorePort",
    "FieldFilter",
    "PutOperation",
    "WriteMode",
    "chunked",
    "LedgerRepositoryPort",
]
