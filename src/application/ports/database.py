"""Port giving stores access to the ledger's SQL engine."""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Source of the engine behind the SQL document store."""

    def get_ledger_engine(self) -> Engine:
        """Return the engine holding the ``ledger_documents`` table."""


__all__ = ["DatabaseEnginePort"]
