"""SQLAlchemy engine for the ledger document table.

``LEDGER_DB_URL`` names the database; a local ``.env`` file may provide it.
The engine is created on first use and shared by every store in the
process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting from the environment.

    Args:
        name: Environment variable to read after loading ``.env``.

    Returns:
        str: Non-empty value of the variable.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine that checks connections before use."""
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Return the process-wide ledger engine, creating it on first call."""
    global _ledger_engine
    if _ledger_engine is None:
        _ledger_engine = _create_engine(_get_env_var("LEDGER_DB_URL"))
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the module engine through ``DatabaseEnginePort``."""

    def get_ledger_engine(self) -> Engine:
        return get_ledger_engine()


__all__ = ["get_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
