"""Tests for the ledger database health-check adapter."""

from unittest.mock import MagicMock

from src.adapters import test_db_connection


def test_main_runs_select_one_on_ledger_engine(monkeypatch):
    """The check should log the ledger URL, ping it, then log success."""
    engine = MagicMock()
    engine.url = "sqlite:///ledger.db"
    connection = engine.connect.return_value.__enter__.return_value
    adapter = MagicMock()
    adapter.get_ledger_engine.return_value = engine
    logger = MagicMock()
    monkeypatch.setattr(test_db_connection, "build_database_adapter", lambda: adapter)
    monkeypatch.setattr(test_db_connection, "get_app_logger", lambda: logger)

    test_db_connection.main()

    connection.exec_driver_sql.assert_called_once_with("SELECT 1")
    messages = [call.args[0] for call in logger.info.call_args_list]
    assert messages == [
        "Ledger DB: sqlite:///ledger.db",
        "Ledger connection is working.",
    ]
