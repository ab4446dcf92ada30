"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


@pytest.fixture(autouse=True)
def _quiet_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in (
        "LEDGER_USER_ID",
        "LEDGER_STORE_BACKEND",
        "LEDGER_BATCH_LIMIT",
        "LEDGER_FRIDAY_PAY",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_defaults() -> None:
    settings = LedgerSettings.from_env()

    assert settings.user_id == "default"
    assert settings.store_backend == "sqlalchemy"
    assert settings.batch_limit == 500
    assert settings.friday_pay == Decimal("455.37")


def test_from_env_reads_values(monkeypatch) -> None:
    monkeypatch.setenv("LEDGER_USER_ID", "shop-1")
    monkeypatch.setenv("LEDGER_STORE_BACKEND", " Memory ")
    monkeypatch.setenv("LEDGER_BATCH_LIMIT", "50")
    monkeypatch.setenv("LEDGER_FRIDAY_PAY", "400.00")

    settings = LedgerSettings.from_env()

    assert settings.user_id == "shop-1"
    assert settings.store_backend == "memory"
    assert settings.batch_limit == 50
    assert settings.friday_pay == Decimal("400.00")


@pytest.mark.parametrize("raw_value", ["lots", "0", "-5"])
def test_invalid_batch_limit_falls_back(monkeypatch, _quiet_logger, raw_value):
    monkeypatch.setenv("LEDGER_BATCH_LIMIT", raw_value)

    settings = LedgerSettings.from_env()

    assert settings.batch_limit == 500
    _quiet_logger.warning.assert_called_once()


def test_unknown_backend_falls_back(monkeypatch, _quiet_logger) -> None:
    monkeypatch.setenv("LEDGER_STORE_BACKEND", "firestore")

    assert LedgerSettings.from_env().store_backend == "sqlalchemy"
    _quiet_logger.warning.assert_called_once()


def test_invalid_friday_pay_falls_back(monkeypatch, _quiet_logger) -> None:
    monkeypatch.setenv("LEDGER_FRIDAY_PAY", "plenty")

    assert LedgerSettings.from_env().friday_pay == Decimal("455.37")
    _quiet_logger.warning.assert_called_once()
