"""Tests for the compare_years_cli adapter."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import compare_years_cli
from src.domain.errors import StorageError, ValidationError
from src.domain.models.ledger import MonthlySummary
from src.domain.services.comparison import build_comparison


def _comparison():
    return build_comparison(
        {
            "2023-24": [
                MonthlySummary(
                    month="2023-10",
                    net_income=Decimal("100"),
                    wages=Decimal("40"),
                    profit=Decimal("60"),
                )
            ],
            "2024-25": [
                MonthlySummary(
                    month="2024-10",
                    net_income=Decimal("150"),
                    wages=Decimal("40"),
                    profit=Decimal("110"),
                )
            ],
        }
    )


def _patch(monkeypatch, known_years=None):
    logger = MagicMock()
    compare = MagicMock()
    compare.execute.return_value = _comparison()
    list_years = MagicMock()
    list_years.execute.return_value = known_years or []
    monkeypatch.setattr(compare_years_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(compare_years_cli, "build_ledger_repository", MagicMock)
    monkeypatch.setattr(
        compare_years_cli,
        "build_compare_years_use_case",
        lambda repository: compare,
    )
    monkeypatch.setattr(
        compare_years_cli,
        "build_list_fiscal_years_use_case",
        lambda repository: list_years,
    )
    return logger, compare


def test_format_change() -> None:
    assert compare_years_cli._format_change(None) == "n/a"
    assert compare_years_cli._format_change(Decimal("12.345")) == "+12.3%"
    assert compare_years_cli._format_change(Decimal("-5")) == "-5.0%"


def test_main_prints_totals_and_deltas(monkeypatch, capsys) -> None:
    monkeypatch.setenv("LEDGER_COMPARE_YEARS", "2024-25, 2023-24")
    _, compare = _patch(monkeypatch)

    compare_years_cli.main()

    compare.execute.assert_called_once_with(["2024-25", "2023-24"])
    output = capsys.readouterr().out
    assert "2023-24: net_income=100.00, costs=40.00, profit=60.00" in output
    assert "2024-25 vs 2023-24: net_income=+50.0%, costs=+0.0%, profit=+83.3%" in (
        output
    )


def test_main_defaults_to_two_latest_years(monkeypatch) -> None:
    monkeypatch.delenv("LEDGER_COMPARE_YEARS", raising=False)
    _, compare = _patch(monkeypatch, ["2024-25", "2023-24", "2022-23"])

    compare_years_cli.main()

    compare.execute.assert_called_once_with(["2024-25", "2023-24"])


def test_main_warns_without_years(monkeypatch, capsys) -> None:
    monkeypatch.delenv("LEDGER_COMPARE_YEARS", raising=False)
    logger, compare = _patch(monkeypatch)

    compare_years_cli.main()

    compare.execute.assert_not_called()
    logger.warning.assert_called_once_with("No fiscal years found to compare.")
    assert capsys.readouterr().out == ""


def test_main_logs_invalid_years(monkeypatch, capsys) -> None:
    monkeypatch.setenv("LEDGER_COMPARE_YEARS", "last-year")
    logger, compare = _patch(monkeypatch)
    compare.execute.side_effect = ValidationError("Invalid fiscal year 'last-year'")

    compare_years_cli.main()

    logger.error.assert_called_once_with("Invalid fiscal year 'last-year'")
    assert capsys.readouterr().out == ""


def test_main_logs_failed_self_heal(monkeypatch, capsys) -> None:
    monkeypatch.setenv("LEDGER_COMPARE_YEARS", "2024-25")
    logger, compare = _patch(monkeypatch)
    compare.execute.side_effect = StorageError(
        "Recompute of 2024-25 failed at 2024-10: unknown frequency"
    )

    compare_years_cli.main()

    logger.error.assert_called_once_with(
        "Recompute of 2024-25 failed at 2024-10: unknown frequency"
    )
    assert capsys.readouterr().out == ""
