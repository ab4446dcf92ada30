"""Tests for the roll_over_year_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import roll_over_year_cli
from src.application.use_cases.roll_over_fiscal_year import RolloverResult


def _patch(monkeypatch, past_end: bool):
    logger = MagicMock()
    use_case = MagicMock()
    use_case.execute.return_value = RolloverResult("2025-26", 4, 1)
    monkeypatch.setenv("LEDGER_FISCAL_YEAR", "2024-25")
    monkeypatch.setattr(roll_over_year_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        roll_over_year_cli,
        "is_past_fiscal_year_end",
        lambda fiscal_year: past_end,
    )
    monkeypatch.setattr(
        roll_over_year_cli,
        "build_roll_over_fiscal_year_use_case",
        lambda: use_case,
    )
    return logger, use_case


def test_main_prints_rollover_counts(monkeypatch, capsys) -> None:
    logger, use_case = _patch(monkeypatch, past_end=True)

    roll_over_year_cli.main()

    use_case.execute.assert_called_once_with("2024-25")
    logger.info.assert_not_called()
    assert (
        "Opened fiscal year 2025-26: copied 4 fixed costs, skipped 1."
        in capsys.readouterr().out
    )


def test_main_notes_early_rollover(monkeypatch) -> None:
    logger, use_case = _patch(monkeypatch, past_end=False)

    roll_over_year_cli.main()

    logger.info.assert_called_once_with("Fiscal year 2024-25 has not ended yet")
    use_case.execute.assert_called_once()
