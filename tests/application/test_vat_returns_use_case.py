"""Tests for the VatReturnsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.vat_returns import VatReturnsUseCase
from src.domain.errors import ValidationError
from src.domain.models.calendar import FiscalYear
from src.domain.models.vat import VatStatus
from src.infrastructure.in_memory_document_store import InMemoryDocumentStore
from src.infrastructure.ledger_repository import DocumentLedgerRepository

FY = FiscalYear(2024)


def _build():
    store = InMemoryDocumentStore()
    repository = DocumentLedgerRepository(store, "u1", logger=MagicMock())
    logger = MagicMock()
    return VatReturnsUseCase(repository, logger=logger), repository, logger


def test_record_saves_return_and_registers_year() -> None:
    use_case, repository, _ = _build()

    vat_return = use_case.record(
        "2024-25",
        " q1 ",
        "2024-10-01",
        date(2024, 12, 31),
        hmrc_amount=Decimal("480"),
        marstons_amount=Decimal("500"),
    )

    assert vat_return.quarter_id == "q1"
    assert vat_return.difference == Decimal("-20")
    assert vat_return.status is VatStatus.MARSTONS_HIGHER
    assert repository.fetch_vat_returns(FY) == [vat_return]
    assert repository.list_fiscal_years() == [FY]


def test_record_rejects_periods_outside_the_year() -> None:
    use_case, repository, _ = _build()

    with pytest.raises(ValidationError):
        use_case.record("2024-25", "q4", "2025-07-01", "2025-10-31")

    assert repository.list_fiscal_years() == []


def test_summarize_totals_the_year() -> None:
    use_case, _, logger = _build()
    use_case.record(
        "2024-25",
        "q2",
        "2025-01-01",
        "2025-03-31",
        hmrc_amount=Decimal("300"),
        marstons_amount=Decimal("300"),
    )
    use_case.record(
        "2024-25",
        "q1",
        "2024-10-01",
        "2024-12-31",
        hmrc_amount=Decimal("510"),
        marstons_amount=Decimal("500"),
    )

    summary = use_case.summarize("2024-25")

    assert [item.quarter_id for item in summary.returns] == ["q1", "q2"]
    assert [item.status for item in summary.returns] == [
        VatStatus.HMRC_HIGHER,
        VatStatus.MATCHED,
    ]
    assert summary.hmrc_total == Decimal("810")
    assert summary.difference_total == Decimal("10")
    assert logger.info.call_args.args[0] == "Summarized 2 VAT returns for 2024-25"


def test_delete_removes_one_return() -> None:
    use_case, repository, _ = _build()
    use_case.record("2024-25", "q1", "2024-10-01", "2024-12-31")
    use_case.record("2024-25", "q2", "2025-01-01", "2025-03-31")

    use_case.delete("2024-25", "q1")

    assert [item.quarter_id for item in repository.fetch_vat_returns(FY)] == ["q2"]


def test_delete_requires_a_quarter_id() -> None:
    use_case, _, _ = _build()

    with pytest.raises(ValidationError):
        use_case.delete("2024-25", "")
