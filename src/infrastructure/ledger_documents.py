"""Mapping between stored ledger documents and domain models.

Stored documents use camelCase field names, ISO date strings and numeric
values that may arrive as numbers or strings. Malformed documents raise
``ValidationError`` naming the offending document.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from src.domain.errors import ValidationError
from src.domain.models.calendar import parse_date
from src.domain.models.fixed_costs import (
    Active,
    Cancelled,
    FixedCostDefinition,
    Frequency,
    LegacySchedule,
    MonthlySchedule,
    Schedule,
    WeeklySchedule,
    YearlySchedule,
)
from src.domain.models.ledger import (
    DailyFigure,
    MonthlySummary,
    StoredSummary,
    SundryExpense,
    WageRecord,
)
from src.domain.models.vat import VatReturn
from src.utils.decimal_utils import coerce_decimal

_SUMMARY_KEYS = {
    "gross_income": "grossIncome",
    "net_income": "netIncome",
    "vat": "vat",
    "wages": "wages",
    "fixed_costs": "fixedCosts",
    "sundries": "sundries",
    "profit": "profit",
}


def _money(document: dict[str, Any], key: str) -> Decimal:
    try:
        return coerce_decimal(document.get(key))
    except ValueError as exc:
        raise ValidationError(
            f"Document '{document.get('id')}' has invalid {key}: {exc}"
        ) from exc


def _int_field(document: dict[str, Any], key: str) -> int:
    value = document.get(key)
    if value is None or isinstance(value, bool):
        raise ValidationError(
            f"Document '{document.get('id')}' is missing {key}"
        )
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Document '{document.get('id')}' has invalid {key}: {value!r}"
        ) from exc


def parse_timestamp(value: Any) -> datetime | None:
    """Return an aware datetime from a stored timestamp, or None."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValidationError(f"Invalid timestamp '{value}'") from exc
    else:
        raise ValidationError(f"Unsupported timestamp value: {value!r}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def daily_figure_from_document(document: dict[str, Any]) -> DailyFigure:
    """Build a DailyFigure from a document carrying its own ``date``."""
    return DailyFigure(
        date=parse_date(document.get("date") or ""),
        gross_total=_money(document, "grossTotal"),
        net_total=_money(document, "netTotal"),
        fee=_money(document, "fee"),
        gross_income=_money(document, "grossIncome"),
        net_income=_money(document, "netIncome"),
        vat=_money(document, "vat"),
        abbies_pay=_money(document, "abbiesPay"),
        no_trade=bool(document.get("noTrade", False)),
    )


def daily_figure_to_document(figure: DailyFigure) -> dict[str, Any]:
    return {
        "date": figure.date.isoformat(),
        "grossTotal": figure.gross_total,
        "netTotal": figure.net_total,
        "fee": figure.fee,
        "grossIncome": figure.gross_income,
        "netIncome": figure.net_income,
        "vat": figure.vat,
        "abbiesPay": figure.abbies_pay,
        "noTrade": figure.no_trade,
    }


def wage_record_from_document(document: dict[str, Any]) -> WageRecord:
    """Build a WageRecord, deriving ``total`` when it was not stored."""
    month = document.get("month") or document.get("id")
    if not month:
        raise ValidationError("Wage document has no month")
    record = WageRecord.build(
        str(month),
        net_out=_money(document, "netOut"),
        invoices=_money(document, "invoices"),
        hmrc=_money(document, "hmrc"),
        nest=_money(document, "nest"),
        deductions=_money(document, "deductions"),
    )
    if document.get("total") is None:
        return record
    return WageRecord(
        month=record.month,
        net_out=record.net_out,
        invoices=record.invoices,
        hmrc=record.hmrc,
        nest=record.nest,
        deductions=record.deductions,
        total=_money(document, "total"),
    )


def wage_record_to_document(record: WageRecord) -> dict[str, Any]:
    return {
        "month": record.month,
        "netOut": record.net_out,
        "invoices": record.invoices,
        "hmrc": record.hmrc,
        "nest": record.nest,
        "deductions": record.deductions,
        "total": record.total,
    }


def schedule_from_document(document: dict[str, Any]) -> Schedule:
    """Build the schedule variant named by the ``frequency`` field.

    A document without a frequency yields :class:`LegacySchedule`.

    Raises:
        ValidationError: If the frequency is unknown or its parameter is
            missing or out of range.
    """
    raw = document.get("frequency")
    if raw in (None, ""):
        return LegacySchedule()
    try:
        frequency = Frequency(str(raw).strip().lower())
    except ValueError as exc:
        raise ValidationError(
            f"Document '{document.get('id')}' has unknown frequency '{raw}'"
        ) from exc
    if frequency is Frequency.WEEKLY:
        return WeeklySchedule(day_of_week=_int_field(document, "dayOfWeek"))
    if frequency is Frequency.MONTHLY:
        return MonthlySchedule(day_of_month=_int_field(document, "dayOfMonth"))
    return YearlySchedule.parse(document.get("yearlyDate") or "")


def fixed_cost_from_document(document: dict[str, Any]) -> FixedCostDefinition:
    """Build a FixedCostDefinition from a stored fixed cost."""
    service_id = document.get("serviceId") or document.get("id")
    if not service_id:
        raise ValidationError("Fixed cost document has no service id")
    status = Active()
    if document.get("cancelled"):
        cancelled_on = document.get("cancelledDate")
        if not cancelled_on:
            raise ValidationError(
                f"Fixed cost '{service_id}' is cancelled without a date"
            )
        status = Cancelled(on=parse_date(cancelled_on))
    return FixedCostDefinition(
        service_id=str(service_id),
        service=str(document.get("service") or service_id),
        cost=_money(document, "cost"),
        schedule=schedule_from_document(document),
        net_cost=_money(document, "netCost"),
        vat=_money(document, "vat"),
        includes_vat=bool(document.get("includesVat", False)),
        status=status,
    )


def fixed_cost_to_document(cost_def: FixedCostDefinition) -> dict[str, Any]:
    document: dict[str, Any] = {
        "serviceId": cost_def.service_id,
        "service": cost_def.service,
        "cost": cost_def.cost,
        "netCost": cost_def.net_cost,
        "vat": cost_def.vat,
        "includesVat": cost_def.includes_vat,
        "cancelled": cost_def.cancelled,
    }
    schedule = cost_def.schedule
    if cost_def.frequency is not None:
        document["frequency"] = cost_def.frequency.value
    if isinstance(schedule, WeeklySchedule):
        document["dayOfWeek"] = schedule.day_of_week
    elif isinstance(schedule, MonthlySchedule):
        document["dayOfMonth"] = schedule.day_of_month
    elif isinstance(schedule, YearlySchedule):
        document["yearlyDate"] = schedule.yearly_date
    if isinstance(cost_def.status, Cancelled):
        document["cancelledDate"] = cost_def.status.on.isoformat()
    return document


def sundry_from_document(document: dict[str, Any]) -> SundryExpense:
    return SundryExpense(
        id=str(document.get("id") or ""),
        date=parse_date(document.get("date") or ""),
        amount=_money(document, "amount"),
        vat=_money(document, "vat"),
        net=_money(document, "net"),
    )


def sundry_to_document(sundry: SundryExpense) -> dict[str, Any]:
    return {
        "date": sundry.date.isoformat(),
        "amount": sundry.amount,
        "vat": sundry.vat,
        "net": sundry.net,
    }


def summary_from_document(document: dict[str, Any]) -> StoredSummary:
    """Build a StoredSummary; ``month`` stays empty when it is missing."""
    figures = {
        name: _money(document, key) for name, key in _SUMMARY_KEYS.items()
    }
    return StoredSummary(
        doc_id=str(document.get("id") or ""),
        summary=MonthlySummary(
            month=str(document.get("month") or ""),
            updated_at=parse_timestamp(document.get("updatedAt")),
            **figures,
        ),
    )


def summary_to_document(summary: MonthlySummary) -> dict[str, Any]:
    document: dict[str, Any] = {
        key: getattr(summary, name) for name, key in _SUMMARY_KEYS.items()
    }
    document["month"] = summary.month
    document["updatedAt"] = (
        summary.updated_at.isoformat() if summary.updated_at else None
    )
    return document


def vat_return_from_document(document: dict[str, Any]) -> VatReturn:
    """Build a VatReturn, deriving ``difference`` when it was not stored."""
    quarter_id = document.get("quarterId") or document.get("id")
    if not quarter_id:
        raise ValidationError("VAT document has no quarter id")
    vat_return = VatReturn.build(
        str(quarter_id),
        parse_date(document.get("startDate") or ""),
        parse_date(document.get("endDate") or ""),
        hmrc_amount=_money(document, "hmrcAmount"),
        marstons_amount=_money(document, "marstonsAmount"),
    )
    if document.get("difference") is None:
        return vat_return
    return VatReturn(
        quarter_id=vat_return.quarter_id,
        start_date=vat_return.start_date,
        end_date=vat_return.end_date,
        hmrc_amount=vat_return.hmrc_amount,
        marstons_amount=vat_return.marstons_amount,
        difference=_money(document, "difference"),
    )


def vat_return_to_document(vat_return: VatReturn) -> dict[str, Any]:
    return {
        "quarterId": vat_return.quarter_id,
        "startDate": vat_return.start_date.isoformat(),
        "endDate": vat_return.end_date.isoformat(),
        "hmrcAmount": vat_return.hmrc_amount,
        "marstonsAmount": vat_return.marstons_amount,
        "difference": vat_return.difference,
    }


__all__ = [
    "parse_timestamp",
    "daily_figure_from_document",
    "daily_figure_to_document",
    "wage_record_from_document",
    "wage_record_to_document",
    "schedule_from_document",
    "fixed_cost_from_document",
    "fixed_cost_to_document",
    "sundry_from_document",
    "sundry_to_document",
    "summary_from_document",
    "summary_to_document",
    "vat_return_from_document",
    "vat_return_to_document",
]
