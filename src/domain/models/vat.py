"""Domain models for quarterly VAT returns."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.errors import ValidationError

ZERO = Decimal("0")


class VatStatus(str, Enum):
    """Which side of a VAT return declared more."""

    MATCHED = "Matched"
    HMRC_HIGHER = "HMRC Higher"
    MARSTONS_HIGHER = "Marstons Higher"


@dataclass(frozen=True)
class VatReturn:
    """VAT declared to HMRC for a period against the supplier's figure.

    Attributes:
        quarter_id: Identifier of the return inside its fiscal year.
        start_date: First day of the VAT period.
        end_date: Last day of the VAT period.
        hmrc_amount: Amount declared to HMRC.
        marstons_amount: Amount calculated from supplier records.
        difference: HMRC amount minus supplier amount.
    """

    quarter_id: str
    start_date: date
    end_date: date
    hmrc_amount: Decimal = ZERO
    marstons_amount: Decimal = ZERO
    difference: Decimal = ZERO

    def __post_init__(self) -> None:
        if not self.quarter_id:
            raise ValidationError("VAT return requires a quarter id")
        if self.end_date < self.start_date:
            raise ValidationError(
                f"VAT return '{self.quarter_id}' ends before it starts"
            )

    @classmethod
    def build(
        cls,
        quarter_id: str,
        start_date: date,
        end_date: date,
        *,
        hmrc_amount: Decimal = ZERO,
        marstons_amount: Decimal = ZERO,
    ) -> "VatReturn":
        """Build a return whose difference is derived from both amounts."""
        return cls(
            quarter_id=quarter_id,
            start_date=start_date,
            end_date=end_date,
            hmrc_amount=hmrc_amount,
            marstons_amount=marstons_amount,
            difference=hmrc_amount - marstons_amount,
        )

    @property
    def status(self) -> VatStatus:
        if self.difference == 0:
            return VatStatus.MATCHED
        if self.difference > 0:
            return VatStatus.HMRC_HIGHER
        return VatStatus.MARSTONS_HIGHER


@dataclass(frozen=True)
class VatSummary:
    """VAT returns of one fiscal year with their running totals."""

    fiscal_year: str
    returns: list[VatReturn] = field(default_factory=list)
    hmrc_total: Decimal = ZERO
    marstons_total: Decimal = ZERO
    difference_total: Decimal = ZERO

    @property
    def period_count(self) -> int:
        return len(self.returns)


__all__ = ["VatStatus", "VatReturn", "VatSummary"]
