"""Domain models for recurring fixed costs.

A fixed cost carries exactly one schedule variant and exactly one status
variant, so combinations such as a weekly cost with a day-of-month, or a
cancelled cost without a cancellation date, cannot be built.
"""

import re
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import VAT_DIVISOR
from src.domain.errors import ValidationError

_YEARLY_DATE_PATTERN = re.compile(r"^(\d{2})-(\d{2})$")
_SERVICE_ID_PATTERN = re.compile(r"[^a-z0-9]")


class Frequency(str, Enum):
    """Recurrence frequencies accepted for fixed costs."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class WeeklySchedule:
    """Cost recurring on one weekday (0=Sunday .. 6=Saturday)."""

    day_of_week: int

    def __post_init__(self) -> None:
        if not 0 <= self.day_of_week <= 6:
            raise ValidationError(
                f"dayOfWeek must be between 0 and 6, got {self.day_of_week}"
            )


@dataclass(frozen=True)
class MonthlySchedule:
    """Cost recurring on one day of each month."""

    day_of_month: int

    def __post_init__(self) -> None:
        if not 1 <= self.day_of_month <= 31:
            raise ValidationError(
                f"dayOfMonth must be between 1 and 31, got {self.day_of_month}"
            )


@dataclass(frozen=True)
class YearlySchedule:
    """Cost recurring once a year on a month and day."""

    month: int
    day: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12 or not 1 <= self.day <= 31:
            raise ValidationError(
                f"yearlyDate out of range: {self.month:02d}-{self.day:02d}"
            )

    @classmethod
    def parse(cls, value: str) -> "YearlySchedule":
        """Parse a ``MM-DD`` string.

        Raises:
            ValidationError: If the value does not match ``MM-DD``.
        """
        match = (
            _YEARLY_DATE_PATTERN.match(value.strip())
            if isinstance(value, str)
            else None
        )
        if not match:
            raise ValidationError(
                f"Invalid yearlyDate '{value}'. Expected format MM-DD."
            )
        return cls(month=int(match.group(1)), day=int(match.group(2)))

    @property
    def yearly_date(self) -> str:
        return f"{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class LegacySchedule:
    """Stored cost saved before frequencies existed; counts every month."""


Schedule = WeeklySchedule | MonthlySchedule | YearlySchedule | LegacySchedule


@dataclass(frozen=True)
class Active:
    """Status of a cost that has not been cancelled."""


@dataclass(frozen=True)
class Cancelled:
    """Status of a cost cancelled on a given date."""

    on: date


CancellationStatus = Active | Cancelled


def service_id_for(service: str) -> str:
    """Return the document id derived from a service name."""
    return _SERVICE_ID_PATTERN.sub("-", service.lower())


@dataclass(frozen=True)
class FixedCostDefinition:
    """Recurring cost definition for one fiscal year.

    Attributes:
        service_id: Stable document id of the service.
        service: Display name of the service.
        cost: Unit cost charged per occurrence, VAT included when
            ``includes_vat`` is set.
        schedule: Recurrence rule variant.
        net_cost: Cost excluding VAT.
        vat: VAT portion of the cost.
        includes_vat: Whether ``cost`` includes VAT.
        status: Active or cancelled on a date.
    """

    service_id: str
    service: str
    cost: Decimal
    schedule: Schedule
    net_cost: Decimal = Decimal("0")
    vat: Decimal = Decimal("0")
    includes_vat: bool = False
    status: CancellationStatus = Active()

    @classmethod
    def create(
        cls,
        service: str,
        cost: Decimal,
        schedule: Schedule,
        *,
        includes_vat: bool = True,
        service_id: str | None = None,
    ) -> "FixedCostDefinition":
        """Build a new active cost, deriving net cost, VAT, and id."""
        if cost < 0:
            raise ValidationError(f"Cost must not be negative, got {cost}")
        net_cost, vat = cls.split_vat(cost, includes_vat)
        return cls(
            service_id=service_id or service_id_for(service),
            service=service,
            cost=cost,
            schedule=schedule,
            net_cost=net_cost,
            vat=vat,
            includes_vat=includes_vat,
        )

    @staticmethod
    def split_vat(cost: Decimal, includes_vat: bool) -> tuple[Decimal, Decimal]:
        """Return ``(net_cost, vat)`` for a cost."""
        if not includes_vat:
            return cost, Decimal("0")
        net_cost = (cost / VAT_DIVISOR).quantize(Decimal("0.01"))
        return net_cost, cost - net_cost

    @property
    def frequency(self) -> Frequency | None:
        if isinstance(self.schedule, WeeklySchedule):
            return Frequency.WEEKLY
        if isinstance(self.schedule, MonthlySchedule):
            return Frequency.MONTHLY
        if isinstance(self.schedule, YearlySchedule):
            return Frequency.YEARLY
        return None

    @property
    def cancelled(self) -> bool:
        return isinstance(self.status, Cancelled)

    def cancel(self, on: date) -> "FixedCostDefinition":
        """Return a copy of this cost cancelled on the given date."""
        return replace(self, status=Cancelled(on=on))


__all__ = [
    "Frequency",
    "WeeklySchedule",
    "MonthlySchedule",
    "YearlySchedule",
    "LegacySchedule",
    "Schedule",
    "Active",
    "Cancelled",
    "CancellationStatus",
    "FixedCostDefinition",
    "service_id_for",
]
