"""Domain constants for the profit-and-loss ledger."""

from decimal import Decimal

FISCAL_YEAR_START_MONTH = 10

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Sunday-based numbering used by stored weekly schedules.
SUNDAY = 0
FRIDAY = 5

VAT_DIVISOR = Decimal("1.2")
FEE_RATE = Decimal("0.72")
DEFAULT_FRIDAY_PAY = Decimal("455.37")

DEFAULT_BATCH_LIMIT = 500

SUMMARY_FIELDS = (
    "gross_income",
    "net_income",
    "vat",
    "wages",
    "fixed_costs",
    "sundries",
    "profit",
)

COMPLETENESS_FIELDS = ("wages", "fixed_costs", "sundries")

# A year with all of these at zero is treated as never computed.
ACTIVITY_FIELDS = ("net_income", "profit", "wages")


__all__ = [
    "FISCAL_YEAR_START_MONTH",
    "MONTH_NAMES",
    "SUNDAY",
    "FRIDAY",
    "VAT_DIVISOR",
    "FEE_RATE",
    "DEFAULT_FRIDAY_PAY",
    "DEFAULT_BATCH_LIMIT",
    "SUMMARY_FIELDS",
    "COMPLETENESS_FIELDS",
    "ACTIVITY_FIELDS",
]
