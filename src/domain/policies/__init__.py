"""Domain policies package."""

from .entry_policies import ensure_date_in_fiscal_year, ensure_month_in_fiscal_year

__all__ = ["ensure_date_in_fiscal_year", "ensure_month_in_fiscal_year"]
