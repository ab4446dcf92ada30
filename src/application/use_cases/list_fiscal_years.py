"""Use case to list the fiscal years held in the ledger."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.infrastructure.logging.logger import get_app_logger


class ListFiscalYearsUseCase:
    """Return known fiscal years, newest first."""

    def __init__(self, repository: LedgerRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> list[str]:
        """Return fiscal year labels sorted newest first."""
        fiscal_years = self._repository.list_fiscal_years()
        labels = [fiscal_year.label for fiscal_year in reversed(fiscal_years)]
        self._logger.debug(f"Found {len(labels)} fiscal years")
        return labels


def default_comparison_years(labels: list[str]) -> list[str]:
    """Return the two most recent fiscal years from a newest-first list."""
    return labels[:2]


__all__ = ["ListFiscalYearsUseCase", "default_comparison_years"]
