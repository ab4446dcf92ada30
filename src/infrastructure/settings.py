"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal
import os

from src.domain.constants import DEFAULT_BATCH_LIMIT, DEFAULT_FRIDAY_PAY
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

STORE_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger store and derived figures.

    Attributes:
        user_id: Owner of the ledger documents.
        store_backend: Document store backend (sqlalchemy or memory).
        batch_limit: Largest number of operations per batch write.
        friday_pay: Pay figure recorded on Friday daily figures.
    """

    user_id: str = "default"
    store_backend: str = "sqlalchemy"
    batch_limit: int = DEFAULT_BATCH_LIMIT
    friday_pay: Decimal = DEFAULT_FRIDAY_PAY

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        user_id = os.getenv("LEDGER_USER_ID", "").strip() or "default"
        backend = os.getenv("LEDGER_STORE_BACKEND", "sqlalchemy").strip().lower()
        if backend not in STORE_BACKENDS:
            logger.warning(
                f"Unknown LEDGER_STORE_BACKEND '{backend}', using sqlalchemy"
            )
            backend = "sqlalchemy"
        return cls(
            user_id=user_id,
            store_backend=backend,
            batch_limit=cls._parse_batch_limit(
                os.getenv("LEDGER_BATCH_LIMIT"),
                logger=logger,
            ),
            friday_pay=cls._parse_friday_pay(
                os.getenv("LEDGER_FRIDAY_PAY"),
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_batch_limit(raw_value: str | None, logger) -> int:
        """Parse the batch limit, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive batch limit.
        """
        if not raw_value:
            return DEFAULT_BATCH_LIMIT
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_BATCH_LIMIT '{raw_value}', "
                f"using {DEFAULT_BATCH_LIMIT}"
            )
            return DEFAULT_BATCH_LIMIT
        if value < 1:
            logger.warning(
                f"LEDGER_BATCH_LIMIT must be positive, using {DEFAULT_BATCH_LIMIT}"
            )
            return DEFAULT_BATCH_LIMIT
        return value

    @staticmethod
    def _parse_friday_pay(raw_value: str | None, logger) -> Decimal:
        if not raw_value:
            return DEFAULT_FRIDAY_PAY
        try:
            return coerce_decimal(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_FRIDAY_PAY '{raw_value}', "
                f"using {DEFAULT_FRIDAY_PAY}"
            )
            return DEFAULT_FRIDAY_PAY


__all__ = ["LedgerSettings", "STORE_BACKENDS"]
