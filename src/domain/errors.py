"""Domain error taxonomy for the ledger core."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class ValidationError(LedgerError, ValueError):
    """Raised when an input or stored document is malformed."""


class StorageError(LedgerError):
    """Raised when the document store fails to read or write."""


class NotFoundError(LedgerError):
    """Raised when an explicitly requested record does not exist."""


__all__ = [
    "LedgerError",
    "ValidationError",
    "StorageError",
    "NotFoundError",
]
