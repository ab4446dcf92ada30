"""Port for the hierarchical document store holding ledger data.

Documents live in collections addressed by slash-separated paths such as
``users/{user}/years/{fy}/monthlySummaries``. Every document is a plain
dict; ``list`` returns each one with its ``id`` added.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, TypeVar

from src.domain.constants import DEFAULT_BATCH_LIMIT

T = TypeVar("T")


class WriteMode(str, Enum):
    """How a put combines with an existing document."""

    REPLACE = "replace"
    MERGE = "merge"


@dataclass(frozen=True)
class FieldFilter:
    """Equality or range filter applied by ``list``.

    Attributes:
        field: Document field name.
        op: One of ``==``, ``>=``, ``<=`` or ``<``.
        value: Value compared against the field.
    """

    field: str
    op: str
    value: Any

    def __post_init__(self) -> None:
        if self.op not in ("==", ">=", "<=", "<"):
            raise ValueError(f"Unsupported filter operator: {self.op}")

    def matches(self, document: dict[str, Any]) -> bool:
        """Return True when the document satisfies the filter."""
        if self.field not in document:
            return False
        current = document[self.field]
        try:
            if self.op == "==":
                return current == self.value
            if self.op == ">=":
                return current >= self.value
            if self.op == "<":
                return current < self.value
            return current <= self.value
        except TypeError:
            return False


@dataclass(frozen=True)
class PutOperation:
    """Batched write of one document."""

    collection_path: str
    doc_id: str
    document: dict[str, Any] = field(default_factory=dict)
    mode: WriteMode = WriteMode.REPLACE


@dataclass(frozen=True)
class DeleteOperation:
    """Batched delete of one document."""

    collection_path: str
    doc_id: str


BatchOperation = PutOperation | DeleteOperation


def chunked(items: Sequence[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive slices of at most ``size`` items.

    Raises:
        ValueError: If size is smaller than 1.
    """
    if size < 1:
        raise ValueError(f"Chunk size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class DocumentStorePort(Protocol):
    """Port exposing document reads, writes and bounded batches.

    Implementations raise ``StorageError`` on any I/O failure.
    """

    max_batch_size: int = DEFAULT_BATCH_LIMIT

    def get(self, collection_path: str, doc_id: str) -> dict[str, Any] | None:
        """Return a document or None when it does not exist."""

    def list(
        self,
        collection_path: str,
        filters: Sequence[FieldFilter] | None = None,
    ) -> list[dict[str, Any]]:
        """Return the documents of a collection matching every filter."""

    def put(
        self,
        collection_path: str,
        doc_id: str,
        document: dict[str, Any],
        mode: WriteMode = WriteMode.REPLACE,
    ) -> None:
        """Write a document, replacing or merging with the stored one."""

    def delete(self, collection_path: str, doc_id: str) -> None:
        """Delete a document; deleting a missing document is a no-op."""

    def batch_write(self, operations: Sequence[BatchOperation]) -> None:
        """Apply up to ``max_batch_size`` operations together.

        Raises:
            StorageError: If the batch is larger than ``max_batch_size``
                or the store fails.
        """


__all__ = [
    "WriteMode",
    "FieldFilter",
    "PutOperation",
    "DeleteOperation",
    "BatchOperation",
    "chunked",
    "DocumentStorePort",
]
