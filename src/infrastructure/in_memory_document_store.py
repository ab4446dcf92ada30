"""In-process document store used by tests and the ``memory`` backend."""

import copy
from collections.abc import Sequence
from typing import Any

from src.application.ports.document_store import (
    BatchOperation,
    DeleteOperation,
    DocumentStorePort,
    FieldFilter,
    PutOperation,
    WriteMode,
)
from src.domain.constants import DEFAULT_BATCH_LIMIT
from src.domain.errors import StorageError


class InMemoryDocumentStore(DocumentStorePort):
    """Dictionary-backed store that copies documents in and out."""

    def __init__(self, max_batch_size: int = DEFAULT_BATCH_LIMIT) -> None:
        self.max_batch_size = max_batch_size
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def get(self, collection_path: str, doc_id: str) -> dict[str, Any] | None:
        document = self._collections.get(collection_path, {}).get(doc_id)
        if document is None:
            return None
        return {**copy.deepcopy(document), "id": doc_id}

    def put(
        self,
        collection_path: str,
        doc_id: str,
        document: dict[str, Any],
        mode: WriteMode = WriteMode.REPLACE,
    ) -> None:
        collection = self._collections.setdefault(collection_path, {})
        payload = {
            key: copy.deepcopy(value)
            for key, value in document.items()
            if key != "id"
        }
        if mode == WriteMode.MERGE and doc_id in collection:
            collection[doc_id].update(payload)
        else:
            collection[doc_id] = payload

    def delete(self, collection_path: str, doc_id: str) -> None:
        self._collections.get(collection_path, {}).pop(doc_id, None)

    def batch_write(self, operations: Sequence[BatchOperation]) -> None:
        """Apply operations in order after checking the batch size.

        Raises:
            StorageError: If the batch is larger than ``max_batch_size``.
        """
        if len(operations) > self.max_batch_size:
            raise StorageError(
                f"Batch of {len(operations)} operations exceeds the limit "
                f"of {self.max_batch_size}"
            )
        for operation in operations:
            if isinstance(operation, PutOperation):
                self.put(
                    operation.collection_path,
                    operation.doc_id,
                    operation.document,
                    operation.mode,
                )
            elif isinstance(operation, DeleteOperation):
                self.delete(operation.collection_path, operation.doc_id)
            else:
                raise StorageError(f"Unsupported batch operation: {operation!r}")

    def list(
        self,
        collection_path: str,
        filters: Sequence[FieldFilter] | None = None,
    ) -> list[dict[str, Any]]:
        documents = []
        collection = self._collections.get(collection_path, {})
        for doc_id in sorted(collection):
            document = {**copy.deepcopy(collection[doc_id]), "id": doc_id}
            if all(item.matches(document) for item in filters or ()):
                documents.append(document)
        return documents


__all__ = ["InMemoryDocumentStore"]
