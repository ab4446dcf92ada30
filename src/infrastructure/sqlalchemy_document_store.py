"""Document store persisted in one SQL table through SQLAlchemy Core."""

import json
from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
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


CREATE_LEDGER_DOCUMENTS_SQL = """
CREATE TABLE IF NOT EXISTS ledger_documents (
    collection_path VARCHAR(512) NOT NULL,
    doc_id VARCHAR(255) NOT NULL,
    payload TEXT NOT NULL,
    PRIMARY KEY (collection_path, doc_id)
)
"""

SELECT_DOCUMENT_SQL = text(
    """
    SELECT payload
    FROM ledger_documents
    WHERE collection_path = :collection_path AND doc_id = :doc_id
    """
)

SELECT_COLLECTION_SQL = text(
    """
    SELECT doc_id, payload
    FROM ledger_documents
    WHERE collection_path = :collection_path
    ORDER BY doc_id
    """
)

DELETE_DOCUMENT_SQL = text(
    """
    DELETE FROM ledger_documents
    WHERE collection_path = :collection_path AND doc_id = :doc_id
    """
)

INSERT_DOCUMENT_SQL = text(
    """
    INSERT INTO ledger_documents (collection_path, doc_id, payload)
    VALUES (:collection_path, :doc_id, :payload)
    """
)


def _json_default(value: Any) -> str:
    """Serialize Decimals and dates as strings."""
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


def _encode(document: dict[str, Any]) -> str:
    payload = {key: value for key, value in document.items() if key != "id"}
    return json.dumps(payload, default=_json_default, sort_keys=True)


class SqlAlchemyDocumentStore(DocumentStorePort):
    """Document store backed by the ``ledger_documents`` table.

    Payloads are JSON; Decimal values come back as strings and are coerced
    by the document mappers.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        max_batch_size: int = DEFAULT_BATCH_LIMIT,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the ledger engine.
            max_batch_size: Largest number of operations per batch.
        """
        self._db_port = db_port
        self.max_batch_size = max_batch_size

    def prepare_store(self) -> None:
        """Ensure the documents table exists."""
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_LEDGER_DOCUMENTS_SQL)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to prepare ledger store: {exc}") from exc

    def get(self, collection_path: str, doc_id: str) -> dict[str, Any] | None:
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_DOCUMENT_SQL,
                    {"collection_path": collection_path, "doc_id": doc_id},
                ).first()
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Failed to read {collection_path}/{doc_id}: {exc}"
            ) from exc
        if row is None:
            return None
        return {**json.loads(row.payload), "id": doc_id}

    def put(
        self,
        collection_path: str,
        doc_id: str,
        document: dict[str, Any],
        mode: WriteMode = WriteMode.REPLACE,
    ) -> None:
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                self._put(conn, collection_path, doc_id, document, mode)
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Failed to write {collection_path}/{doc_id}: {exc}"
            ) from exc

    def delete(self, collection_path: str, doc_id: str) -> None:
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.execute(
                    DELETE_DOCUMENT_SQL,
                    {"collection_path": collection_path, "doc_id": doc_id},
                )
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Failed to delete {collection_path}/{doc_id}: {exc}"
            ) from exc

    def batch_write(self, operations: Sequence[BatchOperation]) -> None:
        """Apply every operation inside one transaction.

        Raises:
            StorageError: If the batch is too large or the database fails.
        """
        if len(operations) > self.max_batch_size:
            raise StorageError(
                f"Batch of {len(operations)} operations exceeds the limit "
                f"of {self.max_batch_size}"
            )
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                for operation in operations:
                    if isinstance(operation, PutOperation):
                        self._put(
                            conn,
                            operation.collection_path,
                            operation.doc_id,
                            operation.document,
                            operation.mode,
                        )
                    elif isinstance(operation, DeleteOperation):
                        conn.execute(
                            DELETE_DOCUMENT_SQL,
                            {
                                "collection_path": operation.collection_path,
                                "doc_id": operation.doc_id,
                            },
                        )
                    else:
                        raise StorageError(
                            f"Unsupported batch operation: {operation!r}"
                        )
        except SQLAlchemyError as exc:
            raise StorageError(f"Batch write failed: {exc}") from exc

    @staticmethod
    def _put(
        conn: Connection,
        collection_path: str,
        doc_id: str,
        document: dict[str, Any],
        mode: WriteMode,
    ) -> None:
        params = {"collection_path": collection_path, "doc_id": doc_id}
        if mode == WriteMode.MERGE:
            row = conn.execute(SELECT_DOCUMENT_SQL, params).first()
            if row is not None:
                merged = json.loads(row.payload)
                merged.update(json.loads(_encode(document)))
                document = merged
        conn.execute(DELETE_DOCUMENT_SQL, params)
        conn.execute(INSERT_DOCUMENT_SQL, {**params, "payload": _encode(document)})

    def list(
        self,
        collection_path: str,
        filters: Sequence[FieldFilter] | None = None,
    ) -> list[dict[str, Any]]:
        """Return the collection's documents matching every filter.

        Filters are evaluated in Python on the decoded payloads.
        """
        try:
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_COLLECTION_SQL,
                    {"collection_path": collection_path},
                ).all()
        except SQLAlchemyError as exc:
            raise StorageError(
                f"Failed to list {collection_path}: {exc}"
            ) from exc
        documents = [
            {**json.loads(row.payload), "id": row.doc_id} for row in rows
        ]
        return [
            document
            for document in documents
            if all(item.matches(document) for item in filters or ())
        ]


__all__ = ["SqlAlchemyDocumentStore", "CREATE_LEDGER_DOCUMENTS_SQL"]
