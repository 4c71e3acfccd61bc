"""
In-process document store.

Keeps collections in memory with the same observable semantics as the
hosted store: server-assigned ids and timestamps, equality/comparison
filters, single-field ordering that skips documents lacking the field,
result caps, and push snapshots on every write.

Dependencies: backend.boundary.db.base, backend.core.exceptions
System role: Local development and test backend for the document store
"""

from __future__ import annotations

import asyncio
import copy
import logging
import operator
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from backend.boundary.db.base import Document, DocumentStore, SnapshotCallback, Subscription
from backend.core.exceptions import DocumentNotFoundError
from backend.models.query import QueryOptions, WhereFilter

logger = logging.getLogger(__name__)


class _ServerTimestamp:
    """Sentinel replaced by the current UTC time when a write is applied."""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def _same_kind(a: Any, b: Any) -> bool:
    return _sort_key(a)[0] == _sort_key(b)[0]


def _equal(a: Any, b: Any) -> bool:
    # True == 1 in Python, but a bool never equals a number in the hosted store
    return _same_kind(a, b) and a == b


def _ordered(compare: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    return lambda a, b: _same_kind(a, b) and compare(a, b)


_COMPARATORS: dict[str, Callable[[Any, Any], bool]] = {
    "==": _equal,
    "!=": lambda field_value, value: not _equal(field_value, value),
    "<": _ordered(operator.lt),
    "<=": _ordered(operator.le),
    ">": _ordered(operator.gt),
    ">=": _ordered(operator.ge),
    "in": lambda field_value, value: any(_equal(field_value, v) for v in value),
    "not-in": lambda field_value, value: not any(_equal(field_value, v) for v in value),
    "array-contains": lambda field_value, value: (
        isinstance(field_value, list) and any(_equal(item, value) for item in field_value)
    ),
    "array-contains-any": lambda field_value, value: (
        isinstance(field_value, list)
        and any(_equal(item, v) for item in field_value for v in value)
    ),
}


def _matches(doc: Document, condition: WhereFilter) -> bool:
    if condition.field not in doc:
        return False
    try:
        return bool(_COMPARATORS[condition.operator](doc[condition.field], condition.value))
    except TypeError:
        # Values of different types never satisfy a comparison
        return False


def _sort_key(value: Any) -> tuple[int, Any]:
    """Order values by type first, then by value, like the hosted store."""
    if value is None:
        return (0, 0)
    if isinstance(value, bool):
        return (1, value)
    if isinstance(value, (int, float)):
        return (2, value)
    if isinstance(value, datetime):
        return (3, value)
    if isinstance(value, str):
        return (4, value)
    return (5, repr(value))


class MemoryDocumentStore(DocumentStore):
    """
    Document store held in process memory.

    Every coroutine yields to the event loop once before touching data so
    that concurrent callers interleave the way they would over a network.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._collections: dict[str, dict[str, Document]] = {}
        self._listeners: dict[str, dict[str, tuple[SnapshotCallback, QueryOptions | None]]] = {}

    def server_timestamp(self) -> Any:
        return SERVER_TIMESTAMP

    async def get(self, collection: str, doc_id: str) -> Document | None:
        await asyncio.sleep(0)
        data = self._collections.get(collection, {}).get(doc_id)
        if data is None:
            return None
        return {"id": doc_id, **copy.deepcopy(data)}

    async def list(
        self, collection: str, options: QueryOptions | None = None
    ) -> list[Document]:
        await asyncio.sleep(0)
        return self._query(collection, options)

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        await asyncio.sleep(0)
        doc_id = uuid.uuid4().hex[:20]
        self._collections.setdefault(collection, {})[doc_id] = self._resolve(data)
        self._notify(collection)
        return doc_id

    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        await asyncio.sleep(0)
        existing = self._collections.get(collection, {}).get(doc_id)
        if existing is None:
            raise DocumentNotFoundError(
                f"No document to update: {collection}/{doc_id}",
                collection=collection,
                document_id=doc_id,
                operation="update",
            )
        existing.update(self._resolve(fields))
        self._notify(collection)

    async def delete(self, collection: str, doc_id: str) -> None:
        await asyncio.sleep(0)
        # Deleting a missing document is not an error, matching the hosted store
        if self._collections.get(collection, {}).pop(doc_id, None) is not None:
            self._notify(collection)

    def subscribe(
        self,
        collection: str,
        callback: SnapshotCallback,
        options: QueryOptions | None = None,
    ) -> Subscription:
        token = uuid.uuid4().hex
        listeners = self._listeners.setdefault(collection, {})
        listeners[token] = (callback, options)
        callback(self._query(collection, options))

        def release() -> None:
            listeners.pop(token, None)

        return Subscription(collection, release)

    def listener_count(self, collection: str) -> int:
        """Number of open subscriptions on a collection."""
        return len(self._listeners.get(collection, {}))

    def _resolve(self, data: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        resolved = copy.deepcopy({k: v for k, v in data.items() if v is not SERVER_TIMESTAMP})
        for key, value in data.items():
            if value is SERVER_TIMESTAMP:
                resolved[key] = now
        return resolved

    def _query(self, collection: str, options: QueryOptions | None) -> list[Document]:
        documents = [
            {"id": doc_id, **copy.deepcopy(data)}
            for doc_id, data in self._collections.get(collection, {}).items()
        ]
        if options is None:
            return documents

        for condition in options.where:
            documents = [doc for doc in documents if _matches(doc, condition)]

        if options.order_by is not None:
            field = options.order_by.field
            documents = [doc for doc in documents if field in doc]
            documents.sort(
                key=lambda doc: _sort_key(doc[field]),
                reverse=options.order_by.direction == "desc",
            )

        if options.limit is not None:
            documents = documents[: options.limit]
        return documents

    def _notify(self, collection: str) -> None:
        for token, (callback, options) in list(self._listeners.get(collection, {}).items()):
            try:
                callback(self._query(collection, options))
            except Exception:
                logger.exception(
                    "Snapshot listener failed",
                    extra={"collection": collection, "listener": token},
                )
