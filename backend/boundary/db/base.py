"""
Document store port and subscription handle.

Defines the capability set every document store backend provides
(get, list, add, update, delete, subscribe) and the owned handle returned
for push subscriptions.

Dependencies: backend.models.query
System role: Foundation for all document store adapters
"""

from abc import ABC, abstractmethod
from typing import Any, Callable

from backend.models.query import QueryOptions

Document = dict[str, Any]
SnapshotCallback = Callable[[list[Document]], None]


class Subscription:
    """
    Owned handle for a live collection subscription.

    The holder must release it with unsubscribe() (or by leaving a
    ``with`` block) on every teardown path. Releasing twice is harmless.

    Attributes:
        collection: Collection the subscription watches
    """

    def __init__(self, collection: str, release: Callable[[], None]) -> None:
        """
        Initialize subscription handle.

        Args:
            collection: Collection the subscription watches
            release: Backend callback that closes the live channel
        """
        self.collection = collection
        self._release = release
        self._active = True

    @property
    def active(self) -> bool:
        """Whether the channel is still open."""
        return self._active

    def unsubscribe(self) -> None:
        """Close the live channel and release store-side resources."""
        if not self._active:
            return
        self._active = False
        self._release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.unsubscribe()


class DocumentStore(ABC):
    """
    Abstract document store.

    Documents are returned as plain dicts carrying their ``id``. Backends
    translate their native failures into StoreReadError / StoreWriteError.
    """

    @abstractmethod
    def server_timestamp(self) -> Any:
        """Return the value that makes the store stamp its own current time."""

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> Document | None:
        """Fetch one document, None when absent."""

    @abstractmethod
    async def list(
        self, collection: str, options: QueryOptions | None = None
    ) -> list[Document]:
        """Run a filtered, ordered, capped query over a collection."""

    @abstractmethod
    async def add(self, collection: str, data: dict[str, Any]) -> str:
        """Insert a document under a store-assigned id and return the id."""

    @abstractmethod
    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        """Merge fields into an existing document; missing documents are a write error."""

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Permanently remove a document."""

    @abstractmethod
    def subscribe(
        self,
        collection: str,
        callback: SnapshotCallback,
        options: QueryOptions | None = None,
    ) -> Subscription:
        """Open a push channel delivering the full result set on every change."""

    async def close(self) -> None:
        """Release client resources."""
        return None
