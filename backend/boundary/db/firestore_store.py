"""
Firestore document store adapter.

Request/response calls go through the async Firestore client. Push
subscriptions use the synchronous client's watch API, whose callbacks
run on a background thread owned by the client library.

Dependencies: google-cloud-firestore, google-api-core, backend.core.exceptions
System role: Production backend for the document store
"""

import inspect
import logging
from typing import Any

from google.api_core.exceptions import GoogleAPIError, NotFound
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter
from google.oauth2 import service_account

from backend.boundary.db.base import Document, DocumentStore, SnapshotCallback, Subscription
from backend.core.exceptions import DocumentNotFoundError, StoreReadError, StoreWriteError
from backend.models.query import QueryOptions

logger = logging.getLogger(__name__)


def _apply_options(query: Any, options: QueryOptions | None) -> Any:
    """Chain filters, ordering and limit onto a collection reference or query."""
    if options is None:
        return query
    for condition in options.where:
        query = query.where(
            filter=FieldFilter(condition.field, condition.operator, condition.value)
        )
    if options.order_by is not None:
        direction = (
            firestore.Query.DESCENDING
            if options.order_by.direction == "desc"
            else firestore.Query.ASCENDING
        )
        query = query.order_by(options.order_by.field, direction=direction)
    if options.limit is not None:
        query = query.limit(options.limit)
    return query


def _to_document(snapshot: Any) -> Document:
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


class FirestoreDocumentStore(DocumentStore):
    """
    Document store backed by Google Cloud Firestore.

    One instance owns one async client shared by every accessor in the
    process. The synchronous client used for watches is created on the
    first subscription.
    """

    def __init__(
        self,
        project_id: str | None = None,
        database: str = "(default)",
        credentials_path: str | None = None,
    ) -> None:
        """
        Initialize Firestore clients.

        Args:
            project_id: Google Cloud project (None lets the library infer it)
            database: Firestore database id
            credentials_path: Service account JSON file (None uses ADC)
        """
        self._project_id = project_id
        self._database = database
        self._credentials = (
            service_account.Credentials.from_service_account_file(credentials_path)
            if credentials_path
            else None
        )
        self._client = firestore.AsyncClient(
            project=project_id,
            credentials=self._credentials,
            database=database,
        )
        self._watch_client: firestore.Client | None = None

    def server_timestamp(self) -> Any:
        return firestore.SERVER_TIMESTAMP

    async def get(self, collection: str, doc_id: str) -> Document | None:
        try:
            snapshot = await self._client.collection(collection).document(doc_id).get()
        except GoogleAPIError as e:
            raise StoreReadError(
                f"Failed to read {collection}/{doc_id}: {e}",
                collection=collection,
                document_id=doc_id,
                operation="get",
            ) from e
        if not snapshot.exists:
            return None
        return _to_document(snapshot)

    async def list(
        self, collection: str, options: QueryOptions | None = None
    ) -> list[Document]:
        query = _apply_options(self._client.collection(collection), options)
        try:
            return [_to_document(snapshot) async for snapshot in query.stream()]
        except GoogleAPIError as e:
            raise StoreReadError(
                f"Failed to query {collection}: {e}",
                collection=collection,
                operation="list",
            ) from e

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        try:
            _, doc_ref = await self._client.collection(collection).add(data)
        except GoogleAPIError as e:
            raise StoreWriteError(
                f"Failed to add document to {collection}: {e}",
                collection=collection,
                operation="add",
            ) from e
        return doc_ref.id

    async def update(self, collection: str, doc_id: str, fields: dict[str, Any]) -> None:
        try:
            await self._client.collection(collection).document(doc_id).update(fields)
        except NotFound as e:
            raise DocumentNotFoundError(
                f"No document to update: {collection}/{doc_id}",
                collection=collection,
                document_id=doc_id,
                operation="update",
            ) from e
        except GoogleAPIError as e:
            raise StoreWriteError(
                f"Failed to update {collection}/{doc_id}: {e}",
                collection=collection,
                document_id=doc_id,
                operation="update",
            ) from e

    async def delete(self, collection: str, doc_id: str) -> None:
        try:
            await self._client.collection(collection).document(doc_id).delete()
        except GoogleAPIError as e:
            raise StoreWriteError(
                f"Failed to delete {collection}/{doc_id}: {e}",
                collection=collection,
                document_id=doc_id,
                operation="delete",
            ) from e

    def subscribe(
        self,
        collection: str,
        callback: SnapshotCallback,
        options: QueryOptions | None = None,
    ) -> Subscription:
        if self._watch_client is None:
            self._watch_client = firestore.Client(
                project=self._project_id,
                credentials=self._credentials,
                database=self._database,
            )
        query = _apply_options(self._watch_client.collection(collection), options)

        def on_snapshot(snapshots: list[Any], changes: Any, read_time: Any) -> None:
            callback([_to_document(snapshot) for snapshot in snapshots])

        try:
            watch = query.on_snapshot(on_snapshot)
        except GoogleAPIError as e:
            raise StoreReadError(
                f"Failed to subscribe to {collection}: {e}",
                collection=collection,
                operation="subscribe",
            ) from e
        return Subscription(collection, watch.unsubscribe)

    async def close(self) -> None:
        if self._watch_client is not None:
            self._watch_client.close()
            self._watch_client = None
        # Depending on the library release, AsyncClient.close() is sync or a coroutine
        closing = self._client.close()
        if inspect.isawaitable(closing):
            await closing
        logger.info("Firestore store closed", extra={"project_id": self._project_id})
