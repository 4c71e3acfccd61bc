"""
Generic collection CRUD operations.

Provides create, read, update, soft-delete, search, statistics and
subscription operations parameterized by collection name, applied
identically across every catalog collection.

Dependencies: backend.boundary.db.base, backend.models.query
System role: Uniform persistence access over the document store
"""

import asyncio
import copy
import logging
from typing import Any, Sequence

from backend.boundary.db.base import Document, DocumentStore, SnapshotCallback, Subscription
from backend.boundary.db.collections import (
    ALL_COLLECTIONS,
    COLLECTION_DOCUMENTATION,
    COLLECTION_GITHUB_REPOS,
    COLLECTION_PRACTICE_ACTIVITIES,
    COLLECTION_RECORDINGS,
    COLLECTION_SOFTWARE_TOOLS,
    COLLECTION_VSCODE_EXTENSIONS,
    COLLECTION_YOUTUBE_CHANNELS,
    COLLECTIONS,
)
from backend.core.exceptions import DocumentNotFoundError
from backend.models.query import CollectionStats, OrderBy, QueryOptions, WhereFilter

logger = logging.getLogger(__name__)

# Fields checked by search(), in addition to every element of "tags"
SEARCH_FIELDS: tuple[str, ...] = (
    "title",
    "name",
    "description",
    "tool_name",
    "extension_name",
    "channel_name",
    "repo_name",
    "activity_name",
)

# Values filled in by create_entity() when the caller leaves a field unset
CREATION_DEFAULTS: dict[str, dict[str, Any]] = {
    COLLECTION_RECORDINGS: {
        "session_numbers": [],
        "topics": [],
        "thumbnail_url": "",
        "file_size": "",
        "quality": "HD",
    },
    COLLECTION_DOCUMENTATION: {
        "difficulty_level": "beginner",
        "tags": [],
        "icon": "fas fa-book",
        "is_official": False,
    },
    COLLECTION_VSCODE_EXTENSIONS: {
        "rating": 0,
        "install_count": "0",
        "is_essential": False,
    },
    COLLECTION_YOUTUBE_CHANNELS: {
        "subscriber_count": "0",
        "focus_area": [],
        "playlist_urls": [],
        "recommended_videos": [],
    },
    COLLECTION_SOFTWARE_TOOLS: {
        "official_website": "",
        "platform": ["Windows", "Mac", "Linux"],
        "is_free": True,
        "version": "Latest",
        "file_size": "",
    },
    COLLECTION_PRACTICE_ACTIVITIES: {
        "difficulty": "beginner",
        "skills_practiced": [],
        "estimated_time": "30 minutes",
        "prerequisites": [],
        "learning_outcomes": [],
    },
    COLLECTION_GITHUB_REPOS: {
        "stars": 0,
        "language": "JavaScript",
        "topics": [],
        "is_template": False,
        "license": "MIT",
    },
}


def is_active(document: Document) -> bool:
    """Soft-delete flag with absent treated as active."""
    return document.get("is_active") is not False


def matches_search(document: Document, term: str) -> bool:
    """
    Case-insensitive substring match over the searchable fields and tags.

    Args:
        document: Document to check
        term: Already lower-cased search term

    Returns:
        True if any searchable field or tag contains the term
    """
    for field in SEARCH_FIELDS:
        value = document.get(field)
        if isinstance(value, str) and term in value.lower():
            return True
    tags = document.get("tags")
    if isinstance(tags, list):
        return any(isinstance(tag, str) and term in tag.lower() for tag in tags)
    return False


class CollectionCRUD:
    """
    Uniform CRUD surface over any named collection.

    Every method is a single independent exchange with the store. Store
    errors are logged with context and re-raised unchanged; nothing is
    retried or rolled back here.

    Attributes:
        store: Shared document store handle
        collections: Catalog collection key to wire name mapping
    """

    def __init__(self, store: DocumentStore) -> None:
        """
        Initialize CRUD with the shared document store.

        Args:
            store: Process-wide document store
        """
        self.store = store
        self.collections = dict(COLLECTIONS)

    # ==================== CREATE ====================

    async def create(self, collection: str, data: dict[str, Any]) -> str:
        """
        Add a new document to a collection.

        Args:
            collection: Collection name
            data: Document fields

        Returns:
            str: Store-assigned document id

        Raises:
            StoreWriteError: If the write is rejected or the store is unreachable
        """
        now = self.store.server_timestamp()
        doc_data = {
            **data,
            "created_at": now,
            "updated_at": now,
            "is_active": data.get("is_active") if data.get("is_active") is not None else True,
        }
        try:
            doc_id = await self.store.add(collection, doc_data)
        except Exception as e:
            logger.error(
                "Failed to create document",
                extra={"collection": collection, "error": str(e)},
            )
            raise
        logger.info("Document created", extra={"collection": collection, "document_id": doc_id})
        return doc_id

    async def create_entity(self, collection: str, data: dict[str, Any]) -> str:
        """
        Create a document after filling the collection's creation defaults.

        Args:
            collection: Collection name
            data: Document fields; unset or None fields take defaults

        Returns:
            str: Store-assigned document id
        """
        filled = {k: v for k, v in data.items() if v is not None}
        for field, default in CREATION_DEFAULTS.get(collection, {}).items():
            filled.setdefault(field, copy.deepcopy(default))
        return await self.create(collection, filled)

    async def batch_create(
        self, collection: str, documents: Sequence[dict[str, Any]]
    ) -> list[str]:
        """
        Create many documents concurrently.

        There is no transaction: when one create fails the whole call fails,
        and documents already written stay in the store.

        Args:
            collection: Collection name
            documents: Document field dicts

        Returns:
            list[str]: Created ids, in input order
        """
        try:
            ids = await asyncio.gather(*(self.create(collection, doc) for doc in documents))
        except Exception as e:
            logger.error(
                "Batch create failed",
                extra={"collection": collection, "count": len(documents), "error": str(e)},
            )
            raise
        logger.info("Batch created documents", extra={"collection": collection, "count": len(ids)})
        return list(ids)

    # ==================== READ ====================

    async def get_by_id(self, collection: str, doc_id: str) -> Document | None:
        """
        Retrieve a single document.

        Args:
            collection: Collection name
            doc_id: Document id

        Returns:
            Document dict with its id, None if no document exists at that id

        Raises:
            StoreReadError: On transport or permission failure
        """
        try:
            document = await self.store.get(collection, doc_id)
        except Exception as e:
            logger.error(
                "Failed to get document",
                extra={"collection": collection, "document_id": doc_id, "error": str(e)},
            )
            raise
        if document is None:
            logger.info(
                "No document found",
                extra={"collection": collection, "document_id": doc_id},
            )
        return document

    async def get_all(
        self, collection: str, options: QueryOptions | None = None
    ) -> list[Document]:
        """
        Retrieve documents with optional filters, ordering and limit.

        Unsupported filter/order combinations are rejected by the store
        itself; there is no client-side fallback.

        Args:
            collection: Collection name
            options: Query options

        Returns:
            list[Document]: Matching documents, empty when nothing matches
        """
        try:
            return await self.store.list(collection, options)
        except Exception as e:
            logger.error(
                "Failed to get documents",
                extra={"collection": collection, "error": str(e)},
            )
            raise

    async def search(self, term: str, collection: str = ALL_COLLECTIONS) -> list[Document]:
        """
        Search documents by substring across one or all collections.

        Each targeted collection is fetched in full and filtered in process.
        Hits keep per-collection order and carry a "collection" key.

        Args:
            term: Search term (case-insensitive)
            collection: Collection name or "all"

        Returns:
            list[Document]: Matching documents tagged with their collection
        """
        needle = term.lower()
        targets = list(self.collections.values()) if collection == ALL_COLLECTIONS else [collection]

        results: list[Document] = []
        try:
            for name in targets:
                documents = await self.get_all(name)
                results.extend(
                    {**doc, "collection": name} for doc in documents if matches_search(doc, needle)
                )
        except Exception as e:
            logger.error("Search failed", extra={"term": term, "error": str(e)})
            raise
        logger.info("Search completed", extra={"term": term, "hits": len(results)})
        return results

    async def get_recordings_by_month(self, month: int) -> list[Document]:
        """Active recordings of one course month, by week."""
        options = QueryOptions(
            where=[
                WhereFilter(field="month", operator="==", value=month),
                WhereFilter(field="is_active", operator="==", value=True),
            ],
            order_by=OrderBy(field="week", direction="asc"),
        )
        return await self.get_all(COLLECTION_RECORDINGS, options)

    async def get_documentation_by_category(self, category: str) -> list[Document]:
        """Active documentation resources of one category, by title."""
        options = QueryOptions(
            where=[
                WhereFilter(field="category", operator="==", value=category),
                WhereFilter(field="is_active", operator="==", value=True),
            ],
            order_by=OrderBy(field="title", direction="asc"),
        )
        return await self.get_all(COLLECTION_DOCUMENTATION, options)

    async def get_essential_extensions(self) -> list[Document]:
        """Active essential editor extensions, highest rated first."""
        options = QueryOptions(
            where=[
                WhereFilter(field="is_essential", operator="==", value=True),
                WhereFilter(field="is_active", operator="==", value=True),
            ],
            order_by=OrderBy(field="rating", direction="desc"),
        )
        return await self.get_all(COLLECTION_VSCODE_EXTENSIONS, options)

    # ==================== UPDATE ====================

    async def update(self, collection: str, doc_id: str, updates: dict[str, Any]) -> None:
        """
        Merge fields into an existing document and stamp updated_at.

        Args:
            collection: Collection name
            doc_id: Document id
            updates: Fields to set

        Raises:
            DocumentNotFoundError: If the document does not exist
            StoreWriteError: If the write is rejected
        """
        update_data = {**updates, "updated_at": self.store.server_timestamp()}
        try:
            await self.store.update(collection, doc_id, update_data)
        except Exception as e:
            logger.error(
                "Failed to update document",
                extra={"collection": collection, "document_id": doc_id, "error": str(e)},
            )
            raise
        logger.info(
            "Document updated",
            extra={"collection": collection, "document_id": doc_id, "fields": list(updates)},
        )

    async def toggle_active(self, collection: str, doc_id: str) -> None:
        """
        Flip a document's is_active flag.

        Reads then writes with no compare-and-swap: two concurrent toggles
        can read the same value and one of them is lost.

        Args:
            collection: Collection name
            doc_id: Document id
        """
        current = await self.get_by_id(collection, doc_id)
        if current is None:
            logger.warning(
                "Toggle skipped, document missing",
                extra={"collection": collection, "document_id": doc_id},
            )
            return
        await self.update(collection, doc_id, {"is_active": not is_active(current)})

    # ==================== DELETE ====================

    async def delete(self, collection: str, doc_id: str) -> None:
        """
        Permanently remove a document.

        Raises:
            StoreWriteError: On transport or permission failure
        """
        try:
            await self.store.delete(collection, doc_id)
        except Exception as e:
            logger.error(
                "Failed to delete document",
                extra={"collection": collection, "document_id": doc_id, "error": str(e)},
            )
            raise
        logger.info("Document deleted", extra={"collection": collection, "document_id": doc_id})

    async def soft_delete(self, collection: str, doc_id: str) -> None:
        """
        Mark a document inactive and stamp deleted_at, keeping it in the store.

        A document that is already soft-deleted is left untouched.

        Raises:
            DocumentNotFoundError: If the document does not exist
            StoreWriteError: If the write is rejected
        """
        current = await self.get_by_id(collection, doc_id)
        if current is None:
            raise DocumentNotFoundError(
                f"No document to soft delete: {collection}/{doc_id}",
                collection=collection,
                document_id=doc_id,
                operation="update",
            )
        if not is_active(current) and current.get("deleted_at") is not None:
            logger.info(
                "Document already soft deleted",
                extra={"collection": collection, "document_id": doc_id},
            )
            return
        await self.update(
            collection,
            doc_id,
            {"is_active": False, "deleted_at": self.store.server_timestamp()},
        )
        logger.info("Document soft deleted", extra={"collection": collection, "document_id": doc_id})

    # ==================== REAL-TIME ====================

    def on_collection_change(
        self,
        collection: str,
        callback: SnapshotCallback,
        options: QueryOptions | None = None,
    ) -> Subscription:
        """
        Subscribe to a collection query.

        The callback receives the full current result set (not a diff) on
        every change. Each call opens its own channel; the returned handle
        must be released by the caller.

        Args:
            collection: Collection name
            callback: Receives the list of matching documents
            options: Query options

        Returns:
            Subscription: Owned handle, release with unsubscribe()
        """
        try:
            subscription = self.store.subscribe(collection, callback, options)
        except Exception as e:
            logger.error(
                "Failed to set up listener",
                extra={"collection": collection, "error": str(e)},
            )
            raise
        logger.info("Listener attached", extra={"collection": collection})
        return subscription

    # ==================== STATS ====================

    async def get_collection_stats(self, collection: str) -> CollectionStats:
        """
        Count active and inactive documents in a collection.

        Args:
            collection: Collection name

        Returns:
            CollectionStats: total, active, inactive counts
        """
        documents = await self.get_all(collection)
        active = sum(1 for doc in documents if is_active(doc))
        return CollectionStats(
            total=len(documents),
            active=active,
            inactive=len(documents) - active,
            collection_name=collection,
        )

    async def get_all_stats(self) -> dict[str, CollectionStats]:
        """
        Statistics for every catalog collection.

        Returns:
            dict: Collection key (e.g. "RECORDINGS") to CollectionStats
        """
        stats: dict[str, CollectionStats] = {}
        for key, name in self.collections.items():
            stats[key] = await self.get_collection_stats(name)
        return stats
