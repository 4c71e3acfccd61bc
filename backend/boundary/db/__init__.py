"""
Document store boundary layer: store port, backends, and CRUD operations.

Exports:
  - DocumentStore, Subscription: Store port and owned subscription handle
  - MemoryDocumentStore: In-process backend for development and tests
  - get_document_store(): Backend selection from settings
  - CollectionCRUD: Generic collection operations
  - COLLECTIONS: Catalog collection key to wire name mapping

Dependencies: backend.configs (google-cloud-firestore for the Firestore backend)
System role: Database adapter for the hosted document store
"""

from backend.boundary.db.base import Document, DocumentStore, SnapshotCallback, Subscription
from backend.boundary.db.collections import ALL_COLLECTIONS, COLLECTIONS
from backend.boundary.db.memory_store import MemoryDocumentStore
from backend.boundary.db.store_factory import get_document_store
from backend.boundary.db.CRUD import CollectionCRUD

__all__ = [
    # Port
    "Document",
    "DocumentStore",
    "SnapshotCallback",
    "Subscription",
    # Backends
    "MemoryDocumentStore",
    "get_document_store",
    # Collections
    "ALL_COLLECTIONS",
    "COLLECTIONS",
    # CRUD
    "CollectionCRUD",
]
