"""
Document store factory for selecting between memory (dev) and Firestore (prod).

Depends on STORE_BACKEND environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: backend.boundary.db, backend.configs
System role: Document store instantiation and selection
"""

import logging
import os

from backend.boundary.db.base import DocumentStore
from backend.boundary.db.memory_store import MemoryDocumentStore
from backend.configs import get_settings

logger = logging.getLogger(__name__)


def get_document_store() -> DocumentStore:
    """
    Factory function to get document store based on environment configuration.

    Returns:
        MemoryDocumentStore or FirestoreDocumentStore: Configured store instance

    Raises:
        ValueError: If STORE_BACKEND is invalid
    """
    settings = get_settings()
    backend = settings.store.backend.lower()

    if backend == "memory":
        logger.info(
            f"{__name__}:get_document_store - Creating in-memory document store (local dev mode)"
        )
        return MemoryDocumentStore()

    elif backend == "firestore":
        # Imported lazily so the memory backend works without Google credentials
        from backend.boundary.db.firestore_store import FirestoreDocumentStore

        if settings.store.emulator_host:
            os.environ["FIRESTORE_EMULATOR_HOST"] = settings.store.emulator_host
        logger.info(
            f"{__name__}:get_document_store - Creating Firestore document store (production mode)",
            extra={
                "project_id": settings.store.project_id,
                "database": settings.store.database,
                "emulator": bool(settings.store.emulator_host),
            },
        )
        return FirestoreDocumentStore(
            project_id=settings.store.project_id,
            database=settings.store.database,
            credentials_path=settings.store.credentials_path,
        )

    else:
        raise ValueError(
            f"Invalid STORE_BACKEND: {backend}. "
            f"Must be 'memory' (dev) or 'firestore' (production)."
        )
