"""
Dependency injection container.

Factory functions for FastAPI dependencies. The document store client is
created once per process and shared by every accessor.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

import logging
from functools import lru_cache

from fastapi import Depends

from backend.application.services import AdminService, CatalogService
from backend.boundary.db import CollectionCRUD, DocumentStore
from backend.configs import Settings, get_settings

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._document_store: DocumentStore | None = None

    @property
    def document_store(self) -> DocumentStore:
        """Get cached document store."""
        if self._document_store is None:
            from backend.boundary.db.store_factory import get_document_store

            self._document_store = get_document_store()
        return self._document_store

    async def close(self) -> None:
        """Release the store client and clear cached instances."""
        if self._document_store is not None:
            await self._document_store.close()
        self.clear()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._document_store = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_document_store() -> DocumentStore:
    """
    Get the process-wide document store.

    Returns:
        DocumentStore: Store selected via STORE_BACKEND
    """
    return get_service_cache().document_store


def get_collection_crud(
    store: DocumentStore = Depends(get_document_store),
) -> CollectionCRUD:
    """
    Get collection CRUD bound to the shared store.

    Args:
        store: Document store (injected via Depends)

    Returns:
        CollectionCRUD: Accessor instance
    """
    return CollectionCRUD(store)


def get_admin_service(crud: CollectionCRUD = Depends(get_collection_crud)) -> AdminService:
    """
    Get admin service instance.

    Args:
        crud: Collection CRUD (injected via Depends)

    Returns:
        AdminService: Admin dashboard service
    """
    return AdminService(crud=crud)


def get_catalog_service(crud: CollectionCRUD = Depends(get_collection_crud)) -> CatalogService:
    """Get public catalog service instance."""
    return CatalogService(crud=crud)
