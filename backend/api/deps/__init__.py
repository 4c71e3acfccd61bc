"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_admin_service,
    get_catalog_service,
    get_collection_crud,
    get_document_store,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_admin_service",
    "get_catalog_service",
    "get_collection_crud",
    "get_document_store",
    "get_service_cache",
    "get_settings_dependency",
]
