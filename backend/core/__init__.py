"""
Core business logic module.

Contains the exception hierarchy and the admin dashboard engine.
All business rules and domain-specific logic reside here.
"""

from backend.core.exceptions import (
    CatalogException,
    StoreError,
    StoreReadError,
    StoreWriteError,
    UnknownCollectionError,
    FormValidationError,
    DocumentNotFoundError,
)

__all__ = [
    # Exceptions
    "CatalogException",
    "StoreError",
    "StoreReadError",
    "StoreWriteError",
    "UnknownCollectionError",
    "FormValidationError",
    "DocumentNotFoundError",
]
