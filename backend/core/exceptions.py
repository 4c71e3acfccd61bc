"""
Exception hierarchy for the course resource catalog.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CatalogException(Exception):
    """Base exception for all catalog application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StoreError(CatalogException):
    """Base exception for document store failures."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        document_id: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            collection: Collection the operation targeted
            document_id: Document the operation targeted, if any
            operation: Store operation that failed (get, list, add, update, delete)
            details: Additional context
        """
        details = details or {}
        if collection:
            details["collection"] = collection
        if document_id:
            details["document_id"] = document_id
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.collection = collection
        self.document_id = document_id
        self.operation = operation


class StoreReadError(StoreError):
    """Raised when a read (get, list, subscribe) is rejected or cannot reach the store."""

    pass


class StoreWriteError(StoreError):
    """Raised when a write is rejected, cannot reach the store, or targets a missing document."""

    pass


class UnknownCollectionError(CatalogException):
    """Raised when a collection or admin section key is not part of the catalog."""

    def __init__(self, key: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize unknown collection error.

        Args:
            key: The unrecognised collection or section key
            details: Additional context
        """
        details = details or {}
        details["key"] = key
        super().__init__(f"Unknown collection or section: {key}", details)
        self.key = key


class FormValidationError(CatalogException):
    """Raised when an admin form payload cannot be bound to a document."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)
        self.field = field


class DocumentNotFoundError(StoreWriteError):
    """Raised when a write targets a document that does not exist."""

    pass
