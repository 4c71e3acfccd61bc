"""
Admin error handling utilities.

Provides a decorator for consistent error handling across admin and
catalog API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from backend.core.exceptions import (
    DocumentNotFoundError,
    FormValidationError,
    StoreError,
    UnknownCollectionError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_admin_errors(func: F) -> F:
    """
    Decorator to handle catalog errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (collection, document_id)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except UnknownCollectionError as e:
            logger.warning("Unknown section", extra={"key": e.key})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except DocumentNotFoundError as e:
            logger.warning(
                "Document not found",
                extra={"collection": e.collection, "document_id": e.document_id},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except FormValidationError as e:
            logger.warning("Invalid form payload", extra={"field": e.field, "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except StoreError as e:
            logger.error(
                "Document store failure",
                extra={
                    "collection": e.collection,
                    "document_id": e.document_id,
                    "operation": e.operation,
                    "error": e.message,
                },
            )
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        # ValidationError subclasses ValueError, so it must be caught first
        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(include_url=False, include_context=False),
            )

        except ValueError as e:
            msg = str(e).lower()
            if "not found" in msg or "does not exist" in msg:
                logger.warning("Resource not found (ValueError)", extra={"error": str(e)})
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
            logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except Exception as e:
            logger.exception("Unexpected failure in admin operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore
