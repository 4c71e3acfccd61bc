"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: backend.boundary
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from backend.api.deps.dependencies import get_document_store
from backend.boundary.db import DocumentStore
from backend.boundary.db.collections import COLLECTION_RECORDINGS
from backend.core.exceptions import StoreError
from backend.models.query import QueryOptions

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=HealthResponse)
async def health_check_store(
    store: DocumentStore = Depends(get_document_store),
) -> HealthResponse:
    """Document store health check: one capped read against a known collection."""
    try:
        await store.list(COLLECTION_RECORDINGS, QueryOptions(limit=1))
    except StoreError as e:
        logger.error("Document store unreachable", extra={"error": e.message})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Document store unreachable: {e.message}",
        )
    return HealthResponse(status="healthy", message="Document store reachable")
