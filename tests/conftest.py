"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory document store, collection CRUD, service mocks, sample documents
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.boundary.db.CRUD import CollectionCRUD
from backend.boundary.db.memory_store import MemoryDocumentStore


@pytest.fixture
def memory_store() -> MemoryDocumentStore:
    """Provide an empty in-memory document store."""
    return MemoryDocumentStore()


@pytest.fixture
def crud(memory_store: MemoryDocumentStore) -> CollectionCRUD:
    """Provide collection CRUD over the in-memory store."""
    return CollectionCRUD(memory_store)


@pytest.fixture
def mock_crud() -> MagicMock:
    """
    Create mock CollectionCRUD for service tests.

    Returns:
        MagicMock: CRUD with async methods and the real collection mapping
    """
    from backend.boundary.db.collections import COLLECTIONS

    crud = MagicMock(spec=CollectionCRUD)
    crud.collections = dict(COLLECTIONS)
    crud.get_all = AsyncMock(return_value=[])
    crud.get_by_id = AsyncMock(return_value=None)
    crud.create = AsyncMock(return_value="new-doc-id")
    crud.update = AsyncMock()
    crud.toggle_active = AsyncMock()
    crud.soft_delete = AsyncMock()
    crud.search = AsyncMock(return_value=[])
    crud.get_all_stats = AsyncMock(return_value={})
    crud.get_recordings_by_month = AsyncMock(return_value=[])
    crud.get_documentation_by_category = AsyncMock(return_value=[])
    crud.get_essential_extensions = AsyncMock(return_value=[])
    return crud


@pytest.fixture
def sample_recording() -> dict:
    """Provide a recording document payload."""
    return {
        "week": 3,
        "month": 1,
        "title": "Intro to JavaScript",
        "description": "Variables, functions and the event loop",
        "video_url": "https://example.com/videos/week-3",
        "duration": "1:45:00",
        "session_numbers": ["5", "6"],
        "topics": ["javascript", "basics"],
    }
