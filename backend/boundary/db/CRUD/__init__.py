"""
CRUD operations for the document store.

Exports the generic collection CRUD class and its search/soft-delete helpers.

Usage:
    from backend.boundary.db.CRUD import CollectionCRUD

    crud = CollectionCRUD(store)
    recordings = await crud.get_all(crud.collections["RECORDINGS"])
"""

from backend.boundary.db.CRUD.collection_crud import (
    CREATION_DEFAULTS,
    SEARCH_FIELDS,
    CollectionCRUD,
    is_active,
    matches_search,
)

__all__ = [
    "CollectionCRUD",
    "CREATION_DEFAULTS",
    "SEARCH_FIELDS",
    "is_active",
    "matches_search",
]
