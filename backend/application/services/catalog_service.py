"""
Public catalog service.

Read-only, active-only views of the catalog for the landing page.

Dependencies: backend.boundary.db.CRUD, backend.core.admin
System role: Landing page use case orchestration
"""

import logging

from backend.boundary.db.base import Document
from backend.boundary.db.CRUD import CollectionCRUD, is_active
from backend.core.admin import get_schema

logger = logging.getLogger(__name__)


class CatalogService:
    """Landing page catalog reads."""

    def __init__(self, crud: CollectionCRUD) -> None:
        self.crud = crud

    async def list_active(self, section: str) -> list[Document]:
        """
        Active documents of a section in the section's list order.

        Documents without an is_active field count as active, so the
        filter runs here rather than as a store equality filter.
        """
        schema = get_schema(section)
        documents = await self.crud.get_all(schema.collection, schema.list_options())
        active = [doc for doc in documents if is_active(doc)]
        logger.info("Catalog listed", extra={"section": section, "count": len(active)})
        return active

    async def recordings_by_month(self, month: int) -> list[Document]:
        return await self.crud.get_recordings_by_month(month)

    async def documentation_by_category(self, category: str) -> list[Document]:
        return await self.crud.get_documentation_by_category(category)

    async def essential_extensions(self) -> list[Document]:
        return await self.crud.get_essential_extensions()
