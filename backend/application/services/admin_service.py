"""
Admin dashboard service orchestrator.

Coordinates section listing, edit prefill, form submission, soft delete,
search and statistics for the admin dashboard.

Dependencies: backend.boundary.db.CRUD, backend.core.admin
System role: Admin use case orchestration
"""

import logging
from typing import Any, Callable, Mapping

from backend.boundary.db.base import Subscription
from backend.boundary.db.collections import ALL_COLLECTIONS
from backend.boundary.db.CRUD import CollectionCRUD
from backend.core.admin import EditSession, FormBinder, filter_table, get_schema, render_table
from backend.core.admin.entity_schemas import SCHEMAS
from backend.models.admin import DashboardStats, FormValues, RenderedTable, SearchHit

logger = logging.getLogger(__name__)


class AdminService:
    """Admin dashboard service orchestrator."""

    def __init__(self, crud: CollectionCRUD) -> None:
        """
        Initialize admin service with the collection CRUD.

        Args:
            crud: Shared collection CRUD
        """
        self.crud = crud
        self.binder = FormBinder(crud)

    async def list_section(self, section: str, search: str | None = None) -> RenderedTable:
        """
        Render a section's table, optionally narrowed by a row-text search.

        Args:
            section: Section key
            search: Case-insensitive text matched against rendered rows

        Returns:
            RenderedTable: Rendered rows in the section's list order

        Raises:
            UnknownCollectionError: If the section does not exist
        """
        schema = get_schema(section)
        documents = await self.crud.get_all(schema.collection, schema.list_options())
        table = render_table(schema, documents)
        if search:
            table = filter_table(table, search)
        logger.info(
            "Section rendered",
            extra={"section": section, "rows": table.total, "search": bool(search)},
        )
        return table

    async def get_form(self, section: str, record_id: str) -> FormValues:
        """
        Prefill a section's edit form from a stored document.

        Raises:
            ValueError: If the document does not exist
            UnknownCollectionError: If the section does not exist
        """
        schema = get_schema(section)
        document = await self.crud.get_by_id(schema.collection, record_id)
        if document is None:
            raise ValueError(f"Record {record_id} does not exist in {section}")
        return FormValues(
            section=section,
            form_id=schema.form_id,
            record_id=record_id,
            values=self.binder.populate(schema, document),
        )

    async def submit_form(
        self,
        section: str,
        form_data: Mapping[str, Any],
        session: EditSession,
    ) -> tuple[str, bool]:
        """
        Create or update a document from a form payload.

        Args:
            section: Section key
            form_data: Submitted values keyed by form input name
            session: Edit context; editing means update

        Returns:
            tuple[str, bool]: Document id and whether it was created
        """
        schema = get_schema(section)
        try:
            return await self.binder.submit(schema, form_data, session)
        except Exception as e:
            logger.error(
                "Failed to save form",
                extra={"section": section, "record_id": session.record_id, "error": str(e)},
            )
            raise

    async def soft_delete(self, section: str, record_id: str) -> None:
        """Mark a section record inactive."""
        schema = get_schema(section)
        await self.crud.soft_delete(schema.collection, record_id)

    async def toggle_active(self, section: str, record_id: str) -> None:
        """Flip a section record's active flag."""
        schema = get_schema(section)
        await self.crud.toggle_active(schema.collection, record_id)

    async def search(self, term: str, section: str = ALL_COLLECTIONS) -> list[SearchHit]:
        """
        Search one section or every collection.

        Args:
            term: Search term
            section: Section key or "all"

        Returns:
            list[SearchHit]: Hits in per-collection order
        """
        collection = ALL_COLLECTIONS if section == ALL_COLLECTIONS else get_schema(section).collection
        results = await self.crud.search(term, collection)
        return [
            SearchHit(
                id=doc["id"],
                collection=doc["collection"],
                document={k: v for k, v in doc.items() if k not in ("id", "collection")},
            )
            for doc in results
        ]

    async def dashboard_stats(self) -> DashboardStats:
        """Per-collection and overall active/inactive counts."""
        stats = await self.crud.get_all_stats()
        return DashboardStats(
            collections=stats,
            total=sum(s.total for s in stats.values()),
            active=sum(s.active for s in stats.values()),
            inactive=sum(s.inactive for s in stats.values()),
        )

    @staticmethod
    def sections() -> list[str]:
        return list(SCHEMAS)

    def watch_section(
        self, section: str, on_table: Callable[[RenderedTable], None]
    ) -> Subscription:
        """
        Re-render a section's table on every store change.

        on_table runs on whatever thread the store delivers snapshots on.

        Args:
            section: Section key
            on_table: Receives the freshly rendered table

        Returns:
            Subscription: Owned handle, release with unsubscribe()
        """
        schema = get_schema(section)

        def on_snapshot(documents: list[dict[str, Any]]) -> None:
            on_table(render_table(schema, documents))

        return self.crud.on_collection_change(
            schema.collection, on_snapshot, schema.list_options()
        )
