"""
Admin dashboard models and schemas.

Rendered table, form and submission contracts for the admin API.

Dependencies: pydantic
System role: Admin API contracts
"""

from typing import Any

from pydantic import BaseModel, Field

from backend.models.query import CollectionStats


class RenderedRow(BaseModel):
    """One table row with display-ready cells."""

    id: str
    cells: dict[str, str]
    status: str = Field(description="Active or Inactive")
    is_active: bool


class RenderedTable(BaseModel):
    """Section table as shown on the dashboard."""

    section: str
    rows: list[RenderedRow]
    total: int
    empty_message: str | None = Field(
        default=None, description="Placeholder text when the table has no rows"
    )


class FormValues(BaseModel):
    """Edit-form prefill for one document."""

    section: str
    form_id: str
    record_id: str
    values: dict[str, Any]


class SubmitResponse(BaseModel):
    """Result of a create or update form submission."""

    id: str
    created: bool


class SearchHit(BaseModel):
    """Search result: the document plus its source collection."""

    id: str
    collection: str
    document: dict[str, Any]


class DashboardStats(BaseModel):
    """Per-collection statistics keyed by collection key."""

    collections: dict[str, CollectionStats]
    total: int
    active: int
    inactive: int
