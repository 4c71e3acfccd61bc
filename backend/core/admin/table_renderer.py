"""
Generic table rendering for admin sections.

Turns documents into display rows according to an EntitySchema,
substituting each column's default for blank values.

Dependencies: backend.core.admin.entity_schemas, backend.models.admin
System role: Single render engine for every entity kind
"""

from typing import Any, Iterable

from backend.boundary.db.CRUD import is_active
from backend.core.admin.entity_schemas import Column, EntitySchema
from backend.models.admin import RenderedRow, RenderedTable


def is_blank(value: Any) -> bool:
    """Values that fall back to a display default."""
    return value is None or value == "" or value == []


def format_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    return str(value)


def render_cell(column: Column, document: dict[str, Any]) -> str:
    """
    Render one cell from the first non-blank source field.

    Args:
        column: Column definition
        document: Source document

    Returns:
        str: Display text
    """
    if column.labels is not None:
        for source in column.sources:
            if source in document and document[source] is not None:
                return column.labels[0] if document[source] else column.labels[1]
        return column.default

    for source in column.sources:
        value = document.get(source)
        if not is_blank(value):
            return format_value(value)
    return column.default


def render_row(schema: EntitySchema, document: dict[str, Any]) -> RenderedRow:
    active = is_active(document)
    return RenderedRow(
        id=document["id"],
        cells={column.key: render_cell(column, document) for column in schema.columns},
        status="Active" if active else "Inactive",
        is_active=active,
    )


def render_table(schema: EntitySchema, documents: Iterable[dict[str, Any]]) -> RenderedTable:
    """
    Render a section's documents into a table.

    Args:
        schema: Section schema
        documents: Documents in display order

    Returns:
        RenderedTable: Rows, count, and an empty-state message when there are no rows
    """
    rows = [render_row(schema, document) for document in documents]
    return RenderedTable(
        section=schema.section,
        rows=rows,
        total=len(rows),
        empty_message=None if rows else schema.empty_message,
    )


def filter_table(table: RenderedTable, term: str) -> RenderedTable:
    """
    Keep the rows whose visible text contains the term (case-insensitive).

    An empty term returns the table unchanged.
    """
    needle = term.strip().lower()
    if not needle:
        return table
    rows = [
        row
        for row in table.rows
        if needle in " ".join([*row.cells.values(), row.status]).lower()
    ]
    return table.model_copy(update={"rows": rows, "total": len(rows)})
