"""
Admin dashboard engine.

Declarative entity schemas drive one table renderer and one form binder
for every entity kind. Form edits are scoped by an explicit EditSession.
"""

from backend.core.admin.edit_session import EditSession
from backend.core.admin.entity_schemas import (
    SCHEMAS,
    Column,
    EntitySchema,
    FormField,
    get_schema,
)
from backend.core.admin.form_binder import FormBinder
from backend.core.admin.table_renderer import filter_table, render_table

__all__ = [
    "EditSession",
    "SCHEMAS",
    "Column",
    "EntitySchema",
    "FormField",
    "get_schema",
    "FormBinder",
    "filter_table",
    "render_table",
]
