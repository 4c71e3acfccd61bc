"""
Generic form binding for admin sections.

Prefills edit forms from documents, parses submitted form values into
document fields, and submits them as a create or an update depending on
the caller's EditSession.

Dependencies: backend.boundary.db.CRUD, backend.core.admin
System role: Single bind engine for every entity kind
"""

import logging
from typing import Any, Mapping

from backend.boundary.db.CRUD import CollectionCRUD
from backend.core.admin.edit_session import EditSession
from backend.core.admin.entity_schemas import EntitySchema, FormField
from backend.core.admin.table_renderer import is_blank
from backend.core.exceptions import FormValidationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"on", "true", "1", "yes"}


def split_list(raw: Any) -> list[str]:
    """Comma-separated input (or an actual list) to trimmed non-empty items."""
    items = raw if isinstance(raw, list) else str(raw).split(",")
    return [str(item).strip() for item in items if str(item).strip()]


def parse_field(form_field: FormField, raw: Any) -> Any:
    """
    Parse one submitted value according to its field kind.

    Args:
        form_field: Field definition
        raw: Submitted value (None when the input was absent)

    Returns:
        Parsed value, or None when the field should not be written

    Raises:
        FormValidationError: If a required field is blank or a number is malformed
    """
    if form_field.kind == "bool":
        if isinstance(raw, bool):
            return raw
        return raw is not None and str(raw).strip().lower() in _TRUE_VALUES

    blank = raw is None or (isinstance(raw, str) and not raw.strip()) or raw == []
    if blank and form_field.required:
        raise FormValidationError(f"{form_field.name} is required", field=form_field.name)

    if form_field.kind == "list":
        return [] if raw is None else split_list(raw)

    if form_field.kind in ("int", "number"):
        if blank:
            return form_field.default
        try:
            return int(raw) if form_field.kind == "int" else float(raw)
        except (TypeError, ValueError):
            raise FormValidationError(
                f"{form_field.name} must be a number", field=form_field.name
            ) from None

    if raw is None:
        return None
    return str(raw).strip()


class FormBinder:
    """
    Binds admin forms to documents for any entity schema.

    Attributes:
        crud: Collection CRUD used for submissions
    """

    def __init__(self, crud: CollectionCRUD) -> None:
        self.crud = crud

    @staticmethod
    def populate(schema: EntitySchema, document: dict[str, Any]) -> dict[str, Any]:
        """
        Build edit-form values from a stored document.

        Lists are joined with ", ". Checkboxes are checked unless the
        stored value is explicitly False.
        """
        values: dict[str, Any] = {}
        for form_field in schema.form_fields:
            found = next(
                (
                    document[source]
                    for source in form_field.prefill_sources
                    if not is_blank(document.get(source))
                ),
                None,
            )
            if form_field.kind == "bool":
                values[form_field.name] = found is not False
            elif isinstance(found, list):
                values[form_field.name] = ", ".join(str(item) for item in found)
            elif found is None:
                values[form_field.name] = ""
            else:
                values[form_field.name] = found
        return values

    @staticmethod
    def bind(schema: EntitySchema, form_data: Mapping[str, Any]) -> dict[str, Any]:
        """
        Parse submitted form values into document fields.

        Args:
            schema: Section schema
            form_data: Submitted values keyed by form input name

        Returns:
            dict: Document fields, including the schema's extra fields

        Raises:
            FormValidationError: If a value cannot be parsed
        """
        data: dict[str, Any] = {}
        for form_field in schema.form_fields:
            value = parse_field(form_field, form_data.get(form_field.name))
            if value is not None:
                data[form_field.document_field] = value
        data.update(schema.extra_fields)
        return data

    async def submit(
        self,
        schema: EntitySchema,
        form_data: Mapping[str, Any],
        session: EditSession,
    ) -> tuple[str, bool]:
        """
        Save a form: update the session's record when editing, create otherwise.

        The session is cleared after a successful save and kept on failure.

        Args:
            schema: Section schema
            form_data: Submitted values
            session: Caller-owned edit context

        Returns:
            tuple[str, bool]: Document id and whether it was created

        Raises:
            FormValidationError: If the payload is invalid or the session edits another form
        """
        if session.is_editing and not session.is_editing_form(schema.form_id):
            raise FormValidationError(
                f"Edit session belongs to {session.form_id}, not {schema.form_id}",
                field="form_id",
            )

        data = self.bind(schema, form_data)
        if session.is_editing:
            doc_id = session.record_id
            await self.crud.update(schema.collection, doc_id, data)
            created = False
        else:
            doc_id = await self.crud.create(schema.collection, data)
            created = True

        logger.info(
            "Form saved",
            extra={"form_id": schema.form_id, "document_id": doc_id, "created": created},
        )
        session.clear()
        return doc_id, created
