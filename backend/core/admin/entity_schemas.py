"""
Declarative entity schemas for the admin dashboard.

One record per entity kind describes its collection, list ordering, table
columns with display fallbacks, and form fields. The table renderer and
form binder are driven entirely by these records.

Dependencies: backend.boundary.db.collections, backend.models.query
System role: Single source of per-entity field mappings
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from backend.boundary.db.collections import (
    COLLECTION_DOCUMENTATION,
    COLLECTION_GITHUB_REPOS,
    COLLECTION_PRACTICE_ACTIVITIES,
    COLLECTION_RECORDINGS,
    COLLECTION_SOFTWARE_TOOLS,
    COLLECTION_VSCODE_EXTENSIONS,
    COLLECTION_YOUTUBE_CHANNELS,
)
from backend.core.exceptions import UnknownCollectionError
from backend.models.query import OrderBy, QueryOptions

FieldKind = Literal["text", "int", "number", "list", "bool"]


@dataclass(frozen=True)
class Column:
    """
    Table column rendered from the first non-blank source field.

    Attributes:
        key: Cell key in the rendered row
        sources: Document fields tried in order
        default: Text shown when every source is blank
        labels: (true, false) labels for boolean columns
    """

    key: str
    sources: tuple[str, ...]
    default: str = ""
    labels: tuple[str, str] | None = None


@dataclass(frozen=True)
class FormField:
    """
    Admin form input bound to a document field.

    Attributes:
        name: Form input name
        kind: How the submitted value is parsed
        target: Document field written on submit (defaults to name)
        aliases: Extra document fields read when prefilling
        default: Value used when an int input is blank
        required: Whether a blank value rejects the submission
    """

    name: str
    kind: FieldKind = "text"
    target: str | None = None
    aliases: tuple[str, ...] = ()
    default: Any = None
    required: bool = False

    @property
    def document_field(self) -> str:
        return self.target or self.name

    @property
    def prefill_sources(self) -> tuple[str, ...]:
        """Document fields read for prefill, without duplicates."""
        sources = (self.document_field, self.name, *self.aliases)
        return tuple(dict.fromkeys(sources))


@dataclass(frozen=True)
class EntitySchema:
    """Field mapping for one entity kind."""

    section: str
    collection: str
    form_id: str
    order_by: OrderBy
    columns: tuple[Column, ...]
    form_fields: tuple[FormField, ...]
    empty_message: str
    extra_fields: dict[str, Any] = field(default_factory=lambda: {"status": "published"})

    def list_options(self) -> QueryOptions:
        """Query options used to list the section's table."""
        return QueryOptions(order_by=self.order_by)


ACTIVE_FIELD = FormField("active", kind="bool", target="is_active")
DESCRIPTION_COLUMN = Column("description", ("description",), "No description")
CATEGORY_COLUMN = Column("category", ("category",), "General")


SCHEMAS: dict[str, EntitySchema] = {
    schema.section: schema
    for schema in (
        EntitySchema(
            section="recordings",
            collection=COLLECTION_RECORDINGS,
            form_id="recordings-form",
            order_by=OrderBy(field="week", direction="asc"),
            columns=(
                Column("week", ("week",), "N/A"),
                Column("month", ("month",), "N/A"),
                Column("title", ("title",), "Untitled"),
                DESCRIPTION_COLUMN,
                Column("duration", ("duration",), "N/A"),
            ),
            form_fields=(
                FormField("week", kind="int", required=True),
                FormField("month", kind="int"),
                FormField("title", required=True),
                FormField("description"),
                FormField("video_url"),
                FormField("duration"),
                FormField("sessions", kind="list", target="session_numbers"),
                FormField("topics", kind="list"),
                ACTIVE_FIELD,
            ),
            empty_message="No recordings found. Add your first recording!",
        ),
        EntitySchema(
            section="documentation",
            collection=COLLECTION_DOCUMENTATION,
            form_id="documentation-form",
            order_by=OrderBy(field="title", direction="asc"),
            columns=(
                Column("icon", ("icon",), "fas fa-book"),
                Column("title", ("title",), "Untitled"),
                DESCRIPTION_COLUMN,
                CATEGORY_COLUMN,
                Column("url", ("url",), "#"),
            ),
            form_fields=(
                FormField("title", required=True),
                FormField("description"),
                FormField("url"),
                FormField("category"),
                FormField("tags", kind="list"),
                FormField("difficulty", target="difficulty_level"),
                ACTIVE_FIELD,
            ),
            empty_message="No documentation found. Add your first resource!",
        ),
        EntitySchema(
            section="extensions",
            collection=COLLECTION_VSCODE_EXTENSIONS,
            form_id="extensions-form",
            order_by=OrderBy(field="rating", direction="desc"),
            columns=(
                Column("name", ("extension_name", "name"), "Unnamed Extension"),
                DESCRIPTION_COLUMN,
                Column("install_count", ("install_count",), "0"),
                Column("rating", ("rating",), "0.0"),
                CATEGORY_COLUMN,
            ),
            form_fields=(
                FormField("name", target="extension_name", required=True),
                FormField("rating", kind="number", default=0),
                FormField("description"),
                FormField("extension_id"),
                FormField("category"),
                FormField("publisher"),
                FormField("install_command"),
                FormField("tags", kind="list"),
                ACTIVE_FIELD,
            ),
            empty_message="No extensions found. Add your first extension!",
        ),
        EntitySchema(
            section="youtube",
            collection=COLLECTION_YOUTUBE_CHANNELS,
            form_id="youtube-form",
            order_by=OrderBy(field="subscriber_count", direction="desc"),
            columns=(
                Column("channel_name", ("channel_name",), "Unnamed Channel"),
                DESCRIPTION_COLUMN,
                Column("subscriber_count", ("subscriber_count",), "0"),
                CATEGORY_COLUMN,
            ),
            form_fields=(
                FormField("channel_name", required=True),
                FormField("channel_url"),
                FormField("description"),
                FormField("category"),
                FormField("subscriber_count"),
                FormField("language"),
                FormField("tags", kind="list"),
                ACTIVE_FIELD,
            ),
            empty_message="No YouTube channels found. Add your first channel!",
        ),
        EntitySchema(
            section="software",
            collection=COLLECTION_SOFTWARE_TOOLS,
            form_id="software-form",
            order_by=OrderBy(field="tool_name", direction="asc"),
            columns=(
                Column("name", ("tool_name", "name"), "Unnamed Tool"),
                DESCRIPTION_COLUMN,
                CATEGORY_COLUMN,
                Column("platform", ("platform",), "Unknown"),
                Column("price", ("is_free",), "Paid", labels=("Free", "Paid")),
            ),
            form_fields=(
                FormField("name", target="tool_name", required=True),
                FormField("description"),
                FormField("download_url"),
                FormField("category"),
                FormField("platform"),
                FormField("version"),
                FormField("license"),
                FormField("is_free", kind="bool"),
                FormField("tags", kind="list"),
                ACTIVE_FIELD,
            ),
            empty_message="No software tools found. Add your first tool!",
        ),
        EntitySchema(
            section="activities",
            collection=COLLECTION_PRACTICE_ACTIVITIES,
            form_id="activities-form",
            order_by=OrderBy(field="difficulty", direction="asc"),
            columns=(
                Column("name", ("activity_name", "title"), "Unnamed Activity"),
                DESCRIPTION_COLUMN,
                Column("difficulty", ("difficulty",), "Beginner"),
                Column("estimated_time", ("estimated_time",), "N/A"),
            ),
            form_fields=(
                FormField("title", target="activity_name", required=True),
                FormField("description"),
                FormField("instructions"),
                FormField("difficulty"),
                FormField("estimated_time"),
                FormField("category"),
                FormField("tags", kind="list"),
                FormField("prerequisites", kind="list"),
                ACTIVE_FIELD,
            ),
            empty_message="No activities found. Add your first activity!",
        ),
        EntitySchema(
            section="repositories",
            collection=COLLECTION_GITHUB_REPOS,
            form_id="repositories-form",
            order_by=OrderBy(field="stars", direction="desc"),
            columns=(
                Column("name", ("repo_name", "name"), "Unnamed Repository"),
                DESCRIPTION_COLUMN,
                Column("stars", ("stars",), "0"),
                Column("language", ("language",), "JavaScript"),
                CATEGORY_COLUMN,
            ),
            form_fields=(
                FormField("name", target="repo_name", required=True),
                FormField("description"),
                FormField("repository_url", target="github_url"),
                FormField("language"),
                FormField("stars", kind="int", default=0),
                FormField("level"),
                FormField("category"),
                FormField("tags", kind="list", target="topics"),
                ACTIVE_FIELD,
            ),
            empty_message="No repositories found. Add your first repository!",
        ),
    )
}


def get_schema(section: str) -> EntitySchema:
    """
    Look up the schema for a dashboard section.

    Args:
        section: Section key (e.g. "recordings")

    Returns:
        EntitySchema: The section's field mapping

    Raises:
        UnknownCollectionError: If the section is not part of the catalog
    """
    try:
        return SCHEMAS[section]
    except KeyError:
        raise UnknownCollectionError(section) from None
