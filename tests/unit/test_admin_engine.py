"""
Test suite for the admin dashboard engine.

Tests schema lookup, table rendering with display defaults, row filtering,
form prefill and binding, and EditSession-scoped submissions.

System role: Verification of the schema-driven render/bind engine
"""

import pytest

from backend.boundary.db.collections import (
    COLLECTION_GITHUB_REPOS,
    COLLECTION_RECORDINGS,
    COLLECTIONS,
)
from backend.boundary.db.CRUD import CollectionCRUD
from backend.core.admin import (
    SCHEMAS,
    EditSession,
    FormBinder,
    filter_table,
    get_schema,
    render_table,
)
from backend.core.admin.form_binder import parse_field, split_list
from backend.core.admin.entity_schemas import FormField
from backend.core.exceptions import (
    DocumentNotFoundError,
    FormValidationError,
    UnknownCollectionError,
)


class TestEntitySchemas:
    """Test suite for the schema registry."""

    def test_every_collection_has_exactly_one_schema(self) -> None:
        assert sorted(schema.collection for schema in SCHEMAS.values()) == sorted(
            COLLECTIONS.values()
        )

    def test_form_ids_are_unique(self) -> None:
        form_ids = [schema.form_id for schema in SCHEMAS.values()]
        assert len(form_ids) == len(set(form_ids))

    def test_unknown_section_should_raise(self) -> None:
        with pytest.raises(UnknownCollectionError) as exc_info:
            get_schema("podcasts")

        assert exc_info.value.key == "podcasts"

    @pytest.mark.parametrize(
        "section,field,direction",
        [
            ("recordings", "week", "asc"),
            ("documentation", "title", "asc"),
            ("extensions", "rating", "desc"),
            ("youtube", "subscriber_count", "desc"),
            ("software", "tool_name", "asc"),
            ("activities", "difficulty", "asc"),
            ("repositories", "stars", "desc"),
        ],
    )
    def test_list_ordering(self, section: str, field: str, direction: str) -> None:
        order_by = get_schema(section).list_options().order_by

        assert (order_by.field, order_by.direction) == (field, direction)


class TestTableRenderer:
    """Test suite for render_table() and filter_table()."""

    def test_empty_section_renders_empty_state(self) -> None:
        table = render_table(get_schema("recordings"), [])

        assert table.rows == []
        assert table.total == 0
        assert table.empty_message.startswith("No recordings found")

    def test_blank_values_fall_back_to_defaults(self) -> None:
        table = render_table(
            get_schema("recordings"),
            [{"id": "r1", "week": 2, "title": "", "description": None}],
        )

        row = table.rows[0]
        assert row.cells == {
            "week": "2",
            "month": "N/A",
            "title": "Untitled",
            "description": "No description",
            "duration": "N/A",
        }
        assert row.status == "Active"
        assert table.empty_message is None

    def test_alias_columns_and_status(self) -> None:
        table = render_table(
            get_schema("extensions"),
            [
                {"id": "e1", "name": "Prettier", "is_active": False},
                {"id": "e2", "extension_name": "ESLint", "name": "ignored"},
            ],
        )

        assert [row.cells["name"] for row in table.rows] == ["Prettier", "ESLint"]
        assert [row.status for row in table.rows] == ["Inactive", "Active"]
        assert table.rows[0].is_active is False

    def test_boolean_label_column(self) -> None:
        schema = get_schema("software")
        table = render_table(
            schema,
            [
                {"id": "s1", "tool_name": "VS Code", "is_free": True, "platform": ["Mac", "Linux"]},
                {"id": "s2", "tool_name": "WebStorm", "is_free": False},
                {"id": "s3", "tool_name": "Mystery"},
            ],
        )

        assert [row.cells["price"] for row in table.rows] == ["Free", "Paid", "Paid"]
        assert table.rows[0].cells["platform"] == "Mac, Linux"
        assert table.rows[1].cells["platform"] == "Unknown"

    def test_filter_table_matches_visible_text(self) -> None:
        table = render_table(
            get_schema("recordings"),
            [
                {"id": "r1", "week": 1, "title": "HTML Basics"},
                {"id": "r2", "week": 2, "title": "CSS Layout", "is_active": False},
            ],
        )

        assert [row.id for row in filter_table(table, "css").rows] == ["r2"]
        assert [row.id for row in filter_table(table, "inactive").rows] == ["r2"]
        assert filter_table(table, "  ").total == 2


class TestFieldParsing:
    """Test suite for parse_field() and split_list()."""

    def test_split_list_trims_and_drops_empty_items(self) -> None:
        assert split_list(" a, b ,,c ") == ["a", "b", "c"]
        assert split_list(["x ", ""]) == ["x"]

    def test_int_field_uses_default_when_blank(self) -> None:
        stars = FormField("stars", kind="int", default=0)

        assert parse_field(stars, "") == 0
        assert parse_field(stars, "42") == 42

    def test_malformed_number_should_raise(self) -> None:
        with pytest.raises(FormValidationError) as exc_info:
            parse_field(FormField("week", kind="int"), "three")

        assert exc_info.value.field == "week"

    def test_required_blank_field_should_raise(self) -> None:
        with pytest.raises(FormValidationError):
            parse_field(FormField("title", required=True), "   ")

    @pytest.mark.parametrize("raw,expected", [("on", True), (True, True), (None, False), ("", False)])
    def test_checkbox_values(self, raw, expected) -> None:
        assert parse_field(FormField("active", kind="bool"), raw) is expected


class TestFormBinder:
    """Test suite for FormBinder populate/bind/submit."""

    def test_populate_prefers_target_then_aliases(self) -> None:
        values = FormBinder.populate(
            get_schema("repositories"),
            {"id": "g1", "repo_name": "starter", "topics": ["react", "vite"], "stars": 12},
        )

        assert values["name"] == "starter"
        assert values["tags"] == "react, vite"
        assert values["stars"] == 12
        assert values["description"] == ""
        assert values["active"] is True

    def test_populate_unchecks_only_explicit_false(self) -> None:
        schema = get_schema("recordings")

        assert FormBinder.populate(schema, {"is_active": False})["active"] is False
        assert FormBinder.populate(schema, {})["active"] is True

    def test_bind_writes_canonical_fields(self) -> None:
        data = FormBinder.bind(
            get_schema("recordings"),
            {
                "week": "3",
                "title": " Functions ",
                "sessions": "5, 6",
                "topics": "js, scope",
                "active": "on",
            },
        )

        assert data["week"] == 3
        assert data["title"] == "Functions"
        assert data["session_numbers"] == ["5", "6"]
        assert data["topics"] == ["js", "scope"]
        assert data["is_active"] is True
        assert data["status"] == "published"
        assert "sessions" not in data and "active" not in data

    @pytest.mark.asyncio
    async def test_submit_without_session_creates(self, crud: CollectionCRUD) -> None:
        binder = FormBinder(crud)
        session = EditSession()

        doc_id, created = await binder.submit(
            get_schema("repositories"),
            {"name": "starter", "stars": "7", "tags": "react", "active": "on"},
            session,
        )

        doc = await crud.get_by_id(COLLECTION_GITHUB_REPOS, doc_id)
        assert created is True
        assert doc["repo_name"] == "starter"
        assert doc["stars"] == 7
        assert doc["topics"] == ["react"]
        assert doc["is_active"] is True

    @pytest.mark.asyncio
    async def test_submit_while_editing_updates_and_clears_session(
        self, crud: CollectionCRUD
    ) -> None:
        binder = FormBinder(crud)
        schema = get_schema("recordings")
        doc_id = await crud.create(COLLECTION_RECORDINGS, {"week": 1, "title": "Old"})
        session = EditSession()
        session.begin(schema.form_id, doc_id)

        saved_id, created = await binder.submit(
            schema, {"week": "1", "title": "New", "active": "on"}, session
        )

        assert (saved_id, created) == (doc_id, False)
        assert (await crud.get_by_id(COLLECTION_RECORDINGS, doc_id))["title"] == "New"
        assert not session.is_editing

    @pytest.mark.asyncio
    async def test_session_for_another_form_is_rejected(self, crud: CollectionCRUD) -> None:
        binder = FormBinder(crud)
        session = EditSession()
        session.begin("documentation-form", "doc-1")

        with pytest.raises(FormValidationError):
            await binder.submit(get_schema("recordings"), {"week": "1", "title": "x"}, session)

        assert session.is_editing
        assert await crud.get_all(COLLECTION_RECORDINGS) == []

    @pytest.mark.asyncio
    async def test_failed_submit_keeps_session(self, crud: CollectionCRUD) -> None:
        binder = FormBinder(crud)
        schema = get_schema("recordings")
        session = EditSession()
        session.begin(schema.form_id, "missing")

        with pytest.raises(DocumentNotFoundError):
            await binder.submit(schema, {"week": "1", "title": "x"}, session)

        assert session.is_editing_form(schema.form_id)


class TestEditSession:
    """Test suite for EditSession."""

    def test_new_session_is_not_editing(self) -> None:
        assert not EditSession().is_editing

    def test_begin_and_clear(self) -> None:
        session = EditSession()

        session.begin("recordings-form", "r1")
        assert session.is_editing_form("recordings-form")
        assert not session.is_editing_form("youtube-form")

        session.clear()
        assert (session.form_id, session.record_id) == (None, None)

    def test_sessions_are_independent(self) -> None:
        first, second = EditSession(), EditSession()

        first.begin("recordings-form", "r1")

        assert not second.is_editing
