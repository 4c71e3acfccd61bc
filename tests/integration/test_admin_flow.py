"""
End-to-end admin dashboard flow over the in-memory store.

Drives the HTTP and WebSocket API with the real services and CRUD, only
swapping the document store for the in-memory backend.

System role: Verification of the assembled admin/catalog stack
"""

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from backend.api.deps.dependencies import get_document_store
from backend.api.main import create_app
from backend.boundary.db.collections import COLLECTION_RECORDINGS
from backend.boundary.db.memory_store import MemoryDocumentStore


@pytest.fixture
def store() -> MemoryDocumentStore:
    return MemoryDocumentStore()


@pytest.fixture
def client(store: MemoryDocumentStore) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_document_store] = lambda: store
    return TestClient(app)


def _create_recording(client: TestClient, week: int, title: str) -> str:
    response = client.post(
        "/api/v1/admin/recordings",
        json={"week": str(week), "month": "1", "title": title, "active": "on"},
    )
    assert response.status_code == 201
    return response.json()["id"]


class TestAdminFlow:
    """Create, edit, toggle and soft delete through the API."""

    def test_created_records_are_listed_in_week_order(self, client: TestClient) -> None:
        _create_recording(client, 2, "CSS")
        _create_recording(client, 1, "HTML")

        table = client.get("/api/v1/admin/recordings").json()

        assert [row["cells"]["title"] for row in table["rows"]] == ["HTML", "CSS"]
        assert table["empty_message"] is None

    def test_empty_section_has_empty_message(self, client: TestClient) -> None:
        table = client.get("/api/v1/admin/youtube").json()

        assert table["total"] == 0
        assert table["empty_message"].startswith("No YouTube channels found")

    def test_edit_round_trip(self, client: TestClient) -> None:
        record_id = _create_recording(client, 1, "HTML")

        form = client.get(f"/api/v1/admin/recordings/{record_id}/form").json()
        assert form["values"]["title"] == "HTML"

        response = client.put(
            f"/api/v1/admin/recordings/{record_id}",
            json={**form["values"], "title": "HTML & Forms", "active": "on"},
        )
        assert response.status_code == 200

        table = client.get("/api/v1/admin/recordings").json()
        assert table["total"] == 1
        assert table["rows"][0]["cells"]["title"] == "HTML & Forms"

    def test_soft_delete_keeps_record_inactive(
        self, client: TestClient, store: MemoryDocumentStore
    ) -> None:
        record_id = _create_recording(client, 1, "HTML")

        assert client.delete(f"/api/v1/admin/recordings/{record_id}").status_code == 204
        assert client.delete(f"/api/v1/admin/recordings/{record_id}").status_code == 204

        table = client.get("/api/v1/admin/recordings").json()
        assert table["rows"][0]["status"] == "Inactive"
        assert client.get("/api/v1/catalog/recordings").json() == []

    def test_soft_delete_missing_record_is_404(self, client: TestClient) -> None:
        assert client.delete("/api/v1/admin/recordings/missing").status_code == 404

    def test_toggle_reactivates(self, client: TestClient) -> None:
        record_id = _create_recording(client, 1, "HTML")
        client.delete(f"/api/v1/admin/recordings/{record_id}")

        assert client.post(f"/api/v1/admin/recordings/{record_id}/toggle").status_code == 204

        assert client.get("/api/v1/admin/recordings").json()["rows"][0]["status"] == "Active"

    def test_search_and_stats(self, client: TestClient) -> None:
        _create_recording(client, 1, "Intro to JavaScript")
        _create_recording(client, 2, "CSS Grid")

        hits = client.get("/api/v1/admin/search", params={"q": "javascript"}).json()
        stats = client.get("/api/v1/admin/stats").json()

        assert len(hits) == 1
        assert hits[0]["collection"] == COLLECTION_RECORDINGS
        assert stats["collections"]["RECORDINGS"]["total"] == 2
        assert stats["total"] == 2

    def test_missing_required_field_is_400(self, client: TestClient) -> None:
        response = client.post("/api/v1/admin/recordings", json={"title": "No week"})

        assert response.status_code == 400


class TestLiveSection:
    """WebSocket pushes of re-rendered section tables."""

    def test_live_view_pushes_snapshots(
        self, client: TestClient, store: MemoryDocumentStore
    ) -> None:
        with client.websocket_connect("/api/v1/admin/recordings/live") as websocket:
            initial = websocket.receive_json()
            assert initial["event"] == "snapshot"
            assert initial["data"]["total"] == 0

            _create_recording(client, 1, "HTML")

            update = websocket.receive_json()
            assert update["data"]["rows"][0]["cells"]["title"] == "HTML"

            websocket.send_text("ping")
            assert websocket.receive_json() == {"event": "pong"}

        assert store.listener_count(COLLECTION_RECORDINGS) == 0

    def test_live_view_of_unknown_section_is_refused(self, client: TestClient) -> None:
        with pytest.raises(WebSocketDisconnect):
            with client.websocket_connect("/api/v1/admin/podcasts/live") as websocket:
                websocket.receive_json()
