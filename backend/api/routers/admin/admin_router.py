"""
Admin dashboard API endpoints.

Routes:
- GET /admin/stats - Per-collection statistics
- GET /admin/search - Search one section or every collection
- GET /admin/{section} - Rendered section table
- GET /admin/{section}/{record_id}/form - Edit form prefill
- POST /admin/{section} - Create a record from a form payload
- PUT /admin/{section}/{record_id} - Update a record from a form payload
- POST /admin/{section}/{record_id}/toggle - Flip the active flag
- DELETE /admin/{section}/{record_id} - Soft delete a record
- WS /admin/{section}/live - Push the rendered table on every change

Dependencies: backend.application.services, backend.models
System role: Admin dashboard HTTP API
"""

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, WebSocket, WebSocketDisconnect, status

from backend.api.deps.dependencies import get_admin_service
from backend.application.services import AdminService
from backend.boundary.db.collections import ALL_COLLECTIONS
from backend.core.admin import EditSession, get_schema
from backend.core.exceptions import UnknownCollectionError
from backend.models.admin import (
    DashboardStats,
    FormValues,
    RenderedTable,
    SearchHit,
    SubmitResponse,
)

from .admin_error_handling import handle_admin_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=DashboardStats)
@handle_admin_errors
async def get_stats(
    admin_service: AdminService = Depends(get_admin_service),
) -> DashboardStats:
    """
    Dashboard counters for every collection.

    Raises:
        HTTPException(502): Store unreachable
    """
    return await admin_service.dashboard_stats()


@router.get("/search", response_model=list[SearchHit])
@handle_admin_errors
async def search(
    q: str = Query(..., min_length=1, description="Search term"),
    section: str = Query(ALL_COLLECTIONS, description="Section key or 'all'"),
    admin_service: AdminService = Depends(get_admin_service),
) -> list[SearchHit]:
    """
    Case-insensitive substring search over titles, names, descriptions and tags.

    Args:
        q: Search term
        section: Section key, or "all" for every collection
        admin_service: Injected AdminService

    Returns:
        list[SearchHit]: Hits tagged with their collection

    Raises:
        HTTPException(404): Unknown section
    """
    logger.info("Searching catalog", extra={"term": q, "section": section})
    return await admin_service.search(q, section)


@router.get("/{section}", response_model=RenderedTable)
@handle_admin_errors
async def list_section(
    section: str,
    search: str | None = Query(None, description="Filter rendered rows by text"),
    admin_service: AdminService = Depends(get_admin_service),
) -> RenderedTable:
    """
    Rendered table for a dashboard section.

    Raises:
        HTTPException(404): Unknown section
        HTTPException(502): Store unreachable
    """
    return await admin_service.list_section(section, search)


@router.get("/{section}/{record_id}/form", response_model=FormValues)
@handle_admin_errors
async def get_form(
    section: str,
    record_id: str,
    admin_service: AdminService = Depends(get_admin_service),
) -> FormValues:
    """
    Prefill values for editing a record.

    Raises:
        HTTPException(404): Unknown section or missing record
    """
    return await admin_service.get_form(section, record_id)


@router.post("/{section}", response_model=SubmitResponse, status_code=201)
@handle_admin_errors
async def create_record(
    section: str,
    form_data: dict[str, Any] = Body(...),
    admin_service: AdminService = Depends(get_admin_service),
) -> SubmitResponse:
    """
    Create a record from a form payload keyed by form input name.

    Raises:
        HTTPException(400): Invalid payload
        HTTPException(404): Unknown section
    """
    doc_id, created = await admin_service.submit_form(section, form_data, EditSession())
    logger.info("Record created", extra={"section": section, "document_id": doc_id})
    return SubmitResponse(id=doc_id, created=created)


@router.put("/{section}/{record_id}", response_model=SubmitResponse)
@handle_admin_errors
async def update_record(
    section: str,
    record_id: str,
    form_data: dict[str, Any] = Body(...),
    admin_service: AdminService = Depends(get_admin_service),
) -> SubmitResponse:
    """
    Update a record from a form payload.

    Raises:
        HTTPException(400): Invalid payload
        HTTPException(404): Unknown section or missing record
    """
    session = EditSession()
    session.begin(get_schema(section).form_id, record_id)
    doc_id, created = await admin_service.submit_form(section, form_data, session)
    return SubmitResponse(id=doc_id, created=created)


@router.post("/{section}/{record_id}/toggle", status_code=204)
@handle_admin_errors
async def toggle_record(
    section: str,
    record_id: str,
    admin_service: AdminService = Depends(get_admin_service),
) -> Response:
    """Flip a record's active flag. A missing record is left alone."""
    await admin_service.toggle_active(section, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{section}/{record_id}", status_code=204)
@handle_admin_errors
async def delete_record(
    section: str,
    record_id: str,
    admin_service: AdminService = Depends(get_admin_service),
) -> Response:
    """
    Soft delete a record: it stays stored with is_active false.

    Raises:
        HTTPException(404): Unknown section or missing record
    """
    await admin_service.soft_delete(section, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def _stop_forwarder(forwarder: asyncio.Task, section: str) -> None:
    """Cancel the snapshot forwarder and collect how it ended."""
    forwarder.cancel()
    try:
        await forwarder
    except asyncio.CancelledError:
        pass
    except Exception as e:
        logger.warning(
            "Live view stopped forwarding snapshots",
            extra={"section": section, "error": str(e)},
        )


@router.websocket("/{section}/live")
async def watch_section(
    websocket: WebSocket,
    section: str,
    admin_service: AdminService = Depends(get_admin_service),
) -> None:
    """
    Stream the section's rendered table whenever the collection changes.

    Server sends:
        {"event": "snapshot", "data": <RenderedTable>}
        {"event": "pong"}

    Client sends:
        "ping"

    Args:
        websocket: WebSocket connection
        section: Section key from path
        admin_service: Injected AdminService
    """
    try:
        get_schema(section)
    except UnknownCollectionError as e:
        logger.warning("Live view refused, unknown section", extra={"key": e.key})
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    loop = asyncio.get_running_loop()
    tables: asyncio.Queue[RenderedTable] = asyncio.Queue()

    # Store snapshots may arrive on a library thread
    subscription = admin_service.watch_section(
        section, lambda table: loop.call_soon_threadsafe(tables.put_nowait, table)
    )

    async def forward() -> None:
        while True:
            table = await tables.get()
            await websocket.send_json({"event": "snapshot", "data": table.model_dump()})

    forwarder = asyncio.create_task(forward())
    logger.info("Live view opened", extra={"section": section})
    try:
        while True:
            message = await websocket.receive_text()
            if message == "ping":
                await websocket.send_json({"event": "pong"})
    except WebSocketDisconnect:
        logger.info("Live view closed", extra={"section": section})
    finally:
        subscription.unsubscribe()
        await _stop_forwarder(forwarder, section)
