"""
Public catalog API endpoints.

Routes:
- GET /catalog/recordings/month/{month} - Active recordings of a month
- GET /catalog/documentation/category/{category} - Active docs of a category
- GET /catalog/extensions/essential - Active essential extensions
- GET /catalog/{section} - Active records of a section

Dependencies: backend.application.services
System role: Landing page HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Path

from backend.api.deps.dependencies import get_catalog_service
from backend.api.routers.admin.admin_error_handling import handle_admin_errors
from backend.application.services import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/recordings/month/{month}", response_model=list[dict[str, Any]])
@handle_admin_errors
async def recordings_by_month(
    month: int = Path(..., ge=1, description="Course month"),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """Active recordings of one course month, ordered by week."""
    return await catalog_service.recordings_by_month(month)


@router.get("/documentation/category/{category}", response_model=list[dict[str, Any]])
@handle_admin_errors
async def documentation_by_category(
    category: str,
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """Active documentation resources of one category, ordered by title."""
    return await catalog_service.documentation_by_category(category)


@router.get("/extensions/essential", response_model=list[dict[str, Any]])
@handle_admin_errors
async def essential_extensions(
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    return await catalog_service.essential_extensions()


@router.get("/{section}", response_model=list[dict[str, Any]])
@handle_admin_errors
async def list_section(
    section: str,
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> list[dict[str, Any]]:
    """
    Active records of a section in the section's list order.

    Raises:
        HTTPException(404): Unknown section
        HTTPException(502): Store unreachable
    """
    documents = await catalog_service.list_active(section)
    logger.info("Catalog section served", extra={"section": section, "count": len(documents)})
    return documents
