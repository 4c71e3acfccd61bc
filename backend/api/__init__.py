"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import admin_router, catalog_router, health_router

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(admin_router)
api_router.include_router(catalog_router)

__all__ = ["api_router"]
