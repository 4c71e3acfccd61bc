"""
Admin router package.

Exports the router for admin dashboard endpoints.
"""

from .admin_router import router

__all__ = ["router"]
