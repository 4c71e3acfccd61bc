"""
Catalog router package.

Exports the router for public landing page reads.
"""

from .catalog_router import router

__all__ = ["router"]
