"""
Configuration management module.

Type-safe settings for the catalog service. STORE_* variables select and
configure the document store; LOG_LEVEL and ENVIRONMENT apply everywhere.
"""

from backend.configs.settings import Settings, get_settings
from backend.configs.store import StoreSettings

__all__ = ["Settings", "StoreSettings", "get_settings"]
