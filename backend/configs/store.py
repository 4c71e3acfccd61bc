"""
Document store configuration settings.

Selects the document store backend and carries the hosted database
credentials. The in-memory backend needs no credentials and is meant for
local development and tests.

Dependencies: pydantic, pydantic_settings
System role: Document store connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class StoreSettings(BaseSettings):
    """Document store configuration (memory for dev, Firestore for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="memory",
        description="Store backend: 'memory' for local dev, 'firestore' for production",
    )
    project_id: str | None = Field(
        default=None,
        description="Google Cloud project hosting the Firestore database",
    )
    database: str = Field(
        default="(default)",
        description="Firestore database id",
    )
    credentials_path: str | None = Field(
        default=None,
        description="Path to a service account JSON file (falls back to ADC)",
    )
    emulator_host: str | None = Field(
        default=None,
        description="host:port of a Firestore emulator, if used",
    )
