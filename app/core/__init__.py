"""Core app configuration, database and security."""

from app.core.config import Settings, get_settings, settings
from app.core.database import Database, StoreError

__all__ = ["Database", "Settings", "StoreError", "get_settings", "settings"]
