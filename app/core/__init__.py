"""Core: config and application bootstrap.

Single place for settings. Lifespan and exception handlers are imported
from their modules by app.main to keep this package free of import cycles.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
