"""Core: config and request-scoped tenant context.

Single place for settings.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
