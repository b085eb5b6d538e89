"""Core: config and composition root.

Single place for settings and service wiring.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
