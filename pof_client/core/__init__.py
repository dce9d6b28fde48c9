"""Core: config and shared constants.

Single place for settings and backend route constants.
"""

from pof_client.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
