"""Utility modules for the content quality analyzer."""

from .config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
