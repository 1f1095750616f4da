"""Configuration module."""

from .settings import settings, Settings, DEFAULT_HOST

__all__ = [
    "settings",
    "Settings",
    "DEFAULT_HOST",
]
