"""
Wikia API - client for the Wikia/Fandom REST API v1
"""

__version__ = "1.0.0"

__all__ = [
    "WikiaAPI",
    "Settings",
    "WikiaAPIError",
    "ValidationError",
    "CommunityNotFoundError",
    "__version__",
]


def __getattr__(name: str):
    """Lazy import to avoid import-time side effects."""
    if name == "WikiaAPI":
        from .client import WikiaAPI
        return WikiaAPI
    elif name == "Settings":
        from wikia_api.config.settings import Settings
        return Settings
    elif name in ("WikiaAPIError", "ValidationError", "CommunityNotFoundError"):
        from . import exceptions
        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
