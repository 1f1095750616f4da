"""Client configuration.

Defaults can be overridden through environment variables or by passing an
explicit ``Settings`` instance to ``WikiaAPI``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import os
import logging

logger = logging.getLogger(__name__)

DEFAULT_HOST = "fandom.com"


def _default_user_agent() -> str:
    from wikia_api import __version__
    return f"wikia-api/{__version__}"


@dataclass
class Settings:
    """Global client settings."""
    # Platform host, per-wiki subdomains are prepended to it
    wikia_host: str = field(default_factory=lambda: os.getenv("WIKIA_HOST", DEFAULT_HOST))

    # Timeout settings
    http_timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("WIKIA_HTTP_TIMEOUT_SECONDS", "30"))
    )

    user_agent: str = field(
        default_factory=lambda: os.getenv("WIKIA_USER_AGENT") or _default_user_agent()
    )


# Global settings instance
settings = Settings()
