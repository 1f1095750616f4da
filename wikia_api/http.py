"""HTTP transport for the Wikia API."""

from __future__ import annotations
import json
import logging
from typing import Any, Optional

import httpx

from .config import Settings, settings as default_settings
from .exceptions import CommunityNotFoundError

logger = logging.getLogger(__name__)


def _decode(response: httpx.Response, url: str) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        # Closed or missing wikis answer with an HTML page instead of JSON
        logger.warning(f"Non-JSON response ({response.status_code}) from {url}")
        raise CommunityNotFoundError(url, response.status_code) from None


def send(client: httpx.Client, method: str, url: str) -> Any:
    """Issue one request and return the decoded JSON body.

    Redirects are followed, closed wikis redirect to an HTML page.

    Raises:
        CommunityNotFoundError: body is not JSON on a 2xx or 404 response
        httpx.HTTPStatusError: any other non-2xx status
        httpx.TransportError: network failure
    """
    logger.debug(f"{method} {url}")
    response = client.request(method, url, follow_redirects=True)
    logger.debug(f"{response.status_code} from {url}")

    if not response.is_success:
        if response.status_code == 404 and response.content:
            # A JSON 404 is a real API error, only HTML pages mean the wiki is gone
            try:
                response.json()
            except (json.JSONDecodeError, UnicodeDecodeError):
                raise CommunityNotFoundError(url, response.status_code) from None
        response.raise_for_status()

    return _decode(response, url)


def request_json(
    method: str,
    url: str,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> Any:
    """Make a single HTTP request and return the decoded JSON response.

    Uses ``client`` when given, otherwise a short-lived client built from
    ``settings``. No retries are attempted.
    """
    if client is not None:
        return send(client, method, url)

    cfg = settings or default_settings
    headers = {"User-Agent": cfg.user_agent}
    with httpx.Client(timeout=cfg.http_timeout_seconds, headers=headers, follow_redirects=True) as owned:
        return send(owned, method, url)
