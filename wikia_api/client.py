"""Client object wrapping a single wiki's Wikia API v1."""

from __future__ import annotations
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from .config import Settings, settings as default_settings
from .endpoints import get_endpoint
from .exceptions import ConfigurationError
from .http import request_json
from .params import build_query, validate_and_encode

logger = logging.getLogger(__name__)

Options = Optional[Mapping[str, Any]]


def _merge(request: Options, options: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(request or {})
    merged.update(options)
    return merged


class WikiaAPI:
    """
    Wikia API v1 client for one wiki.

    ``subdomain`` and ``language`` may be reassigned after construction,
    every call builds its URL from their values at that moment. The client
    does not synchronize access to them.

    Args:
        subdomain: Subdomain, for example "dev" for "dev.fandom.com"
        language: Optional language code, for example "pl" for
            "leagueoflegends.fandom.com/pl"
        http_client: Optional httpx client used for every request
        settings: Optional settings overriding the module defaults
    """

    def __init__(
        self,
        subdomain: str,
        language: Optional[str] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
    ):
        self.subdomain = subdomain
        self.language = language or None
        self.http_client = http_client
        self.settings = settings or default_settings

    def __repr__(self) -> str:
        return f"WikiaAPI(subdomain={self.subdomain!r}, language={self.language!r})"

    @property
    def subdomain(self) -> str:
        return self._subdomain

    @subdomain.setter
    def subdomain(self, value: str) -> None:
        if not value or not isinstance(value, str):
            raise ConfigurationError("Argument 'subdomain' is required")
        self._subdomain = value

    @property
    def api_basepath(self) -> str:
        """Basepath for the current subdomain and language, e.g. "https://dev.fandom.com/api/v1/"."""
        language = f"{self.language}/" if self.language else ""
        return f"https://{self.subdomain}.{self.settings.wikia_host}/{language}api/v1/"

    def build_url(self, endpoint: str, options: Options = None) -> str:
        """
        Validate options for an endpoint and return the full request URL.

        Raises:
            ValidationError: options are invalid, no request is made
        """
        spec = get_endpoint(endpoint)
        pairs = validate_and_encode(options, spec.fields)
        if spec.check is not None:
            spec.check(pairs)
        pairs.extend(spec.fixed)
        return f"{self.api_basepath}{spec.path}?{build_query(pairs)}"

    def call(self, endpoint: str, options: Options = None) -> Any:
        """Call an endpoint by name and return the decoded JSON response."""
        method = get_endpoint(endpoint).method
        url = self.build_url(endpoint, options)
        return request_json(method, url, client=self.http_client, settings=self.settings)

    def get_article_details(self, request: Options = None, **options) -> Any:
        """
        Get details about one or more articles.

        Accepts ``ids`` (number or list), ``titles`` (string or list),
        ``abstract``, ``width`` and ``height``. At least one of ``ids`` and
        ``titles`` is required, both may be passed together.
        """
        return self.call("article_details", _merge(request, options))

    def get_article_list(self, request: Options = None, **options) -> Any:
        """Get article list in alphabetical order."""
        return self.call("article_list", _merge(request, options))

    def get_article_list_expanded(self, request: Options = None, **options) -> Any:
        """Get article list with extended details for each article."""
        return self.call("article_list_expanded", _merge(request, options))

    def get_top_articles(self, request: Options = None, **options) -> Any:
        """Get the most viewed articles from this wiki."""
        return self.call("top_articles", _merge(request, options))

    def get_top_articles_expanded(self, request: Options = None, **options) -> Any:
        """Get the most viewed articles with extended details."""
        return self.call("top_articles_expanded", _merge(request, options))

    def get_wiki_variables(self) -> Any:
        """Get wiki data, including key values, navigation data and more."""
        return self.call("wiki_variables")

    def get_search_suggestions(self, query: str) -> Any:
        """Find suggested phrases for chosen query."""
        return self.call("search_suggestions", {"query": query})

    def get_user_details(self, request: Options = None, **options) -> Any:
        """Get details about selected users, ``ids`` is required."""
        return self.call("user_details", _merge(request, options))

    def get_latest_activity(self, request: Options = None, **options) -> Any:
        """Get latest activity information."""
        return self.call("latest_activity", _merge(request, options))

    def get_recently_changed_articles(self, request: Options = None, **options) -> Any:
        """Get recently changed articles."""
        return self.call("recently_changed_articles", _merge(request, options))

    def get_article_as_simple_json(self, id: int) -> Any:
        """Get simplified article contents."""
        return self.call("article_as_simple_json", {"id": id})

    def get_most_linked(self, request: Options = None, **options) -> Any:
        """Get the most linked articles."""
        return self.call("most_linked", _merge(request, options))

    def get_most_linked_expanded(self, request: Options = None, **options) -> Any:
        """Get the most linked articles with extended details."""
        return self.call("most_linked_expanded", _merge(request, options))

    def get_new_articles(self, request: Options = None, **options) -> Any:
        """Get recently created articles."""
        return self.call("new_articles", _merge(request, options))

    def get_popular_articles(self, request: Options = None, **options) -> Any:
        """Get popular articles."""
        return self.call("popular_articles", _merge(request, options))

    def get_popular_articles_expanded(self, request: Options = None, **options) -> Any:
        """Get popular articles with extended details."""
        return self.call("popular_articles_expanded", _merge(request, options))

    def get_navigation_data(self) -> Any:
        """Get the wiki navigation menu."""
        return self.call("navigation_data")

    def get_related_pages(self, request: Options = None, **options) -> Any:
        """Get pages related to the articles in ``ids``."""
        return self.call("related_pages", _merge(request, options))

    def get_search_list(self, query: str, request: Options = None, **options) -> Any:
        """Search the wiki for articles matching ``query``."""
        merged = _merge(request, options)
        merged["query"] = query
        return self.call("search_list", merged)
