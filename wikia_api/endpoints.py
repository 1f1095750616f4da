"""Declarative table of the Wikia API v1 endpoints."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from .exceptions import MissingGeneratorError
from .params import (
    NUMBER,
    STRING,
    ArrayOrScalar,
    EncodedQuery,
    FieldSpec,
    Nullable,
    Scalar,
    field,
)

Check = Callable[[EncodedQuery], None]


@dataclass(frozen=True)
class Endpoint:
    """One remote resource: its path, parameters and optional cross-field check."""
    name: str
    path: str
    fields: Tuple[FieldSpec, ...] = ()
    method: str = "GET"
    fixed: Tuple[Tuple[str, str], ...] = ()
    check: Optional[Check] = None


def require_one_of(*generators: str) -> Check:
    """Build a check failing when none of ``generators`` made it into the query."""
    def check(pairs: EncodedQuery) -> None:
        present = {key for key, _ in pairs}
        if not present.intersection(generators):
            raise MissingGeneratorError(generators)
    return check


NUM = Scalar(NUMBER)
STR = Scalar(STRING)
NUMS = ArrayOrScalar(NUMBER)
STRS = ArrayOrScalar(STRING)

EXPAND = (("expand", "1"),)

_ARTICLE_LIST_FIELDS = (
    field("category", STR, ""),
    field("namespaces", NUMS, 0),
    field("limit", NUM, 25),
    field("offset", STR, "!"),
)

_TOP_ARTICLES_FIELDS = (
    field("namespaces", Nullable(NUMS), None),
    field("category", STR, ""),
    field("limit", NUM, 10),
)

_ACTIVITY_FIELDS = (
    field("limit", NUM, 10),
    field("namespaces", NUMS, 0),
    field("allowDuplicates", STR, "true"),
)

_POPULAR_FIELDS = (
    field("limit", NUM, 10),
    field("baseArticleId", Nullable(NUM), None),
)

_MOST_LINKED_FIELDS = (
    field("nsOnly", Nullable(NUM), None),
)

_ENDPOINTS = (
    Endpoint(
        "article_details",
        "Articles/Details",
        (
            field("ids", Nullable(NUMS), None),
            field("titles", Nullable(STRS), None),
            field("abstract", NUM, 100),
            field("width", Nullable(NUM), None),
            field("height", Nullable(NUM), None),
        ),
        check=require_one_of("ids", "titles"),
    ),
    Endpoint("article_list", "Articles/List", _ARTICLE_LIST_FIELDS),
    Endpoint("article_list_expanded", "Articles/List", _ARTICLE_LIST_FIELDS, fixed=EXPAND),
    Endpoint("top_articles", "Articles/Top", _TOP_ARTICLES_FIELDS),
    Endpoint("top_articles_expanded", "Articles/Top", _TOP_ARTICLES_FIELDS, fixed=EXPAND),
    Endpoint("wiki_variables", "Mercury/WikiVariables"),
    Endpoint(
        "search_suggestions",
        "SearchSuggestions/List",
        (field("query", STR, required=True),),
    ),
    Endpoint(
        "user_details",
        "User/Details",
        (
            field("ids", NUMS, required=True),
            field("size", NUM, 100),
        ),
    ),
    Endpoint("latest_activity", "Activity/LatestActivity", _ACTIVITY_FIELDS),
    Endpoint("recently_changed_articles", "Activity/RecentlyChangedArticles", _ACTIVITY_FIELDS),
    Endpoint(
        "article_as_simple_json",
        "Articles/AsSimpleJson",
        (field("id", NUM, required=True),),
    ),
    Endpoint("most_linked", "Articles/MostLinked", _MOST_LINKED_FIELDS),
    Endpoint("most_linked_expanded", "Articles/MostLinked", _MOST_LINKED_FIELDS, fixed=EXPAND),
    Endpoint(
        "new_articles",
        "Articles/New",
        (
            field("namespaces", Nullable(NUMS), None),
            field("limit", NUM, 20),
            field("minArticleQuality", NUM, 10),
        ),
    ),
    Endpoint("popular_articles", "Articles/Popular", _POPULAR_FIELDS),
    Endpoint("popular_articles_expanded", "Articles/Popular", _POPULAR_FIELDS, fixed=EXPAND),
    Endpoint("navigation_data", "Navigation/Data"),
    Endpoint(
        "related_pages",
        "RelatedPages/List",
        (
            field("ids", NUMS, required=True),
            field("limit", NUM, 3),
        ),
    ),
    Endpoint(
        "search_list",
        "Search/List",
        (
            field("query", STR, required=True),
            field("type", STR, "articles"),
            field("rank", STR, "default"),
            field("limit", NUM, 25),
            field("minArticleQuality", NUM, 10),
            field("batch", NUM, 1),
            field("namespaces", NUMS, 0),
        ),
    ),
)

ENDPOINTS: Dict[str, Endpoint] = {endpoint.name: endpoint for endpoint in _ENDPOINTS}


def get_endpoint(name: str) -> Endpoint:
    """Look up an endpoint by name."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown endpoint '{name}'. Known: {', '.join(sorted(ENDPOINTS))}") from None
