"""Response shapes returned by the Wikia API v1.

The shapes are advisory: endpoint methods return the decoded JSON as is,
``load_response`` is available to callers that want typed access.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any, Literal, Type


class _Shape(BaseModel):
    # The API adds fields over time, keep whatever it sends
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ArticleRevision(_Shape):
    id: Optional[int] = None
    user: Optional[str] = None
    user_id: Optional[int] = None
    timestamp: Optional[str] = None


class ArticleDetailsItem(_Shape):
    id: Optional[int] = None
    title: Optional[str] = None
    ns: Optional[int] = None
    url: Optional[str] = None
    revision: Optional[ArticleRevision] = None
    type: Optional[str] = None
    abstract: Optional[str] = None
    thumbnail: Optional[str] = None


class ArticleDetailsResponse(_Shape):
    items: Dict[str, ArticleDetailsItem] = Field(default_factory=dict)
    basepath: Optional[str] = None


class ArticleItem(_Shape):
    id: Optional[int] = None
    title: Optional[str] = None
    url: Optional[str] = None
    ns: Optional[int] = None


class ArticleListResponse(_Shape):
    items: List[ArticleItem] = Field(default_factory=list)
    basepath: Optional[str] = None
    offset: Optional[str] = None


class TopArticlesResponse(_Shape):
    items: List[ArticleItem] = Field(default_factory=list)
    basepath: Optional[str] = None


class AppleTouchIcon(_Shape):
    url: Optional[str] = None
    size: Optional[str] = None


class HtmlTitle(_Shape):
    separator: Optional[str] = None
    parts: List[str] = Field(default_factory=list)


class WikiLanguage(_Shape):
    content: Optional[str] = None
    content_dir: Optional[Literal["ltr", "rtl"]] = Field(default=None, alias="contentDir")


class WikiVariables(_Shape):
    vertical: Optional[str] = None
    apple_touch_icon: Optional[AppleTouchIcon] = Field(default=None, alias="appleTouchIcon")
    article_path: Optional[str] = Field(default=None, alias="articlePath")
    base_path: Optional[str] = Field(default=None, alias="basePath")
    db_name: Optional[str] = Field(default=None, alias="dbName")
    favicon: Optional[str] = None
    id: Optional[int] = None
    is_closed: Optional[bool] = Field(default=None, alias="isClosed")
    html_title: Optional[HtmlTitle] = Field(default=None, alias="htmlTitle")
    language: Optional[WikiLanguage] = None
    script_path: Optional[str] = Field(default=None, alias="scriptPath")
    site_name: Optional[str] = Field(default=None, alias="siteName")
    main_page_title: Optional[str] = Field(default=None, alias="mainPageTitle")


class WikiVariablesResponse(_Shape):
    data: Optional[WikiVariables] = None


class SearchSuggestion(_Shape):
    title: Optional[str] = None


class SearchSuggestionsResponse(_Shape):
    items: List[SearchSuggestion] = Field(default_factory=list)


class UserDetailsItem(_Shape):
    user_id: Optional[int] = None
    title: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    numberofedits: Optional[int] = None
    is_subject_to_ccpa: Optional[bool] = None
    avatar: Optional[str] = None


class UserDetailsResponse(_Shape):
    items: List[UserDetailsItem] = Field(default_factory=list)
    basepath: Optional[str] = None


RESPONSE_MODELS: Dict[str, Type[BaseModel]] = {
    "article_details": ArticleDetailsResponse,
    "article_list": ArticleListResponse,
    "article_list_expanded": ArticleListResponse,
    "top_articles": TopArticlesResponse,
    "top_articles_expanded": TopArticlesResponse,
    "wiki_variables": WikiVariablesResponse,
    "search_suggestions": SearchSuggestionsResponse,
    "user_details": UserDetailsResponse,
}


def load_response(endpoint: str, payload: Any) -> BaseModel:
    """Validate a decoded payload against the model declared for ``endpoint``.

    Only the endpoints listed in ``RESPONSE_MODELS`` have a declared shape,
    the activity, popular, most linked, new, navigation, related pages and
    search list endpoints are returned untyped.

    Raises:
        KeyError: no model is declared for the endpoint
        pydantic.ValidationError: the payload does not fit the shape
    """
    try:
        model = RESPONSE_MODELS[endpoint]
    except KeyError:
        raise KeyError(
            f"No response model for '{endpoint}'. Known: {', '.join(sorted(RESPONSE_MODELS))}"
        ) from None
    return model.model_validate(payload)
