"""Tests for the WikiaAPI client."""

import json

import httpx
import pytest

from wikia_api import WikiaAPI
from wikia_api.config import Settings
from wikia_api.exceptions import (
    BadArgumentTypeError,
    CommunityNotFoundError,
    ConfigurationError,
    MissingGeneratorError,
    MissingParameterError,
    UnexpectedParameterError,
)


class Recorder:
    """Transport double recording every request it receives."""

    def __init__(self, status_code=200, body=None, content=None):
        self.requests = []
        self.status_code = status_code
        self.body = {"items": []} if body is None else body
        self.content = content

    def __call__(self, request):
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)


def make_client(recorder, subdomain="dev", language=None):
    http_client = httpx.Client(transport=httpx.MockTransport(recorder))
    return WikiaAPI(subdomain, language, http_client=http_client)


class TestIdentity:
    """Test subdomain, language and basepath handling."""

    def test_returns_subdomain(self):
        assert WikiaAPI("dev").subdomain == "dev"

    def test_basepath_without_language(self):
        assert WikiaAPI("dev").api_basepath == "https://dev.fandom.com/api/v1/"

    def test_basepath_with_language(self):
        wikia = WikiaAPI("leagueoflegends", "pl")
        assert wikia.api_basepath == "https://leagueoflegends.fandom.com/pl/api/v1/"

    def test_empty_language_ignored(self):
        assert WikiaAPI("dev", "").language is None

    def test_subdomain_required(self):
        with pytest.raises(ConfigurationError):
            WikiaAPI("")
        with pytest.raises(ConfigurationError):
            WikiaAPI(None)

    def test_can_change_subdomain(self):
        """Reassigning identity changes the basepath immediately."""
        wikia = WikiaAPI("dev")
        wikia.subdomain = "community"
        wikia.language = "de"
        assert wikia.subdomain == "community"
        assert wikia.api_basepath == "https://community.fandom.com/de/api/v1/"

    def test_cannot_clear_subdomain(self):
        wikia = WikiaAPI("dev")
        with pytest.raises(ConfigurationError):
            wikia.subdomain = ""
        assert wikia.subdomain == "dev"

    def test_cannot_set_basepath(self):
        wikia = WikiaAPI("dev")
        with pytest.raises(AttributeError):
            wikia.api_basepath = "https://example.com/"

    def test_custom_host(self):
        wikia = WikiaAPI("dev", settings=Settings(wikia_host="wikia.org"))
        assert wikia.api_basepath == "https://dev.wikia.org/api/v1/"


class TestBuildUrl:
    """Test URL assembly per endpoint."""

    def test_article_list_defaults(self):
        url = WikiaAPI("dev").build_url("article_list")
        assert url == "https://dev.fandom.com/api/v1/Articles/List?namespaces=0&limit=25&offset=!"

    def test_top_articles_defaults_drop_null(self):
        """Null namespaces and empty category never appear in the query."""
        url = WikiaAPI("dev").build_url("top_articles")
        assert url == "https://dev.fandom.com/api/v1/Articles/Top?limit=10"

    def test_expanded_variant(self):
        url = WikiaAPI("dev").build_url("top_articles_expanded", {"namespaces": [0, 14]})
        assert url.endswith("Articles/Top?namespaces=0%2C14&limit=10&expand=1")

    def test_article_details_both_generators(self):
        """ids and titles are sent together, neither overrides the other."""
        url = WikiaAPI("dev").build_url("article_details", {"ids": [1, 2], "titles": "Foo|Bar"})
        assert url.endswith("Articles/Details?ids=1%2C2&titles=Foo|Bar&abstract=100")

    def test_no_parameters(self):
        url = WikiaAPI("dev").build_url("wiki_variables")
        assert url == "https://dev.fandom.com/api/v1/Mercury/WikiVariables?"

    def test_unknown_endpoint(self):
        with pytest.raises(KeyError):
            WikiaAPI("dev").build_url("nope")


class TestValidationBeforeNetwork:
    """Validation failures must not reach the transport."""

    def test_article_details_needs_generator(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(MissingGeneratorError):
            wikia.get_article_details()
        assert recorder.requests == []

    def test_article_details_empty_generators(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(MissingGeneratorError):
            wikia.get_article_details(ids=[], titles="")
        assert recorder.requests == []

    def test_unexpected_parameter(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(UnexpectedParameterError):
            wikia.get_article_list(limt=5)
        assert recorder.requests == []

    def test_bad_type(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(BadArgumentTypeError):
            wikia.get_user_details(ids="1")
        assert recorder.requests == []

    def test_search_suggestions_requires_query(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(MissingParameterError):
            wikia.get_search_suggestions(None)
        assert recorder.requests == []

    def test_empty_query_is_missing(self):
        """An empty query would be dropped, so it counts as missing."""
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(MissingParameterError) as exc:
            wikia.get_search_suggestions("")
        assert exc.value.name == "query"
        assert recorder.requests == []

    def test_empty_user_ids_is_missing(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(MissingParameterError) as exc:
            wikia.get_user_details(ids=[])
        assert exc.value.name == "ids"
        assert recorder.requests == []

    def test_empty_related_page_ids_is_missing(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        with pytest.raises(MissingParameterError):
            wikia.get_related_pages(ids=())
        assert recorder.requests == []


class TestEndpointCalls:
    """Test requests issued through a mock transport."""

    def test_returns_decoded_body_unchanged(self):
        body = {"items": {"12649": {"id": 12649, "title": "Lua"}}, "basepath": "https://dev.fandom.com"}
        recorder = Recorder(body=body)
        data = make_client(recorder).get_article_details(ids=12649)
        assert data == body
        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/v1/Articles/Details"
        assert request.url.params["ids"] == "12649"
        assert request.url.params["abstract"] == "100"

    def test_request_mapping_and_keywords_merge(self):
        recorder = Recorder()
        make_client(recorder).get_article_list({"limit": 5, "category": "Lua"}, limit=7)
        params = recorder.requests[0].url.params
        assert params["limit"] == "7"
        assert params["category"] == "Lua"

    def test_language_in_path(self):
        recorder = Recorder()
        make_client(recorder, "leagueoflegends", "pl").get_wiki_variables()
        url = recorder.requests[0].url
        assert url.host == "leagueoflegends.fandom.com"
        assert url.path == "/pl/api/v1/Mercury/WikiVariables"

    def test_subdomain_change_applies_to_next_call(self):
        recorder = Recorder()
        wikia = make_client(recorder)
        wikia.get_navigation_data()
        wikia.subdomain = "community"
        wikia.get_navigation_data()
        assert [r.url.host for r in recorder.requests] == ["dev.fandom.com", "community.fandom.com"]

    def test_search_suggestions(self):
        recorder = Recorder(body={"items": [{"title": "Lua"}]})
        data = make_client(recorder).get_search_suggestions("lu a")
        assert data["items"][0]["title"] == "Lua"
        assert recorder.requests[0].url.params["query"] == "lu a"

    def test_search_list(self):
        recorder = Recorder()
        make_client(recorder).get_search_list("js", limit=5)
        params = recorder.requests[0].url.params
        assert recorder.requests[0].url.path == "/api/v1/Search/List"
        assert params["query"] == "js"
        assert params["limit"] == "5"
        assert params["type"] == "articles"

    def test_user_details(self):
        recorder = Recorder()
        make_client(recorder).get_user_details(ids=[1, 2], size=50)
        params = recorder.requests[0].url.params
        assert params["ids"] == "1,2"
        assert params["size"] == "50"

    def test_article_as_simple_json(self):
        recorder = Recorder(body={"sections": []})
        assert make_client(recorder).get_article_as_simple_json(12649) == {"sections": []}
        assert recorder.requests[0].url.params["id"] == "12649"

    @pytest.mark.parametrize("method, path", [
        ("get_latest_activity", "/api/v1/Activity/LatestActivity"),
        ("get_recently_changed_articles", "/api/v1/Activity/RecentlyChangedArticles"),
        ("get_article_list_expanded", "/api/v1/Articles/List"),
        ("get_top_articles", "/api/v1/Articles/Top"),
        ("get_most_linked", "/api/v1/Articles/MostLinked"),
        ("get_most_linked_expanded", "/api/v1/Articles/MostLinked"),
        ("get_new_articles", "/api/v1/Articles/New"),
        ("get_popular_articles", "/api/v1/Articles/Popular"),
        ("get_popular_articles_expanded", "/api/v1/Articles/Popular"),
        ("get_navigation_data", "/api/v1/Navigation/Data"),
    ])
    def test_optional_only_endpoints(self, method, path):
        """Endpoints without required fields work with no arguments."""
        recorder = Recorder()
        getattr(make_client(recorder), method)()
        assert recorder.requests[0].url.path == path

    def test_related_pages(self):
        recorder = Recorder()
        make_client(recorder).get_related_pages(ids=5)
        params = recorder.requests[0].url.params
        assert params["ids"] == "5"
        assert params["limit"] == "3"


class TestResponseErrors:
    """Test mapping of transport responses to errors."""

    def test_html_body_is_community_not_found(self):
        """Non-existent wikis serve an HTML page with a 200 status."""
        recorder = Recorder(content=b"<html><body>Not a valid community</body></html>")
        with pytest.raises(CommunityNotFoundError) as exc:
            make_client(recorder, "doesnotexist").get_wiki_variables()
        assert exc.value.status_code == 200
        assert "doesnotexist" in exc.value.url

    def test_not_raw_decode_error(self):
        recorder = Recorder(content=b"not json")
        with pytest.raises(CommunityNotFoundError) as exc:
            make_client(recorder).get_top_articles()
        assert exc.value.__cause__ is None
        assert not issubclass(CommunityNotFoundError, json.JSONDecodeError)

    def test_html_404_is_community_not_found(self):
        recorder = Recorder(status_code=404, content=b"<html>404</html>")
        with pytest.raises(CommunityNotFoundError) as exc:
            make_client(recorder).get_wiki_variables()
        assert exc.value.status_code == 404

    def test_json_404_propagates_status_error(self):
        recorder = Recorder(status_code=404, body={"exception": {"message": "Not found", "code": 404}})
        with pytest.raises(httpx.HTTPStatusError) as exc:
            make_client(recorder).get_article_as_simple_json(1)
        assert exc.value.response.status_code == 404

    def test_server_error_propagates(self):
        recorder = Recorder(status_code=503, content=b"")
        with pytest.raises(httpx.HTTPStatusError):
            make_client(recorder).get_top_articles()

    def test_network_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("boom", request=request)

        wikia = WikiaAPI("dev", http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        with pytest.raises(httpx.ConnectError):
            wikia.get_wiki_variables()

    def test_redirect_to_html_is_community_not_found(self):
        """Closed wikis redirect to an HTML page on the community wiki."""
        def handler(request):
            if request.url.host == "nosuchwiki.fandom.com":
                return httpx.Response(
                    302, headers={"Location": "https://community.fandom.com/wiki/Special:NotAValidWiki"}
                )
            return httpx.Response(200, content=b"<html>Not a valid community</html>")

        wikia = WikiaAPI("nosuchwiki", http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        with pytest.raises(CommunityNotFoundError) as exc:
            wikia.get_wiki_variables()
        assert exc.value.status_code == 200
