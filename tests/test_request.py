from __future__ import annotations

import asyncio
from typing import Callable, List

import httpx
import pytest

from brave_search.client import BraveSearch
from brave_search.errors import BraveSearchError, ErrorKind
from brave_search.request import WIDENED_RESULT_FILTER, build_headers, format_options, join_ids
from brave_search.types import ResultFilterValue, SafeSearchLevel


API_KEY = "test-key"


def _run(coro):  # noqa: ANN001
    return asyncio.run(coro)


def _client(handler: Callable[[httpx.Request], httpx.Response], **overrides) -> BraveSearch:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return BraveSearch(API_KEY, http_client=http_client, **overrides)


def _recording(responses: List[httpx.Response], seen: List[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        source = responses[min(len(seen), len(responses)) - 1]
        return httpx.Response(source.status_code, headers=source.headers, content=source.content)

    return handler


def test_format_options_drops_none_values() -> None:
    formatted = format_options({"country": "us", "count": None, "goggles_id": None})
    assert formatted == {"country": "us"}


def test_format_options_flattens_primitives() -> None:
    formatted = format_options(
        {
            "spellcheck": False,
            "extra_snippets": True,
            "count": 5,
            "safesearch": SafeSearchLevel.STRICT,
            "result_filter": [ResultFilterValue.WEB, ResultFilterValue.NEWS],
            "custom_flag": "kept",
        }
    )
    assert formatted == {
        "spellcheck": "false",
        "extra_snippets": "true",
        "count": "5",
        "safesearch": "strict",
        "result_filter": "web,news",
        "custom_flag": "kept",
    }


def test_format_options_handles_empty() -> None:
    assert format_options(None) == {}
    assert format_options({}) == {}


def test_join_ids_preserves_order() -> None:
    assert join_ids(["c", "a", "b"]) == "c,a,b"
    assert join_ids(("only",)) == "only"


def test_join_ids_rejects_empty_list() -> None:
    with pytest.raises(ValueError):
        join_ids([])


def test_build_headers() -> None:
    assert build_headers("secret") == {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "X-Subscription-Token": "secret",
    }


def test_web_search_sends_query_headers_and_defined_options_only() -> None:
    seen: List[httpx.Request] = []
    payload = {"type": "search", "query": {"original": "brave"}}
    client = _client(_recording([httpx.Response(200, json=payload)], seen))

    result = _run(client.web_search("brave", {"count": 3, "country": None, "spellcheck": True}))

    assert result == payload
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/res/v1/web/search"
    assert dict(request.url.params) == {"q": "brave", "count": "3", "spellcheck": "true"}
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Accept-Encoding"] == "gzip"
    assert request.headers["X-Subscription-Token"] == API_KEY


def test_custom_base_url_is_used() -> None:
    seen: List[httpx.Request] = []
    client = _client(
        _recording([httpx.Response(200, json={"type": "search"})], seen),
        base_url="https://proxy.example.com/brave/",
    )

    _run(client.web_search("x"))

    assert str(seen[0].url).startswith("https://proxy.example.com/brave/web/search?")


def test_empty_query_is_rejected_before_any_request() -> None:
    seen: List[httpx.Request] = []
    client = _client(_recording([httpx.Response(200, json={})], seen))

    with pytest.raises(ValueError):
        _run(client.web_search("   "))
    assert seen == []


def test_unprocessable_web_search_retries_once_with_widened_filter() -> None:
    seen: List[httpx.Request] = []
    payload = {"type": "search", "web": {"type": "search", "results": [], "family_friendly": True}}
    client = _client(
        _recording(
            [httpx.Response(422, json={"message": "bad filter"}), httpx.Response(200, json=payload)],
            seen,
        )
    )

    result = _run(client.web_search("news today", {"result_filter": "news"}))

    assert result == payload
    assert len(seen) == 2
    assert seen[0].url.params["result_filter"] == "news"
    assert seen[1].url.params["result_filter"] == WIDENED_RESULT_FILTER
    assert seen[1].url.params["q"] == "news today"
    assert WIDENED_RESULT_FILTER == "discussions,faq,news,query,summarizer,videos,web,infobox"


def test_second_unprocessable_answer_is_final() -> None:
    seen: List[httpx.Request] = []
    client = _client(
        _recording(
            [
                httpx.Response(422, json={"message": "first"}),
                httpx.Response(422, json={"message": "second"}),
                httpx.Response(200, json={"type": "search"}),
            ],
            seen,
        )
    )

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    assert len(seen) == 2
    assert excinfo.value.kind is ErrorKind.UNPROCESSABLE
    assert excinfo.value.status_code == 422
    assert "second" in excinfo.value.message


def test_failed_retry_surfaces_the_retry_error() -> None:
    seen: List[httpx.Request] = []
    client = _client(
        _recording(
            [httpx.Response(422, json={"message": "narrow"}), httpx.Response(429, json={"message": "slow down"})],
            seen,
        )
    )

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    assert len(seen) == 2
    assert excinfo.value.kind is ErrorKind.RATE_LIMIT


def test_unprocessable_retry_can_be_disabled() -> None:
    seen: List[httpx.Request] = []
    client = _client(
        _recording([httpx.Response(422, json={"message": "nope"}), httpx.Response(200, json={})], seen),
        retry_unprocessable=False,
    )

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    assert len(seen) == 1
    assert excinfo.value.kind is ErrorKind.UNPROCESSABLE


def test_unprocessable_is_not_retried_outside_web_search() -> None:
    seen: List[httpx.Request] = []
    client = _client(_recording([httpx.Response(422, json={"message": "nope"}), httpx.Response(200, json={})], seen))

    with pytest.raises(BraveSearchError):
        _run(client.local_poi_search(["id-1"]))

    assert len(seen) == 1


def test_other_statuses_are_not_retried() -> None:
    seen: List[httpx.Request] = []
    client = _client(_recording([httpx.Response(500, json={"message": "boom"}), httpx.Response(200, json={})], seen))

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    assert len(seen) == 1
    assert excinfo.value.kind is ErrorKind.API
    assert excinfo.value.message == "API error (500): boom"


def test_rate_limit_error_keeps_response_body() -> None:
    body = {
        "type": "ErrorResponse",
        "error": {"status": 429, "code": "RATE_LIMITED", "detail": "Request rate limit has been exceeded."},
    }
    client = _client(lambda request: httpx.Response(429, json=body))

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.news_search("q"))

    error = excinfo.value
    assert "Rate limit exceeded" in str(error)
    assert error.kind is ErrorKind.RATE_LIMIT
    assert error.status_code == 429
    assert error.response_data == body
    assert "Request rate limit has been exceeded." in error.message


def test_authentication_error() -> None:
    client = _client(lambda request: httpx.Response(401, json={"message": "invalid token"}))

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.image_search("cats"))

    assert excinfo.value.kind is ErrorKind.AUTHENTICATION
    assert excinfo.value.message == "Authentication error: invalid token"


def test_error_without_json_body_falls_back_to_reason_phrase() -> None:
    client = _client(lambda request: httpx.Response(503, text="upstream down"))

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    assert excinfo.value.message == "API error (503): Service Unavailable"
    assert excinfo.value.response_data == "upstream down"


def test_transport_failure_is_wrapped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    client = _client(handler)

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    error = excinfo.value
    assert error.kind is ErrorKind.TRANSPORT
    assert "name resolution failed" in error.message
    assert error.status_code is None
    assert error.response_data is None
    assert isinstance(error.__cause__, httpx.ConnectError)


def test_invalid_json_body_is_an_api_error() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>not json</html>"))

    with pytest.raises(BraveSearchError) as excinfo:
        _run(client.web_search("q"))

    assert excinfo.value.kind is ErrorKind.API
    assert excinfo.value.response_data == "<html>not json</html>"
