"""
Stripchat Source Test - credentials, request shape and response validation
Outbound HTTP is served by httpx.MockTransport
"""

import asyncio

import httpx
import pytest

from config import Settings
from performers.data_sources.stripchat import StripchatSource, STRIPCHAT_API_URL
from performers.errors import ConfigurationError, RemoteAPIError, MalformedResponseError

ENV = Settings(STRIPCHAT_USERID="user-42", STRIPCHAT_BEARER="secret-token")


def make_source(handler, **config):
    config['transport'] = httpx.MockTransport(handler)
    return StripchatSource(config)


def fetch(source, env=ENV):
    return asyncio.run(source.fetch_models(env))


def test_returns_models_unaltered():
    models = [
        {"username": "a", "modelsCountry": " us "},
        {"username": "b", "modelsCountry": "USA"},
        {"username": "c"},
    ]
    source = make_source(lambda request: httpx.Response(200, json={"models": models, "total": 3}))

    assert fetch(source) == models


def test_request_carries_user_id_and_bearer_token():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured['request'] = request
        return httpx.Response(200, json={"models": []})

    fetch(make_source(handler))

    request = captured['request']
    assert request.method == "GET"
    assert str(request.url).startswith(STRIPCHAT_API_URL)
    assert request.url.params["userId"] == "user-42"
    assert request.headers["Authorization"] == "Bearer secret-token"
    assert request.headers["Accept"] == "application/json"


def test_api_url_override():
    captured = {}

    def handler(request):
        captured['url'] = request.url
        return httpx.Response(200, json={"models": []})

    fetch(make_source(handler, api_url="https://example.test/models"))

    assert captured['url'].host == "example.test"
    assert captured['url'].path == "/models"


def test_follows_redirects():
    models = [{"modelsCountry": "US"}]

    def handler(request):
        if request.url.host == "cdn.example.test":
            return httpx.Response(200, json={"models": models})
        return httpx.Response(302, headers={"Location": "https://cdn.example.test/models?userId=user-42"})

    assert fetch(make_source(handler)) == models


def test_missing_user_id():
    calls = []
    source = make_source(lambda r: calls.append(r) or httpx.Response(200, json={"models": []}))

    with pytest.raises(ConfigurationError, match="STRIPCHAT_USERID"):
        fetch(source, env=Settings(STRIPCHAT_BEARER="secret-token"))
    assert calls == []


def test_missing_bearer_token():
    source = make_source(lambda r: httpx.Response(200, json={"models": []}))

    with pytest.raises(ConfigurationError, match="STRIPCHAT_BEARER"):
        fetch(source, env=Settings(STRIPCHAT_USERID="user-42"))


def test_non_success_status_raises_remote_api_error():
    source = make_source(lambda r: httpx.Response(503, text="maintenance window"))

    with pytest.raises(RemoteAPIError) as excinfo:
        fetch(source)

    assert excinfo.value.status_code == 503
    assert excinfo.value.reason == "Service Unavailable"
    assert excinfo.value.body_excerpt == "maintenance window"
    assert "503" in str(excinfo.value)


def test_remote_error_body_is_truncated():
    source = make_source(lambda r: httpx.Response(401, text="x" * 5000))

    with pytest.raises(RemoteAPIError) as excinfo:
        fetch(source)

    assert len(excinfo.value.body_excerpt) == RemoteAPIError.BODY_EXCERPT_LENGTH


@pytest.mark.parametrize("payload", [
    {"items": []},
    {"models": None},
    {"models": {"username": "a"}},
    {"models": "a,b"},
    [{"modelsCountry": "US"}],
])
def test_malformed_structure(payload):
    source = make_source(lambda r: httpx.Response(200, json=payload))

    with pytest.raises(MalformedResponseError):
        fetch(source)


def test_non_json_body():
    source = make_source(lambda r: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(MalformedResponseError):
        fetch(source)


def test_network_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.ConnectError):
        fetch(make_source(handler))


def test_source_metadata():
    source = StripchatSource()
    assert source.source_name == "Stripchat"
    assert source.country_field == "modelsCountry"
    assert source.api_url == STRIPCHAT_API_URL
