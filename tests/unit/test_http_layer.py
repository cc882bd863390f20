# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import asyncio

import httpx
import pytest

from boorutags.config import HttpSettings
from boorutags.http import HttpRequest, HttpResponse, HttpxClient, StubHttpClient, create_default_http_client


def _client_with(handler, settings=None):
    settings = settings or HttpSettings(user_agent="UA/1.0")
    transport = httpx.MockTransport(handler)
    return HttpxClient(settings, client=httpx.AsyncClient(transport=transport))


def test_httpx_client_sends_params_and_user_agent():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["headers"] = request.headers
        return httpx.Response(200, json={"images": []})

    client = _client_with(handler)
    request = HttpRequest(url="https://board.example/api", params={"q": '("a b")', "per_page": "50"})
    resp = asyncio.run(client.request(request))

    assert resp.ok is True
    assert resp.status_code == 200
    assert resp.is_success is True
    assert resp.json() == {"images": []}
    assert seen["url"].params["q"] == '("a b")'
    assert seen["url"].params["per_page"] == "50"
    assert seen["headers"]["User-Agent"] == "UA/1.0"
    assert resp.meta["body_truncated"] is False


def test_httpx_client_reports_error_status_without_raising():
    client = _client_with(lambda request: httpx.Response(502, text="bad gateway"))
    resp = asyncio.run(client.request(HttpRequest(url="https://board.example/api")))
    assert resp.ok is True
    assert resp.status_code == 502
    assert resp.is_success is False
    assert resp.text == "bad gateway"


def test_httpx_client_converts_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("boom", request=request)

    client = _client_with(handler)
    resp = asyncio.run(client.request(HttpRequest(url="https://board.example/api")))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_type == "ConnectTimeout"
    assert resp.error_message == "boom"


def test_httpx_client_truncates_large_bodies():
    settings = HttpSettings(max_body_bytes=4)
    client = _client_with(lambda request: httpx.Response(200, content=b"0123456789"), settings)
    resp = asyncio.run(client.request(HttpRequest(url="https://board.example/api")))
    assert resp.content == b"0123"
    assert resp.meta["body_truncated"] is True


def test_httpx_client_close():
    client = _client_with(lambda request: httpx.Response(204))
    asyncio.run(client.close())
    assert client._client.is_closed is True


def test_stub_http_client_records_requests():
    stub = StubHttpClient()
    stub.add("http://x", HttpResponse(ok=True, status_code=200, text="{}"))
    hit = asyncio.run(stub.request(HttpRequest(url="http://x")))
    miss = asyncio.run(stub.request(HttpRequest(url="http://y")))
    assert hit.ok is True
    assert miss.ok is False
    assert [r.url for r in stub.requests] == ["http://x", "http://y"]


def test_http_response_json_raises_on_garbage():
    with pytest.raises(ValueError):
        HttpResponse(ok=True, status_code=200, text="<html>").json()


def test_create_default_http_client_uses_settings():
    settings = HttpSettings(timeout=3.0, verify_ssl=False)
    client = create_default_http_client(settings)
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings is settings
    finally:
        asyncio.run(client.close())


def _redirecting_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/a":
        return httpx.Response(302, headers={"Location": "https://board.example/b"})
    return httpx.Response(200, json={"images": []})


def test_httpx_client_follows_redirects_per_settings():
    blocked = _client_with(_redirecting_handler, HttpSettings(allow_redirects=False))
    resp = asyncio.run(blocked.request(HttpRequest(url="https://board.example/a")))
    assert resp.status_code == 302

    allowed = _client_with(_redirecting_handler, HttpSettings(allow_redirects=True))
    resp = asyncio.run(allowed.request(HttpRequest(url="https://board.example/a")))
    assert resp.status_code == 200
    assert resp.url == "https://board.example/b"


def test_request_allow_redirects_overrides_settings():
    client = _client_with(_redirecting_handler, HttpSettings(allow_redirects=True))
    resp = asyncio.run(client.request(HttpRequest(url="https://board.example/a", allow_redirects=False)))
    assert resp.status_code == 302
