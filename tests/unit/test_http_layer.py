# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import httpx
import pytest

from authprobe.config import HttpSettings
from authprobe.errors import ConfigurationError
from authprobe.http import (
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
    has_header,
    header_value,
    join_path,
    merge_headers,
    normalize_headers,
    validate_target_url,
)
from authprobe.models import Credentials
from authprobe.probes import FormLoginProbe
from authprobe.utils.context import probe_context


def _client(handler, **settings) -> HttpxClient:
    return HttpxClient(HttpSettings(user_agent="UA/1.0", **settings), transport=httpx.MockTransport(handler))


def test_httpx_client_normalizes_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        seen["body"] = request.content
        return httpx.Response(
            401,
            headers=[
                ("WWW-Authenticate", "Bearer"),
                ("Set-Cookie", "a=1; Path=/"),
                ("Set-Cookie", "b=2"),
            ],
        )

    resp = _client(handler).request(
        HttpRequest(url="http://app.test/api", method="POST", headers={"X-Test": "1"}, body="payload")
    )
    assert resp.ok is True
    assert resp.status_code == 401
    assert resp.reason == "Unauthorized"
    assert resp.headers["www-authenticate"] == "Bearer"
    assert resp.headers["set-cookie"] == "a=1; Path=/, b=2"
    assert resp.redirected is False
    assert seen["headers"]["user-agent"] == "UA/1.0"
    assert seen["headers"]["x-test"] == "1"
    assert seen["body"] == b"payload"


def test_httpx_client_reports_followed_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/login":
            return httpx.Response(302, headers={"Location": "/home"})
        return httpx.Response(200)

    resp = _client(handler).request(HttpRequest(url="http://app.test/login", method="POST", body="x"))
    assert resp.status_code == 200
    assert resp.redirected is True
    assert resp.url == "http://app.test/home"
    assert resp.meta["redirect_count"] == 1


def test_login_redirect_keeps_session_cookie_across_hops():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, request.headers.get("cookie")))
        if request.url.path == "/login":
            return httpx.Response(302, headers={"Location": "/dashboard", "Set-Cookie": "session=s1; Path=/"})
        if request.url.path == "/dashboard" and "session=s1" in (request.headers.get("cookie") or ""):
            return httpx.Response(200, headers={"Set-Cookie": "csrftoken=c1; Path=/"})
        return httpx.Response(302, headers={"Location": "/login-page"})

    result = FormLoginProbe().run(_client(handler), "http://target.test", Credentials(username="u", password="p"))

    assert seen == [("POST", "/login", None), ("GET", "/dashboard", "session=s1")]
    assert result.status_code == 200
    assert result.cookies == {"session": "s1", "csrftoken": "c1"}
    assert result.redirect_url == "http://target.test/dashboard"
    assert result.auth_tokens.session_token == "s1"


def test_redirect_replays_caller_cookie_only_on_original_host():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen[request.url.host] = request.headers.get("cookie")
        if request.url.path == "/start":
            return httpx.Response(302, headers={"Location": "/next", "Set-Cookie": "step=1"})
        if request.url.path == "/next":
            return httpx.Response(302, headers={"Location": "http://other.test/end"})
        return httpx.Response(200)

    resp = _client(handler).request(HttpRequest(url="http://app.test/start", headers={"Cookie": "mine=1"}))

    assert resp.meta["redirect_count"] == 2
    assert seen == {"app.test": "mine=1; step=1", "other.test": None}
    assert resp.headers["set-cookie"] == "step=1"


def test_redirect_loop_is_a_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(302, headers={"Location": "/again"})

    resp = _client(handler).request(HttpRequest(url="http://app.test/again"))
    assert resp.ok is False
    assert resp.status_code is None


def test_httpx_client_can_disable_redirects():
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(302, headers={"Location": "/home"})

    resp = _client(handler, allow_redirects=False).request(HttpRequest(url="http://app.test/login"))
    assert resp.status_code == 302
    assert resp.redirected is False


def test_httpx_client_does_not_persist_cookies():
    cookies_sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        cookies_sent.append(request.headers.get("cookie"))
        return httpx.Response(200, headers={"Set-Cookie": "session=abc; Path=/"})

    client = _client(handler)
    client.request(HttpRequest(url="http://app.test/"))
    client.request(HttpRequest(url="http://app.test/", headers={"Cookie": "mine=1"}))
    client.request(HttpRequest(url="http://app.test/"))
    assert cookies_sent == [None, "mine=1", None]


def test_httpx_client_timeout_resolution():
    timeouts = []

    def handler(request: httpx.Request) -> httpx.Response:
        timeouts.append(request.extensions["timeout"]["read"])
        return httpx.Response(204)

    client = _client(handler, timeout=9.0)
    client.request(HttpRequest(url="http://app.test/"))
    with probe_context(timeout=2.0):
        client.request(HttpRequest(url="http://app.test/"))
        client.request(HttpRequest(url="http://app.test/", timeout=0.5))
    assert timeouts == [9.0, 2.0, 0.5]


@pytest.mark.parametrize(
    ("exc", "category"),
    [
        (httpx.ConnectError("Connection refused"), "CONNECTION_ERROR"),
        (httpx.ReadTimeout("timed out"), "TIMEOUT"),
    ],
)
def test_httpx_client_converts_transport_errors(exc, category):
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        raise exc

    resp = _client(handler).request(HttpRequest(url="http://app.test/"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_message == str(exc)
    assert resp.error_type == category


def test_httpx_client_close():
    client = _client(lambda request: httpx.Response(200))  # noqa: ARG005
    client.close()
    assert client._client.is_closed


def test_stub_client_method_specific_entries():
    stub = StubHttpClient()
    stub.add("http://x/login", HttpResponse(ok=True, status_code=200), method="post")
    stub.add("http://x/login", lambda request: HttpResponse(ok=True, status_code=405, url=request.url))
    assert stub.request(HttpRequest(url="http://x/login", method="POST")).status_code == 200
    assert stub.request(HttpRequest(url="http://x/login", method="GET")).status_code == 405
    assert stub.request(HttpRequest(url="http://x/other")).ok is False
    assert len(stub.requests) == 3


def test_header_helpers():
    headers = {"Content-Type": "text/html", "X-Empty": None}
    assert normalize_headers(headers) == {"content-type": "text/html", "x-empty": ""}
    assert normalize_headers(None) == {}
    assert normalize_headers([("A", "1")]) == {"a": "1"}
    assert header_value(headers, "content-type") == "text/html"
    assert header_value(headers, "missing", default="-") == "-"
    assert has_header(headers, "CONTENT-TYPE") is True
    assert has_header({}, "content-type") is False


def test_merge_headers_overrides_case_insensitively():
    merged = merge_headers({"Accept": "application/json", "X-A": "1"}, {"ACCEPT": "text/plain"})
    assert merged == {"X-A": "1", "ACCEPT": "text/plain"}
    assert merge_headers({"Accept": "a"}, None) == {"Accept": "a"}


@pytest.mark.parametrize(
    ("base", "expected"),
    [
        ("http://host", "http://host/login"),
        ("http://host/", "http://host/login"),
        ("http://host/app/", "http://host/app/login"),
        ("http://host/app?x=1", "http://host/app/login"),
    ],
)
def test_join_path(base, expected):
    assert join_path(base, "/login") == expected


def test_validate_target_url():
    assert validate_target_url("  https://example.test/app ") == "https://example.test/app"
    for bad in ("", None, "example.test", "mailto:someone@example.test", "http://"):
        with pytest.raises(ConfigurationError):
            validate_target_url(bad)


def test_create_default_http_client_uses_given_settings():
    settings = HttpSettings(timeout=3.0, user_agent="UA/2.0")
    client = create_default_http_client(settings)
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings is settings
    finally:
        client.close()
