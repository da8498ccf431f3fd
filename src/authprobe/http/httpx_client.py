# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
from http.cookiejar import CookieJar, DefaultCookiePolicy

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception, error_category_to_reason
from ..utils.context import get_probe_context
from .client import HttpClient
from .headers import normalize_headers
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """
    Synchronous httpx client wrapper.

    The client-level cookie jar rejects every cookie, so no state leaks between probes.
    Within one probe, cookies set while following redirects are sent on to later hops
    and every hop's ``Set-Cookie`` values are reported on the final response.
    """

    def __init__(
        self,
        settings: HttpSettings | None = None,
        client: httpx.Client | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            cookies=CookieJar(policy=DefaultCookiePolicy(allowed_domains=())),
            transport=transport,
        )

    def _resolve_timeout(self, request: HttpRequest) -> float:
        if request.timeout is not None:
            return request.timeout
        context_timeout = get_probe_context().timeout
        return context_timeout if context_timeout is not None else self.settings.timeout

    @staticmethod
    def _carry_cookies(next_request: httpx.Request, jar: httpx.Cookies, caller_cookie: str, origin_host: str) -> None:
        """Attach cookies set by earlier hops, plus the caller's own cookies on the original host."""
        jar.set_cookie_header(next_request)
        received = next_request.headers.get("Cookie", "")
        replayed = caller_cookie if next_request.url.host == origin_host else ""
        combined = "; ".join(part for part in (replayed, received) if part)
        if combined:
            next_request.headers["Cookie"] = combined

    def _send(self, request: HttpRequest, follow_redirects: bool) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        outgoing = self._client.build_request(
            request.method,
            request.url,
            headers=headers,
            content=request.body,
            timeout=self._resolve_timeout(request),
        )
        origin_host = outgoing.url.host
        caller_cookie = outgoing.headers.get("Cookie", "")

        # Per-probe jar; the client jar stays empty.
        jar = httpx.Cookies()
        set_cookies: list[str] = []
        hops = 0
        while True:
            resp = self._client.send(outgoing, stream=True, follow_redirects=False)
            try:
                set_cookies.extend(resp.headers.get_list("set-cookie"))
                next_request = resp.next_request if follow_redirects else None
                if next_request is None:
                    headers_out = normalize_headers(resp.headers)
                    if set_cookies:
                        headers_out["set-cookie"] = ", ".join(set_cookies)
                    return HttpResponse(
                        ok=True,
                        status_code=resp.status_code,
                        reason=resp.reason_phrase or "",
                        headers=headers_out,
                        url=str(resp.url),
                        redirected=hops > 0,
                        meta={"redirect_count": hops},
                    )
                jar.extract_cookies(resp)
            finally:
                resp.close()

            hops += 1
            if hops > self._client.max_redirects:
                raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=next_request)
            self._carry_cookies(next_request, jar, caller_cookie, origin_host)
            logger.debug("Following redirect %d to %s", hops, next_request.url)
            outgoing = next_request

    def request(self, request: HttpRequest) -> HttpResponse:
        follow_redirects = request.allow_redirects and self.settings.allow_redirects
        try:
            return self._send(request, follow_redirects)
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug("%s %s failed (%s): %s", request.method, request.url, category.value, exc)
            return HttpResponse(
                ok=False,
                error_message=str(exc) or error_category_to_reason(category),
                error_type=category.value,
            )

    def close(self) -> None:
        self._client.close()
