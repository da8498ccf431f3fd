# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse

ResponseFactory = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """Deterministic, programmable HttpClient for tests and offline runs."""

    def __init__(self, responses: dict[tuple[str, str] | str, HttpResponse | ResponseFactory] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, response: HttpResponse | ResponseFactory, *, method: str | None = None) -> None:
        """Register a response for ``url``, optionally only for one HTTP method."""
        key: tuple[str, str] | str = (method.upper(), url) if method else url
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        for key in ((request.method.upper(), request.url), request.url):
            if key in self._responses:
                entry = self._responses[key]
                return entry(request) if callable(entry) else entry
        return HttpResponse(
            ok=False,
            status_code=None,
            error_message="No stubbed response configured",
            error_type="CONNECTION_ERROR",
        )

    def close(self) -> None:
        self.closed = True
