# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe executor base class and shared response handling."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

import httpx

from ..artifacts import extract_auth_tokens, extract_cookies
from ..errors import categorize_exception, error_category_to_reason
from ..http import HttpClient, HttpRequest, HttpResponse, normalize_headers
from ..models import AuthMethod, Credentials, ProbeResult

logger = logging.getLogger(__name__)

BROWSER_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
JSON_ACCEPT = "application/json"


def _elapsed_ms(start: float) -> int:
    return max(0, int(round((time.monotonic() - start) * 1000)))


def _status_text(response: HttpResponse) -> str:
    if response.reason:
        return response.reason
    return httpx.codes.get_reason_phrase(response.status_code or 0)


def build_probe_result(response: HttpResponse, response_time_ms: int) -> ProbeResult:
    """Convert a normalized HttpResponse into a ProbeResult."""
    if not response.ok or response.status_code is None:
        return ProbeResult.failure(
            response.error_message or error_category_to_reason(None) or "Unknown error",
            response_time_ms=response_time_ms,
            error_type=response.error_type,
        )

    status = response.status_code
    headers = normalize_headers(response.headers)
    cookies = extract_cookies(headers.get("set-cookie", ""))
    success = 200 <= status < 300
    return ProbeResult(
        success=success,
        status_code=status,
        response_time_ms=response_time_ms,
        headers=headers,
        cookies=cookies,
        redirect_url=response.url if response.redirected else None,
        error_message=None if success else f"HTTP {status}: {_status_text(response)}",
        auth_tokens=extract_auth_tokens(headers, cookies),
    )


def execute_probe(client: HttpClient, request: HttpRequest) -> ProbeResult:
    """
    Send one request and time it.

    Transport failures come back as ``status_code=0`` results; nothing raised by the
    client escapes.
    """
    start = time.monotonic()
    try:
        response = client.request(request)
    except Exception as exc:  # noqa: BLE001
        category = categorize_exception(exc)
        response = HttpResponse(
            ok=False,
            error_message=str(exc) or error_category_to_reason(category),
            error_type=category.value,
        )
    elapsed = _elapsed_ms(start)
    result = build_probe_result(response, elapsed)
    logger.debug(
        "%s %s -> status=%s success=%s in %dms",
        request.method,
        request.url,
        result.status_code,
        result.success,
        elapsed,
    )
    return result


class ProbeExecutor(ABC):
    """One authentication strategy: builds its request, then runs the shared exchange."""

    name: str = "base"
    method: AuthMethod | None = None

    @abstractmethod
    def build_request(self, target_url: str, credentials: Credentials | None) -> HttpRequest: ...

    def run(self, client: HttpClient, target_url: str, credentials: Credentials | None = None) -> ProbeResult:
        return execute_probe(client, self.build_request(target_url, credentials))

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"{self.__class__.__name__}(name={self.name!r})"


__all__ = ["BROWSER_ACCEPT", "JSON_ACCEPT", "ProbeExecutor", "build_probe_result", "execute_probe"]
