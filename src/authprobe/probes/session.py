# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Follow-up probes that replay artifacts captured by an earlier authentication probe."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from ..artifacts import format_cookie_header
from ..http import HttpClient, HttpRequest, join_path
from ..models import Credentials, ProbeResult
from .base import ProbeExecutor
from .custom_header import CustomHeaderProbe

logger = logging.getLogger(__name__)

PROTECTED_PATH = "/api/protected"
LOGOUT_PATH = "/logout"
DEFAULT_SESSION_TIMEOUT_SECONDS = 30.0


def build_replay_headers(auth_result: ProbeResult) -> dict[str, str]:
    """Headers that present the artifacts of ``auth_result`` back to the server."""
    headers: dict[str, str] = {}
    tokens = auth_result.auth_tokens
    if tokens is not None and tokens.jwt_token:
        headers["Authorization"] = f"Bearer {tokens.jwt_token}"
    if tokens is not None and tokens.csrf_token:
        headers["X-CSRF-Token"] = tokens.csrf_token
    cookie_header = format_cookie_header(auth_result.cookies)
    if cookie_header:
        headers["Cookie"] = cookie_header
    return headers


class LogoutProbe(ProbeExecutor):
    """POST ``{target}/logout`` carrying the session cookies."""

    name = "logout"

    def build_request(self, target_url: str, credentials: Credentials | None) -> HttpRequest:
        cookies = credentials.cookies if credentials else {}
        return HttpRequest(
            url=join_path(target_url, LOGOUT_PATH),
            method="POST",
            headers={
                "Cookie": format_cookie_header(cookies),
                "Accept": "text/html,application/xhtml+xml",
            },
        )


def probe_protected_endpoint(client: HttpClient, base_url: str, auth_result: ProbeResult) -> ProbeResult:
    """Request ``{base}/api/protected`` as the session established by ``auth_result``."""
    credentials = Credentials(headers=build_replay_headers(auth_result))
    return CustomHeaderProbe().run(client, join_path(base_url, PROTECTED_PATH), credentials)


def probe_logout(client: HttpClient, base_url: str, auth_result: ProbeResult) -> ProbeResult:
    return LogoutProbe().run(client, base_url, Credentials(cookies=dict(auth_result.cookies)))


def probe_session_timeout(
    client: HttpClient,
    base_url: str,
    auth_result: ProbeResult,
    timeout_seconds: float = DEFAULT_SESSION_TIMEOUT_SECONDS,
    *,
    sleep: Callable[[float], None] | None = None,
    cancel_event: threading.Event | None = None,
) -> ProbeResult:
    """
    Wait ``timeout_seconds`` then retry the protected endpoint with the old session.

    With a ``cancel_event`` the wait ends early when the event is set, and the probe is
    not sent.
    """
    logger.info("Waiting %.1fs before re-checking session at %s", timeout_seconds, base_url)
    if cancel_event is not None:
        if cancel_event.wait(max(0.0, timeout_seconds)):
            return ProbeResult.failure("Session timeout probe cancelled")
    else:
        (sleep or time.sleep)(max(0.0, timeout_seconds))
    return probe_protected_endpoint(client, base_url, auth_result)


__all__ = [
    "DEFAULT_SESSION_TIMEOUT_SECONDS",
    "LOGOUT_PATH",
    "LogoutProbe",
    "PROTECTED_PATH",
    "build_replay_headers",
    "probe_logout",
    "probe_protected_endpoint",
    "probe_session_timeout",
]
