# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level AuthProbe facade for suite runs and ad-hoc probes."""

from __future__ import annotations

import logging
import threading
from contextlib import suppress

from .artifacts import format_cookie_header
from .config import HttpSettings, load_http_settings
from .http import HttpClient, create_default_http_client, merge_headers, validate_target_url
from .models import AuthConfig, AuthMethod, Credentials, ProbeResult, SuiteResult, TestCase
from .probes import (
    CookieReplayProbe,
    CustomHeaderProbe,
    probe_logout,
    probe_protected_endpoint,
    probe_session_timeout,
    select_executor,
)
from .probes.session import DEFAULT_SESSION_TIMEOUT_SECONDS
from .suite import UNSUPPORTED_METHOD_MESSAGE, SuiteRunner
from .utils.context import probe_context

logger = logging.getLogger(__name__)


class AuthHarness:
    """
    One authentication test harness, constructed per invocation.

    Holds the HTTP client plus a cache of the last ProbeResult seen for each test case id.
    The cache is written only by the thread that drives a run.
    """

    def __init__(self, http_client: HttpClient | None = None, settings: HttpSettings | None = None):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self._results: dict[str, ProbeResult] = {}

    def run_suite(
        self,
        url: str,
        *,
        test_cases: list[TestCase] | None = None,
        max_workers: int | None = None,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SuiteResult:
        runner = SuiteRunner(
            self.http_client,
            max_workers=max_workers if max_workers is not None else self.http_settings.max_workers,
            cancel_event=cancel_event,
            result_cache=self._results,
        )
        with probe_context(timeout=timeout):
            return runner.run(url, test_cases)

    def probe(self, url: str, auth_config: AuthConfig, *, timeout: float | None = None) -> ProbeResult:
        """
        Run one ad-hoc probe outside the catalog.

        The config is validated first, so a ConfigurationError is raised before any
        request is made. ``none`` sends the supplied headers and cookies together,
        anonymously; ``interactive`` cannot be automated.
        """
        target = validate_target_url(url)
        auth_config.validate()
        credentials = auth_config.credentials

        executor = select_executor(auth_config.method)
        if executor is None and auth_config.method is AuthMethod.NONE:
            executor = CustomHeaderProbe()
            if credentials and credentials.cookies:
                headers = merge_headers(credentials.headers, {"Cookie": format_cookie_header(credentials.cookies)})
                credentials = Credentials(headers=headers)
        if executor is None:
            return ProbeResult.failure(UNSUPPORTED_METHOD_MESSAGE)

        logger.debug("Ad-hoc %s probe against %s", executor.name, target)
        with probe_context(timeout=timeout):
            return executor.run(self.http_client, target, credentials)

    def probe_cookies(self, url: str, cookies: dict[str, str]) -> ProbeResult:
        return CookieReplayProbe().run(self.http_client, validate_target_url(url), Credentials(cookies=dict(cookies)))

    def probe_headers(self, url: str, headers: dict[str, str]) -> ProbeResult:
        return CustomHeaderProbe().run(self.http_client, validate_target_url(url), Credentials(headers=dict(headers)))

    def probe_protected_endpoint(self, base_url: str, auth_result: ProbeResult) -> ProbeResult:
        return probe_protected_endpoint(self.http_client, validate_target_url(base_url), auth_result)

    def probe_logout(self, base_url: str, auth_result: ProbeResult) -> ProbeResult:
        return probe_logout(self.http_client, validate_target_url(base_url), auth_result)

    def probe_session_timeout(
        self,
        base_url: str,
        auth_result: ProbeResult,
        timeout_seconds: float = DEFAULT_SESSION_TIMEOUT_SECONDS,
        *,
        cancel_event: threading.Event | None = None,
    ) -> ProbeResult:
        return probe_session_timeout(
            self.http_client,
            validate_target_url(base_url),
            auth_result,
            timeout_seconds,
            cancel_event=cancel_event,
        )

    def get_test_result(self, test_id: str) -> ProbeResult | None:
        return self._results.get(test_id)

    def clear_results(self) -> None:
        self._results.clear()

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> AuthHarness:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
