# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
AuthProbe package entrypoint.

This package runs authentication test suites against a target URL: it sends one HTTP
probe per test case (form login, bearer token, cookie replay or custom headers),
extracts cookies and tokens from each response, evaluates the case's validation checks
and aggregates a pass/fail summary. HTTP behavior is abstracted behind an injectable
client interface, and domain objects are modeled with typed dataclasses.
"""

from .artifacts import extract_auth_tokens, extract_cookies, format_cookie_header
from .catalog import BASIC_TEST_CASES, generate_basic_test_cases
from .config import HttpSettings, load_http_settings
from .errors import ConfigurationError, ErrorCategory, UnknownCheckError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    AuthConfig,
    AuthMethod,
    AuthTokens,
    Check,
    Credentials,
    ExpectedResult,
    ProbeResult,
    SuiteResult,
    TestCase,
    ValidationCheck,
    ValidationReport,
    build_auth_config,
)
from .runtime import AuthHarness
from .suite import RunState, SuiteRunner
from .validation import evaluate
from .version import __version__

__all__ = [
    "AuthConfig",
    "AuthHarness",
    "AuthMethod",
    "AuthTokens",
    "BASIC_TEST_CASES",
    "Check",
    "ConfigurationError",
    "Credentials",
    "ErrorCategory",
    "ExpectedResult",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpxClient",
    "ProbeResult",
    "RunState",
    "StubHttpClient",
    "SuiteResult",
    "SuiteRunner",
    "TestCase",
    "UnknownCheckError",
    "ValidationCheck",
    "ValidationReport",
    "build_auth_config",
    "create_default_http_client",
    "evaluate",
    "extract_auth_tokens",
    "extract_cookies",
    "format_cookie_header",
    "generate_basic_test_cases",
    "load_http_settings",
    "setup_logging",
    "__version__",
]
