# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for AuthProbe."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .auth import AuthConfig, AuthMethod, Credentials, build_auth_config, parse_mapping_json
from .checks import Check, ValidationCheck
from .probe import AuthTokens, ProbeResult
from .report import CaseResult, SuiteResult, SuiteSummary, ValidationOutcome, ValidationReport
from .testcase import ExpectedResult, TestCase

__all__ = [
    "AuthConfig",
    "AuthMethod",
    "AuthTokens",
    "CaseResult",
    "Check",
    "Credentials",
    "ExpectedResult",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeResult",
    "SuiteResult",
    "SuiteSummary",
    "TestCase",
    "ValidationCheck",
    "ValidationOutcome",
    "ValidationReport",
    "build_auth_config",
    "parse_mapping_json",
]
