# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Evaluate probe results against a test case's validation checks."""

from __future__ import annotations

from collections.abc import Callable

from ..http.headers import has_header, header_value
from ..models import Check, ProbeResult, TestCase, ValidationCheck, ValidationOutcome, ValidationReport

MANUAL_DETAILS = "Manual verification required"

SESSION_COOKIE_MARKERS = ("session", "auth", "token")
NO_SESSION_COOKIE_MARKERS = ("session", "auth")

CheckRule = Callable[[ProbeResult], tuple[bool, str]]


def _status_in(*codes: int) -> CheckRule:
    def rule(result: ProbeResult) -> tuple[bool, str]:
        return result.status_code in codes, f"Actual status: {result.status_code}"

    return rule


def _has_cookie_like(result: ProbeResult, markers: tuple[str, ...]) -> bool:
    return any(marker in name.lower() for name in result.cookies for marker in markers)


def _session_cookie_set(result: ProbeResult) -> tuple[bool, str]:
    return _has_cookie_like(result, SESSION_COOKIE_MARKERS), f"Cookies found: {', '.join(result.cookies)}"


def _no_session_cookie(result: ProbeResult) -> tuple[bool, str]:
    names = ", ".join(result.cookies) or "None"
    return not _has_cookie_like(result, NO_SESSION_COOKIE_MARKERS), f"Cookies: {names}"


def _authorization_accepted(result: ProbeResult) -> tuple[bool, str]:
    return result.success and result.status_code == 200, f"Request successful: {str(result.success).lower()}"


def _www_authenticate_present(result: ProbeResult) -> tuple[bool, str]:
    present = has_header(result.headers, "www-authenticate")
    value = header_value(result.headers, "www-authenticate") if present else ""
    return present, f"WWW-Authenticate: {value or 'Not present'}"


RULES: dict[Check, CheckRule] = {
    Check.STATUS_200_OR_302: _status_in(200, 302),
    Check.STATUS_200: _status_in(200),
    Check.STATUS_401_OR_403: _status_in(401, 403),
    Check.STATUS_401: _status_in(401),
    Check.STATUS_400_OR_422: _status_in(400, 422),
    Check.SESSION_COOKIE_SET: _session_cookie_set,
    Check.AUTHORIZATION_ACCEPTED: _authorization_accepted,
    Check.WWW_AUTHENTICATE_PRESENT: _www_authenticate_present,
    Check.NO_SESSION_COOKIE: _no_session_cookie,
}


def evaluate_check(result: ProbeResult, check: ValidationCheck) -> ValidationOutcome:
    if check.check is None:
        return ValidationOutcome(check=check.name, passed=True, details=MANUAL_DETAILS)
    passed, details = RULES[check.check](result)
    return ValidationOutcome(check=check.name, passed=passed, details=details)


def evaluate(result: ProbeResult, test_case: TestCase) -> ValidationReport:
    """
    Run every check of ``test_case`` against ``result``.

    The report passes only if each check passed and the probe's success matches the
    case's expected result.
    """
    outcomes = tuple(evaluate_check(result, check) for check in test_case.validation_checks)
    all_passed = all(outcome.passed for outcome in outcomes)
    return ValidationReport(
        passed=all_passed and test_case.expects_success == result.success,
        validation_results=outcomes,
    )


__all__ = ["MANUAL_DETAILS", "RULES", "evaluate", "evaluate_check"]
