# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The fixed catalog of basic authentication test cases."""

from __future__ import annotations

from .models import AuthConfig, AuthMethod, Check, Credentials, ExpectedResult, TestCase, ValidationCheck

manual = ValidationCheck.manual

BASIC_TEST_CASES: tuple[TestCase, ...] = (
    TestCase(
        id="valid-login",
        name="Valid Username/Password Login",
        description="Test successful login with correct credentials",
        auth_config=AuthConfig(
            method=AuthMethod.LOGIN,
            credentials=Credentials(username="testuser@example.com", password="validPassword123"),
        ),
        expected_result=ExpectedResult.SUCCESS,
        validation_checks=(
            Check.STATUS_200_OR_302,
            Check.SESSION_COOKIE_SET,
            manual("Redirect to authenticated area"),
            manual("No error messages in response"),
        ),
    ),
    TestCase(
        id="invalid-credentials",
        name="Invalid Credentials",
        description="Test login failure with incorrect credentials",
        auth_config=AuthConfig(
            method=AuthMethod.LOGIN,
            credentials=Credentials(username="testuser@example.com", password="wrongPassword"),
        ),
        expected_result=ExpectedResult.FAILURE,
        validation_checks=(
            Check.STATUS_401_OR_403,
            manual("Error message is displayed"),
            Check.NO_SESSION_COOKIE,
            manual("Remains on login page"),
        ),
    ),
    TestCase(
        id="empty-credentials",
        name="Empty Credentials",
        description="Test validation with empty username/password",
        auth_config=AuthConfig(
            method=AuthMethod.LOGIN,
            credentials=Credentials(username="", password=""),
        ),
        expected_result=ExpectedResult.FAILURE,
        validation_checks=(
            Check.STATUS_400_OR_422,
            manual("Validation error messages shown"),
            manual("Form validation prevents submission"),
            manual("Required field indicators present"),
        ),
    ),
    TestCase(
        id="token-auth-valid",
        name="Valid Token Authentication",
        description="Test API access with valid Bearer token",
        auth_config=AuthConfig(
            method=AuthMethod.TOKEN,
            credentials=Credentials(token="Bearer eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.validtoken"),
        ),
        expected_result=ExpectedResult.SUCCESS,
        validation_checks=(
            Check.STATUS_200,
            Check.AUTHORIZATION_ACCEPTED,
            manual("Protected content accessible"),
            manual("Valid JSON response"),
        ),
    ),
    TestCase(
        id="token-auth-invalid",
        name="Invalid Token Authentication",
        description="Test API access with invalid/expired token",
        auth_config=AuthConfig(
            method=AuthMethod.TOKEN,
            credentials=Credentials(token="Bearer invalid.token.here"),
        ),
        expected_result=ExpectedResult.FAILURE,
        validation_checks=(
            Check.STATUS_401,
            Check.WWW_AUTHENTICATE_PRESENT,
            manual("Error response with token validation message"),
            manual("No access to protected resources"),
        ),
    ),
)


def generate_basic_test_cases() -> list[TestCase]:
    """Return the basic catalog in execution order."""
    return list(BASIC_TEST_CASES)


__all__ = ["BASIC_TEST_CASES", "generate_basic_test_cases"]
