# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from authprobe.catalog import BASIC_TEST_CASES, generate_basic_test_cases
from authprobe.models import AuthMethod, ExpectedResult


def test_catalog_order_and_ids():
    assert [case.id for case in generate_basic_test_cases()] == [
        "valid-login",
        "invalid-credentials",
        "empty-credentials",
        "token-auth-valid",
        "token-auth-invalid",
    ]


def test_catalog_methods_and_expectations():
    by_id = {case.id: case for case in BASIC_TEST_CASES}
    assert by_id["valid-login"].auth_config.method is AuthMethod.LOGIN
    assert by_id["token-auth-invalid"].auth_config.method is AuthMethod.TOKEN
    assert [case.expected_result for case in BASIC_TEST_CASES] == [
        ExpectedResult.SUCCESS,
        ExpectedResult.FAILURE,
        ExpectedResult.FAILURE,
        ExpectedResult.SUCCESS,
        ExpectedResult.FAILURE,
    ]
    assert by_id["token-auth-valid"].auth_config.credentials.token.startswith("Bearer ")
    assert by_id["empty-credentials"].auth_config.credentials.username == ""


def test_catalog_check_lists():
    by_id = {case.id: case for case in BASIC_TEST_CASES}
    assert by_id["valid-login"].check_names == [
        "Status code is 200 or 302",
        "Session cookie is set",
        "Redirect to authenticated area",
        "No error messages in response",
    ]
    assert by_id["token-auth-invalid"].check_names[:2] == ["Status code is 401", "WWW-Authenticate header present"]
    empty_checks = by_id["empty-credentials"].validation_checks
    assert not empty_checks[0].is_manual
    assert all(check.is_manual for check in empty_checks[1:])


def test_generate_returns_a_fresh_list():
    first = generate_basic_test_cases()
    first.clear()
    assert len(generate_basic_test_cases()) == 5
