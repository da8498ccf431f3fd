# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import threading
import time

import pytest

from authprobe.catalog import BASIC_TEST_CASES
from authprobe.errors import ConfigurationError
from authprobe.http import HttpRequest, HttpResponse, StubHttpClient
from authprobe.models import AuthConfig, AuthMethod, Credentials, ProbeResult, TestCase
from authprobe.probes import ProbeExecutor
from authprobe.suite import CANCELLED_MESSAGE, UNSUPPORTED_METHOD_MESSAGE, RunState, SuiteRunner

TARGET = "https://example.test"


def _login_response(request: HttpRequest) -> HttpResponse:
    if "validPassword123" in str(request.body):
        return HttpResponse(ok=True, status_code=200, reason="OK", headers={"set-cookie": "session=s1; Path=/"})
    return HttpResponse(ok=True, status_code=401, reason="Unauthorized")


def _api_response(request: HttpRequest) -> HttpResponse:
    if request.headers.get("Authorization", "").endswith("validtoken"):
        return HttpResponse(ok=True, status_code=200, reason="OK")
    return HttpResponse(ok=True, status_code=401, reason="Unauthorized", headers={"www-authenticate": "Bearer"})


def _scripted_client() -> StubHttpClient:
    stub = StubHttpClient()
    stub.add(f"{TARGET}/login", _login_response, method="POST")
    stub.add(TARGET, _api_response, method="GET")
    return stub


def test_unreachable_target_fails_every_case():
    result = SuiteRunner(StubHttpClient()).run(TARGET)
    assert result.summary.to_dict() == {"total": 5, "passed": 0, "failed": 5, "success_rate": 0.0}
    for item in result.results:
        assert item.result.status_code == 0
        assert item.result.error_message
        assert item.validation.passed is False


def test_unreachable_target_is_stable_across_runs():
    first = SuiteRunner(StubHttpClient()).run(TARGET)
    second = SuiteRunner(StubHttpClient()).run(TARGET)
    assert first.summary == second.summary
    assert [r.result.status_code for r in second.results] == [0] * 5


def test_scripted_target_summary_and_rate():
    stub = _scripted_client()
    runner = SuiteRunner(stub)
    assert runner.state is RunState.NOT_STARTED
    result = runner.run(TARGET)
    assert runner.state is RunState.COMPLETED

    verdicts = {item.test_case.id: item.validation.passed for item in result.results}
    assert verdicts == {
        "valid-login": True,
        "invalid-credentials": True,
        "empty-credentials": False,
        "token-auth-valid": True,
        "token-auth-invalid": True,
    }
    summary = result.summary
    assert summary.total == 5
    assert summary.passed == 4
    assert summary.failed == 1
    assert summary.success_rate == summary.passed / summary.total * 100
    assert result.cancelled is False
    assert [r.method for r in stub.requests] == ["POST", "POST", "POST", "GET", "GET"]


def test_results_follow_catalog_order():
    result = SuiteRunner(_scripted_client()).run(TARGET)
    assert [item.test_case for item in result.results] == list(BASIC_TEST_CASES)


def test_parallel_run_collects_by_index():
    def slow_login(request: HttpRequest) -> HttpResponse:
        # the first catalog case finishes last
        if "validPassword123" in str(request.body):
            time.sleep(0.05)
        return _login_response(request)

    stub = StubHttpClient()
    stub.add(f"{TARGET}/login", slow_login, method="POST")
    stub.add(TARGET, _api_response, method="GET")
    result = SuiteRunner(stub, max_workers=5).run(TARGET)
    assert [item.test_case.id for item in result.results] == [case.id for case in BASIC_TEST_CASES]
    assert result.summary.passed == 4


def test_unsupported_method_is_recorded_without_network():
    stub = StubHttpClient()
    case = TestCase(
        id="interactive",
        name="Interactive",
        description="",
        auth_config=AuthConfig(method=AuthMethod.INTERACTIVE, credentials=Credentials()),
        expected_result="failure",
        validation_checks=["Status code is 401"],
    )
    result = SuiteRunner(stub).run(TARGET, [case])
    probe = result.results[0].result
    assert probe.success is False
    assert probe.status_code == 0
    assert probe.error_message == UNSUPPORTED_METHOD_MESSAGE
    assert stub.requests == []
    assert result.summary.failed == 1


def test_result_cache_is_filled_by_case_id():
    cache: dict[str, ProbeResult] = {}
    result = SuiteRunner(_scripted_client(), result_cache=cache).run(TARGET)
    assert list(cache) == [case.id for case in BASIC_TEST_CASES]
    assert cache["valid-login"] is result.result_for("valid-login").result


def test_runner_is_single_use():
    runner = SuiteRunner(StubHttpClient())
    runner.run(TARGET)
    with pytest.raises(RuntimeError):
        runner.run(TARGET)


@pytest.mark.parametrize("url", ["", "   ", "example.test", "ftp://example.test"])
def test_invalid_target_is_rejected_before_any_request(url):
    stub = StubHttpClient()
    with pytest.raises(ConfigurationError):
        SuiteRunner(stub).run(url)
    assert stub.requests == []


def test_cancel_before_start_dispatches_nothing():
    stub = StubHttpClient()
    event = threading.Event()
    event.set()
    result = SuiteRunner(stub, cancel_event=event).run(TARGET)
    assert stub.requests == []
    assert result.cancelled is True
    assert result.summary.total == 5
    assert all(item.result.error_message == CANCELLED_MESSAGE for item in result.results)


def test_cancel_mid_run_lets_in_flight_probe_finish():
    event = threading.Event()

    def login_then_cancel(request: HttpRequest) -> HttpResponse:
        event.set()
        return _login_response(request)

    stub = StubHttpClient()
    stub.add(f"{TARGET}/login", login_then_cancel, method="POST")
    result = SuiteRunner(stub, cancel_event=event).run(TARGET)

    assert len(stub.requests) == 1
    assert result.results[0].result.status_code == 200
    assert result.results[0].validation.passed is True
    assert [item.result.error_message for item in result.results[1:]] == [CANCELLED_MESSAGE] * 4
    assert result.cancelled is True
    assert result.summary.passed == 1


def test_executor_crash_becomes_failing_case():
    class ExplodingProbe(ProbeExecutor):
        name = "exploding"

        def build_request(self, target_url, credentials):  # noqa: ARG002
            raise RuntimeError("bad executor")

    result = SuiteRunner(
        StubHttpClient(),
        executors={AuthMethod.LOGIN: ExplodingProbe(), AuthMethod.TOKEN: ExplodingProbe()},
    ).run(TARGET)
    assert result.summary.total == 5
    assert result.summary.passed == 0
    assert result.results[0].result.error_message == "bad executor"
    assert result.results[0].result.error_type == "RuntimeError"


def test_suite_result_to_dict_shape():
    data = SuiteRunner(_scripted_client()).run(TARGET).to_dict()
    assert data["target_url"] == TARGET
    assert data["summary"]["total"] == 5
    first = data["results"][0]
    assert first["test_case"]["id"] == "valid-login"
    assert first["result"]["auth_tokens"] == {"session_token": "s1"}
    assert first["validation"]["validation_results"][0]["check"] == "Status code is 200 or 302"
