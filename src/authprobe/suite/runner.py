# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run a catalog of test cases against one target and aggregate the verdicts."""

from __future__ import annotations

import contextvars
import logging
import threading
from collections.abc import Iterable, Mapping, MutableMapping
from concurrent.futures import ThreadPoolExecutor
from enum import Enum

from ..catalog import generate_basic_test_cases
from ..http import HttpClient, validate_target_url
from ..models import AuthMethod, CaseResult, ProbeResult, SuiteResult, SuiteSummary, TestCase
from ..probes import ProbeExecutor, select_executor
from ..validation import evaluate

logger = logging.getLogger(__name__)

UNSUPPORTED_METHOD_MESSAGE = "Unsupported auth method"
CANCELLED_MESSAGE = "Suite cancelled before probe dispatch"


class RunState(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"


class SuiteRunner:
    """
    Executes test cases in catalog order and publishes one SuiteResult.

    Runners are single-use. With ``max_workers > 1`` probes run on a bounded thread pool
    and results are collected by catalog index, never by completion order.

    Cancellation: once ``cancel_event`` is set no further probe is dispatched. Probes
    already in flight are allowed to finish (each is bounded by the HTTP timeout) and
    cases that never started are recorded as failures, so the result still covers every
    case.
    """

    def __init__(
        self,
        http_client: HttpClient,
        *,
        executors: Mapping[AuthMethod, ProbeExecutor] | None = None,
        max_workers: int = 1,
        cancel_event: threading.Event | None = None,
        result_cache: MutableMapping[str, ProbeResult] | None = None,
    ):
        self.http_client = http_client
        self.executors = executors
        self.max_workers = max(1, int(max_workers))
        self.cancel_event = cancel_event or threading.Event()
        self.result_cache = result_cache
        self.state = RunState.NOT_STARTED

    def _probe_case(self, target_url: str, test_case: TestCase) -> ProbeResult:
        if self.cancel_event.is_set():
            return ProbeResult.failure(CANCELLED_MESSAGE)

        method = test_case.auth_config.method
        executor = select_executor(method, self.executors)
        if executor is None:
            logger.info("Skipping %s: %s authentication is not run automatically", test_case.id, method.value)
            return ProbeResult.failure(UNSUPPORTED_METHOD_MESSAGE)

        logger.debug("Running %s with %s", test_case.id, executor.name)
        try:
            return executor.run(self.http_client, target_url, test_case.auth_config.credentials)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Executor %s failed for %s: %s", executor.name, test_case.id, exc)
            return ProbeResult.failure(str(exc) or type(exc).__name__, error_type=type(exc).__name__)

    def _probe_all(self, target_url: str, cases: list[TestCase]) -> list[ProbeResult]:
        if self.max_workers == 1 or len(cases) <= 1:
            return [self._probe_case(target_url, case) for case in cases]

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="authprobe") as pool:
            futures = [
                pool.submit(contextvars.copy_context().run, self._probe_case, target_url, case)
                for case in cases
            ]
            return [future.result() for future in futures]

    def run(self, target_url: str, test_cases: Iterable[TestCase] | None = None) -> SuiteResult:
        if self.state is not RunState.NOT_STARTED:
            raise RuntimeError("SuiteRunner instances are single-use; create a new runner per run")
        target = validate_target_url(target_url)
        cases = list(test_cases) if test_cases is not None else generate_basic_test_cases()

        self.state = RunState.RUNNING
        logger.info("Running %d authentication test cases against %s", len(cases), target)
        probe_results = self._probe_all(target, cases)

        results: list[CaseResult] = []
        for case, probe_result in zip(cases, probe_results):
            validation = evaluate(probe_result, case)
            results.append(CaseResult(test_case=case, result=probe_result, validation=validation))
            if self.result_cache is not None:
                self.result_cache[case.id] = probe_result
            logger.info(
                "%s: %s (status=%s)",
                case.id,
                "PASS" if validation.passed else "FAIL",
                probe_result.status_code,
            )

        summary = SuiteSummary.from_results(results)
        self.state = RunState.COMPLETED
        return SuiteResult(
            summary=summary,
            results=tuple(results),
            target_url=target,
            cancelled=any(r.error_message == CANCELLED_MESSAGE for r in probe_results),
        )


__all__ = ["CANCELLED_MESSAGE", "RunState", "SuiteRunner", "UNSUPPORTED_METHOD_MESSAGE"]
