# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclasses for validation and suite reports."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .probe import ProbeResult
from .testcase import TestCase


@dataclass(frozen=True)
class ValidationOutcome:
    check: str
    passed: bool
    details: str

    def to_dict(self) -> dict[str, Any]:
        return {"check": self.check, "passed": self.passed, "details": self.details}


@dataclass(frozen=True)
class ValidationReport:
    passed: bool
    validation_results: tuple[ValidationOutcome, ...] = ()

    @property
    def failed_checks(self) -> list[str]:
        return [outcome.check for outcome in self.validation_results if not outcome.passed]

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "validation_results": [outcome.to_dict() for outcome in self.validation_results],
        }


@dataclass(frozen=True)
class CaseResult:
    test_case: TestCase
    result: ProbeResult
    validation: ValidationReport

    def to_dict(self) -> dict[str, Any]:
        return {
            "test_case": self.test_case.to_dict(),
            "result": self.result.to_dict(),
            "validation": self.validation.to_dict(),
        }


@dataclass(frozen=True)
class SuiteSummary:
    total: int
    passed: int
    failed: int
    success_rate: float

    @classmethod
    def from_results(cls, results: Sequence[CaseResult]) -> SuiteSummary:
        total = len(results)
        passed = sum(1 for item in results if item.validation.passed)
        success_rate = (passed / total) * 100 if total else 0.0
        return cls(total=total, passed=passed, failed=total - passed, success_rate=success_rate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "success_rate": self.success_rate,
        }


@dataclass(frozen=True)
class SuiteResult:
    summary: SuiteSummary
    results: tuple[CaseResult, ...]
    target_url: str = ""
    cancelled: bool = False

    def result_for(self, case_id: str) -> CaseResult | None:
        for item in self.results:
            if item.test_case.id == case_id:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_url": self.target_url,
            "cancelled": self.cancelled,
            "summary": self.summary.to_dict(),
            "results": [item.to_dict() for item in self.results],
        }


__all__ = ["CaseResult", "SuiteResult", "SuiteSummary", "ValidationOutcome", "ValidationReport"]
