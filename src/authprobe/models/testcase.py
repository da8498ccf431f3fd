# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Test case model."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .auth import AuthConfig
from .checks import Check, ValidationCheck, coerce_checks


class ExpectedResult(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class TestCase:
    """A scenario binding an auth config to an expected outcome and ordered checks."""

    __test__ = False  # not a pytest class

    id: str
    name: str
    description: str
    auth_config: AuthConfig
    expected_result: ExpectedResult
    validation_checks: Sequence[ValidationCheck | Check | str] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected_result", ExpectedResult(self.expected_result))
        object.__setattr__(self, "validation_checks", coerce_checks(self.validation_checks))

    @property
    def expects_success(self) -> bool:
        return self.expected_result is ExpectedResult.SUCCESS

    @property
    def check_names(self) -> list[str]:
        return [check.name for check in self.validation_checks]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "auth_config": self.auth_config.to_dict(),
            "expected_result": self.expected_result.value,
            "validation_checks": self.check_names,
        }


__all__ = ["ExpectedResult", "TestCase"]
