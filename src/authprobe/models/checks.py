# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Validation check names: a closed set of mechanical checks plus explicit manual checks."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..errors import UnknownCheckError


class Check(str, Enum):
    STATUS_200_OR_302 = "Status code is 200 or 302"
    STATUS_200 = "Status code is 200"
    STATUS_401_OR_403 = "Status code is 401 or 403"
    STATUS_401 = "Status code is 401"
    STATUS_400_OR_422 = "Status code is 400 or 422"
    SESSION_COOKIE_SET = "Session cookie is set"
    AUTHORIZATION_ACCEPTED = "Authorization header accepted"
    WWW_AUTHENTICATE_PRESENT = "WWW-Authenticate header present"
    NO_SESSION_COOKIE = "No session cookie is set"


@dataclass(frozen=True)
class ValidationCheck:
    """
    One named assertion in a test case.

    ``check`` is None for manual checks: assertions a human has to verify, which the
    evaluator always reports as passed.
    """

    name: str
    check: Check | None = None

    @property
    def is_manual(self) -> bool:
        return self.check is None

    @classmethod
    def of(cls, check: Check) -> ValidationCheck:
        return cls(name=check.value, check=check)

    @classmethod
    def manual(cls, name: str) -> ValidationCheck:
        if name in {c.value for c in Check}:
            raise ValueError(f"{name!r} is a mechanical check, not a manual one")
        return cls(name=name, check=None)

    @classmethod
    def parse(cls, name: str, *, allow_manual: bool = False) -> ValidationCheck:
        try:
            return cls.of(Check(name))
        except ValueError:
            if allow_manual:
                return cls.manual(name)
            raise UnknownCheckError(name) from None


def coerce_checks(items: Iterable[ValidationCheck | Check | str], *, allow_manual: bool = False) -> tuple[ValidationCheck, ...]:
    out: list[ValidationCheck] = []
    for item in items:
        if isinstance(item, ValidationCheck):
            out.append(item)
        elif isinstance(item, Check):
            out.append(ValidationCheck.of(item))
        else:
            out.append(ValidationCheck.parse(str(item), allow_manual=allow_manual))
    return tuple(out)


__all__ = ["Check", "ValidationCheck", "coerce_checks"]
