# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Executor selection by auth method."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import AuthMethod
from .base import ProbeExecutor
from .bearer import BearerTokenProbe
from .form_login import FormLoginProbe

SUITE_EXECUTORS: Mapping[AuthMethod, ProbeExecutor] = {
    AuthMethod.LOGIN: FormLoginProbe(),
    AuthMethod.TOKEN: BearerTokenProbe(),
}


def select_executor(
    method: AuthMethod,
    executors: Mapping[AuthMethod, ProbeExecutor] | None = None,
) -> ProbeExecutor | None:
    """Return the executor for ``method``, or None when it cannot be run automatically."""
    return (executors if executors is not None else SUITE_EXECUTORS).get(method)


__all__ = ["SUITE_EXECUTORS", "select_executor"]
