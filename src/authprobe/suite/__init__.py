# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Suite orchestration."""

from .runner import CANCELLED_MESSAGE, UNSUPPORTED_METHOD_MESSAGE, RunState, SuiteRunner

__all__ = ["CANCELLED_MESSAGE", "RunState", "SuiteRunner", "UNSUPPORTED_METHOD_MESSAGE"]
