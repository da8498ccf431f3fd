# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe executors, one per authentication strategy."""

from .base import ProbeExecutor, build_probe_result, execute_probe
from .bearer import BearerTokenProbe
from .cookie_replay import CookieReplayProbe
from .custom_header import CustomHeaderProbe
from .form_login import FormLoginProbe
from .registry import SUITE_EXECUTORS, select_executor
from .session import (
    LogoutProbe,
    build_replay_headers,
    probe_logout,
    probe_protected_endpoint,
    probe_session_timeout,
)

__all__ = [
    "BearerTokenProbe",
    "CookieReplayProbe",
    "CustomHeaderProbe",
    "FormLoginProbe",
    "LogoutProbe",
    "ProbeExecutor",
    "SUITE_EXECUTORS",
    "build_probe_result",
    "build_replay_headers",
    "execute_probe",
    "probe_logout",
    "probe_protected_endpoint",
    "probe_session_timeout",
    "select_executor",
]
