# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Custom header (API key, proprietary scheme) probe."""

from __future__ import annotations

from ..http import HttpRequest, merge_headers
from ..models import Credentials
from .base import JSON_ACCEPT, ProbeExecutor


class CustomHeaderProbe(ProbeExecutor):
    """GET the target with caller headers layered over ``Accept: application/json``."""

    name = "custom_header"

    def build_request(self, target_url: str, credentials: Credentials | None) -> HttpRequest:
        supplied = credentials.headers if credentials else {}
        return HttpRequest(url=target_url, headers=merge_headers({"Accept": JSON_ACCEPT}, supplied))
