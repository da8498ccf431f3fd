# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cookie replay probe."""

from __future__ import annotations

from ..artifacts import format_cookie_header
from ..http import HttpRequest
from ..models import Credentials
from .base import BROWSER_ACCEPT, ProbeExecutor


class CookieReplayProbe(ProbeExecutor):
    name = "cookie_replay"

    def build_request(self, target_url: str, credentials: Credentials | None) -> HttpRequest:
        cookies = credentials.cookies if credentials else {}
        return HttpRequest(
            url=target_url,
            headers={"Cookie": format_cookie_header(cookies), "Accept": BROWSER_ACCEPT},
        )
