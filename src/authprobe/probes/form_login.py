# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Form-based username/password login probe."""

from __future__ import annotations

from urllib.parse import urlencode

from ..artifacts import format_cookie_header
from ..http import HttpRequest, join_path
from ..models import AuthMethod, Credentials
from .base import BROWSER_ACCEPT, ProbeExecutor

LOGIN_PATH = "/login"


class FormLoginProbe(ProbeExecutor):
    """POST url-encoded credentials to ``{target}/login``."""

    name = "form_login"
    method = AuthMethod.LOGIN

    def build_request(self, target_url: str, credentials: Credentials | None) -> HttpRequest:
        creds = credentials or Credentials()
        body = urlencode({"username": creds.username or "", "password": creds.password or ""})
        headers = {
            "Accept": BROWSER_ACCEPT,
            "Content-Type": "application/x-www-form-urlencoded",
        }
        if creds.cookies:
            headers["Cookie"] = format_cookie_header(creds.cookies)
        return HttpRequest(url=join_path(target_url, LOGIN_PATH), method="POST", headers=headers, body=body)
