# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bearer/API token probe."""

from __future__ import annotations

from ..http import HttpRequest
from ..models import AuthMethod, Credentials
from .base import JSON_ACCEPT, ProbeExecutor


class BearerTokenProbe(ProbeExecutor):
    """
    GET the target with the token as the ``Authorization`` header.

    The token is sent verbatim; callers include the ``Bearer `` prefix themselves.
    """

    name = "bearer_token"
    method = AuthMethod.TOKEN

    def build_request(self, target_url: str, credentials: Credentials | None) -> HttpRequest:
        token = credentials.token if credentials and credentials.token else ""
        return HttpRequest(
            url=target_url,
            headers={
                "Authorization": token,
                "Accept": JSON_ACCEPT,
                "Content-Type": JSON_ACCEPT,
            },
        )
