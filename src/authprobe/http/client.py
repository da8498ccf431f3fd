# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""The HttpClient seam probes send through, and the default client factory."""

from typing import Protocol

from ..config import HttpSettings, load_http_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Anything that can carry one probe request.

    ``request`` must not raise for transport failures; it returns ``ok=False`` with an
    ``ErrorCategory`` value in ``error_type`` instead. Implementations must not keep
    cookies between calls.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None: ...


def create_default_http_client(settings: HttpSettings | None = None) -> HttpClient:
    """Build the httpx-backed client, reading ``AUTHPROBE_*`` settings when none are given."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_http_settings())
