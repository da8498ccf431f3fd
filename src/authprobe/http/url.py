# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers shared across probes."""

from __future__ import annotations

from urllib.parse import urlparse

from ..errors import ConfigurationError


def join_path(base_url: str, path: str) -> str:
    """
    Append an endpoint path to a target URL.

    http://host/app + /login -> http://host/app/login (query strings are not carried).
    """
    parsed = urlparse(str(base_url or ""))
    base_path = parsed.path.rstrip("/")
    suffix = path if path.startswith("/") else f"/{path}"
    return parsed._replace(path=base_path + suffix, params="", query="", fragment="").geturl()


def validate_target_url(url: str | None) -> str:
    """Return the stripped target URL or raise ConfigurationError if it is not http(s)."""
    raw = str(url or "").strip()
    if not raw:
        raise ConfigurationError("Target URL is required")
    parsed = urlparse(raw)
    if parsed.scheme.lower() not in {"http", "https"} or not parsed.netloc:
        raise ConfigurationError(f"Target URL must be an absolute http(s) URL: {raw!r}")
    return raw


__all__ = ["join_path", "validate_target_url"]
