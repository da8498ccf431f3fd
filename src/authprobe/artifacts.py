# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Extraction of cookies and auth tokens from probe responses."""

from __future__ import annotations

from collections.abc import Mapping

from .http.headers import header_value
from .models.probe import AuthTokens

BEARER_PREFIX = "Bearer "


def extract_cookies(raw_set_cookie: str | None) -> dict[str, str]:
    """
    Parse a (possibly comma-joined) ``Set-Cookie`` value into ``name -> value``.

    Only the leading ``name=value`` pair of each definition is kept; attributes are
    dropped. Definitions without ``=`` or with an empty name or value are skipped, which
    also absorbs the fragments left by commas inside ``Expires`` dates.
    """
    cookies: dict[str, str] = {}
    if not raw_set_cookie:
        return cookies

    for definition in raw_set_cookie.split(","):
        name_value = definition.split(";", 1)[0]
        name, sep, value = name_value.partition("=")
        name = name.strip()
        value = value.strip()
        if not sep or not name or not value:
            continue
        cookies[name] = value
    return cookies


def format_cookie_header(cookies: Mapping[str, str] | None) -> str:
    """Join cookies into a ``Cookie`` request header value, in mapping order."""
    return "; ".join(f"{name}={value}" for name, value in (cookies or {}).items())


def extract_auth_tokens(headers: Mapping[str, str] | None, cookies: Mapping[str, str] | None) -> AuthTokens | None:
    """
    Sniff authentication artifacts out of response headers and cookies.

    Returns None when nothing was found, as distinct from a token whose value is empty.
    """
    jwt_token: str | None = None
    session_token: str | None = None
    csrf_token: str | None = None

    authorization = header_value(headers, "authorization", default="")
    if authorization.startswith(BEARER_PREFIX):
        jwt_token = authorization[len(BEARER_PREFIX):]

    for name, value in (cookies or {}).items():
        lower = name.lower()
        if "session" in lower:
            session_token = value
        elif "csrf" in lower or "xsrf" in lower:
            csrf_token = value

    if jwt_token is None and session_token is None and csrf_token is None:
        return None
    return AuthTokens(session_token=session_token, jwt_token=jwt_token, csrf_token=csrf_token)


__all__ = ["BEARER_PREFIX", "extract_auth_tokens", "extract_cookies", "format_cookie_header"]
