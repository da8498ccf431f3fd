# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). Probe results store headers as
plain dicts keyed by lower-cased names; these helpers read caller-supplied mappings
without assuming any particular casing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers (duplicate fields such as Set-Cookie come back
    comma-joined) and iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        try:
            return dict(items())
        except (TypeError, ValueError):
            pass

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return default

    lower = str(name).lower()
    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def has_header(headers: Mapping[object, object] | None, name: str) -> bool:
    coerced = _coerce_headers_mapping(headers)
    if not coerced or not name:
        return False
    lower = name.lower()
    return any(key is not None and str(key).lower() == lower for key in coerced)


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str] | None) -> dict[str, str]:
    """
    Layer ``overrides`` onto ``defaults``.

    A default is dropped whenever an override names the same field in any casing, so the
    caller's spelling and value win.
    """
    merged = dict(defaults)
    for key, value in (overrides or {}).items():
        lower = str(key).lower()
        for existing in [k for k in merged if k.lower() == lower]:
            del merged[existing]
        merged[str(key)] = "" if value is None else str(value)
    return merged


__all__ = ["has_header", "header_value", "merge_headers", "normalize_headers"]
