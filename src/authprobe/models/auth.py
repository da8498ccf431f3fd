# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication strategy models and the raw-input config builder."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..errors import ConfigurationError
from ..log import redact

logger = logging.getLogger(__name__)


class AuthMethod(str, Enum):
    NONE = "none"
    TOKEN = "token"
    LOGIN = "login"
    INTERACTIVE = "interactive"

    @classmethod
    def parse(cls, value: AuthMethod | str) -> AuthMethod:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise ConfigurationError(f"Unknown auth method {value!r} (expected one of: {choices})") from exc


@dataclass(frozen=True)
class Credentials:
    username: str | None = None
    password: str | None = None
    token: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)

    def redacted(self) -> dict[str, Any]:
        """Loggable view: secrets masked, header and cookie names kept."""
        return {
            "username": self.username,
            "password": redact(self.password),
            "token": redact(self.token),
            "headers": sorted(self.headers),
            "cookies": sorted(self.cookies),
        }


@dataclass(frozen=True)
class AuthConfig:
    method: AuthMethod = AuthMethod.NONE
    credentials: Credentials | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", AuthMethod.parse(self.method))

    def validate(self) -> AuthConfig:
        """Reject configs whose credentials cannot drive the selected method."""
        if self.method is AuthMethod.NONE:
            return self
        creds = self.credentials
        if creds is None:
            raise ConfigurationError(f"Credentials are required for {self.method.value} authentication")
        if self.method is AuthMethod.LOGIN and (not creds.username or not creds.password):
            raise ConfigurationError("Username and password are required for login authentication")
        if self.method is AuthMethod.TOKEN and not creds.token:
            raise ConfigurationError("Token is required for token authentication")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method.value,
            "credentials": self.credentials.redacted() if self.credentials else None,
        }


def parse_mapping_json(raw: str | None, *, label: str) -> dict[str, str]:
    """
    Parse user-supplied JSON text into a flat ``name -> value`` mapping.

    Blank input yields an empty mapping. Anything other than a JSON object whose values
    are scalars is a ConfigurationError.
    """
    if raw is None or not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid {label} format: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"{label.capitalize()} must be a valid JSON object")
    parsed: dict[str, str] = {}
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            raise ConfigurationError(f"{label.capitalize()} value for {key!r} must be a string")
        parsed[str(key)] = "" if value is None else str(value)
    return parsed


def build_auth_config(
    method: AuthMethod | str,
    *,
    username: str | None = None,
    password: str | None = None,
    token: str | None = None,
    headers: Mapping[str, str] | None = None,
    cookies: Mapping[str, str] | None = None,
    headers_json: str | None = None,
    cookies_json: str | None = None,
) -> AuthConfig:
    """
    Build and validate an AuthConfig from raw form-style input.

    Empty strings are treated as absent. JSON header/cookie text is merged over any
    mapping passed directly.
    """
    auth_method = AuthMethod.parse(method)
    parsed_headers = {**dict(headers or {}), **parse_mapping_json(headers_json, label="headers")}
    parsed_cookies = {**dict(cookies or {}), **parse_mapping_json(cookies_json, label="cookies")}

    credentials: Credentials | None = None
    if auth_method is not AuthMethod.NONE:
        credentials = Credentials(
            username=username or None,
            password=password or None,
            token=token or None,
            headers=parsed_headers,
            cookies=parsed_cookies,
        )
    elif parsed_headers or parsed_cookies:
        credentials = Credentials(headers=parsed_headers, cookies=parsed_cookies)

    config = AuthConfig(method=auth_method, credentials=credentials).validate()
    logger.debug("Built auth configuration: %s", config.to_dict())
    return config


__all__ = ["AuthConfig", "AuthMethod", "Credentials", "build_auth_config", "parse_mapping_json"]
