# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthTokens:
    session_token: str | None = None
    jwt_token: str | None = None
    csrf_token: str | None = None

    def to_dict(self) -> dict[str, str]:
        return {
            key: value
            for key, value in (
                ("session_token", self.session_token),
                ("jwt_token", self.jwt_token),
                ("csrf_token", self.csrf_token),
            )
            if value is not None
        }


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of one HTTP exchange.

    ``status_code`` is 0 when the exchange never completed; ``headers`` are keyed by
    lower-cased field name.
    """

    success: bool
    status_code: int = 0
    response_time_ms: int = 0
    headers: dict[str, str] = field(default_factory=dict)
    cookies: dict[str, str] = field(default_factory=dict)
    redirect_url: str | None = None
    error_message: str | None = None
    auth_tokens: AuthTokens | None = None
    error_type: str | None = None

    @property
    def completed(self) -> bool:
        return self.status_code != 0

    @classmethod
    def failure(cls, error_message: str, *, response_time_ms: int = 0, error_type: str | None = None) -> ProbeResult:
        return cls(
            success=False,
            status_code=0,
            response_time_ms=max(0, response_time_ms),
            error_message=error_message,
            error_type=error_type,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "status_code": self.status_code,
            "response_time_ms": self.response_time_ms,
            "headers": dict(self.headers),
            "cookies": dict(self.cookies),
            "redirect_url": self.redirect_url,
            "error_message": self.error_message,
            "error_type": self.error_type,
            "auth_tokens": self.auth_tokens.to_dict() if self.auth_tokens else None,
        }


__all__ = ["AuthTokens", "ProbeResult"]
