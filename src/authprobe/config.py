# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for AuthProbe."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"AuthProbe/{__version__} (authentication test harness)"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client and suite execution defaults."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_workers: int = 1

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("AUTHPROBE_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        max_workers = _int_env("AUTHPROBE_MAX_WORKERS", cls.max_workers)
        return cls(
            timeout=timeout,
            user_agent=os.getenv("AUTHPROBE_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("AUTHPROBE_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("AUTHPROBE_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_workers=max(1, max_workers),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
