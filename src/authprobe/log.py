# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for AuthProbe."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("AUTHPROBE_LOG_LEVEL", "WARNING").upper()

REDACTED = "***"


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def redact(value: str | None) -> str | None:
    """Mask a secret for log output, keeping absence distinguishable from emptiness."""
    if value is None:
        return None
    return REDACTED if value else ""


__all__ = ["REDACTED", "redact", "setup_logging"]
