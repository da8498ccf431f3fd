# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Validation rule evaluation."""

from .evaluator import MANUAL_DETAILS, RULES, evaluate, evaluate_check

__all__ = ["MANUAL_DETAILS", "RULES", "evaluate", "evaluate_check"]
