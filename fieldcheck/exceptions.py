# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exceptions raised by the fieldcheck package.

Validation itself never raises: a failed check is reported through the
error state of the RuleSet. These exceptions cover the configuration layer
(rule files and rule mappings) only.
"""

from __future__ import annotations

from typing import Iterable


class FieldCheckError(Exception):
    """Base class for all fieldcheck exceptions."""


class ConfigurationError(FieldCheckError):
    """Raised when a rule file or rule mapping cannot be turned into a RuleSet."""


class UnknownRuleError(FieldCheckError, KeyError):
    """Raised when a rule bundle has no rule with the requested name."""

    def __init__(self, name: str, available: Iterable[str] = ()):
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        if self.available:
            return f"Unknown rule '{self.name}'. Available rules: {', '.join(self.available)}"
        return f"Unknown rule '{self.name}'. The rule bundle is empty."


__all__ = [
    "FieldCheckError",
    "ConfigurationError",
    "UnknownRuleError",
]
