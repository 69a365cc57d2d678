# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""fieldcheck - rule-based validation of single values.

Configure a :class:`RuleSet` through chained setters, call ``validate`` and
read the outcome from the same object::

    from fieldcheck import RuleSet

    rules = RuleSet().set_primitive_type("int").set_min_bound(1).set_max_bound(100)
    rules.validate(150)        # False
    rules.last_error_code      # 1

For ad-hoc checks without managing an instance, use :mod:`fieldcheck.runtime.facade`.
"""

from .exceptions import ConfigurationError, FieldCheckError, UnknownRuleError
from .rulebook import FileRuleLoader, RuleBundle, load_rules
from .runtime import facade
from .validation import (
    ErrorCode,
    Evaluator,
    RuleSet,
    ValidationResult,
    ValueKind,
    Violation,
    normalize_pattern,
)

__version__ = "1.0.0"

__all__ = [
    "RuleSet",
    "Evaluator",
    "ErrorCode",
    "ValidationResult",
    "Violation",
    "ValueKind",
    "normalize_pattern",
    "facade",
    "RuleBundle",
    "FileRuleLoader",
    "load_rules",
    "FieldCheckError",
    "ConfigurationError",
    "UnknownRuleError",
]
