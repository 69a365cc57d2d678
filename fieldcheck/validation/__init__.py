"""Validation package - rule sets and the checks they run.

This package holds the single-value rule engine: the RuleSet builder, the
Evaluator that runs its checks, and the value, pattern and date helpers both
depend on. Validation never raises; results are read from the RuleSet.
"""

from .base import NO_ERROR, ErrorCode, ValidationResult, Violation
from .dates import CLEARED_DATE_FORMAT, DEFAULT_DATE_FORMAT, is_valid_date, translate_date_format
from .evaluator import Evaluator
from .patterns import compile_pattern, normalize_pattern
from .ruleset import PRIMITIVE_TYPE_ALIASES, RuleSet
from .values import ValueKind

__all__ = [
    "RuleSet",
    "Evaluator",
    "ErrorCode",
    "NO_ERROR",
    "ValidationResult",
    "Violation",
    "ValueKind",
    "PRIMITIVE_TYPE_ALIASES",
    "DEFAULT_DATE_FORMAT",
    "CLEARED_DATE_FORMAT",
    "compile_pattern",
    "normalize_pattern",
    "is_valid_date",
    "translate_date_format",
]
