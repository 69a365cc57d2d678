# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""RuleSet - the configured constraints for one logical field.

A RuleSet is built through chained mutators and then used for any number of
``validate`` calls::

    rules = RuleSet().set_format_type("email").set_max_bound(64)
    if not rules.validate(address):
        print(rules.last_error_message)

Errors accumulate across calls until :meth:`RuleSet.clear_errors` (or one of
the broader clear methods) is called. A RuleSet is not safe for concurrent
use; give each thread its own instance.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Pattern

from ..exceptions import ConfigurationError
from ..telemetry import record_config_degraded
from .base import NO_ERROR, ValidationResult, Violation
from .dates import CLEARED_DATE_FORMAT, DEFAULT_DATE_FORMAT
from .evaluator import Evaluator
from .patterns import EMPTY_PATTERN, compile_pattern, normalize_pattern

logger = logging.getLogger(__name__)

EMAIL_FORMAT = "email"
EMAIL_PATTERN = r"/^.+@[^.]+(?:\..+)?$/"
EMAIL_MIN_LENGTH = 3  # a@a
EMAIL_MAX_LENGTH = 254

PRIMITIVE_TYPE_ALIASES = {
    "bool": "boolean",
    "int": "integer",
    "str": "string",
    "null": "NULL",
    "number": "numeric",
    "float": "double",
}

# Keys accepted by RuleSet.from_mapping, in the order they are applied.
MAPPING_KEYS = (
    "allow_null",
    "allow_empty",
    "format",
    "date_format",
    "type",
    "min",
    "max",
    "pattern",
)

_EVALUATOR = Evaluator()


class RuleSet:
    """Configured validation constraints plus the error state of past validations."""

    def __init__(self, developer_mode: bool = False):
        # Reserved for message verbosity; no check depends on it.
        self._developer_mode = bool(developer_mode)

        self._allow_null = False
        self._allow_empty = False
        self._min_bound: Optional[float] = None
        self._max_bound: Optional[float] = None
        self._pattern: Optional[str] = None
        self._compiled_pattern: Optional[Pattern[str]] = None
        self._format_type: Optional[str] = None
        self._primitive_type: Optional[str] = None
        self._date_format = DEFAULT_DATE_FORMAT

        self.success = False
        self._last_error_code = NO_ERROR
        self._last_error_message = ""
        self._errors: List[Violation] = []

    def __repr__(self) -> str:
        return f"RuleSet({self.to_mapping()!r})"

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def developer_mode(self) -> bool:
        return self._developer_mode

    @property
    def allow_null(self) -> bool:
        return self._allow_null

    @property
    def allow_empty(self) -> bool:
        return self._allow_empty

    @property
    def min_bound(self) -> Optional[float]:
        return self._min_bound

    @property
    def max_bound(self) -> Optional[float]:
        return self._max_bound

    @property
    def pattern(self) -> Optional[str]:
        """The normalized ``/body/flags`` pattern, or ``None`` when unset."""
        return self._pattern

    @property
    def compiled_pattern(self) -> Optional[Pattern[str]]:
        """The compiled pattern; ``None`` when unset or when it failed to compile."""
        return self._compiled_pattern

    @property
    def format_type(self) -> Optional[str]:
        return self._format_type

    @property
    def primitive_type(self) -> Optional[str]:
        return self._primitive_type

    @property
    def date_format(self) -> str:
        return self._date_format

    @property
    def last_error_code(self) -> int:
        return self._last_error_code

    @property
    def last_error_message(self) -> str:
        return self._last_error_message

    @property
    def errors(self) -> List[Violation]:
        return list(self._errors)

    @property
    def result(self) -> ValidationResult:
        return ValidationResult(
            success=self.success,
            last_error_code=self._last_error_code,
            last_error_message=self._last_error_message,
            errors=list(self._errors),
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_allow_null(self, allow: bool = True) -> "RuleSet":
        """When set, ``None`` validates successfully without any other check."""
        self._allow_null = bool(allow)
        return self

    def set_allow_empty(self, allow: bool = True) -> "RuleSet":
        """When set, empty values validate successfully without any other check."""
        self._allow_empty = bool(allow)
        return self

    def set_min_bound(self, bound: float) -> "RuleSet":
        """Inclusive minimum: a length, or a value for numeric primitive types."""
        self._min_bound = float(bound)
        return self

    def set_max_bound(self, bound: float) -> "RuleSet":
        """Inclusive maximum: a length, or a value for numeric primitive types."""
        self._max_bound = float(bound)
        return self

    def set_pattern(self, pattern: str) -> "RuleSet":
        """Set the format pattern from any shorthand accepted by ``normalize_pattern``.

        A pattern that does not compile is kept; every value then fails the
        format check.
        """
        normalized = normalize_pattern(pattern)
        if normalized == EMPTY_PATTERN:
            return self.clear_pattern()

        self._pattern = normalized
        try:
            self._compiled_pattern = compile_pattern(normalized)
        except re.error as exc:
            logger.warning("Pattern %s does not compile (%s); values will fail the format check", normalized, exc)
            record_config_degraded("pattern")
            self._compiled_pattern = None
        return self

    def set_format_type(self, name: str) -> "RuleSet":
        """Set a named format. ``email`` also sets a pattern and length bounds.

        The name is case-insensitive, so ``"EMAIL"`` applies the email rules too.
        """
        self._format_type = name.lower() or None
        if self._format_type == EMAIL_FORMAT:
            self.set_pattern(EMAIL_PATTERN)
            self.set_min_bound(EMAIL_MIN_LENGTH)
            self.set_max_bound(EMAIL_MAX_LENGTH)
        return self

    def set_primitive_type(self, name: str) -> "RuleSet":
        """Set the expected primitive type; short aliases such as ``int`` are expanded.

        Matching is case-insensitive: ``"INT"`` and ``"int"`` both become
        ``integer``, and unknown names are stored lowercased.
        """
        lowered = name.lower()
        self._primitive_type = PRIMITIVE_TYPE_ALIASES.get(lowered, lowered) or None
        return self

    def set_date_format(self, date_format: str) -> "RuleSet":
        """Set the expected date format. This also sets the primitive type to ``date``."""
        self._date_format = date_format
        self._primitive_type = "date"
        return self

    # ------------------------------------------------------------------
    # Clearing
    # ------------------------------------------------------------------

    def clear_allow_null(self) -> "RuleSet":
        self._allow_null = False
        return self

    def clear_allow_empty(self) -> "RuleSet":
        self._allow_empty = False
        return self

    def clear_min_bound(self) -> "RuleSet":
        self._min_bound = None
        return self

    def clear_max_bound(self) -> "RuleSet":
        self._max_bound = None
        return self

    def clear_pattern(self) -> "RuleSet":
        self._pattern = None
        self._compiled_pattern = None
        return self

    def clear_format_type(self) -> "RuleSet":
        """Remove the named format, undoing the settings the email format applied."""
        if self._format_type == EMAIL_FORMAT:
            self.clear_pattern()
            self.clear_min_bound()
            self.clear_max_bound()
        self._format_type = None
        return self

    def clear_primitive_type(self) -> "RuleSet":
        self._primitive_type = None
        return self

    def clear_date_format(self) -> "RuleSet":
        # Resets to d-M-Y, not to the constructor default Y-m-d.
        self._date_format = CLEARED_DATE_FORMAT
        return self

    def clear_errors(self) -> None:
        self._last_error_code = NO_ERROR
        self._last_error_message = ""
        self._errors = []

    def clear_all(self) -> None:
        """Reset every setting as the individual clear methods do, and drop all errors."""
        self.clear_errors()
        self.clear_allow_null()
        self.clear_allow_empty()
        self.clear_min_bound()
        self.clear_max_bound()
        self.clear_pattern()
        self.clear_format_type()
        self.clear_primitive_type()
        self.clear_date_format()

    def clear_non_error_state(self) -> None:
        """Reset every setting but keep the recorded errors."""
        code, message, errors = self._last_error_code, self._last_error_message, self._errors
        self.clear_all()
        self._last_error_code, self._last_error_message, self._errors = code, message, errors

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, value: Any, display_label: Optional[str] = None) -> bool:
        """Check *value* against the configured constraints.

        Args:
            value: The value to check.
            display_label: Shown in error messages instead of the value itself.

        Returns:
            True if no check failed during this call.
        """
        return _EVALUATOR.evaluate(self, value, display_label)

    def add_error(self, code: int, message: str) -> None:
        """Record an error. Errors are never de-duplicated."""
        self._last_error_code = code
        self._last_error_message = message
        self._errors.append(Violation(code=int(code), message=message))

    # ------------------------------------------------------------------
    # Mapping form (rule files)
    # ------------------------------------------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], *, developer_mode: bool = False, name: str = "") -> "RuleSet":
        """Build a RuleSet from its rule-file representation.

        Raises:
            ConfigurationError: On unknown keys or values of the wrong type.
        """
        label = f"rule '{name}'" if name else "rule"
        if not isinstance(mapping, Mapping):
            raise ConfigurationError(f"{label} must be a mapping of settings, got {type(mapping).__name__}")

        unknown = sorted(str(key) for key in mapping if key not in MAPPING_KEYS)
        if unknown:
            raise ConfigurationError(
                f"Unknown setting(s) {unknown} in {label}. Valid settings: {', '.join(MAPPING_KEYS)}"
            )

        rules = cls(developer_mode=developer_mode)
        for key in MAPPING_KEYS:
            if key not in mapping:
                continue
            value = mapping[key]
            if key in ("allow_null", "allow_empty"):
                if not isinstance(value, bool):
                    raise ConfigurationError(f"'{key}' in {label} must be true or false, got {value!r}")
                if key == "allow_null":
                    rules.set_allow_null(value)
                else:
                    rules.set_allow_empty(value)
            elif key in ("min", "max"):
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ConfigurationError(f"'{key}' in {label} must be a number, got {value!r}")
                if key == "min":
                    rules.set_min_bound(value)
                else:
                    rules.set_max_bound(value)
            else:
                if not isinstance(value, str):
                    raise ConfigurationError(f"'{key}' in {label} must be a string, got {value!r}")
                if key == "format":
                    rules.set_format_type(value)
                elif key == "date_format":
                    rules.set_date_format(value)
                elif key == "type":
                    rules.set_primitive_type(value)
                else:
                    rules.set_pattern(value)
        logger.debug("Configured %s: %r", label, rules)
        return rules

    def to_mapping(self) -> Dict[str, Any]:
        """Return the rule-file representation of the current settings."""
        mapping: Dict[str, Any] = {}
        if self._allow_null:
            mapping["allow_null"] = True
        if self._allow_empty:
            mapping["allow_empty"] = True
        if self._format_type is not None:
            mapping["format"] = self._format_type
        if self._primitive_type == "date":
            mapping["date_format"] = self._date_format
        if self._primitive_type is not None:
            mapping["type"] = self._primitive_type
        if self._min_bound is not None:
            mapping["min"] = self._min_bound
        if self._max_bound is not None:
            mapping["max"] = self._max_bound
        if self._pattern is not None:
            mapping["pattern"] = self._pattern
        return mapping


__all__ = [
    "EMAIL_FORMAT",
    "EMAIL_PATTERN",
    "MAPPING_KEYS",
    "PRIMITIVE_TYPE_ALIASES",
    "RuleSet",
]
