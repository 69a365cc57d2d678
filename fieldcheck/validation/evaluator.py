# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Evaluator - runs the checks of a RuleSet against one value.

Checks run in a fixed order and every failing check records an error, so one
value can produce several errors in a single call:

1. null is accepted early when ``allow_null`` is set
2. empty values are accepted early when ``allow_empty`` is set
3. maximum bound (code 1)
4. empty value (code 2), otherwise minimum bound (code 3)
5. pattern (code 4)
6. null value (code 8); when it fires the type checks are skipped
7. numeric literal (code 5) or date (code 7) for the special primitive types
8. runtime primitive type (code 6) for every other primitive type

Bounds are lengths unless the primitive type is numeric, integer or double,
in which case they compare against the value itself.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional

from ..telemetry import record_validation
from .base import ErrorCode
from .dates import is_valid_date
from .values import (
    ValueKind,
    format_number,
    is_empty,
    is_numeric,
    length_of,
    numeric_value,
    text_of,
)

if TYPE_CHECKING:
    from .ruleset import RuleSet

logger = logging.getLogger(__name__)

NUMERIC_BOUND_TYPES = frozenset({"numeric", "integer", "double"})
SPECIAL_TYPES = frozenset({"numeric", "date", "time", "datetime"})

STRUCTURED_LABEL = "Variable"


class Evaluator:
    """Stateless check runner; all state lives on the RuleSet it is given."""

    def evaluate(self, rules: "RuleSet", value: Any, display_label: Optional[str] = None) -> bool:
        kind = ValueKind.of(value)
        shown = self._display(kind, value, display_label)

        if rules.allow_null and value is None:
            record_validation("accepted")
            return True
        empty = is_empty(value)
        if rules.allow_empty and empty:
            record_validation("accepted")
            return True

        codes: List[int] = []

        def fail(code: ErrorCode, message: str) -> None:
            codes.append(int(code))
            rules.add_error(int(code), message)

        numeric_mode = rules.primitive_type in NUMERIC_BOUND_TYPES
        length = length_of(value)
        number = numeric_value(value) if numeric_mode else None

        maximum = rules.max_bound
        if maximum is not None and (
            (not numeric_mode and length > maximum)
            or (number is not None and number > maximum)
        ):
            fail(ErrorCode.EXCEEDS_MAXIMUM, f"{shown} exceeds maximum value of {format_number(maximum)}.")

        minimum = rules.min_bound
        # A minimum of exactly 1 is treated as "must not be empty" rather than
        # as a length bound, so such values report code 2 and never code 3.
        if (minimum == 1 and length < 1) or empty:
            fail(ErrorCode.EMPTY, f"{shown} cannot be empty.")
        elif minimum is not None and (
            (not numeric_mode and length < minimum)
            or (number is not None and number < minimum)
        ):
            fail(ErrorCode.BELOW_MINIMUM, f"{shown} exceeds minimum value of {format_number(minimum)}.")

        if rules.pattern is not None and not self._matches(rules, kind, value):
            fail(ErrorCode.INVALID_FORMAT, f"{shown} is not in the correct format.")

        primitive = rules.primitive_type
        if not rules.allow_null and value is None:
            fail(ErrorCode.NULL, f"{shown} cannot be null.")
        elif primitive in SPECIAL_TYPES:
            if primitive == "numeric" and not is_numeric(value):
                fail(ErrorCode.NOT_A_NUMBER, f"{shown} is not a number.")
            # time and datetime share the branch but have no check of their own
            if primitive == "date" and not is_valid_date(value, rules.date_format):
                fail(ErrorCode.INVALID_DATE, f"{shown} is not a valid date.")
        elif primitive is not None and kind.value != primitive:
            fail(
                ErrorCode.TYPE_MISMATCH,
                f"{shown} is of data type '{kind.value}', but should be of type '{primitive}'.",
            )

        rules.success = not codes
        record_validation("pass" if rules.success else "fail", codes)
        logger.debug("Validated %s: %s %s", shown, "pass" if rules.success else "fail", codes)
        return rules.success

    @staticmethod
    def _display(kind: ValueKind, value: Any, display_label: Optional[str]) -> str:
        if kind.is_structured:
            return STRUCTURED_LABEL
        if display_label is not None:
            return display_label
        return f"'{text_of(value)}'"

    @staticmethod
    def _matches(rules: "RuleSet", kind: ValueKind, value: Any) -> bool:
        compiled = rules.compiled_pattern
        # invalid patterns and structured values never match
        if compiled is None or kind.is_structured:
            return False
        return compiled.search(text_of(value)) is not None


__all__ = [
    "Evaluator",
    "NUMERIC_BOUND_TYPES",
    "SPECIAL_TYPES",
]
