# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide convenience functions for one-off validations.

Every configuring function and :func:`validate` start from a brand new
RuleSet, which becomes the process-wide current instance. No configuration is
retained from one call to the next; to combine settings, chain on the returned
instance::

    from fieldcheck.runtime import facade

    facade.set_max_bound(10).set_pattern("^[a-z]+$").validate("hello")
    facade.get_last_error_code()   # reads the instance the chain used

The accessors read the current instance without replacing it.

The current instance is module state and is not guarded by a lock. Callers
that validate from several threads must use their own RuleSet instances.
"""

from __future__ import annotations

from typing import Any, List, Optional

from ..validation import NO_ERROR, RuleSet, Violation

_current: Optional[RuleSet] = None


def _fresh() -> RuleSet:
    global _current
    _current = RuleSet()
    return _current


def get_rule_set() -> Optional[RuleSet]:
    """Return the current process-wide RuleSet, if any call created one."""

    return _current


def reset() -> None:
    """Forget the current process-wide RuleSet."""

    global _current
    _current = None


def set_allow_null(allow: bool = True) -> RuleSet:
    return _fresh().set_allow_null(allow)


def set_allow_empty(allow: bool = True) -> RuleSet:
    return _fresh().set_allow_empty(allow)


def set_min_bound(bound: float) -> RuleSet:
    return _fresh().set_min_bound(bound)


def set_max_bound(bound: float) -> RuleSet:
    return _fresh().set_max_bound(bound)


def set_pattern(pattern: str) -> RuleSet:
    return _fresh().set_pattern(pattern)


def set_format_type(name: str) -> RuleSet:
    return _fresh().set_format_type(name)


def set_primitive_type(name: str) -> RuleSet:
    return _fresh().set_primitive_type(name)


def set_date_format(date_format: str) -> RuleSet:
    return _fresh().set_date_format(date_format)


def clear_allow_null() -> RuleSet:
    return _fresh().clear_allow_null()


def clear_allow_empty() -> RuleSet:
    return _fresh().clear_allow_empty()


def clear_min_bound() -> RuleSet:
    return _fresh().clear_min_bound()


def clear_max_bound() -> RuleSet:
    return _fresh().clear_max_bound()


def clear_pattern() -> RuleSet:
    return _fresh().clear_pattern()


def clear_format_type() -> RuleSet:
    return _fresh().clear_format_type()


def clear_primitive_type() -> RuleSet:
    return _fresh().clear_primitive_type()


def clear_date_format() -> RuleSet:
    return _fresh().clear_date_format()


def clear_errors() -> None:
    _fresh().clear_errors()


def clear_all() -> None:
    _fresh().clear_all()


def clear_non_error_state() -> None:
    _fresh().clear_non_error_state()


def validate(value: Any, display_label: Optional[str] = None) -> bool:
    """Validate *value* against a fresh, unconfigured RuleSet."""

    return _fresh().validate(value, display_label)


def get_last_error() -> str:
    return _current.last_error_message if _current is not None else ""


def get_last_error_code() -> int:
    return _current.last_error_code if _current is not None else NO_ERROR


def get_error_list() -> List[Violation]:
    return _current.errors if _current is not None else []


__all__ = [
    "get_rule_set",
    "reset",
    "set_allow_null",
    "set_allow_empty",
    "set_min_bound",
    "set_max_bound",
    "set_pattern",
    "set_format_type",
    "set_primitive_type",
    "set_date_format",
    "clear_allow_null",
    "clear_allow_empty",
    "clear_min_bound",
    "clear_max_bound",
    "clear_pattern",
    "clear_format_type",
    "clear_primitive_type",
    "clear_date_format",
    "clear_errors",
    "clear_all",
    "clear_non_error_state",
    "validate",
    "get_last_error",
    "get_last_error_code",
    "get_error_list",
]
