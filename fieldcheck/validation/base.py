# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core data structures shared by the rule set and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List


class ErrorCode(IntEnum):
    """Numeric codes recorded for each failed check.

    The values are part of the public contract and never change.
    """

    EXCEEDS_MAXIMUM = 1
    EMPTY = 2
    BELOW_MINIMUM = 3
    INVALID_FORMAT = 4
    NOT_A_NUMBER = 5
    TYPE_MISMATCH = 6
    INVALID_DATE = 7
    NULL = 8


NO_ERROR = 0


@dataclass(frozen=True)
class Violation:
    """A single recorded check failure."""

    code: int
    message: str

    def as_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message}


@dataclass
class ValidationResult:
    """Snapshot of a rule set's error state."""

    success: bool = False
    last_error_code: int = NO_ERROR
    last_error_message: str = ""
    errors: List[Violation] = field(default_factory=list)

    @property
    def codes(self) -> List[int]:
        return [violation.code for violation in self.errors]

    def __str__(self) -> str:
        if self.success:
            return "OK"
        if not self.errors:
            return "FAIL"
        lines = ["FAIL"]
        for violation in self.errors:
            lines.append(f"  [{violation.code}] {violation.message}")
        return "\n".join(lines)


__all__ = [
    "ErrorCode",
    "NO_ERROR",
    "Violation",
    "ValidationResult",
]
