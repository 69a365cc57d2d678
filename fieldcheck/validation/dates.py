# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Date format handling for ``date`` rules.

Date formats use single-letter tokens
(``Y-m-d``, ``d-M-Y``, ``d/m/Y H:i`` ...). They are translated into
:func:`datetime.strptime` directives and the value must parse completely:
impossible dates (``2024-02-30``) and trailing data both fail.

Supported tokens:

=====  ===========================  =====  ==========================
token  meaning                      token  meaning
=====  ===========================  =====  ==========================
d, j   day of month                 H, G   hour, 24-hour clock
D      short weekday name           h, g   hour, 12-hour clock
l      full weekday name            i      minutes
m, n   month number                 s      seconds
M      short month name             u, v   micro / milliseconds
F      full month name              a, A   am / pm
Y      four digit year              O, P   UTC offset
y      two digit year               T      time zone name
=====  ===========================  =====  ==========================

A backslash makes the next character literal. Any other letter is not
supported and makes every value fail the date check.
"""

from __future__ import annotations

import logging
from datetime import datetime
from functools import lru_cache
from typing import Any, Optional

from ..telemetry import record_config_degraded
from .values import ValueKind, text_of

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "Y-m-d"
CLEARED_DATE_FORMAT = "d-M-Y"

_DIRECTIVES = {
    "d": "%d",
    "j": "%d",
    "D": "%a",
    "l": "%A",
    "m": "%m",
    "n": "%m",
    "M": "%b",
    "F": "%B",
    "Y": "%Y",
    "y": "%y",
    "H": "%H",
    "G": "%H",
    "h": "%I",
    "g": "%I",
    "i": "%M",
    "s": "%S",
    "u": "%f",
    "v": "%f",
    "a": "%p",
    "A": "%p",
    "O": "%z",
    "P": "%z",
    "T": "%Z",
}


class DateFormatError(ValueError):
    """Raised when a date format contains a token that cannot be translated."""


@lru_cache(maxsize=64)
def translate_date_format(date_format: str) -> str:
    """Translate a token-style date format into a ``strptime`` format string."""

    parts = []
    escaped = False
    for char in date_format:
        if escaped:
            parts.append("%%" if char == "%" else char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _DIRECTIVES:
            parts.append(_DIRECTIVES[char])
        elif char.isalpha():
            raise DateFormatError(f"Unsupported date format token {char!r} in {date_format!r}")
        elif char == "%":
            parts.append("%%")
        else:
            parts.append(char)
    if escaped:
        raise DateFormatError(f"Date format {date_format!r} ends with a dangling escape")
    return "".join(parts)


def parse_date(value: Any, date_format: str) -> Optional[datetime]:
    """Parse *value* strictly against *date_format*.

    Returns ``None`` when the value does not parse or the format is unusable.
    """

    kind = ValueKind.of(value)
    if kind.is_structured or kind is ValueKind.NULL:
        return None

    try:
        directive = translate_date_format(date_format)
    except DateFormatError as exc:
        logger.warning("Date check cannot run: %s", exc)
        record_config_degraded("date_format")
        return None

    try:
        return datetime.strptime(text_of(value), directive)
    except ValueError:
        return None


def is_valid_date(value: Any, date_format: str) -> bool:
    return parse_date(value, date_format) is not None


__all__ = [
    "CLEARED_DATE_FORMAT",
    "DEFAULT_DATE_FORMAT",
    "DateFormatError",
    "is_valid_date",
    "parse_date",
    "translate_date_format",
]
