# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Value model used by the evaluator.

Every value handed to ``RuleSet.validate`` is classified into a
:class:`ValueKind`. The kind names follow the ``gettype`` spelling used by
primitive-type rules (``integer``, ``double``, ``NULL`` ...), so a configured
primitive type can be compared against the kind directly.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Set
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union


class ValueKind(str, Enum):
    """Runtime primitive kind of a validated value."""

    NULL = "NULL"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        if value is None:
            return cls.NULL
        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, int):
            return cls.INTEGER
        if isinstance(value, (float, Decimal)):
            return cls.DOUBLE
        if isinstance(value, (str, bytes, bytearray)):
            return cls.STRING
        if isinstance(value, (list, tuple, Set)):
            return cls.ARRAY
        return cls.OBJECT

    @property
    def is_structured(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


_NUMERIC_LITERAL = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$")

# Below the smallest int-to-str digit limit the interpreter accepts (640).
_INT_CHUNK_DIGITS = 600


def format_number(number: Union[int, float]) -> str:
    """Render a number the way messages print it (``5.0`` becomes ``5``)."""

    if isinstance(number, float) and math.isfinite(number) and number.is_integer():
        return str(int(number))
    return str(number)


def _int_text(value: int) -> str:
    try:
        return str(value)
    except ValueError:
        # beyond sys.get_int_max_str_digits(); convert in fixed-size chunks
        return _chunked_int_text(value)


def _chunked_int_text(value: int) -> str:
    base = 10 ** _INT_CHUNK_DIGITS
    remaining = abs(value)
    chunks = []
    while remaining:
        remaining, chunk = divmod(remaining, base)
        chunks.append(chunk)
    parts = [str(chunks[-1])]
    parts.extend(str(chunk).zfill(_INT_CHUNK_DIGITS) for chunk in reversed(chunks[:-1]))
    return ("-" if value < 0 else "") + "".join(parts)


def text_of(value: Any) -> str:
    """Return the textual form of *value* used for length and pattern checks."""

    kind = ValueKind.of(value)
    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "1" if value else ""
    if kind is ValueKind.INTEGER:
        return _int_text(value)
    if kind is ValueKind.DOUBLE:
        return format_number(float(value)) if isinstance(value, float) else str(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if kind.is_structured:
        return ""
    return str(value)


def is_empty(value: Any) -> bool:
    """Whether *value* counts as empty.

    Empty values are ``None``, ``False``, numeric zero, ``""``, ``"0"`` and
    empty sequences or mappings.
    """

    if value is None or value is False:
        return True
    if isinstance(value, Decimal):
        return not value.is_nan() and value.is_zero()
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value in ("", "0")
    if isinstance(value, (bytes, bytearray)):
        return value in (b"", b"0")
    if isinstance(value, (list, tuple, Set, Mapping)):
        return len(value) == 0
    return False


def is_numeric(value: Any) -> bool:
    """Whether *value* is a number or a numeric literal string.

    Every ``float`` and ``Decimal`` counts, including ``nan`` and infinities.
    Strings must be decimal literals, so ``"nan"`` and ``"inf"`` do not.
    """

    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, (str, bytes, bytearray)):
        return bool(_NUMERIC_LITERAL.match(text_of(value)))
    return False


def numeric_value(value: Any) -> Optional[float]:
    """Return the number *value* stands for, or ``None`` if it has none.

    Integers too large for a float come back as signed infinity.
    """

    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, Decimal):
        return math.nan if value.is_nan() else float(value)
    if isinstance(value, float):
        return value
    if is_numeric(value):
        return float(text_of(value).strip())
    return None


def length_of(value: Any) -> int:
    """Length used by bound checks outside numeric mode.

    Text is measured in UTF-8 bytes, so ``"é"`` has length 2. Collections are
    measured by their number of elements.
    """

    if isinstance(value, (bytes, bytearray)):
        return len(value)
    if isinstance(value, (list, tuple, Set, Mapping)):
        return len(value)
    if isinstance(value, str):
        return _byte_length(value)
    return _byte_length(text_of(value))


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8", errors="surrogatepass"))


__all__ = [
    "ValueKind",
    "format_number",
    "text_of",
    "is_empty",
    "is_numeric",
    "numeric_value",
    "length_of",
]
