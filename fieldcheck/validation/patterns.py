# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Pattern normalization and compilation.

Patterns are written in delimited ``/body/flags`` form. Callers may pass any of
the shorthand forms below and :func:`normalize_pattern` turns them into the
canonical form:

- ``body``
- ``/body`` or ``body/``
- ``/body/`` or ``/body/flags``
- ``body/flags``

Recognized flags are ``i`` (ignore case), ``m`` (multiline), ``s`` (dot matches
newline), ``x`` (verbose) and ``e``. The ``e`` flag has no equivalent in
Python's ``re`` module and is accepted but ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Pattern, Tuple

logger = logging.getLogger(__name__)

FLAG_CHARS = "imsxe"
EMPTY_PATTERN = "//"

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}

_CLOSING_DELIMITER = re.compile(r"/[imsxe]*$")
_UNESCAPED_SLASH = re.compile(r"(?<!\\)((?:\\\\)*)/")


def _is_escaped(text: str, index: int) -> bool:
    """Whether the character at *index* is preceded by an odd run of backslashes."""

    count = 0
    position = index - 1
    while position >= 0 and text[position] == "\\":
        count += 1
        position -= 1
    return count % 2 == 1


def normalize_pattern(pattern: str) -> str:
    """Return *pattern* in canonical ``/body/flags`` form.

    Normalizing an already normalized pattern returns it unchanged.
    """

    if not pattern.startswith("/"):
        pattern = "/" + pattern
    if pattern == "/":
        pattern = EMPTY_PATTERN

    match = _CLOSING_DELIMITER.search(pattern, 1)
    if match is None:
        pattern += "/"
    elif _is_escaped(pattern, match.start()):
        # an escaped closing delimiter becomes an escaped backslash followed
        # by the delimiter
        pattern = pattern[: match.start()] + "\\" + pattern[match.start():]

    body, flags = split_pattern(pattern)
    body = _UNESCAPED_SLASH.sub(r"\1\\/", body)
    flags = "".join(dict.fromkeys(flag for flag in flags if flag in FLAG_CHARS))
    return f"/{body}/{flags}"


def split_pattern(normalized: str) -> Tuple[str, str]:
    """Split a delimited pattern into its body and flag string."""

    match = _CLOSING_DELIMITER.search(normalized, 1)
    if not normalized.startswith("/") or match is None:
        raise ValueError(f"Pattern {normalized!r} is not in /body/flags form")
    return normalized[1 : match.start()], normalized[match.start() + 1 :]


def compile_pattern(normalized: str) -> Pattern[str]:
    """Compile a normalized pattern with Python's ``re`` module.

    Raises:
        re.error: If the pattern body is not a valid regular expression.
    """

    body, flags = split_pattern(normalized)
    re_flags = 0
    for flag in flags:
        if flag == "e":
            logger.warning("Pattern flag 'e' is not supported and is ignored: %s", normalized)
            continue
        re_flags |= _FLAG_MAP[flag]
    return re.compile(body, re_flags)


__all__ = [
    "EMPTY_PATTERN",
    "FLAG_CHARS",
    "compile_pattern",
    "normalize_pattern",
    "split_pattern",
]
