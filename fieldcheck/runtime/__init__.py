"""Runtime helpers: the process-wide validation facade."""

from . import facade
from .facade import get_error_list, get_last_error, get_last_error_code, validate

__all__ = [
    "facade",
    "get_error_list",
    "get_last_error",
    "get_last_error_code",
    "validate",
]
