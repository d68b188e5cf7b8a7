"""
Conversion of raw string values to typed values.

Every getter trims its input and returns a ``(value, default_used)`` pair.
``default_used`` is True when the input was blank or could not be parsed, in
which case the provided default is returned in place of a parsed value.

Example Usage:
    >>> get_as_int(" 42 ", 0)
    (42, False)

    >>> get_as_int("forty-two", 0)
    (0, True)

    >>> RawValue("1.5s").get_as_duration(timedelta(0))
    (datetime.timedelta(seconds=1, microseconds=500000), False)
"""

import math
import re
from datetime import timedelta

from .duration import InvalidDurationError, parse_duration

_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)
_INF_RE = re.compile(r"[+-]?inf(?:inity)?", re.IGNORECASE)

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def get_as_string(val: str, default: str) -> tuple[str, bool]:
    """
    Convert the input to a trimmed string.

    Args:
        val: Raw input value
        default: Value returned when the input is empty or whitespace

    Returns:
        Tuple of (parsed value or default, whether the default was used)
    """
    parsed = val.strip()
    if not parsed:
        return default, True
    return parsed, False


def get_as_int(val: str, default: int) -> tuple[int, bool]:
    """
    Convert the input to an integer.

    Only an optional sign followed by decimal digits is accepted, so "1.5",
    "1e3", "0x10" and "1_000" all fall back to the default.

    Args:
        val: Raw input value
        default: Value returned when the input is blank or not an integer

    Returns:
        Tuple of (parsed value or default, whether the default was used)
    """
    val = val.strip()
    if not _INT_RE.fullmatch(val):
        return default, True
    return int(val), False


def get_as_bool(val: str, default: bool) -> tuple[bool, bool]:
    """
    Convert the input to a boolean.

    Accepted values are "1", "t", "T", "TRUE", "true", "True" and
    "0", "f", "F", "FALSE", "false", "False".

    Args:
        val: Raw input value
        default: Value returned when the input is blank or not a boolean

    Returns:
        Tuple of (parsed value or default, whether the default was used)
    """
    val = val.strip()
    if val in _TRUE_VALUES:
        return True, False
    if val in _FALSE_VALUES:
        return False, False
    return default, True


def get_as_float(val: str, default: float) -> tuple[float, bool]:
    """
    Convert the input to a float.

    Decimal and scientific notation are accepted, as well as "inf",
    "infinity" and "nan" in any case. Finite literals that overflow to
    infinity are rejected.

    Args:
        val: Raw input value
        default: Value returned when the input is blank or not a float

    Returns:
        Tuple of (parsed value or default, whether the default was used)
    """
    val = val.strip()
    if not _FLOAT_RE.fullmatch(val):
        return default, True

    parsed = float(val)
    if math.isinf(parsed) and not _INF_RE.fullmatch(val):
        return default, True
    return parsed, False


def get_as_duration(val: str, default: timedelta) -> tuple[timedelta, bool]:
    """
    Convert the input to a duration.

    Valid strings are those accepted by
    :func:`~appcommon.params.duration.parse_duration`, such as "300ms",
    "1.5h" or "2h45m".

    Args:
        val: Raw input value
        default: Value returned when the input is blank or not a duration

    Returns:
        Tuple of (parsed value or default, whether the default was used)
    """
    val = val.strip()
    if not val:
        return default, True

    try:
        return parse_duration(val), False
    except InvalidDurationError:
        return default, True


class RawValue(str):
    """
    Untyped string value, such as a command-line option value.

    Exposes the module getters as methods so callers can coerce a value
    in place: ``options["port"].raw.get_as_int(8080)``.
    """

    __slots__ = ()

    def get_as_string(self, default: str) -> tuple[str, bool]:
        return get_as_string(self, default)

    def get_as_int(self, default: int) -> tuple[int, bool]:
        return get_as_int(self, default)

    def get_as_bool(self, default: bool) -> tuple[bool, bool]:
        return get_as_bool(self, default)

    def get_as_float(self, default: float) -> tuple[float, bool]:
        return get_as_float(self, default)

    def get_as_duration(self, default: timedelta) -> tuple[timedelta, bool]:
        return get_as_duration(self, default)


# Public API
__all__ = [
    "RawValue",
    "get_as_bool",
    "get_as_duration",
    "get_as_float",
    "get_as_int",
    "get_as_string",
]
