"""
Duration string parsing.

Parses signed duration strings made of one or more ``<number><unit>``
components into :class:`datetime.timedelta` values.

Example Usage:
    >>> parse_duration('1h30m')
    datetime.timedelta(seconds=5400)

    >>> parse_duration('1.5s')
    datetime.timedelta(seconds=1, microseconds=500000)

    >>> parse_duration('-300ms')
    datetime.timedelta(days=-1, seconds=86399, microseconds=700000)
"""

import re
from datetime import timedelta
from fractions import Fraction

from ..exceptions import ValidationError

# Time conversion constants, in nanoseconds
NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE

# Largest representable duration (signed 64-bit nanosecond count)
MAX_DURATION_NANOS = 2**63 - 1

_UNIT_NANOS = {
    "ns": 1,
    "us": NANOS_PER_MICROSECOND,
    "µs": NANOS_PER_MICROSECOND,  # micro sign
    "μs": NANOS_PER_MICROSECOND,  # greek small letter mu
    "ms": NANOS_PER_MILLISECOND,
    "s": NANOS_PER_SECOND,
    "m": NANOS_PER_MINUTE,
    "h": NANOS_PER_HOUR,
}

# A component is a decimal number followed by a unit. The unit is everything
# up to the next digit or dot and is checked against _UNIT_NANOS afterwards.
_COMPONENT = r"(\d+(?:\.\d*)?|\.\d+)([^\d.]+)"
_COMPONENT_RE = re.compile(_COMPONENT, re.ASCII)
_DURATION_RE = re.compile(rf"[-+]?(?:{_COMPONENT})+", re.ASCII)


class InvalidDurationError(ValidationError):
    """Raised when a duration string cannot be parsed."""

    def __init__(self, duration_str: object, reason: str = "invalid duration") -> None:
        self.duration_str = duration_str
        self.reason = reason
        super().__init__(f"{reason}: {duration_str!r}")


def _split_sign(duration_str: str) -> tuple[int, str]:
    """Split an optional leading sign from the duration body."""
    if duration_str[:1] in ("-", "+"):
        return (-1 if duration_str[0] == "-" else 1), duration_str[1:]
    return 1, duration_str


def _component_to_nanos(duration_str: str, value: str, unit: str) -> int:
    """
    Convert one ``<number><unit>`` component to nanoseconds.

    Fractional parts below one nanosecond are truncated.

    Raises:
        InvalidDurationError: If the unit is unknown
    """
    if unit not in _UNIT_NANOS:
        raise InvalidDurationError(duration_str, f"unknown unit {unit!r} in duration")

    if value.startswith("."):
        value = "0" + value
    if value.endswith("."):
        value += "0"

    return int(Fraction(value) * _UNIT_NANOS[unit])


def duration_to_nanos(duration_str: str) -> int:
    """
    Parse a duration string to a signed nanosecond count.

    Valid strings are a possibly signed sequence of decimal numbers, each
    with an optional fraction and a unit suffix, such as "300ms", "-1.5h"
    or "2h45m". Valid units are "ns", "us" (or "µs"), "ms", "s", "m", "h".
    A bare "0" is accepted without a unit.

    Args:
        duration_str: Duration string to parse

    Returns:
        Duration in nanoseconds

    Raises:
        InvalidDurationError: If the string cannot be parsed or overflows
    """
    if not isinstance(duration_str, str) or not duration_str:
        raise InvalidDurationError(duration_str)

    sign, body = _split_sign(duration_str)
    if body == "0":
        return 0

    if not _DURATION_RE.fullmatch(duration_str):
        if body and not re.search(r"[^\d.]", body):
            raise InvalidDurationError(duration_str, "missing unit in duration")
        raise InvalidDurationError(duration_str)

    total = 0
    for match in _COMPONENT_RE.finditer(body):
        total += _component_to_nanos(duration_str, match.group(1), match.group(2))
        if total > MAX_DURATION_NANOS:
            raise InvalidDurationError(duration_str)

    return sign * total


def parse_duration(duration_str: str) -> timedelta:
    """
    Parse a duration string to a :class:`~datetime.timedelta`.

    Precision below one microsecond is truncated toward zero.

    Raises:
        InvalidDurationError: If the string cannot be parsed

    Examples:
        >>> parse_duration('2h45m')
        datetime.timedelta(seconds=9900)
        >>> parse_duration('0')
        datetime.timedelta(0)
    """
    nanos = duration_to_nanos(duration_str)
    sign = -1 if nanos < 0 else 1
    return timedelta(microseconds=sign * (abs(nanos) // NANOS_PER_MICROSECOND))


# Public API
__all__ = [
    "InvalidDurationError",
    "duration_to_nanos",
    "parse_duration",
]
