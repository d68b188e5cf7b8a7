"""
Value coercion helpers.

Converts raw strings, environment variables and URL query parameters to
typed values. Every getter returns a ``(value, default_used)`` pair instead
of raising, so callers can apply defaults and still tell whether one was
used.
"""

from .duration import InvalidDurationError, duration_to_nanos, parse_duration
from .env import (
    get_env_as_bool,
    get_env_as_duration,
    get_env_as_float,
    get_env_as_int,
    get_env_as_string,
)
from .strconv import (
    RawValue,
    get_as_bool,
    get_as_duration,
    get_as_float,
    get_as_int,
    get_as_string,
)
from .url import QueryParams

__all__ = [
    # Raw values
    "RawValue",
    "get_as_string",
    "get_as_int",
    "get_as_bool",
    "get_as_float",
    "get_as_duration",
    # Environment
    "get_env_as_string",
    "get_env_as_int",
    "get_env_as_bool",
    "get_env_as_float",
    "get_env_as_duration",
    # URL query
    "QueryParams",
    # Durations
    "InvalidDurationError",
    "duration_to_nanos",
    "parse_duration",
]
