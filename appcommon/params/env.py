"""
Typed access to environment variables.

Each getter looks the variable up in ``os.environ`` and applies the matching
:mod:`appcommon.params.strconv` conversion. An unset variable is reported
exactly like a blank one: ``(default, True)``.

Example:
    port, default_used = get_env_as_int("APP_PORT", 8080)
"""

import os
from datetime import timedelta

from . import strconv


def get_env_as_string(env_name: str, default: str) -> tuple[str, bool]:
    """Return the trimmed value of *env_name*, or *default* if unset or blank."""
    val = os.environ.get(env_name)
    if val is None:
        return default, True
    return strconv.get_as_string(val, default)


def get_env_as_int(env_name: str, default: int) -> tuple[int, bool]:
    """Return *env_name* as an integer, or *default* if unset or invalid."""
    val = os.environ.get(env_name)
    if val is None:
        return default, True
    return strconv.get_as_int(val, default)


def get_env_as_bool(env_name: str, default: bool) -> tuple[bool, bool]:
    """
    Return *env_name* as a boolean, or *default* if unset or invalid.

    Accepted values are the same as for
    :func:`~appcommon.params.strconv.get_as_bool`.
    """
    val = os.environ.get(env_name)
    if val is None:
        return default, True
    return strconv.get_as_bool(val, default)


def get_env_as_float(env_name: str, default: float) -> tuple[float, bool]:
    """Return *env_name* as a float, or *default* if unset or invalid."""
    val = os.environ.get(env_name)
    if val is None:
        return default, True
    return strconv.get_as_float(val, default)


def get_env_as_duration(env_name: str, default: timedelta) -> tuple[timedelta, bool]:
    """Return *env_name* as a duration, or *default* if unset or invalid."""
    val = os.environ.get(env_name)
    if val is None:
        return default, True
    return strconv.get_as_duration(val, default)


# Public API
__all__ = [
    "get_env_as_bool",
    "get_env_as_duration",
    "get_env_as_float",
    "get_env_as_int",
    "get_env_as_string",
]
