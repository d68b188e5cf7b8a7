"""
Logging with a custom TRACE level, structured extra fields and colored output.

This module extends Python's standard logging with:
- A custom TRACE log level for detailed debugging
- Pre-populated extra fields rendered as ``[key:value]`` pairs
- Colored console output with ANSI escape sequences
- Complete logging disable functionality (level=False or level="false")
- Configuration from parameters, dictionaries or environment variables
"""

import logging

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

# Define custom log level for more granular debugging
logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]

LogConstants.LEVEL_NAMES.update({"trace": logging.TRACE})  # type: ignore[attr-defined]


def resolve_level(s: str | int | bool) -> int | bool:
    """
    Resolve log level from string, numeric value, or boolean.

    Args:
        s: Log level as string name, numeric value, or False to disable logging

    Returns:
        Numeric log level or False to disable logging

    Raises:
        InvalidLogLevelError: If the log level is invalid
    """
    if isinstance(s, bool):
        return s

    if str(s).isnumeric():
        return int(s)

    if s in LogConstants.LEVEL_NAMES:
        return LogConstants.LEVEL_NAMES[s]

    raise InvalidLogLevelError(s)


def create_lg(
    name: str,
    level: str | int | bool = "info",
    micros: bool = False,
    colors: bool = True,
) -> Logger:
    """
    Create a logger with the specified configuration.

    Convenience function that wraps LoggerFactory.create() with simplified
    parameter passing.

    Example:
        >>> lg = create_lg("/myapp", "debug", colors=False)
    """
    config = LogConfig.from_params(level, micros=micros, colors=colors)
    return LoggerFactory.create(name, config)


def derive_lg(lg: Logger, tags: str | list[str]) -> Logger:
    """
    Derive a logger with tags from a parent logger.

    Example:
        >>> parent_lg = create_lg("/myapp", "info")
        >>> child_lg = derive_lg(parent_lg, "db")
    """
    return LoggerFactory.derive(lg, tags)


__all__ = [
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "create_lg",
    "derive_lg",
    "resolve_level",
]
