"""
Constants and configuration values for the logging system.

This module contains the constant values used throughout the logging system,
including format strings, default values, and custom log level definitions.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format string
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution (custom levels are added on package import)
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "false": False,  # Special value to disable all logging
    }

    # Environment variable prefix for logging configuration
    ENV_PREFIX: str = "APPCOMMON_"

    # ANSI escape sequences
    RESET: str = "\x1b[0m"
