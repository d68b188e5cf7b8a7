"""
Color management for the logging system.

This module provides ANSI color codes and the color selection logic for
log levels.
"""

import logging

from .constants import LogConstants


class ColorManager:
    """Centralized ANSI color code management."""

    # Basic ANSI color escape sequences
    RED = "\x1b[31"
    GREEN = "\x1b[32"
    YELLOW = "\x1b[33"
    MAGENTA = "\x1b[35"
    CYAN = "\x1b[36"
    DEFAULT = "\x1b[38"

    # Reset sequence to clear formatting
    RESET = LogConstants.RESET

    COLORS: dict[int, str] = {
        LogConstants.CUSTOM_LEVELS["TRACE"]: "\x1b[38;5;24",  # Blue-gray
        logging.DEBUG: "\x1b[38;5;32",  # Green
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: MAGENTA,
    }

    @staticmethod
    def get_color_for_level(level: int) -> str:
        """
        Get the color for a log level.

        Args:
            level: Log level number

        Returns:
            Color escape sequence, the default color for unknown levels
        """
        return ColorManager.COLORS.get(level, ColorManager.DEFAULT)

    @staticmethod
    def colorize(text: str, level: int) -> str:
        """Wrap *text* in the color of *level* followed by a reset."""
        return f"{ColorManager.get_color_for_level(level)}m{text}{ColorManager.RESET}"
