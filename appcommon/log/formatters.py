"""
Log formatter for the logging system.

Renders records as::

    [12:34:56,789] [I] command finished [command:greet] [/appcommon/cli]
"""

import logging
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants


def _format_extra(record: logging.LogRecord) -> str:
    """Format extra fields as sorted ``[key:value]`` pairs."""
    extra: dict[str, Any] | None = getattr(record, "__appcommon__extra", None)
    if not extra:
        return ""

    parts = []
    for key in sorted(extra):
        value = extra[key]
        if isinstance(value, BaseException):
            value = value.__class__.__name__
        parts.append(f"[{key}:{value}]")
    return " " + " ".join(parts)


class LogFormatter(logging.Formatter):
    """
    Formatter with optional microsecond timestamps and level colors.
    """

    def __init__(self, config: LogConfig) -> None:
        """
        Initialize the formatter.

        Args:
            config: Logger configuration
        """
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp, adding microseconds when configured."""
        s = super().formatTime(record, datefmt)
        if self._config.micros:
            micros = int((record.created % 1) * 1000000) % 1000
            s += f".{micros:03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        """Format the record with extra fields and logger name."""
        line = super().format(record)
        exc_text = ""
        # Exception text is rendered after the metadata, on its own lines
        if record.exc_text and line.endswith(record.exc_text):
            head = line[: -len(record.exc_text)].rstrip("\n")
            exc_text = "\n" + record.exc_text
            line = head

        line += _format_extra(record) + f" [{record.name}]"
        if self._config.colors:
            line = ColorManager.colorize(line, record.levelno)
        return line + exc_text
