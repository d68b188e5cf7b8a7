"""
Logger class for the logging system.

This module provides an enhanced logger with a custom TRACE level,
pre-populated extra fields and complete disable support.
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


class Logger(logging.Logger):
    """
    Logger used by appcommon components such as the command dispatcher.

    Adds to the standard logger:
    - Pre-populated extra fields merged into every record
    - A custom trace method
    - Handler delegation for derived "view" loggers
    - Complete disable support (``LogConfig(level=False)``)
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        extra: dict[str, Any] | None = None,
    ):
        """
        Initialize the logger.

        Args:
            name: Logger name
            config: Logger configuration, a default LogConfig if None
            extra: Fields rendered as [key:value] on every record of this logger
        """
        # logging.getLogger() may construct us without a config
        if config is None:
            config = LogConfig.from_params("info")

        if config.level is False:
            super().__init__(name, logging.CRITICAL + 1)
            self._logging_disabled = True
        else:
            super().__init__(name, config.level)
            self._logging_disabled = False

        self._config = config
        self._extra = extra or {}
        # Owner of the handlers when this is a derived view logger
        self._root_logger: Logger | None = None

    @property
    def config(self) -> LogConfig:
        """Get logger configuration."""
        return self._config

    @property
    def disabled(self) -> bool:  # type: ignore[override]
        """Check if logging is disabled."""
        return getattr(self, "_logging_disabled", False)

    @disabled.setter
    def disabled(self, value: bool) -> None:
        """Set the disabled state."""
        self._logging_disabled = value

    def get_level(self) -> int | bool:
        """Get configured log level."""
        return self._config.level

    def makeRecord(
        self,
        name: str,
        level: int,
        fn: str,
        lno: int,
        msg: object,
        args: Any,
        exc_info: Any,
        func: str | None = None,
        extra: dict[str, Any] | None = None,
        sinfo: str | None = None,
    ) -> logging.LogRecord:
        """Create log record carrying the merged extra fields."""
        merged_extra = {**self._extra, **(extra or {})}
        record = super().makeRecord(
            name, level, fn, lno, msg, args, exc_info, func=func, sinfo=sinfo
        )
        # Use setattr to avoid Python name mangling with __ prefix
        setattr(record, "__appcommon__extra", merged_extra)
        return record

    def trace(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log a message below DEBUG, such as dispatcher internals.

        Args:
            msg: Log message
            *args: Message format arguments
            **kwargs: Keyword arguments of Logger.log, e.g. extra
        """
        if self._logging_disabled:
            return
        trace_level = LogConstants.CUSTOM_LEVELS["TRACE"]
        if self.isEnabledFor(trace_level):
            self._log(trace_level, msg, args, **kwargs)

    def callHandlers(self, record: logging.LogRecord) -> None:
        """
        Hand a record to the handlers of this logger.

        Derived "view" loggers delegate to the root logger's handlers instead
        of owning handlers of their own.
        """
        if self._root_logger is not None:
            for handler in self._root_logger.handlers:
                if record.levelno >= handler.level:
                    handler.handle(record)
        else:
            super().callHandlers(record)
