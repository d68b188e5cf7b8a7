"""
Factory for creating and configuring loggers.

This module creates loggers with a consistent handler and formatter setup and
registers them with the standard logging manager so repeated requests for the
same name return the same logger.
"""

import logging
import sys
from typing import Any, TextIO, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create_root(config: LogConfig, logger_class: type[Logger] = Logger) -> Logger:
        """
        Create a root logger with the specified configuration.

        Example:
            >>> config = LogConfig.from_params(level="info", colors=False)
            >>> lg = LoggerFactory.create_root(config)
            >>> lg.info("Application started")
            [12:34:56,789] [I] Application started [/]
        """
        return LoggerFactory.create("/", config, logger_class)

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        """Return the logger registered under *name*, if it is one of ours."""
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            existing.trace("logger already exists", extra={"logger": name})
            return existing
        return None

    @staticmethod
    def _register(lg: Logger) -> None:
        """Register *lg* with the logging manager so lookups find it."""
        logging.root.manager.loggerDict[lg.name] = lg

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        logger_class: type[Logger] = Logger,
        extra: dict[str, Any] | None = None,
        stream: TextIO | None = None,
    ) -> Logger:
        """
        Create a logger with the specified configuration.

        Loggers write to stderr unless another stream is given, keeping
        stdout free for command output.

        Args:
            name: Logger name
            config: Logger configuration
            logger_class: Logger class to use
            extra: Pre-populated extra fields to include in all log records
            stream: Output stream for the handler (default: sys.stderr)

        Returns:
            Configured logger instance, or the existing one for *name*
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        lg = logger_class(name, config, extra)
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(LogFormatter(config))
        lg.addHandler(handler)
        lg.propagate = False
        lg.parent = logging.root

        LoggerFactory._register(lg)
        lg.trace(
            "created logger",
            extra={"level": logging.getLevelName(cast(int, lg.level))},
        )
        return lg

    @staticmethod
    def derive(parent: Logger, tags: str | list[str]) -> Logger:
        """
        Derive a "view" logger that delegates to the root's handlers.

        Examples:
            >>> parent = LoggerFactory.create_root(config)  # name: "/"
            >>> LoggerFactory.derive(parent, "request").name
            '/request'
            >>> parent = LoggerFactory.create("/appcommon", config)
            >>> LoggerFactory.derive(parent, ["cli", "help"]).name
            '/appcommon/cli/help'

        Args:
            parent: Parent logger instance
            tags: Single tag string OR list of tag strings to form hierarchy

        Returns:
            Derived logger instance sharing the parent's level
        """
        if isinstance(tags, str):
            tags = [tags]

        prefix = parent.name if parent.name == "/" else parent.name + "/"
        name = prefix + "/".join(tags)

        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        root = parent._root_logger if parent._root_logger else parent
        lg = parent.__class__(name, parent.config)
        lg.disabled = parent.disabled
        lg._root_logger = root
        lg.parent = parent
        lg.propagate = False

        LoggerFactory._register(lg)
        lg.trace("derived logger", extra={"root": root.name})
        return lg
