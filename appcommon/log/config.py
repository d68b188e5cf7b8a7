"""
Configuration for the logging system.

This module provides the immutable configuration class shared by the logger,
the formatter and the factory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..params.env import get_env_as_bool, get_env_as_string
from .constants import LogConstants


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable logger configuration.

    ``level`` is a numeric log level, or ``False`` to disable logging
    entirely.
    """

    level: int | bool = logging.INFO
    micros: bool = False
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        from .exceptions import InvalidLogLevelError

        if isinstance(level, bool):
            return False if not level else logging.INFO
        elif isinstance(level, str):
            if level.isnumeric():
                return int(level)
            elif level.lower() in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[level.lower()]
            else:
                raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(
        cls,
        level: str | int | bool,
        micros: bool = False,
        colors: bool = True,
    ) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            micros: Whether to show microsecond precision
            colors: Whether to enable colored output

        Returns:
            LogConfig instance

        Raises:
            InvalidLogLevelError: If level is not a known level name
        """
        return cls(level=cls._resolve_level(level), micros=micros, colors=colors)

    @staticmethod
    def _navigate_to_section(config_dict: dict, section: str) -> dict:
        """Navigate to specified section in config dict."""
        current: Any = config_dict
        for part in section.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return {}
        return current if isinstance(current, dict) else {}

    @classmethod
    def from_config(cls, config_dict: dict, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary
            section: Dotted path of the section to use (default: "logging")

        Returns:
            LogConfig instance

        Example:
            config = {"cli": {"logging": {"level": "debug", "colors": False}}}
            log_config = LogConfig.from_config(config, "cli.logging")
        """
        current = cls._navigate_to_section(config_dict, section)

        level = current.get("level", "info")
        micros = current.get("microseconds", current.get("micros", False))
        colors = current.get("colors", True)
        if isinstance(colors, dict):
            colors = colors.get("enabled", True)

        return cls.from_params(level=level, micros=micros, colors=colors)

    @classmethod
    def from_yaml(cls, path: str | Path, section: str = "logging") -> LogConfig:
        """
        Create LogConfig from a YAML configuration file.

        Args:
            path: Path to the YAML file
            section: Dotted path of the section to use (default: "logging")

        Returns:
            LogConfig instance

        Raises:
            LogError: If the file cannot be read or is not valid YAML

        Example:
            # etc/app.yaml
            #   logging:
            #     level: debug
            #     colors: false
            log_config = LogConfig.from_yaml("etc/app.yaml")
        """
        from .exceptions import LogError

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise LogError(
                f"failed to load logging config: {e}", path=str(path)
            ) from e

        return cls.from_config(data if isinstance(data, dict) else {}, section)

    @classmethod
    def from_env(cls, prefix: str = LogConstants.ENV_PREFIX) -> LogConfig:
        """
        Create LogConfig from environment variables.

        Reads ``<prefix>LOG_LEVEL`` (default "false", logging disabled),
        ``<prefix>LOG_MICROS`` and ``<prefix>LOG_COLORS``.

        Example:
            APPCOMMON_LOG_LEVEL=debug APPCOMMON_LOG_COLORS=false mytool greet
        """
        level, _ = get_env_as_string(f"{prefix}LOG_LEVEL", "false")
        micros, _ = get_env_as_bool(f"{prefix}LOG_MICROS", False)
        colors, _ = get_env_as_bool(f"{prefix}LOG_COLORS", True)
        return cls.from_params(level=level, micros=micros, colors=colors)
