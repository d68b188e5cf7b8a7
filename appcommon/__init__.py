from importlib.metadata import PackageNotFoundError, version

from .cli import (
    Bootstrap,
    Command,
    CommandError,
    CommandRegistry,
    Option,
    OptionDefinition,
    OptionMap,
    bootstrap,
    definitions,
)
from .exceptions import CommonError, ConfigError, ValidationError
from .log import LogConfig, Logger, LoggerFactory, create_lg
from .params import QueryParams, RawValue, parse_duration

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("appcommon")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Command-line dispatch
    "Bootstrap",
    "Command",
    "CommandError",
    "CommandRegistry",
    "Option",
    "OptionDefinition",
    "OptionMap",
    "bootstrap",
    "definitions",
    # Logging
    "LogConfig",
    "Logger",
    "LoggerFactory",
    "create_lg",
    # Value coercion
    "QueryParams",
    "RawValue",
    "parse_duration",
    # Exceptions
    "CommonError",
    "ConfigError",
    "ValidationError",
]
