"""
Command-line dispatch framework.

This module provides:
- Command base class and option definitions
- Option parsing with error collection
- Command registry
- Built-in help command
- Dispatcher mapping command outcomes to exit statuses
"""

from .bootstrap import Bootstrap, bootstrap, parse_cmd_input, run_command
from .command import Command
from .constants import HELP_COMMAND_ID, STATUS_ERR, STATUS_OK
from .errors import (
    CliError,
    CommandError,
    CommandExecError,
    CommandFaultError,
    DupCommandError,
    DuplicateOptionError,
    InvalidOptionsError,
    OptionError,
    RequiredOptionError,
    UnknownCommandError,
)
from .help import HelpCommand, chunk_description
from .options import (
    Option,
    OptionDefinition,
    OptionDefinitionMap,
    OptionMap,
    build_options_from,
    definitions,
)
from .output import TabWriter
from .registry import CommandRegistry

__all__ = [
    # Commands
    "Command",
    "CommandRegistry",
    "HelpCommand",
    "chunk_description",
    # Options
    "Option",
    "OptionDefinition",
    "OptionDefinitionMap",
    "OptionMap",
    "build_options_from",
    "definitions",
    # Dispatch
    "Bootstrap",
    "bootstrap",
    "parse_cmd_input",
    "run_command",
    "STATUS_OK",
    "STATUS_ERR",
    "HELP_COMMAND_ID",
    # Output
    "TabWriter",
    # Errors
    "CliError",
    "CommandError",
    "CommandExecError",
    "CommandFaultError",
    "DupCommandError",
    "DuplicateOptionError",
    "InvalidOptionsError",
    "OptionError",
    "RequiredOptionError",
    "UnknownCommandError",
]
