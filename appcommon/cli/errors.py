"""
Error classes for the appcommon.cli package.

Parse-time option errors are collected by the option parser rather than
raised; every other error here is raised and reaches the dispatcher, which
turns it into an exit status.
"""

from collections.abc import Sequence
from typing import Any

from ..exceptions import CommonError


class CliError(CommonError):
    """Base exception for appcommon.cli package."""

    pass


class DupCommandError(CliError):
    """Raised when attempting to register a duplicate command."""

    def __init__(self, command: Any) -> None:
        self.command = command
        super().__init__(f"command '{command.id}' is already registered")


class UnknownCommandError(CliError):
    """Raised when the requested command is not registered."""

    def __init__(self, cmd_id: str) -> None:
        self.cmd_id = cmd_id
        super().__init__(f"The command {cmd_id} does not exist")


class OptionError(CliError):
    """Base class for errors found while parsing command options."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class DuplicateOptionError(OptionError):
    """An option was given more than once."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"option '{name}' is defined twice")


class RequiredOptionError(OptionError):
    """A required option is missing or has an empty value."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"option '{name}' is required")


class CommandError(CliError):
    """
    Raised by command implementations to report an ordinary failure.

    Example:
        def execute(self, options, out):
            if not path.exists():
                raise CommandError(f"file {path} not found")
    """

    pass


def _failed_message(cmd_id: str, reason: str) -> str:
    return f"Failed to execute command {cmd_id} with error: {reason}"


class InvalidOptionsError(CliError):
    """Raised when option parsing produced errors; the command is not run."""

    def __init__(self, cmd_id: str, errors: Sequence[OptionError]) -> None:
        self.cmd_id = cmd_id
        self.errors = list(errors)
        super().__init__(
            _failed_message(cmd_id, "\n".join(str(e) for e in self.errors))
        )


class CommandExecError(CliError):
    """Raised when a command reports a failure through CommandError."""

    def __init__(self, cmd_id: str, cause: CommandError) -> None:
        self.cmd_id = cmd_id
        self.cause = cause
        super().__init__(_failed_message(cmd_id, str(cause)))


class CommandFaultError(CliError):
    """
    Raised when a command crashes with an unexpected exception.

    The message is the fault's own message so users see what went wrong
    without a traceback.
    """

    def __init__(self, cmd_id: str, cause: Exception) -> None:
        self.cmd_id = cmd_id
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)
