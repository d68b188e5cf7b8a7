"""
Command dispatch for CLI applications.

This module is the error boundary of the framework: it turns the process
arguments into a command invocation and every outcome into an exit status.

Invocation shape::

    <program> [--] <command-id> [--flag[=value] ...]

Example:
    registry = CommandRegistry([GreetCommand()])
    bootstrap(sys.argv[1:], registry)
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from ..log import LogConfig, Logger, LoggerFactory
from .command import Command
from .constants import (
    CMD_SEPARATOR,
    HELP_COMMAND_ID,
    LOGGER_NAME,
    STATUS_ERR,
    STATUS_OK,
)
from .errors import (
    CliError,
    CommandError,
    CommandExecError,
    CommandFaultError,
    DupCommandError,
    InvalidOptionsError,
    UnknownCommandError,
)
from .help import HelpCommand
from .options import build_options_from
from .registry import CommandRegistry

ExitFunc = Callable[[int], object]


def parse_cmd_input(args: Sequence[str]) -> tuple[str, list[str]]:
    """
    Split process arguments into a command id and raw option tokens.

    A leading ``--`` is dropped when more arguments follow it. The command id
    is trimmed; an empty argument list gives an empty id.

    Returns:
        Tuple of (command id, remaining argument tokens)
    """
    args = list(args)
    if len(args) > 1 and args[0] == CMD_SEPARATOR:
        args = args[1:]

    if not args:
        return "", []
    return args[0].strip(), args[1:]


def run_command(command: Command, raw_args: Sequence[str], out: TextIO) -> None:
    """
    Build the options of *command* and execute it.

    The command is not executed when option parsing reports errors. An
    exception raised while reading the command's option definitions is a
    fault like one raised by execute.

    Raises:
        InvalidOptionsError: If the options are invalid
        CommandExecError: If the command raised CommandError
        CommandFaultError: If the command raised any other exception
    """
    try:
        options, errors = build_options_from(raw_args, command)
    except Exception as e:
        raise CommandFaultError(command.id, e) from e

    if errors:
        raise InvalidOptionsError(command.id, errors)

    try:
        command.execute(options, out)
    except CommandError as e:
        raise CommandExecError(command.id, e) from e
    except Exception as e:
        raise CommandFaultError(command.id, e) from e


class Bootstrap:
    """
    Dispatches one command invocation per :meth:`run` call.

    Every run registers a fresh :class:`HelpCommand` listing the commands
    registered at that moment. A command registered by the user under the
    help id takes precedence and is left in place.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        out: TextIO | None = None,
        exit_func: ExitFunc | None = None,
        lg: Logger | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            registry: Commands available for dispatch
            out: Output stream for command output and errors
                (default: sys.stdout, looked up on every run)
            exit_func: Called with the exit status (default: sys.exit)
            lg: Logger (default: created from APPCOMMON_LOG_* variables)

        The default logger is registered by name on first use; later
        dispatchers built without *lg* reuse it, so changes to the
        APPCOMMON_LOG_* variables after that point are not picked up.
        """
        self.registry = registry
        self._out = out
        self._exit_func = exit_func
        self.lg = lg if lg is not None else LoggerFactory.create(
            LOGGER_NAME, LogConfig.from_env()
        )

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def run(self, args: Sequence[str] | None = None) -> int:
        """
        Dispatch a command and report its exit status.

        Args:
            args: Process arguments without the program name
                (default: sys.argv[1:])

        Returns:
            int: Exit status, also passed to the exit function
        """
        if args is None:
            args = sys.argv[1:]

        cmd_id, raw_args = parse_cmd_input(args)
        if not cmd_id:
            cmd_id = HELP_COMMAND_ID

        self._register_help()
        out = self.out

        try:
            self._dispatch(cmd_id, raw_args, out)
        except CliError as e:
            self.lg.warning("command failed", extra={"command": cmd_id, "error": e})
            self._write_error(out, f"{e}\n")
            return self._exit(STATUS_ERR)

        self.lg.debug("command finished", extra={"command": cmd_id})
        return self._exit(STATUS_OK)

    def _register_help(self) -> None:
        # A built-in help from an earlier run lists stale commands
        if type(self.registry.get_command(HELP_COMMAND_ID)) is HelpCommand:
            self.registry.unregister(HELP_COMMAND_ID)

        help_command = HelpCommand(self.registry.commands().values())
        try:
            self.registry.register(help_command)
        except DupCommandError:
            self.lg.trace("help command already registered, keeping it")

    def _dispatch(self, cmd_id: str, raw_args: list[str], out: TextIO) -> None:
        command = self.registry.get_command(cmd_id)
        if command is None:
            raise UnknownCommandError(cmd_id)

        self.lg.debug(
            "dispatching command", extra={"command": cmd_id, "args": len(raw_args)}
        )
        run_command(command, raw_args, out)

    def _write_error(self, out: TextIO, message: str) -> None:
        try:
            out.write(message)
        except (OSError, ValueError) as e:
            self.lg.error("failed to write to output", extra={"exception": e})
            print(
                f"Error writing to the provided output {type(out).__name__}",
                file=sys.stderr,
            )

    def _exit(self, status: int) -> int:
        exit_func = self._exit_func if self._exit_func is not None else sys.exit
        exit_func(status)
        return status


def bootstrap(
    args: Sequence[str] | None,
    registry: CommandRegistry,
    out: TextIO | None = None,
    exit_func: ExitFunc | None = None,
    lg: Logger | None = None,
) -> int:
    """
    Dispatch one command invocation.

    Convenience function that wraps Bootstrap(...).run(args).

    Args:
        args: Process arguments without the program name (None: sys.argv[1:])
        registry: Commands available for dispatch
        out: Output stream (default: sys.stdout)
        exit_func: Called with the exit status (default: sys.exit)
        lg: Logger (default: created from APPCOMMON_LOG_* variables)

    Returns:
        int: Exit status
    """
    return Bootstrap(registry, out, exit_func, lg).run(args)
