"""
Command registration and lookup.

This module provides the registry the dispatcher resolves command ids
against.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .errors import DupCommandError

if TYPE_CHECKING:
    from .command import Command


class CommandRegistry:
    """
    Mapping of command id to command.

    Not thread safe: the dispatcher registers the help command on every run,
    so one registry must not be dispatched from several threads at once.
    """

    def __init__(self, commands: Iterable[Command] = ()) -> None:
        """
        Initialize the registry.

        Args:
            commands: Commands to register right away

        Raises:
            DupCommandError: If two of the given commands share an id
        """
        self._commands: dict[str, Command] = {}
        for command in commands:
            self.register(command)

    def register(self, command: Command) -> None:
        """
        Register a command under its id.

        Args:
            command: Command instance to register

        Raises:
            DupCommandError: If the id is already registered
        """
        if command.id in self._commands:
            raise DupCommandError(command)
        self._commands[command.id] = command

    def commands(self) -> dict[str, Command]:
        """Return a copy of the id to command mapping."""
        return dict(self._commands)

    def get_command(self, cmd_id: str) -> Command | None:
        """Get command by id, or None when it is not registered."""
        return self._commands.get(cmd_id)

    def unregister(self, cmd_id: str) -> Command | None:
        """Remove and return the command registered under *cmd_id*, if any."""
        return self._commands.pop(cmd_id, None)

    def is_registered(self, cmd_id: str) -> bool:
        """Check if a command id is registered."""
        return cmd_id in self._commands

    def list_commands(self) -> list[str]:
        """List all registered command ids."""
        return list(self._commands)

    def __contains__(self, cmd_id: object) -> bool:
        return cmd_id in self._commands

    def __len__(self) -> int:
        return len(self._commands)
