"""
Command interface definition.

This module provides the abstract base class every command exposed to the
dispatcher implements.
"""

from abc import ABC, abstractmethod
from typing import TextIO

from .options import OptionDefinitionMap, OptionMap


class Command(ABC):
    """
    Abstract base class defining the interface for commands.

    A command has a unique id, a human readable description, the options it
    accepts and an execute method. Report an ordinary failure by raising
    :class:`~appcommon.cli.errors.CommandError`; any other exception is
    treated as a crash and reported with its message.

    Example:
        class GreetCommand(Command):
            id = "greet"
            description = "Greets someone"
            input_definition = definitions(
                OptionDefinition("name", "Who to greet", required=True),
            )

            def execute(self, options: OptionMap, out: TextIO) -> None:
                out.write(f"Hello {options['name'].raw}\\n")
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """
        Get the command id used to invoke the command.

        Returns:
            str: Command id
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """
        Get the command description shown by the help command.

        Returns:
            str: Command description
        """
        pass

    @property
    def input_definition(self) -> OptionDefinitionMap:
        """
        Get the options accepted by the command, keyed by name.

        Returns:
            OptionDefinitionMap: Declared options (none by default)
        """
        return {}

    @abstractmethod
    def execute(self, options: OptionMap, out: TextIO) -> None:
        """
        Run the command.

        Args:
            options: Options parsed for this invocation; read only
            out: Stream receiving the command output

        Raises:
            CommandError: If the command fails
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"
