"""
Built-in help command.

Lists every registered command with its word-wrapped description and the
options it accepts, aligned into columns.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .command import Command
from .constants import HELP_COMMAND_ID, HELP_SEPARATOR, HELP_WRAP_WIDTH
from .options import OptionMap
from .output import TabWriter


def chunk_description(description: str, size: int) -> list[str]:
    """
    Split a description into lines of roughly *size* characters.

    A line is cut at the first space reached once it holds at least *size*
    characters, or at a newline, so words are never split. Cut lines are
    stripped; the remaining tail is kept as the last chunk. Length is counted
    in characters (code points), not encoded bytes, so non-ASCII text wraps
    by its visible length.

    Args:
        description: Text to split
        size: Minimal line length before cutting at a space

    Returns:
        Description chunks, ``[""]`` for an empty description

    Example:
        >>> chunk_description("First line\\nSecond line", 20)
        ['First line', 'Second line']
    """
    if not description:
        return [""]

    chunks = []
    accumulator = ""
    for char in description:
        accumulator += char
        if (len(accumulator) >= size and char == " ") or char == "\n":
            chunks.append(accumulator.strip())
            accumulator = ""

    if accumulator:
        chunks.append(accumulator)

    return chunks


class HelpCommand(Command):
    """Lists all available commands."""

    def __init__(
        self,
        commands: Iterable[Command] = (),
        wrap_width: int = HELP_WRAP_WIDTH,
    ) -> None:
        """
        Initialize the help command.

        Args:
            commands: Commands to list, captured at construction
            wrap_width: Width at which descriptions are wrapped
        """
        self._commands = list(commands)
        self._wrap_width = wrap_width

    @property
    def id(self) -> str:
        return HELP_COMMAND_ID

    @property
    def description(self) -> str:
        return "Lists all available commands"

    @property
    def commands(self) -> list[Command]:
        """Commands listed by this help command."""
        return list(self._commands)

    def execute(self, options: OptionMap, out: TextIO) -> None:
        with TabWriter(out) as writer:
            writer.write(f"{self.id}\tAvailable CLI Commands:\n")
            for command in self._commands:
                self._write_command(writer, command)

    def _write_command(self, writer: TabWriter, command: Command) -> None:
        writer.write(f"{HELP_SEPARATOR}\t\n")

        first, *rest = chunk_description(command.description, self._wrap_width)
        writer.write(f"{command.id}\t{first}\n")
        for chunk in rest:
            writer.write(f"\t{chunk}\n")

        input_definition = command.input_definition
        if input_definition:
            writer.write("\tOptions:\n")
            for definition in input_definition.values():
                writer.write(
                    f"\t--{definition.name} {definition.description} "
                    f"(default {definition.default})\n"
                )
