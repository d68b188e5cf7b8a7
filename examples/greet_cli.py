#!/usr/bin/env python3
"""
Command-line program built on appcommon.cli.

This example demonstrates:
- Declaring commands and their options
- Coercing raw option values with defaults
- Reporting ordinary failures with CommandError
- Dispatching with the built-in help command
- Enabling dispatcher logs through environment variables

Usage:
    python greet_cli.py                                  # Lists commands
    python greet_cli.py greet --name=Alice               # Hello Alice
    python greet_cli.py greet --name=Bob --times=3       # Greets three times
    python greet_cli.py wait --for=1.5s                  # Sleeps 1.5 seconds
    python greet_cli.py greet                            # Missing option, exit 1
    APPCOMMON_LOG_LEVEL=debug python greet_cli.py greet --name=Alice
"""

import pathlib
import sys
import time
from datetime import timedelta
from typing import TextIO

# Add the project root to the path
project_root = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.append(project_root) if project_root not in sys.path else None

from appcommon.cli import (
    Command,
    CommandError,
    CommandRegistry,
    OptionDefinition,
    OptionMap,
    bootstrap,
    definitions,
)


class GreetCommand(Command):
    """Greets someone, possibly several times."""

    id = "greet"
    description = "Greets someone by name"
    input_definition = definitions(
        OptionDefinition("name", "Who to greet", required=True),
        OptionDefinition("times", "How many greetings", default="1"),
    )

    def execute(self, options: OptionMap, out: TextIO) -> None:
        times = 1
        if "times" in options:
            times, default_used = options["times"].raw.get_as_int(1)
            if default_used:
                raise CommandError("--times expects a whole number")

        for _ in range(times):
            out.write(f"Hello {options['name'].raw}\n")


class WaitCommand(Command):
    """Sleeps for a duration such as 300ms or 1m30s."""

    id = "wait"
    description = (
        "Waits for the given duration before returning. Durations are written "
        "as a sequence of numbers with units, such as 300ms, 1.5s or 1m30s."
    )
    input_definition = definitions(
        OptionDefinition("for", "How long to wait", default="1s"),
    )

    def execute(self, options: OptionMap, out: TextIO) -> None:
        default = timedelta(seconds=1)
        duration = default
        if "for" in options:
            duration, default_used = options["for"].raw.get_as_duration(default)
            if default_used:
                raise CommandError(f"invalid duration {options['for'].raw!r}")

        time.sleep(duration.total_seconds())
        out.write(f"Waited {duration}\n")


def main() -> int:
    """Main function."""
    registry = CommandRegistry([GreetCommand(), WaitCommand()])
    return bootstrap(sys.argv[1:], registry)


if __name__ == "__main__":
    main()
