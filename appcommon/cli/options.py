"""
Command option definitions and option parsing.

A command declares the options it accepts as a mapping of
:class:`OptionDefinition` objects. :func:`build_options_from` turns the raw
argument tokens of one invocation into an :data:`OptionMap`, collecting every
problem it finds instead of stopping at the first one.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..params.strconv import RawValue
from .constants import FLAG_PREFIX, FLAG_VALUE_SEPARATOR
from .errors import DuplicateOptionError, OptionError, RequiredOptionError

if TYPE_CHECKING:
    from .command import Command


@dataclass(frozen=True)
class OptionDefinition:
    """Declared schema entry for one command-line flag."""

    name: str = ""
    description: str = ""
    required: bool = False
    default: str = ""


@dataclass(frozen=True)
class Option:
    """
    An option parsed from the command line.

    ``raw`` is the untyped value given after ``=``; use its ``get_as_*``
    methods to coerce it, passing the definition's default or your own.
    """

    definition: OptionDefinition = field(default_factory=OptionDefinition)
    raw: RawValue = RawValue("")

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def description(self) -> str:
        return self.definition.description

    @property
    def required(self) -> bool:
        return self.definition.required

    @property
    def default(self) -> str:
        return self.definition.default


OptionDefinitionMap = dict[str, OptionDefinition]
OptionMap = dict[str, Option]

_EMPTY_DEFINITION = OptionDefinition()


def definitions(*defs: OptionDefinition) -> OptionDefinitionMap:
    """
    Build an OptionDefinitionMap keyed by definition name.

    Example:
        input_definition = definitions(
            OptionDefinition("name", "Who to greet", required=True),
            OptionDefinition("greeting", "Greeting word", default="Hello"),
        )
    """
    return {d.name: d for d in defs}


def _split_flag(token: str) -> tuple[str, str]:
    """Split ``--name=value`` into a trimmed (name, value) pair."""
    name, sep, value = token.lstrip("-").partition(FLAG_VALUE_SEPARATOR)
    return name.strip(), value.strip() if sep else ""


def build_options_from(
    raw_args: Iterable[str], command: Command
) -> tuple[OptionMap, list[OptionError]]:
    """
    Build the options of one command invocation.

    Tokens that do not start with ``--`` are ignored. Every flag is stored,
    declared or not; undeclared flags get an empty definition. A repeated
    flag is reported as an error and the last value wins. Required options
    that are missing or empty are reported after all tokens are read.

    Args:
        raw_args: Argument tokens following the command id
        command: Command supplying the declared option definitions

    Returns:
        Tuple of (parsed options, errors in the order they were found)
    """
    schema = command.input_definition
    options: OptionMap = {}
    errors: list[OptionError] = []

    for token in raw_args:
        if not token.startswith(FLAG_PREFIX):
            continue

        name, value = _split_flag(token)
        if name in options:
            errors.append(DuplicateOptionError(name))

        options[name] = Option(schema.get(name, _EMPTY_DEFINITION), RawValue(value))

    for definition in schema.values():
        option = options.get(definition.name)
        if definition.required and (option is None or option.raw == ""):
            errors.append(RequiredOptionError(definition.name))

    return options, errors
