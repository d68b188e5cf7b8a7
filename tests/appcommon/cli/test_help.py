"""
Tests for cli/help.py.

Tests key functionality including:
- Description chunking
- Help command identity
- Help listing layout
"""

import io

import pytest

from appcommon.cli.constants import HELP_COMMAND_ID
from appcommon.cli.help import HelpCommand, chunk_description
from appcommon.cli.options import OptionDefinition, definitions
from tests.fixtures.commands import CrashingCommand, FailingCommand, RecordingCommand

# =============================================================================
# Test chunk_description
# =============================================================================


@pytest.mark.unit
class TestChunkDescription:
    """Test chunk_description function."""

    def test_splits_at_spaces_past_size(self):
        description = (
            "This is a long description that should be split into multiple chunks"
        )

        assert chunk_description(description, 20) == [
            "This is a long description",
            "that should be split",
            "into multiple chunks",
        ]

    def test_splits_at_newlines(self):
        assert chunk_description("First line\nSecond line", 80) == [
            "First line",
            "Second line",
        ]

    def test_empty_description(self):
        assert chunk_description("", 80) == [""]

    def test_short_description_is_single_chunk(self):
        assert chunk_description("Greets someone", 80) == ["Greets someone"]

    def test_tail_is_not_trimmed(self):
        assert chunk_description("  indented", 80) == ["  indented"]

    def test_no_empty_tail_after_final_cut(self):
        assert chunk_description("ends with newline\n", 80) == ["ends with newline"]

    def test_length_counts_characters(self):
        """Test non-ASCII text wraps by character count, not encoded size."""
        assert chunk_description("ééééé ééé", 10) == ["ééééé ééé"]
        assert chunk_description("éééééééééé ééé", 10) == ["éééééééééé", "ééé"]

    def test_words_are_never_split(self):
        word = "x" * 30

        assert chunk_description(f"{word} {word}", 10) == [word, word]


# =============================================================================
# Test HelpCommand
# =============================================================================


@pytest.mark.unit
class TestHelpCommand:
    """Test HelpCommand class."""

    def test_identity(self):
        command = HelpCommand()

        assert command.id == HELP_COMMAND_ID == "help"
        assert command.description == "Lists all available commands"
        assert command.input_definition == {}

    def test_commands_captured_at_construction(self):
        listed = [RecordingCommand("a")]
        command = HelpCommand(listed)
        listed.append(RecordingCommand("b"))

        assert [c.id for c in command.commands] == ["a"]

    def test_empty_listing(self):
        out = io.StringIO()

        HelpCommand().execute({}, out)

        assert out.getvalue() == "help Available CLI Commands:\n"

    def test_listing_layout(self, greet_command):
        """Test commands, separators and options are aligned into columns."""
        out = io.StringIO()
        command = HelpCommand([greet_command, FailingCommand(), CrashingCommand()])

        command.execute({}, out)

        pad = " " * 10
        assert out.getvalue() == (
            "help      Available CLI Commands:\n"
            "_________ \n"
            "greet     Greets someone\n"
            f"{pad}Options:\n"
            f"{pad}--name Who to greet (default )\n"
            f"{pad}--greeting Greeting word (default Hello)\n"
            "_________ \n"
            "fail      Always fails\n"
            "_________ \n"
            "crash     Always crashes\n"
        )

    def test_long_description_is_wrapped(self):
        out = io.StringIO()
        listed = RecordingCommand("sync", "first part of the text second part")
        command = HelpCommand([listed], wrap_width=10)

        command.execute({}, out)

        lines = out.getvalue().splitlines()
        assert lines[2] == "sync      first part"
        assert lines[3] == "          of the text"
        assert lines[4] == "          second part"

    def test_column_widens_for_long_ids(self):
        out = io.StringIO()
        listed = RecordingCommand(
            "a-very-long-command",
            "Does things",
            definitions(OptionDefinition("force", "Skip checks", default="false")),
        )

        HelpCommand([listed]).execute({}, out)

        pad = " " * 20
        assert out.getvalue() == (
            f"{'help':<20}Available CLI Commands:\n"
            f"{'_________':<20}\n"
            f"{'a-very-long-command':<20}Does things\n"
            f"{pad}Options:\n"
            f"{pad}--force Skip checks (default false)\n"
        )
