"""
Tests for cli/registry.py.

Tests key functionality including:
- Registration and duplicate detection
- Lookup of registered and unknown ids
- Copy semantics of commands()
"""

import pytest

from appcommon.cli.errors import DupCommandError
from appcommon.cli.registry import CommandRegistry
from tests.fixtures.commands import RecordingCommand


@pytest.mark.unit
class TestCommandRegistry:
    """Test CommandRegistry class."""

    def test_register_and_get(self):
        registry = CommandRegistry()
        command = RecordingCommand("deploy")

        registry.register(command)

        assert registry.get_command("deploy") is command
        assert registry.is_registered("deploy")
        assert "deploy" in registry
        assert len(registry) == 1

    def test_get_unknown_returns_none(self):
        registry = CommandRegistry()

        assert registry.get_command("missing") is None
        assert not registry.is_registered("missing")
        assert "missing" not in registry

    def test_duplicate_registration_fails(self):
        """Test the first command stays registered after a duplicate."""
        first = RecordingCommand("deploy")
        second = RecordingCommand("deploy")
        registry = CommandRegistry([first])

        with pytest.raises(DupCommandError) as exc_info:
            registry.register(second)

        assert str(exc_info.value) == "command 'deploy' is already registered"
        assert exc_info.value.command is second
        assert registry.get_command("deploy") is first
        assert len(registry) == 1

    def test_duplicate_in_constructor_fails(self):
        with pytest.raises(DupCommandError):
            CommandRegistry([RecordingCommand("a"), RecordingCommand("a")])

    def test_commands_returns_copy(self):
        registry = CommandRegistry([RecordingCommand("a")])

        snapshot = registry.commands()
        snapshot["b"] = RecordingCommand("b")
        del snapshot["a"]

        assert registry.list_commands() == ["a"]

    def test_preserves_registration_order(self):
        registry = CommandRegistry([RecordingCommand(i) for i in ("c", "a", "b")])

        assert registry.list_commands() == ["c", "a", "b"]
        assert list(registry.commands()) == ["c", "a", "b"]

    def test_unregister(self):
        command = RecordingCommand("a")
        registry = CommandRegistry([command])

        assert registry.unregister("a") is command
        assert registry.unregister("a") is None
        assert len(registry) == 0
