"""
Tests for log formatters.

Tests key formatter functionality including:
- Extra field rendering
- Microsecond timestamps
- Level colors
- Exception placement
"""

import logging
import sys

import pytest

from appcommon.log.colors import ColorManager
from appcommon.log.config import LogConfig
from appcommon.log.formatters import LogFormatter, _format_extra

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def log_record():
    """Create basic log record."""
    record = logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname="/path/to/file.py",
        lineno=42,
        msg="Test message",
        args=(),
        exc_info=None,
    )
    record.created = 1234567890.123456
    record.msecs = 123.0
    return record


# =============================================================================
# Test Helper Functions
# =============================================================================


@pytest.mark.unit
class TestFormatExtra:
    """Test _format_extra helper function."""

    def test_no_extra(self, log_record):
        assert _format_extra(log_record) == ""

    def test_sorted_pairs(self, log_record):
        setattr(log_record, "__appcommon__extra", {"b": 2, "a": "x"})

        assert _format_extra(log_record) == " [a:x] [b:2]"

    def test_exception_values_render_class_name(self, log_record):
        setattr(log_record, "__appcommon__extra", {"error": ValueError("bad")})

        assert _format_extra(log_record) == " [error:ValueError]"


# =============================================================================
# Test LogFormatter
# =============================================================================


@pytest.mark.unit
class TestLogFormatter:
    """Test LogFormatter class."""

    def test_plain_format(self, log_record):
        formatter = LogFormatter(LogConfig(colors=False))

        line = formatter.format(log_record)

        assert line.startswith("[")
        assert line.endswith("] [I] Test message [test.logger]")

    def test_extra_before_name(self, log_record):
        setattr(log_record, "__appcommon__extra", {"command": "greet"})
        formatter = LogFormatter(LogConfig(colors=False))

        assert formatter.format(log_record).endswith(
            "Test message [command:greet] [test.logger]"
        )

    def test_micros(self, log_record):
        formatter = LogFormatter(LogConfig(micros=True, colors=False))

        assert ",123.456] [I]" in formatter.format(log_record)

    def test_colors(self, log_record):
        formatter = LogFormatter(LogConfig(colors=True))

        line = formatter.format(log_record)

        assert line.startswith(ColorManager.CYAN + "m[")
        assert line.endswith("[test.logger]" + ColorManager.RESET)

    def test_exception_after_metadata(self, log_record):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            log_record.exc_info = sys.exc_info()
        formatter = LogFormatter(LogConfig(colors=True))

        first, rest = formatter.format(log_record).split("\n", 1)

        assert first.endswith("[test.logger]" + ColorManager.RESET)
        assert rest.startswith("Traceback")
        assert rest.endswith("RuntimeError: boom")


@pytest.mark.unit
class TestColorManager:
    """Test ColorManager class."""

    def test_known_levels(self):
        assert ColorManager.get_color_for_level(logging.ERROR) == ColorManager.RED
        assert ColorManager.get_color_for_level(logging.WARNING) == ColorManager.YELLOW

    def test_unknown_level_uses_default(self):
        assert ColorManager.get_color_for_level(42) == ColorManager.DEFAULT

    def test_colorize(self):
        assert ColorManager.colorize("x", logging.CRITICAL) == "\x1b[35mx\x1b[0m"
