"""Tests for TabWriter column alignment."""

import io

import pytest

from appcommon.cli.output import TabWriter


@pytest.mark.unit
class TestTabWriter:
    """Unit tests for TabWriter."""

    def test_aligns_cells_to_widest(self):
        out = io.StringIO()
        tw = TabWriter(out)

        tw.write("a\tfirst\n")
        tw.write("longer\tsecond\n")
        tw.flush()

        assert out.getvalue() == "a      first\nlonger second\n"

    def test_buffers_until_flush(self):
        out = io.StringIO()
        tw = TabWriter(out)

        tw.write("a\tb\n")

        assert out.getvalue() == ""

    def test_write_returns_length(self):
        assert TabWriter(io.StringIO()).write("a\tb\n") == 4

    def test_line_without_tab_ends_column_block(self):
        """Test a plain line flushes, so later lines form a new block."""
        out = io.StringIO()
        tw = TabWriter(out)

        tw.write("a\tb\n")
        tw.write("plain\n")
        assert out.getvalue() == "a b\nplain\n"

        tw.write("longer\tc\n")
        tw.flush()
        assert out.getvalue() == "a b\nplain\nlonger c\n"

    def test_multiple_columns(self):
        out = io.StringIO()
        tw = TabWriter(out)

        tw.write("a\tb\tc\n")
        tw.write("aaa\tbbbb\tc\n")
        tw.flush()

        assert out.getvalue() == "a   b    c\naaa bbbb c\n"

    def test_unterminated_line_has_no_newline(self):
        out = io.StringIO()
        tw = TabWriter(out)

        tw.write("a\tb")
        tw.flush()

        assert out.getvalue() == "a b"

    def test_min_width_padding_and_pad_char(self):
        out = io.StringIO()
        tw = TabWriter(out, min_width=5, padding=2, pad_char=".")

        tw.write("ab\tc\n")
        tw.flush()

        assert out.getvalue() == "ab...c\n"

    def test_empty_leading_cells_are_padded(self):
        out = io.StringIO()
        tw = TabWriter(out)

        tw.write("key\tvalue\n")
        tw.write("\tcontinued\n")
        tw.flush()

        assert out.getvalue() == "key value\n    continued\n"

    def test_context_manager_flushes(self):
        out = io.StringIO()

        with TabWriter(out) as tw:
            tw.write("x\ty\n")

        assert out.getvalue() == "x y\n"

    def test_flush_without_input_writes_nothing(self):
        out = io.StringIO()

        TabWriter(out).flush()

        assert out.getvalue() == ""
