"""
Column-aligned text output.

Provides :class:`TabWriter`, a stream wrapper that aligns tab-separated cells
into columns, used to render command listings.

Example:
    import io
    buffer = io.StringIO()
    tw = TabWriter(buffer)
    tw.write("a\\tfirst\\n")
    tw.write("longer\\tsecond\\n")
    tw.flush()
    assert buffer.getvalue() == "a      first\\nlonger second\\n"
"""

from __future__ import annotations

import re
from types import TracebackType
from typing import TextIO

_SPLIT_RE = re.compile(r"(\t|\n)")


class TabWriter:
    """
    Elastic tabstop writer.

    Text is buffered until :meth:`flush`. A cell is text terminated by a tab;
    the text after the last tab of a line is not part of any column. A column
    block is a run of consecutive lines that all have a cell in that column,
    and every cell of the block is padded to the widest one plus
    ``padding``. A line without any tab ends all open column blocks.
    """

    def __init__(
        self,
        stream: TextIO,
        min_width: int = 0,
        padding: int = 1,
        pad_char: str = " ",
    ) -> None:
        """
        Initialize the writer.

        Args:
            stream: Destination stream
            min_width: Minimal cell width including padding
            padding: Padding added to the widest cell of a column
            pad_char: Character used for padding
        """
        self._stream = stream
        self._min_width = min_width
        self._padding = padding
        self._pad_char = pad_char
        self._lines: list[list[str]] = [[]]
        self._cell = ""

    def write(self, text: str) -> int:
        """Buffer *text*; returns the number of characters accepted."""
        for piece in _SPLIT_RE.split(text):
            if piece == "\t":
                self._terminate_cell()
            elif piece == "\n":
                ncells = self._terminate_cell()
                self._lines.append([])
                if ncells == 1:
                    self.flush()
            else:
                self._cell += piece
        return len(text)

    def flush(self) -> None:
        """Align and write everything buffered so far."""
        if self._cell:
            self._terminate_cell()

        out: list[str] = []
        self._format(out, [], 0, len(self._lines))
        self._stream.write("".join(out))
        self._lines = [[]]

    def __enter__(self) -> TabWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.flush()

    def _terminate_cell(self) -> int:
        line = self._lines[-1]
        line.append(self._cell)
        self._cell = ""
        return len(line)

    def _format(
        self, out: list[str], widths: list[int], line0: int, line1: int
    ) -> None:
        column = len(widths)
        this = line0
        while this < line1:
            if column >= len(self._lines[this]) - 1:
                this += 1
                continue

            # Cell in this column: write pending lines, then size the block
            self._write_lines(out, widths, line0, this)
            line0 = this
            width = self._min_width
            while this < line1 and column < len(self._lines[this]) - 1:
                width = max(width, len(self._lines[this][column]) + self._padding)
                this += 1

            self._format(out, widths + [width], line0, this)
            line0 = this

        self._write_lines(out, widths, line0, line1)

    def _write_lines(
        self, out: list[str], widths: list[int], line0: int, line1: int
    ) -> None:
        last = len(self._lines) - 1
        for i in range(line0, line1):
            for j, cell in enumerate(self._lines[i]):
                out.append(cell)
                if j < len(widths):
                    out.append(self._pad_char * (widths[j] - len(cell)))
            if i != last:
                out.append("\n")
