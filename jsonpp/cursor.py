"""Character cursor over a line-oriented text stream."""

from __future__ import annotations

from typing import Iterable


class Cursor:
    """Walks a stream one character at a time, hiding line breaks.

    Newline characters are never returned by ``peek``; moving past the end
    of a line pulls the next one from the stream and bumps ``line_number``.
    Empty lines are skipped the same way.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)
        self._line: str | None = self._read_line()
        self.line_number = 1
        self.column = 0
        self._settle()

    @property
    def at_end(self) -> bool:
        return self._line is None

    def peek(self) -> str | None:
        if self._line is None:
            return None
        return self._line[self.column]

    def advance(self) -> None:
        if self._line is None:
            return
        self.column += 1
        self._settle()

    def _read_line(self) -> str | None:
        line = next(self._lines, None)
        if line is None:
            return None
        return line.removesuffix("\n").removesuffix("\r")

    def _settle(self) -> None:
        while self._line is not None and self.column >= len(self._line):
            self._line = self._read_line()
            self.line_number += 1
            self.column = 0


__all__ = ["Cursor"]
