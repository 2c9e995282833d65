"""Tests for the line cursor."""

import io

from jsonpp.cursor import Cursor


def read_all(cursor):
    chars = []
    while (char := cursor.peek()) is not None:
        chars.append((char, cursor.line_number))
        cursor.advance()
    return chars


def test_empty_stream_is_at_end_on_line_one():
    cursor = Cursor(io.StringIO(""))
    assert cursor.at_end
    assert cursor.peek() is None
    assert cursor.line_number == 1

def test_newlines_are_hidden():
    cursor = Cursor(io.StringIO("ab\nc"))
    assert read_all(cursor) == [("a", 1), ("b", 1), ("c", 2)]

def test_empty_lines_are_skipped_and_counted():
    cursor = Cursor(io.StringIO("\n\nx\n"))
    assert cursor.peek() == "x"
    assert cursor.line_number == 3

def test_end_after_trailing_newline_is_next_line():
    cursor = Cursor(io.StringIO("a\nb\n"))
    read_all(cursor)
    assert cursor.at_end
    assert cursor.line_number == 3

def test_carriage_returns_are_stripped():
    cursor = Cursor(io.StringIO("a\r\nb", newline=""))
    assert [c for c, _ in read_all(cursor)] == ["a", "b"]

def test_advance_at_end_is_noop():
    cursor = Cursor([])
    cursor.advance()
    assert cursor.at_end
    assert cursor.line_number == 1
