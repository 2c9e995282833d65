"""Parser and canonical formatter for a strict JSON-like document grammar."""

from .nodes import (
    ArrayValue,
    Key,
    NumberValue,
    ObjectValue,
    Pair,
    StringValue,
    Value,
)
from .cursor import Cursor
from .formatter import Formatter, format_value
from .parser import ParseError, Parser, ParserConfig, parse

__all__ = [
    "ArrayValue",
    "Key",
    "NumberValue",
    "ObjectValue",
    "Pair",
    "StringValue",
    "Value",
    "Cursor",
    "Formatter",
    "format_value",
    "ParseError",
    "Parser",
    "ParserConfig",
    "parse",
]
