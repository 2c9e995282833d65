import io
import logging
from typing import Iterable, NotRequired, Optional, TypedDict
from jsonpp.cursor import Cursor
from jsonpp.nodes import ArrayValue, Key, NumberValue, ObjectValue, Pair, StringValue, Value
from jsonpp.utils import resolve_config
from jsonpp.logger import Logger


# ASCII only; str.isdigit would also accept other scripts' digits
DIGITS = "0123456789"
NUMBER_CHARS = DIGITS + "."


class ParseError(Exception):
    def __init__(self, message: str, line_number: int):
        self.message = message
        self.line_number = line_number
        super().__init__(f"error at line {line_number}: {message}")


class ParserConfig(TypedDict):
    enable_logger: NotRequired[bool]
    max_depth: NotRequired[Optional[int]]
    log_level: NotRequired[int]


class ParserConfigRequired(TypedDict):
    enable_logger: bool
    max_depth: Optional[int]
    log_level: int


DEFAULT_CONFIG: ParserConfigRequired = {"enable_logger": True, "max_depth": 200, "log_level": logging.WARNING}


class Parser:
    def __init__(self, stream: Iterable[str] | str, config: Optional[ParserConfig] = None):
        # a bare str would iterate one character per line
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.logger = Logger(
            config={
                "name": "jsonpp.parser",
                "is_enabled": self.config["enable_logger"],
                "level": self.config["log_level"],
            }
        ).logger
        self.cursor = Cursor(stream)
        self.depth = 0

    def parse(self) -> Value:
        """Parse one value, reporting stack exhaustion as a positioned error."""
        try:
            return self.parse_value()
        except RecursionError:
            raise self.error("document nested too deeply to parse") from None

    @property
    def current_char(self) -> Optional[str]:
        return self.cursor.peek()

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.cursor.line_number)

    def expect(self, expected: str) -> None:
        actual = self.current_char
        if actual is None:
            raise self.error(f"expected `{expected}`")
        if actual != expected:
            raise self.error(f"expected: `{expected}`, found: `{actual}`")

    def consume(self, expected: str) -> None:
        self.expect(expected)
        self.cursor.advance()
        self.logger.debug(f"Consumed `{expected}`, now at line {self.cursor.line_number}")

    def skip_whitespace(self) -> None:
        while (char := self.current_char) is not None and char.isspace():
            self.cursor.advance()

    def parse_value(self) -> Value:
        self.skip_whitespace()
        char = self.current_char
        if char is None:
            raise self.error("no token found")
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        if char == '"':
            return self.parse_string_value()
        if char == "-" or char in DIGITS:
            return self.parse_number()
        raise self.error(f"invalid token: `{char}`")

    def _parse_inner_string(self) -> str:
        self.consume('"')
        buffer: list[str] = []
        while (char := self.current_char) is not None and char != '"':
            buffer.append(char)
            self.cursor.advance()
        if char is None:
            raise self.error('unterminated string: expected closing `"`')
        self.consume('"')
        return "".join(buffer)

    def parse_string_value(self) -> StringValue:
        return StringValue(text=self._parse_inner_string())

    def parse_string_key(self) -> Key:
        return Key(text=self._parse_inner_string())

    def parse_number(self) -> NumberValue:
        buffer: list[str] = []
        if self.current_char == "-":
            buffer.append("-")
            self.cursor.advance()
        while (char := self.current_char) is not None and char in NUMBER_CHARS:
            buffer.append(char)
            self.cursor.advance()
        return NumberValue(text="".join(buffer))

    def parse_object(self) -> ObjectValue:
        self.consume("{")
        self._enter()
        self.skip_whitespace()
        if self.current_char == "}":
            self.cursor.advance()
            self._leave()
            return ObjectValue()
        pairs: list[Pair] = []
        while True:
            self.skip_whitespace()
            key = self.parse_string_key()
            self.skip_whitespace()
            self.consume(":")
            value = self.parse_value()
            self.skip_whitespace()
            pairs.append(Pair(key=key, value=value))
            char = self.current_char
            if char == ",":
                self.cursor.advance()
            elif char == "}":
                break
            elif char is None:
                raise self.error("expected `,` or `}`")
            else:
                raise self.error(f"expected: `,` or `}}`, found: `{char}`")
        self.consume("}")
        self._leave()
        self.logger.debug(f"Parsed object with {len(pairs)} pair(s)")
        return ObjectValue(pairs=pairs)

    def parse_array(self) -> ArrayValue:
        self.consume("[")
        self._enter()
        self.skip_whitespace()
        if self.current_char == "]":
            self.cursor.advance()
            self._leave()
            return ArrayValue()
        values: list[Value] = []
        while True:
            value = self.parse_value()
            self.skip_whitespace()
            values.append(value)
            char = self.current_char
            if char == ",":
                self.cursor.advance()
            elif char == "]":
                break
            elif char is None:
                raise self.error("expected `,` or `]`")
            else:
                raise self.error(f"expected: `,` or `]`, found: `{char}`")
        self.consume("]")
        self._leave()
        self.logger.debug(f"Parsed array with {len(values)} value(s)")
        return ArrayValue(values=values)

    def _enter(self) -> None:
        self.depth += 1
        max_depth = self.config["max_depth"]
        if max_depth is not None and self.depth > max_depth:
            raise self.error(f"maximum nesting depth of {max_depth} exceeded")

    def _leave(self) -> None:
        self.depth -= 1


def parse(stream: Iterable[str] | str, config: Optional[ParserConfig] = None) -> Value:
    """Parse the first value of ``stream``; anything after it is left unread."""
    return Parser(stream, config=config).parse()


__all__ = ["ParseError", "Parser", "ParserConfig", "parse"]
