"""Canonical renderer for parsed documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .nodes import ArrayValue, NumberValue, ObjectValue, StringValue, Value

# rendered text, or a value still to be expanded at the given depth
Work = tuple[Union[str, Value], int]


@dataclass
class Formatter:
    indent: str = "    "

    def format(self, value: Value) -> str:
        """Render ``value`` with no trailing newline.

        Expansion runs on an explicit work stack, so nesting depth is not
        limited by the interpreter's recursion limit.
        """
        chunks: list[str] = []
        pending = list(reversed(self._expand(value, 0)))
        while pending:
            item, depth = pending.pop()
            if isinstance(item, str):
                chunks.append(item)
            else:
                pending.extend(reversed(self._expand(item, depth)))
        return "".join(chunks)

    def _indent(self, depth: int) -> str:
        return self.indent * depth

    def _format_string(self, text: str) -> str:
        # stored text is raw, so quoting it again must not escape anything
        return f'"{text}"'

    def _expand(self, value: Value, depth: int) -> list[Work]:
        if isinstance(value, StringValue):
            return [(self._format_string(value.text), depth)]
        if isinstance(value, NumberValue):
            return [(value.text, depth)]
        if isinstance(value, ObjectValue):
            return self._expand_object(value, depth)
        if isinstance(value, ArrayValue):
            return self._expand_array(value, depth)
        raise TypeError(f"Cannot format {type(value).__name__}")

    def _expand_object(self, value: ObjectValue, depth: int) -> list[Work]:
        if not value.pairs:
            return [("{}", depth)]
        inner = self._indent(depth + 1)
        work: list[Work] = [("{\n", depth)]
        for i, pair in enumerate(value.pairs):
            if i:
                work.append((",\n", depth))
            work.append((f"{inner}{self._format_string(pair.key.text)}: ", depth))
            work.append((pair.value, depth + 1))
        work.append((f"\n{self._indent(depth)}}}", depth))
        return work

    def _expand_array(self, value: ArrayValue, depth: int) -> list[Work]:
        if not value.values:
            return [("[]", depth)]
        inner = self._indent(depth + 1)
        work: list[Work] = [("[\n", depth)]
        for i, item in enumerate(value.values):
            if i:
                work.append((",\n", depth))
            work.append((inner, depth))
            work.append((item, depth + 1))
        work.append((f"\n{self._indent(depth)}]", depth))
        return work


def format_value(value: Value, indent: str = "    ") -> str:
    return Formatter(indent=indent).format(value)


__all__ = ["Formatter", "format_value"]
