"""Text form of structures: write them field by field, read them back.

A structure is written as its fields between braces, separated by
``", "``. Strings are quoted, with ``"`` and ``\\`` escaped by a
backslash. Nested structures are written the same way. Reading the
result back into a structure of the same shape gives the original
values.
"""

from __future__ import annotations

import array
import dataclasses
from typing import Any

from .core import set_field
from .fields import ReflectionError, field_values

__all__ = ["IoFields", "io_fields", "write_fields", "read_fields"]

_NESTED_SEQUENCES = (list, tuple, array.array)


def _is_nested_structure(field: Any) -> bool:
    if isinstance(field, type):
        return False
    return dataclasses.is_dataclass(field) or isinstance(field, _NESTED_SEQUENCES)


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _format_field(field: Any) -> str:
    if isinstance(field, str):
        return _quote(field)
    if _is_nested_structure(field):
        return write_fields(field)
    return str(field)


def write_fields(value: Any) -> str:
    """Return the text form of a structure instance."""
    parts = (_format_field(field) for field in field_values(value))
    return "{" + ", ".join(parts) + "}"


@dataclasses.dataclass(frozen=True)
class IoFields:
    """A wrapper whose string form is the field-by-field form of ``value``."""

    value: Any

    def __str__(self) -> str:
        return write_fields(self.value)


def io_fields(value: Any) -> IoFields:
    """Wrap ``value`` so that ``str()`` writes it field by field."""
    return IoFields(value)


# Parsed nodes: ("str", text), ("raw", token) or ("nested", [nodes]).
_Node = tuple[str, Any]


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _peek(self) -> str:
        self._skip_whitespace()
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _expect(self, char: str) -> None:
        found = self._peek()
        if found != char:
            shown = repr(found) if found else "end of input"
            raise ValueError(f"Expected {char!r} at position {self._pos}, found {shown}")
        self._pos += 1

    def parse_structure(self) -> list[_Node]:
        self._expect("{")
        nodes: list[_Node] = []
        if self._peek() == "}":
            self._pos += 1
            return nodes
        while True:
            nodes.append(self._parse_field())
            if self._peek() == ",":
                self._pos += 1
                continue
            self._expect("}")
            return nodes

    def _parse_field(self) -> _Node:
        start = self._peek()
        if start == '"':
            return ("str", self._parse_quoted())
        if start == "{":
            return ("nested", self.parse_structure())
        return ("raw", self._parse_raw())

    def _parse_quoted(self) -> str:
        self._pos += 1
        chars: list[str] = []
        while self._pos < len(self._text):
            char = self._text[self._pos]
            self._pos += 1
            if char == "\\":
                if self._pos >= len(self._text):
                    break
                chars.append(self._text[self._pos])
                self._pos += 1
            elif char == '"':
                return "".join(chars)
            else:
                chars.append(char)
        raise ValueError("Unterminated quoted string")

    def _parse_raw(self) -> str:
        start = self._pos
        while self._pos < len(self._text) and self._text[self._pos] not in ",{}":
            self._pos += 1
        token = self._text[start:self._pos].strip()
        if not token:
            raise ValueError(f"Missing field value at position {start}")
        return token

    def finish(self) -> None:
        if self._peek():
            raise ValueError(f"Unexpected trailing text at position {self._pos}")


_TRUE_WORDS = frozenset({"True", "true", "1"})
_FALSE_WORDS = frozenset({"False", "false", "0"})


def _convert_scalar(current: Any, node: _Node) -> Any:
    kind, data = node
    if isinstance(current, str):
        return data
    if kind == "str":
        raise ValueError(
            f"Quoted string given for a field of type {type(current).__qualname__}"
        )
    if isinstance(current, bool):
        if data in _TRUE_WORDS:
            return True
        if data in _FALSE_WORDS:
            return False
        raise ValueError(f"Invalid boolean value {data!r}")
    if current is None:
        raise ValueError("Cannot read a value for a field that holds None")
    try:
        return type(current)(data)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Invalid value {data!r} for a field of type {type(current).__qualname__}"
        ) from exc


def _convert_all(currents: tuple[Any, ...], nodes: list[_Node]) -> list[Any]:
    if len(currents) != len(nodes):
        raise ValueError(f"Expected {len(currents)} field(s), found {len(nodes)}")
    return [_convert(current, node) for current, node in zip(currents, nodes)]


def _rebuild(current: Any, converted: list[Any]) -> Any:
    if dataclasses.is_dataclass(current):
        names = [f.name for f in dataclasses.fields(current)]
        return dataclasses.replace(current, **dict(zip(names, converted)))
    if isinstance(current, tuple) and hasattr(type(current), "_make"):
        return type(current)._make(converted)
    if isinstance(current, array.array):
        return array.array(current.typecode, converted)
    return type(current)(converted)


def _convert(current: Any, node: _Node) -> Any:
    kind, data = node
    if kind == "nested":
        if not _is_nested_structure(current):
            raise ValueError(
                f"Nested structure given for a field of type {type(current).__qualname__}"
            )
        return _rebuild(current, _convert_all(field_values(current), data))
    return _convert_scalar(current, node)


def read_fields(text: str, value: Any) -> Any:
    """Read the fields of ``value`` from their text form and return ``value``.

    The field types are taken from the values ``value`` holds now. Nothing
    is assigned unless the whole text parses.
    """
    if isinstance(value, type):
        raise ReflectionError("Fields can only be read into an instance.")
    parser = _Parser(text)
    nodes = parser.parse_structure()
    parser.finish()
    converted = _convert_all(field_values(value), nodes)
    for index, new_value in enumerate(converted):
        set_field(value, index, new_value)
    return value