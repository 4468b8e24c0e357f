"""String-valued flags: single strings, string arrays and comma-separated string slices."""

from __future__ import annotations

import re
from collections.abc import Iterable

_FIELD_END = re.compile(r"[,\n]")
_GO_ASCII_SPACE = frozenset("\t\n\v\f\r \x85\xa0")


class _EmptyRecordError(ValueError):
    """Raised when CSV input holds no record at all."""


def _is_space(char: str) -> bool:
    if ord(char) <= 0xFF:
        return char in _GO_ASCII_SPACE
    return char.isspace()


def _read_quoted(data: str, pos: int) -> tuple[str, int]:
    """Read a quoted field whose opening quote sits just before ``pos``."""
    parts: list[str] = []
    while True:
        close = data.find('"', pos)
        if close < 0:
            raise ValueError('extraneous or missing " in quoted-field')
        parts.append(data[pos:close])
        pos = close + 1
        if data.startswith('"', pos):
            parts.append('"')
            pos += 1
            continue
        if pos >= len(data) or data[pos] in ",\n":
            return "".join(parts), pos
        raise ValueError('extraneous or missing " in quoted-field')


def _parse_record(data: str) -> list[str]:
    fields: list[str] = []
    pos = 0
    end = len(data)
    while True:
        if pos < end and data[pos] == '"':
            field, pos = _read_quoted(data, pos + 1)
        else:
            match = _FIELD_END.search(data, pos)
            stop = match.start() if match else end
            field = data[pos:stop]
            if '"' in field:
                raise ValueError('bare " in non-quoted-field')
            pos = stop
        fields.append(field)
        if pos < end and data[pos] == ",":
            pos += 1
            continue
        return fields


def read_as_csv(text: str) -> list[str]:
    """Parse the first CSV record of ``text`` into its fields.

    An empty string yields an empty list. Malformed quoting raises ValueError.
    """
    if text == "":
        return []
    data = text.replace("\r\n", "\n").lstrip("\n")
    if not data:
        raise _EmptyRecordError("EOF")
    return _parse_record(data)


def _needs_quotes(field: str) -> bool:
    if field == "":
        return False
    if field == "\\.":
        return True
    if any(char in field for char in ',"\r\n'):
        return True
    return _is_space(field[0])


def _quote(field: str) -> str:
    if not _needs_quotes(field):
        return field
    return '"' + field.replace('"', '""') + '"'


def write_as_csv(values: Iterable[str]) -> str:
    """Render ``values`` as a single CSV record without a trailing newline."""
    return ",".join(_quote(value) for value in values)


class StringValue:
    """A flag value holding one string."""

    def __init__(self, value: str = "") -> None:
        self.value = value

    def set(self, text: str) -> None:
        self.value = text

    def type_name(self) -> str:
        return "string"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def convert(cls, text: str) -> str:
        return text


def _strip_brackets(text: str) -> str:
    if len(text) < 2:
        raise ValueError(f"cannot convert {text!r}: expected a bracketed list")
    return text[1:-1]


class StringArrayValue:
    """A flag value collecting one string per occurrence, without splitting on commas."""

    def __init__(self, value: Iterable[str] = ()) -> None:
        self.value = list(value)
        self._changed = False

    def set(self, text: str) -> None:
        if not self._changed:
            self.value = [text]
            self._changed = True
        else:
            self.value.append(text)

    def append(self, text: str) -> None:
        self.value.append(text)

    def replace(self, values: Iterable[str]) -> None:
        self.value = list(values)

    def get_slice(self) -> list[str]:
        return list(self.value)

    def type_name(self) -> str:
        return "stringArray"

    def __str__(self) -> str:
        return "[" + write_as_csv(self.value) + "]"

    @classmethod
    def convert(cls, text: str) -> list[str]:
        inner = _strip_brackets(text)
        if not inner:
            return []
        return read_as_csv(inner)


class StringSliceValue:
    """A flag value whose arguments are CSV records, accumulated across occurrences."""

    def __init__(self, value: Iterable[str] = ()) -> None:
        self.value = list(value)
        self._changed = False

    def set(self, text: str) -> None:
        parsed = read_as_csv(text)
        if not self._changed:
            self.value = parsed
        else:
            self.value.extend(parsed)
        self._changed = True

    def append(self, text: str) -> None:
        self.value.append(text)

    def replace(self, values: Iterable[str]) -> None:
        self.value = list(values)

    def get_slice(self) -> list[str]:
        return list(self.value)

    def type_name(self) -> str:
        return "stringSlice"

    def __str__(self) -> str:
        return "[" + write_as_csv(self.value) + "]"

    @classmethod
    def convert(cls, text: str) -> list[str]:
        inner = _strip_brackets(text)
        if not inner:
            return []
        return read_as_csv(inner)