"""Flags holding lists of IP addresses."""

from __future__ import annotations

from collections.abc import Iterable

from flagvalues.addresses import IPAddress, parse_ip
from flagvalues.strings import read_as_csv, write_as_csv

_REMOVE_QUOTES = str.maketrans("", "", "\"'`")


def _coerce(address: IPAddress | str | None) -> IPAddress | None:
    if address is None:
        return None
    return parse_ip(address if isinstance(address, str) else str(address))


def _parse_strict(text: str) -> IPAddress:
    try:
        return parse_ip(text.strip())
    except ValueError:
        raise ValueError(
            f"invalid string being converted to IP address: {text}"
        ) from None


def _parse_lenient(text: str) -> IPAddress | None:
    try:
        return parse_ip(text.strip())
    except ValueError:
        return None


def _render(address: IPAddress | None) -> str:
    return "<nil>" if address is None else str(address)


class IPSliceValue:
    """A flag value holding a list of IP addresses.

    Arguments are comma-separated; quote characters are ignored and spaces
    around each address are trimmed. The first ``set`` replaces the default,
    later ones extend it. ``append`` and ``replace`` keep unparsable entries
    as ``None``.
    """

    def __init__(self, value: Iterable[IPAddress | str | None] = ()) -> None:
        self.value: list[IPAddress | None] = [_coerce(item) for item in value]
        self._changed = False

    def set(self, text: str) -> None:
        try:
            fields = read_as_csv(text.translate(_REMOVE_QUOTES))
        except ValueError:
            # Without quotes the only failure left is input holding no record.
            fields = []
        parsed = [_parse_strict(field) for field in fields]
        if not self._changed:
            self.value = parsed
        else:
            self.value.extend(parsed)
        self._changed = True

    def type_name(self) -> str:
        return "ipSlice"

    def __str__(self) -> str:
        return "[" + write_as_csv(_render(item) for item in self.value) + "]"

    def append(self, text: str) -> None:
        self.value.append(_parse_lenient(text))

    def replace(self, values: Iterable[str]) -> None:
        self.value = [_parse_lenient(text) for text in values]

    def get_slice(self) -> list[str]:
        return [_render(item) for item in self.value]

    @classmethod
    def convert(cls, text: str) -> list[IPAddress]:
        inner = text.strip("[]")
        if not inner:
            return []
        return [_parse_strict(item) for item in inner.split(",")]