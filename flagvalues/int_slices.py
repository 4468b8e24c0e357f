"""Flags holding lists of integers, given as comma-separated arguments."""

from __future__ import annotations

from collections.abc import Iterable

from flagvalues.integers import parse_int, parse_uint


class IntegerSliceValue:
    """A flag value holding a list of integers of one kind.

    Concrete kinds are declared by subclassing with ``type_name``, ``bits``,
    ``signed`` and ``base`` class keywords; ``base`` 0 accepts prefixes such
    as ``0x``. The first ``set`` replaces the default, later ones extend it.
    """

    _type_name: str = ""
    _bits: int = 64
    _signed: bool = True
    _base: int = 10

    def __init_subclass__(
        cls, *, type_name: str, bits: int, signed: bool, base: int, **kwargs: object
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls._type_name = type_name
        cls._bits = bits
        cls._signed = signed
        cls._base = base

    def __init__(self, value: Iterable[int] = ()) -> None:
        if not self._type_name:
            raise TypeError("IntegerSliceValue must be subclassed with a concrete kind")
        self.value = list(value)
        self._changed = False

    @classmethod
    def _parse(cls, text: str) -> int:
        if not cls._type_name:
            raise TypeError("IntegerSliceValue must be subclassed with a concrete kind")
        if cls._signed:
            return parse_int(text, cls._base, cls._bits)
        return parse_uint(text, cls._base, cls._bits)

    @classmethod
    def _parse_all(cls, texts: Iterable[str]) -> list[int]:
        return [cls._parse(text) for text in texts]

    def set(self, text: str) -> None:
        parsed = self._parse_all(text.split(","))
        if not self._changed:
            self.value = parsed
        else:
            self.value.extend(parsed)
        self._changed = True

    def type_name(self) -> str:
        return self._type_name

    def __str__(self) -> str:
        return "[" + ",".join(str(number) for number in self.value) + "]"

    def append(self, text: str) -> None:
        self.value.append(self._parse(text))

    def replace(self, values: Iterable[str]) -> None:
        self.value = self._parse_all(values)

    def get_slice(self) -> list[str]:
        return [str(number) for number in self.value]

    @classmethod
    def convert(cls, text: str) -> list[int]:
        inner = text.strip("[]")
        if not inner:
            return []
        return cls._parse_all(inner.split(","))


class IntSliceValue(IntegerSliceValue, type_name="intSlice", bits=64, signed=True, base=10):
    """A list of machine-word signed integers, written in decimal."""