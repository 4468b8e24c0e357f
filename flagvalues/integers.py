"""Integer-valued flags of fixed width, with integer parsing that accepts base prefixes."""

from __future__ import annotations

ERR_SYNTAX = "invalid syntax"
ERR_RANGE = "value out of range"

_WORD_BITS = 64


class NumError(ValueError):
    """Raised when text cannot be parsed as an integer of the requested kind.

    ``value`` holds what the parser yields alongside the failure: zero for
    malformed input, the nearest representable bound when out of range.
    """

    def __init__(self, func: str, num: str, reason: str, value: int = 0) -> None:
        super().__init__(f"{func}: parsing {num!r}: {reason}")
        self.func = func
        self.num = num
        self.reason = reason
        self.value = value


def _digit_value(char: str) -> int | None:
    if not char.isascii():
        return None
    if char.isdigit():
        return ord(char) - ord("0")
    low = char.lower()
    if "a" <= low <= "z":
        return ord(low) - ord("a") + 10
    return None


def _underscores_ok(text: str) -> bool:
    """Check that underscores only separate digits (or follow a base prefix)."""
    saw = "^"
    if text[:1] in ("+", "-"):
        text = text[1:]
    start = 0
    is_hex = False
    if len(text) >= 2 and text[0] == "0" and text[1].lower() in "box":
        start = 2
        saw = "0"
        is_hex = text[1].lower() == "x"
    for char in text[start:]:
        if char.isascii() and (char.isdigit() or (is_hex and "a" <= char.lower() <= "f")):
            saw = "0"
        elif char == "_":
            if saw != "0":
                return False
            saw = "_"
        else:
            if saw == "_":
                return False
            saw = "!"
    return saw != "_"


def _check_bits(bits: int, func: str, text: str) -> int:
    if bits == 0:
        return _WORD_BITS
    if bits < 0 or bits > 64:
        raise NumError(func, text, f"invalid bit size {bits}")
    return bits


def _parse_unsigned(text: str, base: int, bits: int, func: str) -> int:
    if text == "":
        raise NumError(func, text, ERR_SYNTAX)

    allow_underscores = base == 0
    digits = text
    if 2 <= base <= 36:
        pass
    elif base == 0:
        base = 10
        if digits[0] == "0":
            prefix = digits[1].lower() if len(digits) >= 3 else ""
            if prefix == "b":
                base, digits = 2, digits[2:]
            elif prefix == "o":
                base, digits = 8, digits[2:]
            elif prefix == "x":
                base, digits = 16, digits[2:]
            else:
                base, digits = 8, digits[1:]
    else:
        raise NumError(func, text, f"invalid base {base}")

    bits = _check_bits(bits, func, text)
    max_value = (1 << bits) - 1

    result = 0
    saw_underscore = False
    for char in digits:
        if char == "_" and allow_underscores:
            saw_underscore = True
            continue
        digit = _digit_value(char)
        if digit is None or digit >= base:
            raise NumError(func, text, ERR_SYNTAX)
        result = result * base + digit
        if result > max_value:
            raise NumError(func, text, ERR_RANGE, max_value)

    if saw_underscore and not _underscores_ok(text):
        raise NumError(func, text, ERR_SYNTAX)
    return result


def parse_uint(text: str, base: int = 0, bits: int = 64) -> int:
    """Parse an unsigned integer.

    With ``base`` 0 the base follows the prefix: ``0x`` hex, ``0o`` or a bare
    leading ``0`` octal, ``0b`` binary, otherwise decimal; underscores may then
    separate digits. ``bits`` 0 means 64. No sign is accepted.
    """
    return _parse_unsigned(text, base, bits, "parse_uint")


def parse_int(text: str, base: int = 0, bits: int = 64) -> int:
    """Parse a signed integer with an optional leading ``+`` or ``-``.

    Prefix, underscore and width rules are those of :func:`parse_uint`.
    """
    func = "parse_int"
    if text == "":
        raise NumError(func, text, ERR_SYNTAX)

    body = text
    negative = False
    if body[0] == "+":
        body = body[1:]
    elif body[0] == "-":
        body = body[1:]
        negative = True

    try:
        magnitude = _parse_unsigned(body, base, bits, func)
    except NumError as err:
        if err.reason != ERR_RANGE:
            raise NumError(func, text, err.reason) from None
        magnitude = err.value

    bits = _check_bits(bits, func, text)
    cutoff = 1 << (bits - 1)
    if not negative and magnitude >= cutoff:
        raise NumError(func, text, ERR_RANGE, cutoff - 1)
    if negative and magnitude > cutoff:
        raise NumError(func, text, ERR_RANGE, -cutoff)
    return -magnitude if negative else magnitude


class IntegerValue:
    """A flag value holding an integer of fixed width and signedness.

    Concrete kinds are declared by subclassing with ``type_name``, ``bits``
    and ``signed`` class keywords.
    """

    _type_name: str = ""
    _bits: int = 0
    _signed: bool = True

    def __init_subclass__(
        cls, *, type_name: str, bits: int, signed: bool, **kwargs: object
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls._type_name = type_name
        cls._bits = bits
        cls._signed = signed

    def __init__(self, value: int = 0) -> None:
        if not self._type_name:
            raise TypeError("IntegerValue must be subclassed with a concrete width")
        low, high = self._limits()
        if not low <= value <= high:
            raise ValueError(
                f"{value} does not fit in {self._type_name} ({low}..{high})"
            )
        self.value = int(value)

    @classmethod
    def _limits(cls) -> tuple[int, int]:
        if cls._signed:
            half = 1 << (cls._bits - 1)
            return -half, half - 1
        return 0, (1 << cls._bits) - 1

    def set(self, text: str) -> None:
        try:
            self.value = self.convert(text)
        except NumError as err:
            # The flag keeps what the parser produced, even on failure.
            self.value = err.value
            raise

    def type_name(self) -> str:
        return self._type_name

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def convert(cls, text: str) -> int:
        if not cls._type_name:
            raise TypeError("IntegerValue must be subclassed with a concrete width")
        if cls._signed:
            return parse_int(text, 0, cls._bits)
        return parse_uint(text, 0, cls._bits)


class Int8Value(IntegerValue, type_name="int8", bits=8, signed=True):
    """A signed 8-bit integer flag value."""


class Int32Value(IntegerValue, type_name="int32", bits=32, signed=True):
    """A signed 32-bit integer flag value."""


class Int64Value(IntegerValue, type_name="int64", bits=64, signed=True):
    """A signed 64-bit integer flag value."""


class UintValue(IntegerValue, type_name="uint", bits=64, signed=False):
    """An unsigned machine-word integer flag value."""


class Uint8Value(IntegerValue, type_name="uint8", bits=8, signed=False):
    """An unsigned 8-bit integer flag value."""