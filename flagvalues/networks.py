"""IPv4 netmask and CIDR network flags."""

from __future__ import annotations

import ipaddress
from ipaddress import IPv4Address, IPv4Network, IPv6Network

from flagvalues.addresses import parse_ip
from flagvalues.integers import NumError, parse_int

IPNetwork = IPv4Network | IPv6Network


def _last_four_bytes(text: str) -> bytes:
    address = parse_ip(text)
    if isinstance(address, IPv4Address):
        return address.packed
    return address.packed[12:]


def parse_ipv4_mask(text: str) -> bytes:
    """Parse an IPv4 mask written as an address (``255.255.255.0``) or as hex (``ffffff00``).

    Returns the four mask bytes. Raises ValueError if ``text`` is neither.
    """
    try:
        return _last_four_bytes(text)
    except ValueError:
        pass
    if len(text) != 8:
        raise ValueError(f"invalid IPv4 mask: {text!r}")
    try:
        octets = [parse_int("0x" + text[i : i + 2], 0, 0) for i in range(0, 8, 2)]
    except NumError:
        raise ValueError(f"invalid IPv4 mask: {text!r}") from None
    try:
        return _last_four_bytes(".".join(str(octet) for octet in octets))
    except ValueError:
        raise ValueError(f"invalid IPv4 mask: {text!r}") from None


class IPMaskValue:
    """A flag value holding a four-byte IPv4 mask, or none."""

    def __init__(self, value: bytes | str | None = None) -> None:
        if isinstance(value, str):
            value = parse_ipv4_mask(value)
        self.value: bytes | None = None if value is None else bytes(value)

    def set(self, text: str) -> None:
        try:
            self.value = parse_ipv4_mask(text)
        except ValueError:
            raise ValueError(f'failed to parse IP mask: "{text}"') from None

    def type_name(self) -> str:
        return "ipMask"

    def __str__(self) -> str:
        return self.value.hex() if self.value else "<nil>"

    @classmethod
    def convert(cls, text: str) -> bytes:
        try:
            return parse_ipv4_mask(text)
        except ValueError:
            raise ValueError(f"unable to parse {text} as net.IPMask") from None


def _parse_cidr(text: str) -> IPNetwork:
    error = ValueError(f"invalid CIDR address: {text}")
    address_text, sep, prefix_text = text.partition("/")
    if not sep or "%" in address_text:
        raise error
    if not (prefix_text.isascii() and prefix_text.isdigit()):
        raise error
    try:
        address = ipaddress.ip_address(address_text)
    except ValueError:
        raise error from None
    prefix = int(prefix_text)
    if prefix > address.max_prefixlen:
        raise error
    return ipaddress.ip_network((address, prefix), strict=False)


class IPNetValue:
    """A flag value holding a CIDR network; host bits of the address are cleared."""

    def __init__(self, value: IPNetwork | str | None = None) -> None:
        if isinstance(value, str):
            value = _parse_cidr(value.strip())
        self.value: IPNetwork | None = value

    def set(self, text: str) -> None:
        self.value = _parse_cidr(text.strip())

    def type_name(self) -> str:
        return "ipNet"

    def __str__(self) -> str:
        return "<nil>" if self.value is None else str(self.value)

    @classmethod
    def convert(cls, text: str) -> IPNetwork:
        try:
            return _parse_cidr(text.strip())
        except ValueError:
            raise ValueError(
                f"invalid string being converted to IPNet: {text}"
            ) from None