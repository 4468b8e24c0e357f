"""IP address flags."""

from __future__ import annotations

import ipaddress
from ipaddress import IPv4Address, IPv6Address

IPAddress = IPv4Address | IPv6Address


def _normalize(address: IPAddress) -> IPAddress:
    if isinstance(address, IPv6Address) and address.ipv4_mapped is not None:
        return address.ipv4_mapped
    return address


def parse_ip(text: str) -> IPAddress:
    """Parse an IPv4 dotted-decimal or IPv6 address.

    IPv4-mapped IPv6 addresses come back as IPv4 addresses. Zones are not
    accepted. Raises ValueError when ``text`` is not an address.
    """
    if not isinstance(text, str) or "%" in text:
        raise ValueError(f"invalid IP address: {text!r}")
    try:
        address = ipaddress.ip_address(text)
    except ValueError:
        raise ValueError(f"invalid IP address: {text!r}") from None
    return _normalize(address)


class IPValue:
    """A flag value holding one IP address, or none."""

    def __init__(self, value: IPAddress | str | None = None) -> None:
        if isinstance(value, str):
            value = parse_ip(value)
        elif value is not None:
            value = _normalize(value)
        self.value: IPAddress | None = value

    def set(self, text: str) -> None:
        try:
            self.value = parse_ip(text.strip())
        except ValueError:
            raise ValueError(f'failed to parse IP: "{text}"') from None

    def type_name(self) -> str:
        return "ip"

    def __str__(self) -> str:
        return "<nil>" if self.value is None else str(self.value)

    @classmethod
    def convert(cls, text: str) -> IPAddress:
        try:
            return parse_ip(text)
        except ValueError:
            raise ValueError(
                f"invalid string being converted to IP address: {text}"
            ) from None