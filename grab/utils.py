"""Byte-order conversion and dotted IPv4 address parsing."""

from __future__ import annotations

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


def htons(port: int) -> int:
    """Swap the two bytes of a 16-bit value."""
    port &= _MASK16
    return ((port & 0xFF) << 8) | ((port >> 8) & 0xFF)


def htonl(addr: int) -> int:
    """Reverse the four bytes of a 32-bit value."""
    addr &= _MASK32
    return (
        ((addr & 0xFF000000) >> 24)
        | ((addr & 0x00FF0000) >> 8)
        | ((addr & 0x0000FF00) << 8)
        | ((addr & 0x000000FF) << 24)
    )


def inet_addr(ip: str) -> int:
    """Parse a dotted IPv4 string into a 32-bit value in network byte order.

    Characters other than digits and dots are skipped. More than three dots
    raise ValueError.
    """
    result = 0
    octet = 0
    shift = 24
    for char in ip:
        if "0" <= char <= "9":
            octet = (octet * 10 + (ord(char) - ord("0"))) & _MASK32
        elif char == ".":
            if shift < 8:
                raise ValueError(f"too many dots in address: {ip!r}")
            result |= (octet << shift) & _MASK32
            shift -= 8
            octet = 0
    result |= octet
    return htonl(result)