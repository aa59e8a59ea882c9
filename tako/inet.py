"""Byte order conversion and IPv4 text/number conversion."""

from __future__ import annotations

import re
import sys

_PART = re.compile(r"0[xX][0-9A-Fa-f]+|0[0-7]*|[1-9][0-9]*")


def _swap(value: int, size: int) -> int:
    if not 0 <= value < 1 << (8 * size):
        raise ValueError(f"{value} does not fit in {size} bytes")
    return int.from_bytes(value.to_bytes(size, "big"), sys.byteorder)


def htonl(value: int) -> int:
    """Convert a 32-bit value from host to network byte order."""
    return _swap(value, 4)


def htons(value: int) -> int:
    """Convert a 16-bit value from host to network byte order."""
    return _swap(value, 2)


def ntohl(value: int) -> int:
    """Convert a 32-bit value from network to host byte order."""
    return _swap(value, 4)


def ntohs(value: int) -> int:
    """Convert a 16-bit value from network to host byte order."""
    return _swap(value, 2)


def _parse_part(part: str) -> int:
    if not _PART.fullmatch(part):
        raise ValueError(f"invalid address part {part!r}")
    if part[:2].lower() == "0x":
        return int(part[2:], 16)
    if len(part) > 1 and part[0] == "0":
        return int(part, 8)
    return int(part, 10)


def inet_aton(text: str) -> int:
    """Parse an IPv4 address in numbers-and-dots notation.

    Accepts one to four parts, each decimal, octal or hexadecimal; the
    last part fills the remaining bytes. Returns the address as a number.
    """
    parts = text.split(".")
    if not 1 <= len(parts) <= 4:
        raise ValueError(f"invalid IPv4 address {text!r}")
    values = [_parse_part(part) for part in parts]
    *leading, last = values
    if any(value > 0xFF for value in leading):
        raise ValueError(f"invalid IPv4 address {text!r}")
    tail_bytes = 5 - len(values)
    if last >= 1 << (8 * tail_bytes):
        raise ValueError(f"invalid IPv4 address {text!r}")
    result = 0
    for value in leading:
        result = (result << 8) | value
    return (result << (8 * tail_bytes)) | last


def inet_addr(text: str) -> int:
    """Parse an IPv4 address and return it in network byte order."""
    return htonl(inet_aton(text))


def inet_ntoa(addr: int) -> str:
    """Format an IPv4 address number as dotted decimal."""
    if not 0 <= addr <= 0xFFFFFFFF:
        raise ValueError(f"IPv4 address {addr} is out of range")
    return ".".join(str(octet) for octet in addr.to_bytes(4, "big"))


def inet_makeaddr(net: int, host: int) -> int:
    """Combine a classful network number and a local host address."""
    if net < 256:
        shifted = net << 24
    elif net < 65536:
        shifted = net << 16
    else:
        shifted = net << 8
    return (host | shifted) & 0xFFFFFFFF


def inet_lnaof(addr: int) -> int:
    """Return the local host part of a classful IPv4 address."""
    top = addr >> 24
    if top < 128:
        return addr & 0xFFFFFF
    if top < 192:
        return addr & 0xFFFF
    return addr & 0xFF


def inet_netof(addr: int) -> int:
    """Return the network part of a classful IPv4 address."""
    top = addr >> 24
    if top < 128:
        return addr >> 24
    if top < 192:
        return addr >> 16
    return addr >> 8