"""Internet address constants, protocol numbers and address classification."""

from __future__ import annotations

import ipaddress
from enum import IntEnum
from typing import Union

IPv4Like = Union[int, str, ipaddress.IPv4Address]
IPv6Like = Union[bytes, bytearray, str, ipaddress.IPv6Address]

INADDR_ANY = 0x00000000
INADDR_BROADCAST = 0xFFFFFFFF
INADDR_NONE = 0xFFFFFFFF
INADDR_LOOPBACK = 0x7F000001

INADDR_UNSPEC_GROUP = 0xE0000000
INADDR_ALLHOSTS_GROUP = 0xE0000001
INADDR_ALLRTRS_GROUP = 0xE0000002
INADDR_ALLSNOOPERS_GROUP = 0xE000006A
INADDR_MAX_LOCAL_GROUP = 0xE00000FF

IN6ADDR_ANY = bytes(16)
IN6ADDR_LOOPBACK = bytes(15) + b"\x01"

INET_ADDRSTRLEN = 16
INET6_ADDRSTRLEN = 46
IPPORT_RESERVED = 1024
IN_LOOPBACKNET = 127

IN_CLASSA_NET = 0xFF000000
IN_CLASSA_NSHIFT = 24
IN_CLASSA_HOST = 0xFFFFFFFF & ~IN_CLASSA_NET
IN_CLASSA_MAX = 128
IN_CLASSB_NET = 0xFFFF0000
IN_CLASSB_NSHIFT = 16
IN_CLASSB_HOST = 0xFFFFFFFF & ~IN_CLASSB_NET
IN_CLASSB_MAX = 65536
IN_CLASSC_NET = 0xFFFFFF00
IN_CLASSC_NSHIFT = 8
IN_CLASSC_HOST = 0xFFFFFFFF & ~IN_CLASSC_NET

MC_SCOPE_NODELOCAL = 0x1
MC_SCOPE_LINKLOCAL = 0x2
MC_SCOPE_SITELOCAL = 0x5
MC_SCOPE_ORGLOCAL = 0x8
MC_SCOPE_GLOBAL = 0xE


class IpProto(IntEnum):
    """IP protocol numbers."""

    IP = 0
    ICMP = 1
    IGMP = 2
    IPIP = 4
    TCP = 6
    EGP = 8
    PUP = 12
    UDP = 17
    IDP = 22
    TP = 29
    DCCP = 33
    IPV6 = 41
    ROUTING = 43
    FRAGMENT = 44
    RSVP = 46
    GRE = 47
    ESP = 50
    AH = 51
    ICMPV6 = 58
    NONE = 59
    DSTOPTS = 60
    MTP = 92
    BEETPH = 94
    ENCAP = 98
    PIM = 103
    COMP = 108
    SCTP = 132
    MH = 135
    UDPLITE = 136
    MPLS = 137
    RAW = 255
    MAX = 256
    HOPOPTS = 0


def _v4(addr: IPv4Like) -> int:
    if isinstance(addr, (str, ipaddress.IPv4Address)):
        return int(ipaddress.IPv4Address(addr))
    if not 0 <= addr <= 0xFFFFFFFF:
        raise ValueError(f"IPv4 address {addr} is out of range")
    return addr


def _v6(addr: IPv6Like) -> bytes:
    if isinstance(addr, (str, ipaddress.IPv6Address)):
        return ipaddress.IPv6Address(addr).packed
    data = bytes(addr)
    if len(data) != 16:
        raise ValueError("an IPv6 address has 16 bytes")
    return data


def address_class(addr: IPv4Like) -> str:
    """Return the classful network class of an IPv4 address: A to E."""
    value = _v4(addr)
    if value & 0x80000000 == 0:
        return "A"
    if value & 0xC0000000 == 0x80000000:
        return "B"
    if value & 0xE0000000 == 0xC0000000:
        return "C"
    if value & 0xF0000000 == 0xE0000000:
        return "D"
    return "E"


def is_multicast(addr: IPv4Like) -> bool:
    """Tell whether an IPv4 address is a class D (multicast) address."""
    return _v4(addr) & 0xF0000000 == 0xE0000000


def is_experimental(addr: IPv4Like) -> bool:
    """Tell whether an IPv4 address lies in 224.0.0.0/3."""
    return _v4(addr) & 0xE0000000 == 0xE0000000


def is_badclass(addr: IPv4Like) -> bool:
    """Tell whether an IPv4 address lies in 240.0.0.0/4."""
    return _v4(addr) & 0xF0000000 == 0xF0000000


def in6_is_unspecified(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is all zeros."""
    return _v6(addr) == IN6ADDR_ANY


def in6_is_loopback(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is ::1."""
    return _v6(addr) == IN6ADDR_LOOPBACK


def in6_is_multicast(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is multicast (ff00::/8)."""
    return _v6(addr)[0] == 0xFF


def in6_is_linklocal(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is link-local (fe80::/10)."""
    data = _v6(addr)
    return data[0] == 0xFE and data[1] & 0xC0 == 0x80


def in6_is_sitelocal(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is site-local (fec0::/10)."""
    data = _v6(addr)
    return data[0] == 0xFE and data[1] & 0xC0 == 0xC0


def in6_is_v4mapped(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is an IPv4-mapped address."""
    data = _v6(addr)
    return data[:10] == bytes(10) and data[10:12] == b"\xff\xff"


def in6_is_v4compat(addr: IPv6Like) -> bool:
    """Tell whether an IPv6 address is an IPv4-compatible address."""
    data = _v6(addr)
    return data[:12] == bytes(12) and data[15] > 1


def in6_multicast_scope(addr: IPv6Like) -> int:
    """Return the scope field of an IPv6 multicast address."""
    data = _v6(addr)
    if data[0] != 0xFF:
        raise ValueError("not a multicast address")
    return data[1] & 0xF