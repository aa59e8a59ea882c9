"""Routing table entry flags and route classes."""

from __future__ import annotations

from enum import IntEnum, IntFlag

RTF_ADDRCLASSMASK = 0xF8000000

RTCF_VALVE = 0x00200000
RTCF_MASQ = 0x00400000
RTCF_NAT = 0x00800000
RTCF_DOREDIRECT = 0x01000000
RTCF_LOG = 0x02000000
RTCF_DIRECTSRC = 0x04000000

RTMSG_NEWDEVICE = 0x11
RTMSG_DELDEVICE = 0x12
RTMSG_NEWROUTE = 0x21
RTMSG_DELROUTE = 0x22
RTMSG_NEWRULE = 0x31
RTMSG_DELRULE = 0x32
RTMSG_CONTROL = 0x40
RTMSG_AR_FAILED = 0x51


class RouteFlag(IntFlag):
    """Flags of a routing table entry."""

    UP = 0x0001
    GATEWAY = 0x0002
    HOST = 0x0004
    REINSTATE = 0x0008
    DYNAMIC = 0x0010
    MODIFIED = 0x0020
    MTU = 0x0040
    MSS = 0x0040
    WINDOW = 0x0080
    IRTT = 0x0100
    REJECT = 0x0200
    STATIC = 0x0400
    XRESOLVE = 0x0800
    NOFORWARD = 0x1000
    THROW = 0x2000
    NOPMTUDISC = 0x4000
    DEFAULT = 0x00010000
    ALLONLINK = 0x00020000
    ADDRCONF = 0x00040000
    LINKRT = 0x00100000
    NONEXTHOP = 0x00200000
    CACHE = 0x01000000
    FLOW = 0x02000000
    POLICY = 0x04000000
    NAT = 0x08000000
    BROADCAST = 0x10000000
    MULTICAST = 0x20000000
    INTERFACE = 0x40000000
    LOCAL = 0x80000000


class RouteClass(IntEnum):
    """Routing table classes."""

    UNSPEC = 0
    DEFAULT = 253
    MAIN = 254
    LOCAL = 255
    MAX = 255


def rt_addrclass(flags: int) -> int:
    """Return the address class bits of a 32-bit flags word."""
    return (flags & 0xFFFFFFFF) >> 23


def is_local_address(flags: int) -> bool:
    """Tell whether the flags mark a local interface address route."""
    return flags & RTF_ADDRCLASSMASK == RouteFlag.LOCAL | RouteFlag.INTERFACE