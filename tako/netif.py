"""Network interface flags and interface names."""

from __future__ import annotations

from enum import IntFlag

IF_NAMESIZE = 16
IFNAMSIZ = IF_NAMESIZE
IFHWADDRLEN = 6


class InterfaceFlag(IntFlag):
    """Interface state and capability flags."""

    UP = 0x1
    BROADCAST = 0x2
    DEBUG = 0x4
    LOOPBACK = 0x8
    POINTOPOINT = 0x10
    NOTRAILERS = 0x20
    RUNNING = 0x40
    NOARP = 0x80
    PROMISC = 0x100
    ALLMULTI = 0x200
    MASTER = 0x400
    SLAVE = 0x800
    MULTICAST = 0x1000
    PORTSEL = 0x2000
    AUTOMEDIA = 0x4000
    DYNAMIC = 0x8000
    LOWER_UP = 0x10000
    DORMANT = 0x20000
    ECHO = 0x40000


IFF_VOLATILE = (
    InterfaceFlag.LOOPBACK
    | InterfaceFlag.POINTOPOINT
    | InterfaceFlag.BROADCAST
    | InterfaceFlag.ECHO
    | InterfaceFlag.MASTER
    | InterfaceFlag.SLAVE
    | InterfaceFlag.RUNNING
    | InterfaceFlag.LOWER_UP
    | InterfaceFlag.DORMANT
)

_ALL_FLAGS = 0
for _flag in InterfaceFlag:
    _ALL_FLAGS |= _flag


def describe_flags(flags: int) -> list[str]:
    """Return the names of the flags set, lowest bit first."""
    unknown = flags & ~_ALL_FLAGS
    if unknown:
        raise ValueError(f"unknown interface flag bits {unknown:#x}")
    return [flag.name for flag in InterfaceFlag if flags & flag]


def volatile_flags(flags: int) -> InterfaceFlag:
    """Return the flags that only the kernel may change."""
    return InterfaceFlag(flags & IFF_VOLATILE)


def validate_name(name: str) -> str:
    """Check that an interface name fits its fixed-size field; return it."""
    if not name:
        raise ValueError("interface name is empty")
    if "\0" in name:
        raise ValueError("interface name contains a NUL character")
    if len(name.encode("utf-8")) >= IF_NAMESIZE:
        raise ValueError(f"interface name {name!r} is longer than {IF_NAMESIZE - 1} bytes")
    return name