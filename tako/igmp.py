"""IGMP messages and the internet checksum."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass
from enum import IntEnum

IGMP_MINLEN = 8

IGMP_MAX_HOST_REPORT_DELAY = 10
IGMP_TIMER_SCALE = 10

IGMP_DELAYING_MEMBER = 1
IGMP_IDLE_MEMBER = 2
IGMP_LAZY_MEMBER = 3
IGMP_SLEEPING_MEMBER = 4
IGMP_AWAKENING_MEMBER = 5

IGMP_V1_ROUTER = 1
IGMP_V2_ROUTER = 2

_MESSAGE = struct.Struct("!BBH4s")


class IgmpType(IntEnum):
    """IGMP message types."""

    MEMBERSHIP_QUERY = 0x11
    V1_MEMBERSHIP_REPORT = 0x12
    DVMRP = 0x13
    PIM = 0x14
    TRACE = 0x15
    V2_MEMBERSHIP_REPORT = 0x16
    V2_LEAVE_GROUP = 0x17
    MTRACE_RESP = 0x1E
    MTRACE = 0x1F
    HOST_MEMBERSHIP_QUERY = 0x11
    HOST_MEMBERSHIP_REPORT = 0x12
    HOST_NEW_MEMBERSHIP_REPORT = 0x16
    HOST_LEAVE_MESSAGE = 0x17


def checksum(data: bytes) -> int:
    """Return the 16-bit ones' complement internet checksum of ``data``."""
    data = bytes(data)
    if len(data) % 2:
        data += b"\0"
    total = sum(word for (word,) in struct.iter_unpack("!H", data))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF


@dataclass(frozen=True)
class IgmpMessage:
    """An IGMP message: type, max response code and group address."""

    type: int
    group: str = "0.0.0.0"
    code: int = 0
    cksum: int = 0

    def pack(self) -> bytes:
        """Encode the message, filling in a freshly computed checksum."""
        group = ipaddress.IPv4Address(self.group).packed
        body = _MESSAGE.pack(self.type, self.code, 0, group)
        return _MESSAGE.pack(self.type, self.code, checksum(body), group)

    @classmethod
    def unpack(cls, data: bytes) -> "IgmpMessage":
        """Decode a message; the checksum read is kept as found."""
        if len(data) < IGMP_MINLEN:
            raise ValueError("IGMP message is truncated")
        kind, code, cksum, group = _MESSAGE.unpack_from(data)
        try:
            kind = IgmpType(kind)
        except ValueError:
            pass
        return cls(kind, str(ipaddress.IPv4Address(group)), code, cksum)