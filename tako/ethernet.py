"""Ethernet addresses, frame headers and frame length limits."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from enum import IntEnum

ETH_ALEN = 6
ETH_HLEN = 14
ETH_ZLEN = 60
ETH_DATA_LEN = 1500
ETH_FRAME_LEN = 1514

ETHER_ADDR_LEN = ETH_ALEN
ETHER_TYPE_LEN = 2
ETHER_CRC_LEN = 4
ETHER_HDR_LEN = ETH_HLEN
ETHER_MIN_LEN = ETH_ZLEN + ETHER_CRC_LEN
ETHER_MAX_LEN = ETH_FRAME_LEN + ETHER_CRC_LEN
ETHERMTU = ETH_DATA_LEN
ETHERMIN = ETHER_MIN_LEN - ETHER_HDR_LEN - ETHER_CRC_LEN

_HEADER = struct.Struct("!6s6sH")
_OCTET = re.compile(r"[0-9A-Fa-f]{1,2}")


class EtherType(IntEnum):
    """Protocol identifiers carried in the type field."""

    PUP = 0x0200
    SPRITE = 0x0500
    IP = 0x0800
    ARP = 0x0806
    TRAIL = 0x1000
    REVARP = 0x8035
    AT = 0x809B
    AARP = 0x80F3
    VLAN = 0x8100
    IPX = 0x8137
    IPV6 = 0x86DD
    LOOPBACK = 0x9000


@dataclass(frozen=True)
class EtherAddr:
    """A six-byte hardware address."""

    octets: bytes

    def __post_init__(self) -> None:
        octets = bytes(self.octets)
        if len(octets) != ETH_ALEN:
            raise ValueError(f"an ethernet address has {ETH_ALEN} octets")
        object.__setattr__(self, "octets", octets)

    @classmethod
    def parse(cls, text: str) -> "EtherAddr":
        """Parse an address written as hex octets separated by ':' or '-'."""
        parts = re.split(r"[:-]", text.strip())
        if len(parts) != ETH_ALEN or not all(_OCTET.fullmatch(p) for p in parts):
            raise ValueError(f"invalid ethernet address {text!r}")
        return cls(bytes(int(part, 16) for part in parts))

    def __str__(self) -> str:
        return ":".join(f"{octet:02x}" for octet in self.octets)


@dataclass(frozen=True)
class EtherHeader:
    """Destination, source and type at the start of a frame."""

    dhost: EtherAddr
    shost: EtherAddr
    ether_type: int

    def pack(self) -> bytes:
        """Encode the header in network byte order."""
        return _HEADER.pack(self.dhost.octets, self.shost.octets, self.ether_type)

    @classmethod
    def unpack(cls, data: bytes) -> "EtherHeader":
        """Decode the header at the start of a frame."""
        if len(data) < _HEADER.size:
            raise ValueError("ethernet header is truncated")
        dhost, shost, ether_type = _HEADER.unpack_from(data)
        return cls(EtherAddr(dhost), EtherAddr(shost), ether_type)


def is_valid_frame_length(length: int) -> bool:
    """Tell whether a frame of ``length`` bytes, CRC included, is legal."""
    return ETHER_MIN_LEN <= length <= ETHER_MAX_LEN