"""SCSI generic driver constants and the old-style request header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

SG_FLAG_DIRECT_IO = 1
SG_FLAG_LUN_INHIBIT = 2
SG_FLAG_NO_DXFER = 0x10000

SG_INFO_OK_MASK = 0x1
SG_INFO_OK = 0x0
SG_INFO_CHECK = 0x1
SG_INFO_DIRECT_IO_MASK = 0x6
SG_INFO_INDIRECT_IO = 0x0
SG_INFO_DIRECT_IO = 0x2
SG_INFO_MIXED_IO = 0x4

SG_EMULATED_HOST = 0x2203
SG_SET_TRANSFORM = 0x2204
SG_GET_TRANSFORM = 0x2205
SG_SET_RESERVED_SIZE = 0x2275
SG_GET_RESERVED_SIZE = 0x2272
SG_GET_SCSI_ID = 0x2276
SG_SET_FORCE_LOW_DMA = 0x2279
SG_GET_LOW_DMA = 0x227A
SG_SET_FORCE_PACK_ID = 0x227B
SG_GET_PACK_ID = 0x227C
SG_GET_NUM_WAITING = 0x227D
SG_GET_SG_TABLESIZE = 0x227F
SG_GET_VERSION_NUM = 0x2282
SG_SCSI_RESET = 0x2284
SG_SCSI_RESET_NOTHING = 0
SG_SCSI_RESET_DEVICE = 1
SG_SCSI_RESET_BUS = 2
SG_SCSI_RESET_HOST = 3
SG_IO = 0x2285
SG_GET_REQUEST_TABLE = 0x2286
SG_SET_KEEP_ORPHAN = 0x2287
SG_GET_KEEP_ORPHAN = 0x2288
SG_SET_TIMEOUT = 0x2201
SG_GET_TIMEOUT = 0x2202
SG_GET_COMMAND_Q = 0x2270
SG_SET_COMMAND_Q = 0x2271
SG_SET_DEBUG = 0x227E
SG_NEXT_CMD_LEN = 0x2283

SG_SCATTER_SZ = 8 * 4096
SG_DEFAULT_RETRIES = 1
SG_DEF_FORCE_LOW_DMA = 0
SG_DEF_FORCE_PACK_ID = 0
SG_DEF_KEEP_ORPHAN = 0
SG_DEF_RESERVED_SIZE = SG_SCATTER_SZ
SG_MAX_QUEUE = 16
SG_BIG_BUFF = SG_DEF_RESERVED_SIZE
SG_MAX_SENSE = 16
SG_DEFAULT_TIMEOUT = 60 * 100
SG_DEF_COMMAND_Q = 0
SG_DEF_UNDERRUN_FLAG = 0


class TransferDirection(IntEnum):
    """Direction of the data moved by a request."""

    NONE = -1
    TO_DEV = -2
    FROM_DEV = -3
    TO_FROM_DEV = -4


class IoMode(IntEnum):
    """How the data of a finished request was transferred."""

    INDIRECT = SG_INFO_INDIRECT_IO
    DIRECT = SG_INFO_DIRECT_IO
    MIXED = SG_INFO_MIXED_IO


class SgInfo(NamedTuple):
    """The parts of a request's info word."""

    check: bool
    io: IoMode


_HEADER = struct.Struct("=iiiiI16s")
_BITS = (
    ("twelve_byte", 1),
    ("target_status", 5),
    ("host_status", 8),
    ("driver_status", 8),
    ("other_flags", 10),
)


@dataclass(frozen=True)
class SgHeader:
    """The header written before and read back after an old-style request."""

    pack_len: int = 0
    reply_len: int = 0
    pack_id: int = 0
    result: int = 0
    twelve_byte: int = 0
    target_status: int = 0
    host_status: int = 0
    driver_status: int = 0
    other_flags: int = 0
    sense_buffer: bytes = bytes(SG_MAX_SENSE)

    def pack(self) -> bytes:
        """Encode the header; the status bits share one 32-bit word."""
        word = 0
        shift = 0
        for name, width in _BITS:
            value = getattr(self, name)
            if not 0 <= value < 1 << width:
                raise ValueError(f"{name} {value} does not fit in {width} bits")
            word |= value << shift
            shift += width
        sense = bytes(self.sense_buffer)
        if len(sense) > SG_MAX_SENSE:
            raise ValueError(f"sense buffer is longer than {SG_MAX_SENSE} bytes")
        try:
            return _HEADER.pack(
                self.pack_len, self.reply_len, self.pack_id, self.result, word, sense
            )
        except struct.error as exc:
            raise ValueError(f"header field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "SgHeader":
        """Decode the header at the start of ``data``."""
        if len(data) < _HEADER.size:
            raise ValueError("sg header is truncated")
        pack_len, reply_len, pack_id, result, word, sense = _HEADER.unpack_from(data)
        bits: dict[str, int] = {}
        for name, width in _BITS:
            bits[name] = word & ((1 << width) - 1)
            word >>= width
        return cls(pack_len, reply_len, pack_id, result, sense_buffer=sense, **bits)


def decode_info(info: int) -> SgInfo:
    """Split the info word of a finished request into its parts."""
    if info < 0:
        raise ValueError(f"info word {info} is negative")
    check = info & SG_INFO_OK_MASK != SG_INFO_OK
    try:
        mode = IoMode(info & SG_INFO_DIRECT_IO_MASK)
    except ValueError:
        raise ValueError(f"info word {info:#x} has an unknown I/O mode") from None
    return SgInfo(check, mode)