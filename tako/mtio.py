"""Magnetic tape operations, drive types and status bits."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from .ioctl import ior, iow

DEFTAPE = "/dev/tape"

MT_ST_BLKSIZE_SHIFT = 0
MT_ST_BLKSIZE_MASK = 0xFFFFFF
MT_ST_DENSITY_SHIFT = 24
MT_ST_DENSITY_MASK = 0xFF000000
MT_ST_SOFTERR_SHIFT = 0
MT_ST_SOFTERR_MASK = 0xFFFF
MT_ST_OPTIONS = 0xF0000000
MT_ST_BOOLEANS = 0x10000000
MT_ST_SETBOOLEANS = 0x30000000
MT_ST_CLEARBOOLEANS = 0x40000000
MT_ST_WRITE_THRESHOLD = 0x20000000
MT_ST_DEF_BLKSIZE = 0x50000000
MT_ST_DEF_OPTIONS = 0x60000000
MT_ST_BUFFER_WRITES = 0x1
MT_ST_ASYNC_WRITES = 0x2
MT_ST_READ_AHEAD = 0x4
MT_ST_DEBUGGING = 0x8
MT_ST_TWO_FM = 0x10
MT_ST_FAST_MTEOM = 0x20
MT_ST_AUTO_LOCK = 0x40
MT_ST_DEF_WRITES = 0x80
MT_ST_CAN_BSR = 0x100
MT_ST_NO_BLKLIMS = 0x200
MT_ST_CAN_PARTITIONS = 0x400
MT_ST_SCSI2LOGICAL = 0x800
MT_ST_CLEAR_DEFAULT = 0xFFFFF
MT_ST_DEF_DENSITY = MT_ST_DEF_OPTIONS | 0x100000
MT_ST_DEF_COMPRESSION = MT_ST_DEF_OPTIONS | 0x200000
MT_ST_DEF_DRVBUFFER = MT_ST_DEF_OPTIONS | 0x300000
MT_ST_HPLOADER_OFFSET = 10000


class TapeOp(IntEnum):
    """Operations performed with the tape operation request."""

    RESET = 0
    FSF = 1
    BSF = 2
    FSR = 3
    BSR = 4
    WEOF = 5
    REW = 6
    OFFL = 7
    NOP = 8
    RETEN = 9
    BSFM = 10
    FSFM = 11
    EOM = 12
    ERASE = 13
    RAS1 = 14
    RAS2 = 15
    RAS3 = 16
    SETBLK = 20
    SETDENSITY = 21
    SEEK = 22
    TELL = 23
    SETDRVBUFFER = 24
    FSS = 25
    BSS = 26
    WSM = 27
    LOCK = 28
    UNLOCK = 29
    LOAD = 30
    UNLOAD = 31
    COMPRESSION = 32
    SETPART = 33
    MKPART = 34


class TapeType(IntEnum):
    """Kinds of tape drive."""

    UNKNOWN = 0x01
    QIC02 = 0x02
    WT5150 = 0x03
    ARCHIVE_5945L2 = 0x04
    CMSJ500 = 0x05
    TDC3610 = 0x06
    ARCHIVE_VP60I = 0x07
    ARCHIVE_2150L = 0x08
    ARCHIVE_2060L = 0x09
    ARCHIVESC499 = 0x0A
    QIC02_ALL_FEATURES = 0x0F
    WT5099EEN24 = 0x11
    TEAC_MT2ST = 0x12
    EVEREX_FT40A = 0x32
    DDS1 = 0x51
    DDS2 = 0x52
    SCSI1 = 0x71
    SCSI2 = 0x72
    FTAPE_UNKNOWN = 0x800000
    FTAPE_FLAG = 0x800000


_TAPE_NAMES = {
    TapeType.UNKNOWN: "Unknown type of tape device",
    TapeType.QIC02: "Generic QIC-02 tape streamer",
    TapeType.WT5150: "Wangtek 5150, QIC-150",
    TapeType.ARCHIVE_5945L2: "Archive 5945L-2",
    TapeType.CMSJ500: "CMS Jumbo 500",
    TapeType.TDC3610: "Tandberg TDC 3610, QIC-24",
    TapeType.ARCHIVE_VP60I: "Archive VP60i, QIC-02",
    TapeType.ARCHIVE_2150L: "Archive Viper 2150L",
    TapeType.ARCHIVE_2060L: "Archive Viper 2060L",
    TapeType.ARCHIVESC499: "Archive SC-499 QIC-36 controller",
    TapeType.QIC02_ALL_FEATURES: "Generic QIC-02 tape, all features",
    TapeType.WT5099EEN24: "Wangtek 5099-een24, 60MB",
    TapeType.TEAC_MT2ST: "Teac MT-2ST 155mb data cassette drive",
    TapeType.EVEREX_FT40A: "Everex FT40A, QIC-40",
    TapeType.SCSI1: "Generic SCSI-1 tape",
    TapeType.SCSI2: "Generic SCSI-2 tape",
}

_STATUS_BITS = (
    ("EOF", 0x80000000),
    ("BOT", 0x40000000),
    ("EOT", 0x20000000),
    ("SM", 0x10000000),
    ("EOD", 0x08000000),
    ("WR_PROT", 0x04000000),
    ("ONLINE", 0x01000000),
    ("D_6250", 0x00800000),
    ("D_1600", 0x00400000),
    ("D_800", 0x00200000),
    ("DR_OPEN", 0x00040000),
    ("IM_REP_EN", 0x00010000),
)

_MTOP = struct.Struct("@hi")
_MTGET_SIZE = struct.calcsize("@lllllii0l")
_MTPOS_SIZE = struct.calcsize("@l")
_MTCONFIGINFO_SIZE = struct.calcsize("@llHHHLH10s0l")


def _as_op(value: int):
    try:
        return TapeOp(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class MtOp:
    """A tape operation and its repeat count."""

    op: int
    count: int = 1

    def pack(self) -> bytes:
        """Encode the record as the kernel lays it out."""
        try:
            return _MTOP.pack(self.op, self.count)
        except struct.error as exc:
            raise ValueError(f"tape operation field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "MtOp":
        """Decode the record at the start of ``data``."""
        if len(data) < _MTOP.size:
            raise ValueError("tape operation record is truncated")
        op, count = _MTOP.unpack_from(data)
        return cls(_as_op(op), count)


def tape_name(kind: int) -> str:
    """Return the description of a tape drive type."""
    try:
        return _TAPE_NAMES[TapeType(kind)]
    except (ValueError, KeyError):
        raise ValueError(f"no description for tape type {kind:#x}") from None


def status_flags(gstat: int) -> list[str]:
    """Return the names of the generic status bits set in ``gstat``."""
    return [name for name, bit in _STATUS_BITS if gstat & bit]


def request_codes() -> dict[str, int]:
    """Return the tape request codes, keyed by name."""
    return {
        "MTIOCTOP": iow("m", 1, _MTOP.size),
        "MTIOCGET": ior("m", 2, _MTGET_SIZE),
        "MTIOCPOS": ior("m", 3, _MTPOS_SIZE),
        "MTIOCGETCONFIG": ior("m", 4, _MTCONFIGINFO_SIZE),
        "MTIOCSETCONFIG": iow("m", 5, _MTCONFIGINFO_SIZE),
    }