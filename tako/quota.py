"""Disk quota commands, formats and the quota block record."""

from __future__ import annotations

import struct
from dataclasses import dataclass

LINUX_QUOTA_VERSION = 2

MAX_IQ_TIME = 604800
MAX_DQ_TIME = 604800

MAXQUOTAS = 2
USRQUOTA = 0
GRPQUOTA = 1
QUOTA_TYPE_NAMES = ("user", "group", "undefined")

QUOTAFILENAME = "quota"
QUOTAGROUP = "staff"

NR_DQHASH = 43
NR_DQUOTS = 256

SUBCMDMASK = 0x00FF
SUBCMDSHIFT = 8

Q_SYNC = 0x800001
Q_QUOTAON = 0x800002
Q_QUOTAOFF = 0x800003
Q_GETFMT = 0x800004
Q_GETINFO = 0x800005
Q_SETINFO = 0x800006
Q_GETQUOTA = 0x800007
Q_SETQUOTA = 0x800008

QFMT_VFS_OLD = 1
QFMT_VFS_V0 = 2
QFMT_OCFS2 = 3
QFMT_VFS_V1 = 4

QIF_BLIMITS = 1
QIF_SPACE = 2
QIF_ILIMITS = 4
QIF_INODES = 8
QIF_BTIME = 16
QIF_ITIME = 32
QIF_LIMITS = QIF_BLIMITS | QIF_ILIMITS
QIF_USAGE = QIF_SPACE | QIF_INODES
QIF_TIMES = QIF_BTIME | QIF_ITIME
QIF_ALL = QIF_LIMITS | QIF_USAGE | QIF_TIMES

IIF_BGRACE = 1
IIF_IGRACE = 2
IIF_FLAGS = 4
IIF_ALL = IIF_BGRACE | IIF_IGRACE | IIF_FLAGS

_DQBLK = struct.Struct("=8QI4x")


@dataclass(frozen=True)
class QuotaBlock:
    """Limits, usage and grace times of one user's or group's quota."""

    bhardlimit: int = 0
    bsoftlimit: int = 0
    curspace: int = 0
    ihardlimit: int = 0
    isoftlimit: int = 0
    curinodes: int = 0
    btime: int = 0
    itime: int = 0
    valid: int = 0

    def pack(self) -> bytes:
        """Encode the record as the kernel lays it out."""
        try:
            return _DQBLK.pack(
                self.bhardlimit, self.bsoftlimit, self.curspace,
                self.ihardlimit, self.isoftlimit, self.curinodes,
                self.btime, self.itime, self.valid,
            )
        except struct.error as exc:
            raise ValueError(f"quota field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "QuotaBlock":
        """Decode the record at the start of ``data``."""
        if len(data) < _DQBLK.size:
            raise ValueError("quota record is truncated")
        return cls(*_DQBLK.unpack_from(data))


def qcmd(cmd: int, kind: int) -> int:
    """Combine a quota command and a quota type into one argument."""
    return (cmd << SUBCMDSHIFT) | (kind & SUBCMDMASK)


def dbtob(num: int) -> int:
    """Convert quota blocks to bytes."""
    return num << 10


def btodb(num: int) -> int:
    """Convert bytes to quota blocks, rounding down."""
    return num >> 10


def fs_to_dq_blocks(num: int, blksize: int) -> int:
    """Convert file system blocks of ``blksize`` bytes to quota blocks."""
    return (num * blksize) // 1024


def dqoff(uid: int) -> int:
    """Return the offset of a user's record in a quota file."""
    return uid * _DQBLK.size