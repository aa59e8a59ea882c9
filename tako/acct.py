"""Process accounting records and their compressed time values."""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from enum import IntFlag

ACCT_COMM = 16
AHZ = 100
ACCT_BYTEORDER = 128 if sys.byteorder == "big" else 0

_MANTSIZE = 13
_EXPSIZE = 3
_MAXFRACT = (1 << _MANTSIZE) - 1
_MAXEXP = (1 << _EXPSIZE) - 1

_ACCT_V3 = struct.Struct("=BBHIIIIIIf8H16s")


class AcctFlag(IntFlag):
    """Flags of an accounting record."""

    FORK = 1
    SU = 2
    CORE = 8
    XSIG = 16


def decode_comp(value: int) -> int:
    """Expand a compressed value: 13-bit mantissa times 8 to a 3-bit power."""
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"compressed value {value} does not fit in 16 bits")
    return (value & _MAXFRACT) << (_EXPSIZE * (value >> _MANTSIZE))


def encode_comp(value: int) -> int:
    """Compress a value, rounding to the nearest representable one."""
    if value < 0:
        raise ValueError(f"cannot compress negative value {value}")
    exp = 0
    rnd = 0
    while value > _MAXFRACT:
        rnd = value & (1 << (_EXPSIZE - 1))
        value >>= _EXPSIZE
        exp += 1
    if rnd:
        value += 1
        if value > _MAXFRACT:
            value >>= _EXPSIZE
            exp += 1
    if exp > _MAXEXP:
        raise ValueError("value is too large to compress")
    return (exp << _MANTSIZE) | value


@dataclass(frozen=True)
class AcctV3Record:
    """A version 3 process accounting record."""

    flag: int = 0
    version: int = 3
    tty: int = 0
    exitcode: int = 0
    uid: int = 0
    gid: int = 0
    pid: int = 0
    ppid: int = 0
    btime: int = 0
    etime: float = 0.0
    utime: int = 0
    stime: int = 0
    mem: int = 0
    io: int = 0
    rw: int = 0
    minflt: int = 0
    majflt: int = 0
    swaps: int = 0
    comm: str = ""

    def pack(self) -> bytes:
        """Encode the record as it is written to the accounting file."""
        comm = self.comm.encode("utf-8")
        if len(comm) > ACCT_COMM:
            raise ValueError(f"command name is longer than {ACCT_COMM} bytes")
        try:
            return _ACCT_V3.pack(
                self.flag, self.version, self.tty, self.exitcode,
                self.uid, self.gid, self.pid, self.ppid, self.btime, self.etime,
                self.utime, self.stime, self.mem, self.io, self.rw,
                self.minflt, self.majflt, self.swaps, comm,
            )
        except struct.error as exc:
            raise ValueError(f"accounting field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "AcctV3Record":
        """Decode the record at the start of ``data``."""
        if len(data) < _ACCT_V3.size:
            raise ValueError("accounting record is truncated")
        *fields, comm = _ACCT_V3.unpack_from(data)
        name = comm.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        fields[0] = AcctFlag(fields[0])
        return cls(*fields, comm=name)