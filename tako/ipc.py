"""Message queue and semaphore constants and semaphore operation records."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

MSG_NOERROR = 0o10000
MSG_EXCEPT = 0o20000
MSG_INFO = 12

SEM_UNDO = 0x1000
SEM_INFO = 19

_SEMBUF = struct.Struct("=Hhh")


class SemCommand(IntEnum):
    """Commands for semaphore control."""

    GETPID = 11
    GETVAL = 12
    GETALL = 13
    GETNCNT = 14
    GETZCNT = 15
    SETVAL = 16
    SETALL = 17


@dataclass(frozen=True)
class SemBuf:
    """One operation on one semaphore of a set."""

    num: int
    op: int
    flags: int = 0

    def pack(self) -> bytes:
        """Encode the operation as the kernel lays it out."""
        try:
            return _SEMBUF.pack(self.num, self.op, self.flags)
        except struct.error as exc:
            raise ValueError(f"semaphore operation field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "SemBuf":
        """Decode the operation at the start of ``data``."""
        if len(data) < _SEMBUF.size:
            raise ValueError("semaphore operation is truncated")
        return cls(*_SEMBUF.unpack_from(data))


def pack_semops(ops: Iterable[SemBuf]) -> bytes:
    """Encode an array of operations to be applied together."""
    packed = [op.pack() for op in ops]
    if not packed:
        raise ValueError("at least one semaphore operation is needed")
    return b"".join(packed)