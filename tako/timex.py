"""Clock adjustment modes, clock status bits and clock states."""

from __future__ import annotations

from enum import IntEnum, IntFlag

MAXTC = 6


class AdjMode(IntFlag):
    """Fields selected for change in a clock adjustment."""

    OFFSET = 0x0001
    FREQUENCY = 0x0002
    MAXERROR = 0x0004
    ESTERROR = 0x0008
    STATUS = 0x0010
    TIMECONST = 0x0020
    TAI = 0x0080
    SETOFFSET = 0x0100
    MICRO = 0x1000
    NANO = 0x2000
    TICK = 0x4000
    OFFSET_SINGLESHOT = 0x8001
    OFFSET_SS_READ = 0xA001


MOD_OFFSET = AdjMode.OFFSET
MOD_FREQUENCY = AdjMode.FREQUENCY
MOD_MAXERROR = AdjMode.MAXERROR
MOD_ESTERROR = AdjMode.ESTERROR
MOD_STATUS = AdjMode.STATUS
MOD_TIMECONST = AdjMode.TIMECONST
MOD_CLKB = AdjMode.TICK
MOD_CLKA = AdjMode.OFFSET_SINGLESHOT
MOD_TAI = AdjMode.TAI
MOD_MICRO = AdjMode.MICRO
MOD_NANO = AdjMode.NANO


class ClockStatus(IntFlag):
    """Clock status bits."""

    PLL = 0x0001
    PPSFREQ = 0x0002
    PPSTIME = 0x0004
    FLL = 0x0008
    INS = 0x0010
    DEL = 0x0020
    UNSYNC = 0x0040
    FREQHOLD = 0x0080
    PPSSIGNAL = 0x0100
    PPSJITTER = 0x0200
    PPSWANDER = 0x0400
    PPSERROR = 0x0800
    CLOCKERR = 0x1000
    NANO = 0x2000
    MODE = 0x4000
    CLK = 0x8000


STA_RONLY = (
    ClockStatus.PPSSIGNAL
    | ClockStatus.PPSJITTER
    | ClockStatus.PPSWANDER
    | ClockStatus.PPSERROR
    | ClockStatus.CLOCKERR
    | ClockStatus.NANO
    | ClockStatus.MODE
    | ClockStatus.CLK
)


class ClockState(IntEnum):
    """State of the clock reported by an adjustment."""

    OK = 0
    INS = 1
    DEL = 2
    OOP = 3
    WAIT = 4
    ERROR = 5
    BAD = 5


def read_only_status(status: int) -> ClockStatus:
    """Return the status bits that only the kernel may set."""
    if status < 0:
        raise ValueError(f"status {status} is negative")
    return ClockStatus(status & STA_RONLY)