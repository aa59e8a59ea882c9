"""Device control request codes, their encoding and the window size record."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import NamedTuple


class Direction(IntFlag):
    """Direction of the data a request transfers."""

    NONE = 0
    WRITE = 1
    READ = 2


class IoctlRequest(NamedTuple):
    """The parts of an encoded request code."""

    direction: Direction
    kind: int
    number: int
    size: int


def _kind(kind: int | str) -> int:
    if isinstance(kind, str):
        if len(kind) != 1:
            raise ValueError(f"request kind {kind!r} must be one character")
        kind = ord(kind)
    if not 0 <= kind <= 0xFF:
        raise ValueError(f"request kind {kind} is out of range")
    return kind


def ioc(direction: int, kind: int | str, number: int, size: int) -> int:
    """Encode a request code from direction, kind, number and argument size."""
    if not 0 <= direction <= 3:
        raise ValueError(f"direction {direction} is out of range")
    if not 0 <= number <= 0xFF:
        raise ValueError(f"request number {number} is out of range")
    if not 0 <= size < 1 << 14:
        raise ValueError(f"argument size {size} is out of range")
    return (direction << 30) | (_kind(kind) << 8) | number | (size << 16)


def io(kind: int | str, number: int) -> int:
    """Encode a request that transfers no data."""
    return ioc(Direction.NONE, kind, number, 0)


def iow(kind: int | str, number: int, size: int) -> int:
    """Encode a request that writes ``size`` bytes to the device."""
    return ioc(Direction.WRITE, kind, number, size)


def ior(kind: int | str, number: int, size: int) -> int:
    """Encode a request that reads ``size`` bytes from the device."""
    return ioc(Direction.READ, kind, number, size)


def iowr(kind: int | str, number: int, size: int) -> int:
    """Encode a request that both writes and reads ``size`` bytes."""
    return ioc(Direction.READ | Direction.WRITE, kind, number, size)


def decode(request: int) -> IoctlRequest:
    """Split a request code into its parts."""
    if not 0 <= request <= 0xFFFFFFFF:
        raise ValueError(f"request {request} is out of range")
    return IoctlRequest(
        Direction(request >> 30),
        (request >> 8) & 0xFF,
        request & 0xFF,
        (request >> 16) & 0x3FFF,
    )


TCGETS = 0x5401
TCSETS = 0x5402
TCSETSW = 0x5403
TCSETSF = 0x5404
TCGETA = 0x5405
TCSETA = 0x5406
TCSETAW = 0x5407
TCSETAF = 0x5408
TCSBRK = 0x5409
TCXONC = 0x540A
TCFLSH = 0x540B
TIOCEXCL = 0x540C
TIOCNXCL = 0x540D
TIOCSCTTY = 0x540E
TIOCGPGRP = 0x540F
TIOCSPGRP = 0x5410
TIOCOUTQ = 0x5411
TIOCSTI = 0x5412
TIOCGWINSZ = 0x5413
TIOCSWINSZ = 0x5414
TIOCMGET = 0x5415
TIOCMBIS = 0x5416
TIOCMBIC = 0x5417
TIOCMSET = 0x5418
TIOCGSOFTCAR = 0x5419
TIOCSSOFTCAR = 0x541A
FIONREAD = 0x541B
TIOCINQ = FIONREAD
TIOCLINUX = 0x541C
TIOCCONS = 0x541D
TIOCGSERIAL = 0x541E
TIOCSSERIAL = 0x541F
TIOCPKT = 0x5420
FIONBIO = 0x5421
TIOCNOTTY = 0x5422
TIOCSETD = 0x5423
TIOCGETD = 0x5424
TCSBRKP = 0x5425
TIOCSBRK = 0x5427
TIOCCBRK = 0x5428
TIOCGSID = 0x5429
TIOCGRS485 = 0x542E
TIOCSRS485 = 0x542F
TIOCGPTN = 0x80045430
TIOCSPTLCK = 0x40045431
TIOCGDEV = 0x80045432
TCGETX = 0x5432
TCSETX = 0x5433
TCSETXF = 0x5434
TCSETXW = 0x5435
TIOCSIG = 0x40045436
TIOCVHANGUP = 0x5437
TIOCGPKT = 0x80045438
TIOCGPTLCK = 0x80045439
TIOCGEXCL = 0x80045440
TIOCGPTPEER = 0x5441
TIOCGISO7816 = 0x80285442
TIOCSISO7816 = 0xC0285443

FIONCLEX = 0x5450
FIOCLEX = 0x5451
FIOASYNC = 0x5452
TIOCSERCONFIG = 0x5453
TIOCSERGWILD = 0x5454
TIOCSERSWILD = 0x5455
TIOCGLCKTRMIOS = 0x5456
TIOCSLCKTRMIOS = 0x5457
TIOCSERGSTRUCT = 0x5458
TIOCSERGETLSR = 0x5459
TIOCSERGETMULTI = 0x545A
TIOCSERSETMULTI = 0x545B
TIOCMIWAIT = 0x545C
TIOCGICOUNT = 0x545D
FIOQSIZE = 0x5460

FIOSETOWN = 0x8901
SIOCSPGRP = 0x8902
FIOGETOWN = 0x8903
SIOCGPGRP = 0x8904
SIOCATMARK = 0x8905
SIOCGSTAMP = 0x8906
SIOCGSTAMPNS = 0x8907

TIOCPKT_DATA = 0
TIOCPKT_FLUSHREAD = 1
TIOCPKT_FLUSHWRITE = 2
TIOCPKT_STOP = 4
TIOCPKT_START = 8
TIOCPKT_NOSTOP = 16
TIOCPKT_DOSTOP = 32
TIOCPKT_IOCTL = 64

TIOCSER_TEMT = 1

SIOCADDRT = 0x890B
SIOCDELRT = 0x890C
SIOCRTMSG = 0x890D
SIOCGIFNAME = 0x8910
SIOCSIFLINK = 0x8911
SIOCGIFCONF = 0x8912
SIOCGIFFLAGS = 0x8913
SIOCSIFFLAGS = 0x8914
SIOCGIFADDR = 0x8915
SIOCSIFADDR = 0x8916
SIOCGIFDSTADDR = 0x8917
SIOCSIFDSTADDR = 0x8918
SIOCGIFBRDADDR = 0x8919
SIOCSIFBRDADDR = 0x891A
SIOCGIFNETMASK = 0x891B
SIOCSIFNETMASK = 0x891C
SIOCGIFMETRIC = 0x891D
SIOCSIFMETRIC = 0x891E
SIOCGIFMEM = 0x891F
SIOCSIFMEM = 0x8920
SIOCGIFMTU = 0x8921
SIOCSIFMTU = 0x8922
SIOCSIFNAME = 0x8923
SIOCSIFHWADDR = 0x8924
SIOCGIFENCAP = 0x8925
SIOCSIFENCAP = 0x8926
SIOCGIFHWADDR = 0x8927
SIOCGIFSLAVE = 0x8929
SIOCSIFSLAVE = 0x8930
SIOCADDMULTI = 0x8931
SIOCDELMULTI = 0x8932
SIOCGIFINDEX = 0x8933
SIOGIFINDEX = SIOCGIFINDEX
SIOCSIFPFLAGS = 0x8934
SIOCGIFPFLAGS = 0x8935
SIOCDIFADDR = 0x8936
SIOCSIFHWBROADCAST = 0x8937
SIOCGIFCOUNT = 0x8938
SIOCGIFBR = 0x8940
SIOCSIFBR = 0x8941
SIOCGIFTXQLEN = 0x8942
SIOCSIFTXQLEN = 0x8943
SIOCDARP = 0x8953
SIOCGARP = 0x8954
SIOCSARP = 0x8955
SIOCDRARP = 0x8960
SIOCGRARP = 0x8961
SIOCSRARP = 0x8962
SIOCGIFMAP = 0x8970
SIOCSIFMAP = 0x8971
SIOCADDDLCI = 0x8980
SIOCDELDLCI = 0x8981
SIOCDEVPRIVATE = 0x89F0
SIOCPROTOPRIVATE = 0x89E0


class ModemLine(IntFlag):
    """Modem control lines."""

    LE = 0x001
    DTR = 0x002
    RTS = 0x004
    ST = 0x008
    SR = 0x010
    CTS = 0x020
    CAR = 0x040
    CD = 0x040
    RNG = 0x080
    RI = 0x080
    DSR = 0x100
    OUT1 = 0x2000
    OUT2 = 0x4000
    LOOP = 0x8000


class LineDiscipline(IntEnum):
    """Terminal line disciplines."""

    TTY = 0
    SLIP = 1
    MOUSE = 2
    PPP = 3
    STRIP = 4
    AX25 = 5
    X25 = 6
    SIXPACK = 7
    MASC = 8
    R3964 = 9
    PROFIBUS_FDL = 10
    IRDA = 11
    SMSBLOCK = 12
    HDLC = 13
    SYNC_PPP = 14
    HCI = 15
    GIGASET_M101 = 16
    SLCAN = 17
    PPS = 18
    V253 = 19
    CAIF = 20
    GSM0710 = 21
    TI_WL = 22
    TRACESINK = 23
    TRACEROUTER = 24
    NCI = 25
    SPEAKUP = 26
    NULL = 27


_WINSIZE = struct.Struct("=HHHH")


@dataclass(frozen=True)
class WinSize:
    """A terminal's size in characters and pixels."""

    rows: int
    cols: int
    xpixel: int = 0
    ypixel: int = 0

    def pack(self) -> bytes:
        """Encode the record as the kernel lays it out."""
        try:
            return _WINSIZE.pack(self.rows, self.cols, self.xpixel, self.ypixel)
        except struct.error as exc:
            raise ValueError(f"window size field out of range: {exc}") from None

    @classmethod
    def unpack(cls, data: bytes) -> "WinSize":
        """Decode the record at the start of ``data``."""
        if len(data) < _WINSIZE.size:
            raise ValueError("window size record is truncated")
        return cls(*_WINSIZE.unpack_from(data))