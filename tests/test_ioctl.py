import pytest

from tako.ioctl import (
    TIOCGISO7816,
    TIOCGPKT,
    TIOCGPTN,
    TIOCSIG,
    TIOCSISO7816,
    TIOCSPTLCK,
    Direction,
    WinSize,
    decode,
    io,
    ioc,
    ior,
    iow,
    iowr,
)


def test_read_request_matches_constant():
    assert ior("T", 0x30, 4) == TIOCGPTN


def test_write_request_matches_constant():
    assert iow("T", 0x31, 4) == TIOCSPTLCK


def test_read_write_request_matches_constant():
    assert iowr("T", 0x43, 0x28) == TIOCSISO7816


def test_kind_may_be_number():
    assert ior(ord("T"), 0x42, 0x28) == TIOCGISO7816


@pytest.mark.parametrize(
    "request_code", [TIOCGPTN, TIOCSPTLCK, TIOCGPKT, TIOCSIG, TIOCGISO7816, TIOCSISO7816]
)
def test_decode_round_trip(request_code):
    assert ioc(*decode(request_code)) == request_code


def test_decode_parts():
    parts = decode(iow("m", 5, 24))
    assert parts.direction == Direction.WRITE
    assert parts.kind == ord("m")
    assert parts.number == 5
    assert parts.size == 24


def test_io_has_no_direction_and_size():
    parts = decode(io("T", 0x20))
    assert parts.direction == Direction.NONE
    assert parts.size == 0


@pytest.mark.parametrize(
    "args",
    [(4, "T", 1, 0), (0, "T", 256, 0), (0, "T", 1, 1 << 14), (0, "TT", 1, 0), (0, 300, 1, 0)],
)
def test_ioc_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        ioc(*args)


def test_decode_rejects_out_of_range():
    with pytest.raises(ValueError):
        decode(1 << 32)


def test_winsize_round_trip():
    size = WinSize(24, 80, 640, 480)
    assert WinSize.unpack(size.pack()) == size


def test_winsize_truncated():
    with pytest.raises(ValueError):
        WinSize.unpack(WinSize(1, 2).pack()[:-1])


def test_winsize_out_of_range():
    with pytest.raises(ValueError):
        WinSize(70000, 80).pack()