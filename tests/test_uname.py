import platform
import sys

import pytest

from tako.uname import (
    AF_UNIX,
    SUN_PATH_SIZE,
    UTS_FIELD_SIZE,
    UtsName,
    current,
    pack_sockaddr_un,
    sun_len,
)


def sample():
    return UtsName("Linux", "host", "6.1.0", "#1 SMP", "x86_64", "example.com")


def test_round_trip():
    assert UtsName.unpack(sample().pack()) == sample()


def test_field_layout():
    data = sample().pack()
    assert len(data) == 6 * UTS_FIELD_SIZE
    assert data[UTS_FIELD_SIZE : UTS_FIELD_SIZE + 4] == b"host"


def test_longest_field_fits():
    name = UtsName("a" * (UTS_FIELD_SIZE - 1), "", "", "", "")
    assert UtsName.unpack(name.pack()).sysname == name.sysname


def test_field_too_long():
    with pytest.raises(ValueError):
        UtsName("a" * UTS_FIELD_SIZE, "", "", "", "").pack()


def test_field_with_nul():
    with pytest.raises(ValueError):
        UtsName("a\0b", "", "", "", "").pack()


def test_unpack_truncated():
    with pytest.raises(ValueError):
        UtsName.unpack(sample().pack()[:-1])


def test_current_round_trips():
    info = current()
    assert UtsName.unpack(info.pack()) == info
    assert info.sysname == platform.system()[: UTS_FIELD_SIZE - 1]


def test_sun_len_empty():
    assert sun_len("") == 2


def test_sun_len_grows_with_path():
    assert sun_len("/tmp/sock") - sun_len("") == len(b"/tmp/sock")
    assert sun_len(b"/tmp/sock") == sun_len("/tmp/sock")


def test_pack_sockaddr_un():
    data = pack_sockaddr_un("/tmp/sock")
    assert len(data) == 110
    assert int.from_bytes(data[:2], sys.byteorder) == AF_UNIX
    assert data[2:].rstrip(b"\0") == b"/tmp/sock"


def test_pack_sockaddr_un_full_length():
    path = b"p" * SUN_PATH_SIZE
    assert pack_sockaddr_un(path)[2:] == path


def test_pack_sockaddr_un_too_long():
    with pytest.raises(ValueError):
        pack_sockaddr_un("p" * (SUN_PATH_SIZE + 1))