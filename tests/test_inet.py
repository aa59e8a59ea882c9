import sys

import pytest

from tako import inet
from tako.inaddr import INADDR_LOOPBACK


def test_htonl_puts_most_significant_byte_first_in_memory():
    value = inet.htonl(0x01020304)
    assert value.to_bytes(4, sys.byteorder) == bytes([1, 2, 3, 4])


def test_htons_puts_most_significant_byte_first_in_memory():
    value = inet.htons(0x0102)
    assert value.to_bytes(2, sys.byteorder) == bytes([1, 2])


@pytest.mark.parametrize("value", [0, 1, 0x12345678, 0xFFFFFFFF])
def test_long_round_trip(value):
    assert inet.ntohl(inet.htonl(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xFFFF])
def test_short_round_trip(value):
    assert inet.ntohs(inet.htons(value)) == value


def test_byte_order_range_errors():
    with pytest.raises(ValueError):
        inet.htonl(-1)
    with pytest.raises(ValueError):
        inet.htons(0x10000)


@pytest.mark.parametrize(
    "text", ["127.0.0.1", "127.1", "127.0.1", "0x7f.1", "0177.0.0.1", "2130706433"]
)
def test_inet_aton_forms(text):
    assert inet.inet_aton(text) == INADDR_LOOPBACK


@pytest.mark.parametrize(
    "text", ["", "256.0.0.1", "1.2.3.4.5", "1..2", "a.b", "08.1.1.1", "-1", "1.2.3.256"]
)
def test_inet_aton_rejects(text):
    with pytest.raises(ValueError):
        inet.inet_aton(text)


@pytest.mark.parametrize("text", ["0.0.0.0", "10.1.2.3", "192.168.100.200", "255.255.255.255"])
def test_ntoa_aton_round_trip(text):
    assert inet.inet_ntoa(inet.inet_aton(text)) == text


def test_inet_addr_is_network_order():
    assert inet.inet_addr("10.1.2.3") == inet.htonl(inet.inet_aton("10.1.2.3"))


def test_inet_ntoa_range():
    with pytest.raises(ValueError):
        inet.inet_ntoa(1 << 32)


@pytest.mark.parametrize("text", ["10.1.2.3", "172.16.5.4", "192.168.1.2"])
def test_makeaddr_from_parts(text):
    addr = inet.inet_aton(text)
    assert inet.inet_makeaddr(inet.inet_netof(addr), inet.inet_lnaof(addr)) == addr


def test_lnaof_loopback():
    assert inet.inet_lnaof(INADDR_LOOPBACK) == 1
    assert inet.inet_netof(INADDR_LOOPBACK) == 127