import pytest

from tako import inaddr


def test_address_class_pins():
    assert inaddr.address_class(inaddr.INADDR_LOOPBACK) == "A"
    assert inaddr.address_class(inaddr.INADDR_ALLHOSTS_GROUP) == "D"
    assert inaddr.address_class(0xF0000000) == "E"


def test_address_class_masks_are_consistent():
    for value in (0x0A000001, 0xAC100001, 0xC0A80001):
        cls = inaddr.address_class(value)
        net = {"A": inaddr.IN_CLASSA_NET, "B": inaddr.IN_CLASSB_NET,
               "C": inaddr.IN_CLASSC_NET}[cls]
        host = {"A": inaddr.IN_CLASSA_HOST, "B": inaddr.IN_CLASSB_HOST,
                "C": inaddr.IN_CLASSC_HOST}[cls]
        assert (value & net) | (value & host) == value


def test_string_and_int_agree():
    assert inaddr.address_class("127.0.0.1") == inaddr.address_class(
        inaddr.INADDR_LOOPBACK
    )


def test_multicast_and_experimental():
    assert inaddr.is_multicast(inaddr.INADDR_ALLHOSTS_GROUP)
    assert not inaddr.is_multicast(inaddr.INADDR_LOOPBACK)
    assert inaddr.is_experimental(inaddr.INADDR_ALLHOSTS_GROUP)
    assert inaddr.is_experimental(inaddr.INADDR_BROADCAST)
    assert not inaddr.is_experimental(inaddr.INADDR_LOOPBACK)


def test_badclass():
    assert inaddr.is_badclass(inaddr.INADDR_BROADCAST)
    assert not inaddr.is_badclass(inaddr.INADDR_ALLHOSTS_GROUP)


def test_out_of_range_ipv4():
    with pytest.raises(ValueError):
        inaddr.is_multicast(1 << 32)


def test_in6_multicast_scope():
    assert inaddr.in6_multicast_scope("ff02::1") == inaddr.MC_SCOPE_LINKLOCAL
    assert inaddr.in6_multicast_scope("ff0e::1") == inaddr.MC_SCOPE_GLOBAL
    with pytest.raises(ValueError):
        inaddr.in6_multicast_scope("::1")


def test_in6_bad_length():
    with pytest.raises(ValueError):
        inaddr.in6_is_loopback(b"\x00" * 4)