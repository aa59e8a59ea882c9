import ipaddress

import pytest

from tako.igmp import IGMP_MINLEN, IgmpMessage, IgmpType, checksum


def test_packed_message_checksums_to_zero():
    packed = IgmpMessage(IgmpType.V2_MEMBERSHIP_REPORT, "224.0.0.251").pack()
    assert len(packed) == IGMP_MINLEN
    assert checksum(packed) == 0


def test_packed_layout():
    packed = IgmpMessage(IgmpType.V2_MEMBERSHIP_REPORT, "239.1.2.3", code=10).pack()
    assert packed[0] == 0x16
    assert packed[1] == 10
    assert packed[4:8] == ipaddress.IPv4Address("239.1.2.3").packed


def test_round_trip():
    message = IgmpMessage(IgmpType.MEMBERSHIP_QUERY, "224.0.0.1", code=100)
    decoded = IgmpMessage.unpack(message.pack())
    assert decoded.type is IgmpType.MEMBERSHIP_QUERY
    assert (decoded.group, decoded.code) == (message.group, message.code)
    assert decoded.cksum == int.from_bytes(message.pack()[2:4], "big")


def test_unknown_type_kept_as_int():
    packed = IgmpMessage(0x42, "224.0.0.1").pack()
    assert IgmpMessage.unpack(packed).type == 0x42


def test_unpack_truncated():
    with pytest.raises(ValueError):
        IgmpMessage.unpack(b"\x11\x00")


def test_invalid_group():
    with pytest.raises(ValueError):
        IgmpMessage(IgmpType.V2_LEAVE_GROUP, "not.an.address").pack()


def test_odd_length_checksum_pads_with_zero():
    data = b"\x12\x34\x56"
    assert checksum(data) == checksum(data + b"\0")