import pytest

from tako.ar import ARMAG, ArHeader, read_members, write_archive


def test_pack_length_and_terminator():
    packed = ArHeader("hello.o", date=1, uid=2, gid=3, mode=0o644, size=4).pack()
    assert len(packed) == 60
    assert packed.endswith(b"`\n")
    assert packed.startswith(b"hello.o ")


def test_header_round_trip():
    header = ArHeader("data.txt", date=1700000000, uid=1000, gid=100, mode=0o600, size=17)
    assert ArHeader.unpack(header.pack()) == header


def test_mode_is_written_in_octal():
    packed = ArHeader("a", mode=0o755).pack()
    assert b"755" in packed


def test_unpack_rejects_bad_terminator():
    packed = bytearray(ArHeader("a").pack())
    packed[-1:] = b"X"
    with pytest.raises(ValueError):
        ArHeader.unpack(bytes(packed))


def test_unpack_rejects_short_data():
    with pytest.raises(ValueError):
        ArHeader.unpack(b"short")


def test_name_too_long():
    with pytest.raises(ValueError):
        ArHeader("x" * 17).pack()


def test_archive_round_trip_with_odd_sizes():
    members = [(ArHeader("one"), b"abc"), (ArHeader("two"), b"defg"), (ArHeader("three"), b"")]
    archive = write_archive(members)
    assert archive.startswith(ARMAG)
    result = read_members(archive)
    assert [(h.name, c) for h, c in result] == [("one", b"abc"), ("two", b"defg"), ("three", b"")]
    assert [h.size for h, _ in result] == [3, 4, 0]


def test_read_members_rejects_bad_magic():
    with pytest.raises(ValueError):
        read_members(b"not an archive")


def test_read_members_rejects_truncated_member():
    archive = write_archive([(ArHeader("one"), b"abcdef")])
    with pytest.raises(ValueError):
        read_members(archive[:-2])