import pytest

from tako.passwd import PasswdEntry, find_by_name, find_by_uid, read_passwd

ALICE = "alice:x:1000:1000:Alice:/home/alice:/bin/sh"
ROOT = "root:x:0:0:root:/root:/bin/sh"


def test_parse_fields():
    entry = PasswdEntry.parse(ALICE + "\n")
    assert (entry.name, entry.uid, entry.gid) == ("alice", 1000, 1000)
    assert (entry.dir, entry.shell) == ("/home/alice", "/bin/sh")


def test_format_round_trip():
    assert PasswdEntry.parse(ALICE).format() == ALICE


@pytest.mark.parametrize("line", ["alice:x:1000", "alice:x:abc:1000:A:/h:/bin/sh"])
def test_parse_malformed(line):
    with pytest.raises(ValueError):
        PasswdEntry.parse(line)


def test_read_passwd_skips_bad_lines():
    entries = read_passwd([ROOT, "", "broken line", ALICE])
    assert [e.name for e in entries] == ["root", "alice"]


def test_find_by_name_and_uid():
    entries = read_passwd([ROOT, ALICE])
    assert find_by_name(entries, "alice").uid == 1000
    assert find_by_uid(entries, 0).name == "root"


def test_find_missing():
    entries = read_passwd([ROOT])
    with pytest.raises(KeyError):
        find_by_name(entries, "bob")
    with pytest.raises(KeyError):
        find_by_uid(entries, 1000)