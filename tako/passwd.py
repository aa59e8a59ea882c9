"""Entries of the user account database in its text form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class PasswdEntry:
    """One user account line: seven colon-separated fields."""

    name: str
    passwd: str
    uid: int
    gid: int
    gecos: str
    dir: str
    shell: str

    @classmethod
    def parse(cls, line: str) -> "PasswdEntry":
        """Parse one line of the account database."""
        fields = line.rstrip("\r\n").split(":")
        if len(fields) != 7:
            raise ValueError(f"expected 7 fields, found {len(fields)}")
        name, passwd, uid, gid, gecos, home, shell = fields
        try:
            return cls(name, passwd, int(uid), int(gid), gecos, home, shell)
        except ValueError:
            raise ValueError(f"invalid user or group id in {line!r}") from None

    def format(self) -> str:
        """Render the entry as a line, without the newline."""
        return ":".join(
            (self.name, self.passwd, str(self.uid), str(self.gid),
             self.gecos, self.dir, self.shell)
        )


def read_passwd(lines: Iterable[str]) -> list[PasswdEntry]:
    """Parse account lines, skipping blank and malformed ones."""
    entries: list[PasswdEntry] = []
    for line in lines:
        if not line.strip():
            continue
        try:
            entries.append(PasswdEntry.parse(line))
        except ValueError:
            continue
    return entries


def find_by_name(entries: Iterable[PasswdEntry], name: str) -> PasswdEntry:
    """Return the first entry for user ``name``."""
    for entry in entries:
        if entry.name == name:
            return entry
    raise KeyError(f"no such user {name!r}")


def find_by_uid(entries: Iterable[PasswdEntry], uid: int) -> PasswdEntry:
    """Return the first entry with user id ``uid``."""
    for entry in entries:
        if entry.uid == uid:
            return entry
    raise KeyError(f"no user with id {uid}")