"""Mount table entries in their text form."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

MOUNTED = "/etc/mtab"

MNTTYPE_IGNORE = "ignore"
MNTTYPE_NFS = "nfs"
MNTTYPE_SWAP = "swap"
MNTOPT_DEFAULTS = "defaults"
MNTOPT_RO = "ro"
MNTOPT_RW = "rw"
MNTOPT_SUID = "suid"
MNTOPT_NOSUID = "nosuid"
MNTOPT_NOAUTO = "noauto"

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")
_NEEDS_ESCAPE = " \t\n\\"


def _unescape(field: str) -> str:
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), field)


def _escape(field: str) -> str:
    return "".join(f"\\{ord(ch):03o}" if ch in _NEEDS_ESCAPE else ch for ch in field)


@dataclass(frozen=True)
class MountEntry:
    """One mounted file system."""

    fsname: str
    dir: str
    type: str
    opts: str
    freq: int = 0
    passno: int = 0

    @classmethod
    def parse(cls, line: str) -> "MountEntry":
        """Parse a mount table line; dump frequency and pass default to 0."""
        fields = line.split()
        if len(fields) < 4:
            raise ValueError(f"mount entry needs at least 4 fields: {line!r}")
        fsname, directory, kind, opts = (_unescape(f) for f in fields[:4])
        numbers = [int(f) for f in fields[4:6]]
        numbers += [0] * (2 - len(numbers))
        return cls(fsname, directory, kind, opts, *numbers)

    def format(self) -> str:
        """Render the entry as a line, without the newline."""
        return " ".join(
            (_escape(self.fsname), _escape(self.dir), _escape(self.type),
             _escape(self.opts), str(self.freq), str(self.passno))
        )

    def has_option(self, option: str) -> str | None:
        """Return the option named ``option`` (with any value), or None."""
        for opt in self.opts.split(","):
            if opt.split("=", 1)[0] == option:
                return opt
        return None


def read_mounts(lines: Iterable[str]) -> list[MountEntry]:
    """Parse mount table lines, skipping blank lines and comments."""
    entries: list[MountEntry] = []
    for line in lines:
        stripped = line.lstrip()
        if not stripped or stripped.startswith("#"):
            continue
        entries.append(MountEntry.parse(line))
    return entries