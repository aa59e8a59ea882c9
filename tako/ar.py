"""Reading and writing archives in the common ``ar`` format."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

ARMAG = b"!<arch>\n"
SARMAG = 8
ARFMAG = b"`\n"
HEADER_SIZE = 60

_FIELDS = (
    ("name", 16),
    ("date", 12),
    ("uid", 6),
    ("gid", 6),
    ("mode", 8),
    ("size", 10),
)


@dataclass(frozen=True)
class ArHeader:
    """The fixed-size header preceding each archive member."""

    name: str
    date: int = 0
    uid: int = 0
    gid: int = 0
    mode: int = 0o644
    size: int = 0

    def pack(self) -> bytes:
        """Encode the header as its 60 bytes."""
        texts = (
            self.name,
            str(self.date),
            str(self.uid),
            str(self.gid),
            format(self.mode, "o"),
            str(self.size),
        )
        out = bytearray()
        for (field, width), text in zip(_FIELDS, texts):
            raw = text.encode("ascii")
            if len(raw) > width:
                raise ValueError(f"{field} {text!r} does not fit in {width} bytes")
            out += raw.ljust(width, b" ")
        out += ARFMAG
        return bytes(out)

    @classmethod
    def unpack(cls, data: bytes) -> "ArHeader":
        """Decode a header from the first 60 bytes of ``data``."""
        if len(data) < HEADER_SIZE:
            raise ValueError("archive header is truncated")
        if bytes(data[HEADER_SIZE - 2 : HEADER_SIZE]) != ARFMAG:
            raise ValueError("archive header has a bad terminator")
        values: dict[str, object] = {}
        pos = 0
        for field, width in _FIELDS:
            text = bytes(data[pos : pos + width]).decode("ascii").rstrip(" ")
            pos += width
            if field == "name":
                values[field] = text
            else:
                values[field] = int(text, 8 if field == "mode" else 10) if text else 0
        return cls(**values)


def read_members(data: bytes) -> list[tuple[ArHeader, bytes]]:
    """Split an archive into its members as (header, content) pairs."""
    if bytes(data[:SARMAG]) != ARMAG:
        raise ValueError("not an ar archive")
    members: list[tuple[ArHeader, bytes]] = []
    pos = SARMAG
    while pos < len(data):
        header = ArHeader.unpack(data[pos : pos + HEADER_SIZE])
        pos += HEADER_SIZE
        end = pos + header.size
        if end > len(data):
            raise ValueError(f"member {header.name!r} is truncated")
        members.append((header, bytes(data[pos:end])))
        pos = end + header.size % 2
    return members


def write_archive(members: Iterable[tuple[ArHeader, bytes]]) -> bytes:
    """Build an archive; each header's size is taken from its content."""
    out = bytearray(ARMAG)
    for header, content in members:
        header = replace(header, size=len(content))
        out += header.pack()
        out += content
        if len(content) % 2:
            out += b"\n"
    return bytes(out)