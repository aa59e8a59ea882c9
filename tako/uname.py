"""System identification records and local socket addresses."""

from __future__ import annotations

import platform
import struct
from dataclasses import dataclass, fields

UTS_FIELD_SIZE = 65
SUN_PATH_SIZE = 108
AF_UNIX = 1

_SOCKADDR_UN = struct.Struct(f"=H{SUN_PATH_SIZE}s")


def _fit(text: str) -> str:
    raw = text.encode("utf-8")[: UTS_FIELD_SIZE - 1]
    return raw.decode("utf-8", errors="ignore")


@dataclass(frozen=True)
class UtsName:
    """Names identifying the running system."""

    sysname: str
    nodename: str
    release: str
    version: str
    machine: str
    domainname: str = ""

    def pack(self) -> bytes:
        """Encode the six NUL-terminated 65-byte fields."""
        out = bytearray()
        for f in fields(self):
            text = getattr(self, f.name)
            if "\0" in text:
                raise ValueError(f"{f.name} contains a NUL character")
            raw = text.encode("utf-8")
            if len(raw) >= UTS_FIELD_SIZE:
                raise ValueError(f"{f.name} is longer than {UTS_FIELD_SIZE - 1} bytes")
            out += raw.ljust(UTS_FIELD_SIZE, b"\0")
        return bytes(out)

    @classmethod
    def unpack(cls, data: bytes) -> "UtsName":
        """Decode the record at the start of ``data``."""
        count = len(fields(cls))
        if len(data) < count * UTS_FIELD_SIZE:
            raise ValueError("system name record is truncated")
        values = []
        for index in range(count):
            chunk = bytes(data[index * UTS_FIELD_SIZE : (index + 1) * UTS_FIELD_SIZE])
            values.append(chunk.split(b"\0", 1)[0].decode("utf-8", errors="replace"))
        return cls(*values)


def current() -> UtsName:
    """Describe the running system; each name is cut to fit its field."""
    info = platform.uname()
    return UtsName(
        _fit(info.system),
        _fit(info.node),
        _fit(info.release),
        _fit(info.version),
        _fit(info.machine),
    )


def _path_bytes(path: str | bytes) -> bytes:
    return path.encode("utf-8") if isinstance(path, str) else bytes(path)


def sun_len(path: str | bytes) -> int:
    """Return the address length of a local socket bound to ``path``."""
    return 2 + len(_path_bytes(path).split(b"\0", 1)[0])


def pack_sockaddr_un(path: str | bytes) -> bytes:
    """Encode a local socket address: the family, then the padded path."""
    raw = _path_bytes(path)
    if len(raw) > SUN_PATH_SIZE:
        raise ValueError(f"socket path is longer than {SUN_PATH_SIZE} bytes")
    return _SOCKADDR_UN.pack(AF_UNIX, raw)