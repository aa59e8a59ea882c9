"""Login record types and limits."""

from __future__ import annotations

from enum import IntEnum

UT_NAMESIZE = 32
UT_HOSTSIZE = 256
UT_LINESIZE = 32
ACCOUNTING = 9

PATH_UTMP = "/dev/null/utmp"
PATH_WTMP = "/dev/null/wtmp"


class RecordType(IntEnum):
    """Kinds of login records."""

    EMPTY = 0
    RUN_LVL = 1
    BOOT_TIME = 2
    NEW_TIME = 3
    OLD_TIME = 4
    INIT_PROCESS = 5
    LOGIN_PROCESS = 6
    USER_PROCESS = 7
    DEAD_PROCESS = 8


def record_type_name(value: int) -> str:
    """Return the name of a login record type."""
    try:
        return RecordType(value).name
    except ValueError:
        raise ValueError(f"unknown record type {value}") from None