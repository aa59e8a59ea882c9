"""System log priorities, facilities and the helpers that combine them."""

from __future__ import annotations

from enum import IntEnum


class Priority(IntEnum):
    """Log message severities."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7


class Facility(IntEnum):
    """Log facilities, already shifted into position."""

    KERN = 0 << 3
    USER = 1 << 3
    MAIL = 2 << 3
    DAEMON = 3 << 3
    AUTH = 4 << 3
    SYSLOG = 5 << 3
    LPR = 6 << 3
    NEWS = 7 << 3
    UUCP = 8 << 3
    CRON = 9 << 3
    AUTHPRIV = 10 << 3
    FTP = 11 << 3
    LOCAL0 = 16 << 3
    LOCAL1 = 17 << 3
    LOCAL2 = 18 << 3
    LOCAL3 = 19 << 3
    LOCAL4 = 20 << 3
    LOCAL5 = 21 << 3
    LOCAL6 = 22 << 3
    LOCAL7 = 23 << 3


PRIMASK = 7
FACMASK = 0x3F8
NFACILITIES = 24

LOG_PID = 0x01
LOG_CONS = 0x02
LOG_ODELAY = 0x04
LOG_NDELAY = 0x08
LOG_NOWAIT = 0x10
LOG_PERROR = 0x20

INTERNAL_NOPRI = 0x10
INTERNAL_MARK = NFACILITIES << 3

_PRIORITY_NAMES: dict[str, int] = {
    "alert": Priority.ALERT,
    "crit": Priority.CRIT,
    "debug": Priority.DEBUG,
    "emerg": Priority.EMERG,
    "err": Priority.ERR,
    "error": Priority.ERR,
    "info": Priority.INFO,
    "none": INTERNAL_NOPRI,
    "notice": Priority.NOTICE,
    "panic": Priority.EMERG,
    "warn": Priority.WARNING,
    "warning": Priority.WARNING,
}

_FACILITY_NAMES: dict[str, int] = {
    "auth": Facility.AUTH,
    "authpriv": Facility.AUTHPRIV,
    "cron": Facility.CRON,
    "daemon": Facility.DAEMON,
    "ftp": Facility.FTP,
    "kern": Facility.KERN,
    "lpr": Facility.LPR,
    "mail": Facility.MAIL,
    "mark": INTERNAL_MARK,
    "news": Facility.NEWS,
    "security": Facility.AUTH,
    "syslog": Facility.SYSLOG,
    "user": Facility.USER,
    "uucp": Facility.UUCP,
    "local0": Facility.LOCAL0,
    "local1": Facility.LOCAL1,
    "local2": Facility.LOCAL2,
    "local3": Facility.LOCAL3,
    "local4": Facility.LOCAL4,
    "local5": Facility.LOCAL5,
    "local6": Facility.LOCAL6,
    "local7": Facility.LOCAL7,
}


def make_priority(facility: int, priority: int) -> int:
    """Combine a facility number (unshifted) and a priority."""
    return (facility << 3) | priority


def priority_of(value: int) -> int:
    """Extract the priority part of a combined value."""
    return value & PRIMASK


def facility_of(value: int) -> int:
    """Extract the facility number from a combined value."""
    return (value & FACMASK) >> 3


def log_mask(priority: int) -> int:
    """Mask selecting a single priority."""
    return 1 << priority


def log_upto(priority: int) -> int:
    """Mask selecting every priority up to and including ``priority``."""
    return (1 << (priority + 1)) - 1


def priority_by_name(name: str) -> int:
    """Look up a priority by its configuration name, e.g. ``warn``."""
    try:
        return _PRIORITY_NAMES[name]
    except KeyError:
        raise ValueError(f"unknown priority name {name!r}") from None


def facility_by_name(name: str) -> int:
    """Look up a facility by its configuration name, e.g. ``local0``."""
    try:
        return _FACILITY_NAMES[name]
    except KeyError:
        raise ValueError(f"unknown facility name {name!r}") from None