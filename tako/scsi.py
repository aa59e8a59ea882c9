"""SCSI command opcodes, status codes, sense keys and device types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

STATUS_MASK = 0x3E


class Opcode(IntEnum):
    """SCSI command operation codes."""

    TEST_UNIT_READY = 0x00
    REZERO_UNIT = 0x01
    REQUEST_SENSE = 0x03
    FORMAT_UNIT = 0x04
    READ_BLOCK_LIMITS = 0x05
    REASSIGN_BLOCKS = 0x07
    READ_6 = 0x08
    WRITE_6 = 0x0A
    SEEK_6 = 0x0B
    READ_REVERSE = 0x0F
    WRITE_FILEMARKS = 0x10
    SPACE = 0x11
    INQUIRY = 0x12
    RECOVER_BUFFERED_DATA = 0x14
    MODE_SELECT = 0x15
    RESERVE = 0x16
    RELEASE = 0x17
    COPY = 0x18
    ERASE = 0x19
    MODE_SENSE = 0x1A
    START_STOP = 0x1B
    RECEIVE_DIAGNOSTIC = 0x1C
    SEND_DIAGNOSTIC = 0x1D
    ALLOW_MEDIUM_REMOVAL = 0x1E
    SET_WINDOW = 0x24
    READ_CAPACITY = 0x25
    READ_10 = 0x28
    WRITE_10 = 0x2A
    SEEK_10 = 0x2B
    WRITE_VERIFY = 0x2E
    VERIFY = 0x2F
    SEARCH_HIGH = 0x30
    SEARCH_EQUAL = 0x31
    SEARCH_LOW = 0x32
    SET_LIMITS = 0x33
    PRE_FETCH = 0x34
    READ_POSITION = 0x34
    SYNCHRONIZE_CACHE = 0x35
    LOCK_UNLOCK_CACHE = 0x36
    READ_DEFECT_DATA = 0x37
    MEDIUM_SCAN = 0x38
    COMPARE = 0x39
    COPY_VERIFY = 0x3A
    WRITE_BUFFER = 0x3B
    READ_BUFFER = 0x3C
    UPDATE_BLOCK = 0x3D
    READ_LONG = 0x3E
    WRITE_LONG = 0x3F
    CHANGE_DEFINITION = 0x40
    WRITE_SAME = 0x41
    READ_TOC = 0x43
    LOG_SELECT = 0x4C
    LOG_SENSE = 0x4D
    MODE_SELECT_10 = 0x55
    RESERVE_10 = 0x56
    RELEASE_10 = 0x57
    MODE_SENSE_10 = 0x5A
    PERSISTENT_RESERVE_IN = 0x5E
    PERSISTENT_RESERVE_OUT = 0x5F
    MOVE_MEDIUM = 0xA5
    READ_12 = 0xA8
    WRITE_12 = 0xAA
    WRITE_VERIFY_12 = 0xAE
    SEARCH_HIGH_12 = 0xB0
    SEARCH_EQUAL_12 = 0xB1
    SEARCH_LOW_12 = 0xB2
    SEND_VOLUME_TAG = 0xB6
    READ_ELEMENT_STATUS = 0xB8
    WRITE_LONG_2 = 0xEA


class Status(IntEnum):
    """Target status codes, shifted right by one bit."""

    GOOD = 0x00
    CHECK_CONDITION = 0x01
    CONDITION_GOOD = 0x02
    BUSY = 0x04
    INTERMEDIATE_GOOD = 0x08
    INTERMEDIATE_C_GOOD = 0x0A
    RESERVATION_CONFLICT = 0x0C
    COMMAND_TERMINATED = 0x11
    QUEUE_FULL = 0x14


class SenseKey(IntEnum):
    """Sense keys reported with a check condition."""

    NO_SENSE = 0x00
    RECOVERED_ERROR = 0x01
    NOT_READY = 0x02
    MEDIUM_ERROR = 0x03
    HARDWARE_ERROR = 0x04
    ILLEGAL_REQUEST = 0x05
    UNIT_ATTENTION = 0x06
    DATA_PROTECT = 0x07
    BLANK_CHECK = 0x08
    COPY_ABORTED = 0x0A
    ABORTED_COMMAND = 0x0B
    VOLUME_OVERFLOW = 0x0D
    MISCOMPARE = 0x0E


class DeviceType(IntEnum):
    """Peripheral device types."""

    DISK = 0x00
    TAPE = 0x01
    PROCESSOR = 0x03
    WORM = 0x04
    ROM = 0x05
    SCANNER = 0x06
    MOD = 0x07
    MEDIUM_CHANGER = 0x08
    ENCLOSURE = 0x0D
    NO_LUN = 0x7F


COMMAND_COMPLETE = 0x00
EXTENDED_MESSAGE = 0x01
EXTENDED_MODIFY_DATA_POINTER = 0x00
EXTENDED_SDTR = 0x01
EXTENDED_EXTENDED_IDENTIFY = 0x02
EXTENDED_WDTR = 0x03
SAVE_POINTERS = 0x02
RESTORE_POINTERS = 0x03
DISCONNECT = 0x04
INITIATOR_ERROR = 0x05
ABORT = 0x06
MESSAGE_REJECT = 0x07
NOP = 0x08
MSG_PARITY_ERROR = 0x09
LINKED_CMD_COMPLETE = 0x0A
LINKED_FLG_CMD_COMPLETE = 0x0B
BUS_DEVICE_RESET = 0x0C
INITIATE_RECOVERY = 0x0F
RELEASE_RECOVERY = 0x10
SIMPLE_QUEUE_TAG = 0x20
HEAD_OF_QUEUE_TAG = 0x21
ORDERED_QUEUE_TAG = 0x22

SCSI_IOCTL_SEND_COMMAND = 1
SCSI_IOCTL_TEST_UNIT_READY = 2
SCSI_IOCTL_BENCHMARK_COMMAND = 3
SCSI_IOCTL_SYNC = 4
SCSI_IOCTL_START_UNIT = 5
SCSI_IOCTL_STOP_UNIT = 6
SCSI_IOCTL_DOORLOCK = 0x5380
SCSI_IOCTL_DOORUNLOCK = 0x5381
SCSI_IOCTL_GET_IDLUN = 0x5382
SCSI_IOCTL_TAGGED_ENABLE = 0x5383
SCSI_IOCTL_TAGGED_DISABLE = 0x5384
SCSI_IOCTL_PROBE_HOST = 0x5385
SCSI_IOCTL_GET_BUS_NUMBER = 0x5386

_MODESEL_SIZE = 12
_U24 = 1 << 24


def _u24(value: int, field: str) -> bytes:
    if not 0 <= value < _U24:
        raise ValueError(f"{field} {value} does not fit in 24 bits")
    return value.to_bytes(3, "big")


def _u8(value: int, field: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{field} {value} does not fit in a byte")
    return value


@dataclass(frozen=True)
class ModeSelectHeader:
    """Mode parameter header and block descriptor sent with MODE SELECT."""

    medium: int = 0
    block_desc_length: int = 8
    density: int = 0
    number_blocks: int = 0
    block_length: int = 0

    def pack(self) -> bytes:
        """Encode the 12 bytes; reserved bytes are zero."""
        return (
            bytes(
                (
                    0,
                    _u8(self.medium, "medium"),
                    0,
                    _u8(self.block_desc_length, "block_desc_length"),
                    _u8(self.density, "density"),
                )
            )
            + _u24(self.number_blocks, "number_blocks")
            + b"\0"
            + _u24(self.block_length, "block_length")
        )

    @classmethod
    def unpack(cls, data: bytes) -> "ModeSelectHeader":
        """Decode the 12 bytes at the start of ``data``."""
        if len(data) < _MODESEL_SIZE:
            raise ValueError("mode select header is truncated")
        data = bytes(data[:_MODESEL_SIZE])
        return cls(
            medium=data[1],
            block_desc_length=data[3],
            density=data[4],
            number_blocks=int.from_bytes(data[5:8], "big"),
            block_length=int.from_bytes(data[9:12], "big"),
        )


def opcode_name(code: int) -> str:
    """Return the name of a command opcode."""
    try:
        return Opcode(code).name
    except ValueError:
        raise ValueError(f"unknown SCSI opcode {code:#x}") from None


def status_byte(raw: int) -> Status | int:
    """Extract the status code from a raw status byte."""
    code = (raw & STATUS_MASK) >> 1
    try:
        return Status(code)
    except ValueError:
        return code