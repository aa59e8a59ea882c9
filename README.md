# tako

`tako` is a collection of small, self-contained modules that name, encode and
decode common Unix system values: syslog priorities, ioctl request codes, file
and network record layouts, tape and SCSI codes and the like. Everything uses
only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is in the package

Logging and locale

- `tako.syslog_codes`: the `Priority` and `Facility` enums, `make_priority`
  (facility number and priority into one value), `priority_of`, `facility_of`,
  `log_mask`, `log_upto`, and `priority_by_name` / `facility_by_name`, which
  look up configuration names such as `warn` or `local0` and raise
  `ValueError` for unknown ones.
- `tako.localecats`: the `Category` enum, `category_mask` (`ALL` gives every
  bit) and `categories_in_mask`.
- `tako.utmp`: the `RecordType` enum of login record kinds and
  `record_type_name`.

Files and text databases

- `tako.ar`: `ArHeader` with `pack` / `unpack` for the 60-byte member header,
  `read_members` to split an archive into `(header, content)` pairs, and
  `write_archive` to build one (each header's size is taken from its content).
- `tako.passwd`: `PasswdEntry` with `parse` / `format`, `read_passwd` (skips
  blank and malformed lines), `find_by_name` and `find_by_uid` (raise
  `KeyError` when nothing matches).
- `tako.mntent`: `MountEntry` with `parse` / `format` (octal escapes for
  spaces, tabs, newlines and backslashes), `has_option` (returns the matching
  option with any `=value`, or `None`) and `read_mounts` (skips blank lines
  and comments).

Networking

- `tako.ethernet`: `EtherType`, `EtherAddr` (`parse` accepts `:` or `-`
  separators; `str()` gives lower-case colon form), `EtherHeader` with
  `pack` / `unpack`, and `is_valid_frame_length`.
- `tako.igmp`: `IgmpType`, `IgmpMessage` (`pack` fills in a fresh checksum)
  and the internet `checksum` function.
- `tako.inaddr`: the `IpProto` enum, `address_class` (`"A"` to `"E"`),
  `is_multicast`, `is_experimental`, `is_badclass`, the `in6_is_*` tests and
  `in6_multicast_scope`. Addresses may be integers, strings or `ipaddress`
  objects (16 raw bytes for IPv6).
- `tako.inet`: `htonl`, `htons`, `ntohl`, `ntohs`, `inet_aton` (one to four
  parts in decimal, octal or hex), `inet_addr`, `inet_ntoa`, `inet_makeaddr`,
  `inet_lnaof` and `inet_netof`.
- `tako.netif`: the `InterfaceFlag` flags, `describe_flags`,
  `volatile_flags` and `validate_name`.
- `tako.route`: `RouteFlag`, `RouteClass`, `rt_addrclass` and
  `is_local_address`.

Devices and kernel records

- `tako.ioctl`: `ioc`, `io`, `iow`, `ior`, `iowr` to encode request codes,
  `decode` to split one into direction, kind, number and size, the
  `Direction`, `ModemLine` and `LineDiscipline` enums, the terminal request
  constants, and `WinSize` with `pack` / `unpack`.
- `tako.scsi`: `Opcode`, `Status`, `SenseKey`, `DeviceType`,
  `ModeSelectHeader` with `pack` / `unpack`, `opcode_name` and `status_byte`.
- `tako.sg`: `TransferDirection`, `SgHeader` with `pack` / `unpack` (status
  bit fields packed into one word) and `decode_info`.
- `tako.mtio`: `TapeOp`, `TapeType`, `MtOp` with `pack` / `unpack`,
  `tape_name`, `status_flags` and `request_codes`.
- `tako.quota`: `QuotaBlock` with `pack` / `unpack`, `qcmd`, `dbtob`,
  `btodb`, `fs_to_dq_blocks` and `dqoff`.
- `tako.timex`: `AdjMode`, `ClockStatus`, `ClockState` and
  `read_only_status`.
- `tako.acct`: `AcctFlag`, `AcctV3Record` with `pack` / `unpack`, and
  `decode_comp` / `encode_comp` for the compressed 16-bit time values.
- `tako.ipc`: `SemCommand`, `SemBuf` with `pack` / `unpack`, and
  `pack_semops`.
- `tako.uname`: `UtsName` with `pack` / `unpack`, `current` (describes the
  running system), `sun_len` and `pack_sockaddr_un`.

Bad input is reported by raising `ValueError` (or `KeyError` for the lookups
noted above).

## Examples

```python
from tako.inet import inet_aton, inet_ntoa
from tako.ioctl import decode, ior
from tako.syslog_codes import Facility, Priority, make_priority, priority_by_name

print(inet_ntoa(inet_aton("127.1")))        # 127.0.0.1
print(decode(ior("m", 2, 48)))              # IoctlRequest(direction=<Direction.READ: 2>, kind=109, number=2, size=48)
print(make_priority(Facility.LOCAL0 >> 3, Priority.ERR))   # 131
print(priority_by_name("warn"))             # 4
```

```python
from tako.ethernet import EtherAddr, EtherHeader, EtherType

header = EtherHeader(
    EtherAddr.parse("02:00:00:00:00:01"),
    EtherAddr.parse("02:00:00:00:00:02"),
    EtherType.IP,
)
assert EtherHeader.unpack(header.pack()) == header
```

## What the package does not do

The package has no script interpreter and installs no command-line program;
it is a library only. It does not make system calls or ioctl requests: the
modules encode and decode values and records, and leave talking to the kernel
to the caller. It carries no tables of error numbers, exit codes, system call
numbers, file mode bits, poll events, telnet codes, ARP headers, resolver
configuration or signal records.