# echoctl

Small building blocks for software that controls field devices such as
lights, speakers, pan-tilt heads and ultrasonic units. The package ships no
device drivers. It provides the plumbing that drivers are built on. It uses
only the standard library.

## What is inside

| Module | Purpose |
| --- | --- |
| `echoctl.codes` | `ErrorCode`, `DevType` and `EventType` enums, the `EccsError` exception, `error_str()` and `get_version()` |
| `echoctl.crc` | `Crc`, a table-driven CRC engine for 8-, 16- and 32-bit registers, plus `reflect()` and the `PRESETS` of width and polynomial |
| `echoctl.buffer` | `Buffer`, a growable byte queue that pops from the front and pushes at the back, and `OutOfBoundaryError` |
| `echoctl.ring_buffer` | `RingBuffer`, a thread-safe fixed-size byte ring |
| `echoctl.event_queue` | `Semaphore`, `Event`, `EventId` and a blocking `EventQueue` |
| `echoctl.thread` | `EventThread`, a worker thread driven by an event queue, and `ThreadState` |
| `echoctl.process_singleton` | `ProcessSingleton`, which detects whether another process already holds a named lock file |
| `echoctl.timers` | `ElapsedTimer` and the stoppable `Timer`, both on a monotonic clock |
| `echoctl.config_file` | `ConfigFile`, which reads and writes `[section]` / `key=value` files, and `ConfigError` |
| `echoctl.time_convert` | `WSM`, `DateTime` and conversions between GPS week/second and calendar time |
| `echoctl.time_utils` | `now()`, `msleep()`, `cpu_counter()`, `string_time()`, `string_ptime()`, `string_now()` and `set_system_time()` |
| `echoctl.file_system` | Existence checks, recursive create and delete, copying, sizes, path helpers and `scandir()` |

## Examples

Result codes and version:

```python
from echoctl.codes import EccsError, ErrorCode, error_str, get_version

print(get_version())                      # 1.0.0
print(error_str(ErrorCode.DEV_OFFLINE))   # Device Offline
print(error_str(999))                     # Unknown Error

try:
    raise EccsError(ErrorCode.TIMEOUT)
except EccsError as exc:
    print(exc.code, exc.message)          # ErrorCode.TIMEOUT Timeout
```

CRC checksums:

```python
from echoctl.crc import Crc

crc = Crc(16, 0x1021)
checksum = crc.calc(b"123456789")         # 0x31C3

crc.put_bytes(b"1234")
crc.put_bytes(b"56789")
assert crc.done() == checksum             # done() also resets the register
```

Byte buffers:

```python
from echoctl.buffer import Buffer
from echoctl.ring_buffer import RingBuffer

buf = Buffer(b"hello")
buf.push_back(b" world")
first = buf.pop_front()                   # 104, the byte b"h"
print(bytes(buf))                         # b'ello world'

ring = RingBuffer(16)                     # holds at most 15 bytes
written = ring.write(b"audio frame")
chunk = ring.read(ring.available())
```

Configuration files:

```python
from echoctl.config_file import ConfigFile

cfg = ConfigFile("device.cfg")
cfg.parse()                               # raises ConfigError if unreadable
for name in cfg.sections():
    print(name, cfg.section(name))
cfg.set("Slot_1", "Port", "8001")         # the key must already exist
cfg.write()                               # sections and keys are written sorted
```

An event-driven worker thread:

```python
from echoctl.event_queue import Event
from echoctl.thread import EventThread


class Worker(EventThread):
    def on_event(self, event):
        if event.event_id == 600:
            print("got", event.data)
        return super().on_event(event)


with Worker() as worker:
    worker.post_event(Event(600, "payload"))
# leaving the block posts a quit event and joins the thread
```

GPS time:

```python
from echoctl.time_convert import WSM, gps_to_utc, utc_to_gps

wsm = WSM(2200, 3600, 0)
utc = gps_to_utc(wsm, -18)
assert utc_to_gps(utc, -18) == wsm
```

Files and directories:

```python
from echoctl.file_system import ScanMode, directory_size, scandir

scandir("logs", ScanMode.FILE, max_depth=1, name_only=False, pattern=r".*\.log")
directory_size("logs", max_depth=1)
```

## What the package does not do

It has no device layer: nothing here talks to a light, speaker, pan-tilt
head or ultrasonic unit over the network or a serial line, and there is no
registry of device models. It installs no command-line program and has no
interactive console. It does not generate configuration files; `ConfigFile`
only reads and rewrites files that exist or that you fill yourself.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the
project root.