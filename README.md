# megacore

Pure-Python building blocks that behave like the hardware-independent parts
of a small microcontroller core library: text and number formatting, byte
sinks and streams, a ring buffer, IPv4 addresses, serial frame settings and
the bookkeeping behind composite USB devices. It has no dependencies beyond
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `megacore.common`: the enums `PinStatus`, `PinMode` and `BitOrder`;
  constants such as `PI`, `DEG_TO_RAD` and `RAD_TO_DEG`; arithmetic helpers
  `map_value` (integer re-mapping, truncating toward zero), `constrain`,
  `radians`, `degrees`, `sq`; bit helpers `bit`, `bit_read`, `bit_set`,
  `bit_clear`, `bit_write`, `low_byte`, `high_byte`, `make_word`; number
  formatting `itoa`, `utoa` (32-bit, radix 2 to 36) and `dtostrf`; and
  `binary_literal`, which turns a name such as `"B1010"` into its value.
- `megacore.wcharacter`: ASCII character classification (`is_alpha`,
  `is_digit`, `is_space`, `is_punct`, `is_hexadecimal_digit` and others) and
  conversion (`to_lower_case`, `to_upper_case`, `to_ascii`). Each accepts a
  one-character `str` or an integer code.
- `megacore.ringbuffer`: `RingBuffer`, a fixed-size byte FIFO that keeps one
  slot free to tell full from empty. Bytes stored when full are dropped;
  `read_char` and `peek` return -1 when empty. `add_storage` extends it.
- `megacore.printing`: `Print`, the abstract base for byte sinks; a subclass
  supplies `write_byte`. It provides `write`, `print` and `println`
  (integers in any base, with base 0 writing one raw byte; floats with a
  number of decimals), `printf` (`%`-style formatting) and a `write_error`
  flag. `BufferPrint` collects output in memory, optionally up to a limit.
  `Printable` marks objects that print themselves via `print_to`.
  `format_number` and `format_float` give the same text as strings.
- `megacore.wstring`: `String`, a mutable string that may also be invalid
  (false in a boolean test). It offers `concat` and `+`/`+=`, `compare_to`,
  `equals`, `equals_ignore_case`, `starts_with`, `ends_with`, `char_at`,
  `set_char_at`, `get_bytes`, `index_of`, `last_index_of`, `substring`,
  `replace`, `remove`, `to_lower_case`, `to_upper_case`, `trim`, `to_int`,
  `to_float` and `to_double`.
- `megacore.ip_address`: `IPAddress`, built from four octets, a 32-bit
  integer (first octet in the lowest byte), four bytes or another address,
  or parsed with `IPAddress.from_string`, which raises `ValueError` on bad
  input. It supports `int()`, `bytes()`, indexing, equality and printing.
  `INADDR_NONE` is 0.0.0.0.
- `megacore.stream`: `Stream` adds reads with a millisecond timeout to
  `Print`: `find`, `find_until`, `find_multi`, `parse_int`, `parse_float`
  (with `LookaheadMode`), `read_bytes`, `read_bytes_until`, `read_string`
  and `read_string_until`. The clock can be supplied for testing.
  `MemoryStream` reads from an in-memory queue (`feed` adds more) and
  collects what is written.
- `megacore.interfaces`: abstract bases `Client`, `Server`, `UDP`,
  `HardwareI2C` and `HardwareSerial`. `SerialConfig` (with `Parity` and
  `StopBits`) encodes and decodes serial frame configuration words and
  parses names such as `"8N1"` or `"SERIAL_7E2"`.
- `megacore.usb`: `USBSetup` packs and unpacks eight-byte setup packets.
  `PluggableUSBModule` is the base for USB functions; `PluggableUSB` (or the
  shared instance from `pluggable_usb()`) plugs modules in, assigns
  interface and endpoint numbers, and forwards setup and descriptor
  requests. `plug` raises `USBError` when too few endpoints remain.

## Example

```python
from megacore.printing import BufferPrint
from megacore.wstring import String
from megacore.stream import MemoryStream
from megacore.ip_address import IPAddress

out = BufferPrint()
out.print(255, 16)           # b"FF"
out.println(3.14159, 3)      # b"3.142\r\n"
print(out.getvalue())

s = String("  Hello World  ")
s.trim()
s.replace("World", "there")
print(str(s), s.index_of("there"))   # Hello there 6

stream = MemoryStream(b"temp=21.5;")
print(stream.find("temp="), stream.parse_float())

addr = IPAddress.from_string("192.168.1.10")
print(addr, int(addr))
```

## What the package does not do

There is no hardware access: nothing here drives pins, timers, analog
inputs or interrupts, and the `PinMode` and `PinStatus` enums are values
only. `Client`, `Server`, `UDP`, `HardwareI2C` and `HardwareSerial` are
abstract; no network, bus or UART implementation is included. The USB
module keeps the registry of plugged functions but contains no device stack
that talks to a host.