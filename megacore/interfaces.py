"""Abstract network, bus and serial interfaces, plus serial frame configuration."""

from __future__ import annotations

import re
from abc import abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from megacore.ip_address import IPAddress
from megacore.printing import Print
from megacore.stream import Stream

__all__ = [
    "Parity",
    "StopBits",
    "SerialConfig",
    "Client",
    "Server",
    "UDP",
    "HardwareI2C",
    "HardwareSerial",
]

_PARITY_MASK = 0xF
_STOP_BIT_MASK = 0xF0
_DATA_MASK = 0xF00
_CONFIG_NAME = re.compile(r"(?:SERIAL_)?([5-8])([NEOMS])(1\.5|1|2)")


class Parity(IntEnum):
    """Parity setting of a serial frame, as encoded in a configuration word."""

    EVEN = 0x1
    ODD = 0x2
    NONE = 0x3
    MARK = 0x4
    SPACE = 0x5


class StopBits(IntEnum):
    """Number of stop bits of a serial frame, as encoded in a configuration word."""

    ONE = 0x10
    ONE_POINT_FIVE = 0x20
    TWO = 0x30


_PARITY_LETTERS = {
    "N": Parity.NONE,
    "E": Parity.EVEN,
    "O": Parity.ODD,
    "M": Parity.MARK,
    "S": Parity.SPACE,
}
_LETTER_OF_PARITY = {parity: letter for letter, parity in _PARITY_LETTERS.items()}
_STOP_NAMES = {"1": StopBits.ONE, "1.5": StopBits.ONE_POINT_FIVE, "2": StopBits.TWO}
_NAME_OF_STOP = {stop: name for name, stop in _STOP_NAMES.items()}


@dataclass(frozen=True)
class SerialConfig:
    """Data bits, parity and stop bits of a serial frame; defaults to 8N1."""

    data_bits: int = 8
    parity: Parity = Parity.NONE
    stop_bits: StopBits = StopBits.ONE

    def __post_init__(self) -> None:
        if not 5 <= self.data_bits <= 8:
            raise ValueError(f"data bits must be 5 to 8, got {self.data_bits}")
        object.__setattr__(self, "parity", Parity(self.parity))
        object.__setattr__(self, "stop_bits", StopBits(self.stop_bits))

    def encode(self) -> int:
        """The configuration word combining stop bits, parity and data bits."""
        return int(self.stop_bits) | int(self.parity) | ((self.data_bits - 4) << 8)

    @classmethod
    def decode(cls, value: int) -> SerialConfig:
        """Read a configuration word; raises ValueError for an invalid one."""
        if value & ~(_PARITY_MASK | _STOP_BIT_MASK | _DATA_MASK):
            raise ValueError(f"unknown bits in serial configuration {value:#x}")
        data_code = (value & _DATA_MASK) >> 8
        if not 1 <= data_code <= 4:
            raise ValueError(f"invalid data bits field in {value:#x}")
        return cls(
            data_bits=data_code + 4,
            parity=Parity(value & _PARITY_MASK),
            stop_bits=StopBits(value & _STOP_BIT_MASK),
        )

    @classmethod
    def from_name(cls, name: str) -> SerialConfig:
        """Parse a name such as ``"8N1"`` or ``"SERIAL_7E2"``."""
        match = _CONFIG_NAME.fullmatch(name)
        if match is None:
            raise ValueError(f"not a serial configuration name: {name!r}")
        data, parity, stop = match.groups()
        return cls(int(data), _PARITY_LETTERS[parity], _STOP_NAMES[stop])

    @property
    def name(self) -> str:
        """Short name such as ``"8N1"``."""
        return f"{self.data_bits}{_LETTER_OF_PARITY[self.parity]}{_NAME_OF_STOP[self.stop_bits]}"

    def __str__(self) -> str:
        return self.name


def _read_up_to(stream: Stream, size: int) -> bytes:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    out = bytearray()
    while len(out) < size:
        c = stream.read()
        if c < 0:
            break
        out.append(c)
    return bytes(out)


class Client(Stream):
    """A connection-oriented network client."""

    @abstractmethod
    def connect(self, host: IPAddress | str, port: int) -> None:
        """Open a connection to ``host`` (address or name) on ``port``."""

    @abstractmethod
    def stop(self) -> None:
        """Close the connection."""

    @abstractmethod
    def connected(self) -> bool:
        """True while the connection is open or unread data remains."""

    def read_into(self, size: int) -> bytes:
        """Read up to ``size`` bytes that are ready now."""
        return _read_up_to(self, size)

    def __bool__(self) -> bool:
        return bool(self.connected())


class Server(Print):
    """A listening network server that prints to all its clients."""

    @abstractmethod
    def begin(self) -> None:
        """Start listening."""


class UDP(Stream):
    """A datagram socket that sends and receives whole packets."""

    @abstractmethod
    def begin(self, port: int) -> None:
        """Start listening on ``port``."""

    @abstractmethod
    def stop(self) -> None:
        """Close the socket."""

    @abstractmethod
    def begin_packet(self, host: IPAddress | str, port: int) -> None:
        """Start building a packet for ``host`` on ``port``."""

    @abstractmethod
    def end_packet(self) -> None:
        """Send the packet being built."""

    @abstractmethod
    def parse_packet(self) -> int:
        """Start on the next incoming packet; return its size, or 0 if none."""

    def read_into(self, size: int) -> bytes:
        """Read up to ``size`` bytes of the current packet."""
        return _read_up_to(self, size)

    @abstractmethod
    def remote_ip(self) -> IPAddress:
        """Address of the sender of the current packet."""

    @abstractmethod
    def remote_port(self) -> int:
        """Port of the sender of the current packet."""


class HardwareI2C(Stream):
    """A two-wire bus controller or target."""

    @abstractmethod
    def begin(self, address: int | None = None) -> None:
        """Join the bus as controller, or as target at ``address``."""

    @abstractmethod
    def end(self) -> None:
        """Leave the bus."""

    @abstractmethod
    def set_clock(self, freq: int) -> None:
        """Set the bus clock in hertz."""

    @abstractmethod
    def begin_transmission(self, address: int) -> None:
        """Start a write to the target at ``address``."""

    @abstractmethod
    def end_transmission(self, stop_bit: bool = True) -> int:
        """Send the queued bytes; return the bus status code."""

    @abstractmethod
    def request_from(self, address: int, length: int, stop_bit: bool = True) -> int:
        """Request ``length`` bytes from ``address``; return how many arrived."""

    @abstractmethod
    def on_receive(self, callback: Callable[[int], None]) -> None:
        """Register a handler called with the byte count when data arrives."""

    @abstractmethod
    def on_request(self, callback: Callable[[], None]) -> None:
        """Register a handler called when the controller requests data."""


class HardwareSerial(Stream):
    """A UART port."""

    @abstractmethod
    def pins(self, tx: int, rx: int) -> bool:
        """Select the transmit and receive pins; True if the pair is usable."""

    @abstractmethod
    def swap(self, state: int) -> bool:
        """Select an alternate pin mapping; True if it exists."""

    @abstractmethod
    def begin(self, baudrate: int, config: SerialConfig | None = None) -> None:
        """Open the port at ``baudrate`` with ``config`` (8N1 when None)."""

    @abstractmethod
    def end(self) -> None:
        """Close the port."""

    def __bool__(self) -> bool:
        return True