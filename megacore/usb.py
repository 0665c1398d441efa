"""USB setup packets and a registry that plugs function modules into a device."""

from __future__ import annotations

import functools
import struct
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "USBError",
    "USBSetup",
    "PluggableUSBModule",
    "PluggableUSB",
    "pluggable_usb",
]


class USBError(Exception):
    """A module could not be plugged or failed to describe itself."""


@dataclass
class USBSetup:
    """The eight-byte setup packet of a control transfer."""

    request_type: int = 0
    request: int = 0
    value_low: int = 0
    value_high: int = 0
    index: int = 0
    length: int = 0

    SIZE: ClassVar[int] = 8
    _LAYOUT: ClassVar[struct.Struct] = struct.Struct("<BBBBHH")

    @classmethod
    def from_bytes(cls, data: bytes) -> USBSetup:
        """Decode a packet; raises ValueError unless exactly eight bytes are given."""
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(f"a setup packet is {cls.SIZE} bytes, got {len(data)}")
        return cls(*cls._LAYOUT.unpack(data))

    def to_bytes(self) -> bytes:
        """Encode the packet in wire order (little-endian words)."""
        try:
            return self._LAYOUT.pack(
                self.request_type,
                self.request,
                self.value_low,
                self.value_high,
                self.index,
                self.length,
            )
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from exc

    @property
    def direction(self) -> int:
        """Low five bits of the request type (the recipient field)."""
        return self.request_type & 0x1F

    @property
    def type(self) -> int:
        """Request type bits: standard, class or vendor."""
        return (self.request_type >> 5) & 0x03

    @property
    def transfer_direction(self) -> int:
        """1 for device-to-host, 0 for host-to-device."""
        return (self.request_type >> 7) & 0x01

    @property
    def value(self) -> int:
        """The 16-bit value field."""
        return self.value_low | (self.value_high << 8)


class PluggableUSBModule(ABC):
    """A USB function that claims interfaces and endpoints when plugged."""

    def __init__(self, endpoint_types: Iterable[int], num_interfaces: int) -> None:
        self.endpoint_types = tuple(endpoint_types)
        if num_interfaces < 0:
            raise ValueError("num_interfaces must not be negative")
        self.num_interfaces = num_interfaces
        self.plugged_interface: int | None = None
        self.plugged_endpoint: int | None = None

    @property
    def num_endpoints(self) -> int:
        """Number of endpoints the module needs."""
        return len(self.endpoint_types)

    @abstractmethod
    def setup(self, request: USBSetup) -> bool:
        """Handle a class or vendor request; True if it was handled."""

    @abstractmethod
    def get_interface(self) -> int:
        """Send the interface descriptors; return the bytes sent, negative on failure."""

    @abstractmethod
    def get_descriptor(self, request: USBSetup) -> int:
        """Answer a descriptor request; return nonzero if it was handled."""

    def get_short_name(self) -> str:
        """One letter naming the module after its first interface."""
        if self.plugged_interface is None:
            raise USBError("module is not plugged")
        return chr(ord("A") + self.plugged_interface)


class PluggableUSB:
    """The set of plugged modules, handing out interface and endpoint numbers."""

    def __init__(self, total_endpoints: int = 8, first_endpoint: int = 1) -> None:
        self.total_endpoints = total_endpoints
        self._last_interface = 0
        self._last_endpoint = first_endpoint
        self._modules: list[PluggableUSBModule] = []
        self.endpoint_types: dict[int, int] = {}

    @property
    def modules(self) -> tuple[PluggableUSBModule, ...]:
        """Plugged modules in plugging order."""
        return tuple(self._modules)

    def plug(self, node: PluggableUSBModule) -> None:
        """Add a module, assigning its interfaces and endpoints.

        Raises USBError when not enough endpoints remain.
        """
        if self._last_endpoint + node.num_endpoints > self.total_endpoints:
            raise USBError(
                f"not enough endpoints: {node.num_endpoints} needed, "
                f"{self.total_endpoints - self._last_endpoint} left"
            )
        self._modules.append(node)
        node.plugged_interface = self._last_interface
        node.plugged_endpoint = self._last_endpoint
        self._last_interface += node.num_interfaces
        for ep_type in node.endpoint_types:
            self.endpoint_types[self._last_endpoint] = ep_type
            self._last_endpoint += 1

    def get_interface(self) -> int:
        """Send every module's interface descriptors; return the total bytes sent."""
        sent = 0
        for node in self._modules:
            res = node.get_interface()
            if res < 0:
                raise USBError(f"module {node!r} failed to send its interface")
            sent += res
        return sent

    def get_descriptor(self, request: USBSetup) -> int:
        """Result of the first module that handles ``request``, or 0."""
        for node in self._modules:
            ret = node.get_descriptor(request)
            if ret:
                return ret
        return 0

    def setup(self, request: USBSetup) -> bool:
        """True once some module handles ``request``."""
        return any(node.setup(request) for node in self._modules)

    def get_short_name(self) -> str:
        """Short names of all modules, joined."""
        return "".join(node.get_short_name() for node in self._modules)


@functools.lru_cache(maxsize=None)
def pluggable_usb() -> PluggableUSB:
    """The shared registry, created on first use."""
    return PluggableUSB()