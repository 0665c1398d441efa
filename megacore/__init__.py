"""Hardware-independent microcontroller core helpers: strings, printing, streams, buffers, IPv4 addresses, serial settings and USB module plumbing."""

__version__ = "0.1.0"
__all__ = [
    "common",
    "wcharacter",
    "ringbuffer",
    "printing",
    "wstring",
    "ip_address",
    "stream",
    "interfaces",
    "usb",
]