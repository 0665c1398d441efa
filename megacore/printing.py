"""Byte-oriented output with number and float formatting."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

__all__ = [
    "DEC",
    "HEX",
    "OCT",
    "BIN",
    "Printable",
    "Print",
    "BufferPrint",
    "format_number",
    "format_float",
]

DEC = 10
HEX = 16
OCT = 8
BIN = 2

_LONG_MASK = 0xFFFFFFFF
_FLOAT_LIMIT = 4294967040.0


def format_number(n: int, base: int = DEC) -> str:
    """Format an integer as a 32-bit value in ``base``, with upper-case digits.

    Only base 10 shows a minus sign; other bases show the two's complement.
    A base below 2 is treated as 10.
    """
    sign = ""
    if base == 10 and n < 0:
        sign = "-"
        n = -n
    value = n & _LONG_MASK
    radix = base & 0xFF
    if radix < 2:
        radix = 10
    digits = []
    while True:
        value, c = divmod(value, radix)
        digits.append(chr(c + ord("0")) if c < 10 else chr(c + ord("A") - 10))
        if not value:
            break
    return sign + "".join(reversed(digits))


def format_float(number: float, digits: int = 2) -> str:
    """Format a float with ``digits`` decimals, rounding half up.

    Returns ``"nan"``, ``"inf"`` or ``"ovf"`` for values that cannot be shown.
    """
    if math.isnan(number):
        return "nan"
    if math.isinf(number):
        return "inf"
    if number > _FLOAT_LIMIT or number < -_FLOAT_LIMIT:
        return "ovf"
    digits &= 0xFF
    parts = []
    if number < 0.0:
        parts.append("-")
        number = -number
    rounding = 0.5
    for _ in range(digits):
        rounding /= 10.0
    number += rounding
    int_part = int(number)
    remainder = number - int_part
    parts.append(str(int_part))
    if digits > 0:
        parts.append(".")
    for _ in range(digits):
        remainder *= 10.0
        to_print = int(remainder)
        parts.append(str(to_print))
        remainder -= to_print
    return "".join(parts)


class Printable(ABC):
    """An object that knows how to print itself onto a :class:`Print`."""

    @abstractmethod
    def print_to(self, p: Print) -> int:
        """Print this object to ``p`` and return the number of bytes written."""


class Print(ABC):
    """Base class for byte sinks; subclasses supply :meth:`write_byte`."""

    def __init__(self) -> None:
        self.write_error = 0

    def _set_write_error(self, err: int = 1) -> None:
        self.write_error = err

    def clear_write_error(self) -> None:
        """Reset the write error flag."""
        self._set_write_error(0)

    @abstractmethod
    def write_byte(self, value: int) -> int:
        """Write one byte; return 1 on success and 0 on failure."""

    def write(self, data: bytes | bytearray | memoryview | str | None) -> int:
        """Write bytes or text, stopping at the first failed byte; return the count."""
        if data is None:
            return 0
        if isinstance(data, str):
            data = data.encode("utf-8")
        count = 0
        for b in bytes(data):
            if not self.write_byte(b):
                break
            count += 1
        return count

    def print(self, value, fmt: int | None = None) -> int:
        """Print text, bytes, an integer in base ``fmt`` or a float with ``fmt`` decimals.

        An integer with base 0 is written as a single raw byte.
        """
        if isinstance(value, Printable):
            self._reject_fmt(value, fmt)
            return value.print_to(self)
        if isinstance(value, (str, bytes, bytearray, memoryview)):
            self._reject_fmt(value, fmt)
            return self.write(value)
        if isinstance(value, float):
            return self.write(format_float(value, 2 if fmt is None else fmt))
        if isinstance(value, int):
            base = DEC if fmt is None else fmt
            if base == 0:
                return self.write_byte(value & 0xFF)
            return self.write(format_number(value, base))
        raise TypeError(f"cannot print {type(value).__name__}")

    def println(self, value=None, fmt: int | None = None) -> int:
        """Print ``value`` (if any) followed by CR LF; return the byte count."""
        n = 0 if value is None else self.print(value, fmt)
        return n + self.write("\r\n")

    def printf(self, fmt: str, *args) -> int:
        """Write printf-style formatted text; return the number of bytes produced."""
        encoded = (fmt % args).encode("utf-8")
        for b in encoded:
            self.write_byte(b)
        return len(encoded)

    @staticmethod
    def _reject_fmt(value, fmt) -> None:
        if fmt is not None:
            raise TypeError(f"a format argument does not apply to {type(value).__name__}")


class BufferPrint(Print):
    """A :class:`Print` that collects bytes in memory, optionally up to ``limit``."""

    def __init__(self, limit: int | None = None) -> None:
        super().__init__()
        self.limit = limit
        self._data = bytearray()

    def write_byte(self, value: int) -> int:
        if self.limit is not None and len(self._data) >= self.limit:
            return 0
        self._data.append(value & 0xFF)
        return 1

    def getvalue(self) -> bytes:
        """Everything written so far."""
        return bytes(self._data)