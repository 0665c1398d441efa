"""Core helpers: pin enums, math and bit macros, binary literals and number formatting."""

from __future__ import annotations

import math
import re
from enum import IntEnum

__all__ = [
    "PinStatus",
    "PinMode",
    "BitOrder",
    "PI",
    "HALF_PI",
    "TWO_PI",
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "EULER",
    "SERIAL",
    "DISPLAY",
    "map_value",
    "make_word",
    "constrain",
    "radians",
    "degrees",
    "sq",
    "low_byte",
    "high_byte",
    "bit",
    "bit_read",
    "bit_set",
    "bit_clear",
    "bit_write",
    "binary_literal",
    "itoa",
    "utoa",
    "dtostrf",
]


class PinStatus(IntEnum):
    """Logic level or edge of a pin."""

    LOW = 0
    HIGH = 1
    CHANGE = 2
    FALLING = 3
    RISING = 4


class PinMode(IntEnum):
    """Direction and pull configuration of a pin."""

    INPUT = 0x0
    OUTPUT = 0x1
    INPUT_PULLUP = 0x2
    INPUT_PULLDOWN = 0x3


class BitOrder(IntEnum):
    """Order in which the bits of a byte are shifted."""

    LSBFIRST = 0
    MSBFIRST = 1


PI = math.pi
HALF_PI = math.pi / 2
TWO_PI = math.tau
DEG_TO_RAD = math.pi / 180
RAD_TO_DEG = 180 / math.pi
EULER = math.e

SERIAL = 0x0
DISPLAY = 0x1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_BINARY_NAME = re.compile(r"B([01]{1,8})")
_WORD_BITS = 32


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero, as C does."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def map_value(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` from one integer range to another, truncating toward zero."""
    return _trunc_div((x - in_min) * (out_max - out_min), in_max - in_min) + out_min


def make_word(high: int, low: int | None = None) -> int:
    """Combine two bytes into a 16-bit word; with one argument, return it as a word."""
    if low is None:
        return high & 0xFFFF
    return (((high & 0xFF) << 8) | (low & 0xFF)) & 0xFFFF


def constrain(amt, low, high):
    """Clamp ``amt`` into the range ``[low, high]``."""
    if amt < low:
        return low
    if amt > high:
        return high
    return amt


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG_TO_RAD


def degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RAD_TO_DEG


def sq(x):
    """Square of ``x``."""
    return x * x


def low_byte(w: int) -> int:
    """Lowest byte of ``w``."""
    return w & 0xFF


def high_byte(w: int) -> int:
    """Second-lowest byte of ``w``."""
    return (w >> 8) & 0xFF


def bit(b: int) -> int:
    """Value with only bit ``b`` set."""
    return 1 << b


def bit_read(value: int, bit_index: int) -> int:
    """Return bit ``bit_index`` of ``value`` as 0 or 1."""
    return (value >> bit_index) & 0x01


def bit_set(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` set."""
    return value | (1 << bit_index)


def bit_clear(value: int, bit_index: int) -> int:
    """Return ``value`` with bit ``bit_index`` cleared."""
    return value & ~(1 << bit_index)


def bit_write(value: int, bit_index: int, bit_value) -> int:
    """Return ``value`` with bit ``bit_index`` set or cleared according to ``bit_value``."""
    return bit_set(value, bit_index) if bit_value else bit_clear(value, bit_index)


def binary_literal(name: str) -> int:
    """Value of a binary constant name such as ``"B1010"`` (one to eight digits)."""
    match = _BINARY_NAME.fullmatch(name)
    if match is None:
        raise ValueError(f"not a binary constant name: {name!r}")
    return int(match.group(1), 2)


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")


def _digits(value: int, radix: int) -> str:
    out = []
    while True:
        value, rem = divmod(value, radix)
        out.append(_DIGITS[rem])
        if not value:
            break
    return "".join(reversed(out))


def itoa(value: int, radix: int = 10) -> str:
    """Format a signed 32-bit integer; only radix 10 shows a minus sign."""
    _check_radix(radix)
    mask = (1 << _WORD_BITS) - 1
    unsigned = value & mask
    if radix == 10 and unsigned >> (_WORD_BITS - 1):
        return "-" + _digits((1 << _WORD_BITS) - unsigned, radix)
    return _digits(unsigned, radix)


def utoa(value: int, radix: int = 10) -> str:
    """Format an unsigned 32-bit integer in the given radix."""
    _check_radix(radix)
    return _digits(value & ((1 << _WORD_BITS) - 1), radix)


def dtostrf(value: float, width: int, precision: int) -> str:
    """Format ``value`` with ``precision`` decimals in a field of ``width``.

    A negative width left-aligns the number in the field.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    return "%*.*f" % (width, precision, value)