"""Mutable text value with the search, edit and conversion operations of a sketch string."""

from __future__ import annotations

import re
import struct

from megacore.common import dtostrf, itoa

__all__ = ["String"]

_C_SPACE = " \t\n\v\f\r"
_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_LOWER_TO_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_HUGE = 1 << 32


def _text_of(value) -> str | None:
    """Text carried by ``value``: a str, a String (None if invalid) or None."""
    if value is None:
        return None
    if isinstance(value, String):
        return value._buf
    if isinstance(value, str):
        return value
    raise TypeError(f"expected text, got {type(value).__name__}")


def _last_index_of_text(buf: str, target: str, from_index: int) -> int:
    """Start of the last ``target`` that begins at or before ``from_index``."""
    if not target or not buf or len(target) > len(buf):
        return -1
    if from_index < 0 or from_index >= len(buf):
        from_index = len(buf) - 1
    return buf.rfind(target, 0, min(len(buf), from_index + len(target)))


class String:
    """A growable text value that may also be *invalid* (holding nothing at all).

    A one-character ``str`` passed to the search methods is taken as a single
    character, a :class:`String` as a string.
    """

    __hash__ = None  # mutable

    def __init__(self, value="", base_or_places: int | None = None) -> None:
        self._buf: str | None
        if value is None:
            self._buf = None
        elif isinstance(value, String):
            self._reject_extra(value, base_or_places)
            self._buf = value._buf
        elif isinstance(value, str):
            self._reject_extra(value, base_or_places)
            self._buf = value
        elif isinstance(value, float):
            places = 2 if base_or_places is None else base_or_places
            self._buf = dtostrf(value, places + 2, places)
        elif isinstance(value, int):
            base = 10 if base_or_places is None else base_or_places
            self._buf = itoa(value, base)
        else:
            raise TypeError(f"cannot make a String from {type(value).__name__}")

    @staticmethod
    def _reject_extra(value, extra) -> None:
        if extra is not None:
            raise TypeError(
                f"a base or decimal places do not apply to {type(value).__name__}"
            )

    # -- basics -----------------------------------------------------------

    def __len__(self) -> int:
        return len(self._buf) if self._buf is not None else 0

    def __str__(self) -> str:
        return self._buf if self._buf is not None else ""

    def __repr__(self) -> str:
        if self._buf is None:
            return "String(None)"
        return f"String({self._buf!r})"

    def __bool__(self) -> bool:
        return self._buf is not None

    def invalidate(self) -> None:
        """Drop the content and mark the string invalid."""
        self._buf = None

    # -- concatenation ----------------------------------------------------

    @staticmethod
    def _concat_text(value) -> str | None:
        if value is None:
            return None
        if isinstance(value, (String, str)):
            return _text_of(value)
        if isinstance(value, float):
            return dtostrf(value, 4, 2)
        if isinstance(value, int):
            return itoa(value, 10)
        raise TypeError(f"cannot concatenate {type(value).__name__}")

    def concat(self, value) -> bool:
        """Append text, a number or a String; return False if ``value`` is missing."""
        text = self._concat_text(value)
        if text is None:
            return False
        if not text:
            return True
        self._buf = (self._buf or "") + text
        return True

    def __iadd__(self, value) -> String:
        if not isinstance(value, (String, str, int, float)) and value is not None:
            return NotImplemented
        self.concat(value)
        return self

    def __add__(self, value) -> String:
        if not isinstance(value, (String, str, int, float)) and value is not None:
            return NotImplemented
        result = String(self)
        if not result.concat(value):
            result.invalidate()
        return result

    def __radd__(self, value) -> String:
        if not isinstance(value, (str, int, float)):
            return NotImplemented
        result = String(value)
        if not result.concat(self):
            result.invalidate()
        return result

    # -- comparison -------------------------------------------------------

    def compare_to(self, other) -> int:
        """Negative, zero or positive as this string sorts before, with or after ``other``."""
        other_buf = _text_of(other)
        if self._buf is None or other_buf is None:
            if other_buf:
                return -ord(other_buf[0])
            if self._buf:
                return ord(self._buf[0])
            return 0
        for a, b in zip(self._buf, other_buf):
            if a != b:
                return ord(a) - ord(b)
        if len(self._buf) > len(other_buf):
            return ord(self._buf[len(other_buf)])
        if len(other_buf) > len(self._buf):
            return -ord(other_buf[len(self._buf)])
        return 0

    def equals(self, other) -> bool:
        """True if ``other`` (String, str or None) holds the same text."""
        if isinstance(other, String):
            return len(self) == len(other) and self.compare_to(other) == 0
        text = _text_of(other)
        if len(self) == 0:
            return not text
        if text is None:
            return False
        return self._buf == text

    def __eq__(self, other):
        if other is None or isinstance(other, (String, str)):
            return self.equals(other)
        return NotImplemented

    def _cmp_operand(self, other):
        if isinstance(other, String):
            return other
        if isinstance(other, str):
            return String(other)
        return None

    def __lt__(self, other):
        operand = self._cmp_operand(other)
        return NotImplemented if operand is None else self.compare_to(operand) < 0

    def __le__(self, other):
        operand = self._cmp_operand(other)
        return NotImplemented if operand is None else self.compare_to(operand) <= 0

    def __gt__(self, other):
        operand = self._cmp_operand(other)
        return NotImplemented if operand is None else self.compare_to(operand) > 0

    def __ge__(self, other):
        operand = self._cmp_operand(other)
        return NotImplemented if operand is None else self.compare_to(operand) >= 0

    def equals_ignore_case(self, other) -> bool:
        """Equality ignoring the case of ASCII letters."""
        if other is self:
            return True
        text = _text_of(other) or ""
        mine = self._buf or ""
        if len(mine) != len(text):
            return False
        return mine.translate(_UPPER_TO_LOWER) == text.translate(_UPPER_TO_LOWER)

    def starts_with(self, prefix, offset: int | None = None) -> bool:
        """True if ``prefix`` occurs at ``offset`` (default 0)."""
        text = _text_of(prefix)
        if self._buf is None or text is None:
            return False
        start = 0 if offset is None else offset
        if start < 0 or start + len(text) > len(self._buf):
            return False
        return self._buf.startswith(text, start)

    def ends_with(self, suffix) -> bool:
        """True if the string ends with ``suffix``."""
        text = _text_of(suffix)
        if self._buf is None or text is None or len(self._buf) < len(text):
            return False
        return self._buf.endswith(text)

    # -- character access -------------------------------------------------

    def char_at(self, index: int) -> str:
        """Character at ``index``, or ``"\\0"`` when out of range."""
        if self._buf is None or index < 0 or index >= len(self._buf):
            return "\0"
        return self._buf[index]

    def __getitem__(self, index: int) -> str:
        return self.char_at(index)

    def set_char_at(self, index: int, c: str) -> None:
        """Replace the character at ``index``; out-of-range indexes are ignored."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if self._buf is not None and 0 <= index < len(self._buf):
            self._buf = self._buf[:index] + c + self._buf[index + 1 :]

    def get_bytes(self, bufsize: int, index: int = 0) -> bytes:
        """Bytes that fit in a buffer of ``bufsize`` (one slot kept for the terminator)."""
        if bufsize <= 0 or index < 0 or index >= len(self):
            return b""
        n = min(bufsize - 1, len(self) - index)
        return self._buf[index : index + n].encode("latin-1")

    # -- search -----------------------------------------------------------

    def index_of(self, target, from_index: int = 0) -> int:
        """First position of ``target`` at or after ``from_index``, or -1."""
        text = _text_of(target)
        if self._buf is None or text is None:
            return -1
        if from_index < 0 or from_index >= len(self._buf):
            return -1
        return self._buf.find(text, from_index)

    def last_index_of(self, target, from_index: int | None = None) -> int:
        """Last position of ``target`` starting at or before ``from_index``, or -1."""
        text = _text_of(target)
        if self._buf is None or text is None:
            return -1
        if isinstance(target, str) and len(target) == 1:
            start = len(self._buf) - 1 if from_index is None else from_index
            if start < 0 or start >= len(self._buf):
                return -1
            return self._buf.rfind(target, 0, start + 1)
        if from_index is None:
            from_index = len(self._buf) - len(text)
        if from_index < 0:
            from_index = _HUGE
        return _last_index_of_text(self._buf, text, from_index)

    def substring(self, left: int, right: int | None = None) -> String:
        """Text between ``left`` and ``right`` (swapped if reversed, clipped to the end)."""
        if right is None:
            right = len(self)
        if left > right:
            left, right = right, left
        if left >= len(self):
            return String("")
        return String(self._buf[left : min(right, len(self))])

    # -- modification -----------------------------------------------------

    def replace(self, find, replacement) -> None:
        """Replace every occurrence of ``find`` with ``replacement`` in place."""
        target = _text_of(find) or ""
        new = _text_of(replacement) or ""
        if not self._buf or not target:
            return
        if len(new) <= len(target):
            self._buf = self._buf.replace(target, new)
            return
        if target not in self._buf:
            return
        buf = self._buf
        index = len(buf) - 1
        while index >= 0:
            index = _last_index_of_text(buf, target, index)
            if index < 0:
                break
            buf = buf[:index] + new + buf[index + len(target) :]
            index -= 1
        self._buf = buf

    def remove(self, index: int, count: int | None = None) -> None:
        """Delete ``count`` characters at ``index`` (default: to the end)."""
        if index < 0 or index >= len(self):
            return
        if count is None or count < 0:
            count = _HUGE
        if count == 0:
            return
        count = min(count, len(self) - index)
        self._buf = self._buf[:index] + self._buf[index + count :]

    def to_lower_case(self) -> None:
        """Lower-case the ASCII letters in place."""
        if self._buf is not None:
            self._buf = self._buf.translate(_UPPER_TO_LOWER)

    def to_upper_case(self) -> None:
        """Upper-case the ASCII letters in place."""
        if self._buf is not None:
            self._buf = self._buf.translate(_LOWER_TO_UPPER)

    def trim(self) -> None:
        """Strip leading and trailing white space in place."""
        if self._buf:
            self._buf = self._buf.strip(_C_SPACE)

    # -- conversion -------------------------------------------------------

    def to_int(self) -> int:
        """Leading decimal integer of the text, or 0."""
        if self._buf is None:
            return 0
        match = _INT_PREFIX.match(self._buf)
        return int(match.group(1)) if match else 0

    def to_double(self) -> float:
        """Leading floating-point number of the text, or 0.0."""
        if self._buf is None:
            return 0.0
        match = _FLOAT_PREFIX.match(self._buf)
        return float(match.group(1)) if match else 0.0

    def to_float(self) -> float:
        """As :meth:`to_double`, rounded to single precision."""
        value = self.to_double()
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return float("inf") if value > 0 else float("-inf")