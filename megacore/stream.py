"""Readable byte streams with timed reads, searching and number parsing."""

from __future__ import annotations

import time
from abc import abstractmethod
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from enum import IntEnum

from megacore.printing import Print

__all__ = ["LookaheadMode", "Stream", "MemoryStream", "DEFAULT_TIMEOUT"]

DEFAULT_TIMEOUT = 1000
_WHITESPACE = frozenset(b" \t\r\n")
_ZERO = ord("0")
_NINE = ord("9")
_MINUS = ord("-")
_DOT = ord(".")


class LookaheadMode(IntEnum):
    """How :meth:`Stream.parse_int` and :meth:`Stream.parse_float` skip leading input."""

    SKIP_ALL = 0
    SKIP_NONE = 1
    SKIP_WHITESPACE = 2


def _monotonic_millis() -> int:
    return int(time.monotonic() * 1000)


def _as_bytes(target) -> bytes:
    if isinstance(target, str):
        return target.encode("latin-1")
    if isinstance(target, int):
        return bytes([target & 0xFF])
    if isinstance(target, (bytes, bytearray, memoryview)):
        return bytes(target)
    raise TypeError(f"expected text or bytes, got {type(target).__name__}")


def _as_code(ch) -> int | None:
    if ch is None:
        return None
    if isinstance(ch, int):
        return ch & 0xFF
    data = _as_bytes(ch)
    if len(data) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return data[0]


def _is_digit(c: int) -> bool:
    return _ZERO <= c <= _NINE


class Stream(Print):
    """Base class for byte streams; subclasses supply the low-level operations.

    ``timeout`` is in milliseconds; ``clock`` returns the current time in
    milliseconds and defaults to a monotonic clock.
    """

    def __init__(
        self, timeout: int = DEFAULT_TIMEOUT, clock: Callable[[], int] | None = None
    ) -> None:
        super().__init__()
        self.timeout = timeout
        self._clock = clock or _monotonic_millis

    @abstractmethod
    def available(self) -> int:
        """Number of bytes ready to read."""

    @abstractmethod
    def read(self) -> int:
        """Remove and return the next byte, or -1 when none is ready."""

    @abstractmethod
    def peek(self) -> int:
        """Return the next byte without removing it, or -1 when none is ready."""

    @abstractmethod
    def flush(self) -> None:
        """Settle any pending transfer."""

    def _timed(self, op: Callable[[], int]) -> int:
        start = self._clock()
        while True:
            c = op()
            if c >= 0:
                return c
            if self._clock() - start >= self.timeout:
                return -1

    def _timed_read(self) -> int:
        return self._timed(self.read)

    def _timed_peek(self) -> int:
        return self._timed(self.peek)

    def _peek_next_digit(self, lookahead: LookaheadMode, detect_decimal: bool) -> int:
        while True:
            c = self._timed_peek()
            if c < 0 or c == _MINUS or _is_digit(c) or (detect_decimal and c == _DOT):
                return c
            if lookahead == LookaheadMode.SKIP_NONE:
                return -1
            if lookahead == LookaheadMode.SKIP_WHITESPACE and c not in _WHITESPACE:
                return -1
            self.read()

    # -- searching ------------------------------------------------------

    def find(self, target) -> bool:
        """Read until ``target`` has been seen; False on timeout."""
        return self.find_multi([target]) == 0

    def find_until(self, target, terminator) -> bool:
        """As :meth:`find`, but give up (returning False) once ``terminator`` is seen."""
        if terminator is None:
            return self.find(target)
        return self.find_multi([target, terminator]) == 0

    def find_multi(self, targets: Sequence) -> int:
        """Read until one of ``targets`` is seen; return its index, or -1 on timeout.

        An empty target matches at once.
        """
        patterns = [_as_bytes(t) for t in targets]
        for i, pattern in enumerate(patterns):
            if not pattern:
                return i
        indices = [0] * len(patterns)
        while True:
            c = self._timed_read()
            if c < 0:
                return -1
            for i, pattern in enumerate(patterns):
                idx = indices[i]
                if c == pattern[idx]:
                    idx += 1
                    indices[i] = idx
                    if idx == len(pattern):
                        return i
                    continue
                if idx == 0:
                    continue
                orig = idx
                while idx > 0:
                    idx -= 1
                    if c != pattern[idx]:
                        continue
                    if idx == 0:
                        idx = 1
                        break
                    diff = orig - idx
                    if all(pattern[k] == pattern[k + diff] for k in range(idx)):
                        idx += 1
                        break
                indices[i] = idx

    # -- number parsing -------------------------------------------------

    def parse_int(
        self, lookahead: LookaheadMode = LookaheadMode.SKIP_ALL, ignore=None
    ) -> int:
        """Read the next integer; 0 if none arrives before the timeout.

        ``ignore`` names a character skipped once parsing has begun.
        """
        ignore_code = _as_code(ignore)
        c = self._peek_next_digit(lookahead, False)
        if c < 0:
            return 0
        negative = False
        value = 0
        while True:
            if c == ignore_code:
                pass
            elif c == _MINUS:
                negative = True
            elif _is_digit(c):
                value = value * 10 + c - _ZERO
            self.read()
            c = self._timed_peek()
            if not (_is_digit(c) or (c >= 0 and c == ignore_code)):
                break
        return -value if negative else value

    def parse_float(
        self, lookahead: LookaheadMode = LookaheadMode.SKIP_ALL, ignore=None
    ) -> float:
        """Read the next decimal number; 0.0 if none arrives before the timeout."""
        ignore_code = _as_code(ignore)
        c = self._peek_next_digit(lookahead, True)
        if c < 0:
            return 0.0
        negative = False
        fraction_seen = False
        value = 0
        fraction = 1.0
        while True:
            if c == ignore_code:
                pass
            elif c == _MINUS:
                negative = True
            elif c == _DOT:
                fraction_seen = True
            elif _is_digit(c):
                value = value * 10 + c - _ZERO
                if fraction_seen:
                    fraction *= 0.1
            self.read()
            c = self._timed_peek()
            if not (
                _is_digit(c)
                or (c == _DOT and not fraction_seen)
                or (c >= 0 and c == ignore_code)
            ):
                break
        if negative:
            value = -value
        return value * fraction if fraction_seen else float(value)

    # -- bulk reads -----------------------------------------------------

    def read_bytes(self, length: int) -> bytes:
        """Read up to ``length`` bytes, stopping early on timeout."""
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0:
                break
            out.append(c)
        return bytes(out)

    def read_bytes_until(self, terminator, length: int) -> bytes:
        """As :meth:`read_bytes`, also stopping at (and consuming) ``terminator``."""
        term = _as_code(terminator)
        out = bytearray()
        while len(out) < length:
            c = self._timed_read()
            if c < 0 or c == term:
                break
            out.append(c)
        return bytes(out)

    def read_string(self) -> str:
        """Read everything until the timeout, as text."""
        out = bytearray()
        c = self._timed_read()
        while c >= 0:
            out.append(c)
            c = self._timed_read()
        return out.decode("latin-1")

    def read_string_until(self, terminator) -> str:
        """Read text up to ``terminator`` (consumed, not returned) or the timeout."""
        term = _as_code(terminator)
        out = bytearray()
        c = self._timed_read()
        while c >= 0 and c != term:
            out.append(c)
            c = self._timed_read()
        return out.decode("latin-1")


class MemoryStream(Stream):
    """A :class:`Stream` that reads from an in-memory queue and collects output."""

    def __init__(
        self,
        data: bytes | str | Iterable[int] = b"",
        timeout: int = DEFAULT_TIMEOUT,
        clock: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(timeout, clock)
        self._input: deque[int] = deque()
        self._output = bytearray()
        self.feed(data)

    def feed(self, data: bytes | str | Iterable[int]) -> None:
        """Queue more bytes for reading."""
        if isinstance(data, str):
            data = data.encode("latin-1")
        self._input.extend(b & 0xFF for b in data)

    def available(self) -> int:
        return len(self._input)

    def read(self) -> int:
        return self._input.popleft() if self._input else -1

    def peek(self) -> int:
        return self._input[0] if self._input else -1

    def flush(self) -> None:
        """Discard any input not yet read."""
        self._input.clear()

    def write_byte(self, value: int) -> int:
        self._output.append(value & 0xFF)
        return 1

    def getvalue(self) -> bytes:
        """Everything written so far."""
        return bytes(self._output)