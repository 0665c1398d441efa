"""Fixed-size byte FIFO with optional extra storage, as used for serial receive buffers."""

from __future__ import annotations

__all__ = ["RingBuffer"]


class RingBuffer:
    """Circular byte buffer; one slot is always kept free to tell full from empty."""

    def __init__(self, size: int = 64) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._size = size
        self._buffer = bytearray(size)
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Number of slots, including any added storage."""
        return len(self._buffer)

    def _next_index(self, index: int) -> int:
        return (index + 1) % len(self._buffer)

    def add_storage(self, size: int) -> None:
        """Extend the buffer with ``size`` extra slots after the base storage."""
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._buffer = self._buffer[: self._size] + bytearray(size)

    def store_char(self, c: int) -> None:
        """Append a byte; it is silently dropped when the buffer is full."""
        i = self._next_index(self._head)
        if i != self._tail:
            self._buffer[self._head] = c & 0xFF
            self._head = i

    def clear(self) -> None:
        """Discard everything stored."""
        self._head = 0
        self._tail = 0

    def read_char(self) -> int:
        """Remove and return the oldest byte, or -1 when empty."""
        if self._tail == self._head:
            return -1
        value = self._buffer[self._tail]
        self._tail = self._next_index(self._tail)
        return value

    def available(self) -> int:
        """Number of bytes waiting to be read."""
        delta = self._head - self._tail
        return delta + len(self._buffer) if delta < 0 else delta

    def available_for_store(self) -> int:
        """Number of bytes that can still be stored."""
        delta = self._head - self._tail
        if delta >= 0:
            return len(self._buffer) - 1 - delta
        return -delta - 1

    def peek(self) -> int:
        """Return the oldest byte without removing it, or -1 when empty."""
        if self._tail == self._head:
            return -1
        return self._buffer[self._tail]

    def is_full(self) -> bool:
        """True when no further byte can be stored."""
        return self._next_index(self._head) == self._tail

    def __len__(self) -> int:
        return self.available()