"""IPv4 address value that can be parsed, compared, indexed and printed."""

from __future__ import annotations

from megacore.printing import DEC, Print, Printable

__all__ = ["IPAddress", "INADDR_NONE"]


def _octet(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"octet out of range 0..255: {value}")
    return value


class IPAddress(Printable):
    """Four-octet IPv4 address.

    Accepts no arguments (0.0.0.0), four octets, a 32-bit integer laid out
    with the first octet in the lowest byte, four raw bytes, or another
    :class:`IPAddress`.
    """

    __hash__ = None  # octets may be changed in place

    def __init__(self, *args) -> None:
        if not args:
            octets = [0, 0, 0, 0]
        elif len(args) == 4:
            octets = [_octet(a) for a in args]
        elif len(args) == 1:
            octets = self._octets_of(args[0])
        else:
            raise TypeError(f"IPAddress takes 0, 1 or 4 arguments, got {len(args)}")
        self._octets = bytearray(octets)

    @staticmethod
    def _octets_of(value) -> list[int]:
        if isinstance(value, IPAddress):
            return list(value._octets)
        if isinstance(value, int):
            if not 0 <= value <= 0xFFFFFFFF:
                raise ValueError(f"address out of 32-bit range: {value}")
            return list(value.to_bytes(4, "little"))
        if isinstance(value, (bytes, bytearray, memoryview, list, tuple)):
            octets = [_octet(b) for b in value]
            if len(octets) != 4:
                raise ValueError(f"expected 4 octets, got {len(octets)}")
            return octets
        raise TypeError(f"cannot make an IPAddress from {type(value).__name__}")

    @classmethod
    def from_string(cls, address: str) -> IPAddress:
        """Parse dotted-quad text such as ``"192.168.1.1"``.

        Raises ValueError for a value above 255, a wrong number of dots
        or any character other than digits and dots.
        """
        octets: list[int] = []
        acc = 0
        for c in address:
            if "0" <= c <= "9":
                acc = acc * 10 + (ord(c) - ord("0"))
                if acc > 255:
                    raise ValueError(f"octet out of range in {address!r}")
            elif c == ".":
                if len(octets) == 3:
                    raise ValueError(f"too many dots in {address!r}")
                octets.append(acc)
                acc = 0
            else:
                raise ValueError(f"invalid character {c!r} in {address!r}")
        if len(octets) != 3:
            raise ValueError(f"too few dots in {address!r}")
        octets.append(acc)
        return cls(*octets)

    def __int__(self) -> int:
        return int.from_bytes(self._octets, "little")

    def __bytes__(self) -> bytes:
        return bytes(self._octets)

    def __eq__(self, other):
        if isinstance(other, IPAddress):
            return self._octets == other._octets
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(other) == bytes(self._octets)
        if isinstance(other, int):
            return int(self) == other
        return NotImplemented

    def __getitem__(self, index: int) -> int:
        return self._octets[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._octets[index] = _octet(value)

    def __str__(self) -> str:
        return ".".join(str(b) for b in self._octets)

    def __repr__(self) -> str:
        return f"IPAddress({', '.join(str(b) for b in self._octets)})"

    def print_to(self, p: Print) -> int:
        """Print the dotted-quad form to ``p``; return the bytes written."""
        n = 0
        for octet in self._octets[:3]:
            n += p.print(octet, DEC)
            n += p.print(".")
        n += p.print(self._octets[3], DEC)
        return n


INADDR_NONE = IPAddress(0, 0, 0, 0)