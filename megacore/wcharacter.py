"""Character classification and case conversion in the plain ASCII (C locale) sense."""

from __future__ import annotations

__all__ = [
    "is_alpha_numeric",
    "is_alpha",
    "is_ascii",
    "is_whitespace",
    "is_control",
    "is_digit",
    "is_graph",
    "is_lower_case",
    "is_printable",
    "is_punct",
    "is_space",
    "is_upper_case",
    "is_hexadecimal_digit",
    "to_ascii",
    "to_lower_case",
    "to_upper_case",
]

_UPPER = frozenset(range(ord("A"), ord("Z") + 1))
_LOWER = frozenset(range(ord("a"), ord("z") + 1))
_DIGIT = frozenset(range(ord("0"), ord("9") + 1))
_ALPHA = _UPPER | _LOWER
_ALNUM = _ALPHA | _DIGIT
_HEX = _DIGIT | frozenset(b"abcdefABCDEF")
_SPACE = frozenset(b" \t\n\v\f\r")
_BLANK = frozenset(b" \t")
_GRAPH = frozenset(range(0x21, 0x7F))
_PRINT = _GRAPH | {0x20}
_CONTROL = frozenset(range(0x20)) | {0x7F}
_PUNCT = _GRAPH - _ALNUM


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha_numeric(c: int | str) -> bool:
    """True for a letter or a decimal digit."""
    return _code(c) in _ALNUM


def is_alpha(c: int | str) -> bool:
    """True for a letter."""
    return _code(c) in _ALPHA


def is_ascii(c: int | str) -> bool:
    """True for a 7-bit value."""
    return (_code(c) & ~0x7F) == 0


def is_whitespace(c: int | str) -> bool:
    """True for a blank: space or horizontal tab."""
    return _code(c) in _BLANK


def is_control(c: int | str) -> bool:
    """True for a control character."""
    return _code(c) in _CONTROL


def is_digit(c: int | str) -> bool:
    """True for a decimal digit."""
    return _code(c) in _DIGIT


def is_graph(c: int | str) -> bool:
    """True for a printable character other than space."""
    return _code(c) in _GRAPH


def is_lower_case(c: int | str) -> bool:
    """True for a lower-case letter."""
    return _code(c) in _LOWER


def is_printable(c: int | str) -> bool:
    """True for a printable character, space included."""
    return _code(c) in _PRINT


def is_punct(c: int | str) -> bool:
    """True for a printable character that is neither space nor alphanumeric."""
    return _code(c) in _PUNCT


def is_space(c: int | str) -> bool:
    """True for space, form feed, newline, carriage return, tab or vertical tab."""
    return _code(c) in _SPACE


def is_upper_case(c: int | str) -> bool:
    """True for an upper-case letter."""
    return _code(c) in _UPPER


def is_hexadecimal_digit(c: int | str) -> bool:
    """True for a hexadecimal digit of either case."""
    return _code(c) in _HEX


def to_ascii(c: int | str) -> int:
    """Clear every bit above the lowest seven."""
    return _code(c) & 0x7F


def to_lower_case(c: int | str) -> int:
    """Lower-case code of an upper-case letter; other codes unchanged."""
    code = _code(c)
    return code + 32 if code in _UPPER else code


def to_upper_case(c: int | str) -> int:
    """Upper-case code of a lower-case letter; other codes unchanged."""
    code = _code(c)
    return code - 32 if code in _LOWER else code