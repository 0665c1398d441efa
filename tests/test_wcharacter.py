import string

import pytest

from megacore import wcharacter as wc

ASCII = range(128)


def test_alpha_digit_alnum_match_python():
    for c in ASCII:
        ch = chr(c)
        assert wc.is_alpha(c) == ch.isalpha()
        assert wc.is_digit(c) == ch.isdigit()
        assert wc.is_alpha_numeric(c) == ch.isalnum()


def test_case_predicates_match_python():
    for c in ASCII:
        ch = chr(c)
        assert wc.is_upper_case(c) == (ch in string.ascii_uppercase)
        assert wc.is_lower_case(c) == (ch in string.ascii_lowercase)


def test_space_and_blank():
    for c in ASCII:
        assert wc.is_space(c) == (chr(c) in string.whitespace)
        assert wc.is_whitespace(c) == (chr(c) in " \t")


def test_printable_graph_punct_control():
    for c in ASCII:
        ch = chr(c)
        assert wc.is_printable(c) == ch.isprintable()
        assert wc.is_graph(c) == (ch.isprintable() and ch != " ")
        assert wc.is_punct(c) == (ch in string.punctuation)
        assert wc.is_control(c) == (not ch.isprintable())


def test_hex_digits():
    for c in ASCII:
        assert wc.is_hexadecimal_digit(c) == (chr(c) in string.hexdigits)


def test_non_ascii_values_are_not_classified():
    for c in range(128, 256):
        assert not wc.is_ascii(c)
        assert not wc.is_alpha(c)
        assert not wc.is_printable(c)
    assert all(wc.is_ascii(c) for c in ASCII)


def test_to_ascii_clears_high_bit():
    for c in ASCII:
        assert wc.to_ascii(c + 128) == c
        assert wc.to_ascii(c) == c


def test_case_conversion_round_trip():
    for c in ASCII:
        ch = chr(c)
        assert wc.to_upper_case(c) == ord(ch.upper())
        assert wc.to_lower_case(c) == ord(ch.lower())
    assert wc.to_upper_case(0xE9) == 0xE9


def test_accepts_single_character_strings():
    assert wc.is_digit("7")
    assert wc.to_upper_case("q") == ord("Q")
    with pytest.raises(TypeError):
        wc.is_alpha("ab")