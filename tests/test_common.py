import math

import pytest

from megacore.common import (
    DEG_TO_RAD,
    RAD_TO_DEG,
    PinStatus,
    binary_literal,
    bit,
    bit_clear,
    bit_read,
    bit_set,
    bit_write,
    constrain,
    degrees,
    dtostrf,
    high_byte,
    itoa,
    low_byte,
    make_word,
    map_value,
    radians,
    sq,
    utoa,
)


def test_bit_write_with_pin_status():
    assert bit_write(0, 3, PinStatus.HIGH) == 8
    assert bit_write(8, 3, PinStatus.LOW) == 0


@pytest.mark.parametrize("x", [0, 3, 7, 10])
def test_map_value_endpoints_and_identity(x):
    assert map_value(x, 0, 10, 0, 10) == x
    assert map_value(0, 0, 10, 100, 200) == 100
    assert map_value(10, 0, 10, 100, 200) == 200


def test_map_value_truncates_toward_zero():
    assert map_value(-5, 0, 10, 0, 3) == -1


def test_map_value_reverse_range():
    assert map_value(0, 0, 10, 200, 100) == 200
    assert map_value(10, 0, 10, 200, 100) == 100


def test_map_value_zero_input_range():
    with pytest.raises(ZeroDivisionError):
        map_value(5, 3, 3, 0, 10)


@pytest.mark.parametrize("w", [0, 1, 0x1234, 0xFFFF, 0xABCD])
def test_make_word_round_trip(w):
    assert make_word(high_byte(w), low_byte(w)) == w


def test_make_word_single_argument_masks():
    assert make_word(0x12345) == 0x2345


def test_constrain():
    assert constrain(5, 1, 10) == 5
    assert constrain(-3, 1, 10) == 1
    assert constrain(42, 1, 10) == 10


@pytest.mark.parametrize("angle", [0.0, 45.0, 90.0, 180.0, -270.0])
def test_radians_degrees_round_trip(angle):
    assert degrees(radians(angle)) == pytest.approx(angle)


def test_radians_of_half_turn():
    assert radians(180) == pytest.approx(math.pi)
    assert DEG_TO_RAD * RAD_TO_DEG == pytest.approx(1.0)


def test_sq():
    assert sq(12) == 144
    assert sq(-3) == sq(3)


@pytest.mark.parametrize("b", range(16))
def test_bit_operations(b):
    assert bit(b) == 1 << b
    assert bit_read(bit_set(0, b), b) == 1
    assert bit_read(bit_clear(0xFFFF, b), b) == 0
    assert bit_write(0, b, True) == bit_set(0, b)
    assert bit_write(0xFFFF, b, 0) == bit_clear(0xFFFF, b)


def test_bit_set_leaves_other_bits():
    value = 0b1000_0001
    assert bit_clear(bit_set(value, 3), 3) == value


def test_binary_literals_from_header():
    assert binary_literal("B0") == 0
    assert binary_literal("B00000001") == 1
    assert binary_literal("B1010") == 10
    assert binary_literal("B10101010") == 170
    assert binary_literal("B11111111") == 255


@pytest.mark.parametrize("name", ["B", "B2", "B101010101", "1010", "b1010", "B10 "])
def test_binary_literal_rejects(name):
    with pytest.raises(ValueError):
        binary_literal(name)


@pytest.mark.parametrize("radix", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [0, 1, 255, 1000, 65535])
def test_itoa_utoa_round_trip(value, radix):
    assert int(itoa(value, radix), radix) == value
    assert int(utoa(value, radix), radix) == value


def test_itoa_negative_decimal():
    assert itoa(-255, 10) == "-255"
    assert int(itoa(-12345)) == -12345


def test_itoa_hex_is_lowercase():
    text = itoa(0xABCDEF, 16)
    assert text == text.lower()
    assert int(text, 16) == 0xABCDEF


def test_utoa_negative_wraps():
    text = utoa(-1, 2)
    assert len(text) == 32
    assert set(text) == {"1"}


def test_invalid_radix():
    with pytest.raises(ValueError):
        itoa(10, 1)
    with pytest.raises(ValueError):
        utoa(10, 37)


def test_dtostrf_basic():
    assert dtostrf(3.14159, 0, 2) == "3.14"


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1234.5678])
def test_dtostrf_parses_back(value):
    assert float(dtostrf(value, 0, 4)) == pytest.approx(value, abs=1e-4)


def test_dtostrf_width_alignment():
    right = dtostrf(1.5, 8, 2)
    left = dtostrf(1.5, -8, 2)
    assert len(right) == 8 and len(left) == 8
    assert right.strip() == dtostrf(1.5, 0, 2)
    assert right.startswith(" ")
    assert left.endswith(" ")
    assert left.rstrip() == right.lstrip()


def test_dtostrf_negative_precision():
    with pytest.raises(ValueError):
        dtostrf(1.0, 4, -1)