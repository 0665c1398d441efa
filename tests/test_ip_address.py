import pytest

from megacore.ip_address import INADDR_NONE, IPAddress
from megacore.printing import BufferPrint


def test_str_of_octets():
    assert str(IPAddress(192, 168, 1, 10)) == "192.168.1.10"


def test_default_is_inaddr_none():
    assert IPAddress() == INADDR_NONE
    assert str(INADDR_NONE) == "0.0.0.0"


def test_from_string_round_trip():
    ip = IPAddress.from_string("10.20.30.40")
    assert str(ip) == "10.20.30.40"
    assert ip == IPAddress(10, 20, 30, 40)


@pytest.mark.parametrize(
    "text", ["256.1.1.1", "1.2.3", "1.2.3.4.5", "a.b.c.d", "1.2.3.4 "]
)
def test_from_string_rejects(text):
    with pytest.raises(ValueError):
        IPAddress.from_string(text)


def test_from_string_empty_parts_are_zero():
    assert IPAddress.from_string("1..3.") == IPAddress(1, 0, 3, 0)


def test_int_layout_first_octet_lowest():
    ip = IPAddress(1, 2, 3, 4)
    assert int(ip) == 0x04030201
    assert IPAddress(int(ip)) == ip


def test_bytes_round_trip():
    ip = IPAddress(172, 16, 0, 1)
    assert bytes(ip) == bytes([172, 16, 0, 1])
    assert IPAddress(bytes(ip)) == ip
    assert ip == bytes([172, 16, 0, 1])


def test_index_get_and_set():
    ip = IPAddress(1, 2, 3, 4)
    assert ip[2] == 3
    ip[2] = 99
    assert str(ip) == "1.2.99.4"


def test_set_out_of_range_raises():
    ip = IPAddress(5, 6, 7, 8)
    with pytest.raises(ValueError):
        ip[0] = 300
    assert ip[0] == 5
    assert str(ip) == "5.6.7.8"


def test_bad_constructor_arguments():
    with pytest.raises(ValueError):
        IPAddress(1, 2, 3, 256)
    with pytest.raises(ValueError):
        IPAddress(b"\x01\x02\x03")
    with pytest.raises(TypeError):
        IPAddress(1, 2)


def test_print_to_buffer():
    out = BufferPrint()
    n = IPAddress(10, 0, 0, 1).print_to(out)
    assert out.getvalue() == b"10.0.0.1"
    assert n == len(b"10.0.0.1")


def test_print_via_print_method():
    out = BufferPrint()
    out.print(IPAddress(8, 8, 4, 4))
    assert out.getvalue() == b"8.8.4.4"