import itertools

import pytest

from megacore.stream import LookaheadMode, MemoryStream


def make(data):
    return MemoryStream(data, timeout=0)


def test_parse_int_skips_leading_garbage():
    s = make("abc123xyz")
    assert s.parse_int() == 123
    assert s.read_string() == "xyz"


def test_parse_int_negative():
    assert make("-42").parse_int() == -42


def test_parse_int_skip_none_leaves_stream():
    s = make("abc")
    assert s.parse_int(LookaheadMode.SKIP_NONE) == 0
    assert s.peek() == ord("a")


def test_parse_int_skip_whitespace():
    assert make(" \t12").parse_int(LookaheadMode.SKIP_WHITESPACE) == 12
    s = make(" x12")
    assert s.parse_int(LookaheadMode.SKIP_WHITESPACE) == 0
    assert s.peek() == ord("x")


def test_parse_int_with_ignore_char():
    assert make("1,234").parse_int(ignore=",") == 1234


def test_parse_int_empty_returns_zero():
    assert make("").parse_int() == 0


def test_parse_float():
    assert make("x3.5y").parse_float() == pytest.approx(3.5)
    assert make("-0.25").parse_float() == pytest.approx(-0.25)


def test_parse_float_stops_at_second_dot():
    s = make("1.5.2")
    assert s.parse_float() == pytest.approx(1.5)
    assert s.read_string() == ".2"


def test_find_consumes_through_target():
    s = make("hello world")
    assert s.find("wor") is True
    assert s.read_string() == "ld"


def test_find_missing_exhausts_stream():
    s = make("hello")
    assert s.find("xyz") is False
    assert s.available() == 0


def test_find_overlapping_prefix():
    s = make("11112rest")
    assert s.find("1112") is True
    assert s.read_string() == "rest"


def test_find_single_char():
    s = make("ab:cd")
    assert s.find(":") is True
    assert s.read_string() == "cd"


def test_find_until():
    assert make("abcTARGETend").find_until("TARGET", "end") is True
    assert make("abcendTARGET").find_until("TARGET", "end") is False


def test_find_multi_returns_index():
    assert make("xxbarfoo").find_multi(["foo", "bar"]) == 1
    assert make("anything").find_multi(["zzz", ""]) == 1
    assert make("none").find_multi(["zzz"]) == -1


def test_read_bytes():
    s = make(b"abcdef")
    assert s.read_bytes(3) == b"abc"
    assert s.read_bytes(10) == b"def"


def test_read_bytes_until():
    s = make(b"key=value")
    assert s.read_bytes_until("=", 10) == b"key"
    assert s.read_bytes_until("=", 3) == b"val"
    assert s.read_bytes_until("=", 0) == b""


def test_read_string_until():
    s = make("one,two")
    assert s.read_string_until(",") == "one"
    assert s.read_string_until(",") == "two"


def test_timeout_uses_clock():
    ticks = itertools.count(0, 100)
    calls = []

    def clock():
        value = next(ticks)
        calls.append(value)
        return value

    s = MemoryStream(b"", timeout=1000, clock=clock)
    assert s.read_bytes(1) == b""
    assert calls[-1] - calls[0] >= 1000


def test_feed_and_flush():
    s = make(b"")
    s.feed("ab")
    assert s.available() == 2
    s.flush()
    assert s.available() == 0
    assert s.read() == -1


def test_write_collects_output():
    s = make(b"")
    s.print(42)
    s.println("x")
    assert s.getvalue() == b"42x\r\n"


def test_default_timeout():
    assert MemoryStream(b"").timeout == 1000