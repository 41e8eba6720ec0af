import struct

import pytest

from airmirror import byteutils


def test_get_short_little_endian():
    assert byteutils.get_short(b"\x01\x02", 0) == 0x0201


def test_get_short_be_big_endian():
    assert byteutils.get_short_be(b"\x01\x02", 0) == 0x0102


def test_get_long_be_value():
    data = b"\x00\x00\x00\x00\x00\x00\x01\x00"
    assert byteutils.get_long_be(data, 0) == 256


@pytest.mark.parametrize("raw", [b"\x01\x02\x03\x04", b"\xff\x00\x10\x80"])
def test_int_endianness_mirror(raw):
    assert byteutils.get_int_be(raw, 0) == byteutils.get_int(bytes(reversed(raw)), 0)


def test_long_endianness_mirror():
    raw = bytes(range(1, 9))
    assert byteutils.get_long_be(raw, 0) == byteutils.get_long(bytes(reversed(raw)), 0)


def test_short_endianness_mirror_with_offset():
    raw = b"\xaa\x12\x34"
    assert byteutils.get_short_be(raw, 1) == byteutils.get_short(b"\x34\x12", 0)


@pytest.mark.parametrize("value", [0, 1, 0x12345678, 0xFFFFFFFF])
def test_put_int_round_trip(value):
    buf = bytearray(8)
    byteutils.put_int(buf, 2, value)
    assert byteutils.get_int(buf, 2) == value
    assert buf[:2] == b"\x00\x00"
    assert buf[6:] == b"\x00\x00"


def test_get_float():
    buf = b"\x00" + struct.pack("<f", 1.5)
    assert byteutils.get_float(buf, 1) == 1.5


def test_get_int_out_of_range():
    with pytest.raises(struct.error):
        byteutils.get_int(b"\x00\x01", 0)


def test_ntp_epoch_writes_offset_seconds():
    buf = bytearray(8)
    byteutils.put_ntp_timestamp(buf, 0, 0)
    assert byteutils.get_int_be(buf, 0) == byteutils.SECONDS_FROM_1900_TO_1970
    assert byteutils.get_int_be(buf, 4) == 0
    assert byteutils.get_ntp_timestamp(buf, 0) == 0


@pytest.mark.parametrize("seconds", [1, 60, 1_600_000_000])
def test_ntp_whole_seconds_round_trip(seconds):
    buf = bytearray(12)
    us = seconds * 1_000_000
    byteutils.put_ntp_timestamp(buf, 4, us)
    assert byteutils.get_ntp_timestamp(buf, 4) == us


@pytest.mark.parametrize("us", [1, 999_999, 1_234_567, 1_600_000_000_123_456])
def test_ntp_round_trip_within_a_microsecond(us):
    buf = bytearray(8)
    byteutils.put_ntp_timestamp(buf, 0, us)
    got = byteutils.get_ntp_timestamp(buf, 0)
    assert 0 <= us - got <= 1