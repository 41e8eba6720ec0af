"""Helpers for reading and writing fixed-width integers and NTP timestamps."""

from __future__ import annotations

import struct

SECONDS_FROM_1900_TO_1970 = 2208988800

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF

_LE_SHORT = struct.Struct("<H")
_LE_INT = struct.Struct("<I")
_LE_LONG = struct.Struct("<Q")
_BE_SHORT = struct.Struct(">H")
_BE_INT = struct.Struct(">I")
_BE_LONG = struct.Struct(">Q")
_LE_FLOAT = struct.Struct("<f")


def get_short(b: bytes, offset: int) -> int:
    """Read a little-endian unsigned 16-bit integer at ``offset``."""
    return _LE_SHORT.unpack_from(b, offset)[0]


def get_int(b: bytes, offset: int) -> int:
    """Read a little-endian unsigned 32-bit integer at ``offset``."""
    return _LE_INT.unpack_from(b, offset)[0]


def get_long(b: bytes, offset: int) -> int:
    """Read a little-endian unsigned 64-bit integer at ``offset``."""
    return _LE_LONG.unpack_from(b, offset)[0]


def get_short_be(b: bytes, offset: int) -> int:
    """Read a big-endian unsigned 16-bit integer at ``offset``."""
    return _BE_SHORT.unpack_from(b, offset)[0]


def get_int_be(b: bytes, offset: int) -> int:
    """Read a big-endian unsigned 32-bit integer at ``offset``."""
    return _BE_INT.unpack_from(b, offset)[0]


def get_long_be(b: bytes, offset: int) -> int:
    """Read a big-endian unsigned 64-bit integer at ``offset``."""
    return _BE_LONG.unpack_from(b, offset)[0]


def get_float(b: bytes, offset: int) -> float:
    """Read a little-endian 32-bit float at ``offset``."""
    return _LE_FLOAT.unpack_from(b, offset)[0]


def put_int(b: bytearray, offset: int, value: int) -> None:
    """Write ``value`` as a little-endian unsigned 32-bit integer at ``offset``."""
    _LE_INT.pack_into(b, offset, value & _U32)


def get_ntp_timestamp(b: bytes, offset: int) -> int:
    """Read an NTP timestamp and return it as microseconds since the Unix epoch."""
    seconds = (get_int_be(b, offset) - SECONDS_FROM_1900_TO_1970) & _U64
    fraction = get_int_be(b, offset + 4)
    return ((seconds * 1_000_000) + ((fraction * 1_000_000) >> 32)) & _U64


def put_ntp_timestamp(b: bytearray, offset: int, us_since_1970: int) -> None:
    """Write microseconds since the Unix epoch as an NTP timestamp at ``offset``."""
    seconds, microseconds = divmod(us_since_1970, 1_000_000)
    seconds += SECONDS_FROM_1900_TO_1970
    fraction = (microseconds << 32) // 1_000_000
    _BE_INT.pack_into(b, offset, seconds & _U32)
    _BE_INT.pack_into(b, offset + 4, fraction & _U32)