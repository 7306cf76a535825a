"""Encoding and decoding of Hessian 64-bit longs."""

from __future__ import annotations

import io
from typing import BinaryIO

BC_NULL = 0x4E
BC_FALSE = 0x46
BC_TRUE = 0x54
BC_INT = 0x49
BC_LONG = 0x4C
BC_LONG_INT = 0x59
BC_INT_ZERO = 0x90
BC_INT_BYTE_ZERO = 0xC8
BC_INT_SHORT_ZERO = 0xD4
BC_LONG_ZERO = 0xE0
BC_LONG_BYTE_ZERO = 0xF8
BC_LONG_SHORT_ZERO = 0x3C
BC_DOUBLE_ZERO = 0x5B
BC_DOUBLE_ONE = 0x5C
BC_DOUBLE_BYTE = 0x5D
BC_DOUBLE_SHORT = 0x5E
BC_DOUBLE_MILL = 0x5F

LONG_DIRECT_MIN, LONG_DIRECT_MAX = -0x08, 0x0F
LONG_BYTE_MIN, LONG_BYTE_MAX = -0x800, 0x7FF
LONG_SHORT_MIN, LONG_SHORT_MAX = -0x40000, 0x3FFFF
_INT32_MIN, _INT32_MAX = -0x80000000, 0x7FFFFFFF
_INT64_MIN, _INT64_MAX = -(1 << 63), (1 << 63) - 1


class HessianDecodeError(ValueError):
    """Raised when a Hessian stream cannot be decoded."""


def encode_long(value: int) -> bytes:
    """Encode a 64-bit signed integer in its most compact Hessian long form."""
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"value {value} does not fit in a 64-bit long")
    if LONG_DIRECT_MIN <= value <= LONG_DIRECT_MAX:
        return bytes([value + BC_LONG_ZERO])
    if LONG_BYTE_MIN <= value <= LONG_BYTE_MAX:
        return bytes([(BC_LONG_BYTE_ZERO + (value >> 8)) & 0xFF, value & 0xFF])
    if LONG_SHORT_MIN <= value <= LONG_SHORT_MAX:
        return bytes(
            [(BC_LONG_SHORT_ZERO + (value >> 16)) & 0xFF, (value >> 8) & 0xFF, value & 0xFF]
        )
    if _INT32_MIN <= value <= _INT32_MAX:
        return bytes([BC_LONG_INT]) + value.to_bytes(4, "big", signed=True)
    return bytes([BC_LONG]) + value.to_bytes(8, "big", signed=True)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) < size:
        raise HessianDecodeError(f"unexpected end of stream: wanted {size} bytes")
    return data


def _read_signed(stream: BinaryIO, size: int) -> int:
    return int.from_bytes(_read_exact(stream, size), "big", signed=True)


def read_long(stream: BinaryIO, tag: int | None = None) -> int:
    """Read one long from a binary stream.

    ``tag`` is the already consumed tag byte; when it is ``None`` the tag is
    read from the stream. Null and false decode to 0, true to 1, and int and
    double encodings are accepted as well.
    """
    if tag is None:
        tag = _read_exact(stream, 1)[0]

    if tag in (BC_NULL, BC_FALSE, BC_DOUBLE_ZERO):
        return 0
    if tag in (BC_TRUE, BC_DOUBLE_ONE):
        return 1
    if 0x80 <= tag <= 0xBF:
        return tag - BC_INT_ZERO
    if 0xC0 <= tag <= 0xCF:
        return ((tag - BC_INT_BYTE_ZERO) << 8) + _read_exact(stream, 1)[0]
    if 0xD0 <= tag <= 0xD7:
        b1, b0 = _read_exact(stream, 2)
        return ((tag - BC_INT_SHORT_ZERO) << 16) + (b1 << 8) + b0
    if tag == BC_DOUBLE_BYTE:
        return _read_exact(stream, 1)[0]
    if tag == BC_DOUBLE_SHORT:
        return int.from_bytes(_read_exact(stream, 2), "big")
    if tag in (BC_INT, BC_LONG_INT, BC_DOUBLE_MILL):
        return _read_signed(stream, 4)
    if 0xD8 <= tag <= 0xEF:
        return tag - BC_LONG_ZERO
    if 0xF0 <= tag <= 0xFF:
        return ((tag - BC_LONG_BYTE_ZERO) << 8) + _read_exact(stream, 1)[0]
    if 0x38 <= tag <= 0x3F:
        b1, b0 = _read_exact(stream, 2)
        return ((tag - BC_LONG_SHORT_ZERO) << 16) + (b1 << 8) + b0
    if tag == BC_LONG:
        return _read_signed(stream, 8)
    raise HessianDecodeError(f"wrong long tag: {tag:#x}")


def decode_long(data: bytes) -> int:
    """Decode the long at the start of ``data``."""
    return read_long(io.BytesIO(data))