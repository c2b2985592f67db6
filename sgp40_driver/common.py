"""Big-endian conversions between sensor byte streams and Python numbers."""

from __future__ import annotations

import struct

COMMAND_SIZE = 2
WORD_SIZE = 2
MAX_BUFFER_WORDS = 32

_FLOAT = struct.Struct(">f")


def _head(data: bytes | bytearray | memoryview, size: int) -> bytes:
    head = bytes(data[:size])
    if len(head) < size:
        raise ValueError(f"need at least {size} bytes, got {len(head)}")
    return head


def _to_signed(value: int, bits: int) -> int:
    sign = 1 << (bits - 1)
    return (value ^ sign) - sign


def bytes_to_uint16(data: bytes | bytearray | memoryview) -> int:
    """Read an unsigned 16-bit value from the first two bytes (MSB first)."""
    return int.from_bytes(_head(data, 2), "big")


def bytes_to_uint32(data: bytes | bytearray | memoryview) -> int:
    """Read an unsigned 32-bit value from the first four bytes (MSB first)."""
    return int.from_bytes(_head(data, 4), "big")


def bytes_to_int16(data: bytes | bytearray | memoryview) -> int:
    """Read a signed 16-bit value from the first two bytes (MSB first)."""
    return _to_signed(bytes_to_uint16(data), 16)


def bytes_to_int32(data: bytes | bytearray | memoryview) -> int:
    """Read a signed 32-bit value from the first four bytes (MSB first)."""
    return _to_signed(bytes_to_uint32(data), 32)


def bytes_to_float(data: bytes | bytearray | memoryview) -> float:
    """Read an IEEE-754 single precision float from the first four bytes."""
    return _FLOAT.unpack(_head(data, 4))[0]


def uint16_to_bytes(value: int) -> bytes:
    """Encode the low 16 bits of ``value`` as two bytes, MSB first."""
    return (value & 0xFFFF).to_bytes(2, "big")


def uint32_to_bytes(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` as four bytes, MSB first."""
    return (value & 0xFFFFFFFF).to_bytes(4, "big")


def int16_to_bytes(value: int) -> bytes:
    """Encode a signed 16-bit value in two's complement, MSB first."""
    return uint16_to_bytes(value)


def int32_to_bytes(value: int) -> bytes:
    """Encode a signed 32-bit value in two's complement, MSB first."""
    return uint32_to_bytes(value)


def float_to_bytes(value: float) -> bytes:
    """Encode ``value`` as an IEEE-754 single precision float, MSB first."""
    return _FLOAT.pack(value)