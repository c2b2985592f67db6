"""Sensirion I2C framing: CRC-protected words, command frames and transfers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from .common import (
    COMMAND_SIZE,
    WORD_SIZE,
    float_to_bytes,
    uint16_to_bytes,
    uint32_to_bytes,
)

CRC8_POLYNOMIAL = 0x31
CRC8_INIT = 0xFF
CRC8_LEN = 1

GENERAL_CALL_ADDRESS = 0x00
GENERAL_CALL_RESET = 0x06

_CHUNK = WORD_SIZE + CRC8_LEN


class CrcError(ValueError):
    """A received word did not match its checksum."""


class ByteCountError(ValueError):
    """A byte count is not a whole number of sensor words."""


class I2cBus(Protocol):
    """What the transfer layer needs from an I2C adapter."""

    def read(self, address: int, count: int) -> bytes: ...

    def write(self, address: int, data: bytes) -> None: ...

    def sleep_usec(self, useconds: int) -> None: ...


def generate_crc(data: bytes | bytearray | Iterable[int]) -> int:
    """Compute the 8-bit Sensirion checksum (polynomial 0x31, init 0xFF)."""
    crc = CRC8_INIT
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ CRC8_POLYNOMIAL) & 0xFF
            else:
                crc = (crc << 1) & 0xFF
    return crc


def check_crc(data: bytes | bytearray | Iterable[int], checksum: int) -> None:
    """Raise :class:`CrcError` unless ``checksum`` is the checksum of ``data``."""
    expected = generate_crc(data)
    if expected != checksum:
        raise CrcError(f"checksum mismatch: expected 0x{expected:02x}, got 0x{checksum:02x}")


def fill_cmd_send_buf(cmd: int, args: Iterable[int] = ()) -> bytes:
    """Build a command followed by argument words, each word with its checksum."""
    frame = Frame().add_command(cmd)
    for arg in args:
        frame.add_uint16(arg)
    return bytes(frame)


def strip_crc(raw: bytes | bytearray) -> bytes:
    """Verify each received word's checksum and return the data bytes alone."""
    if len(raw) % _CHUNK:
        raise ByteCountError(f"{len(raw)} bytes is not a whole number of words with checksums")
    out = bytearray()
    for start in range(0, len(raw), _CHUNK):
        word = raw[start : start + WORD_SIZE]
        check_crc(word, raw[start + WORD_SIZE])
        out += word
    return bytes(out)


class Frame:
    """A write frame under construction: commands and CRC-protected words."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def _add_words(self, data: bytes) -> Frame:
        for start in range(0, len(data), WORD_SIZE):
            word = data[start : start + WORD_SIZE]
            self._buffer += word
            self._buffer.append(generate_crc(word))
        return self

    def add_command(self, command: int) -> Frame:
        """Append a 16-bit command without checksum."""
        self._buffer += uint16_to_bytes(command)
        return self

    def add_uint16(self, value: int) -> Frame:
        """Append an unsigned 16-bit word and its checksum."""
        return self._add_words(uint16_to_bytes(value))

    def add_int16(self, value: int) -> Frame:
        """Append a signed 16-bit word and its checksum."""
        return self.add_uint16(value)

    def add_uint32(self, value: int) -> Frame:
        """Append an unsigned 32-bit value as two checksummed words."""
        return self._add_words(uint32_to_bytes(value))

    def add_int32(self, value: int) -> Frame:
        """Append a signed 32-bit value as two checksummed words."""
        return self.add_uint32(value)

    def add_float(self, value: float) -> Frame:
        """Append a single precision float as two checksummed words."""
        return self._add_words(float_to_bytes(value))

    def add_bytes(self, data: bytes | bytearray) -> Frame:
        """Append raw bytes, a checksum after every word."""
        if len(data) % WORD_SIZE:
            raise ByteCountError(f"{len(data)} bytes is not a multiple of {WORD_SIZE}")
        return self._add_words(bytes(data))

    def __bytes__(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class SensirionI2c:
    """Word-oriented transfers with checksums over an I2C bus."""

    def __init__(self, bus: I2cBus) -> None:
        self.bus = bus

    def general_call_reset(self) -> None:
        """Reset every device on the bus that supports a general call reset."""
        self.bus.write(GENERAL_CALL_ADDRESS, bytes([GENERAL_CALL_RESET]))

    def read_words_as_bytes(self, address: int, num_words: int) -> bytes:
        """Read ``num_words`` words and return their bytes in wire order."""
        raw = self.bus.read(address, num_words * _CHUNK)
        return strip_crc(raw)

    def read_words(self, address: int, num_words: int) -> list[int]:
        """Read ``num_words`` words as unsigned 16-bit integers."""
        data = self.read_words_as_bytes(address, num_words)
        return [
            int.from_bytes(data[start : start + WORD_SIZE], "big")
            for start in range(0, len(data), WORD_SIZE)
        ]

    def write_cmd(self, address: int, command: int) -> None:
        """Send a bare command."""
        self.bus.write(address, fill_cmd_send_buf(command)[:COMMAND_SIZE])

    def write_cmd_with_args(self, address: int, command: int, data_words: Iterable[int]) -> None:
        """Send a command followed by checksummed argument words."""
        self.bus.write(address, fill_cmd_send_buf(command, data_words))

    def delayed_read_cmd(
        self, address: int, cmd: int, delay_us: int, num_words: int
    ) -> list[int]:
        """Send a command, wait ``delay_us`` microseconds, then read words back."""
        self.write_cmd(address, cmd)
        if delay_us:
            self.bus.sleep_usec(delay_us)
        return self.read_words(address, num_words)

    def read_cmd(self, address: int, cmd: int, num_words: int) -> list[int]:
        """Send a command and read words back at once."""
        return self.delayed_read_cmd(address, cmd, 0, num_words)

    def write_data(self, address: int, data: bytes | bytearray | Frame) -> None:
        """Send a prepared frame unchanged."""
        self.bus.write(address, bytes(data))

    def read_data(self, address: int, expected_data_length: int) -> bytes:
        """Read ``expected_data_length`` data bytes, checking each word's checksum."""
        if expected_data_length % WORD_SIZE:
            raise ByteCountError(
                f"{expected_data_length} bytes is not a multiple of {WORD_SIZE}"
            )
        size = (expected_data_length // WORD_SIZE) * _CHUNK
        return strip_crc(self.bus.read(address, size))