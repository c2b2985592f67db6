import pytest

from sgp40_driver import common


@pytest.mark.parametrize("value", [0, 1, 0x6666, 0x8000, 0xFFFF])
def test_uint16_round_trip(value):
    encoded = common.uint16_to_bytes(value)
    assert len(encoded) == 2
    assert common.bytes_to_uint16(encoded) == value


@pytest.mark.parametrize("value", [0, 1, 0x12345678, 0xFFFFFFFF])
def test_uint32_round_trip(value):
    encoded = common.uint32_to_bytes(value)
    assert len(encoded) == 4
    assert common.bytes_to_uint32(encoded) == value


@pytest.mark.parametrize("value", [-32768, -1, 0, 1, 32767])
def test_int16_round_trip(value):
    assert common.bytes_to_int16(common.int16_to_bytes(value)) == value


@pytest.mark.parametrize("value", [-(2**31), -1, 0, 1, 2**31 - 1])
def test_int32_round_trip(value):
    assert common.bytes_to_int32(common.int32_to_bytes(value)) == value


@pytest.mark.parametrize("value", [0.0, 0.5, -2.25, 1024.0])
def test_float_round_trip(value):
    encoded = common.float_to_bytes(value)
    assert len(encoded) == 4
    assert common.bytes_to_float(encoded) == value


def test_float_one_has_ieee_layout():
    assert common.bytes_to_float(b"\x3f\x80\x00\x00") == 1.0


def test_msb_comes_first():
    encoded = common.uint16_to_bytes(0x8000)
    assert encoded[0] == 0x80
    assert encoded[1] == 0


def test_signed_and_unsigned_share_encoding():
    assert common.int16_to_bytes(-1) == common.uint16_to_bytes(0xFFFF)
    assert common.int32_to_bytes(-2) == common.uint32_to_bytes(0xFFFFFFFE)


def test_signed_reading_of_high_bit():
    data = common.uint16_to_bytes(0xFFFF)
    assert common.bytes_to_int16(data) == -1
    assert common.bytes_to_uint16(data) == 0xFFFF


def test_values_wrap_to_width():
    assert common.uint16_to_bytes(0x10000 + 5) == common.uint16_to_bytes(5)
    assert common.uint32_to_bytes(2**32 + 7) == common.uint32_to_bytes(7)


def test_extra_bytes_are_ignored():
    assert common.bytes_to_uint16(b"\x01\x02\x03") == common.bytes_to_uint16(b"\x01\x02")
    assert common.bytes_to_uint32(b"\x01\x02\x03\x04\x05") == common.bytes_to_uint32(
        b"\x01\x02\x03\x04"
    )


def test_accepts_bytearray_and_memoryview():
    raw = common.uint32_to_bytes(0x6666)
    assert common.bytes_to_uint32(bytearray(raw)) == 0x6666
    assert common.bytes_to_uint32(memoryview(raw)) == 0x6666


@pytest.mark.parametrize(
    "func, data",
    [
        (common.bytes_to_uint16, b"\x01"),
        (common.bytes_to_int16, b""),
        (common.bytes_to_uint32, b"\x01\x02\x03"),
        (common.bytes_to_int32, b"\x01"),
        (common.bytes_to_float, b"\x00\x00"),
    ],
)
def test_short_input_raises(func, data):
    with pytest.raises(ValueError):
        func(data)