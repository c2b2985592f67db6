"""Read the serial number of an SGP40 and print raw VOC signals."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .hal import DEFAULT_DEVICE_PATH, I2cBusError, LinuxI2cBus
from .i2c import ByteCountError, CrcError
from .sgp40 import SGP40_I2C_ADDRESS, Sgp40

_SENSOR_ERRORS = (I2cBusError, CrcError, ByteCountError)


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text, 0)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sgp40", description="Print the serial number and raw VOC signals of an SGP40."
    )
    parser.add_argument("--device", default=DEFAULT_DEVICE_PATH, help="I2C adapter device")
    parser.add_argument(
        "--address", type=_non_negative_int, default=SGP40_I2C_ADDRESS, help="sensor address"
    )
    parser.add_argument(
        "--count", type=_non_negative_int, default=60, help="number of measurements"
    )
    parser.add_argument(
        "--interval",
        type=_non_negative_float,
        default=1.0,
        help="seconds to wait before each measurement",
    )
    return parser


def _serial_to_int(words: tuple[int, int, int]) -> int:
    high, middle, low = words
    return (high << 32) | (middle << 16) | low


def _run(sensor: Sgp40, count: int, interval: float, out: TextIO) -> None:
    try:
        serial = sensor.get_serial_number()
    except _SENSOR_ERRORS as exc:
        print(f"Error executing get_serial_number(): {exc}", file=out)
    else:
        print(f"Serial number: {_serial_to_int(serial)}", file=out)

    delay_us = int(interval * 1_000_000)
    for _ in range(count):
        if delay_us:
            sensor.bus.sleep_usec(delay_us)
        try:
            sraw_voc = sensor.measure_raw_signal()
        except _SENSOR_ERRORS as exc:
            print(f"Error executing measure_raw_signal(): {exc}", file=out)
        else:
            print(f"SRAW VOC: {sraw_voc}", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run the measurement loop; return the process exit status."""
    args = _parser().parse_args(argv)
    bus = LinuxI2cBus(args.device)
    try:
        bus.open()
    except I2cBusError as exc:
        print(f"Error opening {args.device}: {exc}", file=sys.stderr)
        return 1
    try:
        _run(Sgp40(bus, args.address), args.count, args.interval, sys.stdout)
    finally:
        bus.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())