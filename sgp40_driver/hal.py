"""Access to an I2C bus through the Linux i2c-dev interface."""

from __future__ import annotations

import fcntl
import os
import time

DEFAULT_DEVICE_PATH = "/dev/i2c-1"

# Request code from i2c-dev.h for selecting the target address.
I2C_SLAVE = 0x0703


class I2cBusError(OSError):
    """A transfer on the I2C bus failed."""


class LinuxI2cBus:
    """An I2C adapter device such as ``/dev/i2c-1``."""

    def __init__(self, path: str = DEFAULT_DEVICE_PATH) -> None:
        self.path = path
        self._fd = -1
        self._address = 0

    @property
    def is_open(self) -> bool:
        return self._fd >= 0

    def open(self) -> None:
        """Open the adapter device for reading and writing."""
        if self.is_open:
            return
        try:
            self._fd = os.open(self.path, os.O_RDWR)
        except OSError as exc:
            raise I2cBusError(exc.errno, f"cannot open {self.path}: {exc.strerror}") from exc

    def close(self) -> None:
        """Release the adapter device."""
        if self.is_open:
            os.close(self._fd)
        self._fd = -1
        self._address = 0

    def _select(self, address: int) -> None:
        if not self.is_open:
            raise I2cBusError(f"bus {self.path} is not open")
        if self._address != address:
            try:
                fcntl.ioctl(self._fd, I2C_SLAVE, address)
            except OSError:
                # A failed selection shows up in the following transfer.
                pass
            self._address = address

    def read(self, address: int, count: int) -> bytes:
        """Read exactly ``count`` bytes from the device at ``address``."""
        self._select(address)
        try:
            data = os.read(self._fd, count)
        except OSError as exc:
            raise I2cBusError(exc.errno, f"read from 0x{address:02x} failed") from exc
        if len(data) != count:
            raise I2cBusError(
                f"read from 0x{address:02x} returned {len(data)} of {count} bytes"
            )
        return data

    def write(self, address: int, data: bytes) -> None:
        """Send all of ``data`` to the device at ``address``."""
        self._select(address)
        payload = bytes(data)
        try:
            written = os.write(self._fd, payload)
        except OSError as exc:
            raise I2cBusError(exc.errno, f"write to 0x{address:02x} failed") from exc
        if written != len(payload):
            raise I2cBusError(
                f"write to 0x{address:02x} sent {written} of {len(payload)} bytes"
            )

    def sleep_usec(self, useconds: int) -> None:
        """Pause for at least ``useconds`` microseconds."""
        time.sleep(useconds / 1_000_000)

    def __enter__(self) -> LinuxI2cBus:
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()