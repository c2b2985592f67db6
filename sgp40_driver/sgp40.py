"""Driver for the SGP40 VOC sensor."""

from __future__ import annotations

from .common import bytes_to_uint16
from .i2c import Frame, I2cBus, SensirionI2c

SGP40_I2C_ADDRESS = 0x59

# Values that leave humidity compensation disabled (50 %RH, 25 degC).
DEFAULT_RELATIVE_HUMIDITY = 0x8000
DEFAULT_TEMPERATURE = 0x6666

SELF_TEST_PASSED = 0xD400
SELF_TEST_FAILED = 0x4B00

_CMD_MEASURE_RAW_SIGNAL = 0x260F
_CMD_EXECUTE_SELF_TEST = 0x280E
_CMD_TURN_HEATER_OFF = 0x3615
_CMD_GET_SERIAL_NUMBER = 0x3682

_MEASURE_DELAY_US = 30_000
_SELF_TEST_DELAY_US = 320_000
_HEATER_OFF_DELAY_US = 1_000
_SERIAL_NUMBER_DELAY_US = 1_000


class Sgp40:
    """An SGP40 sensor reached over an I2C bus."""

    def __init__(self, bus: I2cBus, address: int = SGP40_I2C_ADDRESS) -> None:
        self.bus = bus
        self.address = address
        self._i2c = SensirionI2c(bus)

    def _command(self, frame: Frame, delay_us: int) -> None:
        self._i2c.write_data(self.address, frame)
        self.bus.sleep_usec(delay_us)

    def measure_raw_signal(
        self,
        relative_humidity: int = DEFAULT_RELATIVE_HUMIDITY,
        temperature: int = DEFAULT_TEMPERATURE,
    ) -> int:
        """Start or continue a VOC measurement and return the raw SRAW_VOC ticks.

        ``relative_humidity`` is in ticks (%RH * 65535 / 100) and
        ``temperature`` in ticks ((degC + 45) * 65535 / 175); the defaults
        leave humidity compensation disabled.
        """
        frame = (
            Frame()
            .add_command(_CMD_MEASURE_RAW_SIGNAL)
            .add_uint16(relative_humidity)
            .add_uint16(temperature)
        )
        self._command(frame, _MEASURE_DELAY_US)
        return bytes_to_uint16(self._i2c.read_data(self.address, 2))

    def execute_self_test(self) -> int:
        """Run the built-in self test; 0xD400 means passed, 0x4B00 failed."""
        self._command(Frame().add_command(_CMD_EXECUTE_SELF_TEST), _SELF_TEST_DELAY_US)
        return bytes_to_uint16(self._i2c.read_data(self.address, 2))

    def turn_heater_off(self) -> None:
        """Turn the hotplate off and put the sensor into idle mode."""
        self._command(Frame().add_command(_CMD_TURN_HEATER_OFF), _HEATER_OFF_DELAY_US)

    def get_serial_number(self) -> tuple[int, int, int]:
        """Return the 48-bit serial number as three 16-bit words, MSB word first."""
        self._command(Frame().add_command(_CMD_GET_SERIAL_NUMBER), _SERIAL_NUMBER_DELAY_US)
        data = self._i2c.read_data(self.address, 6)
        return (
            bytes_to_uint16(data[0:2]),
            bytes_to_uint16(data[2:4]),
            bytes_to_uint16(data[4:6]),
        )