# sgp40-driver

A small driver for the SGP40 VOC gas sensor with no dependencies beyond
the standard library. It talks to the sensor through the Linux I2C
character device (`/dev/i2c-1` by default).

It covers the sensor's command set:

- measuring the raw VOC signal (`SRAW_VOC` ticks), with or without
  humidity compensation,
- running the built-in self test,
- turning the hotplate off,
- reading the 48-bit serial number.

Every data word the sensor sends is protected by a CRC-8 checksum
(polynomial `0x31`, initial value `0xFF`); a word that fails the check
raises `CrcError` instead of returning a bad value.

## Installation

```
pip install .
```

The process needs read and write access to the I2C device, which usually
means membership of the `i2c` group.

## Command line

```
sgp40-read
```

prints the sensor's serial number, then takes one raw VOC reading per
second, sixty times, with humidity compensation switched off. An error on
a single reading is printed and the loop carries on. If the device cannot
be opened, the command prints an error and exits with status 1.

Options:

- `--device PATH` – the I2C adapter device (default `/dev/i2c-1`)
- `--address N` – the sensor address; decimal or `0x` hex (default `0x59`)
- `--count N` – number of measurements (default `60`)
- `--interval SECONDS` – pause before each measurement (default `1.0`)

## Library use

```python
from sgp40_driver.hal import LinuxI2cBus
from sgp40_driver.sgp40 import Sgp40

with LinuxI2cBus("/dev/i2c-1") as bus:
    sensor = Sgp40(bus)            # address defaults to 0x59
    print(sensor.get_serial_number())   # three 16-bit words, MSB word first
    print(sensor.measure_raw_signal())  # compensation disabled
```

`measure_raw_signal(relative_humidity, temperature)` defaults to `0x8000`
(50 %RH) and `0x6666` (25 degC), which leave humidity compensation
disabled. To enable it, pass both values in ticks:

- humidity: `ticks = %RH * 65535 / 100`
- temperature: `ticks = (degC + 45) * 65535 / 175`

`execute_self_test()` returns `0xD400` when every test passed and `0x4B00`
when one or more failed. `turn_heater_off()` stops the measurement and
puts the sensor into idle mode.

`Sgp40` accepts any bus object with `read(address, count)`,
`write(address, data)` and `sleep_usec(useconds)`, so a stand-in bus can
be used for testing.

### Lower layers

`sgp40_driver.i2c` holds the framing used on the wire:

- `generate_crc`, `check_crc` and `strip_crc` for the per-word checksums,
- `fill_cmd_send_buf(cmd, args)` to build a command with argument words,
- `Frame`, a builder whose `add_command`, `add_uint16`, `add_int16`,
  `add_uint32`, `add_int32`, `add_float` and `add_bytes` methods chain and
  insert a checksum after every data word,
- `SensirionI2c`, which sends commands and reads checked words over a bus
  (`write_cmd`, `write_cmd_with_args`, `read_cmd`, `delayed_read_cmd`,
  `read_words`, `read_words_as_bytes`, `write_data`, `read_data`,
  `general_call_reset`).

`sgp40_driver.common` has the big-endian conversions between bytes and
16/32-bit integers or single precision floats.

Bus failures raise `I2cBusError` (an `OSError`); a payload whose length is
not a whole number of 16-bit words raises `ByteCountError`.

## Limits

Only the Linux i2c-dev interface is supported as a bus. The package
returns raw `SRAW_VOC` ticks; it does not compute a VOC index from them.

## Tests

```
pip install ".[test]"
pytest
```