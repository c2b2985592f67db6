import pytest

from sgp40_driver.cli import main
from sgp40_driver.common import uint16_to_bytes
from sgp40_driver.i2c import generate_crc


def words(*values):
    out = bytearray()
    for value in values:
        word = uint16_to_bytes(value)
        out += word
        out.append(generate_crc(word))
    return bytes(out)


def device_image(serial, voc_values):
    """A regular file laid out so that each write lands before the reply it precedes."""
    image = bytearray(b"\x00\x00")  # serial number command
    image += words(*serial)
    for value in voc_values:
        image += b"\x00" * 8  # measurement frame
        image += words(value)
    return bytes(image)


def run(tmp_path, content, *extra):
    device = tmp_path / "i2c-dev"
    device.write_bytes(content)
    return main(["--device", str(device), "--interval", "0", *extra])


def test_prints_serial_and_measurements(tmp_path, capsys):
    status = run(tmp_path, device_image((0, 0, 42), [1234, 5678]), "--count", "2")
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Serial number: 42", "SRAW VOC: 1234", "SRAW VOC: 5678"]


def test_serial_number_combines_words(tmp_path, capsys):
    status = run(tmp_path, device_image((0, 1, 2), []), "--count", "0")
    assert status == 0
    assert capsys.readouterr().out.splitlines() == ["Serial number: 65538"]


def test_short_reads_are_reported_and_loop_continues(tmp_path, capsys):
    status = run(tmp_path, b"", "--count", "3")
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("Error executing get_serial_number():")
    assert all(line.startswith("Error executing measure_raw_signal():") for line in lines[1:])


def test_checksum_error_is_reported(tmp_path, capsys):
    image = bytearray(device_image((0, 0, 7), [99]))
    image[4] ^= 0xFF  # checksum of the first serial number word
    status = run(tmp_path, bytes(image), "--count", "1")
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Error executing get_serial_number():")
    assert "checksum" in lines[0]
    assert lines[1] == "SRAW VOC: 99"


def test_missing_device_fails(tmp_path, capsys):
    status = main(["--device", str(tmp_path / "absent"), "--count", "1", "--interval", "0"])
    assert status == 1
    captured = capsys.readouterr()
    assert "Error opening" in captured.err
    assert captured.out == ""


def test_negative_count_is_rejected(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--device", str(tmp_path / "absent"), "--count", "-1"])
    assert excinfo.value.code == 2