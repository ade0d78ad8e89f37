import pytest

from crckit.constants import CRC_START_SICK
from crckit.sick import crc_sick, finish_crc_sick, update_crc_sick

CASES = [
    (b"123456789", 0x56A6),
    (b"Lammert Bies", 0x1108),
    (b"", 0x0000),
    (b" ", 0x2000),
]


@pytest.mark.parametrize("data, expected", CASES)
def test_crc_sick_known_values(data, expected):
    assert crc_sick(data) == expected


@pytest.mark.parametrize("data, expected", CASES)
def test_update_and_finish_agree_with_one_pass(data, expected):
    crc = CRC_START_SICK
    prev = 0
    for byte in data:
        crc = update_crc_sick(crc, byte, prev)
        prev = byte
    assert finish_crc_sick(crc) == expected


def test_update_crc_sick_single_byte():
    assert update_crc_sick(0x0000, 0x20, 0x00) == 0x0020


def test_update_crc_sick_uses_previous_byte():
    assert update_crc_sick(0x0000, 0x00, 0x12) == 0x1200


def test_update_crc_sick_applies_polynomial_on_high_bit():
    assert update_crc_sick(0x8000, 0x00, 0x00) == 0x8005


def test_finish_crc_sick_swaps_bytes():
    assert finish_crc_sick(0x0020) == 0x2000


def test_crc_sick_rejects_text():
    with pytest.raises(TypeError):
        crc_sick("123456789")