import pytest

from crckit.constants import CRC_START_DNP
from crckit.dnp import crc_dnp, finish_crc_dnp, update_crc_dnp

CASES = [
    (b"123456789", 0x82EA),
    (b"Lammert Bies", 0x4583),
    (b"", 0xFFFF),
    (b" ", 0x50D6),
]


@pytest.mark.parametrize("data, expected", CASES)
def test_crc_dnp_known_values(data, expected):
    assert crc_dnp(data) == expected


@pytest.mark.parametrize("data, expected", CASES)
def test_update_and_finish_agree_with_one_pass(data, expected):
    crc = CRC_START_DNP
    for byte in data:
        crc = update_crc_dnp(crc, byte)
    assert finish_crc_dnp(crc) == expected


def test_finish_crc_dnp_inverts_and_swaps():
    assert finish_crc_dnp(0x0000) == 0xFFFF
    assert finish_crc_dnp(0x1234) == 0xCBED
    assert finish_crc_dnp(0xFFFF) == 0x0000


def test_crc_dnp_rejects_text():
    with pytest.raises(TypeError):
        crc_dnp("123456789")