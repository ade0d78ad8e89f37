import zlib

import pytest

from crckit.constants import CRC_START_32, MASK_32
from crckit.crc32 import crc_32, update_crc_32

CASES = [
    (b"123456789", 0xCBF43926),
    (b"Lammert Bies", 0x43C04CA6),
    (b"", 0x00000000),
    (b" ", 0xE96CCF45),
]


@pytest.mark.parametrize("data, expected", CASES)
def test_crc_32_known_values(data, expected):
    assert crc_32(data) == expected


@pytest.mark.parametrize("data", [b"123456789", b"Lammert Bies", b"\x00\xff" * 40])
def test_crc_32_matches_zlib(data):
    assert crc_32(data) == zlib.crc32(data)


def test_crc_32_accepts_bytearray_and_memoryview():
    assert crc_32(bytearray(b"123456789")) == 0xCBF43926
    assert crc_32(memoryview(b"123456789")) == 0xCBF43926


def test_crc_32_rejects_text():
    with pytest.raises(TypeError):
        crc_32("123456789")


@pytest.mark.parametrize("data, expected", CASES)
def test_update_crc_32_streaming_agrees(data, expected):
    crc = CRC_START_32
    for byte in data:
        crc = update_crc_32(crc, byte)
    assert crc ^ MASK_32 == expected


def test_update_crc_32_stays_in_range():
    assert 0 <= update_crc_32(0xFFFFFFFF, 0xFF) <= MASK_32