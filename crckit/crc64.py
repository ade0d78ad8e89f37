"""64 bit CRCs using the ECMA-182 polynomial: CRC-64/ECMA and CRC-64/WE."""

from crckit.constants import CRC_START_64_ECMA, CRC_START_64_WE, MASK_64
from crckit.tables import make_crc64_table


def _run(data, crc: int) -> int:
    table = make_crc64_table()
    for byte in bytes(memoryview(data)):
        crc = ((crc << 8) & MASK_64) ^ table[((crc >> 56) ^ byte) & 0xFF]
    return crc


def update_crc_64(crc: int, byte: int) -> int:
    """Return the CRC-64 register after feeding one more byte."""
    crc &= MASK_64
    return ((crc << 8) & MASK_64) ^ make_crc64_table()[((crc >> 56) ^ byte) & 0xFF]


def crc_64_ecma(data) -> int:
    """Return the CRC-64/ECMA of a bytes-like object."""
    return _run(data, CRC_START_64_ECMA)


def crc_64_we(data) -> int:
    """Return the CRC-64/WE of a bytes-like object."""
    return _run(data, CRC_START_64_WE) ^ MASK_64