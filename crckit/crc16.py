"""CRC-16 (polynomial 0xA001, reflected) and the Modbus variant."""

from functools import cache

from crckit.constants import CRC_POLY_16, CRC_START_16, CRC_START_MODBUS, MASK_16


@cache
def _table() -> tuple[int, ...]:
    entries = []
    for i in range(256):
        crc = 0
        c = i
        for _ in range(8):
            crc = (crc >> 1) ^ CRC_POLY_16 if (crc ^ c) & 1 else crc >> 1
            c >>= 1
        entries.append(crc)
    return tuple(entries)


def _run(data, crc: int) -> int:
    table = _table()
    for byte in bytes(memoryview(data)):
        crc = (crc >> 8) ^ table[(crc ^ byte) & 0xFF]
    return crc


def update_crc_16(crc: int, byte: int) -> int:
    """Return the CRC-16 after feeding one more byte."""
    crc &= MASK_16
    return (crc >> 8) ^ _table()[(crc ^ byte) & 0xFF]


def crc_16(data) -> int:
    """Return the CRC-16 of a bytes-like object, starting from 0x0000."""
    return _run(data, CRC_START_16)


def crc_modbus(data) -> int:
    """Return the Modbus CRC-16 of a bytes-like object, starting from 0xFFFF."""
    return _run(data, CRC_START_MODBUS)