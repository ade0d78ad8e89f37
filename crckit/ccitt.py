"""CRC-CCITT (polynomial 0x1021) with the XModem, 0x1D0F and 0xFFFF starts."""

from functools import cache

from crckit.constants import (
    CRC_POLY_CCITT,
    CRC_START_CCITT_1D0F,
    CRC_START_CCITT_FFFF,
    CRC_START_XMODEM,
    MASK_16,
)


@cache
def _table() -> tuple[int, ...]:
    entries = []
    for i in range(256):
        crc = 0
        c = i << 8
        for _ in range(8):
            if (crc ^ c) & 0x8000:
                crc = ((crc << 1) ^ CRC_POLY_CCITT) & MASK_16
            else:
                crc = (crc << 1) & MASK_16
            c = (c << 1) & MASK_16
        entries.append(crc)
    return tuple(entries)


def update_crc_ccitt(crc: int, byte: int) -> int:
    """Return the CRC-CCITT after feeding one more byte."""
    crc &= MASK_16
    return ((crc << 8) & MASK_16) ^ _table()[((crc >> 8) ^ byte) & 0xFF]


def crc_ccitt(data, start: int) -> int:
    """Return the CRC-CCITT of a bytes-like object from a given start value."""
    table = _table()
    crc = start & MASK_16
    for byte in bytes(memoryview(data)):
        crc = ((crc << 8) & MASK_16) ^ table[((crc >> 8) ^ byte) & 0xFF]
    return crc


def crc_xmodem(data) -> int:
    """Return the XModem CRC (CCITT, start 0x0000)."""
    return crc_ccitt(data, CRC_START_XMODEM)


def crc_ccitt_1d0f(data) -> int:
    """Return the CCITT CRC with start value 0x1D0F."""
    return crc_ccitt(data, CRC_START_CCITT_1D0F)


def crc_ccitt_ffff(data) -> int:
    """Return the CCITT CRC with start value 0xFFFF."""
    return crc_ccitt(data, CRC_START_CCITT_FFFF)