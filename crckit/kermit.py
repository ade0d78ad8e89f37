"""CRC used by the Kermit protocol (reflected polynomial 0x8408)."""

from functools import cache

from crckit.constants import CRC_POLY_KERMIT, CRC_START_KERMIT, MASK_16


@cache
def _table() -> tuple[int, ...]:
    entries = []
    for i in range(256):
        crc = 0
        c = i
        for _ in range(8):
            crc = (crc >> 1) ^ CRC_POLY_KERMIT if (crc ^ c) & 1 else crc >> 1
            c >>= 1
        entries.append(crc)
    return tuple(entries)


def update_crc_kermit(crc: int, byte: int) -> int:
    """Return the raw Kermit CRC register after feeding one more byte."""
    crc &= MASK_16
    return (crc >> 8) ^ _table()[(crc ^ byte) & 0xFF]


def finish_crc_kermit(crc: int) -> int:
    """Turn a raw Kermit register into the final CRC by swapping its bytes."""
    crc &= MASK_16
    return ((crc & 0xFF00) >> 8) | ((crc & 0x00FF) << 8)


def crc_kermit(data) -> int:
    """Return the Kermit CRC of a bytes-like object."""
    table = _table()
    crc = CRC_START_KERMIT
    for byte in bytes(memoryview(data)):
        crc = (crc >> 8) ^ table[(crc ^ byte) & 0xFF]
    return finish_crc_kermit(crc)