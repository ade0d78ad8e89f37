"""Reflected CRC-32 (polynomial 0xEDB88320), as used by zip and Ethernet."""

from crckit.constants import CRC_START_32, MASK_32
from crckit.tables import make_crc32_table


def update_crc_32(crc: int, byte: int) -> int:
    """Return the raw CRC-32 register after feeding one more byte.

    The register is not inverted; XOR the final value with 0xFFFFFFFF.
    """
    crc &= MASK_32
    return (crc >> 8) ^ make_crc32_table()[(crc ^ byte) & 0xFF]


def crc_32(data) -> int:
    """Return the CRC-32 of a bytes-like object."""
    table = make_crc32_table()
    crc = CRC_START_32
    for byte in bytes(memoryview(data)):
        crc = (crc >> 8) ^ table[(crc ^ byte) & 0xFF]
    return crc ^ MASK_32