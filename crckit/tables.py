"""Lookup tables for the 32 and 64 bit CRC calculations."""

from functools import cache

from crckit.constants import CRC_POLY_32, CRC_POLY_64, MASK_64

_TOP_BIT_64 = 0x8000000000000000


def _crc32_entry(index: int) -> int:
    crc = index
    for _ in range(8):
        crc = (crc >> 1) ^ CRC_POLY_32 if crc & 1 else crc >> 1
    return crc


def _crc64_entry(index: int) -> int:
    crc = 0
    c = index << 56
    for _ in range(8):
        if (crc ^ c) & _TOP_BIT_64:
            crc = ((crc << 1) ^ CRC_POLY_64) & MASK_64
        else:
            crc = (crc << 1) & MASK_64
        c = (c << 1) & MASK_64
    return crc


@cache
def make_crc32_table() -> tuple[int, ...]:
    """Return the 256 entry lookup table for the reflected CRC-32."""
    return tuple(_crc32_entry(i) for i in range(256))


@cache
def make_crc64_table() -> tuple[int, ...]:
    """Return the 256 entry lookup table for the ECMA-182 CRC-64."""
    return tuple(_crc64_entry(i) for i in range(256))