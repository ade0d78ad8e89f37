"""8 bit CRC as used by the SHT1x and SHT7x humidity sensors."""

from collections.abc import Iterable

from crckit.constants import CRC_START_8, MASK_8

# Generator polynomial x^8 + x^5 + x^4 + 1, processed most significant bit first.
_SHT75_POLY = 0x31


def _build_table() -> tuple[int, ...]:
    def entry(value: int) -> int:
        for _ in range(8):
            if value & 0x80:
                value = ((value << 1) ^ _SHT75_POLY) & MASK_8
            else:
                value = (value << 1) & MASK_8
        return value

    return tuple(entry(index) for index in range(256))


_SHT75_TABLE = _build_table()


def _as_bytes(data) -> Iterable[int]:
    return bytes(memoryview(data))


def update_crc_8(crc: int, byte: int) -> int:
    """Return the CRC-8 after feeding one more byte."""
    return _SHT75_TABLE[(byte ^ crc) & MASK_8]


def crc_8(data) -> int:
    """Return the SHT75 CRC-8 of a bytes-like object."""
    crc = CRC_START_8
    for byte in _as_bytes(data):
        crc = _SHT75_TABLE[byte ^ crc]
    return crc