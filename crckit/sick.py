"""CRC used in communication with Sick electronic devices."""

from crckit.constants import CRC_POLY_SICK, CRC_START_SICK, MASK_16


def _step(crc: int, byte: int, prev_byte: int) -> int:
    if crc & 0x8000:
        crc = ((crc << 1) ^ CRC_POLY_SICK) & MASK_16
    else:
        crc = (crc << 1) & MASK_16
    return crc ^ ((byte & 0xFF) | ((prev_byte & 0xFF) << 8))


def update_crc_sick(crc: int, byte: int, prev_byte: int) -> int:
    """Return the raw Sick CRC register after feeding one more byte.

    ``prev_byte`` is the byte fed before this one, or 0 for the first byte.
    """
    return _step(crc & MASK_16, byte, prev_byte)


def finish_crc_sick(crc: int) -> int:
    """Turn a raw Sick register into the final CRC by swapping its bytes."""
    crc &= MASK_16
    return ((crc & 0xFF00) >> 8) | ((crc & 0x00FF) << 8)


def crc_sick(data) -> int:
    """Return the Sick CRC of a bytes-like object."""
    crc = CRC_START_SICK
    prev = 0
    for byte in bytes(memoryview(data)):
        crc = _step(crc, byte, prev)
        prev = byte
    return finish_crc_sick(crc)