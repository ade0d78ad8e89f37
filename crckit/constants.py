"""Polynomials and start values for the supported CRC algorithms."""

CRC_POLY_16 = 0xA001
CRC_POLY_32 = 0xEDB88320
CRC_POLY_64 = 0x42F0E1EBA9EA3693
CRC_POLY_CCITT = 0x1021
CRC_POLY_DNP = 0xA6BC
CRC_POLY_KERMIT = 0x8408
CRC_POLY_SICK = 0x8005

CRC_START_8 = 0x00
CRC_START_16 = 0x0000
CRC_START_MODBUS = 0xFFFF
CRC_START_XMODEM = 0x0000
CRC_START_CCITT_1D0F = 0x1D0F
CRC_START_CCITT_FFFF = 0xFFFF
CRC_START_KERMIT = 0x0000
CRC_START_SICK = 0x0000
CRC_START_DNP = 0x0000
CRC_START_32 = 0xFFFFFFFF
CRC_START_64_ECMA = 0x0000000000000000
CRC_START_64_WE = 0xFFFFFFFFFFFFFFFF

MASK_8 = 0xFF
MASK_16 = 0xFFFF
MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF