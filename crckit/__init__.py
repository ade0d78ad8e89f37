"""CRC and NMEA checksum routines for byte strings, with command-line tools."""

__version__ = "1.0.0"