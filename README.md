# crckit

Checksum routines for byte strings, using only the standard library.
Every one-pass function takes any bytes-like object and returns an `int`.

| Function | Algorithm |
| --- | --- |
| `crckit.crc8.crc_8` | 8-bit CRC as used by SHT1x/SHT7x sensors |
| `crckit.crc16.crc_16` | CRC-16 (poly 0xA001, start 0x0000) |
| `crckit.crc16.crc_modbus` | CRC-16 Modbus (start 0xFFFF) |
| `crckit.ccitt.crc_xmodem` | CRC-CCITT, start 0x0000 |
| `crckit.ccitt.crc_ccitt_1d0f` | CRC-CCITT, start 0x1D0F |
| `crckit.ccitt.crc_ccitt_ffff` | CRC-CCITT, start 0xFFFF |
| `crckit.ccitt.crc_ccitt` | CRC-CCITT from any start value |
| `crckit.kermit.crc_kermit` | CRC Kermit |
| `crckit.dnp.crc_dnp` | CRC used in DNP messages |
| `crckit.sick.crc_sick` | CRC used by Sick devices |
| `crckit.crc32.crc_32` | The common 32-bit CRC |
| `crckit.crc64.crc_64_ecma` | CRC-64 ECMA |
| `crckit.crc64.crc_64_we` | CRC-64 WE |
| `crckit.nmea.checksum_nmea` | NMEA sentence checksum (returns a string) |

## Installation

```
pip install crckit
```

## Usage

```python
from crckit.crc32 import crc_32
from crckit.crc16 import crc_modbus
from crckit.ccitt import crc_ccitt
from crckit.nmea import checksum_nmea

crc_32(b"123456789")           # 0xCBF43926
crc_modbus(b"123456789")       # 0x4B37
crc_ccitt(b"123456789", 0x1D0F)  # 0xE5CC
checksum_nmea("$PGRMZ,51,f*")  # "30"
```

`checksum_nmea` accepts a `str` or bytes. It skips a leading `$` and
stops at a carriage return, a line feed, a `*` or the end of the input;
it does not validate the sentence.

### Byte at a time

Each algorithm has an update function that feeds one byte into a
running value: `update_crc_8`, `update_crc_16`, `update_crc_ccitt`,
`update_crc_kermit`, `update_crc_dnp`, `update_crc_sick`,
`update_crc_32` and `update_crc_64`. Start from the algorithm's start
value (the constants are in `crckit.constants`):

```python
from crckit.crc32 import update_crc_32

crc = 0xFFFFFFFF
for byte in b"123456789":
    crc = update_crc_32(crc, byte)
crc ^= 0xFFFFFFFF           # 0xCBF43926
```

Some algorithms need a final step after the last byte:

- CRC-32 and CRC-64 WE: XOR the register with all ones.
- DNP: `crckit.dnp.finish_crc_dnp` inverts and byte-swaps the register.
- Kermit: `crckit.kermit.finish_crc_kermit` byte-swaps it.
- Sick: `crckit.sick.finish_crc_sick` byte-swaps it. `update_crc_sick`
  also takes the previous byte (0 for the first).

The CRC-32 and CRC-64 lookup tables are available from
`crckit.tables.make_crc32_table()` and `crckit.tables.make_crc64_table()`.

## Command line

Print the CRC-16, Modbus, Sick, the three CCITT variants, Kermit, DNP
and CRC-32 values of one or more files:

```
crckit file1.bin file2.bin
```

A file that cannot be opened is reported, followed by the values for
empty input. With `-a` the program reads one line of text from standard
input and checks that instead; with `-x` it reads a line of hexadecimal
digits (other characters are ignored) and checks the bytes they spell.
Run `crckit` with no arguments for a short usage text.

The CRC-32 and CRC-64 lookup tables can be written out as C include
files:

```
crckit-precalc --crc32 gentab32.inc
crckit-precalc --crc64 gentab64.inc
```

From Python, `crckit.precalc.render_table` returns the same text and
`crckit.precalc.write_table` writes it; an unknown table kind raises
`crckit.precalc.PrecalcError`.

## Running the tests

```
pip install crckit[test]
pytest
```