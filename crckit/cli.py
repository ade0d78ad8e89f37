"""Print several CRC values of files, or of ASCII or hex input from stdin."""

import sys
from dataclasses import dataclass

from crckit.ccitt import crc_ccitt_1d0f, crc_ccitt_ffff, crc_xmodem
from crckit.crc16 import crc_16, crc_modbus
from crckit.crc32 import crc_32
from crckit.dnp import crc_dnp
from crckit.kermit import crc_kermit
from crckit.sick import crc_sick

_MAX_LINE = 2046
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_USAGE = (
    "Usage: crckit [-a|-x] file1 ...\n\n"
    "    -a Program asks for ASCII input. Following parameters ignored.\n"
    "    -x Program asks for hexadecimal input. Following parameters ignored.\n"
    "       All other parameters are treated like filenames. The CRC values\n"
    "       for each separate file will be calculated.\n"
)


@dataclass(frozen=True)
class CrcReport:
    """The set of CRC values reported for one input."""

    crc16: int
    modbus: int
    sick: int
    ccitt_0000: int
    ccitt_ffff: int
    ccitt_1d0f: int
    kermit: int
    dnp: int
    crc32: int

    @classmethod
    def from_bytes(cls, data) -> "CrcReport":
        """Compute every reported CRC of a bytes-like object."""
        data = bytes(data)
        return cls(
            crc16=crc_16(data),
            modbus=crc_modbus(data),
            sick=crc_sick(data),
            ccitt_0000=crc_xmodem(data),
            ccitt_ffff=crc_ccitt_ffff(data),
            ccitt_1d0f=crc_ccitt_1d0f(data),
            kermit=crc_kermit(data),
            dnp=crc_dnp(data),
            crc32=crc_32(data),
        )

    def format(self, label: str) -> str:
        """Return the report text, headed by ``label``."""
        rows = [
            ("CRC16", self.crc16),
            ("CRC16 (Modbus)", self.modbus),
            ("CRC16 (Sick)", self.sick),
            ("CRC-CCITT (0x0000)", self.ccitt_0000),
            ("CRC-CCITT (0xffff)", self.ccitt_ffff),
            ("CRC-CCITT (0x1d0f)", self.ccitt_1d0f),
            ("CRC-CCITT (Kermit)", self.kermit),
            ("CRC-DNP", self.dnp),
        ]
        lines = [f"{label} :"]
        lines.extend(f"{name:<18} = 0x{value:04X}      /  {value}" for name, value in rows)
        lines.append(f"{'CRC32':<18} = 0x{self.crc32:08X}  /  {self.crc32}")
        return "\n".join(lines) + "\n"


def _first_line(text: str) -> str:
    text = text[:_MAX_LINE]
    for stop in ("\r", "\n"):
        text = text.split(stop, 1)[0]
    return text


def parse_ascii_input(text: str) -> bytes:
    """Return the bytes of the first line of ``text``, without its line end."""
    return _first_line(text).encode("utf-8")


def parse_hex_input(text: str) -> bytes:
    """Return the bytes spelled by the hex digits on the first line of ``text``.

    Characters that are not hex digits are ignored. An odd trailing digit
    becomes the high nibble of a last byte.
    """
    digits = "".join(ch for ch in _first_line(text) if ch in _HEX_DIGITS)
    if len(digits) % 2:
        digits += "0"
    return bytes.fromhex(digits)


def _read_input() -> str:
    print("Input: ", end="", flush=True)
    line = sys.stdin.readline()
    if not line:
        print("Error: no input", file=sys.stderr)
    return line


def main(argv=None) -> int:
    """Command entry point."""
    args = sys.argv[1:] if argv is None else list(argv)
    print("\ncrckit: CRC algorithm sample program\n")

    if not args:
        print(_USAGE, end="")
        return 0

    mode = args[0]
    if mode in ("-a", "-A"):
        text = _first_line(_read_input())
        report = CrcReport.from_bytes(parse_ascii_input(text))
        print(report.format(f'"{text}"'), end="")
        return 0
    if mode in ("-x", "-X"):
        report = CrcReport.from_bytes(parse_hex_input(_read_input()))
        print(report.format('""'), end="")
        return 0

    for filename in args:
        try:
            with open(filename, "rb") as handle:
                data = handle.read()
        except OSError:
            print(f"{filename} : cannot open file")
            data = b""
        print(CrcReport.from_bytes(data).format(filename), end="")
    return 0