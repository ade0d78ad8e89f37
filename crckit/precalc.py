"""Generate the CRC-32 and CRC-64 lookup tables as C include files."""

import sys
from collections.abc import Callable
from dataclasses import dataclass

from crckit.tables import make_crc32_table, make_crc64_table


class PrecalcError(Exception):
    """Raised when a table cannot be generated; carries the exit code."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True)
class _TableSpec:
    factory: Callable[[], tuple[int, ...]]
    name: str
    bits: int
    suffix: str


_SPECS = {
    "crc32": _TableSpec(make_crc32_table, "crc_tab32", 32, "ul"),
    "crc64": _TableSpec(make_crc64_table, "crc_tab64", 64, "ull"),
}


def _spec(kind: str) -> _TableSpec:
    key = kind.removeprefix("--") if isinstance(kind, str) else kind
    try:
        return _SPECS[key]
    except (KeyError, TypeError):
        raise PrecalcError(f'Unknown table type "{kind}" passed', 3) from None


def generate_table(kind: str) -> tuple[int, ...]:
    """Return the lookup table for ``crc32`` or ``crc64`` (``--`` prefix allowed)."""
    return _spec(kind).factory()


def render_table(kind: str, filename: str) -> str:
    """Return the text of the include file holding the requested table."""
    spec = _spec(kind)
    width = spec.bits // 4
    entries = ",\n".join(
        f"\t0x{value:0{width}X}{spec.suffix}" for value in spec.factory()
    )
    header = (
        "/*\n"
        " * Library: crckit\n"
        f" * File:    {filename}\n"
        " * Author:  Auto generated by the precalc program\n"
        " *\n"
        " * PLEASE DO NOT CHANGE THIS FILE!\n"
        " * ===============================\n"
        " * This file was automatically generated and will be overwritten whenever the\n"
        " * library is recompiled. All manually added changes will be lost in that case.\n"
        " */\n\n"
    )
    return (
        f"{header}const uint{spec.bits}_t {spec.name}[256] = {{\n"
        f"{entries}\n}};\n\n"
    )


def write_table(kind: str, path) -> None:
    """Write the include file for the requested table to ``path``."""
    text = render_table(kind, str(path))
    with open(path, "w", encoding="ascii") as handle:
        handle.write(text)


def main(argv=None) -> int:
    """Command entry point: ``precalc --crc32|--crc64 file``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("\nusage: precalc --type file", file=sys.stderr)
        print("       where --type is any of --crc32, --crc64\n", file=sys.stderr)
        return 1

    kind, filename = args
    if not kind.startswith("--"):
        print(f'\nprecalc: Unknown table type "{kind}" passed\n', file=sys.stderr)
        return 3
    try:
        write_table(kind, filename)
    except PrecalcError as exc:
        print(f"\nprecalc: {exc}\n", file=sys.stderr)
        return exc.exit_code
    except OSError:
        print(f'\nprecalc: cannot open "{filename}" for writing\n', file=sys.stderr)
        return 0
    return 0