import re

import pytest

from crckit.precalc import PrecalcError, generate_table, main, render_table, write_table
from crckit.tables import make_crc32_table, make_crc64_table

_ENTRY = re.compile(r"0x([0-9A-F]+)u")


def _parse(text):
    body = text.split("{", 1)[1]
    return tuple(int(m, 16) for m in _ENTRY.findall(body))


def test_generate_table_matches_tables_module():
    assert generate_table("--crc32") == make_crc32_table()
    assert generate_table("crc64") == make_crc64_table()


def test_generate_unknown_kind():
    with pytest.raises(PrecalcError) as info:
        generate_table("--crc16")
    assert info.value.exit_code == 3


@pytest.mark.parametrize("kind, table", [("--crc32", make_crc32_table), ("--crc64", make_crc64_table)])
def test_render_round_trip(kind, table):
    text = render_table(kind, "tab/out.inc")
    assert _parse(text) == table()
    assert " * File:    tab/out.inc\n" in text
    assert text.endswith("};\n\n")


def test_render_crc32_layout():
    text = render_table("--crc32", "gentab32.inc")
    assert "const uint32_t crc_tab32[256] = {\n" in text
    assert "\t0x00000000ul,\n" in text
    lines = [line for line in text.splitlines() if line.startswith("\t0x")]
    assert len(lines) == 256
    assert all(line.endswith("ul,") for line in lines[:-1])
    assert lines[-1].endswith("ul")


def test_render_crc64_layout():
    text = render_table("--crc64", "gentab64.inc")
    assert "const uint64_t crc_tab64[256] = {\n" in text
    assert "\t0x0000000000000000ull,\n" in text
    lines = [line for line in text.splitlines() if line.startswith("\t0x")]
    assert len(lines) == 256
    assert all(len(line) == len("\t0x") + 16 + len("ull,") for line in lines[:-1])


def test_write_table(tmp_path):
    target = tmp_path / "gentab64.inc"
    write_table("--crc64", target)
    assert _parse(target.read_text()) == make_crc64_table()


def test_main_writes_file(tmp_path):
    target = tmp_path / "gentab32.inc"
    assert main(["--crc32", str(target)]) == 0
    assert _parse(target.read_text()) == make_crc32_table()


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_unknown_type(tmp_path, capsys):
    target = tmp_path / "x.inc"
    assert main(["--crc7", str(target)]) == 3
    assert "Unknown table type" in capsys.readouterr().err
    assert not target.exists()


def test_main_unwritable_path(tmp_path, capsys):
    target = tmp_path / "missing" / "x.inc"
    assert main(["--crc32", str(target)]) == 0
    assert "cannot open" in capsys.readouterr().err