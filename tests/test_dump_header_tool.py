import importlib.util
from pathlib import Path

import pytest

TOOL = Path(__file__).parent.parent / "tools" / "dump_header.py"


@pytest.fixture(scope="module")
def tool():
    spec = importlib.util.spec_from_file_location("dump_header", TOOL)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_dumps_after_header(tool, tmp_path, capsys):
    p = tmp_path / "puts.mrb"
    p.write_bytes(b"RITE" + bytes(16) + b"\xab")
    assert tool.main(p) == 0
    out = capsys.readouterr().out
    assert out.startswith("header: 52 49 54 45 00")
    assert "position: 0x00000014 (20/21)" in out


def test_short_file(tool, tmp_path, capsys):
    p = tmp_path / "short.bin"
    p.write_bytes(b"RITE")
    assert tool.main(p) == 1
    assert "truncated header" in capsys.readouterr().err


def test_missing_file(tool, tmp_path, capsys):
    assert tool.main(tmp_path / "missing.mrb") == 1
    assert capsys.readouterr().err.startswith("error:")
