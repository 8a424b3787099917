"""Tests for the command-line entry point."""

from __future__ import annotations

from rasterrect.cli import main
from tests.conftest import png_bytes


def test_writes_svg_file(tmp_path):
    src = tmp_path / "in.png"
    src.write_bytes(png_bytes(5, 2))
    out = tmp_path / "out.svg"

    assert main([str(src), "-o", str(out)]) == 0
    svg = out.read_text(encoding="utf-8")
    assert svg.startswith("<?xml")
    assert 'viewBox="0 0 5 2"' in svg
    assert svg.count("<rect") == 2


def test_writes_stdout(tmp_path, capsys):
    src = tmp_path / "in.png"
    src.write_bytes(png_bytes(2, 1))

    assert main([str(src), "--stride", "1"]) == 0
    assert 'fill="rgba(254,0,0,1)"' in capsys.readouterr().out


def test_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "nope.png")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_undecodable_input(tmp_path, capsys):
    src = tmp_path / "bad.png"
    src.write_bytes(b"garbage")
    assert main([str(src)]) == 1
    assert "Could not decode" in capsys.readouterr().err
