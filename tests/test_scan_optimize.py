from __future__ import annotations

from pathlib import Path

from icon_sync.common.hashing import hash_content
from icon_sync.svg.optimize import apply_optimizer, minify_svg
from icon_sync.svg.scan import read_svg_dimensions, scan_icons_dir


def test_read_svg_dimensions():
    assert read_svg_dimensions('<svg viewBox="0 0 20 20" width="40" height="40"/>') == (20, 20)
    assert read_svg_dimensions('<svg viewBox="2 2 14 14"/>') == (14, 14)
    assert read_svg_dimensions('<svg width="24px" height="12"/>') == (24, 12)
    assert read_svg_dimensions("<svg/>") == (16, 16)


def test_scan_icons_dir(tmp_path: Path):
    (tmp_path / "b-16px.svg").write_text('<svg viewBox="0 0 16 16"/>', encoding="utf-8")
    (tmp_path / "a-12px.svg").write_text('<svg viewBox="0 0 12 12"/>', encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignore me", encoding="utf-8")
    (tmp_path / "nested.svg").mkdir()

    entries = scan_icons_dir(tmp_path)

    assert [e.id for e in entries] == ["a-12px.svg", "b-16px.svg"]
    a = entries[0]
    assert (a.name, a.file_name, a.width, a.height) == ("a-12px", "a-12px.svg", 12, 12)
    assert a.hash == hash_content('<svg viewBox="0 0 12 12"/>')


def test_scan_missing_dir(tmp_path: Path):
    assert scan_icons_dir(tmp_path / "nope") == []


def test_minify_svg():
    raw = "\ufeff<svg>\n  <!-- by editor -->\n  <metadata>x</metadata>\n  <path d=\"M0 0h16\"/>\n</svg>\n"
    assert minify_svg(raw) == '<svg><path d="M0 0h16"/></svg>'


def test_apply_optimizer_falls_back(capsys):
    def boom(_: str) -> str:
        raise RuntimeError("bad svg")

    assert apply_optimizer("<svg/>", None) == "<svg/>"
    assert apply_optimizer("<svg/>", boom, label="bell") == "<svg/>"
    assert apply_optimizer("<svg/>", lambda s: "   ", label="bell") == "<svg/>"
    assert apply_optimizer("<svg> </svg>", minify_svg) == "<svg></svg>"

    out = capsys.readouterr().out
    assert "[OPTIMIZE FAIL] bell -> bad svg" in out
    assert "[OPTIMIZE FAIL] bell -> empty result" in out
