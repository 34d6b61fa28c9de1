from __future__ import annotations

import re
from pathlib import Path

from icon_sync.common.hashing import hash_file
from icon_sync.manifest.models import ManifestEntry, create_manifest_entry

DEFAULT_DIMENSION = 16

_VIEWBOX_RE = re.compile(r"""viewBox=["']([^"']*)["']""")
_WIDTH_RE = re.compile(r"""\swidth=["']([^"']*)["']""")
_HEIGHT_RE = re.compile(r"""\sheight=["']([^"']*)["']""")


def _leading_int(s: str) -> int:
    m = re.match(r"\s*(\d+)", s)
    return int(m.group(1)) if m else 0


def _as_dimension(x: float) -> int | float:
    return int(x) if float(x).is_integer() else x


def read_svg_dimensions(svg: str) -> tuple[int | float, int | float]:
    """viewBox first, then width/height attributes, then 16x16."""
    m = _VIEWBOX_RE.search(svg)
    if m:
        try:
            vals = [float(v) for v in re.split(r"[\s,]+", m.group(1).strip()) if v]
        except ValueError:
            vals = []
        if len(vals) >= 4:
            return _as_dimension(vals[2]), _as_dimension(vals[3])

    wm, hm = _WIDTH_RE.search(svg), _HEIGHT_RE.search(svg)
    if wm and hm:
        return (
            _leading_int(wm.group(1)) or DEFAULT_DIMENSION,
            _leading_int(hm.group(1)) or DEFAULT_DIMENSION,
        )
    return DEFAULT_DIMENSION, DEFAULT_DIMENSION


def scan_icons_dir(icons_dir: str | Path) -> list[ManifestEntry]:
    """Build ledger entries from the .svg files of a directory (id = file name), sorted by name."""
    root = Path(icons_dir)
    if not root.is_dir():
        return []

    out: list[ManifestEntry] = []
    for p in sorted(root.iterdir(), key=lambda x: x.name):
        if not p.is_file() or p.suffix.lower() != ".svg":
            continue
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"[SCAN FAIL] {p} -> {e}")
            continue
        width, height = read_svg_dimensions(text)
        out.append(create_manifest_entry(p.name, p.stem, p.name, width, height, hash_file(p)))
    return out
