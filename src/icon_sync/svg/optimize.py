from __future__ import annotations

import re
from typing import Callable, Optional

from icon_sync.codegen.svg_transform import strip_bom

Optimizer = Callable[[str], str]


def minify_svg(svg: str) -> str:
    """
    Conservative text-level cleanup: comments, <metadata>, editor whitespace.
    viewBox, dimensions and path data are left untouched.
    """
    out = strip_bom(svg)
    out = re.sub(r"<!--.*?-->", "", out, flags=re.DOTALL)
    out = re.sub(r"<metadata\b.*?</metadata>", "", out, flags=re.DOTALL | re.IGNORECASE)
    out = re.sub(r">\s+<", "><", out)
    out = re.sub(r"[ \t]{2,}", " ", out)
    return out.strip()


def apply_optimizer(svg: str, optimizer: Optional[Optimizer], *, label: str = "") -> str:
    """Run the optimizer; keep the unoptimized text when there is none or it fails."""
    if optimizer is None:
        return svg
    try:
        out = optimizer(svg)
    except Exception as e:
        print(f"[OPTIMIZE FAIL] {label} -> {e}")
        return svg
    if not isinstance(out, str) or not out.strip():
        print(f"[OPTIMIZE FAIL] {label} -> empty result, keeping original")
        return svg
    return out
