from __future__ import annotations

import math
import re

STANDARD_SIZES = (12, 16, 20, 24, 28, 32, 36, 48, 64)
FALLBACK_STANDARD_SIZE = 24

_SIZE_PREFIX = re.compile(r"^(s|l|small|large|mini|huge|m|xl|xs|xxs|xxl|3xl|4xl|5xl)[_-]", re.IGNORECASE)
_S_L_TOKEN = re.compile(r"[-_][sl](?=[-_]|$)", re.IGNORECASE)
_PX_SUFFIX = re.compile(r"-\d+px$")


def nearest_standard_size(px: float) -> int:
    if not isinstance(px, (int, float)) or not math.isfinite(px) or px <= 0:
        return FALLBACK_STANDARD_SIZE
    best = STANDARD_SIZES[0]
    for s in STANDARD_SIZES:
        if abs(px - s) < abs(px - best):
            best = s
    return best


def safe_name(name: str, keep_spaces: bool = False) -> str:
    """Figma layer name -> lowercase dash-separated file-safe name."""
    n = name.strip()
    n = re.sub(r"([a-z])([A-Z])", r"\1-\2", n)
    if keep_spaces:
        n = re.sub(r"\s+", " ", n)
        n = re.sub(r"[^a-zA-Z0-9 -]", "-", n)
    else:
        n = re.sub(r"[\s_]+", "-", n)
        n = re.sub(r"[^a-zA-Z0-9-]", "-", n)
    n = re.sub(r"-+", "-", n)
    n = n.strip("- ").lower()
    return n or "icon"


def icon_file_stem(name: str, keep_spaces: bool = False) -> str:
    """Drop size prefixes ("s-", "xl_") and stray "-s"/"-l" tokens from a layer name."""
    base = safe_name(name, keep_spaces)
    cleaned = _SIZE_PREFIX.sub("", base).strip()
    cleaned = _S_L_TOKEN.sub("-", cleaned)
    return safe_name(cleaned, keep_spaces) or "icon"


def icon_file_name(name: str, width: float, keep_spaces: bool = False) -> str:
    stem = icon_file_stem(name, keep_spaces)
    if _PX_SUFFIX.search(stem):
        return f"{stem}.svg"
    return f"{stem}-{nearest_standard_size(width)}px.svg"
